# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

import pytest
from pydantic import ValidationError

from coreason_chronicle.levels import LogLevel
from coreason_chronicle.models import LogConfig, LogRecord


def test_config_defaults() -> None:
    """Only app_name is required; everything else takes its documented default."""
    config = LogConfig.model_validate_json('{"app_name": "svc"}')

    assert config.app_name == "svc"
    assert config.log_file == "default.log"
    assert config.log_to_file is True
    assert config.log_to_console is True
    assert config.minimum_level is LogLevel.INFO
    assert config.max_file_size_bytes == 10 * 1024 * 1024
    assert config.max_file_count == 5
    assert config.rotation_enabled is True
    assert config.file_output_colored is True


def test_config_full_payload() -> None:
    config = LogConfig.model_validate_json(
        """
        {
            "app_name": "svc",
            "log_file": "logs/svc.log",
            "log_to_file": false,
            "log_to_console": false,
            "minimum_level": "warn",
            "max_file_size_bytes": 100,
            "max_file_count": 2,
            "rotation_enabled": false,
            "file_output_colored": false
        }
        """
    )

    assert config.log_file == "logs/svc.log"
    assert config.log_to_file is False
    assert config.log_to_console is False
    assert config.minimum_level is LogLevel.WARN
    assert config.max_file_size_bytes == 100
    assert config.max_file_count == 2
    assert config.rotation_enabled is False
    assert config.file_output_colored is False


def test_config_accepts_plugin_abi_keys() -> None:
    config = LogConfig.model_validate_json(
        """
        {
            "app_name": "svc",
            "minimum_log_level": "Debug",
            "max_log_file_size": 2048,
            "max_log_file_count": 7,
            "enable_log_rotation": false,
            "log_to_file_colored": false
        }
        """
    )

    assert config.minimum_level is LogLevel.DEBUG
    assert config.max_file_size_bytes == 2048
    assert config.max_file_count == 7
    assert config.rotation_enabled is False
    assert config.file_output_colored is False


def test_config_ignores_unknown_keys() -> None:
    config = LogConfig.model_validate_json('{"app_name": "svc", "colour": "always"}')
    assert config.app_name == "svc"


@pytest.mark.parametrize(
    "payload",
    [
        "{}",
        '{"app_name": 5}',
        '{"app_name": "svc", "minimum_level": "verbose"}',
        '{"app_name": "svc", "max_file_size_bytes": -1}',
        '{"app_name": "svc", "max_file_count": -3}',
        '{"app_name": "svc", "log_to_file": "yes"}',
        "not json",
    ],
)
def test_config_rejects_invalid_payloads(payload: str) -> None:
    with pytest.raises(ValidationError):
        LogConfig.model_validate_json(payload)


def test_config_is_immutable() -> None:
    config = LogConfig(app_name="svc")
    with pytest.raises(ValidationError):
        config.app_name = "other"  # type: ignore[misc]


def test_config_dump_uses_level_name() -> None:
    config = LogConfig(app_name="svc", minimum_level=LogLevel.ERROR)
    assert config.model_dump()["minimum_level"] == "ERROR"


def test_disabled_config() -> None:
    config = LogConfig.disabled()

    assert config.app_name == ""
    assert config.log_file == ""
    assert config.log_to_file is False
    assert config.log_to_console is False
    assert config.minimum_level is LogLevel.INFO
    assert config.file_output_colored is False


def test_record_defaults() -> None:
    record = LogRecord.model_validate_json('{"message": "hello"}')

    assert record.message == "hello"
    assert record.level is LogLevel.INFO
    assert record.app_name_override is None
    assert record.sub_app_name is None


def test_record_override_accepts_app_name_key() -> None:
    record = LogRecord.model_validate_json('{"message": "m", "app_name": "other", "sub_app_name": "db"}')

    assert record.app_name_override == "other"
    assert record.sub_app_name == "db"


def test_record_level_is_case_insensitive() -> None:
    record = LogRecord.model_validate_json('{"message": "m", "level": "ERROR"}')
    assert record.level is LogLevel.ERROR


@pytest.mark.parametrize(
    "payload",
    ['{"level": "info"}', '{"message": "m", "level": "fatal"}', '{"message": 42}', "[1, 2]"],
)
def test_record_rejects_invalid_payloads(payload: str) -> None:
    with pytest.raises(ValidationError):
        LogRecord.model_validate_json(payload)

