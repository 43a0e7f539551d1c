# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

from typing import Any, NamedTuple, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_serializer, field_validator

from coreason_chronicle.levels import LogLevel

DEFAULT_LOG_FILE = "default.log"
DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_MAX_FILE_COUNT = 5

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class LogConfig(BaseModel):
    """
    Active logging configuration.

    Every optional field has a default so a payload carrying only `app_name`
    is a complete configuration. Keys used by the original plugin ABI
    (`minimum_log_level`, `max_log_file_size`, ...) are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    app_name: StrictStr
    log_file: StrictStr = DEFAULT_LOG_FILE
    log_to_file: StrictBool = True
    log_to_console: StrictBool = True
    minimum_level: LogLevel = Field(
        default=LogLevel.INFO,
        validation_alias=AliasChoices("minimum_level", "minimum_log_level"),
    )
    max_file_size_bytes: int = Field(
        default=DEFAULT_MAX_FILE_SIZE_BYTES,
        ge=0,
        le=_U64_MAX,
        strict=True,
        validation_alias=AliasChoices("max_file_size_bytes", "max_log_file_size"),
    )
    max_file_count: int = Field(
        default=DEFAULT_MAX_FILE_COUNT,
        ge=0,
        le=_U32_MAX,
        strict=True,
        validation_alias=AliasChoices("max_file_count", "max_log_file_count"),
    )
    rotation_enabled: StrictBool = Field(
        default=True,
        validation_alias=AliasChoices("rotation_enabled", "enable_log_rotation"),
    )
    file_output_colored: StrictBool = Field(
        default=True,
        validation_alias=AliasChoices("file_output_colored", "log_to_file_colored"),
    )

    @field_validator("minimum_level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)

    @field_serializer("minimum_level")
    def _dump_level(self, level: LogLevel) -> str:
        return str(level)

    @classmethod
    def disabled(cls) -> "LogConfig":
        """
        The state of the store before configure and after shutdown.

        Nothing is written anywhere and the threshold is INFO.
        """
        return cls(
            app_name="",
            log_file="",
            log_to_file=False,
            log_to_console=False,
            file_output_colored=False,
        )


class LogRecord(BaseModel):
    """
    A single record submitted to emit.

    The override may also be supplied under the `app_name` key.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: StrictStr
    level: LogLevel = LogLevel.INFO
    app_name_override: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("app_name_override", "app_name"),
    )
    sub_app_name: Optional[StrictStr] = None

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> LogLevel:
        return LogLevel.parse(value)


class RenderedLine(NamedTuple):
    decorated: str
    plain: str
