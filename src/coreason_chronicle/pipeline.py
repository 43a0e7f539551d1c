# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

import sys
import threading
from pathlib import Path
from typing import Optional, TextIO, Union

from colorama import just_fix_windows_console
from pydantic import ValidationError

from coreason_chronicle.exceptions import (
    STATUS_INVALID_PAYLOAD,
    STATUS_OK,
    STATUS_WRITE_FAILED,
    ConfigurationError,
    LogWriteError,
    RecordParseError,
)
from coreason_chronicle.formatter import RecordFormatter, resolve_app_name
from coreason_chronicle.models import LogConfig, LogRecord
from coreason_chronicle.rotation import RotationManager
from coreason_chronicle.store import ConfigStore
from coreason_chronicle.utils.logger import logger


def parse_record(payload: Union[str, bytes]) -> LogRecord:
    """Decodes a JSON log record payload."""
    try:
        return LogRecord.model_validate_json(payload)
    except ValidationError as e:
        raise RecordParseError(f"Invalid log record payload: {e}") from e


class LogPipeline:
    """
    Filters, formats and writes log records according to a ConfigStore.

    Each emit reads one configuration snapshot, so a concurrent configure is
    seen either entirely or not at all. Rotation and the append that follows
    it run under a single file lock.
    """

    def __init__(
        self,
        store: Optional[ConfigStore] = None,
        formatter: Optional[RecordFormatter] = None,
        rotation: Optional[RotationManager] = None,
        console: Optional[TextIO] = None,
    ):
        self.store = store if store is not None else ConfigStore()
        self.formatter = formatter if formatter is not None else RecordFormatter()
        self.rotation = rotation if rotation is not None else RotationManager()
        self._console = console
        self._file_lock = threading.Lock()

    def emit(self, record: LogRecord) -> bool:
        """
        Emits a record.

        Returns:
            True if the record met the level threshold, False if it was
            suppressed.

        Raises:
            LogWriteError: if the log file could not be opened or written.
        """
        config = self.store.snapshot()
        if record.level < config.minimum_level:
            return False

        app_name = resolve_app_name(config.app_name, record.app_name_override, record.sub_app_name)
        line = self.formatter.render(record, app_name)

        if config.log_to_console:
            print(line.decorated, file=self._console or sys.stdout, flush=True)

        if config.log_to_file:
            self._append(config, line.decorated if config.file_output_colored else line.plain)

        return True

    def _append(self, config: LogConfig, text: str) -> None:
        log_path = Path(config.log_file)
        with self._file_lock:
            self.rotation.rotate_if_needed(config)
            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                with open(log_path, "a", encoding="utf-8") as f:
                    f.write(text + "\n")
            except OSError as e:
                logger.error(f"Failed to write to log file {log_path}: {e}")
                raise LogWriteError(f"Failed to write to log file {log_path}: {e}") from e


class ChronicleContext:
    """
    Global context/singleton backing the host entry points.
    """

    _instance: Optional["ChronicleContext"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        just_fix_windows_console()
        self.store = ConfigStore()
        self.pipeline = LogPipeline(self.store)

    @classmethod
    def get_instance(cls) -> "ChronicleContext":
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the singleton; the next entry point call builds a fresh one."""
        with cls._lock:
            cls._instance = None


# --- Host Entry Points ---


def configure(config_json: Union[str, bytes]) -> int:
    """
    Installs a configuration from a JSON payload.

    Returns 0 on success, 1 if the payload is invalid. A rejected payload
    leaves the active configuration untouched.
    """
    try:
        ChronicleContext.get_instance().store.configure_from_payload(config_json)
    except ConfigurationError as e:
        logger.error(f"Rejected logging configuration: {e}")
        return STATUS_INVALID_PAYLOAD
    return STATUS_OK


def emit(record_json: Union[str, bytes]) -> int:
    """
    Emits one log record from a JSON payload.

    Returns 0 when written or suppressed by level, 1 if the payload is
    invalid, -1 if the log file could not be written.
    """
    try:
        record = parse_record(record_json)
    except RecordParseError as e:
        logger.error(f"Rejected log record: {e}")
        return STATUS_INVALID_PAYLOAD

    try:
        ChronicleContext.get_instance().pipeline.emit(record)
    except LogWriteError:
        return STATUS_WRITE_FAILED
    except Exception:
        logger.exception("Unexpected failure while emitting log record")
        return STATUS_WRITE_FAILED
    return STATUS_OK


def shutdown() -> int:
    """Resets the logging state. Always returns 0."""
    ChronicleContext.get_instance().store.shutdown()
    return STATUS_OK


# Names used by the original plugin ABI.
initialize = configure
execute = emit
teardown = shutdown
