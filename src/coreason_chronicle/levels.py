# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

from enum import IntEnum
from typing import Any

from coreason_chronicle.exceptions import LevelParseError


class LogLevel(IntEnum):
    """
    Severity of a log record.

    Ordered by declaration: DEBUG < INFO < WARN < ERROR.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    @classmethod
    def parse(cls, value: Any) -> "LogLevel":
        """
        Parses a level name case-insensitively.

        Only the four level names are accepted; anything else raises
        LevelParseError instead of falling back to a default.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise LevelParseError(f"Invalid log level: {value!r}")

        member = cls.__members__.get(value.upper())
        if member is None:
            raise LevelParseError(f"Invalid log level: {value!r}")
        return member
