# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

# Status codes returned by the host entry points.
STATUS_OK = 0
STATUS_INVALID_PAYLOAD = 1
STATUS_WRITE_FAILED = -1


class ChronicleError(Exception):
    """Base class for errors raised by coreason-chronicle."""


class ConfigurationError(ChronicleError):
    """The configuration payload could not be decoded or validated."""


class RecordParseError(ChronicleError):
    """The log record payload could not be decoded or validated."""


class LogWriteError(ChronicleError):
    """The log file could not be opened or appended to."""


class LevelParseError(ValueError):
    """Text that is not one of the known level names."""
