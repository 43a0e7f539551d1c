# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

"""
coreason-chronicle
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .levels import LogLevel
from .models import LogConfig, LogRecord
from .pipeline import (
    LogPipeline,
    configure,
    emit,
    execute,
    initialize,
    shutdown,
    teardown,
)
from .rotation import RotationManager
from .store import ConfigStore

__all__ = [
    "LogLevel",
    "LogConfig",
    "LogRecord",
    "ConfigStore",
    "RotationManager",
    "LogPipeline",
    "configure",
    "emit",
    "shutdown",
    "initialize",
    "execute",
    "teardown",
]
