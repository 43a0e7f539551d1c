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
Diagnostic channel for coreason-chronicle itself.

Rejected payloads, failed writes and rotation problems are reported here, on
stderr, never in the log output that emit produces.
"""

import os
import sys
from typing import Any

from loguru import logger as _logger

__all__ = ["logger", "DIAGNOSTIC_LEVEL"]

DIAGNOSTIC_LEVEL = os.getenv("CHRONICLE_DIAGNOSTIC_LEVEL", "INFO").upper()

try:
    _logger.level(DIAGNOSTIC_LEVEL)
except ValueError:
    # Unknown level names must not stop the package from importing.
    DIAGNOSTIC_LEVEL = "INFO"

_logger.remove()

_logger.add(
    sys.stderr,
    level=DIAGNOSTIC_LEVEL,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>chronicle</cyan>:<cyan>{module}</cyan> - "
        "<level>{message}</level>"
    ),
)

logger: Any = _logger
