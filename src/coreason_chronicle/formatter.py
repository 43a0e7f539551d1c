# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

from datetime import datetime, timezone
from typing import Dict, Optional

from colorama import Fore, Style

from coreason_chronicle.levels import LogLevel
from coreason_chronicle.models import LogRecord, RenderedLine

LINE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f UTC"

TIMESTAMP_COLOR = Fore.LIGHTRED_EX
APP_NAME_COLOR = Fore.CYAN
MESSAGE_COLOR = Fore.WHITE

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: Fore.BLUE,
    LogLevel.INFO: Fore.GREEN,
    LogLevel.WARN: Fore.YELLOW,
    LogLevel.ERROR: Fore.RED,
}


def colorize(text: str, color: str) -> str:
    """Wraps text in an ANSI color code and a reset."""
    return f"{color}{text}{Style.RESET_ALL}"


def resolve_app_name(configured: str, override: Optional[str] = None, sub_app_name: Optional[str] = None) -> str:
    """
    Builds the app-name path shown on a line.

    The override replaces the configured name entirely; a sub-component is
    appended as `<name> -> <sub>`.
    """
    name = override if override is not None else configured
    if sub_app_name is not None:
        name = f"{name} -> {sub_app_name}"
    return name


class RecordFormatter:
    """
    Renders `[<timestamp>] [<LEVEL>] <app-name-path>: <message>` lines.
    """

    def format_timestamp(self, moment: datetime) -> str:
        return moment.astimezone(timezone.utc).strftime(LINE_TIMESTAMP_FORMAT)

    def render(self, record: LogRecord, app_name: str, moment: Optional[datetime] = None) -> RenderedLine:
        """
        Renders a record into its decorated and plain forms.

        Both forms carry the same fields in the same order; the plain form has
        no color codes.
        """
        timestamp = self.format_timestamp(moment or datetime.now(timezone.utc))
        level = str(record.level)

        decorated = "[{}] [{}] {}: {}".format(
            colorize(timestamp, TIMESTAMP_COLOR),
            colorize(level, LEVEL_COLORS[record.level]),
            colorize(app_name, APP_NAME_COLOR),
            colorize(record.message, MESSAGE_COLOR),
        )
        plain = f"[{timestamp}] [{level}] {app_name}: {record.message}"
        return RenderedLine(decorated=decorated, plain=plain)
