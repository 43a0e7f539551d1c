# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

import json
import sys
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

import typer

from coreason_chronicle import __version__
from coreason_chronicle.exceptions import STATUS_OK, ConfigurationError
from coreason_chronicle.pipeline import configure, emit, shutdown
from coreason_chronicle.store import parse_config
from coreason_chronicle.utils.logger import logger

app = typer.Typer(
    name="coreason-chronicle",
    help="CLI for coreason-chronicle: leveled, colorized logging with size-based rotation.",
    add_completion=False,
)


@app.command()
def log(
    message: Annotated[str, typer.Argument(help="Message to log")],
    config: Annotated[Path, typer.Option("--config", "-c", help="Path to a JSON configuration file", exists=True)],
    level: Annotated[str, typer.Option("--level", "-l", help="Record level (debug/info/warn/error)")] = "info",
    app_name: Annotated[Optional[str], typer.Option("--app", "-a", help="Override the configured app name")] = None,
    sub_app_name: Annotated[Optional[str], typer.Option("--sub", "-s", help="Sub-component name")] = None,
) -> None:
    """
    Emit a single record using the given configuration.
    """
    try:
        if configure(config.read_bytes()) != STATUS_OK:
            sys.exit(1)

        record: Dict[str, Any] = {"message": message, "level": level}
        if app_name is not None:
            record["app_name_override"] = app_name
        if sub_app_name is not None:
            record["sub_app_name"] = sub_app_name

        status = emit(json.dumps(record))
    finally:
        shutdown()

    if status != STATUS_OK:
        sys.exit(1)


@app.command("check-config")
def check_config(
    config: Annotated[Path, typer.Argument(help="Path to a JSON configuration file", exists=True)],
) -> None:
    """
    Validate a configuration file and print it with defaults applied.
    """
    try:
        resolved = parse_config(config.read_bytes())
    except ConfigurationError:
        logger.exception("Configuration is invalid")
        sys.exit(1)
    typer.echo(resolved.model_dump_json(indent=2))


@app.command()
def version() -> None:
    """Print the version of coreason-chronicle."""
    typer.echo(f"coreason-chronicle v{__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()  # pragma: no cover
