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
from pathlib import Path
from typing import Any, Callable, Dict, Generator, List

import pytest
from loguru import logger

from coreason_chronicle.pipeline import ChronicleContext


@pytest.fixture(autouse=True)
def fresh_context() -> Generator[None, None, None]:
    """Every test starts and ends with an unconfigured process-wide context."""
    ChronicleContext.reset()
    yield
    ChronicleContext.reset()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collects messages written to the diagnostic (loguru) channel."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "app.log"


@pytest.fixture
def config_payload(log_file: Path) -> Callable[..., str]:
    """Builds a configuration payload writing plain lines to `log_file` only."""

    def _build(**overrides: Any) -> str:
        payload: Dict[str, Any] = {
            "app_name": "svc",
            "log_file": str(log_file),
            "log_to_console": False,
            "file_output_colored": False,
        }
        payload.update(overrides)
        return json.dumps(payload)

    return _build
