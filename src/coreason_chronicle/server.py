# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Dict, Union

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from coreason_chronicle.exceptions import STATUS_INVALID_PAYLOAD, STATUS_OK
from coreason_chronicle.pipeline import ChronicleContext, configure, emit, shutdown
from coreason_chronicle.utils.logger import logger


# Lifespan Management
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager: applies the startup configuration, if any, and
    resets the logging state on exit.
    """
    config_path = os.getenv("CHRONICLE_CONFIG_PATH")
    if config_path:
        logger.info(f"Configuring Chronicle Server from {config_path}")
        try:
            payload = Path(config_path).read_bytes()
        except OSError as e:
            logger.exception("Failed to read startup configuration.")
            raise RuntimeError(f"Server initialization failed: {e}") from e

        if configure(payload) != STATUS_OK:
            # We raise to ensure the server doesn't start in a broken state
            raise RuntimeError(f"Server initialization failed: invalid configuration at {config_path}")

    yield

    logger.info("Shutting down Chronicle Server.")
    shutdown()


app = FastAPI(title="Coreason Chronicle API", lifespan=lifespan)


@app.get("/health")
async def health_check() -> Dict[str, Union[str, bool]]:
    """
    Health check endpoint. Also reports whether a configuration is active.
    """
    return {"status": "ready", "configured": ChronicleContext.get_instance().store.is_configured}


@app.post("/configure")
async def configure_endpoint(request: Request) -> Dict[str, int]:
    """
    Install a logging configuration from the raw JSON body.

    The body is read on the event loop; configuring takes the store lock and
    runs in the threadpool.
    """
    status = await run_in_threadpool(configure, await request.body())
    if status != STATUS_OK:
        raise HTTPException(status_code=400, detail="Invalid configuration payload")
    return {"status": status}


@app.post("/emit")
async def emit_endpoint(request: Request) -> Dict[str, int]:
    """
    Emit one log record from the raw JSON body.

    Console and file writes run in the threadpool, off the event loop.
    """
    status = await run_in_threadpool(emit, await request.body())
    if status == STATUS_INVALID_PAYLOAD:
        raise HTTPException(status_code=400, detail="Invalid log record payload")
    if status != STATUS_OK:
        raise HTTPException(status_code=500, detail="Failed to write log record")
    return {"status": status}


@app.post("/shutdown")
def shutdown_endpoint() -> Dict[str, int]:
    """
    Reset the logging state.
    """
    return {"status": shutdown()}
