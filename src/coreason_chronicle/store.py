# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_chronicle

import threading
from typing import Optional, Union

from pydantic import ValidationError

from coreason_chronicle.exceptions import ConfigurationError
from coreason_chronicle.models import LogConfig
from coreason_chronicle.utils.logger import logger


def parse_config(payload: Union[str, bytes]) -> LogConfig:
    """
    Decodes a JSON configuration payload.

    Raises:
        ConfigurationError: if the payload is not valid JSON or does not
            describe a valid configuration.
    """
    try:
        return LogConfig.model_validate_json(payload)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration payload: {e}") from e


class ConfigStore:
    """
    Holds the active configuration as one immutable snapshot behind one lock.

    Readers always observe a whole snapshot: either the one installed before a
    concurrent configure or the one it installs.
    """

    def __init__(self, config: Optional[LogConfig] = None):
        self._lock = threading.Lock()
        self._config = config if config is not None else LogConfig.disabled()
        self._configured = config is not None

    def configure(self, config: LogConfig) -> None:
        with self._lock:
            self._config = config
            self._configured = True
        logger.debug(f"Logging configured for app '{config.app_name}' (file: {config.log_file!r})")

    def configure_from_payload(self, payload: Union[str, bytes]) -> LogConfig:
        """
        Parses and installs a configuration payload.

        The payload is fully validated before the store is touched, so a
        failure leaves the previous configuration in place.
        """
        config = parse_config(payload)
        self.configure(config)
        return config

    def shutdown(self) -> None:
        """Resets the store to the disabled snapshot. Safe to call repeatedly."""
        with self._lock:
            self._config = LogConfig.disabled()
            self._configured = False

    def snapshot(self) -> LogConfig:
        with self._lock:
            return self._config

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._configured
