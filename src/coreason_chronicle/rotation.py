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
from pathlib import Path
from typing import List, Optional, Union

from coreason_chronicle.models import LogConfig
from coreason_chronicle.utils.logger import logger

ARCHIVE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RotationManager:
    """
    Size-based rotation of the active log file.

    Before each file write the active file is checked against the size
    threshold. An oversized file is renamed to
    `<name>_<YYYY-MM-DD_HH-MM-SS>.log` and the oldest archive is pruned once
    the retention count is reached. Filesystem errors here never stop the
    write that follows.
    """

    def list_archives(self, log_file: Union[str, Path]) -> List[Path]:
        """
        Returns the archives of `log_file`, oldest first.

        Archives are the regular files next to the log file whose name starts
        with `<log file name>_` and ends in `.log`. The timestamp suffix makes
        lexicographic order chronological.
        """
        log_path = Path(log_file)
        prefix = f"{log_path.name}_"
        directory = log_path.parent

        archives = [
            p for p in directory.iterdir() if p.name.startswith(prefix) and p.suffix == ".log" and p.is_file()
        ]
        return sorted(archives, key=lambda p: p.name)

    def archive_path(self, log_file: Union[str, Path], now: Optional[datetime] = None) -> Path:
        """
        Builds a free archive name for `log_file`.

        Two rotations within the same second get a numeric suffix so an
        existing archive is never replaced.
        """
        log_path = Path(log_file)
        timestamp = (now or _utcnow()).strftime(ARCHIVE_TIMESTAMP_FORMAT)
        candidate = log_path.with_name(f"{log_path.name}_{timestamp}.log")

        counter = 1
        while candidate.exists():
            candidate = log_path.with_name(f"{log_path.name}_{timestamp}_{counter:03d}.log")
            counter += 1
        return candidate

    def rotate_if_needed(self, config: LogConfig) -> Optional[Path]:
        """
        Rotates the configured log file when it exceeds the size threshold.

        Returns:
            The archive path if a rotation happened, otherwise None.
        """
        if not config.rotation_enabled or not config.log_file:
            return None

        log_path = Path(config.log_file)
        try:
            size = log_path.stat().st_size
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not stat log file {log_path}: {e}")
            return None

        if size <= config.max_file_size_bytes:
            return None

        try:
            archives = self.list_archives(log_path)
        except OSError as e:
            logger.warning(f"Could not list archives for {log_path}: {e}")
            archives = []

        if archives and len(archives) >= config.max_file_count:
            self._prune(archives[0])

        target = self.archive_path(log_path)
        try:
            log_path.rename(target)
        except OSError as e:
            logger.warning(f"Could not rotate {log_path} to {target}: {e}")
            return None

        logger.debug(f"Rotated {log_path} ({size} bytes) to {target}")
        return target

    def _prune(self, archive: Path) -> None:
        try:
            archive.unlink()
            logger.debug(f"Pruned log archive {archive}")
        except OSError as e:
            logger.warning(f"Could not delete log archive {archive}: {e}")
