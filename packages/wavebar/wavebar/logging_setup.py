"""Root logger configuration shared by the wavebar front ends.

Console output is always on. A rotating log file is added when the caller
names one. ``WAVEBAR_LOG_LEVEL`` in the environment beats the level the
caller passes.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LEVEL_ENV_VAR = "WAVEBAR_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str) -> int:
    """Numeric level for ``level`` after the env override; unknown names mean INFO."""
    name = os.environ.get(LEVEL_ENV_VAR) or level
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            RotatingFileHandler(Path(log_file), maxBytes=max_bytes, backupCount=backup_count)
        )
    # force=True replaces whatever a previous call installed.
    logging.basicConfig(
        level=resolve_level(level), format=LOG_FORMAT, handlers=handlers, force=True
    )
