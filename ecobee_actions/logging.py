"""Logging configuration helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Logger emitting the per-call "Attempting to call Ecobee function" trace.
REQUEST_LOGGER = "ecobee_actions.actions"

LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3


def resolve_level(level: str, default: int = logging.INFO) -> int:
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) else default


def parse_logger_levels(value: str) -> dict[str, str]:
    """Parse ``name=LEVEL`` pairs separated by commas or newlines."""

    levels: dict[str, str] = {}
    for entry in value.replace("\n", ",").split(","):
        name, sep, level = entry.partition("=")
        if not sep or not name.strip() or not level.strip():
            continue
        levels[name.strip()] = level.strip().upper()
    return levels


def configure_logging(
    level: str = "INFO",
    *,
    log_path: Optional[Path] = None,
    log_requests: bool = False,
    logger_levels: Optional[Mapping[str, str]] = None,
) -> None:
    """Configure root logging handlers.

    Parameters
    ----------
    level:
        Log level name, e.g. "INFO".
    log_path:
        Optional filesystem path for a rotating file handler. When absent, only console logging is configured.
    log_requests:
        When false, the per-call request trace of the action facade is held at INFO even if the root level is DEBUG.
    logger_levels:
        Per-logger level overrides, e.g. ``{"ecobee_actions.messages.event": "ERROR"}``.
    """

    logging.captureWarnings(True)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    logging.getLogger(REQUEST_LOGGER).setLevel(
        logging.NOTSET if log_requests else logging.INFO
    )

    for name, name_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(resolve_level(name_level))
