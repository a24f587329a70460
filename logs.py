"""Logging initialization using loguru."""
from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

import config


def init_logging(log_dir: str | None = None, level: str | None = None) -> None:
    """Log to stderr, and to a rotating file when a log directory is configured."""
    log_dir = log_dir if log_dir is not None else config.LOG_DIR
    level = level or config.LOG_LEVEL

    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=False, diagnose=False)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path / "tagger_{time:YYYYMMDD}.log"),
            rotation="10 MB",
            retention="10 days",
            compression="zip",
            enqueue=True,
            backtrace=False,
            diagnose=False,
            level=level,
        )
