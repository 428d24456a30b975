"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import LogsConfig

CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _attach_file_logging(log_path: Path, level: int) -> None:
    """Attach a file handler to root logger if not already present."""
    logger = logging.getLogger()
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path:
            return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)


def configure_logging(logs: LogsConfig) -> None:
    # Keep handlers installed by the host (e.g. a test runner) untouched
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logs.level, format=CONSOLE_FORMAT)
    logging.getLogger("product_search").setLevel(logs.level)

    if logs.log_file:
        _attach_file_logging(Path(logs.log_file).resolve(), logs.level)
