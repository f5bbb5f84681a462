"""Unified logging configuration for Triba.

Usage:
    from triba.logging_config import setup_logging, get_logger

    logger = setup_logging("triba", level="DEBUG")
    get_logger(__name__).info("ready")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import LOG_LEVEL

__all__ = [
    "COMPACT_FORMAT",
    "DEFAULT_FORMAT",
    "DETAILED_FORMAT",
    "STRUCTURED_FORMAT",
    "LogContext",
    "get_logger",
    "setup_logging",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d - %(funcName)s - %(message)s"
)
STRUCTURED_FORMAT = "time=%(asctime)s logger=%(name)s level=%(levelname)s msg=%(message)s"

_FORMATS = {
    "default": DEFAULT_FORMAT,
    "compact": COMPACT_FORMAT,
    "detailed": DETAILED_FORMAT,
    "structured": STRUCTURED_FORMAT,
}


def _has_handler(logger: logging.Logger, kind: type, path: Path | None = None) -> bool:
    for handler in logger.handlers:
        if kind is logging.StreamHandler and isinstance(handler, logging.FileHandler):
            continue
        if not isinstance(handler, kind):
            continue
        if path is None or Path(handler.baseFilename).resolve() == path.resolve():
            return True
    return False


def setup_logging(
    name: str = "triba",
    level: int | str | None = None,
    format_style: str = "default",
    console: bool = True,
    log_file: str | Path | None = None,
    log_dir: str | Path | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """Configure and return logger ``name``.

    Calling it again for the same name does not add duplicate handlers.
    Unknown ``format_style`` values fall back to the default format.

    Args:
        name: Logger name.
        level: Level as int or name; defaults to ``TRIBA_LOG_LEVEL``.
        format_style: One of default, compact, detailed, structured.
        console: Attach a stderr handler.
        log_file: Also log to this file.
        log_dir: Also log to ``<log_dir>/<name>.log``.
        propagate: Whether records propagate to ancestor loggers.
    """
    logger = logging.getLogger(name)
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    logger.propagate = propagate

    formatter = logging.Formatter(_FORMATS.get(format_style, DEFAULT_FORMAT))

    if console and not _has_handler(logger, logging.StreamHandler):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    paths = []
    if log_file is not None:
        paths.append(Path(log_file))
    if log_dir is not None:
        paths.append(Path(log_dir) / f"{name}.log")
    for path in paths:
        if _has_handler(logger, logging.FileHandler, path):
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return logger ``name`` without touching its configuration."""
    return logging.getLogger(name)


class LogContext:
    """Temporarily change a logger's level.

    with LogContext(logger, logging.DEBUG):
        engine.select_point(point)
    """

    def __init__(self, logger: logging.Logger, level: int):
        self.logger = logger
        self.level = level
        self._previous = logger.level

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        self.logger.setLevel(self._previous)
