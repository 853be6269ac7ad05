"""Logging utilities for densepath.

Every module obtains its logger through :func:`get_logger` so that all
densepath output shares one handler layout and one level switch.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _attach_handler(
    logger: logging.Logger,
    level: int,
    stream: Optional[object] = None,
    format_string: Optional[str] = None,
) -> None:
    for old in logger.handlers[:]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from densepath.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("resized graph to %d vertices", 4)
    """
    if name is None:
        name = "densepath"

    logger_name = name if name.startswith("densepath") else f"densepath.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        _attach_handler(logger, _DEFAULT_LEVEL)

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all densepath loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for densepath.

    Replaces the handler of every cached logger with a fresh stream handler.
    It should typically be called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL

    level = _coerce_level(level)
    for logger in _loggers.values():
        _attach_handler(logger, level, stream, format_string)

    _DEFAULT_LEVEL = level
