"""Logging utilities for ketsim.

Every module asks for its logger through `get_logger(__name__)`. Loggers live
under the ``ketsim.`` namespace, write to stderr and do not propagate to the
root logger, so applications embedding the simulator keep control of their
own handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from . import config

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


_DEFAULT_LEVEL = _as_level(config.LOG_LEVEL)

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a cached logger for the given module name.

    Args:
        name: Logger name, typically `__name__`. If None, the package logger.

    Example:
        >>> from ketsim.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("collapsed to %d", 3)
    """
    if name is None:
        name = "ketsim"
    logger_name = name if name == "ketsim" or name.startswith("ketsim.") else f"ketsim.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every ketsim logger, existing and future.

    Args:
        level: A `logging` level constant or its name ('DEBUG', 'INFO', ...).
    """
    global _DEFAULT_LEVEL
    level = _as_level(level)
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
    """Replace the handlers of all ketsim loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses `[LEVEL] name: message`.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _as_level(level)
    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
