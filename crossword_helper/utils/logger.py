"""Logging utilities for the crossword helper."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure root logging for CLI runs.

    A generation run tries many layout attempts, so per-attempt detail is
    logged at DEBUG and only the outcome at INFO. ``level`` may be a level
    name such as ``"debug"``. urllib3 connection chatter from suggestion
    lookups is kept at WARNING or above.
    """

    if isinstance(level, str):
        if level.upper() not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level {level!r}")
        level = getattr(logging, level.upper())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossword_helper")
