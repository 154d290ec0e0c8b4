"""
Logging setup for the minigrep CLI.
"""
from __future__ import annotations

import logging

from .env import get_env

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> int:
    """
    Configure the root logger once and return the level applied.
    Handlers write to stderr, leaving stdout to the matched lines.
    An unrecognised level name falls back to WARNING.
    """
    name = (level or get_env("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    return resolved
