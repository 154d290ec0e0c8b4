"""
Error types raised by minigrep.
Usage mistakes and unreadable files are ordinary exceptions; cli.main is the
one place that turns them into messages and exit codes.
"""
from __future__ import annotations

from pathlib import Path


class MinigrepError(Exception):
    pass


class ConfigError(MinigrepError):
    """The invocation arguments were malformed."""


class MissingQuery(ConfigError):
    def __init__(self, message: str = "Didn't get a query string"):
        super().__init__(message)


class MissingFilename(ConfigError):
    def __init__(self, message: str = "Didn't get a file name"):
        super().__init__(message)


class FileAccess(MinigrepError):
    """The target file could not be read as text."""

    def __init__(self, path: str | Path, reason: BaseException | str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{path}: {_describe(reason)}")


def _describe(reason: BaseException | str) -> str:
    if isinstance(reason, OSError) and reason.strerror:
        return reason.strerror
    return str(reason)
