"""
Settings loader for minigrep.
Loads environment variables from .env and exposes a simple Settings object.
"""
from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .env import get_env, load_env

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Settings:
    log_level: str | None
    encoding: str


def load_settings(
    dotenv_path: str | Path = ".env",
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Merge ``dotenv_path`` into the process environment, then read settings.
    With an explicit ``environ`` mapping nothing is loaded or mutated.
    """
    if environ is None:
        load_env(dotenv_path)
    return Settings(
        log_level=get_env("LOG_LEVEL", environ=environ),
        encoding=_checked_encoding(
            get_env("MINIGREP_ENCODING", default=DEFAULT_ENCODING, environ=environ)
        ),
    )


def _checked_encoding(value: str | None) -> str:
    if not value:
        return DEFAULT_ENCODING
    try:
        name = codecs.lookup(value).name
        # bytes-to-bytes codecs (base64, hex, rot13) cannot decode a text file
        "".encode(name)
    except LookupError:
        raise RuntimeError(f"Invalid encoding for setting: {value}")
    return name
