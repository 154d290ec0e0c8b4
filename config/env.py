"""
Environment access for minigrep.
Every read of process-wide environment state goes through get_env so callers
(and tests) can hand in their own mapping instead of touching os.environ.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional


def load_env(dotenv_path: str | Path = ".env") -> None:
    """
    Parse a .env file and merge values into os.environ if not already set.
    Lines starting with '#' or blank lines are ignored.
    """
    path = Path(dotenv_path)
    if not path.is_file():
        return

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        value = value.strip().strip("\"'")
        os.environ.setdefault(key, value)


def get_env(
    key: str,
    default: Optional[str] = None,
    environ: Mapping[str, str] | None = None,
) -> Optional[str]:
    """
    Fetch an environment variable, falling back to ``default`` when unset.
    """
    source = os.environ if environ is None else environ
    return source.get(key, default)


def is_set(key: str, environ: Mapping[str, str] | None = None) -> bool:
    # presence only; an empty value still counts
    return get_env(key, environ=environ) is not None
