"""
Execution of one search: read the file, filter it, write the matches.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .errors import FileAccess
from .resolver import Config
from .search import search, search_case_insensitive

logger = logging.getLogger(__name__)


def read_contents(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read the whole file at ``path`` as text.
    OS errors and ValueError (decoding failures, NUL in the path) are
    re-raised as FileAccess.
    """
    try:
        with open(path, encoding=encoding, newline="") as fh:
            contents = fh.read()
    except (OSError, ValueError) as exc:
        raise FileAccess(path, exc) from exc
    logger.debug("Read %d characters from %s", len(contents), path)
    return contents


def run(config: Config, stream: Optional[TextIO] = None, encoding: str = "utf-8") -> List[str]:
    """
    Search ``config.filename`` for ``config.query`` and write each matching
    line to ``stream`` (stdout by default). Returns the matched lines.
    """
    contents = read_contents(config.filename, encoding=encoding)

    if config.case_sensitive:
        results = search(config.query, contents)
    else:
        results = search_case_insensitive(config.query, contents)
    logger.debug(
        "Found %d matching line(s) for %r (case_sensitive=%s)",
        len(results),
        config.query,
        config.case_sensitive,
    )

    out = stream if stream is not None else sys.stdout
    for line in results:
        out.write(f"{line}\n")
    return results
