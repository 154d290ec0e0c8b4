"""
Line filtering over an in-memory text blob.
"""
from __future__ import annotations

from typing import Iterator, List


def iter_lines(contents: str) -> Iterator[str]:
    """
    Yield the lines of ``contents`` split on ``\\n``.

    A trailing ``\\r`` is dropped from each line, a final line without a
    newline is kept, and a trailing newline does not add an empty line.
    """
    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str) -> List[str]:
    """Return every line of ``contents`` containing ``query``, in order."""
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    needle = query.lower()
    return [line for line in iter_lines(contents) if needle in line.lower()]
