"""
minigrep: print the lines of a file that contain a query string.
"""
from .errors import ConfigError, FileAccess, MinigrepError, MissingFilename, MissingQuery
from .resolver import ANY_CASE_FLAG, Config
from .runner import read_contents, run
from .search import iter_lines, search, search_case_insensitive

__all__ = [
    "ANY_CASE_FLAG",
    "Config",
    "ConfigError",
    "FileAccess",
    "MinigrepError",
    "MissingFilename",
    "MissingQuery",
    "iter_lines",
    "read_contents",
    "run",
    "search",
    "search_case_insensitive",
]
