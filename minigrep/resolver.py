"""
Turn raw process arguments into a validated Config.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from config import is_set

from .errors import MissingFilename, MissingQuery

logger = logging.getLogger(__name__)

ANY_CASE_FLAG = "--any"
CASE_INSENSITIVE_VAR = "CASE_INSENSITIVE"


@dataclass(frozen=True)
class Config:
    query: str
    filename: str
    case_sensitive: bool

    @classmethod
    def from_args(
        cls,
        args: Iterable[str],
        environ: Mapping[str, str] | None = None,
    ) -> "Config":
        """
        Build a Config from an argument sequence whose first item is the
        program name.

        Raises MissingQuery / MissingFilename when the 2nd / 3rd item is absent.
        Trailing items are only scanned for ``--any``, which forces
        case-insensitive matching; otherwise CASE_INSENSITIVE being set in
        the environment (any value) does.
        """
        it = iter(args)
        next(it, None)

        query = next(it, None)
        if query is None:
            raise MissingQuery()

        filename = next(it, None)
        if filename is None:
            raise MissingFilename()

        any_flags = sum(1 for arg in it if arg == ANY_CASE_FLAG)
        if any_flags:
            case_sensitive = False
        else:
            case_sensitive = not is_set(CASE_INSENSITIVE_VAR, environ=environ)

        config = cls(query=query, filename=filename, case_sensitive=case_sensitive)
        logger.debug("Resolved config: %s", config)
        return config
