from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from config import configure_logging, load_settings
from minigrep import Config, ConfigError, FileAccess, run

logger = logging.getLogger("cli")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Resolve arguments, run the search and map failures to an exit status.
    ``argv`` includes the program name, like ``sys.argv``.
    """
    args = list(sys.argv if argv is None else argv)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)
    logger.debug("Loaded settings: log_level=%s encoding=%s", settings.log_level, settings.encoding)

    try:
        config = Config.from_args(args)
    except ConfigError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return 1

    try:
        run(config, encoding=settings.encoding)
    except FileAccess as exc:
        print(f"Application error: {exc}", file=sys.stderr)
        return 1
    return 0


def run_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
