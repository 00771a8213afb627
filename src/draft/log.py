"""Logging setup shared by the library and the CLI."""

import logging
import sys

from draft.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use."""
    name = (level or settings.log_level).upper()
    log_level = getattr(logging, name, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a named logger."""
    return logging.getLogger(name)
