"""Logging setup shared by the command-line entry points."""

from __future__ import annotations

import logging
import sys


def configure_logging(debug: bool) -> None:
    """Send log records to stdout as plain lines."""
    level = logging.DEBUG if debug else logging.INFO
    fmt = "%(levelname)s %(name)s: %(message)s" if debug else "%(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )
