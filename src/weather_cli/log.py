"""Logging setup for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
installed here, once, by ``cli.main``. Log output goes to stderr so the
weather report on stdout stays clean.

Environment:
  - ``LOG_LEVEL``: level name (default ``WARNING``, ``DEBUG`` with ``--debug``)
  - ``ENABLE_COLOR``: ``true`` to colour level names with ANSI escapes
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_LEVEL_COLORS = {
    logging.DEBUG: "\033[34m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI colour."""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def resolve_level(debug: bool = False) -> int:
    """Pick the log level from ``--debug`` or the ``LOG_LEVEL`` variable."""
    if debug:
        return logging.DEBUG
    name = os.environ.get("LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(debug: bool = False) -> None:
    """Install a single stderr handler on the root logger."""
    enable_color = os.environ.get("ENABLE_COLOR", "false").lower() == "true"
    handler = logging.StreamHandler(sys.stderr)
    formatter = ColorFormatter(LOG_FORMAT) if enable_color else logging.Formatter(LOG_FORMAT)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(resolve_level(debug))

    # httpx logs every request at INFO, including the query string with the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger(__name__).debug("Logging initialized (color=%s)", enable_color)
