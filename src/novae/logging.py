"""
Logging for novae.

All modules log under the ``novae`` logger. The CLI calls
:func:`setup_logging` once per invocation; library users may instead attach
their own handlers to ``logging.getLogger("novae")``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_root_logger = logging.getLogger("novae")


def setup_logging(
    level: str | int = "WARNING",
    stream: TextIO | None = None,
    file: str | None = None,
) -> None:
    """
    Route ``novae`` log records to stderr and, optionally, a file.

    Args:
        level: Level name ("DEBUG", "WARNING", ...) or numeric level
        stream: Stream for console records (defaults to stderr)
        file: Path of a log file to append to, as given by ``--log-file``

    Calling this again replaces the handlers installed by the previous call.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    for handler in list(_root_logger.handlers):
        _root_logger.removeHandler(handler)
        handler.close()
    _root_logger.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if file:
        handlers.append(logging.FileHandler(file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Child of the ``novae`` logger, e.g. ``get_logger("packages.store")``."""
    if name == "novae" or name.startswith("novae."):
        return logging.getLogger(name)
    return logging.getLogger(f"novae.{name}")
