"""Logging utilities.

All package loggers live under the ``mdview`` namespace so that a single
handler installed by :func:`configure_logging` covers them.  Library code only
calls :func:`get_logger`; handler setup is left to entry points such as the
CLI.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "mdview"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler owned by :func:`configure_logging`."""


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this again replaces the handler, bound to the current
    ``sys.stderr``, and adjusts the level; handlers never accumulate.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in logger.handlers if isinstance(h, _StderrHandler)]:
        logger.removeHandler(old)
    handler = _StderrHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
