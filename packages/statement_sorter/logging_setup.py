"""Logging for ``statement_sorter``.

Only entrypoints configure output: the CLI calls :func:`configure_logging`
once, which gives the ``statement_sorter`` logger one stream handler and
stops propagation to the root logger. Modules ask for their logger through
:func:`get_logger` and never add handlers themselves, so an embedding
application that skips :func:`configure_logging` sees nothing unless it sets
up logging on its own.

The level comes from the ``level`` argument, then
``STATEMENT_SORTER_LOG_LEVEL``, then ``INFO``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "statement_sorter"
LOG_LEVEL_ENV = "STATEMENT_SORTER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def _level_from_name(value: str) -> int | None:
    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelNamesMapping().get(name)
    return level if isinstance(level, int) else None


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or the environment) into a numeric level.

    Unrecognized names fall through to the next source instead of failing.
    """

    if isinstance(level, int):
        return level
    for candidate in (level, os.getenv(LOG_LEVEL_ENV)):
        if candidate:
            parsed = _level_from_name(candidate)
            if parsed is not None:
                return parsed
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Attach the package's stream handler; later calls do nothing.

    ``stream`` defaults to ``sys.stderr`` as it is when this runs.
    """

    global _configured
    if _configured:
        return

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg.handlers):
        if isinstance(handler, logging.NullHandler):
            pkg.removeHandler(handler)

    resolved = resolve_level(level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    pkg.addHandler(handler)
    pkg.setLevel(resolved)
    pkg.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``.

    Until :func:`configure_logging` runs, the package logger carries a
    ``NullHandler`` so library use stays quiet.
    """

    pkg = logging.getLogger(PACKAGE_LOGGER)
    if not _configured and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
