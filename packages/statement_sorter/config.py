"""Environment-driven settings.

Variables (loaded from ``.env`` by the CLI without overriding the process
environment):

- ``STATEMENT_SORTER_STATE_DIR``: JSON state directory (default
  ``./.statement_sorter`` under the current working directory).
- ``DATABASE_URL``: when set, state is stored in the database instead.
- ``STATEMENT_SORTER_BASE_CATEGORIES``: path to a JSON object replacing the
  packaged base keyword table.
"""

from __future__ import annotations

import os
from pathlib import Path

from .persistence import JsonFileStatePort, SqlStatePort, StatePort

STATE_DIR_ENV = "STATEMENT_SORTER_STATE_DIR"
BASE_CATEGORIES_ENV = "STATEMENT_SORTER_BASE_CATEGORIES"

DEFAULT_BASE_CATEGORIES = Path(__file__).resolve().parent / "ingest/seeds/base_categories.v1.json"


def get_state_dir() -> Path:
    root = os.getenv(STATE_DIR_ENV)
    if root and root.strip():
        return Path(root).expanduser().resolve()
    return (Path.cwd() / ".statement_sorter").resolve()


def get_base_categories_path() -> Path:
    override = os.getenv(BASE_CATEGORIES_ENV)
    if override and override.strip():
        return Path(override).expanduser()
    return DEFAULT_BASE_CATEGORIES


def build_state_port(*, database_url: str | None = None) -> StatePort:
    """Return the SQL port when a database URL is configured, else JSON files."""

    url = database_url or os.getenv("DATABASE_URL")
    if url:
        return SqlStatePort(url)
    return JsonFileStatePort(get_state_dir())


__all__ = [
    "STATE_DIR_ENV",
    "BASE_CATEGORIES_ENV",
    "DEFAULT_BASE_CATEGORIES",
    "get_state_dir",
    "get_base_categories_path",
    "build_state_port",
]
