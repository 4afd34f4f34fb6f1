"""Persistence port for named, full-replace JSON records.

The engine keeps two records:

- ``last-transactions``: the most recent import's CTV rows (pre-categorization).
- ``customCategories``: the cumulative learned keyword → category table.

Every save replaces the whole record in a single synchronous write. Adapters:

- :class:`MemoryStatePort`: process-local dict (tests, embedding callers).
- :class:`JsonFileStatePort`: ``<root>/<name>.json``; writes target ``.tmp``
  first and then ``os.replace`` into place.
- :class:`SqlStatePort`: one row per record in ``ss_state_records`` via the
  shared ``db`` library.
"""

from __future__ import annotations

import contextlib
import json
import os
import re
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from .logging_setup import get_logger

LAST_TRANSACTIONS = "last-transactions"
CUSTOM_CATEGORIES = "customCategories"

_RECORD_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

_logger = get_logger("statement_sorter.persistence")


def _validate_record_name(name: str) -> str:
    """Reject names that could escape the state directory."""

    if not _RECORD_NAME_RE.fullmatch(name):
        raise ValueError(f"Invalid record name: {name!r}")
    return name


@runtime_checkable
class StatePort(Protocol):
    def load(self, name: str) -> Any | None:
        """Return the stored payload for ``name`` or ``None`` when absent."""
        ...

    def save(self, name: str, payload: Any) -> None:
        """Replace the stored payload for ``name``."""
        ...


class MemoryStatePort:
    """Dict-backed port; payloads round-trip through JSON like the others."""

    def __init__(self) -> None:
        self._records: dict[str, str] = {}

    def load(self, name: str) -> Any | None:
        raw = self._records.get(_validate_record_name(name))
        return None if raw is None else json.loads(raw)

    def save(self, name: str, payload: Any) -> None:
        self._records[_validate_record_name(name)] = json.dumps(payload)


class JsonFileStatePort:
    """Stores each record as ``<root>/<name>.json``."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def _path(self, name: str) -> Path:
        return self.root / f"{_validate_record_name(name)}.json"

    def load(self, name: str) -> Any | None:
        path = self._path(name)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            _logger.warning(
                "state:read_failed; treating record as absent name=%s path=%s",
                name,
                os.fspath(path),
                exc_info=True,
            )
            return None

    def save(self, name: str, payload: Any) -> None:
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        # Write atomically, cleaning up the temp file on failure
        try:
            tmp.write_text(
                json.dumps(payload, ensure_ascii=False, separators=(",", ":")),
                encoding="utf-8",
            )
            os.replace(tmp, path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
            raise
        _logger.debug("state:saved name=%s path=%s", name, os.fspath(path))


class SqlStatePort:
    """Stores each record as a row in ``ss_state_records``.

    The schema is created on first use. ``database_url`` falls back to the
    ``DATABASE_URL`` environment variable.
    """

    def __init__(self, database_url: str | None = None) -> None:
        from db.client import create_schema

        self.database_url = database_url
        create_schema(database_url=database_url)

    def load(self, name: str) -> Any | None:
        from db.client import session_scope
        from db.models.state import SsStateRecord

        with session_scope(database_url=self.database_url) as session:
            row = session.get(SsStateRecord, _validate_record_name(name))
            return None if row is None else row.payload

    def save(self, name: str, payload: Any) -> None:
        from db.client import session_scope
        from db.models.state import SsStateRecord

        # Normalize through JSON so the stored value matches what load returns.
        payload = json.loads(json.dumps(payload))
        with session_scope(database_url=self.database_url) as session:
            session.merge(SsStateRecord(name=_validate_record_name(name), payload=payload))
        _logger.debug("state:saved name=%s backend=sql", name)


__all__ = [
    "LAST_TRANSACTIONS",
    "CUSTOM_CATEGORIES",
    "StatePort",
    "MemoryStatePort",
    "JsonFileStatePort",
    "SqlStatePort",
]
