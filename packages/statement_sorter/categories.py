"""Keyword → category store.

The store overlays a mutable *custom* table (learned from user reassignments
and persisted through a :class:`~statement_sorter.persistence.StatePort`) on
an immutable *base* table supplied at startup. On a key collision the custom
entry wins. All keys are uppercase.

Exports
-------
- ``CategoryStore``: read-only ``Mapping`` over the merged table plus
  ``learn(...)`` which writes custom entries and persists them immediately.
- ``load_base_categories(...)``: read the base table JSON.
- ``normalize_name(...)``: trim a category name.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from os import PathLike
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from .logging_setup import get_logger
from .models import KeywordTableRecord
from .persistence import CUSTOM_CATEGORIES, StatePort

_logger = get_logger("statement_sorter.categories")


def normalize_name(name: str) -> str:
    """Return ``name`` without surrounding whitespace.

    Case and interior spacing are kept; category names are displayed as typed.
    """

    return name.strip()


def normalize_keyword(keyword: str) -> str:
    return keyword.strip().upper()


def load_base_categories(path: str | PathLike[str] | None = None) -> dict[str, str]:
    """Load the base keyword table from ``path`` (default: configured seed file)."""

    if path is None:
        from .config import get_base_categories_path

        path = get_base_categories_path()
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    return dict(KeywordTableRecord.model_validate(data).root)


def _load_custom(port: StatePort) -> dict[str, str]:
    raw = port.load(CUSTOM_CATEGORIES)
    if raw is None:
        return {}
    try:
        return dict(KeywordTableRecord.model_validate(raw).root)
    except ValidationError:
        _logger.warning("categories:custom_invalid; ignoring stored record", exc_info=True)
        return {}


class CategoryStore(Mapping[str, str]):
    """Merged base + custom keyword table backed by a persistence port."""

    def __init__(
        self,
        base: Mapping[str, str],
        port: StatePort,
        *,
        custom: Mapping[str, str] | None = None,
    ) -> None:
        self._base = {normalize_keyword(k): v for k, v in base.items() if k.strip()}
        self._custom = {normalize_keyword(k): v for k, v in (custom or {}).items() if k.strip()}
        self._port = port

    @classmethod
    def load(cls, base: Mapping[str, str], port: StatePort) -> CategoryStore:
        """Build a store whose custom table is read from ``port``."""

        custom = _load_custom(port)
        _logger.debug("categories:loaded base=%d custom=%d", len(base), len(custom))
        return cls(base, port, custom=custom)

    # Mapping protocol over the merged view --------------------------------

    def __getitem__(self, keyword: str) -> str:
        key = normalize_keyword(keyword)
        if key in self._custom:
            return self._custom[key]
        return self._base[key]

    def __iter__(self) -> Iterator[str]:
        yield from self._base
        for k in self._custom:
            if k not in self._base:
                yield k

    def __len__(self) -> int:
        return len(self._base.keys() | self._custom.keys())

    # Views ----------------------------------------------------------------

    @property
    def base(self) -> Mapping[str, str]:
        return MappingProxyType(self._base)

    @property
    def custom(self) -> Mapping[str, str]:
        return MappingProxyType(self._custom)

    def merged(self) -> dict[str, str]:
        return {**self._base, **self._custom}

    def category_names(self) -> list[str]:
        """Sorted unique category names across both tables."""

        return sorted(set(self._base.values()) | set(self._custom.values()))

    # Mutation -------------------------------------------------------------

    def learn(self, keywords: Iterable[str], category: str) -> None:
        """Map every keyword to ``category`` and persist the custom table.

        Prior mappings for the same keyword are overwritten. Callers validate
        keywords first; see :func:`statement_sorter.learning.parse_keywords`.
        """

        updated = dict(self._custom)
        for kw in keywords:
            updated[normalize_keyword(kw)] = category
        self._port.save(CUSTOM_CATEGORIES, updated)
        self._custom = updated

    def reload(self) -> None:
        self._custom = _load_custom(self._port)


__all__ = [
    "CategoryStore",
    "load_base_categories",
    "normalize_keyword",
    "normalize_name",
]
