"""Per-layout row adapters.

Each adapter exposes ``map_row(row, idx) -> CanonicalTransaction`` and a
``to_ctv(rows)`` iterator. Cells beyond the end of a short row read as empty.
"""

from __future__ import annotations

from ...models import RawRow


def cell(row: RawRow, i: int) -> str:
    """Return cell ``i`` of ``row`` as a string; absent cells are ``""``."""

    if i >= len(row):
        return ""
    value = row[i]
    return "" if value is None else str(value)


__all__ = ["cell"]
