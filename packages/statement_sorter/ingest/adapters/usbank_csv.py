"""Adapter for the U.S. Bank style export, with or without its header row.

CSV header (when present, matched case-insensitively):
``Date, Transaction, Name, Memo, Amount``

Mapping rules:
- ``date``: ``Date`` normalized to YYYY-MM-DD when recognizable
- ``amount``: ``Amount``
- ``description``: ``Name`` and ``Memo`` joined by a single space

The header row must be removed by the caller before mapping.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ...ctv import CanonicalTransaction
from ...models import RawRow
from ...normalizers import clean_desc, normalize_amount, normalize_date
from . import cell


def map_row(row: RawRow, idx: int) -> CanonicalTransaction:
    name_and_memo = f"{cell(row, 2)} {cell(row, 3)}".strip()
    return CanonicalTransaction(
        idx=idx,
        date=normalize_date(cell(row, 0)),
        amount=normalize_amount(cell(row, 4)),
        description=clean_desc(name_and_memo),
    )


def to_ctv(rows: Iterable[RawRow]) -> Iterator[CanonicalTransaction]:
    for idx, row in enumerate(rows):
        yield map_row(row, idx)
