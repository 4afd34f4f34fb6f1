"""Adapter for the headerless five-column "YourBank" export.

Columns (no header row):
``Date, Amount, *, <unused>, Description``

The third column always holds a literal ``*``; the fourth is usually empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ...ctv import CanonicalTransaction
from ...models import RawRow
from ...normalizers import clean_desc, normalize_amount, normalize_date
from . import cell


def map_row(row: RawRow, idx: int) -> CanonicalTransaction:
    return CanonicalTransaction(
        idx=idx,
        date=normalize_date(cell(row, 0)),
        amount=normalize_amount(cell(row, 1)),
        description=clean_desc(cell(row, 4)),
    )


def to_ctv(rows: Iterable[RawRow]) -> Iterator[CanonicalTransaction]:
    for idx, row in enumerate(rows):
        yield map_row(row, idx)
