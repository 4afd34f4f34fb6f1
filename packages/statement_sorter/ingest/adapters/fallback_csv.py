"""Best-effort adapter for layouts no profile recognizes.

Guesses date in column 0, amount in column 1 and builds the description from
columns 2-4. Nothing here raises; unexpected shapes produce zero amounts or
empty text rather than errors.
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
        description=clean_desc(" ".join((cell(row, 2), cell(row, 3), cell(row, 4)))),
    )


def to_ctv(rows: Iterable[RawRow]) -> Iterator[CanonicalTransaction]:
    for idx, row in enumerate(rows):
        yield map_row(row, idx)
