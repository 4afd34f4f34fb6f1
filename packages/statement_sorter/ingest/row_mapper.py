"""Map raw rows to canonical transactions for a detected layout."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..ctv import CanonicalTransaction
from ..models import Profile, RawRow
from .adapters import fallback_csv, usbank_csv, yourbank_csv

_ROW_MAPPERS: dict[Profile, Callable[[RawRow, int], CanonicalTransaction]] = {
    Profile.YOURBANK_NO_HEADER_5COLS: yourbank_csv.map_row,
    Profile.USBANK_WITH_HEADERS: usbank_csv.map_row,
    Profile.USBANK_NO_HEADER_BODY: usbank_csv.map_row,
    Profile.UNKNOWN: fallback_csv.map_row,
}


def map_row(profile: Profile, row: RawRow, idx: int = 0) -> CanonicalTransaction:
    """Map one row under ``profile``; ``idx`` becomes the transaction identity."""

    return _ROW_MAPPERS[Profile(profile)](row, idx)


def map_rows(profile: Profile, rows: Iterable[RawRow]) -> list[CanonicalTransaction]:
    """Map every row in order. Indices run ``0..N-1`` over ``rows``.

    For :attr:`Profile.USBANK_WITH_HEADERS` the header row must already be
    excluded from ``rows``.
    """

    mapper = _ROW_MAPPERS[Profile(profile)]
    return [mapper(row, idx) for idx, row in enumerate(rows)]


__all__ = ["map_row", "map_rows"]
