"""Classify a sample row into one of the recognized CSV layouts.

Decision order (first match wins):

1. The first five cells equal ``date, transaction, name, memo, amount``
   (case-insensitive) → :attr:`Profile.USBANK_WITH_HEADERS`.
2. Cell 0 is ``M/D/YYYY`` and cell 2 is the literal ``*``
   → :attr:`Profile.YOURBANK_NO_HEADER_5COLS`.
3. Cell 0 is ``YYYY-MM-DD`` and the row has at least five cells
   → :attr:`Profile.USBANK_NO_HEADER_BODY`.
4. Anything else (including rows with fewer than three cells)
   → :attr:`Profile.UNKNOWN`.
"""

from __future__ import annotations

import re

from ..models import Profile, RawRow

USBANK_HEADER: tuple[str, ...] = ("date", "transaction", "name", "memo", "amount")

_US_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _unquote(cell: str | None) -> str:
    if cell is None:
        return ""
    # Tokenizers normally remove quoting; tolerate rows that kept it.
    return str(cell).strip().strip("\"'").strip()


def detect_profile(sample: RawRow) -> Profile:
    """Return the layout tag for ``sample``; never raises."""

    if len(sample) < 3:
        return Profile.UNKNOWN

    cells = [_unquote(sample[i]) if i < len(sample) else "" for i in range(5)]

    if tuple(c.lower() for c in cells) == USBANK_HEADER:
        return Profile.USBANK_WITH_HEADERS
    if _US_DATE_RE.match(cells[0]) and cells[2] == "*":
        return Profile.YOURBANK_NO_HEADER_5COLS
    if _ISO_DATE_RE.match(cells[0]) and len(sample) >= 5:
        return Profile.USBANK_NO_HEADER_BODY
    return Profile.UNKNOWN


__all__ = ["detect_profile", "USBANK_HEADER"]
