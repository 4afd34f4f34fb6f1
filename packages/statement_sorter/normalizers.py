"""Cell normalizers for amount, date and description fields.

None of these functions raise. Missing or malformed input degrades to a safe
default (``0.0`` for amounts, ``""`` for text) so short or ragged rows never
abort an import.

Description cleaning happens in two passes:

- :func:`clean_desc` runs at import time (boilerplate removal, whitespace
  collapse, uppercase).
- :func:`strict_clean` runs at categorization time and additionally drops
  every character outside ``A-Z``, ``0-9`` and space.
"""

from __future__ import annotations

import math
import re

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Card-network boilerplate some banks prepend to purchase descriptions.
_AUTH_PURCHASE_RE = re.compile(r"PURCHASE AUTHORIZED ON \d{2}/\d{2}", re.IGNORECASE)
_CARD_NUMBER_RE = re.compile(r"CARD \d+", re.IGNORECASE)
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_NON_KEYWORD_CHARS_RE = re.compile(r"[^A-Z0-9 ]")

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------


def normalize_amount(raw: str | None) -> float:
    """Parse a money cell into a signed float.

    - ``None`` and unparsable text (including ``""``) yield ``0.0``.
    - Commas and ``$`` are removed anywhere in the value.
    - A value fully wrapped in parentheses is negative regardless of any sign
      inside the parentheses (accounting notation).
    """

    if raw is None:
        return 0.0
    s = str(raw).replace(",", "").replace("$", "").strip()
    negative = False
    if len(s) >= 2 and s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1].strip()
    try:
        value = float(s)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return -abs(value) if negative else value


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def normalize_date(raw: str | None) -> str:
    """Rewrite ``M/D/YYYY`` to ``YYYY-MM-DD``; pass anything else through.

    Recognized shapes are matched after trimming; anything else is returned
    exactly as given. No calendar validation is performed: ``13/45/2024``
    becomes ``2024-13-45``, and ``" N/A "`` stays ``" N/A "``.
    """

    if raw is None:
        return ""
    raw = str(raw)
    s = raw.strip()
    if _ISO_DATE_RE.match(s):
        return s
    m = _US_DATE_RE.match(s)
    if m is None:
        return raw
    month, day, year = m.groups()
    return f"{year}-{int(month):02d}-{int(day):02d}"


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------


def _strip_boilerplate(text: str) -> str:
    text = _AUTH_PURCHASE_RE.sub("", text)
    return _CARD_NUMBER_RE.sub("", text)


def clean_desc(raw: str | None) -> str:
    """First cleaning pass applied when a row is mapped."""

    if raw is None:
        return ""
    text = _strip_boilerplate(str(raw))
    text = _MULTI_SPACE_RE.sub(" ", text).strip()
    return text.upper()


def _strict_once(text: str) -> str:
    text = _strip_boilerplate(text)
    text = _MULTI_SPACE_RE.sub(" ", text).upper()
    text = _NON_KEYWORD_CHARS_RE.sub("", text)
    return _MULTI_SPACE_RE.sub(" ", text).strip()


def strict_clean(raw: str | None) -> str:
    """Second, stricter cleaning pass used before keyword matching.

    Dropping punctuation can expose new boilerplate (``CARD #1234`` becomes
    ``CARD 1234``) or new double spaces, so the pass repeats until the text is
    stable. Re-running it on its own output returns the same string.
    """

    if raw is None:
        return ""
    text = str(raw)
    while True:
        cleaned = _strict_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


__all__ = [
    "normalize_amount",
    "normalize_date",
    "clean_desc",
    "strict_clean",
]
