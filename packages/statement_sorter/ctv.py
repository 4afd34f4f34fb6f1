"""Canonical Transaction View (CTV) record.

Field order (exact):
    - idx: integer (0-based position within the imported row set after the
      header row, when present, has been dropped). Assigned once at import and
      used as the stable identity of the transaction.
    - date: string (YYYY-MM-DD when the source date was recognized, otherwise
      the source text unchanged; empty when absent)
    - amount: float (signed; income positive, spending negative)
    - description: string (cleaned, uppercase)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CanonicalTransaction:
    """A single canonicalized transaction row.

    Instances are never mutated. The categorizer produces a copy with a
    stricter description via :func:`dataclasses.replace`.
    """

    idx: int
    date: str
    amount: float
    description: str

    def to_json(self) -> dict[str, Any]:
        return {
            "idx": self.idx,
            "date": self.date,
            "amount": self.amount,
            "description": self.description,
        }

    @property
    def content_key(self) -> tuple[str, str]:
        """(date, description) pair used by content-based matching."""

        return (self.date, self.description)


__all__ = ["CanonicalTransaction"]
