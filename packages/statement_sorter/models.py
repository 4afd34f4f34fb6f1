"""Data models and type aliases for ``statement_sorter``.

``CanonicalTransaction`` lives in :mod:`statement_sorter.ctv`. This module
holds the layout tags, the grouped/summary shapes returned to callers, and
the Pydantic DTOs that validate persisted JSON records on load.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, RootModel, field_validator

from .ctv import CanonicalTransaction

# ---------------------------------------------------------------------------
# Reserved category names
# ---------------------------------------------------------------------------

INCOME = "Income"
UNCATEGORIZED = "Uncategorized"


class Profile(StrEnum):
    """Recognized CSV column layouts."""

    YOURBANK_NO_HEADER_5COLS = "YourBank_NoHeader_5Cols"
    USBANK_WITH_HEADERS = "USBank_WithHeaders"
    USBANK_NO_HEADER_BODY = "USBank_NoHeaderBody"
    UNKNOWN = "Unknown"


# ---------------------------------------------------------------------------
# Core collections
# ---------------------------------------------------------------------------

type RawRow = Sequence[str | None]
"""One tokenized CSV row: raw cell strings in column order."""

type CategoryGroups = dict[str, list[CanonicalTransaction]]
"""Category name → transactions in categorization order, then append order."""

type KeywordTable = Mapping[str, str]
"""Uppercase keyword → category name."""


@dataclass(frozen=True, slots=True)
class Summary:
    """Totals over every displayed transaction.

    Attributes
    ----------
    total_income:
        Sum of all positive amounts.
    total_expenses:
        Sum of all negative amounts (a non-positive number).
    net:
        ``total_income + total_expenses``.
    subtotals:
        Sum of amounts per category group.
    """

    total_income: float
    total_expenses: float
    net: float
    subtotals: dict[str, float] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# DTOs for persisted records
# ---------------------------------------------------------------------------


class SnapshotItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    idx: int
    date: str
    amount: float
    description: str

    def to_ctv(self) -> CanonicalTransaction:
        return CanonicalTransaction(
            idx=self.idx, date=self.date, amount=self.amount, description=self.description
        )


class TransactionSnapshot(RootModel[list[SnapshotItem]]):
    """The ``last-transactions`` record: the latest import, pre-categorization."""


class KeywordTableRecord(RootModel[dict[str, str]]):
    """A keyword → category JSON object (base table file or ``customCategories``).

    Keys are trimmed and uppercased; blank keys are dropped.
    """

    @field_validator("root")
    @classmethod
    def _uppercase_keys(cls, v: dict[str, str]) -> dict[str, str]:
        out: dict[str, str] = {}
        for k, cat in v.items():
            key = k.strip().upper()
            if key:
                out[key] = cat
        return out


__all__ = [
    "INCOME",
    "UNCATEGORIZED",
    "Profile",
    "RawRow",
    "CategoryGroups",
    "KeywordTable",
    "Summary",
    "SnapshotItem",
    "TransactionSnapshot",
    "KeywordTableRecord",
]
