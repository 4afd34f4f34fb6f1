"""Error taxonomy for import and keyword learning.

Normalization never raises; malformed cells degrade to safe defaults. The
classes below are the only rejections surfaced to callers, and each is raised
before any state is mutated.
"""

from __future__ import annotations


class StatementSorterError(ValueError):
    """Base class for user-facing rejections."""


class EmptyInput(StatementSorterError):
    """The CSV produced no transaction rows."""


class InvalidSelection(StatementSorterError):
    """No transactions were selected for reassignment."""


class InvalidCategoryName(StatementSorterError):
    """The target category name is empty after trimming."""


class NoValidKeywords(StatementSorterError):
    """Every supplied keyword was filtered out (too short or all digits)."""


__all__ = [
    "StatementSorterError",
    "EmptyInput",
    "InvalidSelection",
    "InvalidCategoryName",
    "NoValidKeywords",
]
