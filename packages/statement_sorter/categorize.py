"""Rule-based categorization of canonical transactions.

Algorithm
---------
1. Re-clean each description with :func:`strict_clean`.
2. Positive amounts are ``"Income"``; keyword rules are not consulted.
3. Otherwise keywords are tried longest first (ties broken alphabetically)
   as case-insensitive whole-word matches; the first hit decides the
   category. No hit means ``"Uncategorized"``.

Groups preserve input order. The keyword table is only read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import replace

from .ctv import CanonicalTransaction
from .models import INCOME, UNCATEGORIZED, CategoryGroups, Summary
from .normalizers import strict_clean

type _CompiledRule = tuple[re.Pattern[str], str]


def sorted_keywords(keywords: Iterable[str]) -> list[str]:
    """Return keywords by descending length, then lexical order."""

    return sorted(keywords, key=lambda k: (-len(k), k))


def compile_rules(table: Mapping[str, str]) -> list[_CompiledRule]:
    """Compile whole-word patterns in match order; blank keywords are skipped."""

    cleaned = {k.strip().upper(): v for k, v in table.items() if k.strip()}
    rules: list[_CompiledRule] = []
    for keyword in sorted_keywords(cleaned):
        pattern = re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
        rules.append((pattern, cleaned[keyword]))
    return rules


def match_category(description: str, rules: list[_CompiledRule]) -> str:
    for pattern, category in rules:
        if pattern.search(description):
            return category
    return UNCATEGORIZED


def categorize_transactions(
    transactions: Iterable[CanonicalTransaction],
    table: Mapping[str, str],
) -> CategoryGroups:
    """Group ``transactions`` by category using the merged keyword ``table``."""

    rules = compile_rules(table)
    groups: CategoryGroups = {}
    for tx in transactions:
        cleaned = replace(tx, description=strict_clean(tx.description))
        category = INCOME if cleaned.amount > 0 else match_category(cleaned.description, rules)
        groups.setdefault(category, []).append(cleaned)
    return groups


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def ordered_categories(groups: Mapping[str, object]) -> list[str]:
    """Alphabetical category order with ``Uncategorized`` last."""

    return sorted(groups, key=lambda c: (c == UNCATEGORIZED, c))


def numbered_rows(groups: CategoryGroups) -> list[tuple[int, str, CanonicalTransaction]]:
    """Flatten groups in display order as ``(row_number, category, tx)``.

    Row numbers start at 1 and are what interactive callers select by.
    """

    out: list[tuple[int, str, CanonicalTransaction]] = []
    for category in ordered_categories(groups):
        for tx in groups[category]:
            out.append((len(out) + 1, category, tx))
    return out


def summarize(groups: CategoryGroups) -> Summary:
    """Income, expense and net totals plus per-category subtotals."""

    total_income = 0.0
    total_expenses = 0.0
    subtotals: dict[str, float] = {}
    for category, items in groups.items():
        subtotal = 0.0
        for tx in items:
            subtotal += tx.amount
            if tx.amount > 0:
                total_income += tx.amount
            elif tx.amount < 0:
                total_expenses += tx.amount
        subtotals[category] = subtotal
    return Summary(
        total_income=total_income,
        total_expenses=total_expenses,
        net=total_income + total_expenses,
        subtotals=subtotals,
    )


__all__ = [
    "categorize_transactions",
    "compile_rules",
    "match_category",
    "numbered_rows",
    "ordered_categories",
    "sorted_keywords",
    "summarize",
]
