"""Public API surface for the ``statement_sorter`` package.

Implementations live in ``statement_sorter.workflows.statement_flow`` (import
and reassignment orchestration) and the component modules; this module
re-exports the entry points an embedding application calls.
"""

from __future__ import annotations

from .categories import CategoryStore, load_base_categories
from .categorize import categorize_transactions, ordered_categories, summarize
from .ingest.detect import detect_profile
from .ingest.row_mapper import map_row, map_rows
from .learning import commit_keywords, parse_keywords, suggest_keywords
from .reassign import reassign
from .workflows.statement_flow import (
    ImportResult,
    ReassignResult,
    import_statement,
    import_statement_text,
    reassign_selection,
    restore_last_import,
    show_last_import,
)

__all__ = [
    "CategoryStore",
    "ImportResult",
    "ReassignResult",
    "categorize_transactions",
    "commit_keywords",
    "detect_profile",
    "import_statement",
    "import_statement_text",
    "load_base_categories",
    "map_row",
    "map_rows",
    "ordered_categories",
    "parse_keywords",
    "reassign",
    "reassign_selection",
    "restore_last_import",
    "show_last_import",
    "suggest_keywords",
    "summarize",
]
