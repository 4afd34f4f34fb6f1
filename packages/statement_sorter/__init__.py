"""Public interface for the ``statement_sorter`` package.

This module exposes the package's API functions and public models/types as the
stable import surface. There is no runtime logic here, only symbol re-exports.
"""

from .api import (
    CategoryStore,
    ImportResult,
    ReassignResult,
    categorize_transactions,
    commit_keywords,
    detect_profile,
    import_statement,
    import_statement_text,
    load_base_categories,
    map_row,
    map_rows,
    ordered_categories,
    parse_keywords,
    reassign,
    reassign_selection,
    restore_last_import,
    show_last_import,
    suggest_keywords,
    summarize,
)
from .ctv import CanonicalTransaction
from .errors import (
    EmptyInput,
    InvalidCategoryName,
    InvalidSelection,
    NoValidKeywords,
    StatementSorterError,
)
from .models import INCOME, UNCATEGORIZED, CategoryGroups, Profile, Summary
from .normalizers import clean_desc, normalize_amount, normalize_date, strict_clean
from .persistence import JsonFileStatePort, MemoryStatePort, SqlStatePort, StatePort

__all__ = [
    # API
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
    # Normalizers
    "clean_desc",
    "normalize_amount",
    "normalize_date",
    "strict_clean",
    # Models / types
    "CanonicalTransaction",
    "CategoryGroups",
    "CategoryStore",
    "ImportResult",
    "ReassignResult",
    "Profile",
    "Summary",
    "INCOME",
    "UNCATEGORIZED",
    # Persistence
    "StatePort",
    "MemoryStatePort",
    "JsonFileStatePort",
    "SqlStatePort",
    # Errors
    "StatementSorterError",
    "EmptyInput",
    "InvalidSelection",
    "InvalidCategoryName",
    "NoValidKeywords",
]
