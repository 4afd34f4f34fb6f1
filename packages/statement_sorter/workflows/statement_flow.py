"""Workflow orchestrators for importing statements and reassigning rows.

These compose ingest, categorization, keyword learning and reassignment
behind importable functions. State is explicit: callers pass the
:class:`CategoryStore` and the :class:`StatePort` into every call and keep
the returned groups for the next reassignment.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from os import PathLike

from pydantic import ValidationError

from ..categories import CategoryStore
from ..categorize import categorize_transactions, summarize
from ..ctv import CanonicalTransaction
from ..ingest.utils import load_ctv_from_text, read_csv_text
from ..learning import LearnResult, commit_keywords
from ..logging_setup import get_logger
from ..models import CategoryGroups, Profile, Summary, TransactionSnapshot
from ..persistence import LAST_TRANSACTIONS, StatePort
from ..reassign import reassign

_logger = get_logger("statement_sorter.workflows")


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome of an import (or a re-display of the last import).

    ``profile`` is ``None`` when the transactions came from the snapshot.
    """

    profile: Profile | None
    transactions: list[CanonicalTransaction]
    groups: CategoryGroups
    summary: Summary


@dataclass(frozen=True, slots=True)
class ReassignResult:
    groups: CategoryGroups
    summary: Summary
    learned: LearnResult


def import_statement_text(
    csv_text: str,
    *,
    store: CategoryStore,
    port: StatePort,
    on_progress: Callable[[str], None] | None = None,
) -> ImportResult:
    """CSV text → CTV → snapshot → category groups + summary.

    Raises :class:`~statement_sorter.errors.EmptyInput` before any state is
    written when the input holds no transaction rows.
    """

    loaded = load_ctv_from_text(csv_text)
    if on_progress:
        on_progress(
            f"Detected layout {loaded.profile.value}; {len(loaded.transactions)} transaction(s)."
        )

    # Full replace; the previous import is discarded without merging.
    port.save(LAST_TRANSACTIONS, [tx.to_json() for tx in loaded.transactions])

    groups = categorize_transactions(loaded.transactions, store.merged())
    return ImportResult(
        profile=loaded.profile,
        transactions=loaded.transactions,
        groups=groups,
        summary=summarize(groups),
    )


def import_statement(
    csv_path: str | PathLike[str],
    *,
    store: CategoryStore,
    port: StatePort,
    on_progress: Callable[[str], None] | None = None,
) -> ImportResult:
    """Read ``csv_path`` and run :func:`import_statement_text` on it."""

    return import_statement_text(
        read_csv_text(csv_path), store=store, port=port, on_progress=on_progress
    )


def restore_last_import(port: StatePort) -> list[CanonicalTransaction]:
    """Return the ``last-transactions`` snapshot, or ``[]`` when absent/invalid."""

    raw = port.load(LAST_TRANSACTIONS)
    if raw is None:
        return []
    try:
        snapshot = TransactionSnapshot.model_validate(raw)
    except ValidationError:
        _logger.warning("workflows:snapshot_invalid; ignoring stored record", exc_info=True)
        return []
    return [item.to_ctv() for item in snapshot.root]


def show_last_import(*, store: CategoryStore, port: StatePort) -> ImportResult | None:
    """Categorize the stored snapshot against the current keyword table."""

    transactions = restore_last_import(port)
    if not transactions:
        return None
    groups = categorize_transactions(transactions, store.merged())
    return ImportResult(
        profile=None, transactions=transactions, groups=groups, summary=summarize(groups)
    )


def reassign_selection(
    groups: CategoryGroups,
    selection: Sequence[CanonicalTransaction],
    category: str | None,
    keywords: str | None,
    *,
    store: CategoryStore,
    by_content: bool = False,
) -> ReassignResult:
    """Learn ``keywords`` for ``category`` and move ``selection`` there.

    Validation errors from :func:`commit_keywords` propagate before the store
    or the groups change.
    """

    learned = commit_keywords(store, selection, category, keywords)
    moved = reassign(groups, selection, learned.category, by_content=by_content)
    return ReassignResult(groups=moved, summary=summarize(moved), learned=learned)


__all__ = [
    "ImportResult",
    "ReassignResult",
    "import_statement",
    "import_statement_text",
    "reassign_selection",
    "restore_last_import",
    "show_last_import",
]
