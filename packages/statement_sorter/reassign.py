"""Move transactions between category groups after keyword learning.

Identity
--------
By default a transaction is identified by its import-time ``idx``. With
``by_content=True`` the (date, description) pair is used for matching
instead; two distinct transactions sharing both fields are then
indistinguishable and move together.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .ctv import CanonicalTransaction
from .models import CategoryGroups


def _identity(tx: CanonicalTransaction, by_content: bool) -> object:
    return tx.content_key if by_content else tx.idx


def reassign(
    groups: Mapping[str, list[CanonicalTransaction]],
    selection: Iterable[CanonicalTransaction],
    target: str,
    *,
    by_content: bool = False,
) -> CategoryGroups:
    """Return new groups with ``selection`` moved under ``target``.

    Matching entries are removed from every other group and appended to
    ``target`` (created when absent) in selection order; entries already in
    ``target`` are not appended twice. Groups left empty are dropped. The
    input mapping is not modified.
    """

    selected = list(selection)
    keys = {_identity(tx, by_content) for tx in selected}

    out: CategoryGroups = {}
    displaced: list[CanonicalTransaction] = []
    for category, items in groups.items():
        if category == target:
            out[category] = list(items)
            continue
        kept: list[CanonicalTransaction] = []
        for tx in items:
            (displaced if _identity(tx, by_content) in keys else kept).append(tx)
        if kept:
            out[category] = kept

    bucket = out.setdefault(target, [])
    present = {tx.idx for tx in bucket}
    for tx in [*selected, *displaced]:
        if tx.idx in present:
            continue
        bucket.append(tx)
        present.add(tx.idx)
    return out


__all__ = ["reassign"]
