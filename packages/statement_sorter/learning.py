"""Keyword learning from a user's manual reassignment.

Two independent calls so the input mechanism (terminal prompt, form, script)
stays outside the algorithm:

- :func:`suggest_keywords`: candidate phrases ranked by frequency.
- :func:`commit_keywords`: validate the caller's keyword string and write the
  surviving keywords to the store, persisting immediately.

Validation happens in full before the store is touched, so a rejected commit
leaves the keyword table unchanged.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .categories import CategoryStore, normalize_name
from .ctv import CanonicalTransaction
from .errors import InvalidCategoryName, InvalidSelection, NoValidKeywords
from .logging_setup import get_logger

SUGGESTION_LIMIT = 5
_PHRASE_TOKENS = 3
_MIN_PHRASE_LEN = 4
_MIN_KEYWORD_LEN = 3

_logger = get_logger("statement_sorter.learning")


@dataclass(frozen=True, slots=True)
class LearnResult:
    category: str
    keywords: tuple[str, ...]


def _phrase(description: str) -> str:
    return " ".join(description.split()[:_PHRASE_TOKENS])


def suggest_keywords(
    selection: Iterable[CanonicalTransaction], *, limit: int = SUGGESTION_LIMIT
) -> list[str]:
    """Return up to ``limit`` candidate keywords for ``selection``.

    Each transaction contributes the first one to three words of its
    description. Phrases shorter than four characters or made only of digits
    are skipped. Ties keep first-seen order.
    """

    counts: Counter[str] = Counter()
    for tx in selection:
        phrase = _phrase(tx.description)
        if len(phrase) >= _MIN_PHRASE_LEN and not phrase.isdigit():
            counts[phrase] += 1
    return [phrase for phrase, _ in counts.most_common(limit)]


def parse_keywords(raw: str | None) -> list[str]:
    """Split a comma-separated keyword string into uppercase keywords.

    Entries shorter than three characters or made only of digits are dropped;
    duplicates keep their first position. Raises :class:`NoValidKeywords` when
    nothing survives.
    """

    keywords: list[str] = []
    for part in (raw or "").split(","):
        kw = part.strip().upper()
        if len(kw) < _MIN_KEYWORD_LEN or kw.isdigit() or kw in keywords:
            continue
        keywords.append(kw)
    if not keywords:
        raise NoValidKeywords(f"No usable keywords in {raw!r}")
    return keywords


def resolve_category(category: str | None) -> str:
    """Normalize a target category name; empty names are rejected."""

    name = normalize_name(category or "")
    if not name:
        raise InvalidCategoryName("Category name cannot be empty")
    return name


def commit_keywords(
    store: CategoryStore,
    selection: Sequence[CanonicalTransaction],
    category: str | None,
    keywords: str | None,
) -> LearnResult:
    """Validate and persist ``keywords`` → ``category`` for ``selection``.

    Raises
    ------
    InvalidSelection
        ``selection`` is empty.
    InvalidCategoryName
        ``category`` is empty after trimming.
    NoValidKeywords
        ``keywords`` contains no usable entry.
    """

    if not selection:
        raise InvalidSelection("Select at least one transaction")
    target = resolve_category(category)
    parsed = parse_keywords(keywords)

    store.learn(parsed, target)
    _logger.info("learning:committed category=%s keywords=%s", target, ",".join(parsed))
    return LearnResult(category=target, keywords=tuple(parsed))


__all__ = [
    "LearnResult",
    "SUGGESTION_LIMIT",
    "commit_keywords",
    "parse_keywords",
    "resolve_category",
    "suggest_keywords",
]
