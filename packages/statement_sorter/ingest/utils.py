"""Ingest utilities shared by the CLI and workflows.

Exposes a small CSV tokenizer (stdlib :mod:`csv`, RFC 4180 quoting) and the
two-phase loader that turns a statement export into CTV rows:

1. Tokenize a one-row preview and run :func:`detect_profile` on it.
2. Tokenize the whole input, drop the header row for
   :attr:`Profile.USBANK_WITH_HEADERS`, and map every row.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from ..ctv import CanonicalTransaction
from ..errors import EmptyInput
from ..logging_setup import get_logger
from ..models import Profile
from .detect import detect_profile
from .row_mapper import map_rows

_logger = get_logger("statement_sorter.ingest")


def read_csv_text(source: str | PathLike[str]) -> str:
    """Read a CSV file as UTF-8, dropping a leading byte-order mark."""

    return Path(source).read_text(encoding="utf-8-sig")


def tokenize_csv(
    csv_text: str,
    *,
    skip_empty_lines: bool = True,
    preview: int | None = None,
) -> list[list[str]]:
    """Split ``csv_text`` into rows of raw cell strings.

    Parameters
    ----------
    csv_text:
        Full CSV content. No header handling is performed; header rows come
        back as ordinary rows.
    skip_empty_lines:
        Drop rows whose cells are all blank (including whitespace-only lines).
    preview:
        When set, stop after this many (non-skipped) rows.
    """

    rows: list[list[str]] = []
    if preview is not None and preview <= 0:
        return rows
    with io.StringIO(csv_text, newline="") as f:
        for row in csv.reader(f):
            if skip_empty_lines and not any(c.strip() for c in row):
                continue
            rows.append(row)
            if preview is not None and len(rows) >= preview:
                break
    return rows


@dataclass(frozen=True, slots=True)
class LoadedStatement:
    profile: Profile
    transactions: list[CanonicalTransaction]


def load_ctv_from_text(csv_text: str) -> LoadedStatement:
    """Detect the layout of ``csv_text`` and return its CTV rows.

    Raises :class:`EmptyInput` when no transaction rows remain.
    """

    sample = tokenize_csv(csv_text, skip_empty_lines=True, preview=1)
    if not sample:
        raise EmptyInput("CSV contains no rows")
    profile = detect_profile(sample[0])

    rows = tokenize_csv(csv_text, skip_empty_lines=True)
    if profile is Profile.USBANK_WITH_HEADERS:
        rows = rows[1:]
    if not rows:
        raise EmptyInput("CSV contains a header row but no transactions")

    transactions = map_rows(profile, rows)
    _logger.info("ingest:loaded profile=%s rows=%d", profile.value, len(transactions))
    return LoadedStatement(profile=profile, transactions=transactions)


def load_ctv_from_csv(csv_path: str | PathLike[str]) -> LoadedStatement:
    """Read a statement export from disk and return its CTV rows."""

    return load_ctv_from_text(read_csv_text(csv_path))


__all__ = [
    "LoadedStatement",
    "load_ctv_from_csv",
    "load_ctv_from_text",
    "read_csv_text",
    "tokenize_csv",
]
