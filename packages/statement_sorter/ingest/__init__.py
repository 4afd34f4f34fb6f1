"""CSV ingest: tokenizing, layout detection and row → CTV mapping."""

from .detect import detect_profile
from .row_mapper import map_row, map_rows
from .utils import load_ctv_from_csv, tokenize_csv

__all__ = [
    "detect_profile",
    "map_row",
    "map_rows",
    "load_ctv_from_csv",
    "tokenize_csv",
]
