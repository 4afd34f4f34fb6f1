"""Shared SQLAlchemy models registry for the workspace database.

Currently includes the key/value state records used by ``statement_sorter``.
"""

from .state import Base, SsStateRecord

__all__ = [
    "Base",
    "SsStateRecord",
]
