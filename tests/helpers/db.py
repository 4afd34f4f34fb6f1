"""DB helpers for tests: bootstrap a temporary SQLite database."""

from __future__ import annotations

from pathlib import Path

from db.client import create_schema, reset_engine


def bootstrap_sqlite_db(db_file: Path) -> str:
    """Create a SQLite database file, initialize schema, and return the URL.

    Using a file-backed SQLite DB ensures multiple SQLAlchemy connections share
    the same state (in-memory DBs are per-connection by default). Any engine
    left over from a previous test is disposed first.
    """

    url = f"sqlite+pysqlite:///{db_file}"
    db_file.parent.mkdir(parents=True, exist_ok=True)
    reset_engine()
    create_schema(database_url=url)
    return url
