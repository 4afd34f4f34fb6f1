"""Pytest configuration for test isolation.

The engine persists its keyword table and last-import snapshot under a state
directory (default ``./.statement_sorter``). When tests run in the same
working tree, those files would leak learned keywords between tests, so an
autouse fixture points ``STATEMENT_SORTER_STATE_DIR`` at a per-test temporary
directory and clears ``DATABASE_URL`` so the JSON backend is used unless a
test opts into SQL explicitly.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from db.client import reset_engine
from statement_sorter import CategoryStore, MemoryStatePort
from tests.helpers.db import bootstrap_sqlite_db
from tests.helpers.factories import BASE_TABLE

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def _isolate_state_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    state_root = tmp_path / "state"
    state_root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("STATEMENT_SORTER_STATE_DIR", os.fspath(state_root))
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("STATEMENT_SORTER_BASE_CATEGORIES", raising=False)
    return state_root


@pytest.fixture
def port() -> MemoryStatePort:
    return MemoryStatePort()


@pytest.fixture
def store(port: MemoryStatePort) -> CategoryStore:
    return CategoryStore.load(BASE_TABLE, port)


@pytest.fixture
def sqlite_url(tmp_path: Path) -> Iterator[str]:
    url = bootstrap_sqlite_db(tmp_path / "state.db")
    yield url
    reset_engine()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR
