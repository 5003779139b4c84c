"""Shared fixtures: a temporary database, a test client and record stores."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from bank_api.app.core.config import settings
from bank_api.app.core.db import init_db
from bank_api.app.main import app
from bank_api.app.schemas.branch import Branch
from bank_api.app.services.entity_kinds import BRANCH
from bank_api.app.services.record_store import RecordStore, open_record_store


@pytest.fixture()
def database(tmp_path, monkeypatch):
    """Point the application at an empty, migrated SQLite file."""
    db_path = tmp_path / "bank.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture()
def client(database) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def branch_store(database) -> Iterator[RecordStore]:
    with open_record_store(BRANCH) as store:
        yield store


@pytest.fixture()
def add_branch(database):
    """Insert and commit a branch through a separate connection."""

    def _add(name: str, **fields) -> Branch:
        with open_record_store(BRANCH) as store:
            stored = store.add_or_update(Branch(name=name, **fields))
            store.save_changes()
        return stored

    return _add
