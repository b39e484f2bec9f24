"""
pytest configuration shared by the test modules.

Every test gets its own SQLite file under ``tmp_path`` with the
migrations applied, so tests never see each other's pets.
"""
import pytest
from fastapi.testclient import TestClient

from pets_api.app.core.config import settings
from pets_api.app.core.db import init_db
from pets_api.app.core.storage import SQLiteStorage
from pets_api.app.services.pet_provider import PetProvider
from pets_api.app.services.uri_matcher import build_pet_matcher


class RecordingStorage(SQLiteStorage):
    """SQLite storage that remembers which operations were issued."""

    def __init__(self):
        self.calls = []

    def query_rows(self, *args, **kwargs):
        self.calls.append("query_rows")
        return super().query_rows(*args, **kwargs)

    def insert_row(self, *args, **kwargs):
        self.calls.append("insert_row")
        return super().insert_row(*args, **kwargs)

    def update_rows(self, *args, **kwargs):
        self.calls.append("update_rows")
        return super().update_rows(*args, **kwargs)

    def delete_rows(self, *args, **kwargs):
        self.calls.append("delete_rows")
        return super().delete_rows(*args, **kwargs)


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application at a fresh database file."""
    path = tmp_path / "pets_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def storage(db_path):
    return RecordingStorage()


@pytest.fixture
def provider(storage):
    return PetProvider(build_pet_matcher(), storage)


@pytest.fixture
def client(db_path):
    """HTTP client bound to the application, backed by the test database."""
    from pets_api.app.main import app
    return TestClient(app)


@pytest.fixture
def toto():
    return {"name": "Toto", "breed": "Terrier", "gender": 1, "weight": 7}
