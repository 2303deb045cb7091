import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.employee_store import EmployeeStore, get_store

# One in-memory database shared by every connection of the pool
test_store = EmployeeStore.from_url("sqlite+pysqlite:///:memory:", poolclass=StaticPool)


@pytest.fixture()
def store():
    """Fresh employees table per test."""
    test_store.create_schema()
    try:
        yield test_store
    finally:
        test_store.drop_schema()


@pytest.fixture(autouse=True)
def override_get_store(store):
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()
