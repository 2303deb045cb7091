import uuid

import pytest

from app.core.errors import DuplicateEmailError
from tests.helpers import create_employee


def test_create_assigns_id_and_timestamps(store):
    e = create_employee(store, "a@x.com", "Alice Smith")
    assert isinstance(e.id, uuid.UUID)
    assert e.status == "Active"
    assert e.created_at is not None
    assert e.updated_at is not None


def test_create_duplicate_email_raises(store):
    create_employee(store, "a@x.com", "Alice Smith")
    with pytest.raises(DuplicateEmailError):
        create_employee(store, "a@x.com", "Alice Clone")
    assert len(store.list_all()) == 1


def test_get_missing_returns_none(store):
    assert store.get(uuid.uuid4()) is None


def test_update_applies_only_given_fields(store):
    e = create_employee(store, "a@x.com", "Alice Smith", designation="Engineer")
    updated = store.update(e.id, {"designation": "Staff Engineer"})
    assert updated.designation == "Staff Engineer"
    assert updated.full_name == "Alice Smith"
    assert store.get(e.id).designation == "Staff Engineer"


def test_update_missing_returns_none(store):
    assert store.update(uuid.uuid4(), {"salary": 10}) is None


def test_update_duplicate_email_raises(store):
    create_employee(store, "a@x.com", "Alice Smith")
    bob = create_employee(store, "b@x.com", "Bob Jones")
    with pytest.raises(DuplicateEmailError):
        store.update(bob.id, {"email": "a@x.com"})
    assert store.get(bob.id).email == "b@x.com"


def test_delete(store):
    e = create_employee(store, "a@x.com", "Alice Smith")
    assert store.delete(e.id) is True
    assert store.get(e.id) is None
    assert store.delete(e.id) is False


def test_search_combines_filters(store):
    create_employee(store, "a@x.com", "Alice Smith", department="IT")
    create_employee(store, "w@x.com", "alice wonder", department="Sales")

    assert {e.email for e in store.search(name="ALICE")} == {"a@x.com", "w@x.com"}
    assert [e.email for e in store.search(name="alice", department="Sales")] == ["w@x.com"]
    assert store.search(department="HR") == []


def test_ping(store):
    store.ping()
