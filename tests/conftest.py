"""Pytest configuration and fixtures."""

import pytest
from sqlalchemy.pool import StaticPool

from advocate_directory.data.fallback_advocates import load_fallback_advocates
from advocate_directory.database.advocate_repo import insert_advocates
from advocate_directory.database.client import StoreHandle
from advocate_directory.database.schema import create_all
from advocate_directory.listing.models import Advocate


def _in_memory_store() -> StoreHandle:
    # StaticPool keeps one connection so every session sees the same database
    return StoreHandle(
        "sqlite://",
        engine_options={
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        },
    )


@pytest.fixture
def empty_store():
    """Reachable store with the advocates table but no rows."""
    store = _in_memory_store()
    create_all(store.engine)
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def make_store(empty_store):
    """Fill the empty store with the given advocates, in order."""
    def _make(records):
        with empty_store.session() as session:
            insert_advocates(session, records)
            session.commit()
        return empty_store
    return _make


@pytest.fixture
def seeded_store(make_store):
    """Store holding the bundled dataset."""
    return make_store(load_fallback_advocates())


@pytest.fixture
def unreachable_store(tmp_path):
    """Store whose database file lives in a directory that does not exist."""
    store = StoreHandle(f"sqlite:///{tmp_path / 'missing' / 'advocates.db'}")
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def fallback_records():
    return load_fallback_advocates()


def make_advocate(**overrides) -> Advocate:
    values = {
        "first_name": "Test",
        "last_name": "Advocate",
        "city": "Springfield",
        "degree": "MD",
        "specialties": [],
        "years_of_experience": 5,
        "phone_number": 5550000000,
    }
    values.update(overrides)
    return Advocate(**values)


@pytest.fixture
def advocate_factory():
    return make_advocate
