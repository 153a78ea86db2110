"""Tests for the key-value stores."""

import pytest
from sqlalchemy.exc import OperationalError

from pacer.errors import StorageFailureError
from pacer.pace_sets import store as store_module
from pacer.pace_sets.store import InMemoryKeyValueStore, SqlKeyValueStore


def test_in_memory_store_get_set():
    store = InMemoryKeyValueStore()

    assert store.get("@savedPaceSets") is None
    store.set("@savedPaceSets", "[]")
    assert store.get("@savedPaceSets") == "[]"


def test_sql_store_replaces_whole_value(sqlite_url):
    store = SqlKeyValueStore(sqlite_url)

    assert store.get("@savedPaceSets") is None
    store.set("@savedPaceSets", '[{"a": 1}]')
    store.set("@savedPaceSets", "[]")

    assert store.get("@savedPaceSets") == "[]"


def test_sql_store_persists_across_instances(sqlite_url):
    SqlKeyValueStore(sqlite_url).set("key", "value")

    assert SqlKeyValueStore(sqlite_url).get("key") == "value"


def test_sql_store_wraps_database_errors(sqlite_url, monkeypatch):
    """Test that SQLAlchemy errors surface as StorageFailureError."""

    def broken_session(_database_url):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store_module, "get_session", broken_session)
    store = SqlKeyValueStore(sqlite_url)

    with pytest.raises(StorageFailureError) as read_error:
        store.get("key")
    with pytest.raises(StorageFailureError) as write_error:
        store.set("key", "value")

    assert read_error.value.operation == "read"
    assert write_error.value.operation == "write"
