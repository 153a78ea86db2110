"""Tests for the pace set repository over a key-value store.

The whole collection is one JSON value under one key.
"""

import json
from datetime import UTC, datetime, timedelta

import pytest

from pacer.errors import StorageFailureError
from pacer.pace_sets.builder import build_record
from pacer.pace_sets.repository import DEFAULT_STORAGE_KEY


@pytest.fixture
def make_record(olympic_solution):
    base = datetime(2026, 6, 1, 6, 0, tzinfo=UTC)

    def _make(name: str, minutes_later: int = 0, existing=None, total_s: int = 8610):
        return build_record(
            name,
            olympic_solution.snapshot(),
            "02:23:30" if total_s == 8610 else "03:00:00",
            total_s,
            existing=existing,
            now=base + timedelta(minutes=minutes_later),
        )

    return _make


def test_absent_key_is_empty_collection(repository):
    assert repository.load() == []


def test_save_appends_and_serializes_whole_collection(repository, memory_store, make_record):
    repository.save(make_record("First"))
    repository.save(make_record("Second", 5))

    stored = json.loads(memory_store.get(DEFAULT_STORAGE_KEY))
    assert [item["name"] for item in stored] == ["First", "Second"]
    assert stored[0]["totalTime"] == "02:23:30"
    assert stored[0]["totalDurationS"] == 8610
    assert stored[0]["startTime"] == "07:30"
    assert "createdAt" in stored[0]
    assert stored[0]["bike"]["paceOrSpeed"] == "36.92"
    assert "pace_or_speed" not in stored[0]["swim"]


def test_save_replaces_same_id_in_place(repository, make_record):
    first = make_record("First")
    repository.save(first)
    repository.save(make_record("Second", 5))

    replaced = repository.save(make_record("first", 10, existing=first, total_s=10800))

    pace_sets = repository.load()
    assert replaced is True
    assert len(pace_sets) == 2
    assert pace_sets[0].id == first.id
    assert pace_sets[0].total_time == "03:00:00"
    assert pace_sets[1].name == "Second"


def test_load_round_trips_records(repository, make_record):
    record = make_record("Olympic")
    repository.save(record)

    assert repository.load() == [record]


def test_load_newest_first(repository, make_record):
    repository.save(make_record("Oldest", 0))
    repository.save(make_record("Newest", 20))
    repository.save(make_record("Middle", 10))

    assert [pace_set.name for pace_set in repository.load_newest_first()] == ["Newest", "Middle", "Oldest"]


def test_find_by_name_ignores_case(repository, make_record):
    record = make_record("Ironman Frankfurt")
    repository.save(record)

    assert repository.find_by_name("ironman FRANKFURT ").id == record.id
    assert repository.find_by_name("Roth") is None


def test_delete(repository, make_record):
    keep = make_record("Keep")
    drop = make_record("Drop", 5)
    repository.save(keep)
    repository.save(drop)

    assert repository.delete(drop.id) is True
    assert repository.delete("unknown") is False
    assert [pace_set.id for pace_set in repository.load()] == [keep.id]


@pytest.mark.parametrize("payload", ["not json", '{"id": 1}', '[{"name": "missing fields"}]'])
def test_malformed_payload_is_storage_failure(repository, memory_store, payload):
    memory_store.set(DEFAULT_STORAGE_KEY, payload)

    with pytest.raises(StorageFailureError) as exc_info:
        repository.load()

    assert exc_info.value.operation == "read"
