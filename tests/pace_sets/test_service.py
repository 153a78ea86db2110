"""Tests for the pace set service.

Tests cover:
- save with and without a name clash
- overwrite only after explicit confirmation, keeping the id
- storage failures producing one alert and no state change
- delete confirmation and delete
"""

from datetime import UTC, datetime, timedelta

from pacer.errors import StorageFailureError
from pacer.pace_sets.builder import build_record
from pacer.pace_sets.repository import DEFAULT_STORAGE_KEY, PaceSetRepository
from pacer.pace_sets.service import PaceSetService
from pacer.pace_sets.store import InMemoryKeyValueStore
from pacer.pacing.solver import solve_form
from pacer.pacing.types import DisciplineFields, RaceForm


class FailingWriteStore(InMemoryKeyValueStore):
    def set(self, key: str, value: str) -> None:
        raise StorageFailureError("write", "disk full")


class FailingReadStore(InMemoryKeyValueStore):
    def get(self, key: str) -> str | None:
        raise StorageFailureError("read", "database locked")


def test_save_creates_pace_set(service, olympic_solution):
    outcome = service.save("Olympic", olympic_solution)

    assert outcome.status == "created"
    assert outcome.saved
    assert outcome.pace_set.total_time == "02:23:30"
    assert [pace_set.name for pace_set in service.pace_sets] == ["Olympic"]


def test_name_clash_requires_confirmation(service, memory_store, olympic_solution):
    """Test that an unconfirmed clash leaves the stored collection unchanged."""
    first = service.save("Olympic", olympic_solution).pace_set
    stored_before = memory_store.get(DEFAULT_STORAGE_KEY)

    outcome = service.save("OLYMPIC", olympic_solution)

    assert outcome.status == "conflict"
    assert outcome.pace_set.id == first.id
    assert outcome.alert.action_labels() == ["Cancel", "Replace"]
    assert memory_store.get(DEFAULT_STORAGE_KEY) == stored_before


def test_confirmed_overwrite_keeps_id(service, repository, olympic_solution):
    first = service.save("Olympic", olympic_solution).pace_set
    faster = solve_form(RaceForm(run=DisciplineFields(distance="10000", time="45:00")))

    outcome = service.save("olympic", faster, confirm_overwrite=True)

    stored = repository.load()
    assert outcome.status == "replaced"
    assert len(stored) == 1
    assert stored[0].id == first.id
    assert stored[0].name == "olympic"
    assert stored[0].total_time == "45:00"
    assert len(service.pace_sets) == 1


def test_blank_name_is_invalid(service, olympic_solution):
    outcome = service.save("   ", olympic_solution)

    assert outcome.status == "invalid"
    assert "name" in outcome.alert.message


def test_nothing_to_save_without_total(service):
    outcome = service.save("Empty", solve_form(RaceForm.cleared()))

    assert outcome.status == "invalid"
    assert outcome.alert.message == "Calculate a total time before saving."


def test_write_failure_leaves_state_unchanged(olympic_solution):
    service = PaceSetService(PaceSetRepository(FailingWriteStore()))

    outcome = service.save("Olympic", olympic_solution)

    assert outcome.status == "failed"
    assert outcome.alert.title == "Error"
    assert service.pace_sets == []


def test_read_failure_on_refresh_returns_alert(olympic_solution):
    service = PaceSetService(PaceSetRepository(FailingReadStore()))

    alert = service.refresh()

    assert alert is not None
    assert alert.message == "Loading saved pace sets failed."
    assert service.pace_sets == []


def test_refresh_lists_newest_first(service, repository, olympic_solution):
    base = datetime(2026, 6, 1, 6, 0, tzinfo=UTC)
    for minutes, name in [(0, "First"), (30, "Second")]:
        repository.save(
            build_record(name, olympic_solution.snapshot(), "02:23:30", 8610, now=base + timedelta(minutes=minutes))
        )

    assert service.refresh() is None
    assert [pace_set.name for pace_set in service.pace_sets] == ["Second", "First"]


def test_request_delete_confirmation(service, olympic_solution):
    pace_set = service.save("Olympic", olympic_solution).pace_set

    alert = service.request_delete(pace_set.id)

    assert "Olympic" in alert.message
    assert [choice.style for choice in alert.choices] == ["cancel", "destructive"]


def test_delete(service, repository, olympic_solution):
    pace_set = service.save("Olympic", olympic_solution).pace_set

    outcome = service.delete(pace_set.id)

    assert outcome.deleted
    assert outcome.alert.title == "Success"
    assert service.pace_sets == []
    assert repository.load() == []


def test_delete_unknown_id(service):
    outcome = service.delete("missing")

    assert not outcome.deleted
