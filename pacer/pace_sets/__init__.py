"""Saved pace sets - record building, key-value persistence and the list service."""

from pacer.pace_sets.builder import build_record, validate_record_inputs
from pacer.pace_sets.repository import DEFAULT_STORAGE_KEY, PaceSetRepository
from pacer.pace_sets.service import DeleteOutcome, PaceSetService, SaveOutcome
from pacer.pace_sets.store import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore
from pacer.pace_sets.types import PaceSet

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "DeleteOutcome",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "PaceSet",
    "PaceSetRepository",
    "PaceSetService",
    "SaveOutcome",
    "SqlKeyValueStore",
    "build_record",
    "validate_record_inputs",
]
