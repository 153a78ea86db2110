"""Repository functions for the saved pace set collection.

The whole collection lives under one key and every change is a
read-modify-write of that value. There is no concurrency control: two
overlapping writers can lose an update, which is acceptable for a single
user on a single device.
"""

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from pacer.errors import StorageFailureError
from pacer.pace_sets.store import KeyValueStore
from pacer.pace_sets.types import PaceSet

DEFAULT_STORAGE_KEY = "@savedPaceSets"

_collection_adapter = TypeAdapter(list[PaceSet])


class PaceSetRepository:
    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> list[PaceSet]:
        """Load the collection in stored order.

        Returns:
            List of pace sets, empty when the key is absent

        Raises:
            StorageFailureError: If the store fails or the value is malformed
        """
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            return _collection_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Stored pace sets under {self.key!r} are malformed: {e}")
            raise StorageFailureError("read", "stored pace sets are malformed") from e

    def load_newest_first(self) -> list[PaceSet]:
        return sorted(self.load(), key=lambda pace_set: pace_set.created_at, reverse=True)

    def find_by_name(self, name: str) -> PaceSet | None:
        """Find a set by name, ignoring case and surrounding whitespace."""
        for pace_set in self.load():
            if pace_set.matches_name(name):
                return pace_set
        return None

    def _write(self, pace_sets: list[PaceSet]) -> None:
        self.store.set(self.key, _collection_adapter.dump_json(pace_sets, by_alias=True).decode())

    def save(self, record: PaceSet) -> bool:
        """Append a pace set, or replace the one with the same id in place.

        Returns:
            True if an existing set was replaced, False if appended
        """
        pace_sets = self.load()
        for index, pace_set in enumerate(pace_sets):
            if pace_set.id == record.id:
                pace_sets[index] = record
                self._write(pace_sets)
                logger.info(f"Replaced pace set {record.id} ({record.name})")
                return True

        pace_sets.append(record)
        self._write(pace_sets)
        logger.info(f"Saved pace set {record.id} ({record.name})")
        return False

    def delete(self, pace_set_id: str) -> bool:
        """Delete a pace set by id.

        Returns:
            True if a set was removed, False if the id was unknown
        """
        pace_sets = self.load()
        remaining = [pace_set for pace_set in pace_sets if pace_set.id != pace_set_id]
        if len(remaining) == len(pace_sets):
            return False
        self._write(remaining)
        logger.info(f"Deleted pace set {pace_set_id}")
        return True
