"""Key-value stores holding whole serialized values.

get returns the last full write or None; set replaces the whole value.
"""

from typing import Protocol

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from pacer.db.models import KeyValueEntry
from pacer.db.session import get_session
from pacer.errors import StorageFailureError


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Dictionary-backed store, for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class SqlKeyValueStore:
    """SQLAlchemy-backed store using the kv_entries table."""

    def __init__(self, database_url: str):
        self.database_url = database_url

    def get(self, key: str) -> str | None:
        try:
            with get_session(self.database_url) as db:
                entry = db.get(KeyValueEntry, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read key {key!r}: {e}")
            raise StorageFailureError("read", str(e)) from e

    def set(self, key: str, value: str) -> None:
        try:
            with get_session(self.database_url) as db:
                entry = db.get(KeyValueEntry, key)
                if entry is None:
                    db.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as e:
            logger.error(f"Failed to write key {key!r}: {e}")
            raise StorageFailureError("write", str(e)) from e
        logger.debug(f"Wrote {len(value)} bytes to key {key!r}")
