"""
Process-local table for in-memory repositories.

Used when DATA_STORE=memory and in tests. Rows are pydantic models keyed
by a caller-supplied function; they are copied on the way in and out so
callers never hold a live reference to stored state.
"""

import threading
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar("T", bound=BaseModel)


class InMemoryTable(Generic[T]):
    """A dict of rows guarded by a single lock."""

    def __init__(self, key: Callable[[T], Hashable]) -> None:
        self._key = key
        self._lock = threading.Lock()
        self._rows: dict[Hashable, T] = {}

    def all(self) -> list[T]:
        """Every row, in insertion order."""
        with self._lock:
            return [row.model_copy(deep=True) for row in self._rows.values()]

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            row = self._rows.get(key)
            return row.model_copy(deep=True) if row is not None else None

    def put(self, row: T) -> T:
        stored = row.model_copy(deep=True)
        with self._lock:
            self._rows[self._key(stored)] = stored
        return stored.model_copy(deep=True)

    def update(self, key: Hashable, changes: dict[str, Any]) -> Optional[T]:
        """Apply changes to a row. Returns None if the key is unknown."""
        with self._lock:
            current = self._rows.get(key)
            if current is None:
                return None
            updated = current.model_copy(update=changes, deep=True)
            self._rows[key] = updated
            return updated.model_copy(deep=True)

    def pop(self, key: Hashable) -> Optional[T]:
        with self._lock:
            return self._rows.pop(key, None)
