"""
Base Repository class providing common in-memory storage operations.
"""

from __future__ import annotations
from typing import Callable, Generic, List, Optional, Tuple, TypeVar
import logging
import threading

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Insertion-ordered in-memory store with common operations.

    The repository is the sole owner of its entities. Mutations and reads
    happen under a lock so the store can sit behind a threaded server.
    """

    entity_name = "entity"

    def __init__(self):
        self._items: List[T] = []
        self._lock = threading.Lock()

    def add(self, entity: T) -> T:
        """Append an entity and return it."""
        with self._lock:
            self._items.append(entity)
            size = len(self._items)
        logger.debug("Added %s (%d stored)", self.entity_name, size)
        return entity

    def list(self) -> Tuple[T, ...]:
        """All entities in insertion order, as a read-only snapshot."""
        with self._lock:
            return tuple(self._items)

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching ``predicate`` or None."""
        for entity in self.list():
            if predicate(entity):
                return entity
        return None

    def __len__(self) -> int:
        return self.count()

    def __iter__(self):
        return iter(self.list())
