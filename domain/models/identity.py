"""
Sequential identifier generation.

Each repository owns one sequence, so ids are scoped to that repository's
lifetime and every entity type counts independently.
"""

import threading


class IdSequence:
    """Monotonic integer id generator starting at ``start``."""

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Consume and return the next id."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next call to ``next_id`` will hand out."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"IdSequence(next={self._next})"
