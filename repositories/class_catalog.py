"""
Class catalog repository.

Stores fitness class definitions. Duplicate names are accepted and kept as
separate entries; lookups return the first match.
"""

from __future__ import annotations
from typing import List, Optional

from domain.models.fitness_class import FitnessClass
from repositories.base_repository import BaseRepository


class ClassCatalog(BaseRepository[FitnessClass]):
    """Repository for fitness class offerings."""

    entity_name = "fitness class"

    def find_by_name(self, name: Optional[str]) -> Optional[FitnessClass]:
        """Case-insensitive exact match on class name."""
        if name is None:
            return None
        return self.find_first(lambda c: c.matches(name))

    def names(self) -> List[str]:
        return [c.name for c in self.list()]
