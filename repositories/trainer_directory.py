"""
Trainer directory repository.

Owns the trainer id sequence: ids are consumed when a trainer is
constructed, so a trainer built from ``directory.ids`` but never added still
uses up its id. Input rejected by validation does not.
"""

from __future__ import annotations
from typing import Optional

from domain.models.fitness_class import ClassRef
from domain.models.identity import IdSequence
from domain.models.trainer import Trainer
from domain.value_objects.money import Numeric
from repositories.base_repository import BaseRepository


class TrainerDirectory(BaseRepository[Trainer]):
    """Repository for trainers of both employment kinds."""

    entity_name = "trainer"

    def __init__(self, ids: IdSequence = None):
        super().__init__()
        self.ids = ids or IdSequence()

    def find_by_id(self, trainer_id: int) -> Optional[Trainer]:
        return self.find_first(lambda t: t.id == trainer_id)

    def create_permanent(
        self,
        name: str,
        email: str,
        specialization: ClassRef,
        monthly_salary: Numeric,
    ) -> Trainer:
        """Build a permanent trainer with the next id and store it."""
        trainer = Trainer.permanent(name, email, specialization, monthly_salary, ids=self.ids)
        return self.add(trainer)

    def create_external(
        self,
        name: str,
        email: str,
        specialization: ClassRef,
        company: str,
        hourly_rate: Numeric,
    ) -> Trainer:
        """Build an external trainer with the next id and store it."""
        trainer = Trainer.external(name, email, specialization, company, hourly_rate, ids=self.ids)
        return self.add(trainer)
