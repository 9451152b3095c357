"""
Trainers-by-class report.

Groups the directory's trainers under the catalog's class names. Every
catalog class gets a group (possibly empty), trainers without a
specialization go under ``"Unassigned"``, and a specialization that is no
longer in the catalog gets a group of its own. Groups are ordered by name.
"""

from __future__ import annotations
from typing import Dict, List
import logging

from domain.models.trainer import Trainer
from repositories.class_catalog import ClassCatalog
from repositories.trainer_directory import TrainerDirectory
from shared.constants import UNASSIGNED_GROUP

logger = logging.getLogger(__name__)

TrainerReport = Dict[str, List[Trainer]]


class ReportBuilder:
    """Read-only aggregation over the catalog and the trainer directory."""

    def __init__(self, unassigned_label: str = UNASSIGNED_GROUP):
        self.unassigned_label = unassigned_label

    def build_report(self, catalog: ClassCatalog, directory: TrainerDirectory) -> TrainerReport:
        groups: Dict[str, List[Trainer]] = {name: [] for name in catalog.names()}
        if self.unassigned_label in groups:
            logger.warning(
                "Class %r shares its name with the unassigned group; their trainers are merged",
                self.unassigned_label,
            )
        groups.setdefault(self.unassigned_label, [])

        orphaned = 0
        for trainer in directory.list():
            if trainer.specialization is None:
                key = self.unassigned_label
            else:
                fitness_class = catalog.find_by_name(trainer.specialization)
                if fitness_class is not None:
                    key = fitness_class.name
                else:
                    key = trainer.specialization
                    orphaned += 1
            groups.setdefault(key, []).append(trainer)

        if orphaned:
            logger.warning("%d trainer(s) reference classes missing from the catalog", orphaned)

        return {key: groups[key] for key in sorted(groups)}


def build_report(catalog: ClassCatalog, directory: TrainerDirectory) -> TrainerReport:
    return ReportBuilder().build_report(catalog, directory)
