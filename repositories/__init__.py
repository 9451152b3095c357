"""
Repository layer for data access abstraction.

In-memory repositories that own the gym's entities, following the
Repository pattern so the services never touch storage details.
"""

from repositories.base_repository import BaseRepository
from repositories.class_catalog import ClassCatalog
from repositories.trainer_directory import TrainerDirectory
from repositories.subscription_ledger import SubscriptionLedger

__all__ = [
    "BaseRepository",
    "ClassCatalog",
    "TrainerDirectory",
    "SubscriptionLedger",
]
