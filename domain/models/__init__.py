"""
Domain models - Pure business entities without infrastructure dependencies.

These models represent the gym's core concepts (class offerings, trainers,
subscriptions) independent of storage, CLI or HTTP specifics.
"""

from domain.models.fitness_class import FitnessClass, ClassRef, class_name_of
from domain.models.identity import IdSequence
from domain.models.subscription import Subscription
from domain.models.trainer import (
    EmploymentKind,
    ExternalEmployment,
    PermanentEmployment,
    Trainer,
)

__all__ = [
    "FitnessClass",
    "ClassRef",
    "class_name_of",
    "IdSequence",
    "Subscription",
    "EmploymentKind",
    "ExternalEmployment",
    "PermanentEmployment",
    "Trainer",
]
