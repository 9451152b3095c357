"""
Value Objects for domain models.

Value objects are immutable objects that represent concepts in the domain
that are defined by their attributes rather than their identity.
"""

from domain.value_objects.money import Money, sum_money, to_decimal
from domain.value_objects.intensity import Intensity

__all__ = [
    "Money",
    "sum_money",
    "to_decimal",
    "Intensity",
]
