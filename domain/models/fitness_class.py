"""
Fitness class domain model.

A class offering in the catalog. Its name is its identity and is matched
case-insensitively; intensity and base price may change after creation.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from domain.value_objects.intensity import Intensity
from domain.value_objects.money import Numeric, to_decimal
from shared.exceptions import DataValidationError


def non_negative_amount(value: Numeric, field_name: str) -> Decimal:
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise DataValidationError(
            f"{field_name} cannot be negative: {amount}",
            details={"field": field_name, "value": str(amount)},
        )
    return amount


@dataclass
class FitnessClass:
    """Domain model for a class offering (e.g. Yoga, CrossFit)."""

    name: str
    intensity: Intensity
    base_price: Decimal

    def __post_init__(self):
        """Validate and normalize class data."""
        name = (self.name or "").strip()
        if not name:
            raise DataValidationError("Class name cannot be empty")

        self.name = name
        self.intensity = Intensity.coerce(self.intensity)
        self.base_price = non_negative_amount(self.base_price, "base_price")

    def matches(self, name: Optional[str]) -> bool:
        """Case-insensitive name match."""
        if name is None:
            return False
        return self.name.casefold() == name.strip().casefold()

    def change_intensity(self, intensity: Union[Intensity, str]) -> None:
        self.intensity = Intensity.coerce(intensity)

    def change_base_price(self, base_price: Numeric) -> None:
        self.base_price = non_negative_amount(base_price, "base_price")

    def summary(self) -> str:
        return f"{self.name} (intensity: {self.intensity.value}, base price: {self.base_price:.2f})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "intensity": self.intensity.value,
            "base_price": f"{self.base_price:.2f}",
        }

    def __str__(self) -> str:
        return self.summary()


ClassRef = Union[FitnessClass, str, None]


def class_name_of(ref: ClassRef) -> Optional[str]:
    """
    Resolve a class reference to the name stored on referencing records.

    Trainers and subscriptions keep the class name only; the catalog entry is
    looked up again whenever it is needed.
    """
    if ref is None:
        return None
    if isinstance(ref, FitnessClass):
        return ref.name
    name = str(ref).strip()
    return name or None
