"""
Intensity tier value object.

A property of a fitness class that scales its monthly price.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from shared.exceptions import DataValidationError


class Intensity(Enum):
    """Workout intensity tiers."""
    LIGHT = "LIGHT"
    MEDIUM = "MEDIUM"
    HARD = "HARD"

    @classmethod
    def from_string(cls, value: str) -> Intensity:
        """
        Create Intensity from a name or a menu selection.

        Accepts tier names case-insensitively and the menu numbers
        ``1`` (LIGHT), ``2`` (MEDIUM) and ``3`` (HARD).
        """
        if value is None or not str(value).strip():
            raise DataValidationError("Intensity cannot be empty")

        normalized = str(value).strip().upper()

        menu_choices = {
            "1": cls.LIGHT,
            "2": cls.MEDIUM,
            "3": cls.HARD,
        }
        if normalized in menu_choices:
            return menu_choices[normalized]

        try:
            return cls(normalized)
        except ValueError:
            raise DataValidationError(
                f"Unknown intensity: {value}",
                details={"value": str(value), "allowed": [i.value for i in cls]},
            )

    @classmethod
    def coerce(cls, value: Union[Intensity, str]) -> Intensity:
        """Return ``value`` as an Intensity, parsing strings."""
        if isinstance(value, cls):
            return value
        return cls.from_string(value)

    def __str__(self) -> str:
        return self.value
