"""
Subscription domain model.

A client subscription to one class for a number of months. The price is
computed once when the record is created and never recalculated, even if
the class's base price changes later.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from domain.value_objects.money import Money
from shared.constants import NO_CLASS_LABEL, PLAN_PREMIUM, PLAN_STANDARD


@dataclass(frozen=True)
class Subscription:
    """Immutable subscription record."""

    id: int
    subscriber_name: str
    class_name: Optional[str]
    months: int
    is_premium: bool
    price: Money

    @property
    def plan(self) -> str:
        return PLAN_PREMIUM if self.is_premium else PLAN_STANDARD

    def brief(self) -> str:
        cls = self.class_name or NO_CLASS_LABEL
        return f"[{self.id}] {self.subscriber_name} - {cls} - {self.months} months - {self.plan} - {self.price}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "subscriber_name": self.subscriber_name,
            "class_name": self.class_name,
            "months": self.months,
            "is_premium": self.is_premium,
            "plan": self.plan,
            "price": self.price.format(),
        }

    def __str__(self) -> str:
        return self.brief()
