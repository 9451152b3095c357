"""
Subscription pricing.

The price of a subscription is derived, in this order, from:

1. the class's monthly base price (zero when no class is given),
2. the intensity factor of the class,
3. the number of months,
4. a duration discount step (the highest reached threshold only),
5. the premium surcharge.

The product is computed with exact Decimal arithmetic and rounded once, to
cents, half-up. ``PricingEngine`` is the default policy; anything with a
matching ``calculate_price`` can be passed to the subscription ledger instead.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN, localcontext
from typing import Any, Dict, Optional, Protocol
import logging

from config.base import PricingConfig
from domain.models.fitness_class import FitnessClass
from domain.value_objects.intensity import Intensity
from domain.value_objects.money import Money

logger = logging.getLogger(__name__)

_ONE = Decimal("1")
_ZERO = Decimal("0")


class PricingPolicy(Protocol):
    """Computes a subscription price from (class, months, premium)."""

    def calculate_price(
        self,
        chosen_class: Optional[FitnessClass],
        months: int,
        is_premium: bool,
    ) -> Money:
        ...


@dataclass(frozen=True)
class PriceBreakdown:
    """Every intermediate step of one price computation."""
    class_name: Optional[str]
    base_price: Decimal
    intensity_factor: Decimal
    monthly: Decimal
    months: int
    subtotal: Decimal
    duration_factor: Decimal
    discounted: Decimal
    premium_factor: Decimal
    total: Decimal
    price: Money

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "base_price": str(self.base_price),
            "intensity_factor": str(self.intensity_factor),
            "monthly": str(self.monthly),
            "months": self.months,
            "subtotal": str(self.subtotal),
            "duration_factor": str(self.duration_factor),
            "discounted": str(self.discounted),
            "premium_factor": str(self.premium_factor),
            "total": str(self.total),
            "price": self.price.format(),
        }


class PricingEngine:
    """Default pricing policy driven by ``PricingConfig`` factors."""

    def __init__(self, config: PricingConfig = None):
        self.config = config or PricingConfig()

    def intensity_factor(self, intensity: Intensity) -> Decimal:
        return self.config.intensity_factors.get(intensity.value, _ONE)

    def duration_factor(self, months: int) -> Decimal:
        """Step function: only the highest threshold reached applies."""
        if months >= self.config.long_term_months:
            return self.config.long_term_factor
        if months >= self.config.mid_term_months:
            return self.config.mid_term_factor
        return _ONE

    def breakdown(
        self,
        chosen_class: Optional[FitnessClass],
        months: int,
        is_premium: bool,
    ) -> PriceBreakdown:
        """Compute a price and keep each step."""
        if chosen_class is None:
            base = _ZERO
            intensity_factor = _ONE
        else:
            base = chosen_class.base_price
            intensity_factor = self.intensity_factor(chosen_class.intensity)

        duration_factor = self.duration_factor(months)
        premium_factor = self.config.premium_factor if is_premium else _ONE

        # Products are exact at any magnitude; only Money rounds
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            monthly = base * intensity_factor
            subtotal = monthly * months
            discounted = subtotal * duration_factor
            total = discounted * premium_factor

        result = PriceBreakdown(
            class_name=chosen_class.name if chosen_class is not None else None,
            base_price=base,
            intensity_factor=intensity_factor,
            monthly=monthly,
            months=months,
            subtotal=subtotal,
            duration_factor=duration_factor,
            discounted=discounted,
            premium_factor=premium_factor,
            total=total,
            price=Money(total),
        )
        logger.debug(
            "Priced %s x%d months (premium=%s): %s",
            result.class_name, months, is_premium, result.price,
        )
        return result

    def calculate_price(
        self,
        chosen_class: Optional[FitnessClass],
        months: int,
        is_premium: bool,
    ) -> Money:
        return self.breakdown(chosen_class, months, is_premium).price


_default_engine = PricingEngine()


def calculate_price(
    chosen_class: Optional[FitnessClass],
    months: int,
    is_premium: bool,
) -> Money:
    """Price with the stock factors."""
    return _default_engine.calculate_price(chosen_class, months, is_premium)
