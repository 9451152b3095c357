"""
Subscription ledger repository.

Creates subscription records, pricing each exactly once through the policy
handed in by the caller.
"""

from __future__ import annotations
from typing import Callable, Optional, Union
import logging

from domain.models.fitness_class import FitnessClass
from domain.models.identity import IdSequence
from domain.models.subscription import Subscription
from domain.value_objects.money import Money, sum_money
from repositories.base_repository import BaseRepository
from services.pricing import PricingPolicy

logger = logging.getLogger(__name__)

PriceFunction = Callable[[Optional[FitnessClass], int, bool], Money]


class SubscriptionLedger(BaseRepository[Subscription]):
    """Repository for client subscriptions."""

    entity_name = "subscription"

    def __init__(self, ids: IdSequence = None):
        super().__init__()
        self.ids = ids or IdSequence()

    def create_subscription(
        self,
        subscriber_name: str,
        chosen_class: Optional[FitnessClass],
        months: int,
        is_premium: bool,
        pricing: Union[PricingPolicy, PriceFunction],
    ) -> Subscription:
        """
        Price, number and store a new subscription.

        Args:
            subscriber_name: Client name
            chosen_class: Class the client subscribes to (may be None)
            months: Subscription length
            is_premium: Premium plan flag
            pricing: A pricing policy object or a plain price function

        Returns:
            The stored subscription
        """
        calculate = getattr(pricing, "calculate_price", pricing)
        price = calculate(chosen_class, months, is_premium)

        subscription = Subscription(
            id=self.ids.next_id(),
            subscriber_name=subscriber_name,
            class_name=chosen_class.name if chosen_class is not None else None,
            months=months,
            is_premium=is_premium,
            price=price,
        )
        self.add(subscription)
        logger.info("Created subscription %s", subscription.brief())
        return subscription

    def total_revenue(self) -> Money:
        return sum_money(s.price for s in self.list())
