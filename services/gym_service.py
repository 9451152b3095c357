"""
Gym application service.

Facade used by the CLI and the HTTP API. It owns the three repositories and
the pricing policy, resolves class names to catalog entries, and turns
lookup misses into ``EntityNotFoundError`` for the input layers.
"""

from __future__ import annotations
from typing import Optional, Union
import logging

from config.base import BaseConfig, PricingConfig
from domain.models.fitness_class import FitnessClass
from domain.models.subscription import Subscription
from domain.models.trainer import Trainer
from domain.value_objects.intensity import Intensity
from domain.value_objects.money import Numeric
from repositories.class_catalog import ClassCatalog
from repositories.subscription_ledger import SubscriptionLedger
from repositories.trainer_directory import TrainerDirectory
from services.pricing import PriceBreakdown, PricingEngine, PricingPolicy
from services.report_builder import ReportBuilder, TrainerReport
from shared.exceptions import BusinessLogicError, EntityNotFoundError
from shared.validators import validate_months, validate_name

logger = logging.getLogger(__name__)


class GymService:
    """Owns the gym's in-memory state and exposes its use cases."""

    def __init__(
        self,
        config: BaseConfig = None,
        pricing: PricingPolicy = None,
    ):
        pricing_config = config.pricing if config is not None else PricingConfig()
        self.pricing = pricing or PricingEngine(pricing_config)
        self.catalog = ClassCatalog()
        self.trainers = TrainerDirectory()
        self.ledger = SubscriptionLedger()
        self.report_builder = ReportBuilder()

    # ---------------- classes ----------------

    def add_class(self, name: str, intensity: Union[Intensity, str], base_price: Numeric) -> FitnessClass:
        fitness_class = FitnessClass(name=name, intensity=Intensity.coerce(intensity), base_price=base_price)
        self.catalog.add(fitness_class)
        logger.info("Added class type %s", fitness_class.summary())
        return fitness_class

    def get_class(self, name: str) -> FitnessClass:
        fitness_class = self.catalog.find_by_name(name)
        if fitness_class is None:
            raise EntityNotFoundError("FitnessClass", name)
        return fitness_class

    def _optional_class(self, name: Optional[str]) -> Optional[FitnessClass]:
        if name is None or not name.strip():
            return None
        return self.get_class(name)

    # ---------------- trainers ----------------

    def add_permanent_trainer(
        self,
        name: str,
        email: str,
        specialization: Optional[str],
        monthly_salary: Numeric,
    ) -> Trainer:
        trainer = self.trainers.create_permanent(
            name, email, self._optional_class(specialization), monthly_salary
        )
        logger.info("Added permanent trainer %s", trainer.summary())
        return trainer

    def add_external_trainer(
        self,
        name: str,
        email: str,
        specialization: Optional[str],
        company: str,
        hourly_rate: Numeric,
    ) -> Trainer:
        trainer = self.trainers.create_external(
            name, email, self._optional_class(specialization), company, hourly_rate
        )
        logger.info("Added external trainer %s", trainer.summary())
        return trainer

    def get_trainer(self, trainer_id: int) -> Trainer:
        trainer = self.trainers.find_by_id(trainer_id)
        if trainer is None:
            raise EntityNotFoundError("Trainer", trainer_id)
        return trainer

    # ---------------- subscriptions ----------------

    def subscribe(self, subscriber_name: str, class_name: str, months: int, is_premium: bool) -> Subscription:
        subscriber_name = validate_name(subscriber_name, "subscriber_name")
        months = validate_months(months)
        fitness_class = self.get_class(class_name)
        return self.ledger.create_subscription(
            subscriber_name, fitness_class, months, is_premium, self.pricing
        )

    def quote(self, class_name: str, months: int, is_premium: bool) -> PriceBreakdown:
        """Price without storing a subscription."""
        months = validate_months(months)
        fitness_class = self.get_class(class_name)
        breakdown = getattr(self.pricing, "breakdown", None)
        if breakdown is None:
            raise BusinessLogicError(
                f"Pricing policy {type(self.pricing).__name__} cannot produce quotes",
                code="quote_unsupported",
            )
        return breakdown(fitness_class, months, is_premium)

    # ---------------- reports ----------------

    def trainers_by_class(self) -> TrainerReport:
        return self.report_builder.build_report(self.catalog, self.trainers)
