from decimal import Decimal

import pytest

from config.base import PricingConfig
from domain.models.trainer import EmploymentKind
from domain.value_objects.intensity import Intensity
from domain.value_objects.money import Money
from services.gym_service import GymService
from shared.exceptions import (
    BusinessLogicError,
    ConfigurationError,
    DataValidationError,
    EntityNotFoundError,
)
from startup import build_service


def test_seed_sample_data(seeded_service):
    assert seeded_service.catalog.names() == ["Yoga", "CrossFit", "Pilates"]
    ana, carlos = seeded_service.trainers.list()
    assert (ana.id, ana.kind, ana.specialization) == (1, EmploymentKind.PERMANENT, "Yoga")
    assert (carlos.id, carlos.kind, carlos.specialization) == (2, EmploymentKind.EXTERNAL, "CrossFit")
    assert seeded_service.ledger.count() == 0


def test_build_service_follows_seed_config(test_config):
    assert build_service(test_config).catalog.count() == 0
    test_config.seed.enabled = True
    assert build_service(test_config).catalog.count() == 3


def test_build_service_rejects_bad_pricing(test_config):
    test_config.pricing = PricingConfig(premium_factor=Decimal("-1"))
    with pytest.raises(ConfigurationError, match="premium_factor cannot be negative"):
        build_service(test_config)


def test_add_class_accepts_intensity_names(service):
    fitness_class = service.add_class("Spinning", "hard", "40")
    assert fitness_class.intensity is Intensity.HARD
    assert service.get_class("SPINNING") is fitness_class


def test_get_class_miss_raises(service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        service.get_class("Zumba")
    assert exc_info.value.code == "entity_not_found"


def test_trainer_specialization_must_exist(seeded_service):
    with pytest.raises(EntityNotFoundError):
        seeded_service.add_permanent_trainer("Ion", "ion@fitzone.ro", "Zumba", 2000)
    trainer = seeded_service.add_external_trainer("Mia", "mia@flex.co", "  ", "FlexCo", 55)
    assert trainer.specialization is None
    assert trainer.id == 3


def test_get_trainer(seeded_service):
    assert seeded_service.get_trainer(2).name == "Carlos Silva"
    with pytest.raises(EntityNotFoundError):
        seeded_service.get_trainer(42)


def test_subscribe_prices_with_configured_engine(seeded_service):
    first = seeded_service.subscribe("Maria", "yoga", 12, False)
    second = seeded_service.subscribe(" Ion ", "CrossFit", 6, True)
    assert first.price == Money("275.40")
    assert first.class_name == "Yoga"
    assert second.subscriber_name == "Ion"
    assert second.price == Money("387.50")
    assert seeded_service.ledger.total_revenue() == Money("662.90")


def test_subscribe_rejects_blank_name(seeded_service):
    with pytest.raises(DataValidationError):
        seeded_service.subscribe("  ", "Yoga", 1, False)
    assert seeded_service.ledger.count() == 0


def test_injected_pricing_policy(test_config):
    class FlatFee:
        def calculate_price(self, chosen_class, months, is_premium):
            return Money(months * 10)

    service = GymService(test_config, pricing=FlatFee())
    service.add_class("Yoga", Intensity.LIGHT, 30)
    assert service.subscribe("Maria", "Yoga", 3, True).price == Money("30.00")
    with pytest.raises(BusinessLogicError):
        service.quote("Yoga", 3, True)


def test_quote_does_not_store(seeded_service):
    breakdown = seeded_service.quote("CrossFit", 6, True)
    assert breakdown.price == Money("387.50")
    assert seeded_service.ledger.count() == 0


def test_trainers_by_class(seeded_service):
    report = seeded_service.trainers_by_class()
    assert list(report) == ["CrossFit", "Pilates", "Unassigned", "Yoga"]
    assert [t.name for t in report["Yoga"]] == ["Ana Popescu"]
    assert report["Pilates"] == []


@pytest.mark.parametrize("months", [0, -3, 1201])
def test_subscribe_and_quote_bound_months(seeded_service, months):
    with pytest.raises(DataValidationError, match="months too"):
        seeded_service.subscribe("Maria", "Yoga", months, False)
    with pytest.raises(DataValidationError, match="months too"):
        seeded_service.quote("Yoga", months, False)
    assert seeded_service.ledger.count() == 0


def test_rejected_trainer_leaves_no_id_gap(seeded_service):
    with pytest.raises(DataValidationError):
        seeded_service.add_permanent_trainer("Ion", "nope", None, 2000)
    assert seeded_service.add_permanent_trainer("Ion", "ion@fitzone.ro", None, 2000).id == 3
