from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from domain.models.fitness_class import FitnessClass, class_name_of
from domain.models.identity import IdSequence
from domain.models.subscription import Subscription
from domain.models.trainer import EmploymentKind, PermanentEmployment, Trainer
from domain.value_objects.intensity import Intensity
from domain.value_objects.money import Money
from shared.exceptions import DataValidationError


class TestFitnessClass:
    def test_normalizes_fields(self):
        fitness_class = FitnessClass("  Yoga ", "light", 30.0)
        assert fitness_class.name == "Yoga"
        assert fitness_class.intensity is Intensity.LIGHT
        assert fitness_class.base_price == Decimal("30.0")

    def test_summary(self, yoga):
        assert yoga.summary() == "Yoga (intensity: LIGHT, base price: 30.00)"
        assert str(yoga) == yoga.summary()

    @pytest.mark.parametrize("name,price", [("", "10"), ("   ", "10"), ("Yoga", "-1"), ("Yoga", "x")])
    def test_rejects_invalid_input(self, name, price):
        with pytest.raises(DataValidationError):
            FitnessClass(name, Intensity.LIGHT, price)

    def test_matches_case_insensitively(self, yoga):
        assert yoga.matches("yoga")
        assert yoga.matches(" YOGA ")
        assert not yoga.matches("Yog")
        assert not yoga.matches(None)

    def test_mutators(self, yoga):
        yoga.change_intensity("HARD")
        yoga.change_base_price("32.5")
        assert yoga.intensity is Intensity.HARD
        assert yoga.to_dict() == {"name": "Yoga", "intensity": "HARD", "base_price": "32.50"}

    def test_change_base_price_validates(self, yoga):
        with pytest.raises(DataValidationError):
            yoga.change_base_price(-5)
        assert yoga.base_price == Decimal("30.0")

    def test_class_name_of(self, yoga):
        assert class_name_of(yoga) == "Yoga"
        assert class_name_of(" Pilates ") == "Pilates"
        assert class_name_of("  ") is None
        assert class_name_of(None) is None


class TestIdSequence:
    def test_counts_from_start(self):
        ids = IdSequence()
        assert [ids.next_id() for _ in range(3)] == [1, 2, 3]
        assert ids.peek() == 4

    def test_custom_start(self):
        assert IdSequence(start=100).next_id() == 100


class TestTrainer:
    def test_permanent_summary(self, yoga):
        trainer = Trainer.permanent("Ana Popescu", "ana@fitzone.ro", yoga, 2500.0, ids=IdSequence())
        assert trainer.id == 1
        assert trainer.kind is EmploymentKind.PERMANENT
        assert trainer.specialization == "Yoga"
        assert trainer.summary() == "[1] Ana Popescu (Permanent) - ana@fitzone.ro - Yoga (salary: 2500.00)"
        assert trainer.brief() == "Ana Popescu (Permanent)"

    def test_external_summary_unassigned(self):
        trainer = Trainer.external("Carlos", "c@trainco.com", None, " TrainCo ", "60", ids=IdSequence(start=2))
        assert trainer.trainer_type == "External"
        assert not trainer.is_assigned
        assert trainer.summary() == (
            "[2] Carlos (External) - c@trainco.com - unassigned (company: TrainCo, hourly rate: 60.00)"
        )

    def test_to_dict_carries_variant_fields(self, crossfit):
        trainer = Trainer.external("Carlos", "c@trainco.com", crossfit, "TrainCo", 60, ids=IdSequence())
        data = trainer.to_dict()
        assert data["type"] == "external"
        assert data["hourly_rate"] == "60.00"
        assert "monthly_salary" not in data

    @pytest.mark.parametrize("name,email", [("", "a@b.c"), ("Ana", "no-at-sign"), ("Ana", "")])
    def test_rejects_invalid_identity(self, name, email):
        with pytest.raises(DataValidationError):
            Trainer(id=1, name=name, email=email, employment=PermanentEmployment(Decimal("1")))

    def test_rejects_negative_pay_and_blank_company(self):
        with pytest.raises(DataValidationError):
            Trainer.permanent("Ana", "a@b.c", None, -1, ids=IdSequence())
        with pytest.raises(DataValidationError):
            Trainer.external("Ana", "a@b.c", None, "  ", 10, ids=IdSequence())

    def test_rejected_input_does_not_consume_an_id(self):
        ids = IdSequence()
        with pytest.raises(DataValidationError):
            Trainer.permanent("Ana", "no-at-sign", None, 2500, ids=ids)
        with pytest.raises(DataValidationError):
            Trainer.external(" ", "a@b.c", None, "TrainCo", 60, ids=ids)
        with pytest.raises(DataValidationError):
            Trainer.permanent("Ana", "a@b.c", None, -1, ids=ids)
        assert ids.peek() == 1

    def test_rejects_unknown_payload(self):
        with pytest.raises(DataValidationError):
            Trainer(id=1, name="Ana", email="a@b.c", employment="salary")

    def test_assign_to(self, yoga):
        trainer = Trainer.permanent("Ana", "a@b.c", None, 1, ids=IdSequence())
        trainer.assign_to(yoga)
        assert trainer.specialization == "Yoga"
        trainer.assign_to(None)
        assert trainer.specialization is None

    def test_employment_kind_from_string(self):
        assert EmploymentKind.from_string("1") is EmploymentKind.PERMANENT
        assert EmploymentKind.from_string("External") is EmploymentKind.EXTERNAL
        with pytest.raises(DataValidationError):
            EmploymentKind.from_string("3")


class TestSubscription:
    def test_brief_and_plan(self):
        sub = Subscription(1, "Maria", "Yoga", 12, False, Money("275.40"))
        assert sub.plan == "Standard"
        assert sub.brief() == "[1] Maria - Yoga - 12 months - Standard - 275.40"

    def test_brief_without_class(self):
        sub = Subscription(2, "Ion", None, 1, True, Money.zero())
        assert sub.brief() == "[2] Ion - N/A - 1 months - Premium - 0.00"
        assert sub.to_dict()["price"] == "0.00"

    def test_is_frozen(self):
        sub = Subscription(1, "Maria", "Yoga", 12, False, Money("275.40"))
        with pytest.raises(FrozenInstanceError):
            sub.price = Money("1")
