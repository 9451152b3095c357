"""
Trainer domain model.

Trainers share one record shape and carry an employment payload tagged
with its kind: permanent staff on a monthly salary, or external
contractors billed hourly through a company. The kind is fixed at creation.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union

from domain.models.fitness_class import ClassRef, non_negative_amount, class_name_of
from domain.models.identity import IdSequence
from domain.value_objects.money import Numeric
from shared.constants import (
    TRAINER_TYPE_EXTERNAL,
    TRAINER_TYPE_PERMANENT,
    UNASSIGNED_LABEL,
)
from shared.exceptions import DataValidationError


class EmploymentKind(Enum):
    """Employment variant tag."""
    PERMANENT = "permanent"
    EXTERNAL = "external"

    @classmethod
    def from_string(cls, value: str) -> EmploymentKind:
        """Parse a kind name or the menu selections ``1``/``2``."""
        normalized = (value or "").strip().lower()
        aliases = {
            "1": cls.PERMANENT,
            "2": cls.EXTERNAL,
            "permanent": cls.PERMANENT,
            "external": cls.EXTERNAL,
        }
        if normalized not in aliases:
            raise DataValidationError(f"Unknown trainer type: {value}")
        return aliases[normalized]

    @property
    def label(self) -> str:
        if self is EmploymentKind.PERMANENT:
            return TRAINER_TYPE_PERMANENT
        return TRAINER_TYPE_EXTERNAL


@dataclass(frozen=True)
class PermanentEmployment:
    """Payload for staff trainers."""
    kind: ClassVar[EmploymentKind] = EmploymentKind.PERMANENT
    monthly_salary: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'monthly_salary', non_negative_amount(self.monthly_salary, "monthly_salary"))


@dataclass(frozen=True)
class ExternalEmployment:
    """Payload for contractors."""
    kind: ClassVar[EmploymentKind] = EmploymentKind.EXTERNAL
    company: str
    hourly_rate: Decimal

    def __post_init__(self):
        company = (self.company or "").strip()
        if not company:
            raise DataValidationError("Company name cannot be empty")
        object.__setattr__(self, 'company', company)
        object.__setattr__(self, 'hourly_rate', non_negative_amount(self.hourly_rate, "hourly_rate"))


Employment = Union[PermanentEmployment, ExternalEmployment]


def _required_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise DataValidationError("Trainer name cannot be empty")
    return name


def _required_email(email: str) -> str:
    email = (email or "").strip()
    if not email or '@' not in email:
        raise DataValidationError("Valid email address required", details={"email": email})
    return email


@dataclass
class Trainer:
    """Domain model for trainers of either employment kind."""

    id: int
    name: str
    email: str
    employment: Employment
    specialization: Optional[str] = None

    def __post_init__(self):
        """Validate trainer data."""
        self.name = _required_name(self.name)
        self.email = _required_email(self.email)

        if not isinstance(self.employment, (PermanentEmployment, ExternalEmployment)):
            raise DataValidationError(f"Invalid employment payload: {type(self.employment).__name__}")

        self.specialization = class_name_of(self.specialization)

    @classmethod
    def permanent(
        cls,
        name: str,
        email: str,
        specialization: ClassRef,
        monthly_salary: Numeric,
        *,
        ids: IdSequence,
    ) -> Trainer:
        """Factory method for a permanent trainer; consumes the next id once the input is valid."""
        name, email = _required_name(name), _required_email(email)
        employment = PermanentEmployment(monthly_salary=monthly_salary)
        return cls(id=ids.next_id(), name=name, email=email,
                   employment=employment, specialization=specialization)

    @classmethod
    def external(
        cls,
        name: str,
        email: str,
        specialization: ClassRef,
        company: str,
        hourly_rate: Numeric,
        *,
        ids: IdSequence,
    ) -> Trainer:
        """Factory method for an external trainer; consumes the next id once the input is valid."""
        name, email = _required_name(name), _required_email(email)
        employment = ExternalEmployment(company=company, hourly_rate=hourly_rate)
        return cls(id=ids.next_id(), name=name, email=email,
                   employment=employment, specialization=specialization)

    @property
    def kind(self) -> EmploymentKind:
        return self.employment.kind

    @property
    def trainer_type(self) -> str:
        return self.kind.label

    @property
    def is_assigned(self) -> bool:
        return self.specialization is not None

    def assign_to(self, fitness_class: ClassRef) -> None:
        """Point the trainer at another class, or at none."""
        self.specialization = class_name_of(fitness_class)

    def employment_summary(self) -> str:
        if self.kind is EmploymentKind.PERMANENT:
            return f"salary: {self.employment.monthly_salary:.2f}"
        return f"company: {self.employment.company}, hourly rate: {self.employment.hourly_rate:.2f}"

    def summary(self) -> str:
        spec = self.specialization or UNASSIGNED_LABEL
        return (
            f"[{self.id}] {self.name} ({self.trainer_type}) - {self.email} - {spec} "
            f"({self.employment_summary()})"
        )

    def brief(self) -> str:
        return f"{self.name} ({self.trainer_type})"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "type": self.kind.value,
            "specialization": self.specialization,
        }
        if self.kind is EmploymentKind.PERMANENT:
            data["monthly_salary"] = f"{self.employment.monthly_salary:.2f}"
        else:
            data["company"] = self.employment.company
            data["hourly_rate"] = f"{self.employment.hourly_rate:.2f}"
        return data

    def __str__(self) -> str:
        return self.summary()
