"""
Reusable validators and validation utilities.

These turn raw user input (CLI prompts, request fields) into typed values
and raise ``DataValidationError`` with a readable message when they cannot.
"""

from decimal import Decimal
from typing import Any, Optional, Sequence, TypeVar

from domain.models.trainer import EmploymentKind
from domain.value_objects.intensity import Intensity
from domain.value_objects.money import to_decimal
from shared.constants import MAX_AMOUNT, MAX_MONTHS
from shared.exceptions import DataValidationError

T = TypeVar("T")


# =================== TEXT VALIDATION ===================

def validate_name(value: Any, field_name: str = "name") -> str:
    """
    Validate a non-empty display name.

    Raises:
        DataValidationError: If value is empty after trimming
    """
    text = "" if value is None else str(value).strip()
    if not text:
        raise DataValidationError(f"{field_name} cannot be empty")
    return text


def validate_email(value: Any) -> str:
    email = validate_name(value, "email")
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise DataValidationError(f"Invalid email address: {email}")
    return email


# =================== NUMERIC VALIDATION ===================

def validate_integer_range(
    value: Any,
    field_name: str = "value",
    min_value: int = None,
    max_value: int = None
) -> int:
    """
    Validate integer within specified range.

    Args:
        value: Value to validate
        field_name: Field name for error messages
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Validated integer

    Raises:
        DataValidationError: If value is invalid
    """
    try:
        int_value = int(str(value).strip())
    except (ValueError, TypeError):
        raise DataValidationError(f"{field_name} must be an integer, got: {value}")

    if min_value is not None and int_value < min_value:
        raise DataValidationError(
            f"{field_name} too small: {int_value} < {min_value}"
        )

    if max_value is not None and int_value > max_value:
        raise DataValidationError(
            f"{field_name} too large: {int_value} > {max_value}"
        )

    return int_value


def validate_months(value: Any) -> int:
    return validate_integer_range(value, "months", min_value=1, max_value=MAX_MONTHS)


def validate_amount(value: Any, field_name: str = "amount") -> Decimal:
    """Parse a bounded non-negative amount such as a price, salary or rate."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise DataValidationError(f"{field_name} cannot be negative: {amount}")
    if amount > MAX_AMOUNT:
        raise DataValidationError(f"{field_name} too large: {amount} > {MAX_AMOUNT}")
    return amount


# =================== CHOICE VALIDATION ===================

def validate_intensity(value: Any) -> Intensity:
    return Intensity.from_string(value)


def validate_trainer_kind(value: Any) -> EmploymentKind:
    return EmploymentKind.from_string(value)


def validate_plan(value: Any) -> bool:
    """Parse a plan selection; returns True for premium."""
    normalized = "" if value is None else str(value).strip().lower()
    plans = {
        "1": False,
        "standard": False,
        "2": True,
        "premium": True,
    }
    if normalized not in plans:
        raise DataValidationError(f"Unknown plan: {value}")
    return plans[normalized]


def validate_choice(value: Any, options: Sequence[T], field_name: str = "choice") -> T:
    """Pick an option by its 1-based menu number."""
    index = validate_integer_range(value, field_name, min_value=1, max_value=len(options))
    return options[index - 1]


def optional_choice(value: Any, options: Sequence[T]) -> Optional[T]:
    """
    Pick an option by its 1-based number, or None.

    Blank input means no selection; anything that is not a valid number
    also yields None.
    """
    if value is None or not str(value).strip():
        return None
    try:
        return validate_choice(value, options)
    except DataValidationError:
        return None
