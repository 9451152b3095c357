"""
Money value object.

Represents monetary amounts in cents precision with Decimal arithmetic.
Amounts are always quantized to two decimal places using ROUND_HALF_UP,
so constructing Money from an unrounded Decimal is the rounding step.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, MAX_EMAX, ROUND_HALF_UP, localcontext
from typing import Iterable, Union

from shared.constants import PRICE_QUANTUM
from shared.exceptions import DataValidationError


Numeric = Union[float, int, str, Decimal]


def to_decimal(value: Numeric, field_name: str = "amount") -> Decimal:
    """
    Convert a numeric value to Decimal without binary float artifacts.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.

    Raises:
        DataValidationError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise DataValidationError(f"{field_name} must be numeric, got: {value}")

    try:
        if isinstance(value, Decimal):
            decimal_value = value
        elif isinstance(value, str):
            decimal_value = Decimal(value.strip())
        else:
            decimal_value = Decimal(str(value))
    except (ValueError, TypeError, InvalidOperation) as e:
        raise DataValidationError(
            f"{field_name} must be numeric, got: {value}",
            details={"field": field_name, "value": str(value)},
            original_exception=e,
        )

    if not decimal_value.is_finite():
        raise DataValidationError(f"{field_name} cannot be infinite or NaN: {value}")

    return decimal_value


def _quantize_cents(value: Decimal) -> Decimal:
    """Round half-up to cents with enough precision for any finite magnitude."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        ctx.Emax = MAX_EMAX
        return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value object.

    All monetary calculations preserve precision using Decimal arithmetic;
    the stored amount is rounded half-up to cents.
    """

    amount: Decimal

    def __init__(self, amount: Numeric):
        decimal_amount = _quantize_cents(to_decimal(amount))
        # Use object.__setattr__ since this is a frozen dataclass
        object.__setattr__(self, 'amount', decimal_amount)

    @classmethod
    def zero(cls) -> Money:
        """Create zero money."""
        return cls(Decimal('0'))

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot add Money and {type(other)}")
        return Money(self.amount + other.amount)

    def __mul__(self, factor: Numeric) -> Money:
        """Multiply Money by a numeric factor, rounding the product to cents."""
        return Money(self.amount * to_decimal(factor, "factor"))

    def __rmul__(self, factor: Numeric) -> Money:
        return self.__mul__(factor)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money and {type(other)}")
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self < other or self == other

    def __gt__(self, other: Money) -> bool:
        return not self <= other

    def __ge__(self, other: Money) -> bool:
        return not self < other

    def __hash__(self) -> int:
        return hash(self.amount)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Money(amount={self.amount})"

    def format(self) -> str:
        """Format as a plain two-decimal string, e.g. ``"275.40"``."""
        return f"{self.amount:.2f}"


def sum_money(amounts: Iterable[Money]) -> Money:
    """Sum Money objects; an empty iterable sums to zero."""
    total = Money.zero()
    for money in amounts:
        total = total + money
    return total
