"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "PKR"

_WHOLE_NUMBER = re.compile(r"^\s*\d+\s*$")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    The storefront prices in whole rupees, so the amount is a plain int
    with no minor unit.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic -----------------------------------------------------------

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # Digits stay unseparated: staff match these against price tags.
        return f"{self.currency} {self.amount}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that accepts ints or digit strings."""
        if isinstance(amount, str):
            if not _WHOLE_NUMBER.match(amount):
                raise ValidationError(f"Invalid money amount: {amount!r}")
            amount = int(amount)
        return Money(amount, currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def coerce(raw: object) -> Quantity:
        """Clamp arbitrary user input to a valid quantity.

        Anything that is not a positive whole number becomes 1. This is
        a policy, not an error: the quantity field silently recovers.
        """
        value: int | None = None
        if isinstance(raw, bool):
            value = None
        elif isinstance(raw, int):
            value = raw
        elif isinstance(raw, float) and raw.is_integer():
            value = int(raw)
        elif isinstance(raw, str) and _WHOLE_NUMBER.match(raw):
            value = int(raw)

        if value is None or value <= 0:
            return Quantity(1)
        return Quantity(value)
