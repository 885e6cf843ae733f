"""
Money value object for financial amounts.

An amount is always bound to the currency it is denominated in.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from pocket.domain.errors import ValidationError

from .identifiers import CurrencyID


@dataclass(frozen=True)
class Money:
    """
    Money value object with amount validation.

    Attributes:
        amount: Decimal amount with 2 decimal places precision.
        currency: Identifier of the currency the amount is expressed in.

    Raises:
        ValidationError: If amount is not positive or not a number.
    """

    amount: Decimal
    currency: CurrencyID

    def __init__(
        self,
        amount: Union[Decimal, float, int, str],
        currency: CurrencyID,
    ) -> None:
        """
        Initialize money with validation.

        Args:
            amount: Monetary value to validate and store.
            currency: Currency the value is denominated in.

        Raises:
            ValidationError: Amount is not positive or cannot be
                converted to Decimal.
        """
        try:
            decimal_amount = Decimal(str(amount)).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f"Invalid amount format: {amount}") from e

        if not decimal_amount.is_finite() or decimal_amount <= 0:
            raise ValidationError(f"Amount must be positive: {amount}")

        # Use __setattr__ because of frozen=True
        object.__setattr__(self, "amount", decimal_amount)
        object.__setattr__(self, "currency", currency)

    def same_currency(self, other: "Money") -> bool:
        return self.currency == other.currency

    def __add__(self, other: "Money") -> "Money":
        """Add two amounts of the same currency."""
        if not self.same_currency(other):
            raise ValidationError(
                "Cannot add amounts in different currencies"
            )
        return Money(self.amount + other.amount, self.currency)

    def __float__(self) -> float:
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money('{self.amount}', currency={self.currency.value})"
