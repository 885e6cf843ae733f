"""
Recurring transaction template.

Only the template and its due-date arithmetic live here; nothing in
this package fires due templates.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from pocket.domain.errors import ValidationError
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    RecurringTransactionID,
    UserID,
)
from pocket.utils.datetime_helpers import (
    add_days,
    add_months,
    add_years,
    utc_now,
)

from .base import ClosedStrEnum


class Frequency(ClosedStrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    def advance(self, from_date: date) -> date:
        if self is Frequency.DAILY:
            return add_days(from_date, 1)
        if self is Frequency.WEEKLY:
            return add_days(from_date, 7)
        if self is Frequency.MONTHLY:
            return add_months(from_date, 1)
        return add_years(from_date, 1)


class RecurringTransaction(BaseModel):
    id: Optional[RecurringTransactionID] = None
    user_id: UserID
    category_id: CategoryID
    currency_id: CurrencyID
    amount: Money
    description: str = ""
    frequency: Frequency
    next_due_date: date
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: UserID,
        category_id: CategoryID,
        currency_id: CurrencyID,
        amount: Money,
        description: str,
        frequency: Frequency | str,
        next_due_date: date,
    ) -> "RecurringTransaction":
        if amount.currency != currency_id:
            raise ValidationError(
                "Amount currency does not match template currency"
            )
        return cls(
            user_id=user_id,
            category_id=category_id,
            currency_id=currency_id,
            amount=amount,
            description=description,
            frequency=Frequency.parse(frequency),
            next_due_date=next_due_date,
        )

    def update_amount(self, new_amount: Money) -> None:
        if not new_amount.same_currency(self.amount):
            raise ValidationError(
                "Cannot change currency of existing recurring transaction"
            )
        self.amount = new_amount

    def update_description(self, description: str) -> None:
        self.description = description

    def update_frequency(self, frequency: Frequency | str) -> None:
        self.frequency = Frequency.parse(frequency)

    def update_next_due_date(self, next_due_date: date) -> None:
        self.next_due_date = next_due_date

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def calculate_next_due_date(self) -> date:
        return self.frequency.advance(self.next_due_date)

    def advance(self) -> date:
        """Move the template to its following occurrence."""
        self.next_due_date = self.calculate_next_due_date()
        return self.next_due_date

    def is_due(self, today: date) -> bool:
        return self.is_active and self.next_due_date <= today
