"""
Budget entity: a spending cap for one category over a fixed window.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from pocket.domain.errors import ValidationError
from pocket.domain.value_objects import BudgetID, CategoryID, Money, UserID
from pocket.utils.datetime_helpers import (
    add_days,
    add_months,
    add_years,
    utc_now,
)

from .base import ClosedStrEnum


class BudgetPeriod(ClosedStrEnum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    def end_date(self, start_date: date) -> date:
        """
        Derive the end of the window that starts at ``start_date``.

        Weekly adds 7 days, monthly one calendar month and yearly one
        calendar year. A start day missing from the following month
        rolls over into the month after (Jan 31 -> Mar 2 in 2024).
        """
        if self is BudgetPeriod.WEEKLY:
            return add_days(start_date, 7)
        if self is BudgetPeriod.MONTHLY:
            return add_months(start_date, 1)
        return add_years(start_date, 1)


class Budget(BaseModel):
    """
    Budget domain entity.

    Attributes:
        id: Storage-assigned identifier, None until saved.
        user_id: Owner of the budget.
        category_id: Category whose expenses are capped.
        amount: The cap.
        period: Window length.
        start_date: First day of the window.
        end_date: Derived from start_date and period.
    """

    id: Optional[BudgetID] = None
    user_id: UserID
    category_id: CategoryID
    amount: Money
    period: BudgetPeriod
    start_date: date
    end_date: date
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: UserID,
        category_id: CategoryID,
        amount: Money,
        period: BudgetPeriod | str,
        start_date: date,
    ) -> "Budget":
        parsed = BudgetPeriod.parse(period)
        return cls(
            user_id=user_id,
            category_id=category_id,
            amount=amount,
            period=parsed,
            start_date=start_date,
            end_date=parsed.end_date(start_date),
        )

    def update_amount(self, new_amount: Money) -> None:
        if not new_amount.same_currency(self.amount):
            raise ValidationError("Cannot change currency of existing budget")
        self.amount = new_amount

    def update_period(self, new_period: BudgetPeriod | str) -> None:
        parsed = BudgetPeriod.parse(new_period)
        self.period = parsed
        self.end_date = parsed.end_date(self.start_date)

    def update_start_date(self, new_start_date: date) -> None:
        self.start_date = new_start_date
        self.end_date = self.period.end_date(new_start_date)

    def is_active(self, today: date) -> bool:
        return self.start_date <= today < self.end_date

    def is_expired(self, today: date) -> bool:
        return today >= self.end_date
