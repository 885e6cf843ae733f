import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from pocket.domain.errors import ValidationError
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    TransactionID,
    UserID,
)
from pocket.utils.datetime_helpers import utc_now

from .base import ClosedStrEnum


class TransactionType(ClosedStrEnum):
    EXPENSE = "expense"
    INCOME = "income"


class Transaction(BaseModel):
    id: Optional[TransactionID] = None
    user_id: UserID
    category_id: CategoryID
    currency_id: CurrencyID
    amount: Money
    description: str = ""
    date: dt.date
    transaction_type: TransactionType
    created_at: dt.datetime = Field(default_factory=utc_now)

    def update_amount(self, new_amount: Money) -> None:
        if new_amount.currency != self.currency_id:
            raise ValidationError(
                "Cannot change currency of existing transaction"
            )
        self.amount = new_amount

    def update_description(self, description: str) -> None:
        self.description = description

    def update_date(self, date: dt.date) -> None:
        self.date = date

    def reassign(self, category_id: CategoryID, currency_id: CurrencyID) -> None:
        self.category_id = category_id
        self.currency_id = currency_id

    @property
    def is_expense(self) -> bool:
        return self.transaction_type == TransactionType.EXPENSE
