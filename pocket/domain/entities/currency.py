"""
Currency entity, either system-wide or defined by a user.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pocket.domain.value_objects import (
    CurrencyID,
    Owned,
    Ownership,
    SystemDefault,
    UserID,
)
from pocket.utils.datetime_helpers import utc_now

from .base import require_text


class Currency(BaseModel):
    id: Optional[CurrencyID] = None
    ownership: Ownership
    code: str
    name: str
    symbol: str
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls, ownership: Ownership, code: str, name: str, symbol: str
    ) -> "Currency":
        return cls(
            ownership=ownership,
            code=require_text(code, "currency code"),
            name=require_text(name, "currency name"),
            symbol=require_text(symbol, "currency symbol"),
        )

    @property
    def is_default(self) -> bool:
        return isinstance(self.ownership, SystemDefault)

    @property
    def user_id(self) -> UserID | None:
        if isinstance(self.ownership, Owned):
            return self.ownership.user_id
        return None

    def update_code(self, code: str) -> None:
        self.code = require_text(code, "currency code")

    def update_name(self, name: str) -> None:
        self.name = require_text(name, "currency name")

    def update_symbol(self, symbol: str) -> None:
        self.symbol = require_text(symbol, "currency symbol")

    def can_be_deleted(self) -> bool:
        return not self.is_default
