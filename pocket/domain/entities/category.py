"""
Category entity classifying transactions as income or expense.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pocket.domain.value_objects import (
    CategoryID,
    Owned,
    Ownership,
    SystemDefault,
    UserID,
)
from pocket.utils.datetime_helpers import utc_now

from .base import ClosedStrEnum, require_text

DEFAULT_CATEGORY_COLOR = "#3B82F6"


class CategoryType(ClosedStrEnum):
    EXPENSE = "expense"
    INCOME = "income"


class Category(BaseModel):
    """
    Category domain entity.

    Attributes:
        id: Storage-assigned identifier, None until saved.
        ownership: Owning user or system default.
        name: Display name, never empty.
        color: Hex color used by clients.
        category_type: Whether it classifies income or expenses.
    """

    id: Optional[CategoryID] = None
    ownership: Ownership
    name: str
    color: str = DEFAULT_CATEGORY_COLOR
    category_type: CategoryType
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        ownership: Ownership,
        name: str,
        color: str | None,
        category_type: CategoryType | str,
        default_color: str = DEFAULT_CATEGORY_COLOR,
    ) -> "Category":
        return cls(
            ownership=ownership,
            name=require_text(name, "category name"),
            color=(color or "").strip() or default_color,
            category_type=CategoryType.parse(category_type),
        )

    @classmethod
    def create_for_user(
        cls,
        user_id: UserID,
        name: str,
        color: str | None,
        category_type: CategoryType | str,
        default_color: str = DEFAULT_CATEGORY_COLOR,
    ) -> "Category":
        return cls.create(
            Owned(user_id), name, color, category_type, default_color
        )

    @property
    def is_default(self) -> bool:
        return isinstance(self.ownership, SystemDefault)

    @property
    def user_id(self) -> UserID | None:
        if isinstance(self.ownership, Owned):
            return self.ownership.user_id
        return None

    def update_name(self, name: str) -> None:
        self.name = require_text(name, "category name")

    def update_color(
        self, color: str | None, default_color: str = DEFAULT_CATEGORY_COLOR
    ) -> None:
        self.color = (color or "").strip() or default_color

    def can_be_deleted(self) -> bool:
        return not self.is_default
