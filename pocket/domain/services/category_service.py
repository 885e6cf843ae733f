from typing import List

from structlog import get_logger

from pocket.domain.entities import (
    DEFAULT_CATEGORY_COLOR,
    Category,
    CategoryType,
)
from pocket.domain.errors import NotFoundError
from pocket.domain.repositories import CategoryRepository
from pocket.domain.value_objects import CategoryID, UserID

from .access import ensure_can_modify

logger = get_logger(__name__)


class CategoryService:
    """Category lifecycle and ownership rules."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        default_color: str = DEFAULT_CATEGORY_COLOR,
    ):
        self.category_repo = category_repo
        self.default_color = default_color

    def create_category(
        self,
        user_id: UserID,
        name: str,
        color: str | None,
        category_type: CategoryType | str,
    ) -> Category:
        """
        Create a category owned by the user.

        Raises:
            ValidationError: Name is empty or type is unknown.
        """
        category = Category.create_for_user(
            user_id, name, color, category_type, self.default_color
        )
        self.category_repo.save(category)
        logger.info(f"Category {category.id} created for user {user_id}")
        return category

    def get_categories_by_user(self, user_id: UserID) -> List[Category]:
        """Default categories first, then the user's own."""
        user_categories = self.category_repo.find_by_user_id(user_id)
        default_categories = self.category_repo.find_default_categories()
        return default_categories + user_categories

    def get_categories_by_user_and_type(
        self, user_id: UserID, category_type: CategoryType | str
    ) -> List[Category]:
        # Filtering is left to storage; defaults are not merged in here.
        return self.category_repo.find_by_user_id_and_type(
            user_id, CategoryType.parse(category_type)
        )

    def get_category_by_id(self, category_id: CategoryID) -> Category:
        category = self.category_repo.find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category {category_id} not found")
        return category

    def update_category(
        self,
        category_id: CategoryID,
        user_id: UserID,
        name: str,
        color: str | None,
        category_type: CategoryType | str,
    ) -> Category:
        """
        Rename and recolor a category the user owns.

        ``category_type`` is accepted but not applied: a category keeps
        the type it was created with.

        Raises:
            NotFoundError: Category does not exist.
            ForbiddenError: Category is a default or owned by someone else.
            ValidationError: Name is empty.
        """
        category = self.get_category_by_id(category_id)
        ensure_can_modify(category, user_id, "category")

        category.update_name(name)
        category.update_color(color, self.default_color)

        self.category_repo.save(category)
        logger.info(f"Category {category_id} updated by user {user_id}")
        return category

    def delete_category(self, category_id: CategoryID, user_id: UserID) -> None:
        category = self.get_category_by_id(category_id)
        ensure_can_modify(category, user_id, "category")

        self.category_repo.delete(category_id)
        logger.info(f"Category {category_id} deleted by user {user_id}")
