"""
Category use cases.
"""

from structlog import get_logger

from pocket.domain.entities import Category, CategoryType
from pocket.domain.errors import NotFoundError
from pocket.domain.services import CategoryService
from pocket.domain.value_objects import CategoryID, UserID

from pocket.application.schemas import (
    CategoriesResponse,
    CategoryResponse,
    CreateCategoryRequest,
    UpdateCategoryRequest,
)

logger = get_logger(__name__)


def find_category(
    category_service: CategoryService, category_id: CategoryID
) -> Category | None:
    """Look up a category for display, None if it has been removed."""
    try:
        return category_service.get_category_by_id(category_id)
    except NotFoundError:
        logger.debug(f"Category {category_id} not found, omitting details")
        return None


class CreateCategoryUseCase:
    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def execute(
        self, user_id: int, request: CreateCategoryRequest
    ) -> CategoryResponse:
        category = self.category_service.create_category(
            UserID(user_id), request.name, request.color, request.type
        )
        return CategoryResponse.from_entity(category)


class GetCategoriesUseCase:
    """
    List the categories a user can file transactions under.

    Without a type this is every default plus the user's own; with a
    type the lookup is left to storage.
    """

    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def execute(
        self, user_id: int, category_type: str | None = None
    ) -> CategoriesResponse:
        service = self.category_service
        if category_type:
            categories = service.get_categories_by_user_and_type(
                UserID(user_id), CategoryType.parse(category_type)
            )
        else:
            categories = service.get_categories_by_user(UserID(user_id))
        return CategoriesResponse(
            categories=[CategoryResponse.from_entity(c) for c in categories]
        )


class UpdateCategoryUseCase:
    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def execute(
        self, user_id: int, category_id: int, request: UpdateCategoryRequest
    ) -> CategoryResponse:
        category = self.category_service.update_category(
            CategoryID(category_id),
            UserID(user_id),
            request.name,
            request.color,
            request.type,
        )
        return CategoryResponse.from_entity(category)


class DeleteCategoryUseCase:
    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def execute(self, user_id: int, category_id: int) -> None:
        self.category_service.delete_category(
            CategoryID(category_id), UserID(user_id)
        )
