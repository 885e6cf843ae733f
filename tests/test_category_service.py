"""Tests for CategoryService ownership rules."""

import pytest

from pocket.domain.entities import CategoryType
from pocket.domain.errors import ForbiddenError, NotFoundError, ValidationError
from pocket.domain.value_objects import CategoryID

from .conftest import OTHER_USER, USER


@pytest.fixture
def service(app):
    return app.category_service


class TestCreateCategory:
    """Tests for create_category."""

    def test_creates_owned_category(self, service) -> None:
        category = service.create_category(USER, "Groceries", "", "expense")
        assert category.id is not None
        assert category.user_id == USER
        assert not category.is_default
        assert category.color == "#3B82F6"

        stored = service.get_category_by_id(category.id)
        assert stored.name == "Groceries"
        assert stored.category_type == CategoryType.EXPENSE

    def test_empty_name_rejected(self, service) -> None:
        with pytest.raises(ValidationError):
            service.create_category(USER, "", None, "expense")


class TestListCategories:
    """Tests for listing categories."""

    def test_defaults_first_then_own(self, service) -> None:
        own = service.create_category(USER, "Pets", None, "expense")
        service.create_category(OTHER_USER, "Boat", None, "expense")

        categories = service.get_categories_by_user(USER)

        assert len(categories) == 13
        assert all(c.is_default for c in categories[:12])
        assert categories[-1].id == own.id
        assert "Boat" not in {c.name for c in categories}

    def test_by_type_comes_from_storage(self, service) -> None:
        service.create_category(USER, "Dividends", None, "income")
        service.create_category(USER, "Pets", None, "expense")

        income = service.get_categories_by_user_and_type(USER, "income")

        names = [c.name for c in income]
        assert names == ["Salary", "Bonus", "Freelance", "Other", "Dividends"]
        assert all(c.category_type == CategoryType.INCOME for c in income)

    def test_missing_category(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.get_category_by_id(CategoryID(999))


class TestUpdateCategory:
    """Tests for update_category."""

    def test_updates_name_and_color(self, service) -> None:
        category = service.create_category(USER, "Pets", "#000000", "expense")
        updated = service.update_category(
            category.id, USER, "Animals", "#111111", "expense"
        )
        assert updated.name == "Animals"
        assert service.get_category_by_id(category.id).color == "#111111"

    def test_type_argument_is_ignored(self, service) -> None:
        """A category keeps its original type on update."""
        category = service.create_category(USER, "Pets", None, "expense")
        service.update_category(category.id, USER, "Pets", None, "income")
        stored = service.get_category_by_id(category.id)
        assert stored.category_type == CategoryType.EXPENSE

    def test_default_category_forbidden(self, service, food) -> None:
        with pytest.raises(ForbiddenError, match="default"):
            service.update_category(food.id, USER, "Meals", None, "expense")

    def test_other_users_category_forbidden(self, service) -> None:
        category = service.create_category(OTHER_USER, "Boat", None, "expense")
        with pytest.raises(ForbiddenError):
            service.update_category(category.id, USER, "Mine", None, "expense")

    def test_empty_name_rejected(self, service) -> None:
        category = service.create_category(USER, "Pets", None, "expense")
        with pytest.raises(ValidationError):
            service.update_category(category.id, USER, " ", None, "expense")

    def test_missing_category(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.update_category(
                CategoryID(999), USER, "X", None, "expense"
            )


class TestDeleteCategory:
    """Tests for delete_category."""

    def test_deletes_own_category(self, service) -> None:
        category = service.create_category(USER, "Pets", None, "expense")
        service.delete_category(category.id, USER)
        with pytest.raises(NotFoundError):
            service.get_category_by_id(category.id)

    def test_default_category_forbidden(self, service, food) -> None:
        with pytest.raises(ForbiddenError):
            service.delete_category(food.id, USER)
        assert service.get_category_by_id(food.id).name == "Food"

    def test_other_users_category_forbidden(self, service) -> None:
        category = service.create_category(OTHER_USER, "Boat", None, "expense")
        with pytest.raises(ForbiddenError):
            service.delete_category(category.id, USER)

    def test_missing_category(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.delete_category(CategoryID(999), USER)
