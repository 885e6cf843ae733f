"""Tests for TransactionService cross-entity validation."""

from datetime import date

import pytest

from pocket.domain.entities import TransactionType
from pocket.domain.errors import ForbiddenError, NotFoundError, ValidationError
from pocket.domain.repositories import TransactionFilters
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    TransactionID,
)

from .conftest import OTHER_USER, USER


@pytest.fixture
def service(app):
    return app.transaction_service


def record(service, category, currency, amount, day, kind="expense"):
    return service.create_transaction(
        USER,
        category.id,
        currency.id,
        Money(amount, currency.id),
        f"{kind} {amount}",
        day,
        kind,
    )


class TestCreateTransaction:
    """Tests for create_transaction."""

    def test_assigns_id_and_persists(self, service, food, usd) -> None:
        transaction = record(service, food, usd, "42.50", date(2024, 1, 3))
        assert transaction.id is not None

        stored = service.get_transaction_by_id(transaction.id)
        assert stored.amount == Money("42.50", usd.id)
        assert stored.transaction_type == TransactionType.EXPENSE
        assert stored.date == date(2024, 1, 3)

    def test_category_type_must_match(self, service, salary, usd) -> None:
        with pytest.raises(ValidationError, match="type"):
            record(service, salary, usd, "10", date(2024, 1, 3), "expense")

    def test_unknown_type_rejected(self, service, food, usd) -> None:
        with pytest.raises(ValidationError):
            record(service, food, usd, "10", date(2024, 1, 3), "refund")

    def test_missing_category(self, service, usd) -> None:
        with pytest.raises(NotFoundError):
            service.create_transaction(
                USER,
                CategoryID(999),
                usd.id,
                Money("1", usd.id),
                "",
                date(2024, 1, 3),
                "expense",
            )

    def test_missing_currency(self, service, food) -> None:
        missing = CurrencyID(999)
        with pytest.raises(NotFoundError):
            service.create_transaction(
                USER,
                food.id,
                missing,
                Money("1", missing),
                "",
                date(2024, 1, 3),
                "expense",
            )

    def test_amount_currency_must_match(self, service, food, usd, eur) -> None:
        with pytest.raises(ValidationError, match="currency"):
            service.create_transaction(
                USER,
                food.id,
                usd.id,
                Money("10", eur.id),
                "",
                date(2024, 1, 3),
                "expense",
            )
        assert service.get_transactions_by_user(USER) == []

    def test_foreign_category_forbidden(self, app, service, usd) -> None:
        foreign = app.category_service.create_category(
            OTHER_USER, "Boat", None, "expense"
        )
        with pytest.raises(ForbiddenError):
            record(service, foreign, usd, "10", date(2024, 1, 3))

    def test_foreign_currency_forbidden(self, app, service, food) -> None:
        foreign = app.currency_service.create_currency(
            OTHER_USER, "BTC", "Bitcoin", "₿"
        )
        with pytest.raises(ForbiddenError):
            record(service, food, foreign, "10", date(2024, 1, 3))

    def test_own_category_and_currency(self, app, service) -> None:
        category = app.category_service.create_category(
            USER, "Pets", None, "expense"
        )
        currency = app.currency_service.create_currency(
            USER, "BTC", "Bitcoin", "₿"
        )
        transaction = record(
            service, category, currency, "0.5", date(2024, 1, 3)
        )
        assert transaction.currency_id == currency.id


class TestQueryTransactions:
    """Tests for transaction listings."""

    def test_date_range_is_inclusive(self, service, food, usd) -> None:
        record(service, food, usd, "1", date(2023, 12, 31))
        record(service, food, usd, "2", date(2024, 1, 1))
        record(service, food, usd, "3", date(2024, 1, 31))
        record(service, food, usd, "4", date(2024, 2, 1))

        found = service.get_transactions_by_user_and_date_range(
            USER, date(2024, 1, 1), date(2024, 1, 31)
        )

        assert sorted(float(t.amount) for t in found) == [2.0, 3.0]

    def test_by_user_only_returns_own(self, app, service, food, usd) -> None:
        record(service, food, usd, "1", date(2024, 1, 1))
        app.transaction_service.create_transaction(
            OTHER_USER,
            food.id,
            usd.id,
            Money("9", usd.id),
            "",
            date(2024, 1, 1),
            "expense",
        )
        assert len(service.get_transactions_by_user(USER)) == 1

    def test_filters_return_page_and_total(
        self, service, food, salary, usd
    ) -> None:
        for day in range(1, 6):
            record(service, food, usd, str(day), date(2024, 1, day))
        record(service, salary, usd, "1000", date(2024, 1, 2), "income")

        page, total = service.get_transactions_by_user_with_filters(
            USER,
            TransactionFilters(
                transaction_type=TransactionType.EXPENSE, limit=2, offset=0
            ),
        )

        assert total == 5
        assert [t.date.day for t in page] == [5, 4]

    def test_missing_transaction(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.get_transaction_by_id(TransactionID(999))


class TestUpdateTransaction:
    """Tests for update_transaction."""

    def test_replaces_fields(self, app, service, food, usd) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        pets = app.category_service.create_category(
            USER, "Pets", None, "expense"
        )

        service.update_transaction(
            transaction.id,
            USER,
            pets.id,
            usd.id,
            Money("12.75", usd.id),
            "Vet",
            date(2024, 1, 4),
        )

        stored = service.get_transaction_by_id(transaction.id)
        assert stored.category_id == pets.id
        assert stored.amount == Money("12.75", usd.id)
        assert stored.description == "Vet"
        assert stored.date == date(2024, 1, 4)

    def test_category_type_not_checked(
        self, service, food, salary, usd
    ) -> None:
        """Moving an expense under an income category is allowed."""
        transaction = record(service, food, usd, "10", date(2024, 1, 3))

        updated = service.update_transaction(
            transaction.id,
            USER,
            salary.id,
            usd.id,
            Money("10", usd.id),
            "",
            date(2024, 1, 3),
        )

        assert updated.category_id == salary.id
        assert updated.transaction_type == TransactionType.EXPENSE

    def test_currency_change_rejected(self, service, food, usd, eur) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        with pytest.raises(ValidationError):
            service.update_transaction(
                transaction.id,
                USER,
                food.id,
                eur.id,
                Money("10", eur.id),
                "",
                date(2024, 1, 3),
            )

    def test_other_users_transaction_forbidden(
        self, service, food, usd
    ) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        with pytest.raises(ForbiddenError):
            service.update_transaction(
                transaction.id,
                OTHER_USER,
                food.id,
                usd.id,
                Money("10", usd.id),
                "",
                date(2024, 1, 3),
            )

    def test_foreign_category_forbidden(self, app, service, food, usd) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        foreign = app.category_service.create_category(
            OTHER_USER, "Boat", None, "expense"
        )
        with pytest.raises(ForbiddenError):
            service.update_transaction(
                transaction.id,
                USER,
                foreign.id,
                usd.id,
                Money("10", usd.id),
                "",
                date(2024, 1, 3),
            )

    def test_missing_transaction(self, service, food, usd) -> None:
        with pytest.raises(NotFoundError):
            service.update_transaction(
                TransactionID(999),
                USER,
                food.id,
                usd.id,
                Money("10", usd.id),
                "",
                date(2024, 1, 3),
            )


class TestDeleteTransaction:
    """Tests for delete_transaction."""

    def test_deletes_own(self, service, food, usd) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        service.delete_transaction(transaction.id, USER)
        assert service.get_transactions_by_user(USER) == []

    def test_other_users_transaction_forbidden(
        self, service, food, usd
    ) -> None:
        transaction = record(service, food, usd, "10", date(2024, 1, 3))
        with pytest.raises(ForbiddenError):
            service.delete_transaction(transaction.id, OTHER_USER)

    def test_missing_transaction(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.delete_transaction(TransactionID(999), USER)
