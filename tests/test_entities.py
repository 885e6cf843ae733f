"""Tests for entity construction and mutation rules."""

from datetime import date

import pytest

from pocket.domain.entities import (
    DEFAULT_CATEGORY_COLOR,
    Budget,
    BudgetPeriod,
    Category,
    CategoryType,
    Currency,
    Frequency,
    RecurringTransaction,
    Transaction,
    TransactionType,
)
from pocket.domain.errors import ValidationError
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    Owned,
    SystemDefault,
    UserID,
)

USD = CurrencyID(1)
EUR = CurrencyID(2)
OWNER = UserID(1)


class TestCategory:
    """Tests for Category."""

    def test_create_for_user(self) -> None:
        category = Category.create_for_user(
            OWNER, "  Groceries ", "#123456", "expense"
        )
        assert category.name == "Groceries"
        assert category.color == "#123456"
        assert category.category_type == CategoryType.EXPENSE
        assert category.user_id == OWNER
        assert not category.is_default
        assert category.id is None

    @pytest.mark.parametrize("color", [None, "", "   "])
    def test_blank_color_gets_default(self, color) -> None:
        category = Category.create_for_user(OWNER, "Rent", color, "expense")
        assert category.color == DEFAULT_CATEGORY_COLOR == "#3B82F6"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError, match="name"):
            Category.create_for_user(OWNER, "   ", None, "expense")

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError, match="expense, income"):
            Category.create_for_user(OWNER, "Rent", None, "transfer")

    def test_type_parsing_is_case_insensitive(self) -> None:
        category = Category.create_for_user(OWNER, "Pay", None, " INCOME ")
        assert category.category_type == CategoryType.INCOME

    def test_default_category_cannot_be_deleted(self) -> None:
        category = Category.create(SystemDefault(), "Food", None, "expense")
        assert category.is_default
        assert category.user_id is None
        assert not category.can_be_deleted()

    def test_update_color_blank_resets_to_default(self) -> None:
        category = Category.create_for_user(
            OWNER, "Rent", "#000000", "expense"
        )
        category.update_color("", "#FFFFFF")
        assert category.color == "#FFFFFF"


class TestCurrency:
    """Tests for Currency."""

    @pytest.mark.parametrize(
        "code, name, symbol",
        [("", "Dollar", "$"), ("USD", " ", "$"), ("USD", "Dollar", "")],
    )
    def test_blank_fields_rejected(self, code, name, symbol) -> None:
        with pytest.raises(ValidationError):
            Currency.create(Owned(OWNER), code, name, symbol)

    def test_updates_validate_each_field(self) -> None:
        currency = Currency.create(Owned(OWNER), "BTC", "Bitcoin", "B")
        currency.update_symbol("₿")
        assert currency.symbol == "₿"
        with pytest.raises(ValidationError):
            currency.update_code("")
        assert currency.code == "BTC"


class TestBudget:
    """Tests for Budget period arithmetic and mutation."""

    def _budget(self, period: str, start: date) -> Budget:
        return Budget.create(
            OWNER, CategoryID(1), Money("500", USD), period, start
        )

    @pytest.mark.parametrize(
        "period, start, end",
        [
            ("weekly", date(2024, 1, 1), date(2024, 1, 8)),
            ("monthly", date(2024, 1, 1), date(2024, 2, 1)),
            ("yearly", date(2024, 1, 1), date(2025, 1, 1)),
            ("monthly", date(2024, 1, 31), date(2024, 3, 2)),
            ("monthly", date(2023, 1, 31), date(2023, 3, 3)),
            ("yearly", date(2024, 2, 29), date(2025, 3, 1)),
            ("monthly", date(2024, 12, 15), date(2025, 1, 15)),
        ],
    )
    def test_end_date_derived_from_period(self, period, start, end) -> None:
        assert self._budget(period, start).end_date == end

    def test_unknown_period_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._budget("daily", date(2024, 1, 1))

    def test_update_amount_keeps_currency(self) -> None:
        budget = self._budget("monthly", date(2024, 1, 1))
        budget.update_amount(Money("750", USD))
        assert budget.amount == Money("750", USD)
        with pytest.raises(ValidationError, match="currency"):
            budget.update_amount(Money("750", EUR))

    def test_changing_period_or_start_recomputes_end(self) -> None:
        budget = self._budget("monthly", date(2024, 1, 1))
        budget.update_period("weekly")
        assert budget.end_date == date(2024, 1, 8)
        budget.update_start_date(date(2024, 3, 4))
        assert budget.end_date == date(2024, 3, 11)

    def test_active_window_is_half_open(self) -> None:
        budget = self._budget("monthly", date(2024, 1, 1))
        assert not budget.is_active(date(2023, 12, 31))
        assert budget.is_active(date(2024, 1, 1))
        assert budget.is_active(date(2024, 1, 31))
        assert not budget.is_active(date(2024, 2, 1))
        assert budget.is_expired(date(2024, 2, 1))
        assert not budget.is_expired(date(2024, 1, 31))


class TestTransaction:
    """Tests for Transaction mutation."""

    def _transaction(self) -> Transaction:
        return Transaction(
            user_id=OWNER,
            category_id=CategoryID(1),
            currency_id=USD,
            amount=Money("20", USD),
            description="Lunch",
            date=date(2024, 1, 5),
            transaction_type=TransactionType.EXPENSE,
        )

    def test_update_amount_rejects_other_currency(self) -> None:
        transaction = self._transaction()
        with pytest.raises(ValidationError):
            transaction.update_amount(Money("20", EUR))
        assert transaction.amount == Money("20", USD)

    def test_reassign_and_describe(self) -> None:
        transaction = self._transaction()
        transaction.reassign(CategoryID(9), EUR)
        transaction.update_description("Dinner")
        transaction.update_date(date(2024, 1, 6))
        assert transaction.category_id == CategoryID(9)
        assert transaction.currency_id == EUR
        assert transaction.description == "Dinner"
        assert transaction.date == date(2024, 1, 6)
        assert transaction.is_expense


class TestRecurringTransaction:
    """Tests for RecurringTransaction scheduling arithmetic."""

    def _template(self, frequency: str, due: date) -> RecurringTransaction:
        return RecurringTransaction.create(
            OWNER,
            CategoryID(1),
            USD,
            Money("9.99", USD),
            "Streaming",
            frequency,
            due,
        )

    def test_created_active(self) -> None:
        template = self._template("monthly", date(2024, 1, 31))
        assert template.is_active
        assert template.frequency == Frequency.MONTHLY

    @pytest.mark.parametrize(
        "frequency, following",
        [
            ("daily", date(2024, 2, 1)),
            ("weekly", date(2024, 2, 7)),
            ("monthly", date(2024, 3, 2)),
            ("yearly", date(2025, 1, 31)),
        ],
    )
    def test_calculate_next_due_date(self, frequency, following) -> None:
        template = self._template(frequency, date(2024, 1, 31))
        assert template.calculate_next_due_date() == following

    def test_amount_currency_must_match(self) -> None:
        with pytest.raises(ValidationError):
            RecurringTransaction.create(
                OWNER,
                CategoryID(1),
                USD,
                Money("9.99", EUR),
                "Streaming",
                "monthly",
                date(2024, 1, 1),
            )

    def test_yearly_from_leap_day_rolls_into_march(self) -> None:
        template = self._template("yearly", date(2024, 2, 29))
        assert template.advance() == date(2025, 3, 1)

    def test_advance_moves_due_date(self) -> None:
        template = self._template("weekly", date(2024, 1, 1))
        assert template.advance() == date(2024, 1, 8)
        assert template.next_due_date == date(2024, 1, 8)

    def test_unknown_frequency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._template("hourly", date(2024, 1, 1))
        template = self._template("daily", date(2024, 1, 1))
        with pytest.raises(ValidationError):
            template.update_frequency("fortnightly")

    def test_is_due(self) -> None:
        template = self._template("monthly", date(2024, 1, 10))
        assert not template.is_due(date(2024, 1, 9))
        assert template.is_due(date(2024, 1, 10))
        assert template.is_due(date(2024, 1, 20))
        template.deactivate()
        assert not template.is_due(date(2024, 1, 20))
        template.activate()
        assert template.is_due(date(2024, 1, 20))

    def test_update_amount_keeps_currency(self) -> None:
        template = self._template("monthly", date(2024, 1, 10))
        with pytest.raises(ValidationError):
            template.update_amount(Money("5", EUR))
