"""Tests for money, identifiers and ownership."""

from decimal import Decimal

import pytest

from pocket.domain.errors import ValidationError
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    Owned,
    SystemDefault,
    UserID,
    can_access,
    can_modify,
)

USD = CurrencyID(1)
EUR = CurrencyID(2)


class TestMoney:
    """Tests for the Money value object."""

    def test_amount_is_quantized_to_cents(self) -> None:
        """Should keep two decimal places, rounding half up."""
        assert Money("10.005", USD).amount == Decimal("10.01")
        assert Money(3, USD).amount == Decimal("3.00")
        assert Money(19.99, USD).amount == Decimal("19.99")

    @pytest.mark.parametrize("amount", [0, "0.00", -5, "-0.01", "0.004"])
    def test_non_positive_amount_rejected(self, amount) -> None:
        """Should reject amounts that are not above zero after rounding."""
        with pytest.raises(ValidationError, match="must be positive"):
            Money(amount, USD)

    @pytest.mark.parametrize("amount", ["abc", "", "NaN", "Infinity"])
    def test_malformed_amount_rejected(self, amount) -> None:
        """Should reject values that are not finite numbers."""
        with pytest.raises(ValidationError):
            Money(amount, USD)

    def test_equality_includes_currency(self) -> None:
        """Same amount in different currencies is not the same money."""
        assert Money("5", USD) == Money("5.00", USD)
        assert Money("5", USD) != Money("5", EUR)

    def test_add_same_currency(self) -> None:
        """Should add amounts denominated in one currency."""
        total = Money("100", USD) + Money("250.50", USD)
        assert total == Money("350.50", USD)

    def test_add_different_currency_rejected(self) -> None:
        """Should refuse to mix currencies."""
        with pytest.raises(ValidationError):
            Money("1", USD) + Money("1", EUR)

    def test_conversions(self) -> None:
        money = Money("1234.5", USD)
        assert float(money) == 1234.5
        assert str(money) == "1,234.50"


class TestIdentifiers:
    """Tests for typed identifiers."""

    def test_same_kind_and_value_are_equal(self) -> None:
        assert UserID(7) == UserID(7)
        assert hash(CategoryID(3)) == hash(CategoryID(3))

    def test_different_kinds_never_equal(self) -> None:
        """A category id is not interchangeable with a user id."""
        assert CategoryID(1) != UserID(1)

    def test_int_and_str(self) -> None:
        assert int(CurrencyID(42)) == 42
        assert str(CurrencyID(42)) == "42"


class TestOwnership:
    """Tests for access predicates."""

    def test_default_usable_by_everyone(self) -> None:
        assert can_access(SystemDefault(), UserID(1))
        assert can_access(SystemDefault(), UserID(99))

    def test_default_modifiable_by_nobody(self) -> None:
        assert not can_modify(SystemDefault(), UserID(1))

    def test_owned_only_by_owner(self) -> None:
        ownership = Owned(UserID(1))
        assert can_access(ownership, UserID(1))
        assert can_modify(ownership, UserID(1))
        assert not can_access(ownership, UserID(2))
        assert not can_modify(ownership, UserID(2))
