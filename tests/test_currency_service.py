"""Tests for CurrencyService."""

import pytest

from pocket.domain.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from pocket.domain.value_objects import CurrencyID

from .conftest import OTHER_USER, USER


@pytest.fixture
def service(app):
    return app.currency_service


class TestPrimaryAndDefaultCurrency:
    """Tests for the primary and per-user default currency."""

    def test_primary_is_first_system_default(self, service) -> None:
        assert service.get_primary_currency(USER).code == "USD"

    def test_default_falls_back_to_primary(self, service) -> None:
        assert service.get_default_currency(USER).code == "USD"

    def test_user_choice_wins(self, service, eur) -> None:
        service.set_default_currency(USER, eur.id)
        assert service.get_default_currency(USER).code == "EUR"
        assert service.get_default_currency(OTHER_USER).code == "USD"
        assert service.get_primary_currency(USER).code == "USD"

    def test_choice_can_be_changed(self, service, eur) -> None:
        service.set_default_currency(USER, eur.id)
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        service.set_default_currency(USER, own.id)
        assert service.get_default_currency(USER).id == own.id

    def test_set_missing_currency(self, service) -> None:
        with pytest.raises(NotFoundError):
            service.set_default_currency(USER, CurrencyID(999))

    def test_set_other_users_currency_forbidden(self, service) -> None:
        foreign = service.create_currency(OTHER_USER, "BTC", "Bitcoin", "₿")
        with pytest.raises(ForbiddenError):
            service.set_default_currency(USER, foreign.id)

    def test_no_defaults_at_all(self, app, session) -> None:
        for currency in app.currency_repo.find_default_currencies():
            app.currency_repo.delete(currency.id)
        with pytest.raises(NotFoundError):
            app.currency_service.get_primary_currency(USER)
        with pytest.raises(NotFoundError):
            app.currency_service.get_default_currency(USER)


class TestCreateCurrency:
    """Tests for create_currency."""

    def test_creates_owned_currency(self, service) -> None:
        currency = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        assert currency.id is not None
        assert currency.user_id == USER
        assert not currency.is_default

    def test_duplicate_code_for_user_conflicts(self, service) -> None:
        service.create_currency(USER, "BTC", "Bitcoin", "₿")
        with pytest.raises(ConflictError):
            service.create_currency(USER, "BTC", "Bitcoin again", "B")

    def test_same_code_for_another_user_allowed(self, service) -> None:
        service.create_currency(USER, "BTC", "Bitcoin", "₿")
        other = service.create_currency(OTHER_USER, "BTC", "Bitcoin", "₿")
        assert other.user_id == OTHER_USER

    def test_padded_duplicate_code_conflicts(self, service) -> None:
        service.create_currency(USER, "BTC", "Bitcoin", "₿")
        with pytest.raises(ConflictError):
            service.create_currency(USER, " BTC ", "Bitcoin again", "B")

        codes = [c.code for c in service.get_currencies_by_user(USER)]
        assert codes.count("BTC") == 1

    def test_default_code_conflicts(self, service) -> None:
        with pytest.raises(ConflictError):
            service.create_currency(USER, "USD", "My dollar", "$")

    def test_blank_fields_rejected(self, service) -> None:
        with pytest.raises(ValidationError):
            service.create_currency(USER, "XYZ", "", "x")


class TestListAndModifyCurrencies:
    """Tests for listing, updating and deleting currencies."""

    def test_defaults_first_then_own(self, service) -> None:
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        service.create_currency(OTHER_USER, "ETH", "Ether", "Ξ")

        currencies = service.get_currencies_by_user(USER)

        assert len(currencies) == 21
        assert currencies[0].code == "USD"
        assert currencies[-1].id == own.id

    def test_update_own_currency(self, service) -> None:
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        updated = service.update_currency(own.id, USER, "XBT", "Bitcoin", "B")
        assert updated.code == "XBT"
        assert service.get_currency_by_id(own.id).symbol == "B"

    def test_update_to_taken_code_conflicts(self, service) -> None:
        service.create_currency(USER, "BTC", "Bitcoin", "₿")
        own = service.create_currency(USER, "ETH", "Ether", "Ξ")

        with pytest.raises(ConflictError):
            service.update_currency(own.id, USER, " BTC", "Ether", "Ξ")
        with pytest.raises(ConflictError):
            service.update_currency(own.id, USER, "EUR", "Ether", "Ξ")
        assert service.get_currency_by_id(own.id).code == "ETH"

    def test_update_keeping_code_allowed(self, service) -> None:
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        updated = service.update_currency(own.id, USER, "BTC", "Bitcoin", "B")
        assert updated.symbol == "B"

    def test_update_default_forbidden(self, service, usd) -> None:
        with pytest.raises(ForbiddenError):
            service.update_currency(usd.id, USER, "USD", "Dollar", "$")

    def test_update_blank_field_rejected(self, service) -> None:
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        with pytest.raises(ValidationError):
            service.update_currency(own.id, USER, "BTC", "Bitcoin", " ")

    def test_delete_own_currency(self, service) -> None:
        own = service.create_currency(USER, "BTC", "Bitcoin", "₿")
        service.delete_currency(own.id, USER)
        with pytest.raises(NotFoundError):
            service.get_currency_by_id(own.id)

    def test_delete_default_forbidden(self, service, usd) -> None:
        with pytest.raises(ForbiddenError):
            service.delete_currency(usd.id, USER)

    def test_delete_other_users_currency_forbidden(self, service) -> None:
        foreign = service.create_currency(OTHER_USER, "ETH", "Ether", "Ξ")
        with pytest.raises(ForbiddenError):
            service.delete_currency(foreign.id, USER)
