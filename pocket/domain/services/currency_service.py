from typing import List

from structlog import get_logger

from pocket.domain.entities import Currency
from pocket.domain.errors import ConflictError, NotFoundError
from pocket.domain.repositories import CurrencyRepository
from pocket.domain.value_objects import CurrencyID, Owned, UserID

from .access import ensure_can_modify, ensure_can_use

logger = get_logger(__name__)


class CurrencyService:
    """Currency lifecycle, ownership rules and per-user default choice."""

    def __init__(self, currency_repo: CurrencyRepository):
        self.currency_repo = currency_repo

    def get_primary_currency(self, user_id: UserID) -> Currency:
        """
        Return the first system default currency.

        The user's own default choice is not consulted here; see
        ``get_default_currency`` for that.

        Raises:
            NotFoundError: No default currency exists.
        """
        default_currencies = self.currency_repo.find_default_currencies()
        if not default_currencies:
            raise NotFoundError("No default currency found")
        return default_currencies[0]

    def get_default_currency(self, user_id: UserID) -> Currency:
        """Return the user's chosen default, falling back to the primary."""
        chosen = self.currency_repo.get_user_default_currency(user_id)
        if chosen is not None:
            return chosen
        return self.get_primary_currency(user_id)

    def set_default_currency(
        self, user_id: UserID, currency_id: CurrencyID
    ) -> None:
        """
        Record the user's default currency.

        Raises:
            NotFoundError: Currency does not exist.
            ForbiddenError: Currency is neither a default nor the user's.
        """
        currency = self.get_currency_by_id(currency_id)
        ensure_can_use(currency, user_id, "currency")

        self.currency_repo.set_user_default_currency(user_id, currency_id)
        logger.info(f"User {user_id} default currency set to {currency.code}")

    def get_currency_by_id(self, currency_id: CurrencyID) -> Currency:
        currency = self.currency_repo.find_by_id(currency_id)
        if currency is None:
            raise NotFoundError(f"Currency {currency_id} not found")
        return currency

    def create_currency(
        self, user_id: UserID, code: str, name: str, symbol: str
    ) -> Currency:
        """
        Create a currency owned by the user.

        Raises:
            ConflictError: The user already has a currency with this code.
            ValidationError: Code, name or symbol is empty.
        """
        currency = Currency.create(Owned(user_id), code, name, symbol)
        self._ensure_code_free(currency.code, user_id)

        self.currency_repo.save(currency)
        logger.info(f"Currency {currency.code} created for user {user_id}")
        return currency

    def get_currencies_by_user(self, user_id: UserID) -> List[Currency]:
        """Default currencies first, then the user's own."""
        user_currencies = self.currency_repo.find_by_user_id(user_id)
        default_currencies = self.currency_repo.find_default_currencies()
        return default_currencies + user_currencies

    def update_currency(
        self,
        currency_id: CurrencyID,
        user_id: UserID,
        code: str,
        name: str,
        symbol: str,
    ) -> Currency:
        """
        Replace code, name and symbol of a user-owned currency.

        Raises:
            NotFoundError: Currency does not exist.
            ForbiddenError: Currency is a default or another user's.
            ValidationError: Code, name or symbol is empty.
            ConflictError: The new code is already taken for the user.
        """
        currency = self.get_currency_by_id(currency_id)
        ensure_can_modify(currency, user_id, "currency")

        previous_code = currency.code
        currency.update_code(code)
        if currency.code != previous_code:
            self._ensure_code_free(currency.code, user_id)
        currency.update_name(name)
        currency.update_symbol(symbol)

        self.currency_repo.save(currency)
        logger.info(f"Currency {currency_id} updated by user {user_id}")
        return currency

    def delete_currency(self, currency_id: CurrencyID, user_id: UserID) -> None:
        currency = self.get_currency_by_id(currency_id)
        ensure_can_modify(currency, user_id, "currency")

        self.currency_repo.delete(currency_id)
        logger.info(f"Currency {currency_id} deleted by user {user_id}")

    def _ensure_code_free(self, code: str, user_id: UserID) -> None:
        if self.currency_repo.exists_by_code_and_user_id(code, user_id):
            raise ConflictError(f"Currency code '{code}' already exists")
