"""
Currency use cases, including the per-user default currency.
"""

from pocket.domain.services import CurrencyService
from pocket.domain.value_objects import CurrencyID, UserID

from pocket.application.schemas import (
    CreateCurrencyRequest,
    CurrenciesResponse,
    CurrencyResponse,
    UpdateCurrencyRequest,
)


class CreateCurrencyUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(
        self, user_id: int, request: CreateCurrencyRequest
    ) -> CurrencyResponse:
        currency = self.currency_service.create_currency(
            UserID(user_id), request.code, request.name, request.symbol
        )
        return CurrencyResponse.from_entity(currency)


class GetCurrenciesUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(self, user_id: int) -> CurrenciesResponse:
        currencies = self.currency_service.get_currencies_by_user(
            UserID(user_id)
        )
        return CurrenciesResponse(
            currencies=[CurrencyResponse.from_entity(c) for c in currencies]
        )


class UpdateCurrencyUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(
        self, user_id: int, currency_id: int, request: UpdateCurrencyRequest
    ) -> CurrencyResponse:
        currency = self.currency_service.update_currency(
            CurrencyID(currency_id),
            UserID(user_id),
            request.code,
            request.name,
            request.symbol,
        )
        return CurrencyResponse.from_entity(currency)


class DeleteCurrencyUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(self, user_id: int, currency_id: int) -> None:
        self.currency_service.delete_currency(
            CurrencyID(currency_id), UserID(user_id)
        )


class GetDefaultCurrencyUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(self, user_id: int) -> CurrencyResponse:
        currency = self.currency_service.get_default_currency(UserID(user_id))
        return CurrencyResponse.from_entity(currency)


class SetDefaultCurrencyUseCase:
    def __init__(self, currency_service: CurrencyService):
        self.currency_service = currency_service

    def execute(self, user_id: int, currency_id: int) -> CurrencyResponse:
        """Record the choice and return the currency now in effect."""
        self.currency_service.set_default_currency(
            UserID(user_id), CurrencyID(currency_id)
        )
        return CurrencyResponse.from_entity(
            self.currency_service.get_currency_by_id(CurrencyID(currency_id))
        )
