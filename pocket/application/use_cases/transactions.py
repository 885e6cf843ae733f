"""
Transaction use cases: recording, correcting and listing transactions.
"""

import math
from typing import Dict, Iterable, List

from structlog import get_logger

from pocket.domain.entities import Category, Transaction, TransactionType
from pocket.domain.repositories import TransactionFilters
from pocket.domain.services import (
    CategoryService,
    CurrencyService,
    TransactionService,
)
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    TransactionID,
    UserID,
)

from pocket.application.parsing import (
    parse_id,
    parse_optional_date,
    parse_request_date,
)
from pocket.application.schemas import (
    CreateTransactionRequest,
    GetAllTransactionsRequest,
    TransactionPageResponse,
    TransactionResponse,
    TransactionsResponse,
    UpdateTransactionRequest,
)

from .categories import find_category

logger = get_logger(__name__)

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


def _with_categories(
    transactions: Iterable[Transaction], category_service: CategoryService
) -> List[TransactionResponse]:
    seen: Dict[CategoryID, Category | None] = {}
    responses = []
    for transaction in transactions:
        if transaction.category_id not in seen:
            seen[transaction.category_id] = find_category(
                category_service, transaction.category_id
            )
        responses.append(
            TransactionResponse.from_entity(
                transaction, seen[transaction.category_id]
            )
        )
    return responses


class CreateTransactionUseCase:
    """
    Record a transaction.

    When the request names no currency the user's default currency is
    used.
    """

    def __init__(
        self,
        transaction_service: TransactionService,
        currency_service: CurrencyService,
    ):
        self.transaction_service = transaction_service
        self.currency_service = currency_service

    def execute(
        self, user_id: int, request: CreateTransactionRequest
    ) -> TransactionResponse:
        owner = UserID(user_id)
        date = parse_request_date(request.date)

        if request.currency_id is not None:
            currency_id = CurrencyID(request.currency_id)
        else:
            currency_id = self.currency_service.get_default_currency(owner).id

        transaction = self.transaction_service.create_transaction(
            owner,
            CategoryID(request.category_id),
            currency_id,
            Money(request.amount, currency_id),
            request.description,
            date,
            request.type,
        )
        return TransactionResponse.from_entity(transaction)


class GetTransactionsUseCase:
    """List a user's transactions, optionally within a date range."""

    def __init__(
        self,
        transaction_service: TransactionService,
        category_service: CategoryService,
    ):
        self.transaction_service = transaction_service
        self.category_service = category_service

    def execute(
        self,
        user_id: int,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> TransactionsResponse:
        owner = UserID(user_id)
        start = parse_optional_date(start_date, "start_date")
        end = parse_optional_date(end_date, "end_date")

        service = self.transaction_service
        if start is not None and end is not None:
            transactions = service.get_transactions_by_user_and_date_range(
                owner, start, end
            )
        else:
            transactions = service.get_transactions_by_user(owner)

        return TransactionsResponse(
            transactions=_with_categories(transactions, self.category_service)
        )


class GetAllTransactionsUseCase:
    """
    Filtered, paginated transaction listing.

    Pages are 1-based. A limit of zero or less falls back to the default
    page size and a limit above the maximum is capped.
    """

    def __init__(
        self,
        transaction_service: TransactionService,
        category_service: CategoryService,
        default_limit: int = DEFAULT_PAGE_LIMIT,
        max_limit: int = MAX_PAGE_LIMIT,
    ):
        self.transaction_service = transaction_service
        self.category_service = category_service
        self.default_limit = default_limit
        self.max_limit = max_limit

    def execute(
        self, user_id: int, request: GetAllTransactionsRequest
    ) -> TransactionPageResponse:
        page = request.page if request.page > 0 else 1
        limit = self._clamp_limit(request.limit)

        filters = self.build_filters(request)
        filters.limit = limit
        filters.offset = (page - 1) * limit

        service = self.transaction_service
        transactions, total = service.get_transactions_by_user_with_filters(
            UserID(user_id), filters
        )
        total_pages = max(1, math.ceil(total / limit))

        logger.debug(
            f"Listed {len(transactions)} of {total} transactions "
            f"for user {user_id} (page {page}/{total_pages})"
        )
        return TransactionPageResponse(
            transactions=_with_categories(transactions, self.category_service),
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            filters=request,
        )

    def _clamp_limit(self, limit: int) -> int:
        if limit <= 0:
            return self.default_limit
        return min(limit, self.max_limit)

    @staticmethod
    def build_filters(request: GetAllTransactionsRequest) -> TransactionFilters:
        """
        Parse the request filters.

        Category ids may be comma-joined inside one entry; blank parts are
        skipped.

        Raises:
            ValidationError: Unknown type, bad category id or bad date.
        """
        filters = TransactionFilters()

        if request.type and request.type.strip():
            filters.transaction_type = TransactionType.parse(request.type)

        for entry in request.category_ids:
            for part in entry.split(","):
                if part.strip():
                    filters.category_ids.append(
                        CategoryID(parse_id(part, "category id"))
                    )

        filters.start_date = parse_optional_date(
            request.start_date, "start_date"
        )
        filters.end_date = parse_optional_date(request.end_date, "end_date")
        return filters


class UpdateTransactionUseCase:
    """
    Replace a transaction's category, amount, description and date.

    Without a currency in the request the transaction keeps its current
    one.
    """

    def __init__(
        self,
        transaction_service: TransactionService,
        category_service: CategoryService,
    ):
        self.transaction_service = transaction_service
        self.category_service = category_service

    def execute(
        self,
        user_id: int,
        transaction_id: int,
        request: UpdateTransactionRequest,
    ) -> TransactionResponse:
        date = parse_request_date(request.date)

        if request.currency_id is not None:
            currency_id = CurrencyID(request.currency_id)
        else:
            existing = self.transaction_service.get_transaction_by_id(
                TransactionID(transaction_id)
            )
            currency_id = existing.currency_id

        transaction = self.transaction_service.update_transaction(
            TransactionID(transaction_id),
            UserID(user_id),
            CategoryID(request.category_id),
            currency_id,
            Money(request.amount, currency_id),
            request.description,
            date,
        )
        return TransactionResponse.from_entity(
            transaction,
            find_category(self.category_service, transaction.category_id),
        )


class DeleteTransactionUseCase:
    def __init__(self, transaction_service: TransactionService):
        self.transaction_service = transaction_service

    def execute(self, user_id: int, transaction_id: int) -> None:
        self.transaction_service.delete_transaction(
            TransactionID(transaction_id), UserID(user_id)
        )
