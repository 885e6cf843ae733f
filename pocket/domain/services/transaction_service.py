from datetime import date
from typing import List

from structlog import get_logger

from pocket.domain.entities import (
    Category,
    Currency,
    Transaction,
    TransactionType,
)
from pocket.domain.errors import NotFoundError, ValidationError
from pocket.domain.repositories import (
    CategoryRepository,
    CurrencyRepository,
    TransactionFilters,
    TransactionRepository,
)
from pocket.domain.value_objects import (
    CategoryID,
    CurrencyID,
    Money,
    TransactionID,
    UserID,
)

from .access import ensure_can_use, ensure_owner

logger = get_logger(__name__)


class TransactionService:
    """Recording, correcting and removing income and expense entries."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        category_repo: CategoryRepository,
        currency_repo: CurrencyRepository,
    ):
        self.transaction_repo = transaction_repo
        self.category_repo = category_repo
        self.currency_repo = currency_repo

    def create_transaction(
        self,
        user_id: UserID,
        category_id: CategoryID,
        currency_id: CurrencyID,
        amount: Money,
        description: str,
        date: date,
        transaction_type: TransactionType | str,
    ) -> Transaction:
        """
        Record a transaction for the user.

        Args:
            user_id: Acting user, becomes the owner.
            category_id: Category to file it under; its type must match.
            currency_id: Currency of the amount.
            amount: Positive amount.
            description: Free text.
            date: Day the transaction happened.
            transaction_type: ``income`` or ``expense``.

        Returns:
            The saved transaction with its assigned id.

        Raises:
            NotFoundError: Category or currency does not exist.
            ForbiddenError: Category or currency belongs to another user.
            ValidationError: Category type differs from transaction type
                or the amount is in another currency.
        """
        transaction_type = TransactionType.parse(transaction_type)

        category = self._usable_category(category_id, user_id)
        if category.category_type.value != transaction_type.value:
            raise ValidationError(
                "Category type does not match transaction type"
            )
        self._usable_currency(currency_id, user_id)
        if amount.currency != currency_id:
            raise ValidationError(
                "Amount currency does not match transaction currency"
            )

        transaction = Transaction(
            user_id=user_id,
            category_id=category_id,
            currency_id=currency_id,
            amount=amount,
            description=description,
            date=date,
            transaction_type=transaction_type,
        )
        self.transaction_repo.save(transaction)
        logger.info(
            f"Transaction {transaction.id} recorded for user {user_id}: "
            f"{transaction_type.value} {amount}"
        )
        return transaction

    def get_transactions_by_user(self, user_id: UserID) -> List[Transaction]:
        return self.transaction_repo.find_by_user_id(user_id)

    def get_transactions_by_user_and_date_range(
        self, user_id: UserID, start_date: date, end_date: date
    ) -> List[Transaction]:
        return self.transaction_repo.find_by_user_id_and_date_range(
            user_id, start_date, end_date
        )

    def get_transactions_by_user_with_filters(
        self, user_id: UserID, filters: TransactionFilters
    ) -> tuple[List[Transaction], int]:
        return self.transaction_repo.find_by_user_id_with_filters(
            user_id, filters
        )

    def get_transaction_by_id(
        self, transaction_id: TransactionID
    ) -> Transaction:
        transaction = self.transaction_repo.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError(f"Transaction {transaction_id} not found")
        return transaction

    def update_transaction(
        self,
        transaction_id: TransactionID,
        user_id: UserID,
        category_id: CategoryID,
        currency_id: CurrencyID,
        amount: Money,
        description: str,
        date: date,
    ) -> Transaction:
        """
        Correct a transaction the user owns.

        Category and currency access is checked again, but the category
        type is not compared with the transaction type here.

        Raises:
            NotFoundError: Transaction, category or currency is missing.
            ForbiddenError: Transaction, category or currency is not usable
                by the user.
            ValidationError: Amount is in a different currency than before.
        """
        transaction = self.get_transaction_by_id(transaction_id)
        ensure_owner(transaction.user_id, user_id, "transaction")

        self._usable_category(category_id, user_id)
        self._usable_currency(currency_id, user_id)

        transaction.update_amount(amount)
        transaction.update_description(description)
        transaction.update_date(date)
        transaction.reassign(category_id, currency_id)

        self.transaction_repo.save(transaction)
        logger.info(f"Transaction {transaction_id} updated by user {user_id}")
        return transaction

    def delete_transaction(
        self, transaction_id: TransactionID, user_id: UserID
    ) -> None:
        transaction = self.get_transaction_by_id(transaction_id)
        ensure_owner(transaction.user_id, user_id, "transaction")

        self.transaction_repo.delete(transaction_id)
        logger.info(f"Transaction {transaction_id} deleted by user {user_id}")

    def _usable_category(
        self, category_id: CategoryID, user_id: UserID
    ) -> Category:
        category = self.category_repo.find_by_id(category_id)
        if category is None:
            raise NotFoundError(f"Category {category_id} not found")
        ensure_can_use(category, user_id, "category")
        return category

    def _usable_currency(
        self, currency_id: CurrencyID, user_id: UserID
    ) -> Currency:
        currency = self.currency_repo.find_by_id(currency_id)
        if currency is None:
            raise NotFoundError(f"Currency {currency_id} not found")
        ensure_can_use(currency, user_id, "currency")
        return currency
