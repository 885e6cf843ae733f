"""
Repository interfaces consumed by the domain services.

Implementations are bound to one unit of work (a database session);
cancelling that unit aborts every call made through it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Generic, List, Optional, TypeVar

from .entities import (
    Budget,
    Category,
    CategoryType,
    Currency,
    RecurringTransaction,
    Transaction,
    TransactionType,
)
from .value_objects import (
    BudgetID,
    CategoryID,
    CurrencyID,
    RecurringTransactionID,
    TransactionID,
    UserID,
)

E = TypeVar("E")
K = TypeVar("K")


@dataclass
class TransactionFilters:
    """Optional narrowing and paging for transaction listings."""

    transaction_type: Optional[TransactionType] = None
    category_ids: List[CategoryID] = field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    limit: int = 0
    offset: int = 0


class Repository(ABC, Generic[E, K]):
    """Operations shared by every entity repository."""

    @abstractmethod
    def save(self, entity: E) -> None:
        """
        Insert or update the entity.

        A new entity (id is None) gets its storage-assigned id set
        in place.
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: K) -> Optional[E]:
        """Return the entity or None if it does not exist."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: UserID) -> List[E]:
        """Return entities owned by the user."""
        pass

    @abstractmethod
    def delete(self, entity_id: K) -> None:
        pass


class CategoryRepository(Repository[Category, CategoryID], ABC):
    @abstractmethod
    def find_by_user_id_and_type(
        self, user_id: UserID, category_type: CategoryType
    ) -> List[Category]:
        pass

    @abstractmethod
    def find_default_categories(self) -> List[Category]:
        pass


class CurrencyRepository(Repository[Currency, CurrencyID], ABC):
    @abstractmethod
    def find_default_currencies(self) -> List[Currency]:
        pass

    @abstractmethod
    def exists_by_code_and_user_id(self, code: str, user_id: UserID) -> bool:
        """Check whether the user already owns a currency with this code."""
        pass

    @abstractmethod
    def set_user_default_currency(
        self, user_id: UserID, currency_id: CurrencyID
    ) -> None:
        pass

    @abstractmethod
    def get_user_default_currency(
        self, user_id: UserID
    ) -> Optional[Currency]:
        """Return the currency the user picked as default, if any."""
        pass


class TransactionRepository(Repository[Transaction, TransactionID], ABC):
    @abstractmethod
    def find_by_user_id_and_date_range(
        self, user_id: UserID, start_date: date, end_date: date
    ) -> List[Transaction]:
        """Return transactions dated within [start_date, end_date]."""
        pass

    @abstractmethod
    def find_by_user_id_with_filters(
        self, user_id: UserID, filters: TransactionFilters
    ) -> tuple[List[Transaction], int]:
        """
        Return one page of matching transactions and the total match count.

        Pages are ordered by date, newest first.
        """
        pass


class BudgetRepository(Repository[Budget, BudgetID], ABC):
    @abstractmethod
    def find_active_by_user_id(
        self, user_id: UserID, today: date
    ) -> List[Budget]:
        """Return budgets whose window [start, end) contains today."""
        pass


class RecurringTransactionRepository(
    Repository[RecurringTransaction, RecurringTransactionID], ABC
):
    @abstractmethod
    def find_active_by_user_id(
        self, user_id: UserID
    ) -> List[RecurringTransaction]:
        pass

    @abstractmethod
    def find_due(self, today: date) -> List[RecurringTransaction]:
        """Return active templates due on or before today."""
        pass
