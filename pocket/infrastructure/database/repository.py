"""
Repository pattern for database access.

Maps between domain entities and ORM rows so the domain services never
see SQLAlchemy. Every repository works inside the session it was given;
committing or rolling back is left to the caller.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import desc, or_
from sqlalchemy.orm import Session
from structlog import get_logger

from pocket.domain.entities import (
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
from pocket.domain.repositories import (
    BudgetRepository,
    CategoryRepository,
    CurrencyRepository,
    RecurringTransactionRepository,
    TransactionFilters,
    TransactionRepository,
)
from pocket.domain.value_objects import (
    BudgetID,
    CategoryID,
    CurrencyID,
    Money,
    Owned,
    Ownership,
    RecurringTransactionID,
    SystemDefault,
    TransactionID,
    UserID,
)

from .models import (
    BudgetTable,
    CategoryTable,
    CurrencyTable,
    RecurringTransactionTable,
    TransactionTable,
    UserPreferenceTable,
)

logger = get_logger(__name__)


def _ownership(user_id: int | None) -> Ownership:
    if user_id is None:
        return SystemDefault()
    return Owned(UserID(user_id))


def _owner_column(ownership: Ownership) -> int | None:
    if isinstance(ownership, Owned):
        return int(ownership.user_id)
    return None


def _raw_id(entity_id) -> int | None:
    return int(entity_id) if entity_id is not None else None


class SqlCategoryRepository(CategoryRepository):
    """Repository for category operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, category: Category) -> None:
        row = self.session.merge(
            CategoryTable(
                id=_raw_id(category.id),
                user_id=_owner_column(category.ownership),
                name=category.name,
                color=category.color,
                is_default=category.is_default,
                category_type=category.category_type.value,
                created_at=category.created_at,
            )
        )
        self.session.flush()
        category.id = CategoryID(row.id)

    def find_by_id(self, category_id: CategoryID) -> Optional[Category]:
        row = self.session.get(CategoryTable, int(category_id))
        return self._to_entity(row) if row else None

    def find_by_user_id(self, user_id: UserID) -> List[Category]:
        rows = (
            self.session.query(CategoryTable)
            .filter(CategoryTable.user_id == int(user_id))
            .order_by(CategoryTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_by_user_id_and_type(
        self, user_id: UserID, category_type: CategoryType
    ) -> List[Category]:
        """Return defaults and the user's own categories of one type."""
        rows = (
            self.session.query(CategoryTable)
            .filter(
                or_(
                    CategoryTable.user_id == int(user_id),
                    CategoryTable.user_id.is_(None),
                ),
                CategoryTable.category_type == category_type.value,
            )
            .order_by(desc(CategoryTable.is_default), CategoryTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_default_categories(self) -> List[Category]:
        rows = (
            self.session.query(CategoryTable)
            .filter(CategoryTable.is_default.is_(True))
            .order_by(CategoryTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def delete(self, category_id: CategoryID) -> None:
        self.session.query(CategoryTable).filter(
            CategoryTable.id == int(category_id)
        ).delete()
        self.session.flush()

    @staticmethod
    def _to_entity(row: CategoryTable) -> Category:
        return Category(
            id=CategoryID(row.id),
            ownership=_ownership(row.user_id),
            name=row.name,
            color=row.color,
            category_type=CategoryType(row.category_type),
            created_at=row.created_at,
        )


class SqlCurrencyRepository(CurrencyRepository):
    """Repository for currencies and the per-user default choice."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, currency: Currency) -> None:
        row = self.session.merge(
            CurrencyTable(
                id=_raw_id(currency.id),
                user_id=_owner_column(currency.ownership),
                code=currency.code,
                name=currency.name,
                symbol=currency.symbol,
                is_default=currency.is_default,
                created_at=currency.created_at,
            )
        )
        self.session.flush()
        currency.id = CurrencyID(row.id)

    def find_by_id(self, currency_id: CurrencyID) -> Optional[Currency]:
        row = self.session.get(CurrencyTable, int(currency_id))
        return self._to_entity(row) if row else None

    def find_by_user_id(self, user_id: UserID) -> List[Currency]:
        rows = (
            self.session.query(CurrencyTable)
            .filter(CurrencyTable.user_id == int(user_id))
            .order_by(CurrencyTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_default_currencies(self) -> List[Currency]:
        rows = (
            self.session.query(CurrencyTable)
            .filter(CurrencyTable.is_default.is_(True))
            .order_by(CurrencyTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def exists_by_code_and_user_id(self, code: str, user_id: UserID) -> bool:
        """
        Check whether the code is taken for this user.

        System defaults count as taken, so a user cannot shadow "USD".
        """
        count = (
            self.session.query(CurrencyTable)
            .filter(
                CurrencyTable.code == code,
                or_(
                    CurrencyTable.user_id == int(user_id),
                    CurrencyTable.user_id.is_(None),
                ),
            )
            .count()
        )
        return count > 0

    def set_user_default_currency(
        self, user_id: UserID, currency_id: CurrencyID
    ) -> None:
        preference = (
            self.session.query(UserPreferenceTable)
            .filter(UserPreferenceTable.user_id == int(user_id))
            .one_or_none()
        )
        if preference is None:
            preference = UserPreferenceTable(user_id=int(user_id))
            self.session.add(preference)
        preference.primary_currency_id = int(currency_id)
        self.session.flush()
        logger.debug(
            f"User {user_id} default currency set to {currency_id}"
        )

    def get_user_default_currency(
        self, user_id: UserID
    ) -> Optional[Currency]:
        row = (
            self.session.query(CurrencyTable)
            .join(
                UserPreferenceTable,
                UserPreferenceTable.primary_currency_id == CurrencyTable.id,
            )
            .filter(UserPreferenceTable.user_id == int(user_id))
            .one_or_none()
        )
        return self._to_entity(row) if row else None

    def delete(self, currency_id: CurrencyID) -> None:
        self.session.query(UserPreferenceTable).filter(
            UserPreferenceTable.primary_currency_id == int(currency_id)
        ).delete()
        self.session.query(CurrencyTable).filter(
            CurrencyTable.id == int(currency_id)
        ).delete()
        self.session.flush()

    @staticmethod
    def _to_entity(row: CurrencyTable) -> Currency:
        return Currency(
            id=CurrencyID(row.id),
            ownership=_ownership(row.user_id),
            code=row.code,
            name=row.name,
            symbol=row.symbol,
            created_at=row.created_at,
        )


class SqlTransactionRepository(TransactionRepository):
    """Repository for transaction operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, transaction: Transaction) -> None:
        row = self.session.merge(
            TransactionTable(
                id=_raw_id(transaction.id),
                user_id=int(transaction.user_id),
                category_id=int(transaction.category_id),
                currency_id=int(transaction.currency_id),
                amount=transaction.amount.amount,
                description=transaction.description,
                date=transaction.date,
                transaction_type=transaction.transaction_type.value,
                created_at=transaction.created_at,
            )
        )
        self.session.flush()
        transaction.id = TransactionID(row.id)

    def find_by_id(
        self, transaction_id: TransactionID
    ) -> Optional[Transaction]:
        row = self.session.get(TransactionTable, int(transaction_id))
        return self._to_entity(row) if row else None

    def find_by_user_id(self, user_id: UserID) -> List[Transaction]:
        rows = (
            self.session.query(TransactionTable)
            .filter(TransactionTable.user_id == int(user_id))
            .order_by(
                desc(TransactionTable.date), desc(TransactionTable.created_at)
            )
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_by_user_id_and_date_range(
        self, user_id: UserID, start_date: date, end_date: date
    ) -> List[Transaction]:
        rows = (
            self.session.query(TransactionTable)
            .filter(
                TransactionTable.user_id == int(user_id),
                TransactionTable.date >= start_date,
                TransactionTable.date <= end_date,
            )
            .order_by(desc(TransactionTable.date))
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_by_user_id_with_filters(
        self, user_id: UserID, filters: TransactionFilters
    ) -> tuple[List[Transaction], int]:
        query = self.session.query(TransactionTable).filter(
            TransactionTable.user_id == int(user_id)
        )

        if filters.transaction_type is not None:
            query = query.filter(
                TransactionTable.transaction_type
                == filters.transaction_type.value
            )
        if filters.category_ids:
            query = query.filter(
                TransactionTable.category_id.in_(
                    [int(c) for c in filters.category_ids]
                )
            )
        if filters.start_date is not None:
            query = query.filter(TransactionTable.date >= filters.start_date)
        if filters.end_date is not None:
            query = query.filter(TransactionTable.date <= filters.end_date)

        total = query.count()

        query = query.order_by(
            desc(TransactionTable.date),
            desc(TransactionTable.created_at),
            desc(TransactionTable.id),
        )
        if filters.limit > 0:
            query = query.limit(filters.limit)
        if filters.offset > 0:
            query = query.offset(filters.offset)

        return [self._to_entity(r) for r in query.all()], total

    def delete(self, transaction_id: TransactionID) -> None:
        self.session.query(TransactionTable).filter(
            TransactionTable.id == int(transaction_id)
        ).delete()
        self.session.flush()

    @staticmethod
    def _to_entity(row: TransactionTable) -> Transaction:
        currency_id = CurrencyID(row.currency_id)
        return Transaction(
            id=TransactionID(row.id),
            user_id=UserID(row.user_id),
            category_id=CategoryID(row.category_id),
            currency_id=currency_id,
            amount=Money(row.amount, currency_id),
            description=row.description or "",
            date=row.date,
            transaction_type=TransactionType(row.transaction_type),
            created_at=row.created_at,
        )


class SqlBudgetRepository(BudgetRepository):
    """Repository for budget operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, budget: Budget) -> None:
        row = self.session.merge(
            BudgetTable(
                id=_raw_id(budget.id),
                user_id=int(budget.user_id),
                category_id=int(budget.category_id),
                currency_id=int(budget.amount.currency),
                amount=budget.amount.amount,
                period=budget.period.value,
                start_date=budget.start_date,
                end_date=budget.end_date,
                created_at=budget.created_at,
            )
        )
        self.session.flush()
        budget.id = BudgetID(row.id)

    def find_by_id(self, budget_id: BudgetID) -> Optional[Budget]:
        row = self.session.get(BudgetTable, int(budget_id))
        return self._to_entity(row) if row else None

    def find_by_user_id(self, user_id: UserID) -> List[Budget]:
        rows = (
            self.session.query(BudgetTable)
            .filter(BudgetTable.user_id == int(user_id))
            .order_by(desc(BudgetTable.start_date), BudgetTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_active_by_user_id(
        self, user_id: UserID, today: date
    ) -> List[Budget]:
        rows = (
            self.session.query(BudgetTable)
            .filter(
                BudgetTable.user_id == int(user_id),
                BudgetTable.start_date <= today,
                BudgetTable.end_date > today,
            )
            .order_by(BudgetTable.start_date, BudgetTable.id)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def delete(self, budget_id: BudgetID) -> None:
        self.session.query(BudgetTable).filter(
            BudgetTable.id == int(budget_id)
        ).delete()
        self.session.flush()

    @staticmethod
    def _to_entity(row: BudgetTable) -> Budget:
        return Budget(
            id=BudgetID(row.id),
            user_id=UserID(row.user_id),
            category_id=CategoryID(row.category_id),
            amount=Money(row.amount, CurrencyID(row.currency_id)),
            period=BudgetPeriod(row.period),
            start_date=row.start_date,
            end_date=row.end_date,
            created_at=row.created_at,
        )


class SqlRecurringTransactionRepository(RecurringTransactionRepository):
    """Repository for recurring transaction templates."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, template: RecurringTransaction) -> None:
        row = self.session.merge(
            RecurringTransactionTable(
                id=_raw_id(template.id),
                user_id=int(template.user_id),
                category_id=int(template.category_id),
                currency_id=int(template.currency_id),
                amount=template.amount.amount,
                description=template.description,
                frequency=template.frequency.value,
                next_due_date=template.next_due_date,
                is_active=template.is_active,
                created_at=template.created_at,
            )
        )
        self.session.flush()
        template.id = RecurringTransactionID(row.id)

    def find_by_id(
        self, template_id: RecurringTransactionID
    ) -> Optional[RecurringTransaction]:
        row = self.session.get(RecurringTransactionTable, int(template_id))
        return self._to_entity(row) if row else None

    def find_by_user_id(self, user_id: UserID) -> List[RecurringTransaction]:
        rows = (
            self.session.query(RecurringTransactionTable)
            .filter(RecurringTransactionTable.user_id == int(user_id))
            .order_by(RecurringTransactionTable.next_due_date)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_active_by_user_id(
        self, user_id: UserID
    ) -> List[RecurringTransaction]:
        rows = (
            self.session.query(RecurringTransactionTable)
            .filter(
                RecurringTransactionTable.user_id == int(user_id),
                RecurringTransactionTable.is_active.is_(True),
            )
            .order_by(RecurringTransactionTable.next_due_date)
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def find_due(self, today: date) -> List[RecurringTransaction]:
        rows = (
            self.session.query(RecurringTransactionTable)
            .filter(
                RecurringTransactionTable.is_active.is_(True),
                RecurringTransactionTable.next_due_date <= today,
            )
            .order_by(
                RecurringTransactionTable.next_due_date,
                RecurringTransactionTable.id,
            )
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def delete(self, template_id: RecurringTransactionID) -> None:
        self.session.query(RecurringTransactionTable).filter(
            RecurringTransactionTable.id == int(template_id)
        ).delete()
        self.session.flush()

    @staticmethod
    def _to_entity(row: RecurringTransactionTable) -> RecurringTransaction:
        currency_id = CurrencyID(row.currency_id)
        return RecurringTransaction(
            id=RecurringTransactionID(row.id),
            user_id=UserID(row.user_id),
            category_id=CategoryID(row.category_id),
            currency_id=currency_id,
            amount=Money(row.amount, currency_id),
            description=row.description or "",
            frequency=Frequency(row.frequency),
            next_due_date=row.next_due_date,
            is_active=bool(row.is_active),
            created_at=row.created_at,
        )
