"""
SQLAlchemy ORM models for the bookkeeping database.

Rows with a NULL ``user_id`` and ``is_default`` set are system defaults.
"""

import datetime as dt
from decimal import Decimal

import inflection
from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    declared_attr,
    mapped_column,
)

from pocket.utils.datetime_helpers import utc_now

AMOUNT = Numeric(14, 2, asdecimal=True)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """Generate table name from class name (CategoryTable -> categories)."""
        return inflection.pluralize(
            inflection.underscore(cls.__name__.removesuffix("Table"))
        )


class CategoryTable(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int | None] = mapped_column(Integer, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False)
    category_type: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (
        Index("ix_categories_user_type", "user_id", "category_type"),
    )

    def __repr__(self) -> str:
        return f"<CategoryTable(id={self.id}, name={self.name})>"


class CurrencyTable(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int | None] = mapped_column(Integer, index=True)
    code: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    symbol: Mapped[str] = mapped_column(String(10), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (
        Index("ix_currencies_user_code", "user_id", "code"),
    )

    def __repr__(self) -> str:
        return f"<CurrencyTable(id={self.id}, code={self.code})>"


class TransactionTable(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"), nullable=False, index=True
    )
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(AMOUNT, nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="")
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<TransactionTable(id={self.id}, amount={self.amount})>"


class BudgetTable(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"), nullable=False
    )
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(AMOUNT, nullable=False)
    period: Mapped[str] = mapped_column(String(10), nullable=False)
    start_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=utc_now)

    __table_args__ = (
        Index("ix_budgets_user_window", "user_id", "start_date", "end_date"),
    )

    def __repr__(self) -> str:
        return f"<BudgetTable(id={self.id}, period={self.period})>"


class RecurringTransactionTable(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"), nullable=False
    )
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id"), nullable=False
    )
    amount: Mapped[Decimal] = mapped_column(AMOUNT, nullable=False)
    description: Mapped[str] = mapped_column(String(255), default="")
    frequency: Mapped[str] = mapped_column(String(10), nullable=False)
    next_due_date: Mapped[dt.date] = mapped_column(
        Date, nullable=False, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=utc_now)

    def __repr__(self) -> str:
        return (
            f"<RecurringTransactionTable(id={self.id}, "
            f"frequency={self.frequency})>"
        )


class UserPreferenceTable(Base):
    """Per-user settings; currently the chosen default currency."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    primary_currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<UserPreferenceTable(user_id={self.user_id})>"
