"""
Request and response models for the application use cases.

Requests carry primitive fields only: ids as integers, dates as
``YYYY-MM-DD`` strings and amounts as decimals. Responses render dates
the same way and timestamps as ISO-8601 strings.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from pocket.domain.entities import Budget, Category, Currency, Transaction
from pocket.domain.services import BudgetReport, PeriodTotals
from pocket.utils.datetime_helpers import format_date, format_timestamp


class CreateCategoryRequest(BaseModel):
    name: str
    color: str | None = None
    type: str


class UpdateCategoryRequest(BaseModel):
    name: str
    color: str | None = None
    type: str


class CreateCurrencyRequest(BaseModel):
    code: str
    name: str
    symbol: str


class UpdateCurrencyRequest(BaseModel):
    code: str
    name: str
    symbol: str


class CreateTransactionRequest(BaseModel):
    """A new transaction; currency falls back to the user's default."""

    category_id: int
    currency_id: int | None = None
    amount: Decimal
    description: str = ""
    date: str
    type: str


class UpdateTransactionRequest(BaseModel):
    """Replacement values; currency falls back to the current one."""

    category_id: int
    currency_id: int | None = None
    amount: Decimal
    description: str = ""
    date: str


class GetAllTransactionsRequest(BaseModel):
    """
    Filters and paging for the transaction listing.

    ``category_ids`` entries may themselves be comma-joined
    (``["1,2", "5"]``).
    """

    type: str | None = None
    category_ids: List[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None
    page: int = 1
    limit: int = 20


class CreateBudgetRequest(BaseModel):
    category_id: int
    currency_id: int | None = None
    amount: Decimal
    period: str
    start_date: str


class UpdateBudgetRequest(BaseModel):
    amount: Decimal
    period: str
    start_date: str


class GetAnalyticsRequest(BaseModel):
    period: str = "monthly"


class CategoryResponse(BaseModel):
    id: int
    name: str
    color: str
    type: str
    is_default: bool

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=int(category.id),
            name=category.name,
            color=category.color,
            type=category.category_type.value,
            is_default=category.is_default,
        )


class CategoriesResponse(BaseModel):
    categories: List[CategoryResponse]


class CurrencyResponse(BaseModel):
    id: int
    code: str
    name: str
    symbol: str
    is_default: bool

    @classmethod
    def from_entity(cls, currency: Currency) -> "CurrencyResponse":
        return cls(
            id=int(currency.id),
            code=currency.code,
            name=currency.name,
            symbol=currency.symbol,
            is_default=currency.is_default,
        )


class CurrenciesResponse(BaseModel):
    currencies: List[CurrencyResponse]


class TransactionResponse(BaseModel):
    id: int
    user_id: int
    category_id: int
    category: Optional[CategoryResponse] = None
    currency_id: int
    amount: float
    description: str
    date: str
    type: str
    created_at: str

    @classmethod
    def from_entity(
        cls,
        transaction: Transaction,
        category: Category | None = None,
    ) -> "TransactionResponse":
        return cls(
            id=int(transaction.id),
            user_id=int(transaction.user_id),
            category_id=int(transaction.category_id),
            category=(
                CategoryResponse.from_entity(category) if category else None
            ),
            currency_id=int(transaction.currency_id),
            amount=float(transaction.amount),
            description=transaction.description,
            date=format_date(transaction.date),
            type=transaction.transaction_type.value,
            created_at=format_timestamp(transaction.created_at),
        )


class TransactionsResponse(BaseModel):
    transactions: List[TransactionResponse]


class TransactionPageResponse(BaseModel):
    transactions: List[TransactionResponse]
    total: int
    page: int
    limit: int
    total_pages: int
    filters: GetAllTransactionsRequest


class BudgetResponse(BaseModel):
    id: int
    user_id: int
    category_id: int
    category: Optional[CategoryResponse] = None
    currency_id: int
    amount: float
    period: str
    start_date: str
    end_date: str
    created_at: str

    @classmethod
    def budget_fields(
        cls, budget: Budget, category: Category | None = None
    ) -> dict:
        return {
            "id": int(budget.id),
            "user_id": int(budget.user_id),
            "category_id": int(budget.category_id),
            "category": (
                CategoryResponse.from_entity(category) if category else None
            ),
            "currency_id": int(budget.amount.currency),
            "amount": float(budget.amount),
            "period": budget.period.value,
            "start_date": format_date(budget.start_date),
            "end_date": format_date(budget.end_date),
            "created_at": format_timestamp(budget.created_at),
        }

    @classmethod
    def from_entity(
        cls, budget: Budget, category: Category | None = None
    ) -> "BudgetResponse":
        return cls(**cls.budget_fields(budget, category))


class BudgetReportResponse(BudgetResponse):
    """A budget together with its spending against the cap."""

    total_spent: float
    remaining: float
    percentage_used: float
    is_on_track: bool

    @classmethod
    def from_report(
        cls, report: BudgetReport, category: Category | None = None
    ) -> "BudgetReportResponse":
        summary = report.summary
        return cls(
            **cls.budget_fields(report.budget, category),
            total_spent=float(summary.total_spent),
            remaining=float(summary.remaining),
            percentage_used=float(summary.percentage_used),
            is_on_track=summary.is_on_track,
        )


class BudgetsResponse(BaseModel):
    budgets: List[BudgetReportResponse]


class AnalyticsResponse(BaseModel):
    total_income: float
    total_spent: float
    net_amount: float
    period: str
    start_date: str
    end_date: str
    transaction_count: int

    @classmethod
    def from_totals(
        cls, period: str, totals: PeriodTotals
    ) -> "AnalyticsResponse":
        return cls(
            total_income=float(totals.total_income),
            total_spent=float(totals.total_spent),
            net_amount=float(totals.net_amount),
            period=period,
            start_date=format_date(totals.start_date),
            end_date=format_date(totals.end_date),
            transaction_count=totals.transaction_count,
        )
