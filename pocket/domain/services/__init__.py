from .budget_service import BudgetService
from .category_service import CategoryService
from .currency_service import CurrencyService
from .reporting import (
    BudgetReport,
    BudgetReportService,
    PeriodTotals,
    SpendingSummary,
    period_window,
    summarize_period,
    summarize_spending,
)
from .transaction_service import TransactionService

__all__ = [
    "BudgetService",
    "CategoryService",
    "CurrencyService",
    "TransactionService",
    "BudgetReport",
    "BudgetReportService",
    "PeriodTotals",
    "SpendingSummary",
    "period_window",
    "summarize_period",
    "summarize_spending",
]
