"""
Derived, read-only aggregates over transactions.

Budget reports compare a budget cap with the category's expenses in the
budget window; period totals summarize income and spending for the
current week, month or year. Both are recomputed on every call.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, List

from pocket.domain.entities import Budget, Transaction, TransactionType
from pocket.domain.value_objects import UserID
from pocket.utils.datetime_helpers import add_months

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")

TransactionFetcher = Callable[[UserID, date, date], Iterable[Transaction]]


@dataclass(frozen=True)
class SpendingSummary:
    budget_amount: Decimal
    total_spent: Decimal
    remaining: Decimal
    percentage_used: Decimal
    is_on_track: bool


@dataclass(frozen=True)
class BudgetReport:
    budget: Budget
    summary: SpendingSummary


@dataclass(frozen=True)
class PeriodTotals:
    start_date: date
    end_date: date
    total_income: Decimal
    total_spent: Decimal
    net_amount: Decimal
    transaction_count: int


def summarize_spending(
    budget_amount: Decimal, total_spent: Decimal
) -> SpendingSummary:
    """
    Compare spending against a cap.

    A zero cap reports 0% used instead of dividing by zero.
    """
    if budget_amount == ZERO:
        percentage = ZERO
    else:
        percentage = (total_spent / budget_amount * HUNDRED).quantize(
            CENT, rounding=ROUND_HALF_UP
        )
    return SpendingSummary(
        budget_amount=budget_amount,
        total_spent=total_spent,
        remaining=budget_amount - total_spent,
        percentage_used=percentage,
        is_on_track=total_spent <= budget_amount,
    )


def total_spent_for(
    budget: Budget, transactions: Iterable[Transaction]
) -> Decimal:
    """Sum expenses in the budget's category and window [start, end]."""
    return sum(
        (
            t.amount.amount
            for t in transactions
            if t.category_id == budget.category_id
            and t.transaction_type == TransactionType.EXPENSE
            and budget.start_date <= t.date <= budget.end_date
        ),
        ZERO,
    )


class BudgetReportService:
    """
    Builds budget reports from a transaction fetch.

    The fetch receives the budget owner and window bounds; callers may
    pass a narrower, pre-filtered query when full windows get large.
    """

    def __init__(self, fetch_transactions: TransactionFetcher):
        self.fetch_transactions = fetch_transactions

    def build_report(self, budget: Budget) -> BudgetReport:
        transactions = self.fetch_transactions(
            budget.user_id, budget.start_date, budget.end_date
        )
        spent = total_spent_for(budget, transactions)
        return BudgetReport(
            budget=budget,
            summary=summarize_spending(budget.amount.amount, spent),
        )

    def build_reports(self, budgets: Iterable[Budget]) -> List[BudgetReport]:
        return [self.build_report(budget) for budget in budgets]


def period_window(period: str, today: date) -> tuple[date, date]:
    """
    Calendar window containing ``today``.

    ``weekly`` is Monday to Sunday, ``yearly`` is Jan 1 to Dec 31 and
    anything else is treated as the current calendar month.
    """
    if period == "weekly":
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if period == "yearly":
        return date(today.year, 1, 1), date(today.year, 12, 31)
    start = today.replace(day=1)
    return start, add_months(start, 1) - timedelta(days=1)


def summarize_period(
    start_date: date, end_date: date, transactions: Iterable[Transaction]
) -> PeriodTotals:
    income = ZERO
    spent = ZERO
    count = 0
    for transaction in transactions:
        count += 1
        if transaction.transaction_type == TransactionType.INCOME:
            income += transaction.amount.amount
        elif transaction.transaction_type == TransactionType.EXPENSE:
            spent += transaction.amount.amount
    return PeriodTotals(
        start_date=start_date,
        end_date=end_date,
        total_income=income,
        total_spent=spent,
        net_amount=income - spent,
        transaction_count=count,
    )
