"""
Application container.

Wires SQL repositories, domain services and use cases for one database
session. Build one per request and let the session scope decide whether
the work is committed.
"""

from datetime import date
from typing import Callable

from sqlalchemy.orm import Session

from pocket.config import AppConfig
from pocket.domain.services import (
    BudgetReportService,
    BudgetService,
    CategoryService,
    CurrencyService,
    TransactionService,
)
from pocket.infrastructure.database import (
    SqlBudgetRepository,
    SqlCategoryRepository,
    SqlCurrencyRepository,
    SqlRecurringTransactionRepository,
    SqlTransactionRepository,
)

from .use_cases import (
    CreateBudgetUseCase,
    CreateCategoryUseCase,
    CreateCurrencyUseCase,
    CreateTransactionUseCase,
    DeleteBudgetUseCase,
    DeleteCategoryUseCase,
    DeleteCurrencyUseCase,
    DeleteTransactionUseCase,
    GetAllTransactionsUseCase,
    GetAnalyticsUseCase,
    GetBudgetsUseCase,
    GetCategoriesUseCase,
    GetCurrenciesUseCase,
    GetDefaultCurrencyUseCase,
    GetTransactionsUseCase,
    SetDefaultCurrencyUseCase,
    UpdateBudgetUseCase,
    UpdateCategoryUseCase,
    UpdateCurrencyUseCase,
    UpdateTransactionUseCase,
)


class FinanceApplication:
    """All bookkeeping use cases bound to one session."""

    def __init__(
        self,
        session: Session,
        config: AppConfig,
        clock: Callable[[], date] = date.today,
    ):
        self.session = session
        self.config = config

        self.category_repo = SqlCategoryRepository(session)
        self.currency_repo = SqlCurrencyRepository(session)
        self.transaction_repo = SqlTransactionRepository(session)
        self.budget_repo = SqlBudgetRepository(session)
        self.recurring_repo = SqlRecurringTransactionRepository(session)

        finance = config.finance
        self.category_service = CategoryService(
            self.category_repo, finance.default_category_color
        )
        self.currency_service = CurrencyService(self.currency_repo)
        self.transaction_service = TransactionService(
            self.transaction_repo, self.category_repo, self.currency_repo
        )
        self.budget_service = BudgetService(
            self.budget_repo, self.category_repo, clock
        )
        self.report_service = BudgetReportService(
            self.transaction_service.get_transactions_by_user_and_date_range
        )

        self.create_category = CreateCategoryUseCase(self.category_service)
        self.get_categories = GetCategoriesUseCase(self.category_service)
        self.update_category = UpdateCategoryUseCase(self.category_service)
        self.delete_category = DeleteCategoryUseCase(self.category_service)

        self.create_currency = CreateCurrencyUseCase(self.currency_service)
        self.get_currencies = GetCurrenciesUseCase(self.currency_service)
        self.update_currency = UpdateCurrencyUseCase(self.currency_service)
        self.delete_currency = DeleteCurrencyUseCase(self.currency_service)
        self.get_default_currency = GetDefaultCurrencyUseCase(
            self.currency_service
        )
        self.set_default_currency = SetDefaultCurrencyUseCase(
            self.currency_service
        )

        self.create_transaction = CreateTransactionUseCase(
            self.transaction_service, self.currency_service
        )
        self.get_transactions = GetTransactionsUseCase(
            self.transaction_service, self.category_service
        )
        self.get_all_transactions = GetAllTransactionsUseCase(
            self.transaction_service,
            self.category_service,
            default_limit=finance.default_page_limit,
            max_limit=finance.max_page_limit,
        )
        self.update_transaction = UpdateTransactionUseCase(
            self.transaction_service, self.category_service
        )
        self.delete_transaction = DeleteTransactionUseCase(
            self.transaction_service
        )

        self.create_budget = CreateBudgetUseCase(
            self.budget_service, self.currency_service, self.category_service
        )
        self.get_budgets = GetBudgetsUseCase(
            self.budget_service, self.report_service, self.category_service
        )
        self.update_budget = UpdateBudgetUseCase(
            self.budget_service, self.category_service
        )
        self.delete_budget = DeleteBudgetUseCase(self.budget_service)

        self.get_analytics = GetAnalyticsUseCase(
            self.transaction_service, clock
        )
