from .analytics import GetAnalyticsUseCase
from .budgets import (
    CreateBudgetUseCase,
    DeleteBudgetUseCase,
    GetBudgetsUseCase,
    UpdateBudgetUseCase,
)
from .categories import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoriesUseCase,
    UpdateCategoryUseCase,
)
from .currencies import (
    CreateCurrencyUseCase,
    DeleteCurrencyUseCase,
    GetCurrenciesUseCase,
    GetDefaultCurrencyUseCase,
    SetDefaultCurrencyUseCase,
    UpdateCurrencyUseCase,
)
from .transactions import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetAllTransactionsUseCase,
    GetTransactionsUseCase,
    UpdateTransactionUseCase,
)

__all__ = [
    "GetAnalyticsUseCase",
    "CreateBudgetUseCase",
    "DeleteBudgetUseCase",
    "GetBudgetsUseCase",
    "UpdateBudgetUseCase",
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoriesUseCase",
    "UpdateCategoryUseCase",
    "CreateCurrencyUseCase",
    "DeleteCurrencyUseCase",
    "GetCurrenciesUseCase",
    "GetDefaultCurrencyUseCase",
    "SetDefaultCurrencyUseCase",
    "UpdateCurrencyUseCase",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetAllTransactionsUseCase",
    "GetTransactionsUseCase",
    "UpdateTransactionUseCase",
]
