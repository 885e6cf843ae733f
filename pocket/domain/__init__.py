"""
Domain layer containing business entities, value objects and services.

This layer is framework-agnostic and contains core business logic.
"""

from .entities import (
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
from .errors import (
    ConflictError,
    FinanceError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from .value_objects import (
    BudgetID,
    CategoryID,
    CurrencyID,
    Money,
    Owned,
    RecurringTransactionID,
    SystemDefault,
    TransactionID,
    UserID,
)

__all__ = [
    # Entities
    "Budget",
    "Category",
    "Currency",
    "RecurringTransaction",
    "Transaction",
    # Enums
    "BudgetPeriod",
    "CategoryType",
    "Frequency",
    "TransactionType",
    # Value Objects
    "BudgetID",
    "CategoryID",
    "CurrencyID",
    "Money",
    "Owned",
    "RecurringTransactionID",
    "SystemDefault",
    "TransactionID",
    "UserID",
    # Errors
    "ConflictError",
    "FinanceError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
]
