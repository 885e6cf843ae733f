from .budget import Budget, BudgetPeriod
from .category import DEFAULT_CATEGORY_COLOR, Category, CategoryType
from .currency import Currency
from .recurring_transaction import Frequency, RecurringTransaction
from .transaction import Transaction, TransactionType

__all__ = [
    "Budget",
    "Category",
    "Currency",
    "RecurringTransaction",
    "Transaction",
    "BudgetPeriod",
    "CategoryType",
    "Frequency",
    "TransactionType",
    "DEFAULT_CATEGORY_COLOR",
]
