from pocket.infrastructure.database.database import Database, create_database
from pocket.infrastructure.database.models import (
    Base,
    BudgetTable,
    CategoryTable,
    CurrencyTable,
    RecurringTransactionTable,
    TransactionTable,
    UserPreferenceTable,
)
from pocket.infrastructure.database.repository import (
    SqlBudgetRepository,
    SqlCategoryRepository,
    SqlCurrencyRepository,
    SqlRecurringTransactionRepository,
    SqlTransactionRepository,
)
from pocket.infrastructure.database.seeds import (
    DEFAULT_CURRENCIES,
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    seed_defaults,
)

__all__ = [
    "Base",
    "CategoryTable",
    "CurrencyTable",
    "TransactionTable",
    "BudgetTable",
    "RecurringTransactionTable",
    "UserPreferenceTable",
    "SqlCategoryRepository",
    "SqlCurrencyRepository",
    "SqlTransactionRepository",
    "SqlBudgetRepository",
    "SqlRecurringTransactionRepository",
    "Database",
    "create_database",
    "seed_defaults",
    "DEFAULT_CURRENCIES",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
]
