from .identifiers import (
    BudgetID,
    CategoryID,
    CurrencyID,
    RecurringTransactionID,
    TransactionID,
    UserID,
)
from .money import Money
from .ownership import Owned, Ownership, SystemDefault, can_access, can_modify

__all__ = [
    "BudgetID",
    "CategoryID",
    "CurrencyID",
    "RecurringTransactionID",
    "TransactionID",
    "UserID",
    "Money",
    "Owned",
    "Ownership",
    "SystemDefault",
    "can_access",
    "can_modify",
]
