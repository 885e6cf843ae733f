"""
Typed identifiers for users and finance entities.

Each wraps the integer key assigned by storage so that a category id
cannot be passed where a currency id is expected.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class _Identifier:
    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserID(_Identifier):
    pass


@dataclass(frozen=True)
class CategoryID(_Identifier):
    pass


@dataclass(frozen=True)
class CurrencyID(_Identifier):
    pass


@dataclass(frozen=True)
class BudgetID(_Identifier):
    pass


@dataclass(frozen=True)
class TransactionID(_Identifier):
    pass


@dataclass(frozen=True)
class RecurringTransactionID(_Identifier):
    pass
