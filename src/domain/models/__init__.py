"""Domain models package."""

from .ledger import (
    BalanceResult,
    Expense,
    PartyNames,
    SplitAmounts,
    Transfer,
)
from .reports import ActivityEntry, CategoryTotal, MonthlyReport

__all__ = [
    "Expense",
    "Transfer",
    "SplitAmounts",
    "PartyNames",
    "BalanceResult",
    "ActivityEntry",
    "CategoryTotal",
    "MonthlyReport",
]
