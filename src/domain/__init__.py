"""Domain package for business rules and core models."""

from .constants import PARTY_A, PARTY_B, SPLIT_TYPES
from .models import (
    ActivityEntry,
    BalanceResult,
    CategoryTotal,
    Expense,
    MonthlyReport,
    PartyNames,
    SplitAmounts,
    Transfer,
)
from .services import (
    compute_balance,
    compute_monthly_report,
    compute_split_amounts,
    reconcile_shares,
    suggest_settlement,
)

__all__ = [
    "ActivityEntry",
    "BalanceResult",
    "CategoryTotal",
    "Expense",
    "MonthlyReport",
    "PartyNames",
    "SplitAmounts",
    "Transfer",
    "PARTY_A",
    "PARTY_B",
    "SPLIT_TYPES",
    "compute_balance",
    "compute_monthly_report",
    "compute_split_amounts",
    "reconcile_shares",
    "suggest_settlement",
]
