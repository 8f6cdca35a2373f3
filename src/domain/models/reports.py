"""Domain models for ledger reports and activity feeds."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .ledger import BalanceResult


@dataclass(frozen=True)
class CategoryTotal:
    """Amount spent in a given expense category."""

    category: str
    label: str
    amount: Decimal


@dataclass(frozen=True)
class MonthlyReport:
    """Spending summary for a calendar month.

    Attributes:
        year: Report year.
        month: Report month (1-12).
        total_spent: Sum of expense totals in the month.
        party_a_paid: Expense totals paid by person1.
        party_b_paid: Expense totals paid by person2.
        categories: Totals per category, largest first.
        balance: Balance computed over the month's records only.
    """

    year: int
    month: int
    total_spent: Decimal
    party_a_paid: Decimal
    party_b_paid: Decimal
    expense_count: int
    transfer_count: int
    categories: list[CategoryTotal]
    balance: BalanceResult


@dataclass(frozen=True)
class ActivityEntry:
    """Expense or transfer prepared for an activity feed."""

    kind: str
    amount: Decimal
    description: str
    timestamp: datetime | None
    paid_by: str | None = None
    from_user: str | None = None
    to_user: str | None = None
    category: str | None = None
    category_label: str | None = None
    party_a_share: Decimal | None = None
    party_b_share: Decimal | None = None


__all__ = ["CategoryTotal", "MonthlyReport", "ActivityEntry"]
