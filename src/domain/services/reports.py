"""Domain services for monthly reports and category breakdowns."""

from collections.abc import Iterable
from decimal import Decimal
from typing import TypeVar

from src.domain.constants import (
    CATEGORY_LABELS,
    DEFAULT_CATEGORY,
    PARTY_A,
    PARTY_B,
)
from src.domain.models import (
    CategoryTotal,
    Expense,
    MonthlyReport,
    PartyNames,
    Transfer,
)
from src.domain.services.balance import compute_balance
from src.utils.decimal_utils import coerce_decimal

RecordT = TypeVar("RecordT", Expense, Transfer)


def category_label(category: str | None) -> str:
    """Return the display label of a category key."""
    key = resolve_category(category)
    return CATEGORY_LABELS[key]


def resolve_category(category: str | None) -> str:
    """Map missing or unknown categories to the default category."""
    if not category:
        return DEFAULT_CATEGORY
    key = category.strip().lower()
    return key if key in CATEGORY_LABELS else DEFAULT_CATEGORY


def compute_category_totals(
    expenses: Iterable[Expense],
) -> list[CategoryTotal]:
    """Sum expense totals per category.

    Args:
        expenses: Expenses to aggregate.

    Returns:
        list[CategoryTotal]: Totals sorted by amount, largest first.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        key = resolve_category(expense.category)
        totals[key] = totals.get(key, Decimal("0")) + coerce_decimal(
            expense.total_amount
        )
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        CategoryTotal(
            category=key,
            label=CATEGORY_LABELS[key],
            amount=amount,
        )
        for key, amount in ordered
    ]


def filter_month(
    records: Iterable[RecordT],
    year: int,
    month: int,
) -> list[RecordT]:
    """Keep records whose timestamp falls in the given calendar month."""
    return [
        record
        for record in records
        if record.timestamp is not None
        and record.timestamp.year == year
        and record.timestamp.month == month
    ]


def compute_monthly_report(
    expenses: Iterable[Expense],
    transfers: Iterable[Transfer],
    *,
    year: int,
    month: int,
    names: PartyNames | None = None,
) -> MonthlyReport:
    """Compute the spending summary of a calendar month.

    Args:
        expenses: All known expenses.
        transfers: All known transfers.
        year: Report year.
        month: Report month (1-12).
        names: Optional display names for the balance statement.

    Returns:
        MonthlyReport: Totals, category breakdown, and monthly balance.
    """
    monthly_expenses = filter_month(expenses, year, month)
    monthly_transfers = filter_month(transfers, year, month)

    total_spent = Decimal("0")
    party_a_paid = Decimal("0")
    party_b_paid = Decimal("0")
    for expense in monthly_expenses:
        amount = coerce_decimal(expense.total_amount)
        total_spent += amount
        if expense.paid_by == PARTY_A:
            party_a_paid += amount
        elif expense.paid_by == PARTY_B:
            party_b_paid += amount

    return MonthlyReport(
        year=year,
        month=month,
        total_spent=total_spent,
        party_a_paid=party_a_paid,
        party_b_paid=party_b_paid,
        expense_count=len(monthly_expenses),
        transfer_count=len(monthly_transfers),
        categories=compute_category_totals(monthly_expenses),
        balance=compute_balance(monthly_expenses, monthly_transfers, names),
    )


def share_percentage(value: Decimal, total: Decimal) -> Decimal:
    """Return value as a percentage of total, rounded to one decimal."""
    if total == 0:
        return Decimal("0")
    return (value / total * Decimal("100")).quantize(Decimal("0.1"))


__all__ = [
    "category_label",
    "resolve_category",
    "compute_category_totals",
    "filter_month",
    "compute_monthly_report",
    "share_percentage",
]
