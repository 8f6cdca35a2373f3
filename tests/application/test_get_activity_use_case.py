"""Tests for the GetActivityUseCase."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from src.application.use_cases.get_activity import (
    EXPENSE_KIND,
    TRANSFER_KIND,
    GetActivityUseCase,
    range_start,
)
from src.domain.models import Expense, Transfer


class _FakeRepository:
    def __init__(self, expenses, transfers) -> None:
        self._expenses = expenses
        self._transfers = transfers

    def fetch_expenses(self):
        return list(self._expenses)

    def fetch_transfers(self):
        return list(self._transfers)


def _repository() -> _FakeRepository:
    expenses = [
        Expense(
            total_amount=Decimal("100"),
            paid_by="person1",
            split_type="equal",
            party_a_share=Decimal("60"),
            party_b_share=Decimal("30"),
            category="groceries",
            description="Weekly shop",
            timestamp=datetime(2024, 3, 1, tzinfo=timezone.utc),
        ),
        Expense(
            total_amount=Decimal("45"),
            paid_by="person2",
            split_type="exact",
            party_a_share=Decimal("15"),
            party_b_share=Decimal("30"),
            category="food",
            description="Pizza night",
            timestamp=datetime(2024, 3, 3),
        ),
        Expense(
            total_amount=Decimal("9"),
            paid_by="person2",
            split_type="equal",
            party_a_share=Decimal("4.5"),
            party_b_share=Decimal("4.5"),
            category="mystery",
            description="Undated",
        ),
    ]
    transfers = [
        Transfer(
            amount=Decimal("20"),
            from_user="person2",
            to_user="person1",
            timestamp=datetime(2024, 3, 2, tzinfo=timezone.utc),
        )
    ]
    return _FakeRepository(expenses, transfers)


def test_execute_merges_records_newest_first() -> None:
    """Activity mixes expenses and transfers ordered by timestamp."""
    entries = GetActivityUseCase(_repository()).execute()

    assert [entry.description for entry in entries] == [
        "Pizza night",
        "Transfer",
        "Weekly shop",
        "Undated",
    ]
    assert entries[1].kind == TRANSFER_KIND
    assert entries[1].from_user == "person2"
    assert entries[0].kind == EXPENSE_KIND
    assert entries[3].category == "other"
    assert entries[3].category_label == "Other"


def test_execute_reconciles_drifted_shares() -> None:
    """Expense entries carry display shares consistent with the total."""
    entries = GetActivityUseCase(_repository()).execute()
    weekly_shop = entries[2]

    assert weekly_shop.party_a_share == Decimal("50")
    assert weekly_shop.party_b_share == Decimal("50")
    assert weekly_shop.category_label == "Groceries"


def _descriptions(entries) -> list[str]:
    return [entry.description for entry in entries]


def test_query_filters_expenses_and_keeps_transfers() -> None:
    """Queries match descriptions or categories; transfers stay listed."""
    use_case = GetActivityUseCase(_repository())

    by_description = use_case.execute(query="PIZZA")
    by_category = use_case.execute(query="groceries")

    assert _descriptions(by_description) == ["Pizza night", "Transfer"]
    assert _descriptions(by_category) == ["Transfer", "Weekly shop"]
    assert by_description[1].kind == TRANSFER_KIND


def test_limit_truncates_after_sorting() -> None:
    entries = GetActivityUseCase(_repository()).execute(limit=2)

    assert _descriptions(entries) == ["Pizza night", "Transfer"]


def test_category_filter_matches_resolved_key() -> None:
    """Unknown stored categories are filed under other."""
    use_case = GetActivityUseCase(_repository())

    food = use_case.execute(category="Food")
    other = use_case.execute(category="other")

    assert _descriptions(food) == ["Pizza night", "Transfer"]
    assert _descriptions(other) == ["Transfer", "Undated"]


def test_date_range_drops_old_and_undated_expenses() -> None:
    """Expenses outside the range or without a timestamp are hidden."""
    week = GetActivityUseCase(
        _repository(),
        clock=lambda: datetime(2024, 3, 5, 12, tzinfo=timezone.utc),
    ).execute(date_range="week")
    today = GetActivityUseCase(
        _repository(),
        clock=lambda: datetime(2024, 3, 3, 18, tzinfo=timezone.utc),
    ).execute(date_range="today")

    assert _descriptions(week) == ["Pizza night", "Transfer", "Weekly shop"]
    assert _descriptions(today) == ["Pizza night", "Transfer"]


def test_sort_by_amount_and_category() -> None:
    use_case = GetActivityUseCase(_repository())

    by_amount = use_case.execute(sort_by="amount")
    by_category = use_case.execute(sort_by="category")

    assert [entry.amount for entry in by_amount] == [
        Decimal("100"),
        Decimal("45"),
        Decimal("20"),
        Decimal("9"),
    ]
    assert _descriptions(by_category) == [
        "Pizza night",
        "Weekly shop",
        "Undated",
        "Transfer",
    ]


def test_kind_selects_expenses_or_transfers() -> None:
    use_case = GetActivityUseCase(_repository())

    expenses_only = use_case.execute(kind="expenses")
    transfers_only = use_case.execute(kind="transfers", query="pizza")

    assert {entry.kind for entry in expenses_only} == {EXPENSE_KIND}
    assert len(expenses_only) == 3
    assert _descriptions(transfers_only) == ["Transfer"]


@pytest.mark.parametrize(
    "options",
    [{"sort_by": "payer"}, {"kind": "budgets"}, {"date_range": "decade"}],
)
def test_unknown_options_raise(options) -> None:
    with pytest.raises(ValueError):
        GetActivityUseCase(_repository()).execute(**options)


@pytest.mark.parametrize(
    ("date_range", "now", "expected"),
    [
        ("month", datetime(2024, 5, 31, 9), datetime(2024, 4, 30, 9)),
        ("quarter", datetime(2024, 1, 15), datetime(2023, 10, 15)),
        ("year", datetime(2024, 2, 29), datetime(2023, 2, 28)),
        ("today", datetime(2024, 2, 29, 17, 45), datetime(2024, 2, 29)),
    ],
)
def test_range_start_clamps_calendar_months(date_range, now, expected):
    assert range_start(date_range, now) == expected
