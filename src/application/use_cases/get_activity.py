"""Use case to list recent ledger activity for presentation layers."""

from calendar import monthrange
from datetime import datetime, timedelta, timezone

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import ActivityEntry, Expense, Transfer
from src.domain.services.balance import reconcile_shares
from src.domain.services.reports import category_label, resolve_category

EXPENSE_KIND = "expense"
TRANSFER_KIND = "transfer"

KIND_ALL = "all"
KIND_EXPENSES = "expenses"
KIND_TRANSFERS = "transfers"
KINDS = (KIND_ALL, KIND_EXPENSES, KIND_TRANSFERS)

SORT_DATE = "date"
SORT_AMOUNT = "amount"
SORT_CATEGORY = "category"
SORT_ORDERS = (SORT_DATE, SORT_AMOUNT, SORT_CATEGORY)

DATE_RANGES = ("today", "week", "month", "quarter", "year")

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(timestamp: datetime | None) -> datetime:
    if timestamp is None:
        return _OLDEST
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def _months_ago(now: datetime, months: int) -> datetime:
    # Clamp the day so that e.g. May 31 minus one month is April 30.
    month_index = now.year * 12 + now.month - 1 - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(now.day, monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def range_start(date_range: str, now: datetime) -> datetime:
    """Return the earliest timestamp included in a named date range.

    Args:
        date_range: One of today, week, month, quarter, or year.
        now: Current time.

    Returns:
        datetime: Start of the range.

    Raises:
        ValueError: If the range name is unknown.
    """
    if date_range == "today":
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if date_range == "week":
        return now - timedelta(days=7)
    if date_range == "month":
        return _months_ago(now, 1)
    if date_range == "quarter":
        return _months_ago(now, 3)
    if date_range == "year":
        return _months_ago(now, 12)
    raise ValueError(f"Unknown date range: {date_range}")


class GetActivityUseCase:
    """Merge expenses and transfers into a single activity feed."""

    def __init__(self, repository: LedgerRepositoryPort, clock=None) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(
        self,
        query: str | None = None,
        limit: int | None = None,
        *,
        category: str | None = None,
        date_range: str | None = None,
        sort_by: str = SORT_DATE,
        kind: str = KIND_ALL,
    ) -> list[ActivityEntry]:
        """Return activity entries, newest first by default.

        The query, category and date range narrow down expenses only;
        transfers stay in the feed unless ``kind`` excludes them.

        Args:
            query: Optional case-insensitive filter on expense description
                or category.
            limit: Optional maximum number of entries.
            category: Optional exact category key for expenses.
            date_range: Optional named range (today, week, month, quarter,
                year) that expenses must fall in.
            sort_by: date (newest first), amount (largest first), or
                category (alphabetical, transfers last).
            kind: all, expenses, or transfers.

        Returns:
            list[ActivityEntry]: Expenses with display shares and transfers.

        Raises:
            ValueError: If sort_by, kind or date_range is unknown.
        """
        if sort_by not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {sort_by}")
        if kind not in KINDS:
            raise ValueError(f"Unknown activity kind: {kind}")
        since = (
            range_start(date_range, _as_utc(self._clock()))
            if date_range
            else None
        )

        expenses: list[Expense] = []
        transfers: list[Transfer] = []
        if kind != KIND_TRANSFERS:
            expenses = self._filter_expenses(
                self._repository.fetch_expenses(),
                query=query,
                category=category,
                since=since,
            )
        if kind != KIND_EXPENSES:
            transfers = self._repository.fetch_transfers()

        entries = [self._from_expense(expense) for expense in expenses]
        entries.extend(self._from_transfer(transfer) for transfer in transfers)
        _sort_entries(entries, sort_by)
        if limit is not None:
            entries = entries[:limit]
        return entries

    @staticmethod
    def _filter_expenses(
        expenses: list[Expense],
        *,
        query: str | None,
        category: str | None,
        since: datetime | None,
    ) -> list[Expense]:
        needle = (query or "").strip().lower()
        wanted = (category or "").strip().lower()
        kept = []
        for expense in expenses:
            if needle and not (
                needle in expense.description.lower()
                or needle in expense.category.lower()
            ):
                continue
            if wanted and resolve_category(expense.category) != wanted:
                continue
            if since is not None and (
                expense.timestamp is None or _as_utc(expense.timestamp) < since
            ):
                continue
            kept.append(expense)
        return kept

    @staticmethod
    def _from_expense(expense: Expense) -> ActivityEntry:
        shares = reconcile_shares(expense)
        return ActivityEntry(
            kind=EXPENSE_KIND,
            amount=expense.total_amount,
            description=expense.description,
            timestamp=expense.timestamp,
            paid_by=expense.paid_by,
            category=resolve_category(expense.category),
            category_label=category_label(expense.category),
            party_a_share=shares.party_a_share,
            party_b_share=shares.party_b_share,
        )

    @staticmethod
    def _from_transfer(transfer: Transfer) -> ActivityEntry:
        return ActivityEntry(
            kind=TRANSFER_KIND,
            amount=transfer.amount,
            description=transfer.description or "Transfer",
            timestamp=transfer.timestamp,
            from_user=transfer.from_user,
            to_user=transfer.to_user,
        )


def _sort_entries(entries: list[ActivityEntry], sort_by: str) -> None:
    # Newest first is applied first so ties keep a chronological order.
    entries.sort(key=lambda entry: _as_utc(entry.timestamp), reverse=True)
    if sort_by == SORT_AMOUNT:
        entries.sort(key=lambda entry: entry.amount, reverse=True)
    elif sort_by == SORT_CATEGORY:
        entries.sort(
            key=lambda entry: (entry.category is None, entry.category or "")
        )


__all__ = [
    "GetActivityUseCase",
    "range_start",
    "EXPENSE_KIND",
    "TRANSFER_KIND",
    "KINDS",
    "SORT_ORDERS",
    "DATE_RANGES",
]
