"""Use case to build the monthly spending report."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import MonthlyReport, PartyNames
from src.domain.services.reports import compute_monthly_report
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyReportUseCase:
    """Summarize spending and settlement for one calendar month."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        names: PartyNames | None = None,
        logger=None,
    ) -> None:
        self._repository = repository
        self._names = names or PartyNames()
        self._logger = logger or get_app_logger()

    def execute(self, year: int, month: int) -> MonthlyReport:
        """Return the report for the given month.

        Args:
            year: Report year.
            month: Report month (1-12).

        Returns:
            MonthlyReport: Totals, category breakdown, and monthly balance.

        Raises:
            ValueError: If the month is outside 1-12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid report month: {month}")
        report = compute_monthly_report(
            self._repository.fetch_expenses(),
            self._repository.fetch_transfers(),
            year=year,
            month=month,
            names=self._names,
        )
        self._logger.info(
            f"Monthly report {year}-{month:02d}: "
            f"{report.expense_count} expenses, total={report.total_spent}"
        )
        return report


__all__ = ["GetMonthlyReportUseCase"]
