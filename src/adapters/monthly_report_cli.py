"""CLI adapter printing the monthly spending report."""

from datetime import date
import os

from src.adapters.formatting import format_currency
from src.application.use_cases.get_monthly_report import (
    GetMonthlyReportUseCase,
)
from src.domain.models import MonthlyReport, PartyNames
from src.domain.services.reports import share_percentage
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_month(value: str | None, logger) -> tuple[int, int]:
    """Parse a YYYY-MM string, defaulting to the current month.

    Args:
        value: Month string in YYYY-MM format.
        logger: Logger used for warnings.

    Returns:
        tuple[int, int]: Year and month.
    """
    today = date.today()
    if not value:
        return today.year, today.month
    try:
        parsed = date.fromisoformat(f"{value.strip()}-01")
    except ValueError:
        logger.warning(
            f"Invalid month '{value}'. Expected format YYYY-MM."
        )
        return today.year, today.month
    return parsed.year, parsed.month


def render_report(
    report: MonthlyReport,
    names: PartyNames,
    currency: str,
) -> str:
    """Render the report as shareable plain text."""
    period = date(report.year, report.month, 1).strftime("%B %Y")
    lines = [
        f"Monthly Report - {period}",
        f"Total Spent: {format_currency(report.total_spent, currency)}",
        (
            f"{names.party_a_name} Paid: "
            f"{format_currency(report.party_a_paid, currency)} "
            f"({share_percentage(report.party_a_paid, report.total_spent)}%)"
        ),
        (
            f"{names.party_b_name} Paid: "
            f"{format_currency(report.party_b_paid, currency)} "
            f"({share_percentage(report.party_b_paid, report.total_spent)}%)"
        ),
    ]
    if report.categories:
        lines.append("Categories:")
        lines.extend(
            f"  {item.label}: {format_currency(item.amount, currency)}"
            for item in report.categories
        )
    lines.append(f"Balance: {report.balance.who_owes_whom}")
    return "\n".join(lines)


def main() -> None:
    """Print the report for REPORT_MONTH (default: current month)."""
    logger = get_app_logger()
    settings = build_settings()
    year, month = _parse_month(os.getenv("REPORT_MONTH"), logger)
    try:
        repository = build_ledger_repository(settings=settings)
        report = GetMonthlyReportUseCase(
            repository=repository,
            names=settings.names,
            logger=logger,
        ).execute(year, month)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    print(render_report(report, settings.names, settings.currency))
    get_usage_logger().info(f"monthly_report_cli run for {year}-{month:02d}")


if __name__ == "__main__":  # pragma: no cover
    main()
