"""Use case to compute the current balance between the two parties."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import BalanceResult, PartyNames
from src.domain.services.balance import compute_balance
from src.domain.services.validation import validate_share_sum
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceUseCase:
    """Compute who owes whom from every recorded expense and transfer."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        names: PartyNames | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing expenses and transfers.
            names: Optional display names for the settlement statement.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._names = names or PartyNames()
        self._logger = logger or get_app_logger()

    def execute(self) -> BalanceResult:
        """Return the balance over the whole ledger.

        Returns:
            BalanceResult: Nets, statuses, and the settlement statement.
        """
        expenses = self._repository.fetch_expenses()
        transfers = self._repository.fetch_transfers()
        for expense in expenses:
            validate_share_sum(expense, self._logger)

        balance = compute_balance(expenses, transfers, self._names)
        self._logger.info(
            f"Balance computed from {len(expenses)} expenses and "
            f"{len(transfers)} transfers: {balance.who_owes_whom} "
            f"({balance.amount_owed})"
        )
        return balance


__all__ = ["GetBalanceUseCase"]
