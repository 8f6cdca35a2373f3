"""Port for reading recorded expenses and transfers."""

from typing import Protocol

from src.domain.models import Expense, Transfer


class LedgerRepositoryPort(Protocol):
    """Port exposing the couple's ledger records."""

    def fetch_expenses(self) -> list[Expense]:
        """Return every recorded shared expense."""

    def fetch_transfers(self) -> list[Transfer]:
        """Return every recorded settlement transfer."""


__all__ = ["LedgerRepositoryPort"]
