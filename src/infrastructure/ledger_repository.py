"""SQLAlchemy-backed repository for recorded expenses and transfers."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Expense, Transfer
from src.domain.services.normalization import (
    expense_from_record,
    transfer_from_record,
)
from src.infrastructure.logging.logger import get_app_logger


SELECT_EXPENSES_SQL = text(
    """
    SELECT id, description, total_amount, category, paid_by, split_type,
           person1_share, person2_share, person1_ratio, person1_exact_share,
           notes, created_at
    FROM expenses
    ORDER BY created_at
    """
)

SELECT_TRANSFERS_SQL = text(
    """
    SELECT id, amount, from_user, to_user, description, created_at
    FROM transfers
    ORDER BY created_at
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading the ledger tables through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_expenses(self) -> list[Expense]:
        rows = self._fetch_rows(SELECT_EXPENSES_SQL)
        expenses = [expense_from_record(row) for row in rows]
        return self._drop_rejected(expenses, "expenses")

    def fetch_transfers(self) -> list[Transfer]:
        rows = self._fetch_rows(SELECT_TRANSFERS_SQL)
        transfers = [transfer_from_record(row) for row in rows]
        return self._drop_rejected(transfers, "transfers")

    def _fetch_rows(self, query) -> list[dict]:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [dict(row._mapping) for row in rows]

    def _drop_rejected(self, records: list, kind: str) -> list:
        kept = [record for record in records if record is not None]
        dropped = len(records) - len(kept)
        if dropped:
            self._logger.warning(
                f"Skipped {dropped} {kind} with unknown parties"
            )
        return kept


__all__ = ["SqlAlchemyLedgerRepository"]
