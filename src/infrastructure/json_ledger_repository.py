"""Repository reading a JSON export of the ledger."""

import json
from pathlib import Path

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import Expense, Transfer
from src.domain.services.normalization import (
    expense_from_record,
    transfer_from_record,
)
from src.infrastructure.logging.logger import get_app_logger


class JsonLedgerRepository(LedgerRepositoryPort):
    """Repository backed by a ``{"expenses": [...], "transfers": [...]}`` file.

    The file is read lazily on first access and cached for the lifetime of
    the repository.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._payload: dict | None = None

    def fetch_expenses(self) -> list[Expense]:
        records = self._load().get("expenses") or []
        expenses = [
            expense_from_record(record)
            for record in records
            if isinstance(record, dict)
        ]
        return self._drop_rejected(expenses, len(records), "expenses")

    def fetch_transfers(self) -> list[Transfer]:
        records = self._load().get("transfers") or []
        transfers = [
            transfer_from_record(record)
            for record in records
            if isinstance(record, dict)
        ]
        return self._drop_rejected(transfers, len(records), "transfers")

    def _load(self) -> dict:
        if self._payload is not None:
            return self._payload
        if not self._path.exists():
            raise RuntimeError(f"Ledger export file not found: {self._path}")
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Invalid ledger export file {self._path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Ledger export must be a JSON object: {self._path}"
            )
        self._payload = payload
        return payload

    def _drop_rejected(self, records: list, total: int, kind: str) -> list:
        kept = [record for record in records if record is not None]
        dropped = total - len(kept)
        if dropped:
            self._logger.warning(
                f"Skipped {dropped} malformed {kind} in {self._path.name}"
            )
        return kept


__all__ = ["JsonLedgerRepository"]
