"""Tests for the JSON export ledger repository."""

import json
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure.json_ledger_repository import JsonLedgerRepository


def _write_export(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_fetch_records_from_export(tmp_path: Path) -> None:
    """Expenses and transfers are read and normalized."""
    export = _write_export(
        tmp_path / "export.json",
        {
            "expenses": [
                {
                    "id": "e1",
                    "totalAmount": 30,
                    "paidBy": "person2",
                    "splitType": "equal",
                    "person1Share": 15,
                    "person2Share": 15,
                    "category": "food",
                    "timestamp": {"seconds": 1714550400},
                },
                {"totalAmount": 5, "paidBy": "someone"},
                "garbage",
            ],
            "transfers": [
                {"amount": "7.25", "fromUser": "person1", "toUser": "person2"},
            ],
        },
    )
    logger = MagicMock()
    repository = JsonLedgerRepository(export, logger=logger)

    expenses = repository.fetch_expenses()
    transfers = repository.fetch_transfers()

    assert [expense.expense_id for expense in expenses] == ["e1"]
    assert expenses[0].timestamp.year == 2024
    assert transfers[0].amount == Decimal("7.25")
    logger.warning.assert_called_once()
    assert "2 malformed expenses" in logger.warning.call_args.args[0]


def test_missing_sections_yield_empty_lists(tmp_path: Path) -> None:
    """An export without records is an empty ledger."""
    export = _write_export(tmp_path / "empty.json", {})
    repository = JsonLedgerRepository(export, logger=MagicMock())

    assert repository.fetch_expenses() == []
    assert repository.fetch_transfers() == []


def test_missing_file_raises_runtime_error(tmp_path: Path) -> None:
    """A missing export is a configuration error."""
    repository = JsonLedgerRepository(tmp_path / "nope.json", logger=MagicMock())

    with pytest.raises(RuntimeError):
        repository.fetch_expenses()


def test_invalid_json_raises_runtime_error(tmp_path: Path) -> None:
    """Unparseable or non-object exports are rejected."""
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    listing = _write_export(tmp_path / "list.json", [])

    with pytest.raises(RuntimeError):
        JsonLedgerRepository(broken, logger=MagicMock()).fetch_expenses()
    with pytest.raises(RuntimeError):
        JsonLedgerRepository(listing, logger=MagicMock()).fetch_transfers()
