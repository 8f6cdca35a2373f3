"""Tests for the SQLAlchemy ledger repository."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository


CREATE_EXPENSES_SQL = """
CREATE TABLE expenses (
    id TEXT PRIMARY KEY,
    description TEXT,
    total_amount NUMERIC,
    category TEXT,
    paid_by TEXT,
    split_type TEXT,
    person1_share NUMERIC,
    person2_share NUMERIC,
    person1_ratio NUMERIC,
    person1_exact_share NUMERIC,
    notes TEXT,
    created_at TEXT
)
"""

CREATE_TRANSFERS_SQL = """
CREATE TABLE transfers (
    id TEXT PRIMARY KEY,
    amount NUMERIC,
    from_user TEXT,
    to_user TEXT,
    description TEXT,
    created_at TEXT
)
"""


@pytest.fixture()
def db_port():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as conn:
        conn.exec_driver_sql(CREATE_EXPENSES_SQL)
        conn.exec_driver_sql(CREATE_TRANSFERS_SQL)
        conn.exec_driver_sql(
            "INSERT INTO expenses VALUES "
            "('e1', 'Rent', '1000', 'rent', 'person1', 'ratio', "
            "'600', '400', '60', NULL, '', '2024-05-01T09:00:00'), "
            "('e2', 'Ghost', '10', 'fun', 'nobody', 'equal', "
            "'5', '5', NULL, NULL, '', '2024-05-02T09:00:00')"
        )
        conn.exec_driver_sql(
            "INSERT INTO transfers VALUES "
            "('t1', '150', 'person2', 'person1', 'UPI', "
            "'2024-05-03T10:00:00')"
        )
    port = MagicMock()
    port.get_ledger_engine.return_value = engine
    yield port
    engine.dispose()


def test_fetch_expenses_normalizes_rows(db_port) -> None:
    """Rows are converted to Expense records; unknown payers are skipped."""
    logger = MagicMock()
    repository = SqlAlchemyLedgerRepository(db_port, logger=logger)

    expenses = repository.fetch_expenses()

    assert len(expenses) == 1
    rent = expenses[0]
    assert rent.expense_id == "e1"
    assert rent.total_amount == Decimal("1000")
    assert rent.party_a_share == Decimal("600")
    assert rent.party_a_ratio == Decimal("60")
    assert rent.party_a_exact_share is None
    assert rent.timestamp == datetime(2024, 5, 1, 9, 0)
    logger.warning.assert_called_once()


def test_fetch_transfers_normalizes_rows(db_port) -> None:
    """Transfer rows are converted to Transfer records."""
    repository = SqlAlchemyLedgerRepository(db_port, logger=MagicMock())

    transfers = repository.fetch_transfers()

    assert len(transfers) == 1
    assert transfers[0].amount == Decimal("150")
    assert transfers[0].from_user == "person2"
    assert transfers[0].to_user == "person1"
    assert transfers[0].description == "UPI"
