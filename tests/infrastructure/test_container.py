"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import LedgerSettings


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    """The default database adapter is SQLAlchemy-backed."""
    adapter = container.build_database_adapter()
    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_build_ledger_repository_delegates_to_factory(monkeypatch) -> None:
    """The container wires the adapter and settings into the factory."""
    captured = {}
    db_port = MagicMock()
    settings = LedgerSettings(backend="json")

    def _fake_factory(db, logger=None, settings=None):
        captured["db"] = db
        captured["settings"] = settings
        return "repository"

    monkeypatch.setattr(container, "create_ledger_repository", _fake_factory)
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    repository = container.build_ledger_repository(db_port, settings=settings)

    assert repository == "repository"
    assert captured["db"] is db_port
    assert captured["settings"] is settings
