"""Tests for ledger repository backend selection."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import ledger_repository_factory as factory
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.settings import LedgerSettings


def test_factory_defaults_to_sqlalchemy() -> None:
    """Factory should return the SQLAlchemy repository by default."""
    db_port = MagicMock()
    repository = factory.create_ledger_repository(
        db_port,
        logger=MagicMock(),
        settings=LedgerSettings(),
    )
    assert isinstance(repository, SqlAlchemyLedgerRepository)


def test_factory_uses_json_backend(monkeypatch, tmp_path: Path) -> None:
    """Factory should return the JSON repository when configured."""
    dummy_repo = object()

    def _fake_repo(path, logger=None):
        assert path == tmp_path
        assert logger is not None
        return dummy_repo

    monkeypatch.setattr(factory, "JsonLedgerRepository", _fake_repo)
    settings = LedgerSettings(backend="json", export_file=tmp_path)

    repository = factory.create_ledger_repository(
        MagicMock(),
        settings=settings,
        logger=MagicMock(),
    )

    assert repository is dummy_repo


def test_factory_requires_export_file_for_json() -> None:
    """The JSON backend cannot run without an export file."""
    with pytest.raises(RuntimeError):
        factory.create_ledger_repository(
            MagicMock(),
            logger=MagicMock(),
            settings=LedgerSettings(backend="json"),
        )


def test_factory_rejects_unknown_backend() -> None:
    """Unknown backends raise a ValueError."""
    with pytest.raises(ValueError):
        factory.create_ledger_repository(
            MagicMock(),
            logger=MagicMock(),
            settings=LedgerSettings(backend="mongo"),
        )
