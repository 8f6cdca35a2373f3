"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: MagicMock())
    for name in (
        "LEDGER_BACKEND",
        "LEDGER_EXPORT_FILE",
        "PERSON1_NAME",
        "PERSON2_NAME",
        "LEDGER_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Without configuration the SQL backend and default names are used."""
    settings = LedgerSettings.from_env()

    assert settings.backend == "sqlalchemy"
    assert settings.export_file is None
    assert settings.names.party_a_name == "Person 1"
    assert settings.names.party_b_name == "Person 2"
    assert settings.currency == "USD"


def test_from_env_reads_values(monkeypatch, tmp_path: Path) -> None:
    """Environment values override the defaults."""
    export = tmp_path / "export.json"
    export.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("LEDGER_BACKEND", " JSON ")
    monkeypatch.setenv("LEDGER_EXPORT_FILE", str(export))
    monkeypatch.setenv("PERSON1_NAME", "Priya")
    monkeypatch.setenv("PERSON2_NAME", " ")
    monkeypatch.setenv("LEDGER_CURRENCY", "inr")

    settings = LedgerSettings.from_env()

    assert settings.backend == "json"
    assert settings.export_file == export.resolve()
    assert settings.party_a_name == "Priya"
    assert settings.party_b_name == "Person 2"
    assert settings.currency == "INR"


def test_from_env_accepts_file_uri(monkeypatch, tmp_path: Path) -> None:
    """file:// URIs resolve to filesystem paths."""
    export = tmp_path / "ledger.json"
    monkeypatch.setenv("LEDGER_EXPORT_FILE", export.as_uri())

    settings = LedgerSettings.from_env()

    assert settings.export_file == export.resolve()


def test_default_export_file_uses_single_data_file(tmp_path: Path) -> None:
    """A single JSON export in data/ is picked up automatically."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    export = data_dir / "splitsync.json"
    export.write_text("{}", encoding="utf-8")

    settings = LedgerSettings.from_env()

    assert settings.export_file == export.resolve()


def test_default_export_file_is_ambiguous_with_many_files(
    tmp_path: Path,
) -> None:
    """Several exports in data/ require an explicit choice."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")

    settings = LedgerSettings.from_env()

    assert settings.export_file is None
