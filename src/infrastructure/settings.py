"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.constants import DEFAULT_PARTY_A_NAME, DEFAULT_PARTY_B_NAME
from src.domain.models import PartyNames
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger backend and presentation.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        export_file: Optional path to a JSON export for the json backend.
        party_a_name: Display name of person1.
        party_b_name: Display name of person2.
        currency: Currency code used when formatting amounts.
    """

    backend: str = "sqlalchemy"
    export_file: Optional[Path] = None
    party_a_name: str = DEFAULT_PARTY_A_NAME
    party_b_name: str = DEFAULT_PARTY_B_NAME
    currency: str = "USD"

    @property
    def names(self) -> PartyNames:
        """Return the display names of both parties."""
        return PartyNames(
            party_a_name=self.party_a_name,
            party_b_name=self.party_b_name,
        )

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        raw_export = os.getenv("LEDGER_EXPORT_FILE")
        if raw_export:
            export_file = cls._normalize_path(raw_export, logger=logger)
        else:
            export_file = cls._default_export_file(logger=logger)
        return cls(
            backend=backend,
            export_file=export_file,
            party_a_name=cls._read_name("PERSON1_NAME", DEFAULT_PARTY_A_NAME),
            party_b_name=cls._read_name("PERSON2_NAME", DEFAULT_PARTY_B_NAME),
            currency=(os.getenv("LEDGER_CURRENCY") or "USD").strip().upper(),
        )

    @staticmethod
    def _read_name(variable: str, default: str) -> str:
        value = (os.getenv(variable) or "").strip()
        return value or default

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path:
        """Normalize the export file path or file URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger export file does not exist at {path}")
        return path

    @staticmethod
    def _default_export_file(logger) -> Path | None:
        """Return a default export path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json exports found in data/. "
                "Set LEDGER_EXPORT_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
