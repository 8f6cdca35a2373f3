"""Factory helpers to select the ledger repository backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.json_ledger_repository import JsonLedgerRepository
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def create_ledger_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        db_port: Port providing access to the ledger engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        LedgerRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the json backend has no export file.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or LedgerSettings.from_env()
    selected_backend = resolved_settings.backend

    if selected_backend == "sqlalchemy":
        return SqlAlchemyLedgerRepository(db_port, logger=resolved_logger)

    if selected_backend == "json":
        if resolved_settings.export_file is None:
            raise RuntimeError(
                "JSON backend requires a LEDGER_EXPORT_FILE path."
            )
        return JsonLedgerRepository(
            resolved_settings.export_file,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported ledger backend: "
        f"{selected_backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_ledger_repository"]
