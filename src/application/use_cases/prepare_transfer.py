"""Use case to validate a new settlement transfer form."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from src.application.use_cases.errors import TransferValidationError
from src.domain.constants import other_party
from src.domain.models import Transfer
from src.domain.services.normalization import normalize_party
from src.domain.services.validation import get_field_error
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class TransferForm:
    """Raw values entered in the add-transfer form."""

    amount: str | Decimal
    from_user: str
    description: str | None = ""


class PrepareTransferUseCase:
    """Validate a transfer form and build the Transfer it describes."""

    def __init__(self, logger=None, clock=None) -> None:
        self._logger = logger or get_app_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, form: TransferForm) -> Transfer:
        """Return the validated transfer.

        The receiver is always the other party.

        Raises:
            TransferValidationError: If the amount or sender is invalid.
        """
        errors: dict[str, str] = {}
        amount_error = get_field_error("Amount", form.amount, amount=True)
        if amount_error:
            errors["amount"] = amount_error
        from_user = normalize_party(form.from_user)
        if from_user is None:
            errors["from_user"] = "Select who paid"
        if errors:
            self._logger.warning(f"Rejected transfer form: {errors}")
            raise TransferValidationError(errors)

        return Transfer(
            amount=coerce_decimal(form.amount),
            from_user=from_user,
            to_user=other_party(from_user),
            description=(form.description or "").strip(),
            timestamp=self._clock(),
        )


__all__ = ["TransferForm", "PrepareTransferUseCase"]
