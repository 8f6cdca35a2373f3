"""Use case to validate a new expense form and derive its shares.

The presentation layer collects raw form values; this use case checks them
the way the add-expense form does and returns an immutable Expense ready to
be handed to whatever collaborator records it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from src.application.use_cases.errors import ExpenseValidationError
from src.domain.constants import (
    DEFAULT_RATIO_PERCENT,
    SPLIT_EXACT,
    SPLIT_RATIO,
    SPLIT_TYPES,
)
from src.domain.models import Expense
from src.domain.services.balance import compute_split_amounts
from src.domain.services.normalization import normalize_party
from src.domain.services.reports import resolve_category
from src.domain.services.validation import get_field_error
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class ExpenseForm:
    """Raw values entered in the add-expense form."""

    description: str
    total_amount: str | Decimal
    paid_by: str
    split_type: str = "equal"
    category: str = "other"
    party_a_ratio: str | Decimal | None = DEFAULT_RATIO_PERCENT
    party_a_exact_share: str | Decimal | None = None
    notes: str | None = ""


class PrepareExpenseUseCase:
    """Validate an expense form and build the Expense it describes."""

    def __init__(self, logger=None, clock=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the creation timestamp.
        """
        self._logger = logger or get_app_logger()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def execute(self, form: ExpenseForm) -> Expense:
        """Return the validated expense.

        Args:
            form: Raw form values.

        Returns:
            Expense: Expense with shares derived from its split policy.

        Raises:
            ExpenseValidationError: If any field is invalid.
        """
        errors = self._collect_errors(form)
        if errors:
            self._logger.warning(f"Rejected expense form: {errors}")
            raise ExpenseValidationError(errors)

        total = coerce_decimal(form.total_amount)
        split_type = form.split_type.strip().lower()
        ratio = (
            coerce_decimal(form.party_a_ratio)
            if split_type == SPLIT_RATIO
            else None
        )
        exact_share = (
            coerce_decimal(form.party_a_exact_share)
            if split_type == SPLIT_EXACT
            else None
        )
        shares = compute_split_amounts(
            total,
            split_type,
            party_a_ratio=ratio,
            party_a_exact_share=exact_share,
        )
        return Expense(
            total_amount=total,
            paid_by=normalize_party(form.paid_by),
            split_type=split_type,
            party_a_share=shares.party_a_share,
            party_b_share=shares.party_b_share,
            party_a_ratio=ratio,
            party_a_exact_share=exact_share,
            category=resolve_category(form.category),
            description=(form.description or "").strip(),
            notes=(form.notes or "").strip(),
            timestamp=self._clock(),
        )

    @staticmethod
    def _collect_errors(form: ExpenseForm) -> dict[str, str]:
        errors: dict[str, str] = {}
        checks = {
            "description": get_field_error(
                "Description",
                form.description,
                required=True,
            ),
            "total_amount": get_field_error(
                "Amount",
                form.total_amount,
                amount=True,
            ),
        }
        if normalize_party(form.paid_by) is None:
            checks["paid_by"] = "Select who paid"

        split_type = (form.split_type or "").strip().lower()
        if split_type not in SPLIT_TYPES:
            checks["split_type"] = "Choose equal, ratio or exact"
        elif split_type == SPLIT_RATIO:
            checks["party_a_ratio"] = get_field_error(
                "Ratio",
                form.party_a_ratio,
                ratio=True,
            )
        elif split_type == SPLIT_EXACT and checks["total_amount"] is None:
            checks["party_a_exact_share"] = get_field_error(
                "Exact amount",
                form.party_a_exact_share,
                exact_max=coerce_decimal(form.total_amount),
            )

        for field, message in checks.items():
            if message:
                errors[field] = message
        return errors


__all__ = ["ExpenseForm", "PrepareExpenseUseCase"]
