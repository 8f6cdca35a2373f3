"""Domain validation helpers."""

from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.constants import SETTLEMENT_TOLERANCE
from src.domain.models import Expense


def _parse_number(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def validate_amount(value) -> bool:
    """Return True when the value is a positive number."""
    number = _parse_number(value)
    return number is not None and number > 0


def validate_ratio(value) -> bool:
    """Return True when the value is a percentage between 0 and 100."""
    number = _parse_number(value)
    return number is not None and 0 <= number <= 100


def validate_exact_share(value, total) -> bool:
    """Return True when the value lies between 0 and the expense total."""
    number = _parse_number(value)
    limit = _parse_number(total)
    return (
        number is not None
        and limit is not None
        and 0 <= number <= limit
    )


def validate_required(value) -> bool:
    """Return True when the value is a non-blank string."""
    return isinstance(value, str) and bool(value.strip())


def get_field_error(
    field: str,
    value,
    *,
    required: bool = False,
    amount: bool = False,
    ratio: bool = False,
    exact_max=None,
) -> str | None:
    """Return the first validation error for a form field.

    Args:
        field: Human-readable field name used in messages.
        value: Raw form value.
        required: Whether the field must be a non-blank string.
        amount: Whether the field must be a positive number.
        ratio: Whether the field must be a percentage.
        exact_max: Upper bound for an exact share, when checked.

    Returns:
        str | None: Error message, or None when the value is valid.
    """
    if required and not validate_required(value):
        return f"{field} is required"
    if amount and not validate_amount(value):
        return "Please enter a valid amount"
    if ratio and not validate_ratio(value):
        return "Ratio must be between 0 and 100"
    if exact_max is not None and not validate_exact_share(value, exact_max):
        return f"Amount must be between 0 and {exact_max}"
    return None


def validate_share_sum(expense: Expense, logger: Logger) -> bool:
    """Warn when stored shares do not add up to the expense total.

    Args:
        expense: Expense to check.
        logger: Logger used for warnings.

    Returns:
        bool: True when the shares match the total within tolerance.
    """
    drift = expense.party_a_share + expense.party_b_share - expense.total_amount
    if abs(drift) <= SETTLEMENT_TOLERANCE:
        return True
    logger.warning(
        f"Expense shares drift from total for expense_id={expense.expense_id}: "
        f"{expense.party_a_share} + {expense.party_b_share} "
        f"!= {expense.total_amount}"
    )
    return False


__all__ = [
    "validate_amount",
    "validate_ratio",
    "validate_exact_share",
    "validate_required",
    "get_field_error",
    "validate_share_sum",
]
