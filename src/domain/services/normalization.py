"""Domain normalization helpers for raw ledger records."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from src.domain.constants import (
    DEFAULT_CATEGORY,
    PARTIES,
    SPLIT_EQUAL,
    SPLIT_TYPES,
    other_party,
)
from src.domain.models import Expense, Transfer
from src.utils.decimal_utils import coerce_decimal, optional_decimal


def normalize_party(value: Any) -> str | None:
    """Normalize a party identifier.

    Args:
        value: Raw party value (``person1`` or ``person2``).

    Returns:
        str | None: Normalized identifier, or None when unrecognized.
    """
    if not isinstance(value, str):
        return None
    cleaned = value.strip().lower()
    return cleaned if cleaned in PARTIES else None


def normalize_split_type(value: Any) -> str:
    """Normalize a split type, defaulting to an equal split.

    Args:
        value: Raw split type value.

    Returns:
        str: equal, ratio, or exact.
    """
    if not isinstance(value, str):
        return SPLIT_EQUAL
    cleaned = value.strip().lower()
    return cleaned if cleaned in SPLIT_TYPES else SPLIT_EQUAL


def normalize_timestamp(value: Any) -> datetime | None:
    """Normalize supported timestamp encodings to a datetime.

    Accepts datetimes, ISO 8601 strings, epoch seconds, and mappings with a
    ``seconds`` key.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, Mapping):
        return normalize_timestamp(value.get("seconds"))
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return None
        if cleaned.endswith("Z"):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(cleaned)
        except ValueError:
            return None
    return None


def _pick(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return None


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _identifier(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def expense_from_record(record: Mapping[str, Any]) -> Expense | None:
    """Build an Expense from a snake_case or camelCase mapping.

    Missing or invalid amounts become zero. Records whose payer is not one
    of the two parties are rejected.

    Args:
        record: Raw expense mapping from a repository.

    Returns:
        Expense | None: Normalized expense, or None when unusable.
    """
    paid_by = normalize_party(_pick(record, "paid_by", "paidBy"))
    if paid_by is None:
        return None
    category = _text(_pick(record, "category")).lower() or DEFAULT_CATEGORY
    return Expense(
        total_amount=coerce_decimal(_pick(record, "total_amount", "totalAmount")),
        paid_by=paid_by,
        split_type=normalize_split_type(_pick(record, "split_type", "splitType")),
        party_a_share=coerce_decimal(
            _pick(record, "person1_share", "person1Share")
        ),
        party_b_share=coerce_decimal(
            _pick(record, "person2_share", "person2Share")
        ),
        party_a_ratio=optional_decimal(
            _pick(record, "person1_ratio", "person1Ratio")
        ),
        party_a_exact_share=optional_decimal(
            _pick(record, "person1_exact_share", "person1ExactShare")
        ),
        category=category,
        description=_text(_pick(record, "description")),
        notes=_text(_pick(record, "notes")),
        timestamp=normalize_timestamp(
            _pick(record, "created_at", "createdAt", "timestamp")
        ),
        expense_id=_identifier(_pick(record, "id", "_id")),
    )


def transfer_from_record(record: Mapping[str, Any]) -> Transfer | None:
    """Build a Transfer from a snake_case or camelCase mapping.

    A missing receiver is inferred as the other party. Transfers from an
    unknown party or to the sender itself are rejected.

    Args:
        record: Raw transfer mapping from a repository.

    Returns:
        Transfer | None: Normalized transfer, or None when unusable.
    """
    from_user = normalize_party(_pick(record, "from_user", "fromUser"))
    if from_user is None:
        return None
    raw_to_user = _pick(record, "to_user", "toUser")
    to_user = (
        other_party(from_user)
        if raw_to_user is None
        else normalize_party(raw_to_user)
    )
    if to_user is None or to_user == from_user:
        return None
    return Transfer(
        amount=coerce_decimal(_pick(record, "amount")),
        from_user=from_user,
        to_user=to_user,
        description=_text(_pick(record, "description")),
        timestamp=normalize_timestamp(
            _pick(record, "created_at", "createdAt", "timestamp")
        ),
        transfer_id=_identifier(_pick(record, "id", "_id")),
    )


__all__ = [
    "normalize_party",
    "normalize_split_type",
    "normalize_timestamp",
    "expense_from_record",
    "transfer_from_record",
]
