"""Domain services package."""

from .balance import (
    compute_balance,
    compute_split_amounts,
    reconcile_shares,
    suggest_settlement,
)
from .normalization import (
    expense_from_record,
    normalize_party,
    normalize_split_type,
    normalize_timestamp,
    transfer_from_record,
)
from .reports import (
    category_label,
    compute_category_totals,
    compute_monthly_report,
    filter_month,
    share_percentage,
)
from .validation import get_field_error, validate_share_sum

__all__ = [
    "compute_balance",
    "compute_split_amounts",
    "reconcile_shares",
    "suggest_settlement",
    "expense_from_record",
    "transfer_from_record",
    "normalize_party",
    "normalize_split_type",
    "normalize_timestamp",
    "category_label",
    "compute_category_totals",
    "compute_monthly_report",
    "filter_month",
    "share_percentage",
    "get_field_error",
    "validate_share_sum",
]
