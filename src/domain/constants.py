"""Domain constants for the shared-expense ledger."""

from decimal import Decimal

PARTY_A = "person1"
PARTY_B = "person2"
PARTIES = (PARTY_A, PARTY_B)

SPLIT_EQUAL = "equal"
SPLIT_RATIO = "ratio"
SPLIT_EXACT = "exact"
SPLIT_TYPES = (SPLIT_EQUAL, SPLIT_RATIO, SPLIT_EXACT)

STATUS_CREDITOR = "creditor"
STATUS_DEBTOR = "debtor"
STATUS_EVEN = "even"

# Band around zero treated as settled, and the allowed drift between an
# expense total and the sum of its shares.
SETTLEMENT_TOLERANCE = Decimal("0.01")

DEFAULT_RATIO_PERCENT = Decimal("50")

DEFAULT_PARTY_A_NAME = "Person 1"
DEFAULT_PARTY_B_NAME = "Person 2"
SETTLED_MESSAGE = "You are all settled up!"
QUICK_SETTLE_DESCRIPTION = "Quick settle up"

DEFAULT_CATEGORY = "other"
CATEGORY_LABELS = {
    "groceries": "Groceries",
    "rent": "Rent/Home",
    "food": "Restaurants",
    "dating": "Date Night",
    "utils": "Utilities",
    "travel": "Travel",
    "fun": "Entertainment",
    "gifts": "Gifts",
    "bills": "Bills",
    "health": "Health",
    "transport": "Transport",
    "other": "Other",
}


def other_party(party: str) -> str:
    """Return the counterpart of a party identifier."""
    return PARTY_B if party == PARTY_A else PARTY_A


__all__ = [
    "PARTY_A",
    "PARTY_B",
    "PARTIES",
    "SPLIT_EQUAL",
    "SPLIT_RATIO",
    "SPLIT_EXACT",
    "SPLIT_TYPES",
    "STATUS_CREDITOR",
    "STATUS_DEBTOR",
    "STATUS_EVEN",
    "SETTLEMENT_TOLERANCE",
    "DEFAULT_RATIO_PERCENT",
    "DEFAULT_PARTY_A_NAME",
    "DEFAULT_PARTY_B_NAME",
    "SETTLED_MESSAGE",
    "QUICK_SETTLE_DESCRIPTION",
    "DEFAULT_CATEGORY",
    "CATEGORY_LABELS",
    "other_party",
]
