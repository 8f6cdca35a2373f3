"""Domain models for shared expenses and settlement transfers."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.domain.constants import DEFAULT_PARTY_A_NAME, DEFAULT_PARTY_B_NAME


@dataclass(frozen=True)
class Expense:
    """Shared expense recorded by one of the two parties.

    Attributes:
        total_amount: Full cost of the shared item.
        paid_by: Party that paid the merchant (person1 or person2).
        split_type: Split policy (equal, ratio, or exact).
        party_a_share: Amount person1 is responsible for.
        party_b_share: Amount person2 is responsible for.
        party_a_ratio: Optional person1 percentage for ratio splits.
        party_a_exact_share: Optional person1 amount for exact splits.
    """

    total_amount: Decimal
    paid_by: str
    split_type: str
    party_a_share: Decimal
    party_b_share: Decimal
    party_a_ratio: Decimal | None = None
    party_a_exact_share: Decimal | None = None
    category: str = "other"
    description: str = ""
    notes: str = ""
    timestamp: datetime | None = None
    expense_id: str | None = None


@dataclass(frozen=True)
class Transfer:
    """Direct settlement payment between the two parties."""

    amount: Decimal
    from_user: str
    to_user: str
    description: str = ""
    timestamp: datetime | None = None
    transfer_id: str | None = None


@dataclass(frozen=True)
class SplitAmounts:
    """Shares of an expense assigned to each party."""

    party_a_share: Decimal
    party_b_share: Decimal

    @property
    def total(self) -> Decimal:
        """Return the sum of both shares."""
        return self.party_a_share + self.party_b_share


@dataclass(frozen=True)
class PartyNames:
    """Display names of the two parties."""

    party_a_name: str = DEFAULT_PARTY_A_NAME
    party_b_name: str = DEFAULT_PARTY_B_NAME


@dataclass(frozen=True)
class BalanceResult:
    """Net position of both parties after expenses and transfers.

    Attributes:
        party_a_net: Signed balance of person1, positive when owed money.
        party_b_net: Signed balance of person2, always ``-party_a_net``.
        who_owes_whom: Human-readable settlement statement.
        amount_owed: Amount the debtor owes, zero when settled.
        party_a_status: creditor, debtor, or even.
        party_b_status: creditor, debtor, or even.
    """

    party_a_net: Decimal
    party_b_net: Decimal
    who_owes_whom: str
    amount_owed: Decimal
    party_a_status: str
    party_b_status: str

    @property
    def is_settled(self) -> bool:
        """Return True when neither party owes the other."""
        return self.amount_owed == 0


__all__ = [
    "Expense",
    "Transfer",
    "SplitAmounts",
    "PartyNames",
    "BalanceResult",
]
