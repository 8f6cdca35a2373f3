"""Domain services for the two-party balance and expense splits."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_RATIO_PERCENT,
    PARTY_A,
    PARTY_B,
    QUICK_SETTLE_DESCRIPTION,
    SETTLED_MESSAGE,
    SETTLEMENT_TOLERANCE,
    SPLIT_EQUAL,
    SPLIT_EXACT,
    SPLIT_RATIO,
    STATUS_CREDITOR,
    STATUS_DEBTOR,
    STATUS_EVEN,
)
from src.domain.models import (
    BalanceResult,
    Expense,
    PartyNames,
    SplitAmounts,
    Transfer,
)
from src.utils.decimal_utils import coerce_decimal


def compute_balance(
    expenses: Iterable[Expense],
    transfers: Iterable[Transfer],
    names: PartyNames | None = None,
) -> BalanceResult:
    """Compute each party's net position from expenses and transfers.

    A party's net is what they paid minus the shares they are responsible
    for; a transfer moves the same amount from the receiver's net to the
    sender's, so the two nets always sum to zero.

    Args:
        expenses: Shared expenses, in any order.
        transfers: Settlement transfers, in any order.
        names: Optional display names used in the settlement statement.

    Returns:
        BalanceResult: Nets, statuses, and the settlement statement.
    """
    resolved_names = names or PartyNames()
    party_a_owed = Decimal("0")
    party_b_owed = Decimal("0")
    party_a_paid = Decimal("0")
    party_b_paid = Decimal("0")

    for expense in expenses:
        party_a_owed += coerce_decimal(expense.party_a_share)
        party_b_owed += coerce_decimal(expense.party_b_share)
        if expense.paid_by == PARTY_A:
            party_a_paid += coerce_decimal(expense.total_amount)
        elif expense.paid_by == PARTY_B:
            party_b_paid += coerce_decimal(expense.total_amount)

    party_a_net = party_a_paid - party_a_owed
    party_b_net = party_b_paid - party_b_owed

    for transfer in transfers:
        amount = coerce_decimal(transfer.amount)
        if transfer.from_user == PARTY_A:
            party_a_net += amount
            party_b_net -= amount
        elif transfer.from_user == PARTY_B:
            party_b_net += amount
            party_a_net -= amount

    return _classify(party_a_net, party_b_net, resolved_names)


def _classify(
    party_a_net: Decimal,
    party_b_net: Decimal,
    names: PartyNames,
) -> BalanceResult:
    if party_a_net > SETTLEMENT_TOLERANCE:
        return BalanceResult(
            party_a_net=party_a_net,
            party_b_net=party_b_net,
            who_owes_whom=f"{names.party_b_name} owes {names.party_a_name}",
            amount_owed=abs(party_a_net),
            party_a_status=STATUS_CREDITOR,
            party_b_status=STATUS_DEBTOR,
        )
    if party_a_net < -SETTLEMENT_TOLERANCE:
        return BalanceResult(
            party_a_net=party_a_net,
            party_b_net=party_b_net,
            who_owes_whom=f"{names.party_a_name} owes {names.party_b_name}",
            amount_owed=abs(party_a_net),
            party_a_status=STATUS_DEBTOR,
            party_b_status=STATUS_CREDITOR,
        )
    return BalanceResult(
        party_a_net=party_a_net,
        party_b_net=party_b_net,
        who_owes_whom=SETTLED_MESSAGE,
        amount_owed=Decimal("0"),
        party_a_status=STATUS_EVEN,
        party_b_status=STATUS_EVEN,
    )


def compute_split_amounts(
    total,
    split_type: str,
    party_a_ratio=None,
    party_a_exact_share=None,
) -> SplitAmounts:
    """Derive both shares of a new expense from its split policy.

    Person2's share is always the remainder of person1's, so the shares
    sum to the total exactly. Out-of-range parameters are not rejected.

    Args:
        total: Expense total.
        split_type: equal, ratio, or exact.
        party_a_ratio: Person1 percentage for ratio splits (default 50).
        party_a_exact_share: Person1 amount for exact splits (default 0).

    Returns:
        SplitAmounts: Shares of person1 and person2. Both are zero for an
        unknown split type.
    """
    amount = coerce_decimal(total)
    if split_type == SPLIT_EQUAL:
        party_a_share = amount / 2
    elif split_type == SPLIT_RATIO:
        ratio = (
            DEFAULT_RATIO_PERCENT
            if party_a_ratio is None
            else coerce_decimal(party_a_ratio)
        )
        party_a_share = amount * ratio / Decimal("100")
    elif split_type == SPLIT_EXACT:
        party_a_share = coerce_decimal(party_a_exact_share)
    else:
        return SplitAmounts(Decimal("0"), Decimal("0"))
    return SplitAmounts(
        party_a_share=party_a_share,
        party_b_share=amount - party_a_share,
    )


def reconcile_shares(expense: Expense) -> SplitAmounts:
    """Return display shares consistent with the expense total.

    Stored shares are kept when they sum to the total within tolerance.
    Otherwise equal and ratio splits are recomputed from their parameters,
    while exact splits are scaled proportionally to the total. Anything
    without usable parameters falls back to an equal split.

    Args:
        expense: Expense whose stored shares may have drifted.

    Returns:
        SplitAmounts: Shares to display.
    """
    total = coerce_decimal(expense.total_amount)
    stored = SplitAmounts(
        party_a_share=coerce_decimal(expense.party_a_share),
        party_b_share=coerce_decimal(expense.party_b_share),
    )
    if abs(stored.total - total) <= SETTLEMENT_TOLERANCE:
        return stored

    if expense.split_type == SPLIT_RATIO and expense.party_a_ratio is not None:
        return compute_split_amounts(
            total,
            SPLIT_RATIO,
            party_a_ratio=expense.party_a_ratio,
        )
    if expense.split_type == SPLIT_EXACT:
        if stored.total != 0:
            party_a_share = stored.party_a_share * total / stored.total
            return SplitAmounts(
                party_a_share=party_a_share,
                party_b_share=total - party_a_share,
            )
        if expense.party_a_exact_share is not None:
            return compute_split_amounts(
                total,
                SPLIT_EXACT,
                party_a_exact_share=expense.party_a_exact_share,
            )
    return compute_split_amounts(total, SPLIT_EQUAL)


def suggest_settlement(balance: BalanceResult) -> Transfer | None:
    """Return the transfer that settles the balance, if any.

    Args:
        balance: Current balance between the parties.

    Returns:
        Transfer | None: Payment from the debtor to the creditor for the
        amount owed, or None when already settled.
    """
    if balance.is_settled:
        return None
    if balance.party_a_status == STATUS_DEBTOR:
        from_user, to_user = PARTY_A, PARTY_B
    else:
        from_user, to_user = PARTY_B, PARTY_A
    return Transfer(
        amount=balance.amount_owed,
        from_user=from_user,
        to_user=to_user,
        description=QUICK_SETTLE_DESCRIPTION,
    )


__all__ = [
    "compute_balance",
    "compute_split_amounts",
    "reconcile_shares",
    "suggest_settlement",
]
