"""CLI adapter printing who owes whom.

This module wires the GetBalanceUseCase to the configured ledger repository
and prints the settlement statement, both nets, and the transfer that would
settle the balance.
"""

from src.adapters.formatting import format_currency, format_signed
from src.application.use_cases.get_balance import GetBalanceUseCase
from src.domain.constants import PARTY_A
from src.domain.services.balance import suggest_settlement
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Print the current balance between the two parties."""
    logger = get_app_logger()
    settings = build_settings()
    names = settings.names
    try:
        repository = build_ledger_repository(settings=settings)
        balance = GetBalanceUseCase(
            repository=repository,
            names=names,
            logger=logger,
        ).execute()
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    currency = settings.currency
    print(balance.who_owes_whom)
    if not balance.is_settled:
        print(f"Amount owed: {format_currency(balance.amount_owed, currency)}")
    print(
        f"{names.party_a_name}: "
        f"{format_signed(balance.party_a_net, currency)} "
        f"({balance.party_a_status})"
    )
    print(
        f"{names.party_b_name}: "
        f"{format_signed(balance.party_b_net, currency)} "
        f"({balance.party_b_status})"
    )

    settlement = suggest_settlement(balance)
    if settlement is not None:
        payer, payee = (
            (names.party_a_name, names.party_b_name)
            if settlement.from_user == PARTY_A
            else (names.party_b_name, names.party_a_name)
        )
        print(
            f"To settle up: {payer} pays {payee} "
            f"{format_currency(settlement.amount, currency)}"
        )
    get_usage_logger().info("balance_cli run")


if __name__ == "__main__":  # pragma: no cover
    main()
