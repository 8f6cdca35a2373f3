"""Application use cases package."""

from .errors import (
    ExpenseValidationError,
    LedgerValidationError,
    TransferValidationError,
)
from .get_activity import GetActivityUseCase
from .get_balance import GetBalanceUseCase
from .get_monthly_report import GetMonthlyReportUseCase
from .prepare_expense import ExpenseForm, PrepareExpenseUseCase
from .prepare_transfer import PrepareTransferUseCase, TransferForm

__all__ = [
    "LedgerValidationError",
    "ExpenseValidationError",
    "TransferValidationError",
    "GetActivityUseCase",
    "GetBalanceUseCase",
    "GetMonthlyReportUseCase",
    "ExpenseForm",
    "PrepareExpenseUseCase",
    "TransferForm",
    "PrepareTransferUseCase",
]
