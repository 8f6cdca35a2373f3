"""Errors raised by application use cases."""


class LedgerValidationError(ValueError):
    """Form input rejected before a record is created.

    Attributes:
        errors: Mapping of form field name to error message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        summary = "; ".join(
            f"{field}: {message}" for field, message in self.errors.items()
        )
        super().__init__(summary or "Invalid input")


class ExpenseValidationError(LedgerValidationError):
    """Raised when a new expense form is invalid."""


class TransferValidationError(LedgerValidationError):
    """Raised when a new transfer form is invalid."""


__all__ = [
    "LedgerValidationError",
    "ExpenseValidationError",
    "TransferValidationError",
]
