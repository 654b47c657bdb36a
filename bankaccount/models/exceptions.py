"""Custom exceptions for the bank account."""


class BankError(Exception):
    """Base exception for all account errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an amount is not a positive number (or a negative initial balance)."""

    def __init__(self, message: str = "Amount must be a positive number"):
        super().__init__(message)


class InsufficientFundsError(BankError):
    """
    Raised when a withdrawal exceeds the available balance.

    Both figures are kept on the exception so callers can report them
    without parsing the message.
    """

    def __init__(self, requested: float | None = None, available: float | None = None):
        self.requested = requested
        self.available = available
        if requested is None or available is None:
            message = "Insufficient funds in the account"
        else:
            message = (
                f"Attempted to withdraw {requested:.2f}, "
                f"but the account only holds {available:.2f}"
            )
        super().__init__(message)
