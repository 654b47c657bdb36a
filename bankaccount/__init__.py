"""Single bank account with guarded deposit and withdrawal operations."""

from .models import BankAccount, BankError, InsufficientFundsError, InvalidAmountError

__all__ = [
    "BankAccount",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
]
