"""Data models for the bank account."""

from .account import BankAccount
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)
from .formatting import format_amount, format_money

__all__ = [
    "BankAccount",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "format_amount",
    "format_money",
]
