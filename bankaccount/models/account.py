"""Bank account data model."""

import math
import numbers
from decimal import Decimal

from .exceptions import InsufficientFundsError, InvalidAmountError
from .formatting import format_money

DEFAULT_CURRENCY_SYMBOL = "₽"
BALANCE_LABEL = "Account balance"


NOT_FINITE_MESSAGE = "Amount must be a finite number"


def _as_amount(value) -> float:
    """
    Convert a caller-supplied amount to float.

    Args:
        value: The amount to convert

    Returns:
        The amount as a float

    Raises:
        InvalidAmountError: If the value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise InvalidAmountError(NOT_FINITE_MESSAGE)
    try:
        amount = float(value)
    except OverflowError:
        raise InvalidAmountError(NOT_FINITE_MESSAGE) from None
    if not math.isfinite(amount):
        raise InvalidAmountError(NOT_FINITE_MESSAGE)
    return amount


class BankAccount:
    """
    A single account holding a non-negative balance.

    Not safe for concurrent mutation; callers sharing an instance across
    threads must serialize access themselves.
    """

    def __init__(self, initial_balance: float = 0.0, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL):
        """
        Create an account.

        Args:
            initial_balance: Starting balance (must not be negative)
            currency_symbol: Suffix used when describing the balance

        Raises:
            InvalidAmountError: If the initial balance is negative or not a number
        """
        balance = _as_amount(initial_balance)
        if balance < 0:
            raise InvalidAmountError("Initial balance cannot be negative")
        self._balance = balance
        self.currency_symbol = currency_symbol

    def __repr__(self) -> str:
        return f"BankAccount(balance={self._balance!r})"

    def __str__(self) -> str:
        return self.describe()

    @property
    def balance(self) -> float:
        return self._balance

    def get_balance(self) -> float:
        """Return the current balance."""
        return self._balance

    def deposit(self, amount: float) -> None:
        """
        Add funds to the account.

        Args:
            amount: The amount to deposit (must be greater than zero)

        Raises:
            InvalidAmountError: If the amount is zero, negative, not a number
                or too large for the balance to hold
        """
        amt = _as_amount(amount)
        if amt <= 0:
            raise InvalidAmountError("Deposit amount must be positive")
        new_balance = self._balance + amt
        if not math.isfinite(new_balance):
            raise InvalidAmountError("Deposit amount is too large")
        self._balance = new_balance

    def withdraw(self, amount: float) -> None:
        """
        Take funds out of the account.

        Args:
            amount: The amount to withdraw (must be greater than zero)

        Raises:
            InvalidAmountError: If the amount is zero, negative or not a number
            InsufficientFundsError: If the amount exceeds the current balance
        """
        amt = _as_amount(amount)
        if amt <= 0:
            raise InvalidAmountError("Withdrawal amount must be positive")

        if amt > self._balance:
            raise InsufficientFundsError(requested=amt, available=self._balance)

        self._balance -= amt

    def describe(self) -> str:
        """Return the balance as display text, e.g. 'Account balance: 1,500.00 ₽'."""
        return f"{BALANCE_LABEL}: {format_money(self._balance, self.currency_symbol)}"
