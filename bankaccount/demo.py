"""Scripted demonstration of the account operations and their failure cases."""

import logging
from dataclasses import dataclass
from typing import Callable, List

from tabulate import tabulate

from config.settings import Settings
from bankaccount.models.account import BankAccount
from bankaccount.models.exceptions import InsufficientFundsError, InvalidAmountError
from bankaccount.models.formatting import format_amount, format_money

logger = logging.getLogger(__name__)

OK = 'ok'
ERROR = 'error'

# (action, amount, expected error) run after the account is opened
SCENARIO = (
    ('deposit', 500.0, None),
    ('withdraw', 300.0, None),
    ('withdraw', 2000.0, InsufficientFundsError),
    ('deposit', -100.0, InvalidAmountError),
    ('withdraw', 0.0, InvalidAmountError),
    ('open', -500.0, InvalidAmountError),
    ('withdraw', 200.0, None),
    ('deposit', 1000.0, None),
    ('withdraw', 500.0, None),
)


@dataclass
class DemoStep:
    """One step of the demonstration transcript."""

    number: int
    description: str
    outcome: str
    message: str = ''
    balance: float | None = None


def _describe(action: str, amount: float, currency_symbol: str, expect_failure: bool) -> str:
    money = format_money(amount, currency_symbol)
    if action == 'open':
        return f"Trying to open an account with a balance of {money}"
    if expect_failure:
        return f"Trying to {action} {money}"
    verb = 'Depositing' if action == 'deposit' else 'Withdrawing'
    return f"{verb} {money}"


def run_demo(settings: Settings | None = None, echo: Callable[[str], None] = print) -> List[DemoStep]:
    """
    Run the demonstration against a fresh account.

    Each step that is expected to fail catches only its expected error and
    reports it; any other error propagates to the caller.

    Args:
        settings: Display and scenario settings (defaults if omitted)
        echo: Callable receiving each transcript line

    Returns:
        The recorded steps, in order

    Raises:
        InvalidAmountError: If the configured initial balance is negative
    """
    settings = settings or Settings()
    symbol = settings.currency_symbol
    steps: List[DemoStep] = []

    echo("=== Bank account demonstration ===")
    echo("")

    initial = settings.demo_initial_balance
    description = f"Opening an account with an initial balance of {format_money(initial, symbol)}"
    echo(f"1. {description}")
    account = BankAccount(initial, currency_symbol=symbol)
    echo(str(account))
    echo("")
    logger.info("Step 1: account opened, balance %.2f", account.balance)
    steps.append(DemoStep(1, description, OK, balance=account.balance))

    for number, (action, amount, expected) in enumerate(SCENARIO, start=2):
        description = _describe(action, amount, symbol, expected is not None)
        echo(f"{number}. {description}")
        catch = expected if expected is not None else ()
        try:
            if action == 'open':
                opened = BankAccount(amount, currency_symbol=symbol)
            else:
                getattr(account, action)(amount)
        except catch as err:
            echo(f"Error: {err}")
            logger.warning("Step %d: %s rejected: %s", number, action, err)
            if action == 'open':
                steps.append(DemoStep(number, description, ERROR, str(err)))
            else:
                echo(str(account))
                steps.append(DemoStep(number, description, ERROR, str(err), account.balance))
        else:
            if action == 'open':
                echo(str(opened))
                logger.info("Step %d: account opened, balance %.2f", number, opened.balance)
                steps.append(DemoStep(number, description, OK, balance=opened.balance))
            else:
                echo(str(account))
                logger.info("Step %d: %s succeeded, balance %.2f", number, action, account.balance)
                steps.append(DemoStep(number, description, OK, balance=account.balance))
        echo("")

    echo("=== Final result ===")
    echo(str(account))
    return steps


def format_transcript(steps: List[DemoStep]) -> str:
    """Render recorded steps as a right-aligned text table."""
    header = ['Step', 'Operation', 'Result', 'Error', 'Balance']
    rows = [
        [
            step.number,
            step.description,
            step.outcome,
            step.message or '-',
            '-' if step.balance is None else format_amount(step.balance),
        ]
        for step in steps
    ]
    return tabulate([header] + rows, headers="firstrow", stralign='right', numalign='right')
