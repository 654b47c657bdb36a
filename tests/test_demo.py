"""Tests for the scripted demonstration."""

import logging

import pytest

from bankaccount.demo import ERROR, OK, DemoStep, format_transcript, run_demo
from bankaccount.models.exceptions import InvalidAmountError
from config.settings import Settings


@pytest.fixture
def transcript():
    """Collect echoed lines instead of printing them."""
    return []


@pytest.fixture
def steps(transcript):
    """Run the demonstration with default settings."""
    return run_demo(Settings(), echo=transcript.append)


def test_demo_balances(steps):
    """Each step records the balance after it runs."""
    assert [step.balance for step in steps] == [
        1000.0, 1500.0, 1200.0, 1200.0, 1200.0, 1200.0, None, 1000.0, 2000.0, 1500.0,
    ]
    assert [step.number for step in steps] == list(range(1, 11))


def test_demo_outcomes(steps):
    """Only the failure cases are recorded as errors."""
    failed = [step.number for step in steps if step.outcome == ERROR]
    assert failed == [4, 5, 6, 7]
    assert all(step.outcome == OK for step in steps if step.number not in failed)


def test_demo_error_messages(steps):
    """Caught errors keep their messages."""
    by_number = {step.number: step for step in steps}

    assert "2000.00" in by_number[4].message
    assert "1200.00" in by_number[4].message
    assert by_number[5].message == "Deposit amount must be positive"
    assert by_number[6].message == "Withdrawal amount must be positive"
    assert by_number[7].message == "Initial balance cannot be negative"


def test_demo_transcript_lines(steps, transcript):
    """The echoed transcript shows each step and the final balance."""
    assert transcript[0] == "=== Bank account demonstration ==="
    assert "Account balance: 1,500.00 ₽" in transcript
    assert "Error: Deposit amount must be positive" in transcript
    assert transcript[-2:] == ["=== Final result ===", "Account balance: 1,500.00 ₽"]


def test_demo_uses_configured_settings(transcript):
    """Initial balance and currency come from the settings."""
    settings = Settings(currency_symbol='$', demo_initial_balance=0.0)

    steps = run_demo(settings, echo=transcript.append)

    assert steps[0].balance == 0.0
    assert steps[-1].balance == 500.0
    assert transcript[-1] == "Account balance: 500.00 $"


def test_demo_large_initial_balance_lets_withdrawal_succeed(transcript):
    """A withdrawal expected to fail is recorded as ok when funds allow it."""
    steps = run_demo(Settings(demo_initial_balance=5000.0), echo=transcript.append)

    assert steps[3].outcome == OK
    assert steps[3].balance == 3200.0


def test_demo_negative_initial_balance_propagates(transcript):
    """An unexpected error is not swallowed by the demonstration."""
    with pytest.raises(InvalidAmountError):
        run_demo(Settings(demo_initial_balance=-1.0), echo=transcript.append)


def test_demo_logs_steps(transcript, caplog):
    """Successful steps log at INFO and rejected ones at WARNING."""
    with caplog.at_level(logging.INFO, logger='bankaccount.demo'):
        run_demo(Settings(), echo=transcript.append)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    infos = [r for r in caplog.records if r.levelno == logging.INFO]
    assert len(warnings) == 4
    assert len(infos) == 6


def test_format_transcript():
    """The summary table lists every step with formatted balances."""
    steps = [
        DemoStep(1, "Opening an account", OK, balance=1000.0),
        DemoStep(2, "Trying to open an account", ERROR, "Initial balance cannot be negative"),
    ]

    table = format_transcript(steps)
    lines = table.splitlines()

    assert "Step" in lines[0]
    assert "Balance" in lines[0]
    assert "1,000.00" in table
    assert "Initial balance cannot be negative" in table
    assert lines[-1].rstrip().endswith("-")
