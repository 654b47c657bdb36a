"""Configuration management for the bank account demo."""
import logging
import math
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for the bank account demo.

    This class centralizes all configuration values so the demo script
    and the account display share the same defaults.
    """

    # Display
    currency_symbol: str = '₽'

    # Demo scenario
    demo_initial_balance: float = 1000.0

    # Logging
    log_level: str = 'INFO'
    log_file: str = 'bankaccount.log'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Unset or blank variables keep their defaults.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an unusable value.
        """
        defaults = cls()

        raw_balance = os.getenv('BANK_DEMO_INITIAL_BALANCE')
        if raw_balance is None or raw_balance.strip() == '':
            demo_initial_balance = defaults.demo_initial_balance
        else:
            try:
                demo_initial_balance = float(raw_balance)
            except ValueError:
                raise ValueError(
                    f"BANK_DEMO_INITIAL_BALANCE must be a number, got {raw_balance!r}"
                ) from None
            if not math.isfinite(demo_initial_balance):
                raise ValueError(
                    f"BANK_DEMO_INITIAL_BALANCE must be a finite number, got {raw_balance!r}"
                )

        raw_level = os.getenv('BANK_LOG_LEVEL')
        if raw_level is None or raw_level.strip() == '':
            log_level = defaults.log_level
        else:
            log_level = raw_level.strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"BANK_LOG_LEVEL is not a valid logging level: {log_level!r}")

        return cls(
            currency_symbol=os.getenv('BANK_CURRENCY_SYMBOL', defaults.currency_symbol),
            demo_initial_balance=demo_initial_balance,
            log_level=log_level,
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
        )
