"""
Application configuration.

Runtime settings are loaded from environment variables.
The seed accounts are configuration too: they define the
fixed set of accounts the terminal starts with.
"""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


# (account_number, pin, holder_name, initial_balance)
SEED_ACCOUNTS: list[tuple[str, str, str, Decimal]] = [
    ("1001", "1234", "Ehindero Henry", Decimal("5000000.00")),
    ("1002", "5678", "Juria Momoh", Decimal("3000.00")),
    ("1003", "9999", "Stephen", Decimal("10000.00")),
    ("1004", "3829", "Ajao Michael", Decimal("100.00")),
    ("1005", "4783", "Deji", Decimal("10000.00")),
    ("1006", "2378", "Omotola", Decimal("0.00")),
]


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = os.getenv("APP_NAME", "ATM Terminal Simulator")
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = _env_flag("DEBUG", "false")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Terminal
    SHOW_TEST_ACCOUNTS: bool = _env_flag("SHOW_TEST_ACCOUNTS", "true")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls.
    """
    return Settings()
