"""
Shared enumerations for the terminal models.
"""

import enum


class TransactionType(str, enum.Enum):
    """The two balance-changing operations an account records."""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


class SessionState(str, enum.Enum):
    """Authentication state of the terminal session."""
    LOGGED_OUT = "LOGGED_OUT"
    LOGGED_IN = "LOGGED_IN"
