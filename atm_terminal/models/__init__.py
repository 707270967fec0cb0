"""
Domain models package.
"""

from atm_terminal.models.enums import TransactionType, SessionState
from atm_terminal.models.transaction import Transaction
from atm_terminal.models.account import Account, TransactionHistory, to_amount, exact_sum

__all__ = [
    "TransactionType",
    "SessionState",
    "Transaction",
    "Account",
    "TransactionHistory",
    "to_amount",
    "exact_sum",
]
