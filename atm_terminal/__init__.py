"""ATM terminal simulator: accounts, ledger, sessions and transfers."""

__version__ = "0.1.0"
