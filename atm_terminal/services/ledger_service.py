"""
Ledger service: the account directory.

The ledger owns every account for the lifetime of the process.
It is the only component that resolves an account number to an
Account. The set of accounts is fixed when the ledger is built;
there are no operations to open or close accounts.
"""

import logging
from collections.abc import Iterable, Iterator

from atm_terminal.config import SEED_ACCOUNTS
from atm_terminal.errors import BankingError, ErrorKind
from atm_terminal.models.account import Account
from atm_terminal.schemas.account import SeedAccount

logger = logging.getLogger(__name__)


class Ledger:
    """
    Fixed collection of accounts keyed by account number.

    Built from an ordered seed list of
    (account_number, pin, holder_name, initial_balance) rows
    or SeedAccount objects. Duplicate account numbers are a
    configuration error.
    """

    def __init__(self, seed: Iterable):
        self._accounts: dict[str, Account] = {}
        for row in seed:
            entry = row if isinstance(row, SeedAccount) else SeedAccount.from_tuple(row)
            if entry.account_number in self._accounts:
                raise ValueError(
                    f"Duplicate account number '{entry.account_number}' in seed data"
                )
            self._accounts[entry.account_number] = Account(
                account_number=entry.account_number,
                pin=entry.pin,
                holder_name=entry.holder_name,
                initial_balance=entry.initial_balance,
            )
        logger.info("Ledger initialised with %d accounts", len(self._accounts))

    @classmethod
    def from_seed(cls, seed: Iterable | None = None) -> "Ledger":
        """Build a ledger from the given seed, or the configured one."""
        return cls(SEED_ACCOUNTS if seed is None else seed)

    def find_by_number(self, account_number: str) -> Account:
        """
        Resolve an account number.

        Raises BankingError(ACCOUNT_NOT_FOUND) when no account has
        that number.
        """
        account = self._accounts.get(account_number)
        if account is None:
            raise BankingError(ErrorKind.ACCOUNT_NOT_FOUND)
        return account

    def get(self, account_number: str) -> Account | None:
        """Resolve an account number, returning None when absent."""
        return self._accounts.get(account_number)

    def accounts(self) -> Iterator[Account]:
        """Iterate over all accounts in seed order."""
        return iter(self._accounts.values())

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
