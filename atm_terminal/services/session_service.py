"""
Session service: authentication and the current account.

The session is either LOGGED_OUT or LOGGED_IN. While logged in
it remembers the account number of the current account; the
account itself stays owned by the ledger.

Every account operation goes through the session, so a caller
that is not logged in gets NOT_AUTHENTICATED instead of a
silent no-op.
"""

import logging
from decimal import Decimal

from atm_terminal.errors import BankingError, ErrorKind
from atm_terminal.models.account import Account, TransactionHistory
from atm_terminal.models.enums import SessionState
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.transfer_service import TransferCoordinator

logger = logging.getLogger(__name__)


class Session:

    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.transfers = TransferCoordinator(ledger)
        self._account_number: str | None = None

    @property
    def state(self) -> SessionState:
        if self._account_number is None:
            return SessionState.LOGGED_OUT
        return SessionState.LOGGED_IN

    @property
    def is_authenticated(self) -> bool:
        return self._account_number is not None

    def login(self, account_number: str, pin: str) -> Account:
        """
        Authenticate against the ledger.

        An unknown account and a wrong PIN raise the same
        BankingError(AUTHENTICATION_FAILED), so a caller cannot tell
        which one happened. Any failed attempt leaves the session
        logged out.
        """
        account = self.ledger.get(account_number)
        if account is None or not account.verify_pin(pin):
            self._account_number = None
            logger.warning("Login failed for account %s", account_number)
            raise BankingError(ErrorKind.AUTHENTICATION_FAILED)

        self._account_number = account.account_number
        logger.info("Account %s logged in", account.account_number)
        return account

    def logout(self) -> None:
        """End the session. Calling it while logged out is a no-op."""
        if self._account_number is not None:
            logger.info("Account %s logged out", self._account_number)
        self._account_number = None

    def current_account(self) -> Account:
        """
        Return the logged-in account.

        Raises BankingError(NOT_AUTHENTICATED) when logged out.
        """
        if self._account_number is None:
            raise BankingError(ErrorKind.NOT_AUTHENTICATED)
        return self.ledger.find_by_number(self._account_number)

    # --- Account operations ---

    def balance(self) -> Decimal:
        return self.current_account().balance

    def deposit(self, amount) -> Decimal:
        account = self.current_account()
        try:
            new_balance = account.deposit(amount)
        except BankingError as e:
            logger.info("Deposit rejected for %s: %s", account.account_number, e.kind.value)
            raise
        logger.info("Deposit of %s into %s", amount, account.account_number)
        return new_balance

    def withdraw(self, amount) -> Decimal:
        account = self.current_account()
        try:
            new_balance = account.withdraw(amount)
        except BankingError as e:
            logger.info("Withdrawal rejected for %s: %s", account.account_number, e.kind.value)
            raise
        logger.info("Withdrawal of %s from %s", amount, account.account_number)
        return new_balance

    def lookup_recipient(self, to_account_number: str) -> Account:
        return self.transfers.lookup_recipient(
            self.current_account(), to_account_number
        )

    def transfer(self, to_account_number: str, amount) -> Decimal:
        """Transfer from the current account. Returns its new balance."""
        account = self.current_account()
        try:
            return self.transfers.transfer(account, to_account_number, amount)
        except BankingError as e:
            logger.info("Transfer rejected for %s: %s", account.account_number, e.kind.value)
            raise

    def history(self) -> TransactionHistory:
        return self.current_account().history()

    def __repr__(self) -> str:
        if self._account_number is None:
            return f"<Session {self.state.value}>"
        return f"<Session {self.state.value} {self._account_number}>"
