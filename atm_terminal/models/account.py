"""
Account model.

An account owns its balance and an ordered transaction log.
deposit() and withdraw() are the only operations that change
the balance, and each one either succeeds completely or leaves
the account untouched.

Invariants:
1. balance >= 0 at all times
2. balance equals balance_after of the last transaction,
   or the initial balance when there is no history
"""

from collections.abc import Sequence
from decimal import Decimal, Inexact, InvalidOperation, localcontext

from atm_terminal.errors import BankingError, ErrorKind
from atm_terminal.models.enums import TransactionType
from atm_terminal.models.transaction import Transaction

# Amounts are whole cents, at most one trillion per operation.
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")


def to_amount(value) -> Decimal:
    """
    Convert a caller-supplied amount to Decimal.

    Floats go through str() so 10.1 stays 10.1. Anything that is
    not a finite number, exceeds MAX_AMOUNT, or has fractions of
    a cent is an invalid amount.
    """
    if isinstance(value, bool):
        raise BankingError(ErrorKind.INVALID_AMOUNT)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise BankingError(ErrorKind.INVALID_AMOUNT)
    if not amount.is_finite() or amount.copy_abs() > MAX_AMOUNT:
        raise BankingError(ErrorKind.INVALID_AMOUNT)
    if amount != amount.quantize(CENT):
        raise BankingError(ErrorKind.INVALID_AMOUNT)
    return amount


def exact_sum(balance: Decimal, delta: Decimal) -> Decimal:
    """
    Add delta to balance without rounding.

    A result that cannot be represented exactly raises
    BankingError(INVALID_AMOUNT) instead of being rounded.
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return balance + delta
        except Inexact:
            raise BankingError(ErrorKind.INVALID_AMOUNT) from None


class TransactionHistory(Sequence):
    """
    Read-only view over an account's transaction log.

    Iterating does not consume anything, so the view can be
    walked as many times as needed. Entries appear in the order
    they were recorded.
    """

    def __init__(self, entries: list[Transaction]):
        self._entries = entries

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<TransactionHistory {len(self._entries)} entries>"


class Account:

    def __init__(
        self,
        account_number: str,
        pin: str,
        holder_name: str,
        initial_balance: Decimal = Decimal("0"),
    ):
        initial_balance = to_amount(initial_balance)
        if initial_balance < 0:
            raise ValueError(
                f"Account {account_number} initial balance must not be negative"
            )
        self._account_number = account_number
        self._pin = pin
        self._holder_name = holder_name
        self._initial_balance = initial_balance
        self._balance = initial_balance
        self._history: list[Transaction] = []

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def initial_balance(self) -> Decimal:
        return self._initial_balance

    @property
    def balance(self) -> Decimal:
        return self._balance

    def verify_pin(self, pin: str) -> bool:
        """Check a PIN against the stored one."""
        return self._pin == pin

    def deposit(self, amount, details: str | None = None) -> Decimal:
        """
        Add funds and record a Deposit transaction.

        Raises BankingError(INVALID_AMOUNT) when amount <= 0 or is
        not a whole number of cents within MAX_AMOUNT.
        Returns the new balance.
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise BankingError(ErrorKind.INVALID_AMOUNT)

        new_balance = exact_sum(self._balance, amount)
        self._record(TransactionType.DEPOSIT, amount, new_balance, details)
        return new_balance

    def withdraw(self, amount, details: str | None = None) -> Decimal:
        """
        Remove funds and record a Withdrawal transaction.

        Raises BankingError(INVALID_AMOUNT) when amount <= 0 and
        BankingError(INSUFFICIENT_FUNDS) when amount exceeds the
        balance. Returns the new balance.
        """
        amount = to_amount(amount)
        if amount <= 0:
            raise BankingError(ErrorKind.INVALID_AMOUNT)
        if amount > self._balance:
            raise BankingError(ErrorKind.INSUFFICIENT_FUNDS)

        new_balance = exact_sum(self._balance, -amount)
        self._record(TransactionType.WITHDRAWAL, amount, new_balance, details)
        return new_balance

    def history(self) -> TransactionHistory:
        """Return the transaction log, oldest first."""
        return TransactionHistory(self._history)

    def _record(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        new_balance: Decimal,
        details: str | None,
    ) -> None:
        # Build the record before touching state so a validation
        # failure cannot leave the balance and log out of step.
        transaction = Transaction(
            transaction_type=transaction_type,
            amount=amount,
            balance_after=new_balance,
            details=details,
        )
        self._history.append(transaction)
        self._balance = new_balance

    def _undo_last(self, transaction: Transaction) -> None:
        """
        Remove the most recent transaction and restore the balance
        it replaced. Only the transfer coordinator calls this, to
        back out a withdrawal whose matching deposit failed.
        """
        if not self._history or self._history[-1] is not transaction:
            raise RuntimeError(
                f"Account {self._account_number}: can only undo the last transaction"
            )
        self._history.pop()
        self._balance = (
            self._history[-1].balance_after
            if self._history
            else self._initial_balance
        )

    def __repr__(self) -> str:
        return f"<Account {self._account_number} {self._holder_name} ({self._balance})>"
