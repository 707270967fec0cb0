"""
Transfer coordinator: moves funds between two accounts.

A transfer is one withdrawal from the source plus one deposit
into the destination, and it either happens completely or not
at all:

1. The destination must exist in the ledger
2. The destination must differ from the source
3. The withdrawal runs first; if it fails nothing has changed
4. The deposit runs second; it cannot fail once the withdrawal
   succeeded, and if it does the withdrawal is backed out
"""

import logging
from decimal import Decimal

from atm_terminal.errors import BankingError, ErrorKind, TransferIntegrityError
from atm_terminal.models.account import Account
from atm_terminal.services.ledger_service import Ledger

logger = logging.getLogger(__name__)


def outgoing_details(recipient: Account) -> str:
    return f"Transfer to {recipient.holder_name} (Acc: {recipient.account_number})"


def incoming_details(sender: Account) -> str:
    return f"Transfer from {sender.holder_name} (Acc: {sender.account_number})"


class TransferCoordinator:

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def lookup_recipient(
        self, from_account: Account, to_account_number: str
    ) -> Account:
        """
        Resolve and validate a transfer destination.

        Raises BankingError(ACCOUNT_NOT_FOUND) or
        BankingError(SAME_ACCOUNT).
        """
        recipient = self.ledger.find_by_number(to_account_number)
        if recipient.account_number == from_account.account_number:
            raise BankingError(ErrorKind.SAME_ACCOUNT)
        return recipient

    def transfer(
        self, from_account: Account, to_account_number: str, amount
    ) -> Decimal:
        """
        Transfer `amount` from `from_account` to the account with
        number `to_account_number`.

        Raises BankingError with kind ACCOUNT_NOT_FOUND,
        SAME_ACCOUNT, INVALID_AMOUNT or INSUFFICIENT_FUNDS; in every
        case both accounts are left unchanged. Returns the source
        account's new balance.
        """
        recipient = self.lookup_recipient(from_account, to_account_number)

        new_balance = from_account.withdraw(amount, outgoing_details(recipient))
        withdrawal = from_account.history()[-1]

        try:
            recipient.deposit(withdrawal.amount, incoming_details(from_account))
        except Exception as e:
            from_account._undo_last(withdrawal)
            logger.exception(
                "Transfer %s -> %s: deposit failed after withdrawal, reverted",
                from_account.account_number,
                recipient.account_number,
            )
            raise TransferIntegrityError(
                f"Deposit into {recipient.account_number} failed after "
                f"withdrawal from {from_account.account_number}"
            ) from e

        logger.info(
            "Transferred %s from %s to %s",
            withdrawal.amount,
            from_account.account_number,
            recipient.account_number,
        )
        return new_balance
