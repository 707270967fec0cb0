"""
Pydantic schemas for transaction operations.

Amounts are not range-checked here: a zero or negative amount
must reach the account so it is reported as InvalidAmount.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from atm_terminal.models.enums import TransactionType


class DepositRequest(BaseModel):
    amount: Decimal


class WithdrawalRequest(BaseModel):
    amount: Decimal


class TransferRequest(BaseModel):
    to_account_number: str
    amount: Decimal


class BalanceChangeResponse(BaseModel):
    account_number: str
    amount: Decimal
    new_balance: Decimal


class TransferResponse(BaseModel):
    from_account_number: str
    to_account_number: str
    to_holder_name: str
    amount: Decimal
    new_balance: Decimal


class TransactionResponse(BaseModel):
    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime
    details: str | None

    model_config = {"from_attributes": True}


class HistoryResponse(BaseModel):
    account_number: str
    transactions: list[TransactionResponse]
    message: str | None = None
