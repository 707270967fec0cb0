"""
Transaction record.

A transaction is an immutable fact about one completed deposit
or withdrawal. It is appended to the account that produced it
and never modified afterwards.
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from atm_terminal.models.enums import TransactionType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    transaction_type: TransactionType
    amount: Decimal = Field(gt=0)
    balance_after: Decimal = Field(ge=0)
    timestamp: datetime = Field(default_factory=_utcnow)
    details: str | None = None

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.transaction_type.value} "
            f"{self.amount} -> {self.balance_after}>"
        )
