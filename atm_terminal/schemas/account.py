"""
Pydantic schemas for accounts and the terminal session.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from atm_terminal.models.enums import SessionState


# --- Seed Schema ---

class SeedAccount(BaseModel):
    """One pre-provisioned account the ledger starts with."""
    account_number: str = Field(min_length=1)
    pin: str = Field(min_length=1)
    holder_name: str = Field(min_length=1)
    initial_balance: Decimal = Field(ge=0, decimal_places=2)

    @classmethod
    def from_tuple(cls, row) -> "SeedAccount":
        account_number, pin, holder_name, initial_balance = row
        return cls(
            account_number=account_number,
            pin=pin,
            holder_name=holder_name,
            initial_balance=initial_balance,
        )


# --- Session Schemas ---

class LoginRequest(BaseModel):
    account_number: str
    pin: str


class SessionResponse(BaseModel):
    state: SessionState
    account_number: str | None = None
    holder_name: str | None = None
    message: str | None = None


# --- Account Schemas ---

class DemoAccountResponse(BaseModel):
    account_number: str
    holder_name: str


class AccountBalanceResponse(BaseModel):
    account_number: str
    holder_name: str
    balance: Decimal


class RecipientResponse(BaseModel):
    account_number: str
    holder_name: str
