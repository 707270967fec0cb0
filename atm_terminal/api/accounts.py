"""
Account API endpoints.

Balance inquiry and history act on the logged-in account.
The recipient lookup lets a client show who it is about to pay
before asking for an amount.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_terminal.api.deps import get_ledger, get_session, http_error
from atm_terminal.config import get_settings
from atm_terminal.errors import BankingError
from atm_terminal.schemas.account import (
    DemoAccountResponse,
    AccountBalanceResponse,
    RecipientResponse,
)
from atm_terminal.schemas.transaction import HistoryResponse, TransactionResponse
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.session_service import Session

router = APIRouter(tags=["Accounts"])


@router.get("/accounts/test", response_model=list[DemoAccountResponse])
def list_test_accounts(ledger: Ledger = Depends(get_ledger)):
    """List the pre-provisioned accounts available for testing."""
    if not get_settings().SHOW_TEST_ACCOUNTS:
        raise HTTPException(status_code=404, detail="Not Found")
    return [
        DemoAccountResponse(
            account_number=account.account_number,
            holder_name=account.holder_name,
        )
        for account in ledger.accounts()
    ]


@router.get("/account/balance", response_model=AccountBalanceResponse)
def get_balance(session: Session = Depends(get_session)):
    """Balance inquiry for the logged-in account."""
    try:
        account = session.current_account()
    except BankingError as e:
        raise http_error(e)

    return AccountBalanceResponse(
        account_number=account.account_number,
        holder_name=account.holder_name,
        balance=account.balance,
    )


@router.get("/account/history", response_model=HistoryResponse)
def get_history(session: Session = Depends(get_session)):
    """Transaction history of the logged-in account, oldest first."""
    try:
        account = session.current_account()
    except BankingError as e:
        raise http_error(e)

    history = account.history()
    return HistoryResponse(
        account_number=account.account_number,
        transactions=[TransactionResponse.model_validate(t) for t in history],
        message=None if history else "No transactions found",
    )


@router.get(
    "/accounts/{account_number}/recipient",
    response_model=RecipientResponse,
)
def get_recipient(
    account_number: str,
    session: Session = Depends(get_session),
):
    """Resolve a transfer destination for the logged-in account."""
    try:
        recipient = session.lookup_recipient(account_number)
    except BankingError as e:
        raise http_error(e)

    return RecipientResponse(
        account_number=recipient.account_number,
        holder_name=recipient.holder_name,
    )
