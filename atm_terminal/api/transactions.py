"""
Transaction API endpoints.

The API layer is thin: it passes amounts through to the session
and maps BankingError to HTTP errors. All rules live in the
account and transfer coordinator.
"""

from fastapi import APIRouter, Depends

from atm_terminal.api.deps import get_session, http_error
from atm_terminal.errors import BankingError
from atm_terminal.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    BalanceChangeResponse,
    TransferResponse,
)
from atm_terminal.services.session_service import Session

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post("/deposit", response_model=BalanceChangeResponse)
def deposit(
    request: DepositRequest,
    session: Session = Depends(get_session),
):
    """Deposit money into the logged-in account."""
    try:
        new_balance = session.deposit(request.amount)
    except BankingError as e:
        raise http_error(e)

    return BalanceChangeResponse(
        account_number=session.current_account().account_number,
        amount=request.amount,
        new_balance=new_balance,
    )


@router.post("/withdraw", response_model=BalanceChangeResponse)
def withdraw(
    request: WithdrawalRequest,
    session: Session = Depends(get_session),
):
    """Withdraw money from the logged-in account."""
    try:
        new_balance = session.withdraw(request.amount)
    except BankingError as e:
        raise http_error(e)

    return BalanceChangeResponse(
        account_number=session.current_account().account_number,
        amount=request.amount,
        new_balance=new_balance,
    )


@router.post("/transfer", response_model=TransferResponse)
def transfer(
    request: TransferRequest,
    session: Session = Depends(get_session),
):
    """Transfer money from the logged-in account to another account."""
    try:
        recipient = session.lookup_recipient(request.to_account_number)
        new_balance = session.transfer(recipient.account_number, request.amount)
    except BankingError as e:
        raise http_error(e)

    return TransferResponse(
        from_account_number=session.current_account().account_number,
        to_account_number=recipient.account_number,
        to_holder_name=recipient.holder_name,
        amount=request.amount,
        new_balance=new_balance,
    )
