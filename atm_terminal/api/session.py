"""
Session API endpoints: login, logout and current state.
"""

from fastapi import APIRouter, Depends

from atm_terminal.api.deps import get_session, http_error
from atm_terminal.errors import BankingError
from atm_terminal.models.enums import SessionState
from atm_terminal.schemas.account import LoginRequest, SessionResponse
from atm_terminal.services.session_service import Session

router = APIRouter(prefix="/session", tags=["Session"])


@router.post("/login", response_model=SessionResponse)
def login(
    request: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Log in with account number and PIN.

    An unknown account and a wrong PIN produce the same 401
    response.
    """
    try:
        account = session.login(request.account_number, request.pin)
    except BankingError as e:
        raise http_error(e)

    return SessionResponse(
        state=session.state,
        account_number=account.account_number,
        holder_name=account.holder_name,
        message=f"Login successful! Welcome, {account.holder_name}!",
    )


@router.post("/logout", response_model=SessionResponse)
def logout(session: Session = Depends(get_session)):
    """End the session. Always succeeds."""
    session.logout()
    return SessionResponse(
        state=SessionState.LOGGED_OUT,
        message="Thank you for using our ATM. Goodbye!",
    )


@router.get("", response_model=SessionResponse)
def get_session_state(session: Session = Depends(get_session)):
    """Report whether a user is logged in, and who."""
    if not session.is_authenticated:
        return SessionResponse(state=session.state)

    account = session.current_account()
    return SessionResponse(
        state=session.state,
        account_number=account.account_number,
        holder_name=account.holder_name,
    )
