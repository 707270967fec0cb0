"""
FastAPI dependencies.

The application factory stores one Ledger and one Session on
app.state; endpoints receive them through these functions so
tests can build a fresh application per test.
"""

from fastapi import HTTPException, Request

from atm_terminal.errors import BankingError, ErrorKind
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.session_service import Session


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_AMOUNT: 400,
    ErrorKind.INSUFFICIENT_FUNDS: 400,
    ErrorKind.SAME_ACCOUNT: 400,
    ErrorKind.AUTHENTICATION_FAILED: 401,
    ErrorKind.NOT_AUTHENTICATED: 401,
    ErrorKind.ACCOUNT_NOT_FOUND: 404,
}


def get_ledger(request: Request) -> Ledger:
    return request.app.state.ledger


def get_session(request: Request) -> Session:
    return request.app.state.session


def http_error(error: BankingError) -> HTTPException:
    """Translate a BankingError into the matching HTTP error."""
    return HTTPException(
        status_code=ERROR_STATUS[error.kind],
        detail={"error": error.kind.value, "message": error.message},
    )
