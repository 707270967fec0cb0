"""
Health check endpoint.

Reports that the terminal is up, how many accounts the ledger
holds and whether a user is logged in.
"""

from fastapi import APIRouter, Depends

from atm_terminal.api.deps import get_ledger, get_session
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.session_service import Session

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(
    ledger: Ledger = Depends(get_ledger),
    session: Session = Depends(get_session),
):
    """Return application health status."""
    return {
        "status": "healthy",
        "service": "atm-terminal-simulator",
        "accounts": len(ledger),
        "session": session.state.value,
    }
