"""
ATM Terminal Simulator: FastAPI application.

This is the entry point for the application. The factory
builds one ledger from the seed accounts and one session on
top of it; all routers are registered here.
"""

from fastapi import FastAPI

from atm_terminal.config import get_settings
from atm_terminal.logging_config import setup_logging
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.session_service import Session
from atm_terminal.api.health import router as health_router
from atm_terminal.api.session import router as session_router
from atm_terminal.api.accounts import router as accounts_router
from atm_terminal.api.transactions import router as transactions_router


def create_app(ledger: Ledger | None = None) -> FastAPI:
    """Build the terminal application around a ledger."""
    settings = get_settings()
    setup_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="A single-session ATM terminal over an in-memory ledger",
    )

    app.state.ledger = ledger if ledger is not None else Ledger.from_seed()
    app.state.session = Session(app.state.ledger)

    # Register routers
    app.include_router(health_router)
    app.include_router(session_router)
    app.include_router(accounts_router)
    app.include_router(transactions_router)

    return app


app = create_app()
