"""
Shared test fixtures.

Every test gets a fresh ledger built from the default seed
accounts, so balances and histories never leak between tests.
"""

import pytest
from fastapi.testclient import TestClient

from atm_terminal.main import create_app
from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.session_service import Session
from atm_terminal.services.transfer_service import TransferCoordinator


@pytest.fixture
def ledger():
    """A ledger seeded with the default test accounts."""
    return Ledger.from_seed()


@pytest.fixture
def session(ledger):
    """A logged-out session over the test ledger."""
    return Session(ledger)


@pytest.fixture
def coordinator(ledger):
    return TransferCoordinator(ledger)


@pytest.fixture
def client(ledger):
    """
    Provide a test client for an application built around
    the test ledger.
    """
    app = create_app(ledger)
    yield TestClient(app)


@pytest.fixture
def logged_in_client(client):
    """Test client already logged in as account 1001."""
    response = client.post("/session/login", json={
        "account_number": "1001", "pin": "1234",
    })
    assert response.status_code == 200
    return client
