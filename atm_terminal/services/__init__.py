"""Terminal services."""

from atm_terminal.services.ledger_service import Ledger
from atm_terminal.services.transfer_service import TransferCoordinator
from atm_terminal.services.session_service import Session

__all__ = ["Ledger", "TransferCoordinator", "Session"]
