"""
Error taxonomy for terminal operations.

Every business-rule failure is raised as a single BankingError
carrying an ErrorKind. Callers switch on `error.kind` instead of
catching one exception class per failure.
"""

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of failures a terminal operation can report."""
    INVALID_AMOUNT = "InvalidAmount"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    ACCOUNT_NOT_FOUND = "AccountNotFound"
    SAME_ACCOUNT = "SameAccount"
    NOT_AUTHENTICATED = "NotAuthenticated"


DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_AMOUNT: "Invalid amount entered",
    ErrorKind.INSUFFICIENT_FUNDS: "Insufficient funds in account",
    ErrorKind.AUTHENTICATION_FAILED: "Authentication failed",
    ErrorKind.ACCOUNT_NOT_FOUND: "Recipient account not found",
    ErrorKind.SAME_ACCOUNT: "Cannot transfer to the same account",
    ErrorKind.NOT_AUTHENTICATED: "Not authenticated",
}


class BankingError(Exception):
    """
    A recoverable failure of a terminal operation.

    The operation that raised it has left every account it
    touched unchanged.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"<BankingError {self.kind.value}: {self.message}>"


class TransferIntegrityError(RuntimeError):
    """
    Raised when the deposit half of a transfer fails after the
    withdrawal succeeded. This is a bug in the coordinator, not
    a user error; the withdrawal has been reverted.
    """
