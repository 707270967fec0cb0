"""
Tests for the Session (authentication state machine).
"""

from decimal import Decimal

import pytest

from atm_terminal.errors import BankingError, ErrorKind
from atm_terminal.models.enums import SessionState


def login_error(session, account_number, pin):
    with pytest.raises(BankingError) as exc_info:
        session.login(account_number, pin)
    return exc_info.value


class TestLogin:

    def test_starts_logged_out(self, session):
        assert session.state == SessionState.LOGGED_OUT
        assert session.is_authenticated is False

    def test_login_succeeds(self, session, ledger):
        account = session.login("1001", "1234")

        assert session.state == SessionState.LOGGED_IN
        assert account is ledger.find_by_number("1001")
        assert session.current_account() is account

    def test_wrong_pin_rejected(self, session):
        error = login_error(session, "1001", "0000")
        assert error.kind == ErrorKind.AUTHENTICATION_FAILED
        assert session.state == SessionState.LOGGED_OUT

    def test_unknown_account_rejected(self, session):
        error = login_error(session, "9999", "wrong")
        assert error.kind == ErrorKind.AUTHENTICATION_FAILED
        assert session.state == SessionState.LOGGED_OUT

    def test_unknown_account_and_wrong_pin_indistinguishable(self, session):
        unknown = login_error(session, "9999", "wrong")
        wrong_pin = login_error(session, "1003", "wrong")

        assert unknown.kind == wrong_pin.kind
        assert str(unknown) == str(wrong_pin) == "Authentication failed"

    def test_failed_login_while_logged_in_resets_session(self, session):
        session.login("1001", "1234")
        login_error(session, "1002", "0000")

        assert session.state == SessionState.LOGGED_OUT

    def test_login_as_another_account_switches(self, session):
        session.login("1001", "1234")
        session.login("1002", "5678")
        assert session.current_account().account_number == "1002"


class TestLogout:

    def test_logout(self, session):
        session.login("1001", "1234")
        session.logout()
        assert session.state == SessionState.LOGGED_OUT

    def test_logout_is_idempotent(self, session):
        session.login("1001", "1234")
        session.logout()
        session.logout()
        assert session.state == SessionState.LOGGED_OUT

    def test_logout_when_never_logged_in(self, session):
        session.logout()
        assert session.state == SessionState.LOGGED_OUT

    def test_relogin_reuses_ledger(self, session):
        session.login("1001", "1234")
        session.deposit(Decimal("10"))
        session.logout()

        account = session.login("1001", "1234")
        assert account.balance == Decimal("5000010.00")


class TestNotAuthenticated:

    @pytest.mark.parametrize("operation, args", [
        ("current_account", ()),
        ("balance", ()),
        ("deposit", (Decimal("10"),)),
        ("withdraw", (Decimal("10"),)),
        ("transfer", ("1002", Decimal("10"))),
        ("lookup_recipient", ("1002",)),
        ("history", ()),
    ])
    def test_operation_requires_login(self, session, operation, args):
        with pytest.raises(BankingError) as exc_info:
            getattr(session, operation)(*args)
        assert exc_info.value.kind == ErrorKind.NOT_AUTHENTICATED

    def test_operations_fail_after_logout(self, session, ledger):
        session.login("1002", "5678")
        session.logout()

        with pytest.raises(BankingError) as exc_info:
            session.withdraw(Decimal("10"))

        assert exc_info.value.kind == ErrorKind.NOT_AUTHENTICATED
        assert ledger.find_by_number("1002").balance == Decimal("3000.00")


class TestSessionOperations:

    def test_balance(self, session):
        session.login("1002", "5678")
        assert session.balance() == Decimal("3000.00")

    def test_withdraw_insufficient_funds(self, session):
        session.login("1002", "5678")

        with pytest.raises(BankingError) as exc_info:
            session.withdraw(Decimal("5000"))

        assert exc_info.value.kind == ErrorKind.INSUFFICIENT_FUNDS
        assert session.balance() == Decimal("3000.00")

    def test_deposit_negative_amount(self, session):
        session.login("1004", "3829")

        with pytest.raises(BankingError) as exc_info:
            session.deposit(Decimal("-5"))

        assert exc_info.value.kind == ErrorKind.INVALID_AMOUNT
        assert session.balance() == Decimal("100.00")

    def test_transfer_to_self(self, session):
        session.login("1001", "1234")

        with pytest.raises(BankingError) as exc_info:
            session.transfer("1001", Decimal("10"))

        assert exc_info.value.kind == ErrorKind.SAME_ACCOUNT

    def test_transfer_and_history(self, session, ledger):
        session.login("1001", "1234")
        new_balance = session.transfer("1002", Decimal("1000.00"))

        assert new_balance == Decimal("4999000.00")
        assert len(session.history()) == 1
        assert ledger.find_by_number("1002").balance == Decimal("4000.00")
