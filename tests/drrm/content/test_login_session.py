"""Tests for the admin login flag."""

import pytest
from drrm.content import LoginError, LoginSession


class TestLoginSession:
    def test_starts_logged_out(self):
        assert LoginSession().is_logged_in is False

    def test_any_password_logs_in(self):
        session = LoginSession()
        session.login("x")
        assert session.is_logged_in is True

    def test_empty_password_rejected(self):
        session = LoginSession()
        with pytest.raises(LoginError, match="Please enter a password"):
            session.login("")
        assert session.is_logged_in is False

    def test_logout(self):
        session = LoginSession()
        session.login("secret")
        session.logout()
        assert session.is_logged_in is False
