"""
Tests for the per-session auth helpers (utils.session).

Streamlit navigation calls are mocked; session_state is a dict (conftest).
"""

import time
from unittest.mock import patch

import pytest

from pricewatch.models import AuthSession
from utils import session
from utils.session import (
    LOGIN_PAGE,
    clear_auth_session,
    current_user_label,
    get_auth_token,
    get_current_user,
    handle_oauth_callback,
    is_authenticated,
    require_admin,
    store_auth_response,
)


class StopScript(Exception):
    """Stands in for Streamlit's script stop."""


class TestSessionState:
    def test_admin_session_is_authenticated(self, admin_session):
        assert is_authenticated()
        assert get_auth_token() == admin_session.token
        assert get_current_user() is admin_session
        assert current_user_label() == "admin@example.com"

    def test_expired_token_is_not_authenticated(self, session_state, make_token):
        session_state["auth_session"] = AuthSession(token=make_token(exp=time.time() - 10), role="ADMIN")
        assert not is_authenticated()
        assert get_current_user() is None

    def test_clear(self, admin_session, session_state):
        clear_auth_session()
        assert "auth_session" not in session_state
        assert current_user_label() is None


class TestStoreAuthResponse:
    def test_missing_fields_come_from_token(self, make_token, session_state):
        token = make_token(id=12, role="ADMIN", sub="ana@example.com", exp=time.time() + 60)
        auth = store_auth_response({"token": token})
        assert (auth.user_id, auth.role, auth.email) == ("12", "ADMIN", "ana@example.com")
        assert session_state["auth_session"] is auth

    def test_body_fields_win_over_token(self, make_token):
        token = make_token(id=12, role="USER", sub="token@example.com")
        auth = store_auth_response({"token": token, "id": 99, "role": "ADMIN", "email": "body@example.com"})
        assert (auth.user_id, auth.role, auth.email) == ("99", "ADMIN", "body@example.com")


class TestOAuthCallback:
    def test_complete_params_store_session(self, session_state):
        auth = handle_oauth_callback({"id": "5", "role": "ADMIN", "email": "g@example.com", "providerId": "abc"})
        assert auth.provider_id == "abc"
        assert auth.token is None
        assert session_state["auth_session"] is auth

    def test_incomplete_params_are_ignored(self, session_state):
        assert handle_oauth_callback({"id": "5", "email": "g@example.com"}) is None
        assert "auth_session" not in session_state

    def test_google_session_without_token_is_authenticated(self, session_state):
        handle_oauth_callback({"id": "5", "role": "ADMIN", "email": "g@example.com", "providerId": "abc"})
        assert is_authenticated()
        assert get_current_user().email == "g@example.com"

    def test_session_without_token_or_provider_is_not_authenticated(self, session_state):
        session_state["auth_session"] = AuthSession(user_id="5", role="ADMIN", email="g@example.com")
        assert not is_authenticated()


@patch.object(session.st, "stop", side_effect=StopScript)
@patch.object(session.st, "switch_page")
@patch.object(session.st, "error")
class TestRequireAdmin:
    def test_admin_passes(self, mock_error, mock_switch, mock_stop, admin_session):
        assert require_admin() is admin_session
        mock_switch.assert_not_called()

    def test_anonymous_goes_to_login(self, mock_error, mock_switch, mock_stop):
        with pytest.raises(StopScript):
            require_admin()
        mock_switch.assert_called_once_with(LOGIN_PAGE)

    def test_google_admin_passes(self, mock_error, mock_switch, mock_stop, session_state):
        auth = handle_oauth_callback({"id": "5", "role": "ADMIN", "email": "g@example.com", "providerId": "abc"})
        assert require_admin() is auth
        mock_switch.assert_not_called()
        mock_stop.assert_not_called()

    def test_non_admin_sees_error(self, mock_error, mock_switch, mock_stop, session_state, make_token):
        session_state["auth_session"] = AuthSession(token=make_token(exp=time.time() + 60), role="USER")
        with pytest.raises(StopScript):
            require_admin()
        mock_error.assert_called_once()
        mock_switch.assert_not_called()
