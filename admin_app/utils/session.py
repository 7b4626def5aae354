"""
Authentication session utilities for Streamlit pages.

The signed-in admin is kept in st.session_state as an AuthSession, so it is
scoped to one browser session and survives page navigation. Every admin page
calls require_admin() before rendering anything else.

# NOTE: The dashboard never verifies JWT signatures; the backend does that on
    every request. Expiry is checked locally so an expired token sends the user
    back to the login page instead of producing a wall of 401 errors.
"""

import logging
from typing import Any, Mapping, Optional

import streamlit as st

from pricewatch.auth_tokens import get_token_data, is_token_expired
from pricewatch.models import AuthSession

logger = logging.getLogger(__name__)

AUTH_SESSION_KEY = "auth_session"

# Page paths are relative to the entry script (admin_app/app.py)
LOGIN_PAGE = "pages/00_🔐_Login.py"
DASHBOARD_PAGE = "app.py"


def get_auth_session() -> Optional[AuthSession]:
    return st.session_state.get(AUTH_SESSION_KEY)


def set_auth_session(session: AuthSession) -> None:
    st.session_state[AUTH_SESSION_KEY] = session
    logger.info("Signed in as %s (role=%s)", session.email, session.role)


def get_auth_token() -> Optional[str]:
    session = get_auth_session()
    return session.token if session else None


def clear_auth_session() -> None:
    """Forget the signed-in user (logout, or the backend rejected the token)."""
    st.session_state.pop(AUTH_SESSION_KEY, None)


def is_authenticated() -> bool:
    """
    True for a stored session that is still usable.

    A token must not be expired. Google sign-in sessions may carry no token;
    they are accepted when the backend supplied a ``providerId``.
    """
    session = get_auth_session()
    if session is None:
        return False
    if session.token:
        return not is_token_expired(session.token)
    return bool(session.provider_id)


def get_current_user() -> Optional[AuthSession]:
    return get_auth_session() if is_authenticated() else None


def current_user_label() -> Optional[str]:
    """Identifier recorded in the audit log for the signed-in admin."""
    session = get_auth_session()
    if session is None:
        return None
    return session.email or session.user_id


def store_auth_response(data: Mapping[str, Any]) -> AuthSession:
    """
    Build and store an AuthSession from a login/register response body.

    Claims missing from the body (role, id, email) are filled from the token.

    Args:
        data: Backend JSON with at least ``token``; usually also id, role, email

    Returns:
        The stored AuthSession
    """
    session = AuthSession.model_validate(dict(data))
    token_data = get_token_data(session.token)
    if token_data is not None:
        session = session.model_copy(update={
            "user_id": session.user_id or token_data.id,
            "role": session.role or token_data.role,
            "email": session.email or token_data.email,
        })
    set_auth_session(session)
    return session


def handle_oauth_callback(query_params: Mapping[str, Any]) -> Optional[AuthSession]:
    """
    Store the session the backend hands over after Google sign-in.

    The backend redirects to the login page with ``id``, ``role``, ``email``,
    ``providerId`` and optionally ``token`` as query parameters.

    Returns:
        The stored AuthSession, or None if required parameters are missing.
    """
    user_id = query_params.get("id")
    role = query_params.get("role")
    email = query_params.get("email")
    if not user_id or not role or not email:
        return None

    session = AuthSession(
        token=query_params.get("token"),
        user_id=str(user_id),
        role=role,
        email=email,
        provider_id=query_params.get("providerId"),
    )
    set_auth_session(session)
    return session


def require_admin() -> AuthSession:
    """
    Guard for admin pages.

    Unauthenticated or expired sessions are cleared and sent to the login page;
    signed-in non-admins see an error. Stops the script run in both cases.
    """
    session = get_auth_session()
    if session is None or not is_authenticated():
        if session is not None:
            logger.warning("Session for %s expired, redirecting to login", session.email)
        clear_auth_session()
        st.switch_page(LOGIN_PAGE)
        st.stop()
    if not session.is_admin:
        st.error("You do not have permission to view this page.")
        st.stop()
    return session


def logout() -> None:
    clear_auth_session()
    st.switch_page(LOGIN_PAGE)
