"""
Authentication endpoints: credential login, Google OAuth, signup.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from pricewatch.config import DashboardConfig
from pricewatch.exceptions import ApiError
from pricewatch.models import AuthSession
from utils.api_client import api_get, api_post, build_url
from utils.session import store_auth_response

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/auth/login"
REGISTER_PATH = "/api/v1/auth/register"
CHECK_EMAIL_PATH = "/api/v1/auth/check-email"
GOOGLE_OAUTH_PATH = "/oauth2/authorization/google"


def login_with_credentials(username: str, password: str) -> AuthSession:
    """
    Sign in with email and password and store the session.

    Raises:
        ApiError: wrong credentials or backend unavailable
    """
    data = api_post(LOGIN_PATH, {"username": username, "password": password}, requires_auth=False)
    if not isinstance(data, dict) or not data.get("token"):
        raise ApiError("Login failed")
    return store_auth_response(data)


def google_oauth_url() -> str:
    """
    URL that starts the Google sign-in flow on the backend.

    When OAUTH_CALLBACK_URL is set it is passed along so the backend knows where
    to send the user afterwards.
    """
    url = build_url(GOOGLE_OAUTH_PATH)
    callback = DashboardConfig.get_oauth_callback_url()
    if callback:
        url = f"{url}?{urlencode({'redirect_uri': callback})}"
    return url


def check_email_availability(email: str) -> bool:
    """
    Ask the backend whether an email is already registered.

    Returns:
        True if the email is taken. Errors count as not taken so signup is
        never blocked by a failed check; the register call has the final word.
    """
    try:
        return bool(api_get(CHECK_EMAIL_PATH, params={"email": email}, requires_auth=False))
    except ApiError as e:
        logger.debug("Email check failed for %s: %s", email, e)
        return False


def register_user(name: str, email: str, password: str) -> Optional[AuthSession]:
    """
    Create an account. When the backend returns a token the user is signed in.

    Returns:
        The stored AuthSession, or None if the backend did not issue a token
    """
    data = api_post(
        REGISTER_PATH,
        {"name": name, "email": email, "password": password},
        requires_auth=False,
    )
    if isinstance(data, dict) and data.get("token"):
        return store_auth_response(data)
    return None
