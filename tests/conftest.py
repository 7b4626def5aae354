"""
Shared fixtures.

Streamlit's session state is replaced by a plain dict so session and table
helpers can run outside a Streamlit script, and the audit log is redirected
to a temporary file.
"""

import base64
import json
import time
from unittest.mock import Mock

import pytest
import streamlit

from pricewatch.models import AuthSession
from pricewatch.utils.cache import clear_cache


def _b64url(data: dict) -> str:
    raw = json.dumps(data).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def build_token(**claims) -> str:
    """Unsigned JWT with the given payload claims."""
    header = _b64url({"alg": "HS256", "typ": "JWT"})
    return f"{header}.{_b64url(claims)}.signature"


def build_response(status=200, body=None, content_type="application/json"):
    """Mock of requests.Response with just what utils.api_client reads."""
    response = Mock()
    response.status_code = status
    response.ok = status < 400
    response.headers = {"Content-Type": content_type} if content_type else {}
    if body is None:
        response.text = ""
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    response.json.side_effect = lambda: json.loads(response.text)
    return response


@pytest.fixture
def make_token():
    return build_token


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture(autouse=True)
def event_log(tmp_path, monkeypatch):
    """Send audit events to a per-test file."""
    path = tmp_path / "admin_events.log"
    monkeypatch.setenv("EVENT_LOG_FILE", str(path))
    return path


@pytest.fixture(autouse=True)
def session_state(monkeypatch):
    state = {}
    monkeypatch.setattr(streamlit, "session_state", state)
    return state


@pytest.fixture(autouse=True)
def _clear_geocode_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def admin_session(session_state):
    """A signed-in admin with a token valid for an hour."""
    token = build_token(id=7, role="ADMIN", sub="admin@example.com", exp=time.time() + 3600)
    auth = AuthSession(token=token, user_id="7", role="ADMIN", email="admin@example.com")
    session_state["auth_session"] = auth
    return auth
