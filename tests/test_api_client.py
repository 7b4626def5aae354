"""
Tests for the backend transport (utils.api_client).

requests.request is mocked; the session lives in a dict-backed
st.session_state from conftest.
"""

from unittest.mock import patch

import pytest
import requests

from pricewatch.exceptions import ApiError, AuthenticationError
from pricewatch.models import AuthSession, Market, Page
from utils.api_client import (
    api_get,
    api_post,
    api_request,
    build_url,
    parse_list,
    parse_model,
    parse_page,
)


class TestBuildUrl:
    @patch.dict("os.environ", {"BACKEND_URL": "http://backend:8080/"})
    def test_joins_relative_paths(self):
        assert build_url("/api/v1/markets/stats") == "http://backend:8080/api/v1/markets/stats"
        assert build_url("api/v1/markets/stats") == "http://backend:8080/api/v1/markets/stats"

    def test_absolute_urls_pass_through(self):
        assert build_url("https://other.test/x") == "https://other.test/x"


@patch("utils.api_client.requests.request")
class TestAuthHeader:
    def test_admin_calls_send_bearer_token(self, mock_request, make_response, admin_session):
        mock_request.return_value = make_response(body={"ok": True})

        api_get("/api/v1/admin/products/stats")

        headers = mock_request.call_args.kwargs["headers"]
        assert headers["Authorization"] == f"Bearer {admin_session.token}"

    def test_public_calls_send_no_token(self, mock_request, make_response, admin_session):
        mock_request.return_value = make_response(body={})

        api_get("/api/v1/markets/stats", requires_auth=False)

        assert "Authorization" not in mock_request.call_args.kwargs["headers"]

    def test_missing_token_raises_before_sending(self, mock_request, make_response):
        with pytest.raises(AuthenticationError):
            api_get("/api/v1/admin/products/stats")
        mock_request.assert_not_called()

    def test_missing_token_clears_tokenless_session(self, mock_request, make_response, session_state):
        session_state["auth_session"] = AuthSession(user_id="5", role="ADMIN", provider_id="abc")
        with pytest.raises(AuthenticationError):
            api_get("/api/v1/admin/products/stats")
        assert "auth_session" not in session_state

    def test_401_clears_session(self, mock_request, make_response, admin_session, session_state):
        mock_request.return_value = make_response(status=401, body={"message": "expired"})

        with pytest.raises(AuthenticationError):
            api_get("/api/v1/admin/products/stats")

        assert "auth_session" not in session_state


@patch("utils.api_client.requests.request")
class TestResponses:
    def test_204_returns_none(self, mock_request, make_response):
        mock_request.return_value = make_response(status=204, body=None)
        assert api_post("/api/v1/predictions/generate", requires_auth=False) is None

    def test_json_body_is_parsed(self, mock_request, make_response):
        mock_request.return_value = make_response(body=[1, 2])
        assert api_get("/x", requires_auth=False) == [1, 2]

    def test_text_body_is_returned_as_string(self, mock_request, make_response):
        mock_request.return_value = make_response(body="Scrape started", content_type="text/plain;charset=UTF-8")
        assert api_post("/x", requires_auth=False) == "Scrape started"

    def test_unknown_content_type_tries_json(self, mock_request, make_response):
        mock_request.return_value = make_response(body='{"a": 1}', content_type="")
        assert api_get("/x", requires_auth=False) == {"a": 1}

    def test_unknown_content_type_falls_back_to_text(self, mock_request, make_response):
        mock_request.return_value = make_response(body="plain words", content_type="")
        assert api_get("/x", requires_auth=False) == "plain words"

    def test_none_params_are_dropped(self, mock_request, make_response):
        mock_request.return_value = make_response(body={})
        api_get("/x", params={"page": 0, "search": None}, requires_auth=False)
        assert mock_request.call_args.kwargs["params"] == {"page": 0}


@patch("utils.api_client.requests.request")
class TestErrors:
    def test_message_from_json_body(self, mock_request, make_response):
        mock_request.return_value = make_response(status=400, body={"message": "Tag already exists"})
        with pytest.raises(ApiError) as exc_info:
            api_post("/x", {}, requires_auth=False)
        assert exc_info.value.message == "Tag already exists"
        assert exc_info.value.status_code == 400

    def test_error_field_is_used_when_message_missing(self, mock_request, make_response):
        mock_request.return_value = make_response(status=409, body={"error": "Email already registered"})
        with pytest.raises(ApiError, match="Email already registered"):
            api_post("/x", {}, requires_auth=False)

    def test_message_from_text_body(self, mock_request, make_response):
        mock_request.return_value = make_response(status=500, body="Boom", content_type="text/plain")
        with pytest.raises(ApiError, match="Boom"):
            api_get("/x", requires_auth=False)

    def test_fallback_message(self, mock_request, make_response):
        mock_request.return_value = make_response(status=502, body=None, content_type="text/html")
        with pytest.raises(ApiError, match="Request failed with status 502"):
            api_get("/x", requires_auth=False)

    def test_timeout_is_friendly(self, mock_request, make_response):
        mock_request.side_effect = requests.exceptions.Timeout()
        with pytest.raises(ApiError, match="timed out"):
            api_get("/x", requires_auth=False)

    def test_connection_error_is_friendly(self, mock_request, make_response):
        mock_request.side_effect = requests.exceptions.ConnectionError()
        with pytest.raises(ApiError, match="Could not connect to backend"):
            api_get("/x", requires_auth=False)

    def test_custom_timeout_is_passed(self, mock_request, make_response):
        mock_request.return_value = make_response(body={})
        api_request("POST", "/x", requires_auth=False, timeout=99)
        assert mock_request.call_args.kwargs["timeout"] == 99


class TestParsing:
    def test_parse_model_tolerates_empty_body(self):
        from pricewatch.models import MarketStats

        assert parse_model(None, MarketStats).total_markets == 0

    def test_parse_list(self):
        rows = parse_list([{"id": 1, "marketName": "A", "marketType": "SUPERMARKET"}], Market)
        assert rows[0].market_name == "A"
        assert parse_list(None, Market) == []

    def test_parse_page(self):
        page = parse_page(
            {
                "content": [{"id": 1, "marketLocation": "B", "type": "WET_MARKET", "status": "INACTIVE"}],
                "page": {"size": 10, "number": 0, "totalElements": 1, "totalPages": 1},
            },
            Market,
        )
        assert isinstance(page, Page)
        assert page.content[0].market_name == "B"
        assert page.content[0].market_status == "INACTIVE"
        assert page.page.total_elements == 1
