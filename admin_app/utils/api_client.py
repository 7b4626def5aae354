"""
Backend API Client Module.

This module is the **single source of truth** for HTTP communication with the
price-monitoring backend. The resource modules (dietary_tag_api, market_api,
products_api, ...) build endpoints and payloads; everything about sending the
request and interpreting the response lives here.

Key principles:
- Bearer token injection for admin endpoints
- A 401 clears the session so the next page run lands on the login page
- Non-2xx responses become ApiError with the backend's own message when present
- Network failures become ApiError with a friendly message

# NOTE: When adding new endpoints, follow this pattern:
    - Add a function to the matching *_api module
    - Call api_get/api_post/api_put/api_patch with requires_auth set
      to whether the backend protects the route
    - Validate the response into a pricewatch.models DTO
    - Let ApiError propagate; pages catch it and call ui.feedback.show_error
"""

import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import requests

from pricewatch.config import BackendConfig
from pricewatch.exceptions import ApiError, AuthenticationError
from pricewatch.models import DTO, Page
from utils.session import clear_auth_session, get_auth_token

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=DTO)


def get_backend_url() -> str:
    """
    Get the backend API base URL.

    Returns:
        BACKEND_URL with trailing slash removed, defaulting to http://localhost:8080
        for local development.
    """
    return BackendConfig.get_base_url()


def build_url(endpoint: str) -> str:
    """Absolute endpoints are used as-is; relative ones are joined to the backend URL."""
    if endpoint.startswith("http"):
        return endpoint
    if not endpoint.startswith("/"):
        endpoint = "/" + endpoint
    return f"{get_backend_url()}{endpoint}"


def _error_message(response: requests.Response) -> str:
    fallback = f"Request failed with status {response.status_code}"
    content_type = response.headers.get("Content-Type", "")
    if "application/json" in content_type:
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict):
            return str(body.get("message") or body.get("error") or fallback)
        return fallback
    text = response.text or ""
    return text.strip() or fallback


def _parse_body(response: requests.Response) -> Any:
    """
    Interpret a successful response body.

    JSON content types are parsed, text/* is returned as a string, and anything
    else is parsed as JSON when possible. Empty bodies yield None.
    """
    content_type = response.headers.get("Content-Type", "")
    text = response.text
    if not text:
        return None
    if "application/json" in content_type:
        return json.loads(text)
    if "text/" in content_type:
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


def api_request(
    method: str,
    endpoint: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    json_body: Any = None,
    files: Optional[Dict[str, Any]] = None,
    requires_auth: bool = True,
    timeout: Optional[int] = None,
) -> Any:
    """
    Send a request to the backend and return the parsed body.

    Args:
        method: HTTP verb
        endpoint: Path such as "/api/v1/markets/stats", or an absolute URL
        params: Query parameters; None values are dropped
        json_body: JSON request body
        files: Multipart files (mutually exclusive with json_body)
        requires_auth: Send the session's bearer token
        timeout: Seconds; defaults to BackendConfig.get_timeout()

    Returns:
        Parsed JSON, text, or None for 204/empty responses

    Raises:
        AuthenticationError: no token in the session, or the backend answered 401
        ApiError: network failure or any other non-2xx response
    """
    headers: Dict[str, str] = {}
    if requires_auth:
        token = get_auth_token()
        if not token:
            logger.warning("No token found for %s %s", method, endpoint)
            clear_auth_session()
            raise AuthenticationError("No authentication token found")
        headers["Authorization"] = f"Bearer {token}"

    url = build_url(endpoint)
    if params:
        params = {k: v for k, v in params.items() if v is not None}

    try:
        response = requests.request(
            method,
            url,
            params=params or None,
            json=json_body,
            files=files,
            headers=headers,
            timeout=timeout or BackendConfig.get_timeout(),
        )
    except requests.exceptions.Timeout as e:
        raise ApiError("Request timed out. The backend may be slow or unreachable.") from e
    except requests.exceptions.ConnectionError as e:
        raise ApiError(
            "Could not connect to backend. Please check your connection and that the backend is running."
        ) from e
    except requests.exceptions.RequestException as e:
        raise ApiError(f"An error occurred while contacting the backend: {e}") from e

    logger.debug("%s %s -> %s", method, url, response.status_code)

    if response.status_code == 401:
        logger.warning("Token expired or invalid (%s %s), clearing session", method, url)
        clear_auth_session()
        raise AuthenticationError("Authentication failed")

    if response.status_code == 204:
        return None

    if not response.ok:
        message = _error_message(response)
        logger.info("%s %s failed with %s: %s", method, url, response.status_code, message)
        raise ApiError(message, status_code=response.status_code)

    try:
        return _parse_body(response)
    except ValueError as e:
        raise ApiError("Backend returned an invalid response.", status_code=response.status_code) from e


def api_get(endpoint: str, params: Optional[Dict[str, Any]] = None, **kwargs) -> Any:
    return api_request("GET", endpoint, params=params, **kwargs)


def api_post(endpoint: str, data: Any = None, **kwargs) -> Any:
    return api_request("POST", endpoint, json_body=data, **kwargs)


def api_put(endpoint: str, data: Any = None, **kwargs) -> Any:
    return api_request("PUT", endpoint, json_body=data, **kwargs)


def api_patch(endpoint: str, data: Any = None, **kwargs) -> Any:
    return api_request("PATCH", endpoint, json_body=data, **kwargs)


# ---------------------------------------------------------------------------
# Response parsing helpers
# ---------------------------------------------------------------------------

def parse_model(data: Any, model: Type[M]) -> M:
    """Validate a JSON object into a DTO; a missing body yields the model defaults."""
    return model.model_validate(data or {})


def parse_list(data: Any, model: Type[M]) -> List[M]:
    if not data:
        return []
    return [model.model_validate(item) for item in data]


def parse_page(data: Any, model: Type[M]) -> Page[M]:
    """Validate a ``{"content": [...], "page": {...}}`` body."""
    return Page[model].model_validate(data or {})
