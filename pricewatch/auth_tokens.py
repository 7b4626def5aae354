"""
JWT helpers for the dashboard session.

The dashboard never verifies signatures (the backend does that on every
request). It only reads the payload to know who is signed in, their role, and
when the token stops being useful.
"""

import base64
import binascii
import json
import logging
import time
from typing import Any, Dict, Optional

from pricewatch.models import TokenData

logger = logging.getLogger(__name__)


def _b64url_decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


def decode_jwt(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """
    Decode the payload segment of a JWT without verifying it.

    Returns:
        The payload as a dict, or None if the token is malformed.
    """
    if not token:
        return None
    try:
        payload_segment = token.split(".")[1]
        payload = json.loads(_b64url_decode(payload_segment).decode("utf-8"))
    except (IndexError, ValueError, binascii.Error, UnicodeDecodeError) as e:
        logger.debug("Failed to decode JWT: %s", e)
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def is_token_expired(token: Optional[str], now: Optional[float] = None) -> bool:
    """
    Check whether a token's ``exp`` claim is in the past.

    Undecodable tokens and tokens without ``exp`` count as expired.
    """
    payload = decode_jwt(token)
    if not payload or "exp" not in payload:
        return True
    current_time = time.time() if now is None else now
    try:
        return float(payload["exp"]) < current_time
    except (TypeError, ValueError):
        return True


def get_token_data(token: Optional[str]) -> Optional[TokenData]:
    """
    Extract user identity from a token.

    The backend puts the email in the ``sub`` claim.
    """
    payload = decode_jwt(token)
    if not payload:
        return None
    user_id = payload.get("id")
    return TokenData(
        id=str(user_id) if user_id is not None else None,
        role=payload.get("role"),
        email=payload.get("sub"),
    )
