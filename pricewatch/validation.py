"""
Client-side form checks.

Each check returns the message the dashboard shows (or None when the input is
fine), so pages can render it directly next to the form.
"""

import re
from pathlib import PurePath
from typing import Dict, Optional

from pricewatch.predictions import NO_OVERRIDE, OVERRIDE_MULTIPLIERS

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
PDF_CONTENT_TYPE = "application/pdf"

MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
_SPECIAL_PATTERN = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

MIN_RATING = 0.0
MAX_RATING = 5.0

PASSWORD_REQUIREMENT_LABELS = {
    "length": f"At least {MIN_PASSWORD_LENGTH} characters",
    "uppercase": "One uppercase letter",
    "lowercase": "One lowercase letter",
    "number": "One number",
    "special": "One special character",
}


def password_requirements(password: Optional[str]) -> Dict[str, bool]:
    """
    Evaluate each signup password rule.

    Returns:
        Dict keyed like PASSWORD_REQUIREMENT_LABELS with True for rules met.
    """
    pwd = password or ""
    return {
        "length": len(pwd) >= MIN_PASSWORD_LENGTH,
        "uppercase": bool(re.search(r"[A-Z]", pwd)),
        "lowercase": bool(re.search(r"[a-z]", pwd)),
        "number": bool(re.search(r"[0-9]", pwd)),
        "special": bool(_SPECIAL_PATTERN.search(pwd)),
    }


def is_password_valid(password: Optional[str]) -> bool:
    return all(password_requirements(password).values())


def looks_like_email(email: Optional[str]) -> bool:
    """Cheap gate before asking the backend whether an email is taken."""
    return bool(email) and "@" in email


def validate_login_form(username: str, password: str) -> Optional[str]:
    if not username or not username.strip():
        return "Please enter your email"
    if not password:
        return "Please enter your password"
    return None


def validate_signup_form(name: str, email: str, password: str, confirm_password: str) -> Optional[str]:
    if not name or not name.strip():
        return "Please enter your name"
    if not looks_like_email(email):
        return "Please enter a valid email address"
    if not is_password_valid(password):
        return "Password does not meet all requirements"
    if password != confirm_password:
        return "Passwords do not match"
    return None


def validate_tag_form(name: Optional[str], description: Optional[str]) -> Optional[str]:
    """Both tag name and description are required when creating or editing a tag."""
    if not name or not name.strip():
        return "Please enter a tag name"
    if not description or not description.strip():
        return "Please enter a tag description"
    return None


def validate_report_upload(
    filename: Optional[str],
    content_type: Optional[str],
    size: Optional[int],
) -> Optional[str]:
    """
    Check a manual price report before upload: PDF only, at most 10 MB.

    Browsers sometimes send an empty content type, so the file extension is
    accepted as a fallback.
    """
    if not filename:
        return "Please select a file first."
    is_pdf = content_type == PDF_CONTENT_TYPE or (
        not content_type and PurePath(filename).suffix.lower() == ".pdf"
    )
    if not is_pdf:
        return "Please select a PDF file."
    if size is not None and size > MAX_UPLOAD_BYTES:
        return "File size must be less than 10MB."
    return None


def validate_rating(rating: Optional[float]) -> Optional[str]:
    if rating is None:
        return None
    if not MIN_RATING <= rating <= MAX_RATING:
        return f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}"
    return None


def validate_coordinates(latitude: Optional[float], longitude: Optional[float]) -> Optional[str]:
    if latitude is None or longitude is None:
        return None
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        return "Location coordinates are out of range"
    return None


def validate_override(override_type: Optional[str]) -> Optional[str]:
    """Bulk overrides need a concrete trend; NO_OVERRIDE is only the placeholder."""
    if not override_type or override_type == NO_OVERRIDE:
        return "Please select an override type"
    if override_type not in OVERRIDE_MULTIPLIERS:
        return f"Unknown override type: {override_type}"
    return None


def validate_selection(selected_ids, noun: str, action: str) -> Optional[str]:
    """Bulk actions need at least one selected row."""
    if not selected_ids:
        return f"Please select at least one {noun} to {action}."
    return None

