"""
Display formatting helpers shared by all admin pages.

Prices are shown in Philippine pesos; dates as "Jan 5, 2026".
"""

import re
from datetime import date, datetime
from typing import Optional, Union

CURRENCY_SYMBOL = "₱"

CONFIDENCE_HIGH = "HIGH"
CONFIDENCE_MEDIUM = "MEDIUM"
CONFIDENCE_LOW = "LOW"

_COORDINATES_PATTERN = re.compile(r"\s*\([^)]*\)\s*")
_MARKET_SUFFIX_PATTERN = re.compile(r"\s+Market$", re.IGNORECASE)


def format_price(amount: Optional[float]) -> str:
    """Format an amount as pesos with two decimals, e.g. ₱12.50."""
    if amount is None:
        return "—"
    return f"{CURRENCY_SYMBOL}{float(amount):.2f}"


def title_case(value: Optional[str]) -> str:
    """
    Turn enum-like or lowercase text into Title Case.

    Examples:
        >>> title_case("WET_MARKET")
        'Wet Market'
        >>> title_case("leafy greens")
        'Leafy Greens'
    """
    if not value:
        return ""
    words = value.replace("_", " ").lower().split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def format_market_name(name: Optional[str]) -> str:
    """Readable market name without a duplicated trailing "Market"."""
    if not name:
        return ""
    return title_case(_MARKET_SUFFIX_PATTERN.sub("", name))


def format_location(location: Optional[str]) -> str:
    """Strip parenthesised coordinates such as "(14.5995, 120.9842)"."""
    if not location:
        return ""
    return _COORDINATES_PATTERN.sub(" ", location).strip()


def format_confidence(score: float) -> str:
    """Confidence score (0..1) as a rounded percentage."""
    return f"{round(score * 100)}%"


def confidence_level(score: float) -> str:
    if score > 0.7:
        return CONFIDENCE_HIGH
    if score > 0.4:
        return CONFIDENCE_MEDIUM
    return CONFIDENCE_LOW


def trend_icon(percentage: float) -> str:
    if abs(percentage) < 0.5:
        return "—"
    return "↗" if percentage > 0 else "↘"


def format_trend_percentage(percentage: float) -> str:
    sign = "+" if percentage > 0 else ""
    return f"{sign}{percentage:.1f}%"


def status_color(status: Optional[str]) -> str:
    """Badge color for a prediction status."""
    return {
        "NORMAL": "green",
        "ANOMALY": "red",
        "WARNING": "yellow",
    }.get((status or "").upper(), "gray")


def _parse_iso(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: Optional[Union[str, date, datetime]]) -> str:
    """
    Format an ISO date/timestamp as "Jan 5, 2026".

    Unparsable strings are returned unchanged so a backend format change
    degrades to raw text rather than an error.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, (date, datetime)):
        parsed = value
    else:
        parsed = _parse_iso(value)
        if parsed is None:
            return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def format_datetime(value: Optional[str]) -> str:
    """Format an ISO timestamp as "Jan 5, 2026 08:30"."""
    if not value:
        return ""
    parsed = _parse_iso(value)
    if parsed is None:
        return value
    return f"{format_date(parsed)} {parsed.strftime('%H:%M')}"


def format_duration_ms(duration_ms: Optional[int]) -> str:
    """Human-readable run duration: 850 ms, 12.4 s, 3m 05s."""
    if duration_ms is None:
        return "—"
    if duration_ms < 1000:
        return f"{duration_ms} ms"
    seconds = duration_ms / 1000
    if seconds < 60:
        return f"{seconds:.1f} s"
    minutes, secs = divmod(int(round(seconds)), 60)
    return f"{minutes}m {secs:02d}s"


def to_iso_time(day: date, hour: Optional[int], minute: Optional[int], period: Optional[str]) -> Optional[str]:
    """
    Convert 12-hour form fields into the backend's local timestamp format.

    12 AM is midnight (00) and 12 PM is noon (12). Returns None when any field
    is left blank, so an unset time is sent as null.

    Example:
        >>> to_iso_time(date(2026, 3, 1), 7, 30, "PM")
        '2026-03-01T19:30:00'
    """
    if hour is None or minute is None or not period:
        return None
    period = period.upper()
    if period not in ("AM", "PM"):
        raise ValueError(f"period must be AM or PM, got {period!r}")
    if not 1 <= hour <= 12 or not 0 <= minute <= 59:
        raise ValueError(f"invalid 12-hour time {hour}:{minute:02d}")

    hour24 = hour
    if period == "PM" and hour != 12:
        hour24 += 12
    if period == "AM" and hour == 12:
        hour24 = 0
    return f"{day.isoformat()}T{hour24:02d}:{minute:02d}:00"


def from_iso_time(value: Optional[str]) -> Optional[tuple]:
    """
    Split a backend timestamp into 12-hour form fields (hour, minute, period).

    Returns None when the value is missing or unparsable.
    """
    if not value:
        return None
    parsed = _parse_iso(value)
    if parsed is None:
        return None
    period = "PM" if parsed.hour >= 12 else "AM"
    hour = parsed.hour % 12 or 12
    return (hour, parsed.minute, period)
