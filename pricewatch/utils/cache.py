"""
In-process TTL cache for location searches.

Nominatim's public instance asks clients to avoid repeated identical queries,
and admins often retype the same market address while editing. Results are
kept per process and expire after GEOCODE_CACHE_TTL_SECONDS.
"""

import time
from typing import Any, Dict, Hashable, Optional, Tuple

# Key -> (timestamp, cached_value)
_GEOCODE_CACHE: Dict[Hashable, Tuple[float, Any]] = {}

GEOCODE_CACHE_TTL_SECONDS = 600


def make_geocode_cache_key(query: str, country_codes: str, limit: int) -> Hashable:
    """
    Create a deterministic cache key for a location search.

    Args:
        query: Free-text location query
        country_codes: Comma-separated country filter sent to the service
        limit: Maximum number of results requested

    Returns:
        Hashable cache key (tuple)
    """
    query_norm = " ".join(query.split()).lower() if query else ""
    countries_norm = ",".join(sorted(c.strip().lower() for c in country_codes.split(",") if c.strip()))
    return (query_norm, countries_norm, limit)


def get_cached(key: Hashable, now: Optional[float] = None) -> Optional[Any]:
    """
    Retrieve a cached value if it exists and hasn't expired.

    Args:
        key: Cache key from make_geocode_cache_key()
        now: Current time override for tests

    Returns:
        Cached value, or None if not found or expired
    """
    current = time.time() if now is None else now
    entry = _GEOCODE_CACHE.get(key)
    if not entry:
        return None

    timestamp, value = entry
    if current - timestamp > GEOCODE_CACHE_TTL_SECONDS:
        _GEOCODE_CACHE.pop(key, None)
        return None
    return value


def set_cached(key: Hashable, value: Any, now: Optional[float] = None) -> None:
    _GEOCODE_CACHE[key] = (time.time() if now is None else now, value)


def clear_cache() -> None:
    """Clear all cached results (useful for testing)."""
    _GEOCODE_CACHE.clear()


def get_cache_size() -> int:
    return len(_GEOCODE_CACHE)
