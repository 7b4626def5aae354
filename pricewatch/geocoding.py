"""
Location search for the market editor.

Queries OpenStreetMap Nominatim for free-text addresses restricted to the
configured countries. The market editor auto-selects the first result and
shows it on a map preview before the admin saves.
"""

import logging
from typing import List

import requests
from pydantic import BaseModel, ConfigDict, Field

from pricewatch.config import GeocodingConfig
from pricewatch.exceptions import GeocodingError
from pricewatch.utils.cache import get_cached, make_geocode_cache_key, set_cached

logger = logging.getLogger(__name__)

GEOCODE_TIMEOUT_SECONDS = 10


class GeocodeResult(BaseModel):
    """One Nominatim match. The service returns coordinates as strings."""

    model_config = ConfigDict(extra="ignore")

    lat: float
    lon: float
    display_name: str = Field(default="")


def search_location(query: str) -> List[GeocodeResult]:
    """
    Search for a location by free text.

    Args:
        query: Address or place name typed by the admin

    Returns:
        Up to GeocodingConfig.get_result_limit() results, best match first.
        A blank query returns [] without calling the service.

    Raises:
        GeocodingError: if the service is unreachable or answers with a non-2xx
            status or an unexpected body
    """
    if not query or not query.strip():
        return []

    country_codes = GeocodingConfig.get_country_codes()
    limit = GeocodingConfig.get_result_limit()
    cache_key = make_geocode_cache_key(query, country_codes, limit)
    cached = get_cached(cache_key)
    if cached is not None:
        logger.debug("Geocode cache hit for %r", query)
        return list(cached)

    url = f"{GeocodingConfig.get_base_url()}/search"
    params = {
        "format": "json",
        "q": query.strip(),
        "countrycodes": country_codes,
        "limit": limit,
    }
    headers = {"User-Agent": GeocodingConfig.get_user_agent()}

    try:
        response = requests.get(url, params=params, headers=headers, timeout=GEOCODE_TIMEOUT_SECONDS)
        response.raise_for_status()
        raw_results = response.json()
    except requests.exceptions.Timeout as e:
        raise GeocodingError("Location search timed out. Please try again.") from e
    except requests.exceptions.RequestException as e:
        logger.warning("Location search failed for %r: %s", query, e)
        raise GeocodingError("Failed to search location. Please try again.") from e
    except ValueError as e:
        raise GeocodingError("Location service returned an invalid response.") from e

    if not isinstance(raw_results, list):
        raise GeocodingError("Location service returned an invalid response.")

    results = []
    for item in raw_results:
        try:
            results.append(GeocodeResult.model_validate(item))
        except ValueError as e:
            logger.debug("Skipping malformed geocode result %r: %s", item, e)

    set_cached(cache_key, list(results))
    logger.info("Location search %r returned %d result(s)", query, len(results))
    return results
