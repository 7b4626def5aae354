"""
Price analytics endpoints (public): dropdown data, per-product history and
cross-market comparison.
"""

from typing import List

from pricewatch.models import DiscoveryData, MarketComparison, ProductAnalytics
from utils.api_client import api_get, parse_list, parse_model

BASE_PATH = "/api/v1/analytics"

PERIOD_OPTIONS = [7, 30, 90]


def fetch_discovery_data() -> DiscoveryData:
    """Markets and products available for the analytics pickers."""
    return parse_model(api_get(f"{BASE_PATH}/discovery", requires_auth=False), DiscoveryData)


def _analytics_params(product_name: str, market_id: int, days: int) -> dict:
    return {"productName": product_name, "marketId": market_id, "days": days}


def fetch_product_analytics(product_name: str, market_id: int, days: int) -> ProductAnalytics:
    """
    Price history and min/avg/max for one product in one market.

    Args:
        product_name: Product name as listed by fetch_discovery_data
        market_id: Target market
        days: Look-back window (7, 30 or 90)
    """
    data = api_get(
        f"{BASE_PATH}/product",
        params=_analytics_params(product_name, market_id, days),
        requires_auth=False,
    )
    return parse_model(data, ProductAnalytics)


def fetch_market_comparison(product_name: str, market_id: int, days: int) -> List[MarketComparison]:
    data = api_get(
        f"{BASE_PATH}/market-comparison",
        params=_analytics_params(product_name, market_id, days),
        requires_auth=False,
    )
    return parse_list(data, MarketComparison)
