"""
Market endpoints: paginated list, stats, details, status changes and edits.
"""

from typing import List

from pricewatch import events
from pricewatch.models import Market, MarketStats, MarketUpdate, Page
from utils.api_client import api_get, api_patch, api_put, parse_model, parse_page
from utils.session import current_user_label

BASE_PATH = "/api/v1/markets"


def fetch_markets_page(page: int = 0, size: int = 10) -> Page[Market]:
    data = api_get(f"{BASE_PATH}/displayMarkets", params={"page": page, "size": size}, requires_auth=False)
    return parse_page(data, Market)


def fetch_market_stats() -> MarketStats:
    return parse_model(api_get(f"{BASE_PATH}/stats", requires_auth=False), MarketStats)


def fetch_market_details(market_id: int) -> Market:
    return parse_model(api_get(f"{BASE_PATH}/view/{market_id}", requires_auth=False), Market)


def update_market_status(market_id: int, status: str) -> None:
    api_put(f"{BASE_PATH}/{market_id}/status", params={"status": status}, requires_auth=False)
    events.log_market_status_changed(current_user_label(), [market_id], status)


def update_market(market_id: int, data: MarketUpdate) -> None:
    """
    Save the edit dialog.

    Args:
        market_id: Market to update
        data: Full edit payload (name, type, location, rating, hours, description)
    """
    payload = data.to_payload()
    api_put(f"{BASE_PATH}/{market_id}", payload, requires_auth=False)
    events.log_market_updated(current_user_label(), market_id, sorted(payload.keys()))


def bulk_update_market_status(ids: List[int], status: str) -> None:
    api_patch(f"{BASE_PATH}/bulk-status", {"ids": list(ids), "newStatus": status}, requires_auth=False)
    events.log_market_status_changed(current_user_label(), list(ids), status)
