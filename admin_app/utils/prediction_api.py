"""
Price prediction endpoints.

The backend exposes two views of the same forecasts:
- product-centric: one row per product with its predictions in every market
- market-centric: one row per product for a single market

Search is done client-side over the full product-centric list so prefix
matches can be ranked above substring matches.
"""

import logging
from typing import Any, Dict, List, Optional

from pricewatch import events
from pricewatch.filters import prioritized_search
from pricewatch.models import (
    BulkPredictionStatus,
    MarketInfo,
    Page,
    PageInfo,
    PredictionDashboardStats,
    PredictionPair,
    PriceCalibration,
    ProductPrediction,
    TrendOverride,
)
from pricewatch.pagination import paginate
from utils.api_client import api_get, api_post, parse_list, parse_model, parse_page
from utils.session import current_user_label

logger = logging.getLogger(__name__)

BASE_PATH = "/api/v1/predictions"

# Upper bound used to pull every product for client-side search
SEARCH_FETCH_SIZE = 10000


def trigger_bulk_prediction() -> BulkPredictionStatus:
    """Regenerate predictions for every product/market pair."""
    data = api_post(f"{BASE_PATH}/bulk-trigger", requires_auth=False)
    events.log_prediction_triggered(current_user_label(), "bulk")
    if isinstance(data, dict):
        return BulkPredictionStatus.model_validate(data)
    return BulkPredictionStatus(message=data or "")


def fetch_dashboard_stats() -> PredictionDashboardStats:
    return parse_model(api_get(f"{BASE_PATH}/dashboard/stats", requires_auth=False), PredictionDashboardStats)


def fetch_active_markets() -> List[MarketInfo]:
    return parse_list(api_get(f"{BASE_PATH}/markets", requires_auth=False), MarketInfo)


def fetch_product_predictions(
    page: int = 0,
    size: int = 10,
    sort_by: str = "productName",
    sort_direction: str = "ASC",
) -> Page[ProductPrediction]:
    params = {"page": page, "size": size, "sortBy": sort_by, "sortDirection": sort_direction}
    data = api_get(f"{BASE_PATH}/products", params=params, requires_auth=False)
    return parse_page(data, ProductPrediction)


def fetch_comparison_matrix(product_ids: Optional[List[int]] = None) -> List[ProductPrediction]:
    """Full market comparison for specific products (all products when empty)."""
    params = {"productIds": ",".join(str(pid) for pid in product_ids)} if product_ids else None
    data = api_get(f"{BASE_PATH}/comparison-matrix", params=params, requires_auth=False)
    return parse_list(data, ProductPrediction)


def fetch_market_predictions(
    market_id: int,
    page: int = 0,
    size: int = 20,
    sort_by: str = "productName",
    sort_direction: str = "ASC",
) -> Page[PriceCalibration]:
    params = {"page": page, "size": size, "sortBy": sort_by, "sortDirection": sort_direction}
    data = api_get(f"{BASE_PATH}/markets/{market_id}/predictions", params=params, requires_auth=False)
    return parse_page(data, PriceCalibration)


def search_predictions(term: str, page: int = 0, size: int = 10) -> Page[ProductPrediction]:
    """
    Search products by name or code.

    Fetches the whole product list, ranks products whose name or code starts
    with the term before those that merely contain it, then pages locally.
    """
    everything = fetch_product_predictions(0, SEARCH_FETCH_SIZE, "productName", "ASC")
    ranked = prioritized_search(
        everything.content,
        term,
        [lambda p: p.product_name, lambda p: p.product_code],
    )
    page_slice = paginate(ranked, page, size)
    return Page[ProductPrediction](
        content=page_slice.items,
        page=PageInfo(
            size=size,
            number=page,
            total_elements=page_slice.total_items,
            total_pages=page_slice.total_pages,
        ),
    )


def fetch_price_history(product_id: int, market_id: int) -> Dict[str, Any]:
    """
    Raw price history and regression details for the inspection dialog.

    The body is a debugging payload (currentPrice, tomorrowPrice, changePercent,
    dataPoints, predictions, regressionStats, ...) and is returned as-is.
    """
    params = {"productId": product_id, "marketId": market_id}
    return api_get(f"{BASE_PATH}/debug/history", params=params, requires_auth=False) or {}


def regenerate_prediction(product_id: int, market_id: int) -> None:
    params = {"productId": product_id, "marketId": market_id}
    api_post(f"{BASE_PATH}/generate", params=params, requires_auth=False)
    events.log_prediction_triggered(current_user_label(), f"product:{product_id}/market:{market_id}")


def apply_bulk_override(pairs: List[Dict[str, int]], force_trend: str, reason: str = "") -> None:
    """
    Force a trend for product/market pairs.

    Args:
        pairs: [{"productId": ..., "marketId": ...}, ...]
        force_trend: One of pricewatch.predictions.OVERRIDE_TYPES
        reason: Free-text justification shown in the backend audit
    """
    override = TrendOverride(
        pairs=[PredictionPair.model_validate(pair) for pair in pairs],
        force_trend=force_trend,
        reason=reason,
    )
    api_post(f"{BASE_PATH}/bulk-override", override.to_payload(), requires_auth=False)
    logger.info("Applied %s override to %d pair(s)", force_trend, len(pairs))
    events.log_prediction_override(current_user_label(), len(pairs), force_trend, reason)
