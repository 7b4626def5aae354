"""
Product catalog endpoints (admin-only, bearer token required).

Covers the catalog table, the newcomers approval queue, edits, status changes,
and the per-product market price list.
"""

from typing import List

from pricewatch import events
from pricewatch.models import (
    NewcomerUpdate,
    NewProduct,
    Page,
    Product,
    ProductMarket,
    ProductStats,
    ProductUpdate,
)
from utils.api_client import api_get, api_patch, api_put, parse_list, parse_model, parse_page
from utils.session import current_user_label

BASE_PATH = "/api/v1/admin/products"
MARKET_DETAILS_PATH = "/api/v1/products/marketDetails"


def fetch_products_page(page: int = 0, size: int = 10) -> Page[Product]:
    return parse_page(api_get(f"{BASE_PATH}/display", params={"page": page, "size": size}), Product)


def fetch_product_stats() -> ProductStats:
    return parse_model(api_get(f"{BASE_PATH}/stats"), ProductStats)


def fetch_new_products() -> List[NewProduct]:
    """Scraped products waiting for approval."""
    return parse_list(api_get(f"{BASE_PATH}/newcomers"), NewProduct)


def update_product(product_id: int, data: ProductUpdate) -> None:
    api_put(f"{BASE_PATH}/updateProduct/{product_id}", data.to_payload())
    events.log_product_updated(current_user_label(), product_id)


def update_newcomer_product(product_id: int, data: NewcomerUpdate) -> None:
    api_put(f"{BASE_PATH}/updatenewcomers/{product_id}", data.to_payload())
    events.log_product_updated(current_user_label(), product_id, newcomer=True)


def update_product_status(product_id: int, new_status: str) -> None:
    """
    Change one product's status.

    Newcomers use this too: ACTIVE adds them to the catalog, UNRECOGNIZED ignores them.
    """
    api_put(f"{BASE_PATH}/updateStatus", {"id": product_id, "newStatus": new_status})
    events.log_product_status_changed(current_user_label(), [product_id], new_status)


def bulk_update_status(ids: List[int], new_status: str) -> None:
    api_patch(f"{BASE_PATH}/bulk-status", {"ids": list(ids), "newStatus": new_status})
    events.log_product_status_changed(current_user_label(), list(ids), new_status)


def fetch_product_markets(product_id: int) -> List[ProductMarket]:
    """Markets selling a product, from the public ``marketDetails`` endpoint."""
    data = api_get(f"{MARKET_DETAILS_PATH}/{product_id}", requires_auth=False) or {}
    return parse_list(data.get("marketDetails"), ProductMarket)
