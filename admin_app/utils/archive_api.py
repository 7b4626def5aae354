"""
Archive endpoints for products, markets and dietary tags (admin-only).

Restoring puts an entity back into circulation: products and tags become
ACTIVE again, markets are restored by id.
"""

from typing import List

from pricewatch import events
from pricewatch.models import (
    ArchivedDietaryTag,
    ArchivedMarket,
    ArchivedProduct,
    ArchiveStats,
    DietaryTagArchiveStats,
    MarketArchiveStats,
    Page,
    STATUS_ACTIVE,
)
from utils.api_client import api_get, api_patch, api_post, api_put, parse_model, parse_page
from utils.session import current_user_label

PRODUCT_ARCHIVE_PATH = "/api/v1/admin/archive"
MARKET_ARCHIVE_PATH = "/api/v1/admin/markets/archive"
TAG_ARCHIVE_PATH = "/api/v1/admin/archiveTag"


# Products

def fetch_archive_stats() -> ArchiveStats:
    return parse_model(api_get(f"{PRODUCT_ARCHIVE_PATH}/archive/stats"), ArchiveStats)


def fetch_archived_products_page(page: int = 0, size: int = 10) -> Page[ArchivedProduct]:
    data = api_get(f"{PRODUCT_ARCHIVE_PATH}/archive/table", params={"page": page, "size": size})
    return parse_page(data, ArchivedProduct)


def restore_product(product_id: int, new_status: str = STATUS_ACTIVE) -> None:
    api_put(f"{PRODUCT_ARCHIVE_PATH}/updateStatus", {"id": product_id, "newStatus": new_status})
    events.log_restored(current_user_label(), "product", [product_id])


def bulk_restore_products(ids: List[int], new_status: str = STATUS_ACTIVE) -> None:
    api_patch(f"{PRODUCT_ARCHIVE_PATH}/bulk-status", {"ids": list(ids), "newStatus": new_status})
    events.log_restored(current_user_label(), "product", list(ids))


# Markets

def fetch_market_archive_stats() -> MarketArchiveStats:
    return parse_model(api_get(f"{MARKET_ARCHIVE_PATH}/stats"), MarketArchiveStats)


def fetch_archived_markets_page(page: int = 0, size: int = 10) -> Page[ArchivedMarket]:
    data = api_get(f"{MARKET_ARCHIVE_PATH}/table", params={"page": page, "size": size})
    return parse_page(data, ArchivedMarket)


def restore_markets(ids: List[int]) -> None:
    """Restore one or more markets; the backend takes a plain id list."""
    api_post(f"{MARKET_ARCHIVE_PATH}/restore", list(ids))
    events.log_restored(current_user_label(), "market", list(ids))


# Dietary tags

def fetch_dietary_tag_archive_stats() -> DietaryTagArchiveStats:
    return parse_model(api_get(f"{TAG_ARCHIVE_PATH}/stats"), DietaryTagArchiveStats)


def fetch_archived_dietary_tags_page(page: int = 0, size: int = 10) -> Page[ArchivedDietaryTag]:
    data = api_get(f"{TAG_ARCHIVE_PATH}/archive", params={"page": page, "size": size})
    return parse_page(data, ArchivedDietaryTag)


def restore_dietary_tags(ids: List[int]) -> None:
    api_put(f"{TAG_ARCHIVE_PATH}/status", list(ids), params={"status": STATUS_ACTIVE})
    events.log_restored(current_user_label(), "dietary_tag", list(ids))
