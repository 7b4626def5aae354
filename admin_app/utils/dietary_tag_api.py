"""
Dietary tag endpoints: stats, product tagging, tag CRUD, quality scan and coverage.

These routes are public on the backend, so no bearer token is sent.
"""

import logging
from typing import List, Optional

from pricewatch import events
from pricewatch.models import (
    DietaryTag,
    DietaryTagStats,
    Page,
    ProductWithTags,
    QualityIssue,
    STATUS_INACTIVE,
    TagCoverage,
)
from utils.api_client import api_get, api_post, api_put, parse_list, parse_model, parse_page
from utils.session import current_user_label

logger = logging.getLogger(__name__)

BASE_PATH = "/api/v1/dietaryTag"
QUALITY_SCAN_PATH = "/api/v1/quality/scan"
ARCHIVE_TAG_STATUS_PATH = "/api/v1/archiveTag/status"


def fetch_dietary_tag_stats() -> DietaryTagStats:
    data = api_get(f"{BASE_PATH}/stats", requires_auth=False)
    return parse_model(data, DietaryTagStats)


def fetch_products_with_tags(
    page: int = 0,
    size: int = 10,
    search: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
) -> Page[ProductWithTags]:
    """
    Fetch one page of products with their dietary tags.

    Blank filters are not sent; the rest are trimmed.

    Args:
        page: 0-indexed page number
        size: Page size
        search: Product name search
        category: Category filter
        status: "tagged" or "untagged"
    """
    params = {"page": page, "size": size}
    if search and search.strip():
        params["search"] = search.strip()
    if category and category.strip():
        params["category"] = category.strip()
    if status and status.strip():
        params["status"] = status.strip()

    data = api_get(f"{BASE_PATH}/products", params=params, requires_auth=False)
    return parse_page(data, ProductWithTags)


def update_product_tags(product_id: int, tag_ids: List[int]) -> None:
    """Replace all dietary tags of a product with ``tag_ids``."""
    api_put(
        f"{BASE_PATH}/products/{product_id}/tags",
        {"tagIds": list(tag_ids)},
        requires_auth=False,
    )
    logger.info("Updated tags of product %s: %s", product_id, tag_ids)
    events.log_product_tags_updated(current_user_label(), product_id, list(tag_ids))


def fetch_all_dietary_tags(search: Optional[str] = None) -> List[DietaryTag]:
    params = {"search": search.strip()} if search and search.strip() else None
    data = api_get(f"{BASE_PATH}/options", params=params, requires_auth=False)
    return parse_list(data, DietaryTag)


def create_dietary_tag(tag_name: str, tag_description: str) -> None:
    api_post(
        f"{BASE_PATH}/createTag",
        {"tagName": tag_name, "tagDescription": tag_description},
        requires_auth=False,
    )
    events.log_tag_created(current_user_label(), tag_name)


def update_dietary_tag(tag_id: int, tag_name: str, description: str) -> None:
    api_put(
        f"{BASE_PATH}/updateTag/{tag_id}",
        {"tagName": tag_name, "description": description},
        requires_auth=False,
    )
    events.log_tag_updated(current_user_label(), tag_id, tag_name)


def fetch_quality_issues() -> List[QualityIssue]:
    data = api_get(QUALITY_SCAN_PATH, requires_auth=False)
    return parse_list(data, QualityIssue)


def archive_dietary_tags(tag_ids: List[int]) -> None:
    """Set the given tags to INACTIVE, which moves them to the archive."""
    api_put(
        f"{ARCHIVE_TAG_STATUS_PATH}?status={STATUS_INACTIVE}",
        list(tag_ids),
        requires_auth=False,
    )
    events.log_tags_archived(current_user_label(), list(tag_ids))


def fetch_tag_coverage() -> List[TagCoverage]:
    """Per-category tagging coverage."""
    data = api_get(f"{BASE_PATH}/coverage", requires_auth=False)
    return parse_list(data, TagCoverage)
