"""
Price report endpoints (admin-only): run history, scrape trigger and manual PDF upload.
"""

import logging
from typing import Optional

from pricewatch import events
from pricewatch.config import BackendConfig
from pricewatch.models import Page, PriceReport
from pricewatch.validation import PDF_CONTENT_TYPE
from utils.api_client import api_get, api_post, api_request, parse_page
from utils.session import current_user_label

logger = logging.getLogger(__name__)

REPORT_TABLE_PATH = "/api/v1/admin/priceReport/table"
SCRAPE_TRIGGER_PATH = "/api/v1/admin/scrape/trigger"
MANUAL_UPLOAD_PATH = "/api/v1/admin/scrape/manual-upload"


def get_price_reports(page: int = 0, size: int = 10) -> Page[PriceReport]:
    return parse_page(api_get(REPORT_TABLE_PATH, params={"page": page, "size": size}), PriceReport)


def trigger_scrape() -> Optional[str]:
    """
    Start a scrape run on the backend.

    Returns:
        The backend's confirmation message (plain text), if any
    """
    message = api_post(SCRAPE_TRIGGER_PATH)
    logger.info("Scrape triggered: %s", message)
    events.log_scrape_triggered(current_user_label())
    return message if isinstance(message, str) else None


def upload_manual_report(filename: str, content: bytes) -> Optional[str]:
    """
    Upload a price report PDF as multipart field ``file``.

    Callers validate the file first with pricewatch.validation.validate_report_upload.
    """
    files = {"file": (filename, content, PDF_CONTENT_TYPE)}
    message = api_request(
        "POST",
        MANUAL_UPLOAD_PATH,
        files=files,
        timeout=BackendConfig.get_upload_timeout(),
    )
    events.log_report_uploaded(current_user_label(), filename, len(content))
    return message if isinstance(message, str) else None
