"""
Admin audit log for PriceWatch Admin.

Responsibilities:
- Provide a single log_event(...) function that appends a JSONL record to the
  audit log file (DashboardConfig.get_event_log_file()).
- Never raise exceptions (auditing must not block an admin action that already
  succeeded on the backend).
- Provide small helper functions for the common admin mutations.
- Read back the most recent records for the Overview "Recent activity" panel.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from pricewatch.config import DashboardConfig

logger = logging.getLogger(__name__)


def _log_file() -> Path:
    return DashboardConfig.get_event_log_file()


def _write_to_file(record: Dict[str, Any]) -> None:
    """
    Append a single JSON record as JSONL.
    Never raise exceptions.
    """
    try:
        path = _log_file()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
    except Exception as exc:
        logger.debug("Failed to write audit event: %s", exc)


def log_event(
    event: str,
    user: Optional[str],
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Core event logger.

    Builds a record with keys ts, event, user, payload and appends it to the
    audit log. Never raises.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "user": user,
        "payload": payload or {},
    }
    _write_to_file(record)


def read_recent_events(limit: int = 20) -> List[Dict[str, Any]]:
    """
    Return the last ``limit`` audit records, newest first.

    Missing files and malformed lines are skipped; never raises.
    """
    if limit <= 0:
        return []
    path = _log_file()
    tail: deque = deque(maxlen=limit)
    try:
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    tail.append(json.loads(line))
                except json.JSONDecodeError:
                    logger.debug("Skipping malformed audit line")
    except FileNotFoundError:
        return []
    except Exception as exc:
        logger.debug("Failed to read audit log: %s", exc)
        return []
    return list(reversed(tail))


# ---------------------------------------------------------------------------
# Helper functions for common admin mutations
# ---------------------------------------------------------------------------

def log_product_tags_updated(user: Optional[str], product_id: int, tag_ids: List[int]) -> None:
    """
    payload:
    {
        "product_id": 12,
        "tag_ids": [1, 4]
    }
    """
    log_event("product_tags_updated", user, {"product_id": product_id, "tag_ids": tag_ids})


def log_tag_created(user: Optional[str], tag_name: str) -> None:
    log_event("dietary_tag_created", user, {"tag_name": tag_name})


def log_tag_updated(user: Optional[str], tag_id: int, tag_name: str) -> None:
    log_event("dietary_tag_updated", user, {"tag_id": tag_id, "tag_name": tag_name})


def log_tags_archived(user: Optional[str], tag_ids: List[int]) -> None:
    log_event("dietary_tags_archived", user, {"tag_ids": tag_ids, "count": len(tag_ids)})


def log_market_updated(user: Optional[str], market_id: int, fields: List[str]) -> None:
    """
    payload:
    {
        "market_id": 3,
        "fields": ["marketLocation", "ratings"]   # keys sent in the update
    }
    """
    log_event("market_updated", user, {"market_id": market_id, "fields": fields})


def log_market_status_changed(user: Optional[str], market_ids: List[int], status: str) -> None:
    log_event(
        "market_status_changed",
        user,
        {"market_ids": market_ids, "status": status, "count": len(market_ids)},
    )


def log_product_updated(user: Optional[str], product_id: int, newcomer: bool = False) -> None:
    log_event("product_updated", user, {"product_id": product_id, "newcomer": newcomer})


def log_product_status_changed(user: Optional[str], product_ids: List[int], status: str) -> None:
    """
    payload:
    {
        "product_ids": [5, 9],
        "status": "ARCHIVED",
        "count": 2
    }
    """
    log_event(
        "product_status_changed",
        user,
        {"product_ids": product_ids, "status": status, "count": len(product_ids)},
    )


def log_restored(user: Optional[str], entity: str, ids: List[int]) -> None:
    """entity is one of "product", "market", "dietary_tag"."""
    log_event("restored", user, {"entity": entity, "ids": ids, "count": len(ids)})


def log_scrape_triggered(user: Optional[str]) -> None:
    log_event("scrape_triggered", user, {})


def log_report_uploaded(user: Optional[str], filename: str, size: Optional[int]) -> None:
    payload: Dict[str, Any] = {"filename": filename}
    if size is not None:
        payload["size"] = size
    log_event("report_uploaded", user, payload)


def log_prediction_override(
    user: Optional[str],
    pair_count: int,
    force_trend: str,
    reason: Optional[str] = None,
) -> None:
    """
    payload:
    {
        "pair_count": 4,
        "force_trend": "+10% INCREASE",
        "reason": "Typhoon supply shock"   # optional
    }
    """
    payload: Dict[str, Any] = {"pair_count": pair_count, "force_trend": force_trend}
    if reason:
        payload["reason"] = reason
    log_event("prediction_override", user, payload)


def log_prediction_triggered(user: Optional[str], scope: str) -> None:
    """scope is "bulk" or "product:<id>/market:<id>"."""
    log_event("prediction_triggered", user, {"scope": scope})
