"""
Tests for the admin audit log.
"""

import json
from unittest.mock import patch

from pricewatch import events
from pricewatch.events import log_event, read_recent_events


def _read_lines(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestLogEvent:
    def test_writes_jsonl_record(self, event_log):
        log_event("market_updated", "admin@example.com", {"market_id": 3})

        records = _read_lines(event_log)
        assert len(records) == 1
        record = records[0]
        assert set(record) == {"ts", "event", "user", "payload"}
        assert record["event"] == "market_updated"
        assert record["user"] == "admin@example.com"
        assert record["payload"] == {"market_id": 3}

    def test_none_payload_becomes_empty_dict(self, event_log):
        log_event("scrape_triggered", None, None)
        assert _read_lines(event_log)[0]["payload"] == {}

    def test_creates_missing_directories(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "dir" / "events.log"
        monkeypatch.setenv("EVENT_LOG_FILE", str(path))
        log_event("restored", "a", {"ids": [1]})
        assert path.exists()

    def test_never_raises(self):
        with patch("builtins.open", side_effect=PermissionError("denied")):
            log_event("x", "a", {})
        with patch("pathlib.Path.open", side_effect=PermissionError("denied")):
            log_event("x", "a", {})

    def test_helpers_build_expected_payloads(self, event_log):
        events.log_product_status_changed("a", [5, 9], "ARCHIVED")
        events.log_prediction_override("a", 4, "+10% INCREASE", "")
        events.log_report_uploaded("a", "prices.pdf", 2048)

        product, override, upload = _read_lines(event_log)
        assert product["payload"] == {"product_ids": [5, 9], "status": "ARCHIVED", "count": 2}
        assert override["payload"] == {"pair_count": 4, "force_trend": "+10% INCREASE"}
        assert upload["payload"] == {"filename": "prices.pdf", "size": 2048}


class TestReadRecentEvents:
    def test_newest_first_and_limited(self, event_log):
        for i in range(5):
            log_event(f"event{i}", "a", {"n": i})

        recent = read_recent_events(limit=3)
        assert [r["event"] for r in recent] == ["event4", "event3", "event2"]

    def test_missing_file_returns_empty(self):
        assert read_recent_events() == []

    def test_skips_malformed_lines(self, event_log):
        log_event("good", "a", {})
        with open(event_log, "a", encoding="utf-8") as f:
            f.write("{not json\n\n")
        log_event("also_good", "a", {})

        assert [r["event"] for r in read_recent_events()] == ["also_good", "good"]

    def test_non_positive_limit(self, event_log):
        log_event("good", "a", {})
        assert read_recent_events(limit=0) == []
