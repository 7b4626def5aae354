"""
Tests for display formatting helpers.
"""

from datetime import date

import pytest

from pricewatch.formatting import (
    confidence_level,
    format_confidence,
    format_date,
    format_datetime,
    format_duration_ms,
    format_location,
    format_market_name,
    format_price,
    format_trend_percentage,
    from_iso_time,
    status_color,
    title_case,
    to_iso_time,
    trend_icon,
)


class TestText:
    def test_format_price(self):
        assert format_price(12.5) == "₱12.50"
        assert format_price(0) == "₱0.00"
        assert format_price(None) == "—"

    def test_title_case(self):
        assert title_case("WET_MARKET") == "Wet Market"
        assert title_case("leafy greens") == "Leafy Greens"
        assert title_case(None) == ""

    def test_market_name_drops_trailing_market(self):
        assert format_market_name("QUINTA MARKET") == "Quinta"
        assert format_market_name("Puregold") == "Puregold"

    def test_location_strips_coordinates(self):
        assert format_location("Quiapo, Manila (14.5995, 120.9842)") == "Quiapo, Manila"


class TestPredictionFormatting:
    def test_confidence(self):
        assert format_confidence(0.876) == "88%"
        assert confidence_level(0.8) == "HIGH"
        assert confidence_level(0.5) == "MEDIUM"
        assert confidence_level(0.4) == "LOW"

    def test_trend(self):
        assert trend_icon(0.2) == "—"
        assert trend_icon(3) == "↗"
        assert trend_icon(-3) == "↘"
        assert format_trend_percentage(4.26) == "+4.3%"
        assert format_trend_percentage(-1.0) == "-1.0%"

    def test_status_color(self):
        assert status_color("anomaly") == "red"
        assert status_color(None) == "gray"


class TestDates:
    def test_format_date(self):
        assert format_date("2026-01-05T08:30:00") == "Jan 5, 2026"
        assert format_date(date(2026, 3, 1)) == "Mar 1, 2026"
        assert format_date("not a date") == "not a date"
        assert format_date(None) == ""

    def test_format_datetime(self):
        assert format_datetime("2026-01-05T08:30:00Z") == "Jan 5, 2026 08:30"

    @pytest.mark.parametrize(
        "ms,expected",
        [(850, "850 ms"), (12400, "12.4 s"), (185000, "3m 05s"), (None, "—")],
    )
    def test_format_duration(self, ms, expected):
        assert format_duration_ms(ms) == expected


class TestTwelveHourTimes:
    @pytest.mark.parametrize(
        "hour,minute,period,expected",
        [
            (7, 30, "PM", "2026-03-01T19:30:00"),
            (12, 0, "AM", "2026-03-01T00:00:00"),
            (12, 15, "PM", "2026-03-01T12:15:00"),
            (6, 5, "am", "2026-03-01T06:05:00"),
        ],
    )
    def test_to_iso_time(self, hour, minute, period, expected):
        assert to_iso_time(date(2026, 3, 1), hour, minute, period) == expected

    def test_to_iso_time_rejects_bad_input(self):
        with pytest.raises(ValueError):
            to_iso_time(date(2026, 3, 1), 13, 0, "PM")
        with pytest.raises(ValueError):
            to_iso_time(date(2026, 3, 1), 1, 0, "XM")

    @pytest.mark.parametrize("hour,minute,period", [(None, 30, "PM"), (7, None, "PM"), (7, 30, None)])
    def test_to_iso_time_blank_field_is_none(self, hour, minute, period):
        assert to_iso_time(date(2026, 3, 1), hour, minute, period) is None

    def test_from_iso_time(self):
        assert from_iso_time("2026-03-01T19:30:00") == (7, 30, "PM")
        assert from_iso_time("2026-03-01T00:10:00") == (12, 10, "AM")
        assert from_iso_time(None) is None
        assert from_iso_time("garbage") is None
