"""Tests for card views and text/JSON formatters."""

import json

from weatherboard.models.weather import CitySnapshot
from weatherboard.reporting.formatters import format_cities_json, format_city_text
from weatherboard.reporting.views import city_view, current_card, daily_cards, round_half_up


class TestRoundHalfUp:
    def test_halves_round_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(18.5) == 19
        assert round_half_up(-0.5) == 0

    def test_regular(self):
        assert round_half_up(18.3) == 18
        assert round_half_up(17.6) == 18


class TestCurrentCard:
    def test_fields(self, paris_snapshot: CitySnapshot):
        card = current_card(paris_snapshot)
        assert card["location"] == "Paris"
        assert card["country"] == "FR"
        assert card["temp_c"] == 18
        assert card["feels_like_c"] == 18
        assert card["humidity_pct"] == 58
        assert card["wind_mps"] == 3.6
        assert card["pressure_hpa"] == 1016
        assert card["is_day"] is True
        assert card["icon"] == "day-sunny"


class TestDailyCards:
    def test_single_day_with_day_and_night_points(self, paris_snapshot: CitySnapshot):
        cards = daily_cards(paris_snapshot)
        assert len(cards) == 1
        card = cards[0]
        assert card["date"] == "2025-10-18"
        assert card["label"] == "Saturday, Oct 18"
        assert [i["time"] for i in card["items"]] == ["17:00", "20:00"]
        assert [i["icon"] for i in card["items"]] == ["day-cloudy", "rain"]
        assert [i["temp_c"] for i in card["items"]] == [19, 16]


class TestCityView:
    def test_pending(self):
        assert city_view("Paris", None) == {"name": "Paris", "status": "pending"}

    def test_ready(self, paris_snapshot: CitySnapshot):
        view = city_view("Paris", paris_snapshot)
        assert view["status"] == "ready"
        assert view["chart"]["data"]["labels"] == ["17:00", "20:00"]
        assert len(view["forecast"]) == 1


class TestFormatters:
    def test_text(self, paris_snapshot: CitySnapshot):
        text = format_city_text("Paris", paris_snapshot)
        assert "=== Paris ===" in text
        assert "Paris, FR" in text
        assert "18°C clear sky [day-sunny]" in text
        assert "Pressure: 1016 hPa" in text
        assert "Saturday, Oct 18: 17:00 19°C [day-cloudy]" in text

    def test_text_pending(self):
        assert "No weather data" in format_city_text("Atlantis", None)

    def test_json(self, paris_snapshot: CitySnapshot):
        data = json.loads(format_cities_json([("Paris", paris_snapshot), ("Atlantis", None)]))
        assert [d["name"] for d in data] == ["Paris", "Atlantis"]
        assert data[0]["current"]["temp_c"] == 18
        assert data[1]["status"] == "pending"
