"""Output formatters for city weather views."""

import json
from typing import Any

from weatherboard.models.common import CityName
from weatherboard.models.weather import CitySnapshot
from weatherboard.reporting.views import city_view, current_card, daily_cards


def format_city_text(name: CityName, snapshot: CitySnapshot | None) -> str:
    """Plain text card for the terminal."""
    if snapshot is None:
        return f"=== {name} ===\nNo weather data"

    c = current_card(snapshot)
    lines = [
        f"=== {name} ===",
        f"{c['location']}, {c['country']}",
        f"{c['temp_c']}°C {c['description']} [{c['icon']}]",
        f"Feels like: {c['feels_like_c']}°C | Humidity: {c['humidity_pct']}% | "
        f"Wind: {c['wind_mps']} m/s | Pressure: {c['pressure_hpa']} hPa",
        "5-Day Forecast",
    ]
    for card in daily_cards(snapshot):
        items = "  ".join(
            f"{i['time']} {i['temp_c']}°C [{i['icon']}]" for i in card["items"]
        )
        lines.append(f"  {card['label']}: {items}")
    return "\n".join(lines)


def format_cities_json(views: list[tuple[CityName, CitySnapshot | None]]) -> str:
    """JSON array of city views for programmatic consumption."""
    data: list[dict[str, Any]] = [city_view(name, snap) for name, snap in views]
    return json.dumps(data, indent=2, ensure_ascii=False)
