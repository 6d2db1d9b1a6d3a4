"""Card and chart views derived from a city snapshot on every read."""

import math
from typing import Any

from weatherboard.models.common import CityName
from weatherboard.models.weather import CitySnapshot
from weatherboard.transform.chart import chart_payload, time_label, to_chart_series
from weatherboard.transform.daily import group_by_day
from weatherboard.transform.icons import icon_for, is_daytime


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def current_card(snapshot: CitySnapshot) -> dict[str, Any]:
    """The current-conditions block: headline, icon and the four details."""
    c = snapshot.current
    day = is_daytime(c.dt, c.sys.sunrise, c.sys.sunset)
    return {
        "location": c.name,
        "country": c.country,
        "icon": icon_for(c.description, day).value,
        "is_day": day,
        "temp_c": round_half_up(c.main.temp),
        "description": c.description,
        "feels_like_c": round_half_up(c.main.feels_like),
        "humidity_pct": c.main.humidity,
        "wind_mps": c.wind.speed,
        "pressure_hpa": c.main.pressure,
    }


def daily_cards(snapshot: CitySnapshot) -> list[dict[str, Any]]:
    """One card per forecast day.

    Day/night for each point is judged against today's sunrise and sunset.
    """
    sunrise, sunset = snapshot.current.sys.sunrise, snapshot.current.sys.sunset
    cards = []
    for day, points in group_by_day(snapshot.forecast).items():
        cards.append({
            "date": day.isoformat(),
            "label": f"{day:%A, %b} {day.day}",
            "items": [
                {
                    "time": time_label(p),
                    "icon": icon_for(p.description, is_daytime(p.dt, sunrise, sunset)).value,
                    "temp_c": round_half_up(p.temp),
                    "description": p.description,
                }
                for p in points
            ],
        })
    return cards


def city_view(name: CityName, snapshot: CitySnapshot | None) -> dict[str, Any]:
    if snapshot is None:
        return {"name": name, "status": "pending"}
    return {
        "name": name,
        "status": "ready",
        "current": current_card(snapshot),
        "forecast": daily_cards(snapshot),
        "chart": chart_payload(to_chart_series(snapshot.forecast)),
    }
