"""Chart series for the multi-axis forecast chart."""

from dataclasses import dataclass
from typing import Any

from weatherboard.models.weather import ForecastPoint

CHART_TITLE = "5-Day Weather Forecast"

# (series attribute, dataset label, rgb, axis id, axis position)
DATASETS = [
    ("temperature", "Temperature (°C)", "255, 99, 132", "y", "left"),
    ("humidity", "Humidity (%)", "54, 162, 235", "y1", "right"),
    ("wind_speed", "Wind Speed (m/s)", "75, 192, 192", "y2", "right"),
]


@dataclass(frozen=True)
class ChartSeries:
    labels: list[str]
    temperature: list[float]
    humidity: list[int]
    wind_speed: list[float]


def time_label(point: ForecastPoint) -> str:
    return point.date.strftime("%H:%M")


def to_chart_series(forecast: list[ForecastPoint]) -> ChartSeries:
    """One label per point plus three index-aligned series."""
    return ChartSeries(
        labels=[time_label(p) for p in forecast],
        temperature=[p.temp for p in forecast],
        humidity=[p.humidity for p in forecast],
        wind_speed=[p.wind_speed for p in forecast],
    )


def chart_payload(series: ChartSeries) -> dict[str, Any]:
    """Chart.js-shaped data and options: one y-axis per series."""
    datasets = []
    scales: dict[str, Any] = {}
    for attr, label, rgb, axis_id, position in DATASETS:
        datasets.append({
            "label": label,
            "data": list(getattr(series, attr)),
            "borderColor": f"rgba({rgb}, 1)",
            "backgroundColor": f"rgba({rgb}, 0.2)",
            "yAxisID": axis_id,
        })
        axis: dict[str, Any] = {"type": "linear", "display": True, "position": position}
        if position == "right":
            axis["grid"] = {"drawOnChartArea": False}
        scales[axis_id] = axis

    return {
        "data": {"labels": list(series.labels), "datasets": datasets},
        "options": {
            "responsive": True,
            "interaction": {"mode": "index", "intersect": False},
            "stacked": False,
            "plugins": {"title": {"display": True, "text": CHART_TITLE}},
            "scales": scales,
        },
    }
