"""Group forecast points by calendar day."""

from datetime import date

from weatherboard.models.weather import ForecastPoint


def group_by_day(forecast: list[ForecastPoint]) -> dict[date, list[ForecastPoint]]:
    """Partition forecast points by the calendar day of their local date.

    Days appear in first-seen order and points keep their input order within
    a day, whether or not same-day points are contiguous.
    """
    groups: dict[date, list[ForecastPoint]] = {}
    for point in forecast:
        groups.setdefault(point.date.date(), []).append(point)
    return groups
