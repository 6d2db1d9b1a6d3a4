"""Map OpenWeatherMap JSON payloads onto weather models."""

from datetime import UTC, datetime, timedelta, timezone

from weatherboard.models.weather import (
    CurrentConditions,
    ForecastPoint,
    MainReadings,
    SunCycle,
    WeatherCondition,
    WindReadings,
)


class PayloadError(ValueError):
    """Raised when a provider payload is missing fields or has the wrong shape."""


def parse_current(raw: dict) -> CurrentConditions:
    """Build CurrentConditions from a /weather response."""
    try:
        main = raw["main"]
        sys_block = raw["sys"]
        weather = [_condition(w) for w in raw["weather"]]
        if not weather:
            raise PayloadError("current conditions have an empty weather list")
        return CurrentConditions(
            name=str(raw["name"]),
            dt=int(raw["dt"]),
            main=MainReadings(
                temp=float(main["temp"]),
                feels_like=float(main["feels_like"]),
                humidity=int(main["humidity"]),
                pressure=int(main["pressure"]),
            ),
            wind=WindReadings(speed=float(raw["wind"]["speed"])),
            weather=weather,
            sys=SunCycle(
                country=str(sys_block.get("country", "")),
                sunrise=int(sys_block["sunrise"]),
                sunset=int(sys_block["sunset"]),
            ),
        )
    except PayloadError:
        raise
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise PayloadError(f"Malformed current conditions payload: {e!r}") from e


def parse_forecast(raw: dict) -> list[ForecastPoint]:
    """Build the ordered ForecastPoint list from a /forecast response.

    Provider order is kept as-is. Timestamps are shifted into the city's
    UTC offset (city.timezone, seconds) so dates follow the local calendar.
    """
    try:
        offset = int((raw.get("city") or {}).get("timezone", 0))
        tz = timezone(timedelta(seconds=offset)) if offset else UTC
        return [_forecast_point(item, tz) for item in raw["list"]]
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise PayloadError(f"Malformed forecast payload: {e!r}") from e


def _condition(w: dict) -> WeatherCondition:
    return WeatherCondition(description=str(w["description"]), icon=str(w.get("icon", "")))


def _forecast_point(item: dict, tz: timezone) -> ForecastPoint:
    dt = int(item["dt"])
    main = item["main"]
    condition = _condition(item["weather"][0])
    return ForecastPoint(
        dt=dt,
        date=datetime.fromtimestamp(dt, tz=tz),
        temp=float(main["temp"]),
        feels_like=float(main["feels_like"]),
        humidity=int(main["humidity"]),
        wind_speed=float(item["wind"]["speed"]),
        description=condition.description,
        icon=condition.icon,
    )
