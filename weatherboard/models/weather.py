"""OpenWeatherMap current-conditions and forecast models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MainReadings:
    temp: float
    feels_like: float
    humidity: int
    pressure: int


@dataclass(frozen=True)
class WindReadings:
    speed: float


@dataclass(frozen=True)
class WeatherCondition:
    description: str
    icon: str


@dataclass(frozen=True)
class SunCycle:
    country: str
    sunrise: int  # epoch seconds
    sunset: int


@dataclass(frozen=True)
class CurrentConditions:
    """Current weather, laid out in the provider's blocks."""

    name: str
    dt: int  # epoch seconds
    main: MainReadings
    wind: WindReadings
    weather: list[WeatherCondition]
    sys: SunCycle

    @property
    def country(self) -> str:
        return self.sys.country

    @property
    def description(self) -> str:
        return self.weather[0].description


@dataclass(frozen=True)
class ForecastPoint:
    dt: int  # epoch seconds
    date: datetime  # dt in the city's UTC offset
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    description: str
    icon: str


@dataclass(frozen=True)
class CitySnapshot:
    current: CurrentConditions
    forecast: list[ForecastPoint]
