"""Common types shared across models."""

from enum import StrEnum
from typing import TypeAlias

CityName: TypeAlias = str


class IconCategory(StrEnum):
    DAY_SUNNY = "day-sunny"
    NIGHT_CLEAR = "night-clear"
    DAY_CLOUDY = "day-cloudy"
    NIGHT_CLOUDY = "night-alt-cloudy"
    CLOUD = "cloud"
    CLOUDY = "cloudy"
    SHOWERS = "showers"
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    FOG = "fog"
    DUST = "dust"
