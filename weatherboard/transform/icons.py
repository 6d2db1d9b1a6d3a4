"""Day/night classification and description-to-icon mapping."""

from weatherboard.models.common import IconCategory

# Evaluated top to bottom, first match wins: "shower" must precede "rain".
# Each rule is (substrings, day icon, night icon).
ICON_RULES: list[tuple[tuple[str, ...], IconCategory, IconCategory]] = [
    (("clear",), IconCategory.DAY_SUNNY, IconCategory.NIGHT_CLEAR),
    (("few clouds",), IconCategory.DAY_CLOUDY, IconCategory.NIGHT_CLOUDY),
    (("scattered clouds",), IconCategory.CLOUD, IconCategory.CLOUD),
    (("broken clouds", "overcast"), IconCategory.CLOUDY, IconCategory.CLOUDY),
    (("shower", "drizzle"), IconCategory.SHOWERS, IconCategory.SHOWERS),
    (("rain",), IconCategory.RAIN, IconCategory.RAIN),
    (("thunderstorm",), IconCategory.THUNDERSTORM, IconCategory.THUNDERSTORM),
    (("snow", "sleet"), IconCategory.SNOW, IconCategory.SNOW),
    (("mist", "fog"), IconCategory.FOG, IconCategory.FOG),
    (("dust", "sand"), IconCategory.DUST, IconCategory.DUST),
]

DEFAULT_ICON = IconCategory.DAY_SUNNY


def is_daytime(timestamp: float, sunrise: float, sunset: float) -> bool:
    """True strictly between sunrise and sunset; the boundaries count as night."""
    return sunrise < timestamp < sunset


def icon_for(description: str, is_day: bool = True) -> IconCategory:
    """Pick the icon category for a free-text weather description."""
    text = description.lower()
    for needles, day_icon, night_icon in ICON_RULES:
        if any(needle in text for needle in needles):
            return day_icon if is_day else night_icon
    return DEFAULT_ICON
