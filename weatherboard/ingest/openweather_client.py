"""OpenWeatherMap API client for current conditions and 5-day forecasts."""

import logging
import os

import httpx

from weatherboard.config.schema import OPENWEATHER_BASE_URL

logger = logging.getLogger(__name__)

UNITS = "metric"


class OpenWeatherClientError(Exception):
    """Raised when the OpenWeatherMap API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    """Async wrapper around the /weather and /forecast endpoints.

    Both lookups are by city name with metric units. No retries are made;
    a timeout of None waits for the transport indefinitely.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float | None = None,
    ):
        self.api_key = api_key or os.environ.get("OPENWEATHER_API_KEY", "")
        if not self.api_key:
            raise OpenWeatherClientError("OPENWEATHER_API_KEY not set")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_current(self, city: str) -> dict:
        """Fetch current conditions for a city."""
        return await self._get("/weather", city)

    async def get_forecast(self, city: str) -> dict:
        """Fetch the 5-day / 3-hour forecast for a city."""
        return await self._get("/forecast", city)

    async def _get(self, endpoint: str, city: str) -> dict:
        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "appid": self.api_key, "units": UNITS}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("OpenWeatherMap request failed: %s city=%s: %s", endpoint, city, e)
            raise OpenWeatherClientError(f"Request to {endpoint} failed: {e}") from e

        if resp.status_code >= 400:
            logger.error(
                "OpenWeatherMap %d: %s city=%s -> %s",
                resp.status_code, endpoint, city, resp.text,
            )
            raise OpenWeatherClientError(
                f"OpenWeatherMap {endpoint} returned {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise OpenWeatherClientError(
                f"OpenWeatherMap {endpoint} returned a non-JSON body",
                status_code=resp.status_code,
            ) from e
        if not isinstance(data, dict):
            raise OpenWeatherClientError(
                f"OpenWeatherMap {endpoint} returned {type(data).__name__}, expected object",
                status_code=resp.status_code,
            )
        return data
