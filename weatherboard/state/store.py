"""City registry and weather store: the dashboard's in-memory state."""

import asyncio
import logging
from dataclasses import dataclass

from weatherboard.ingest.openweather_client import OpenWeatherClient
from weatherboard.ingest.payload import parse_current, parse_forecast
from weatherboard.models.common import CityName
from weatherboard.models.weather import CitySnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Read-only picture of the state at one instant."""

    cities: tuple[CityName, ...]
    weather: dict[CityName, CitySnapshot]

    def snapshot_for(self, name: CityName) -> CitySnapshot | None:
        return self.weather.get(name)


class DashboardState:
    """Tracks cities in insertion order and the snapshot fetched for each.

    Every mutation happens on the event loop thread. Fetches run as tasks;
    each one writes only its own city's key, and only while it is still the
    latest fetch started for a tracked city.
    """

    def __init__(self, client: OpenWeatherClient):
        self.client = client
        self._cities: list[CityName] = []
        self._weather: dict[CityName, CitySnapshot] = {}
        self._pending: set[asyncio.Task] = set()
        self._fetches: dict[CityName, asyncio.Task] = {}  # latest fetch per tracked city

    @property
    def cities(self) -> tuple[CityName, ...]:
        return tuple(self._cities)

    def view(self) -> DashboardView:
        return DashboardView(cities=tuple(self._cities), weather=dict(self._weather))

    def add_city(self, name: CityName) -> asyncio.Task | None:
        """Track a city and start fetching its weather.

        Blank and already-tracked names are ignored (returns None). Must be
        called with a running event loop; the returned task resolves to the
        stored snapshot, or None when the fetch failed or was discarded.
        """
        if not name or not name.strip() or name in self._cities:
            return None
        loop = asyncio.get_running_loop()
        self._cities.append(name)
        logger.info("Tracking city %r", name)

        task = loop.create_task(self.fetch_weather(name))
        self._fetches[name] = task
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def remove_city(self, name: CityName) -> bool:
        """Stop tracking a city and drop its snapshot. Returns False if absent."""
        if name not in self._cities:
            return False
        self._cities.remove(name)
        self._weather.pop(name, None)
        self._fetches.pop(name, None)
        logger.info("Removed city %r", name)
        return True

    async def fetch_weather(self, name: CityName) -> CitySnapshot | None:
        """Fetch current conditions and forecast, then store them together.

        Any failure is logged and leaves the store untouched for this city.
        The result is written only while this task is still the city's
        latest fetch, so a fetch outlived by remove_city (or by a re-add)
        never lands.
        """
        try:
            raw_current, raw_forecast = await asyncio.gather(
                self.client.get_current(name),
                self.client.get_forecast(name),
            )
            snapshot = CitySnapshot(
                current=parse_current(raw_current),
                forecast=parse_forecast(raw_forecast),
            )
        except Exception:
            logger.exception("Error fetching the weather data for %r", name)
            return None

        if self._fetches.get(name) is not asyncio.current_task():
            logger.debug("Discarding weather for %r: superseded or no longer tracked", name)
            return None

        self._weather[name] = snapshot
        logger.info(
            "Stored weather for %r: %.1f°C, %d forecast points",
            name, snapshot.current.main.temp, len(snapshot.forecast),
        )
        return snapshot

    async def wait_pending(self) -> None:
        """Wait for every in-flight fetch to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
