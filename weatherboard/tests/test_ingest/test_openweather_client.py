"""Tests for the OpenWeatherMap client with mocked httpx."""

import httpx
import pytest
import respx

from weatherboard.ingest.openweather_client import OpenWeatherClient, OpenWeatherClientError

BASE = "https://test-owm.example.com/data/2.5"


@pytest.fixture
def owm() -> OpenWeatherClient:
    return OpenWeatherClient(api_key="test-key", base_url=BASE)


class TestConstruction:
    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        with pytest.raises(OpenWeatherClientError):
            OpenWeatherClient()

    def test_key_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "env-key")
        assert OpenWeatherClient().api_key == "env-key"

    def test_trailing_slash_stripped(self):
        assert OpenWeatherClient(api_key="k", base_url=BASE + "/").base_url == BASE


class TestGetCurrent:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, owm: OpenWeatherClient, paris_current: dict):
        route = respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, json=paris_current)
        )

        result = await owm.get_current("Paris")
        assert result["main"]["temp"] == 18.3
        params = route.calls[0].request.url.params
        assert params["q"] == "Paris"
        assert params["appid"] == "test-key"
        assert params["units"] == "metric"

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(404, json={"cod": "404", "message": "city not found"})
        )

        with pytest.raises(OpenWeatherClientError) as exc_info:
            await owm.get_current("Atlantis")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(OpenWeatherClientError) as exc_info:
            await owm.get_current("Paris")
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(OpenWeatherClientError):
            await owm.get_current("Paris")

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_array_rejected(self, owm: OpenWeatherClient):
        respx.get(f"{BASE}/weather").mock(return_value=httpx.Response(200, json=[]))

        with pytest.raises(OpenWeatherClientError):
            await owm.get_current("Paris")


class TestGetForecast:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, owm: OpenWeatherClient, paris_forecast: dict):
        route = respx.get(f"{BASE}/forecast").mock(
            return_value=httpx.Response(200, json=paris_forecast)
        )

        result = await owm.get_forecast("Paris")
        assert len(result["list"]) == 2
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_not_retried(self, owm: OpenWeatherClient):
        route = respx.get(f"{BASE}/forecast").mock(return_value=httpx.Response(503))

        with pytest.raises(OpenWeatherClientError) as exc_info:
            await owm.get_forecast("Paris")
        assert exc_info.value.status_code == 503
        assert route.call_count == 1
