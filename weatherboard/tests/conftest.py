"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherboard.config.schema import DashboardConfig
from weatherboard.ingest.payload import parse_current, parse_forecast
from weatherboard.models.weather import CitySnapshot

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def paris_current() -> dict:
    return load_fixture("owm_current_paris.json")


@pytest.fixture
def paris_forecast() -> dict:
    return load_fixture("owm_forecast_paris.json")


@pytest.fixture
def paris_snapshot(paris_current: dict, paris_forecast: dict) -> CitySnapshot:
    return CitySnapshot(
        current=parse_current(paris_current),
        forecast=parse_forecast(paris_forecast),
    )


@pytest.fixture
def default_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {"api_key": "yaml-key", "timeout_seconds": 10.0},
        "server": {"port": 9000},
        "cities": ["Paris", "Oslo"],
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
