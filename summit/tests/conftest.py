"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from summit.config.defaults import DEFAULT_POINTS
from summit.config.schema import AppConfig
from summit.models.location import Coordinates, ForecastPoint, LocationInfo
from summit.models.units import Elevation
from summit.weather.coverage import DAILY_COVERAGE, HOURLY_COVERAGE, series_key

FIXTURE_DIR = Path(__file__).parent / "fixtures"

HOURLY_DEFAULTS: dict[str, Any] = {
    "temperature_2m": 20.0,
    "apparent_temperature": 15.0,
    "weather_code": 71,
    "is_day": 1,
    "precipitation": 0.1,
    "precipitation_probability": 50,
    "rain": 0.0,
    "showers": 0.0,
    "snowfall": 0.5,
    "cloud_cover": 80,
    "cloud_cover_low": 40,
    "cloud_cover_mid": 40,
    "cloud_cover_high": 40,
    "visibility": 10000.0,
    "wind_speed_10m": 10.0,
    "wind_direction_10m": 270.0,
    "wind_gusts_10m": 20.0,
    "relative_humidity_2m": 90,
    "snow_depth": 3.0,
    "freezing_level_height": 8000.0,
}

DAILY_DEFAULTS: dict[str, Any] = {
    "weather_code": 73,
    "snowfall_water_equivalent_sum": 0.4,
    "wind_direction_10m_dominant": 250.0,
}


@pytest.fixture
def make_payload() -> Callable[..., dict]:
    """Build an Open-Meteo multi-model response.

    Every covered series is filled with a constant default. ``hourly`` and
    ``daily`` map raw series keys (``temperature_2m_gfs_seamless``) to arrays
    that replace the defaults.
    """

    def _make(
        hourly_times: list[str],
        daily_dates: list[str],
        hourly: dict[str, list] | None = None,
        daily: dict[str, list] | None = None,
    ) -> dict:
        hourly_section: dict[str, list] = {"time": list(hourly_times)}
        for variable, models in HOURLY_COVERAGE.items():
            for model in models:
                hourly_section[series_key(variable, model)] = (
                    [HOURLY_DEFAULTS[variable]] * len(hourly_times)
                )

        daily_section: dict[str, list] = {"time": list(daily_dates)}
        for variable, models in DAILY_COVERAGE.items():
            for model in models:
                if variable == "sunrise":
                    values = [f"{d}T07:15" for d in daily_dates]
                elif variable == "sunset":
                    values = [f"{d}T17:00" for d in daily_dates]
                else:
                    values = [DAILY_DEFAULTS[variable]] * len(daily_dates)
                daily_section[series_key(variable, model)] = values

        hourly_section.update(hourly or {})
        daily_section.update(daily or {})
        return {
            "latitude": 39.11539,
            "longitude": -107.6584,
            "timezone": "America/Denver",
            "hourly": hourly_section,
            "daily": daily_section,
        }

    return _make


@pytest.fixture
def forecast_point() -> ForecastPoint:
    return ForecastPoint(
        coordinates=Coordinates(39.11539, -107.65840),
        elevation=Elevation.from_feet(8755.0),
        location=LocationInfo(
            name="McClure Pass",
            county="Gunnison County",
            state="Colorado",
            country="United States",
            country_code="us",
        ),
    )


@pytest.fixture
def default_config() -> AppConfig:
    """Return default AppConfig with default points."""
    return AppConfig(points=DEFAULT_POINTS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "log": {"level": "DEBUG"},
        "forecast": {"forecast_days": 7, "primary_model": "ecmwf_ifs"},
        "providers": {"timeout": 10.0},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def map_layer() -> dict:
    with open(FIXTURE_DIR / "nac_map_layer.json") as f:
        return json.load(f)


@pytest.fixture
def avalanche_forecast_raw() -> dict:
    with open(FIXTURE_DIR / "nac_forecast.json") as f:
        return json.load(f)
