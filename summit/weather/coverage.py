"""Open-Meteo variables and the fixed set of models publishing each one.

Multi-model responses carry one flat array per variable per model, keyed
``{variable}_{model}``. A model missing from a variable's list never publishes
that variable; it is left out of the resulting ModelValues.
"""

from summit.models.common import WeatherModel

ALL_MODELS: tuple[str, ...] = tuple(m.value for m in WeatherModel)


def _only(*models: WeatherModel) -> tuple[str, ...]:
    return tuple(m.value for m in models)


def _all_except(*excluded: WeatherModel) -> tuple[str, ...]:
    return tuple(m for m in ALL_MODELS if m not in _only(*excluded))


_G = WeatherModel

HOURLY_COVERAGE: dict[str, tuple[str, ...]] = {
    "temperature_2m": ALL_MODELS,
    "apparent_temperature": _all_except(_G.GFS_GRAPHCAST025),
    "weather_code": ALL_MODELS,
    "is_day": ALL_MODELS,
    "precipitation": ALL_MODELS,
    "precipitation_probability": _only(
        _G.GFS_SEAMLESS, _G.GEM_SEAMLESS, _G.ECMWF_IFS, _G.NCEP_NBM_CONUS,
    ),
    "rain": ALL_MODELS,
    "showers": ALL_MODELS,
    "snowfall": ALL_MODELS,
    "cloud_cover": ALL_MODELS,
    "cloud_cover_low": _all_except(_G.NCEP_NBM_CONUS),
    "cloud_cover_mid": _all_except(_G.NCEP_NBM_CONUS),
    "cloud_cover_high": _all_except(_G.NCEP_NBM_CONUS),
    "visibility": _only(
        _G.GFS_SEAMLESS, _G.ECMWF_IFS, _G.NCEP_NBM_CONUS, _G.NCEP_NAM_CONUS,
    ),
    "wind_speed_10m": ALL_MODELS,
    "wind_direction_10m": ALL_MODELS,
    "wind_gusts_10m": _all_except(_G.GFS_GRAPHCAST025, _G.ECMWF_AIFS025_SINGLE),
    "relative_humidity_2m": _all_except(_G.GFS_GRAPHCAST025),
    "snow_depth": _only(
        _G.GFS_SEAMLESS, _G.GEM_SEAMLESS, _G.ECMWF_IFS, _G.NCEP_NAM_CONUS,
    ),
    "freezing_level_height": _only(_G.GFS_SEAMLESS),
}

DAILY_COVERAGE: dict[str, tuple[str, ...]] = {
    "weather_code": ALL_MODELS,
    "snowfall_water_equivalent_sum": _all_except(_G.GFS_GRAPHCAST025),
    "sunrise": ALL_MODELS,
    "sunset": ALL_MODELS,
    "wind_direction_10m_dominant": _all_except(_G.GFS_GRAPHCAST025),
}

# Reported as 0-100 upstream, normalized to a 0-1 fraction.
PERCENT_VARIABLES = frozenset({
    "precipitation_probability",
    "cloud_cover",
    "cloud_cover_low",
    "cloud_cover_mid",
    "cloud_cover_high",
    "relative_humidity_2m",
})


def hourly_models(variable: str) -> tuple[str, ...]:
    return HOURLY_COVERAGE[variable]


def daily_models(variable: str) -> tuple[str, ...]:
    return DAILY_COVERAGE[variable]


def series_key(variable: str, model: str) -> str:
    return f"{variable}_{model}"
