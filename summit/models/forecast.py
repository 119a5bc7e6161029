"""Multi-model weather forecast domain models."""

from dataclasses import dataclass, field
from datetime import date, datetime

from summit.models.location import ForecastPoint
from summit.models.model_values import ModelValues
from summit.models.units import (
    Elevation,
    Precipitation,
    SnowDepth,
    Temperature,
    Weather,
    Wind,
    WindDirection,
    WindSpeed,
)


@dataclass(frozen=True)
class CurrentConditions:
    temperature: ModelValues[Temperature]
    weather: ModelValues[Weather]
    wind: ModelValues[Wind]
    visibility: ModelValues[float]
    cloud_cover: ModelValues[float]
    cloud_cover_low: ModelValues[float]
    cloud_cover_mid: ModelValues[float]
    cloud_cover_high: ModelValues[float]
    relative_humidity: ModelValues[float]


@dataclass(frozen=True)
class HourlyForecast:
    # Precipitation values are sums over the preceding hour.
    start: datetime
    end: datetime
    temperature: ModelValues[Temperature]
    apparent_temperature: ModelValues[Temperature]
    weather: ModelValues[Weather]
    is_day: ModelValues[bool]
    wind: ModelValues[Wind]
    precipitation: ModelValues[Precipitation]
    precipitation_probability: ModelValues[float]
    rain: ModelValues[Precipitation]
    showers: ModelValues[Precipitation]
    snowfall: ModelValues[Precipitation]
    liquid_precipitation: ModelValues[Precipitation]
    cloud_cover: ModelValues[float]
    cloud_cover_low: ModelValues[float]
    cloud_cover_mid: ModelValues[float]
    cloud_cover_high: ModelValues[float]
    relative_humidity: ModelValues[float]
    visibility: ModelValues[float]
    snow_depth: ModelValues[SnowDepth]
    freezing_level_height: ModelValues[Elevation]


@dataclass(frozen=True)
class DailyForecast:
    day: date
    hourly_forecasts: list[HourlyForecast]

    weather: ModelValues[Weather]
    snowfall_water_equivalent_sum: ModelValues[Precipitation]
    sunrise: ModelValues[datetime]
    sunset: ModelValues[datetime]
    wind_dominant_direction: ModelValues[WindDirection]

    high_temperature: ModelValues[Temperature]
    low_temperature: ModelValues[Temperature]
    max_wind_speed: ModelValues[WindSpeed]
    min_wind_speed: ModelValues[WindSpeed]
    max_wind_gusts: ModelValues[WindSpeed]
    min_wind_gusts: ModelValues[WindSpeed]
    highest_freezing_level: ModelValues[Elevation]
    lowest_freezing_level: ModelValues[Elevation]
    total_precipitation: ModelValues[Precipitation]
    total_rain: ModelValues[Precipitation]
    total_showers: ModelValues[Precipitation]
    total_snowfall: ModelValues[Precipitation]
    total_liquid_precipitation: ModelValues[Precipitation]


@dataclass(frozen=True)
class Forecast:
    timestamp: datetime
    forecast_point: ForecastPoint
    timezone: str
    primary_model: str
    current_conditions: CurrentConditions
    daily_forecasts: list[DailyForecast] = field(default_factory=list)
