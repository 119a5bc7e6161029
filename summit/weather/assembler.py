"""Assemble a raw multi-model provider response into the Forecast domain model."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, TypeVar
from zoneinfo import ZoneInfo

from summit.models.common import utc_now
from summit.models.forecast import (
    CurrentConditions,
    DailyForecast,
    Forecast,
    HourlyForecast,
)
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
from summit.weather.aggregate import (
    liquid_precipitation,
    max_value,
    min_value,
    sum_values,
)
from summit.weather.coverage import PERCENT_VARIABLES, daily_models, hourly_models
from summit.weather.payload import MultiModelPayload
from summit.weather.timeseries import (
    DayBucket,
    bucket_hours_by_day,
    find_current_index,
    load_timezone,
    parse_local_series,
    parse_local_timestamp,
)

logger = logging.getLogger(__name__)

V = TypeVar("V")


def assemble_forecast(
    raw: dict[str, Any],
    timezone: str,
    forecast_point: ForecastPoint,
    primary_model: str,
    now: datetime | None = None,
) -> Forecast:
    """Build a Forecast from an Open-Meteo multi-model response.

    Raises InvalidTimezone when ``timezone`` cannot be loaded and
    MalformedProviderResponse when a required section or array is missing.
    """
    tz = load_timezone(timezone)
    payload = MultiModelPayload(raw)

    current_index = find_current_index(payload.hourly_times, tz, now)
    current = _current_conditions(payload, current_index)

    starts = parse_local_series(payload.hourly_times, tz)
    daily_forecasts: list[DailyForecast] = []
    for bucket in bucket_hours_by_day(payload.hourly_times, payload.daily_dates, tz):
        hours = [_hourly_forecast(payload, i, starts[i]) for i in bucket.indexes]
        daily_forecasts.append(_daily_forecast(payload, bucket, hours, tz))

    logger.debug(
        "Assembled forecast: tz=%s current_index=%d days=%d",
        timezone, current_index, len(daily_forecasts),
    )

    return Forecast(
        timestamp=utc_now(),
        forecast_point=forecast_point,
        timezone=timezone,
        primary_model=primary_model,
        current_conditions=current,
        daily_forecasts=daily_forecasts,
    )


# -- converters --------------------------------------------------------------


def _fraction(value: float) -> float:
    return value / 100.0


def _identity(value: Any) -> Any:
    return value


def _converter(variable: str, convert: Callable[[Any], V]) -> Callable[[Any], V]:
    if variable in PERCENT_VARIABLES:
        return lambda v: convert(_fraction(v))
    return convert


def _weather(code: Any) -> Weather:
    return Weather.from_code(int(code))


def _plus_one_hour(start: datetime) -> datetime:
    return (start.astimezone(UTC) + timedelta(hours=1)).astimezone(start.tzinfo)


# -- per-slot maps -----------------------------------------------------------


def _hourly_map(
    payload: MultiModelPayload,
    variable: str,
    index: int,
    convert: Callable[[Any], V] = _identity,
) -> ModelValues[V]:
    convert = _converter(variable, convert)
    values: ModelValues[V] = ModelValues()
    for model in hourly_models(variable):
        raw = payload.hourly_value(variable, model, index)
        if raw is None:
            continue
        values[model] = convert(raw)
    return values


def _daily_map(
    payload: MultiModelPayload,
    variable: str,
    index: int,
    convert: Callable[[Any], V] = _identity,
) -> ModelValues[V]:
    values: ModelValues[V] = ModelValues()
    for model in daily_models(variable):
        raw = payload.daily_value(variable, model, index)
        if raw is None:
            continue
        converted = convert(raw)
        if converted is None:
            continue
        values[model] = converted
    return values


def _wind_map(payload: MultiModelPayload, index: int) -> ModelValues[Wind]:
    gust_models = set(hourly_models("wind_gusts_10m"))
    winds: ModelValues[Wind] = ModelValues()
    for model in hourly_models("wind_speed_10m"):
        speed = payload.hourly_value("wind_speed_10m", model, index)
        direction = payload.hourly_value("wind_direction_10m", model, index)
        if speed is None or direction is None:
            continue
        gusts = None
        if model in gust_models:
            gusts = payload.hourly_value("wind_gusts_10m", model, index)
        winds[model] = Wind.from_mph(speed, direction, gusts)
    return winds


def _current_conditions(payload: MultiModelPayload, index: int) -> CurrentConditions:
    return CurrentConditions(
        temperature=_hourly_map(payload, "temperature_2m", index, Temperature.from_fahrenheit),
        weather=_hourly_map(payload, "weather_code", index, _weather),
        wind=_wind_map(payload, index),
        visibility=_hourly_map(payload, "visibility", index),
        cloud_cover=_hourly_map(payload, "cloud_cover", index),
        cloud_cover_low=_hourly_map(payload, "cloud_cover_low", index),
        cloud_cover_mid=_hourly_map(payload, "cloud_cover_mid", index),
        cloud_cover_high=_hourly_map(payload, "cloud_cover_high", index),
        relative_humidity=_hourly_map(payload, "relative_humidity_2m", index),
    )


def _hourly_forecast(
    payload: MultiModelPayload, index: int, start: datetime | None
) -> HourlyForecast:
    assert start is not None  # bucketed indexes always parse
    rain = _hourly_map(payload, "rain", index, Precipitation.from_inches)
    showers = _hourly_map(payload, "showers", index, Precipitation.from_inches)
    return HourlyForecast(
        start=start,
        end=_plus_one_hour(start),
        temperature=_hourly_map(payload, "temperature_2m", index, Temperature.from_fahrenheit),
        apparent_temperature=_hourly_map(
            payload, "apparent_temperature", index, Temperature.from_fahrenheit
        ),
        weather=_hourly_map(payload, "weather_code", index, _weather),
        is_day=_hourly_map(payload, "is_day", index, lambda v: v == 1),
        wind=_wind_map(payload, index),
        precipitation=_hourly_map(payload, "precipitation", index, Precipitation.from_inches),
        precipitation_probability=_hourly_map(payload, "precipitation_probability", index),
        rain=rain,
        showers=showers,
        snowfall=_hourly_map(payload, "snowfall", index, Precipitation.from_inches),
        liquid_precipitation=liquid_precipitation(rain, showers),
        cloud_cover=_hourly_map(payload, "cloud_cover", index),
        cloud_cover_low=_hourly_map(payload, "cloud_cover_low", index),
        cloud_cover_mid=_hourly_map(payload, "cloud_cover_mid", index),
        cloud_cover_high=_hourly_map(payload, "cloud_cover_high", index),
        relative_humidity=_hourly_map(payload, "relative_humidity_2m", index),
        visibility=_hourly_map(payload, "visibility", index),
        snow_depth=_hourly_map(payload, "snow_depth", index, SnowDepth.from_feet),
        freezing_level_height=_hourly_map(
            payload, "freezing_level_height", index, Elevation.from_feet
        ),
    )


# -- daily aggregates --------------------------------------------------------


def _daily_stat(
    payload: MultiModelPayload,
    variable: str,
    bucket: DayBucket,
    reduce: Callable[[list[float]], float],
    convert: Callable[[float], V],
) -> ModelValues[V]:
    """Reduce each covered model's values at the day's matched hours.

    Rows inside [start, end) whose timestamps did not parse are not part of
    the day and are skipped. An empty day reduces to the aggregator's
    empty-range value. A model with only nulls for the day is left out.
    """
    stats: ModelValues[V] = ModelValues()
    for model in hourly_models(variable):
        window = payload.hourly_slice(variable, model, bucket.start, bucket.end)
        matched = [window[i - bucket.start] for i in bucket.indexes]
        values = [v for v in matched if v is not None]
        if matched and not values:
            continue
        stats[model] = convert(reduce(values))
    return stats


def _local_time(tz: ZoneInfo) -> Callable[[Any], datetime | None]:
    return lambda raw: parse_local_timestamp(raw, tz)


def _daily_forecast(
    payload: MultiModelPayload,
    bucket: DayBucket,
    hours: list[HourlyForecast],
    tz: ZoneInfo,
) -> DailyForecast:
    i = bucket.daily_index
    total_rain = _daily_stat(payload, "rain", bucket, sum_values, Precipitation.from_inches)
    total_showers = _daily_stat(payload, "showers", bucket, sum_values, Precipitation.from_inches)
    return DailyForecast(
        day=bucket.day,
        hourly_forecasts=hours,
        weather=_daily_map(payload, "weather_code", i, _weather),
        snowfall_water_equivalent_sum=_daily_map(
            payload, "snowfall_water_equivalent_sum", i, Precipitation.from_inches
        ),
        sunrise=_daily_map(payload, "sunrise", i, _local_time(tz)),
        sunset=_daily_map(payload, "sunset", i, _local_time(tz)),
        wind_dominant_direction=_daily_map(
            payload, "wind_direction_10m_dominant", i, WindDirection.from_degrees
        ),
        high_temperature=_daily_stat(
            payload, "temperature_2m", bucket, max_value, Temperature.from_fahrenheit
        ),
        low_temperature=_daily_stat(
            payload, "temperature_2m", bucket, min_value, Temperature.from_fahrenheit
        ),
        max_wind_speed=_daily_stat(payload, "wind_speed_10m", bucket, max_value, WindSpeed.from_mph),
        min_wind_speed=_daily_stat(payload, "wind_speed_10m", bucket, min_value, WindSpeed.from_mph),
        max_wind_gusts=_daily_stat(payload, "wind_gusts_10m", bucket, max_value, WindSpeed.from_mph),
        min_wind_gusts=_daily_stat(payload, "wind_gusts_10m", bucket, min_value, WindSpeed.from_mph),
        highest_freezing_level=_daily_stat(
            payload, "freezing_level_height", bucket, max_value, Elevation.from_feet
        ),
        lowest_freezing_level=_daily_stat(
            payload, "freezing_level_height", bucket, min_value, Elevation.from_feet
        ),
        total_precipitation=_daily_stat(
            payload, "precipitation", bucket, sum_values, Precipitation.from_inches
        ),
        total_rain=total_rain,
        total_showers=total_showers,
        total_snowfall=_daily_stat(payload, "snowfall", bucket, sum_values, Precipitation.from_inches),
        total_liquid_precipitation=liquid_precipitation(total_rain, total_showers),
    )
