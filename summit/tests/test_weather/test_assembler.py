"""Tests for assembling a multi-model response into a Forecast."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from summit.errors import InvalidTimezone, MalformedProviderResponse
from summit.weather.aggregate import EMPTY_RANGE_SENTINEL
from summit.weather.assembler import _plus_one_hour, assemble_forecast
from summit.weather.coverage import ALL_MODELS

DENVER = ZoneInfo("America/Denver")
NOW = datetime(2025, 1, 15, 5, 30, tzinfo=DENVER)


def _hours(day: str, count: int = 24) -> list[str]:
    return [f"{day}T{h:02d}:00" for h in range(count)]


@pytest.fixture
def two_day_raw(make_payload) -> dict:
    """24 hours on the 15th, one hour on the 16th, with a temperature ramp."""
    times = _hours("2025-01-15") + ["2025-01-16T00:00"]
    return make_payload(
        times,
        ["2025-01-15", "2025-01-16"],
        hourly={"temperature_2m_gfs_seamless": [float(i) for i in range(25)]},
    )


def _assemble(raw, forecast_point, now=NOW):
    return assemble_forecast(raw, "America/Denver", forecast_point, "gfs_seamless", now=now)


class TestAssembleForecast:
    def test_envelope(self, two_day_raw, forecast_point):
        forecast = _assemble(two_day_raw, forecast_point)
        assert forecast.timezone == "America/Denver"
        assert forecast.primary_model == "gfs_seamless"
        assert forecast.forecast_point == forecast_point
        assert forecast.timestamp.tzinfo is not None

    def test_day_partition(self, two_day_raw, forecast_point):
        forecast = _assemble(two_day_raw, forecast_point)

        assert [d.day for d in forecast.daily_forecasts] == [date(2025, 1, 15), date(2025, 1, 16)]
        first, second = forecast.daily_forecasts
        assert len(first.hourly_forecasts) == 24
        assert len(second.hourly_forecasts) == 1
        assert second.hourly_forecasts[0].start == datetime(2025, 1, 16, 0, 0, tzinfo=DENVER)

    def test_daily_stats_use_each_days_own_hours(self, two_day_raw, forecast_point):
        first, second = _assemble(two_day_raw, forecast_point).daily_forecasts

        assert first.high_temperature["gfs_seamless"].fahrenheit == 23.0
        assert first.low_temperature["gfs_seamless"].fahrenheit == 0.0
        assert second.high_temperature["gfs_seamless"].fahrenheit == 24.0
        assert second.low_temperature["gfs_seamless"].fahrenheit == 24.0
        assert first.total_snowfall["ecmwf_ifs"].inches == pytest.approx(12.0)
        assert second.total_snowfall["ecmwf_ifs"].inches == pytest.approx(0.5)

    def test_current_conditions(self, two_day_raw, forecast_point):
        current = _assemble(two_day_raw, forecast_point).current_conditions

        assert current.temperature["gfs_seamless"].fahrenheit == 5.0
        assert current.temperature["ecmwf_ifs"].fahrenheit == 20.0
        assert current.weather["gem_seamless"].code == 71
        assert current.cloud_cover["gfs_seamless"] == pytest.approx(0.8)
        assert current.relative_humidity["ecmwf_ifs"] == pytest.approx(0.9)
        assert "ncep_nbm_conus" not in current.cloud_cover_low
        assert set(current.visibility) == {
            "gfs_seamless", "ecmwf_ifs", "ncep_nbm_conus", "ncep_nam_conus",
        }

    def test_wind_and_gust_coverage(self, two_day_raw, forecast_point):
        current = _assemble(two_day_raw, forecast_point).current_conditions

        assert set(current.wind) == set(ALL_MODELS)
        assert current.wind["gfs_seamless"].gusts.mph == 20.0
        assert current.wind["gfs_seamless"].direction.cardinal == "W"
        assert current.wind["gfs_graphcast025"].gusts is None
        assert current.wind["ecmwf_aifs025_single"].gusts is None

    def test_hourly_slot(self, two_day_raw, forecast_point):
        hour = _assemble(two_day_raw, forecast_point).daily_forecasts[0].hourly_forecasts[6]

        assert hour.start == datetime(2025, 1, 15, 6, 0, tzinfo=DENVER)
        assert hour.end == datetime(2025, 1, 15, 7, 0, tzinfo=DENVER)
        assert hour.temperature["gfs_seamless"].fahrenheit == 6.0
        assert hour.is_day["gfs_seamless"] is True
        assert hour.precipitation_probability["gfs_seamless"] == pytest.approx(0.5)
        assert "gfs_graphcast025" not in hour.apparent_temperature
        assert set(hour.freezing_level_height) == {"gfs_seamless"}
        assert hour.freezing_level_height["gfs_seamless"].meters == pytest.approx(2438.4)
        assert hour.snow_depth["ecmwf_ifs"].feet == 3.0
        assert hour.liquid_precipitation["gfs_seamless"].inches == 0.0

    def test_daily_values(self, two_day_raw, forecast_point):
        first = _assemble(two_day_raw, forecast_point).daily_forecasts[0]

        assert first.weather["gfs_seamless"].code == 73
        assert first.sunrise["gfs_seamless"] == datetime(2025, 1, 15, 7, 15, tzinfo=DENVER)
        assert first.sunset["ecmwf_ifs"] == datetime(2025, 1, 15, 17, 0, tzinfo=DENVER)
        assert first.wind_dominant_direction["gfs_seamless"].cardinal == "WSW"
        assert "gfs_graphcast025" not in first.wind_dominant_direction
        assert first.snowfall_water_equivalent_sum["ecmwf_ifs"].inches == 0.4
        assert first.max_wind_gusts["gfs_seamless"].mph == 20.0
        assert "gfs_graphcast025" not in first.max_wind_gusts
        assert first.highest_freezing_level["gfs_seamless"].feet == 8000.0

    def test_liquid_precipitation_totals(self, make_payload, forecast_point):
        raw = make_payload(
            _hours("2025-01-15", 2),
            ["2025-01-15"],
            hourly={
                "rain_gfs_seamless": [0.1, 0.2],
                "showers_gfs_seamless": [0.0, 0.05],
            },
        )
        day = _assemble(raw, forecast_point).daily_forecasts[0]
        assert day.total_rain["gfs_seamless"].inches == pytest.approx(0.3)
        assert day.total_showers["gfs_seamless"].inches == pytest.approx(0.05)
        assert day.total_liquid_precipitation["gfs_seamless"].inches == pytest.approx(0.35)

    def test_null_values_drop_the_model(self, make_payload, forecast_point):
        raw = make_payload(
            _hours("2025-01-15", 3),
            ["2025-01-15"],
            hourly={
                "temperature_2m_gem_seamless": [None, None, None],
                "temperature_2m_ecmwf_ifs": [10.0, None, 30.0],
            },
        )
        forecast = _assemble(raw, forecast_point, now=datetime(2025, 1, 15, 1, 0, tzinfo=DENVER))

        assert "gem_seamless" not in forecast.current_conditions.temperature
        assert "ecmwf_ifs" not in forecast.current_conditions.temperature
        day = forecast.daily_forecasts[0]
        assert "gem_seamless" not in day.high_temperature
        assert day.high_temperature["ecmwf_ifs"].fahrenheit == 30.0
        assert day.low_temperature["ecmwf_ifs"].fahrenheit == 10.0

    def test_day_without_hours_gets_sentinels(self, make_payload, forecast_point):
        raw = make_payload(_hours("2025-01-15"), ["2025-01-15", "2025-01-16"])
        empty = _assemble(raw, forecast_point).daily_forecasts[1]

        assert empty.hourly_forecasts == []
        assert empty.high_temperature["gfs_seamless"].fahrenheit == EMPTY_RANGE_SENTINEL
        assert empty.low_temperature["gfs_seamless"].fahrenheit == EMPTY_RANGE_SENTINEL
        assert empty.total_snowfall["gfs_seamless"].inches == 0.0
        assert empty.weather["gfs_seamless"].code == 73

    def test_invalid_timezone(self, two_day_raw, forecast_point):
        with pytest.raises(InvalidTimezone):
            assemble_forecast(two_day_raw, "", forecast_point, "gfs_seamless")
        with pytest.raises(InvalidTimezone):
            assemble_forecast(two_day_raw, "Not/AZone", forecast_point, "gfs_seamless")

    def test_missing_series(self, two_day_raw, forecast_point):
        del two_day_raw["hourly"]["wind_speed_10m_gfs_seamless"]
        with pytest.raises(MalformedProviderResponse):
            _assemble(two_day_raw, forecast_point)

    def test_missing_daily_section(self, two_day_raw, forecast_point):
        del two_day_raw["daily"]
        with pytest.raises(MalformedProviderResponse):
            _assemble(two_day_raw, forecast_point)

    def test_unparseable_row_is_left_out_of_daily_stats(self, make_payload, forecast_point):
        raw = make_payload(
            ["2025-01-15T00:00", "garbage", "2025-01-15T02:00"],
            ["2025-01-15"],
            hourly={"temperature_2m_gfs_seamless": [0.0, 100.0, 2.0]},
        )
        day = _assemble(raw, forecast_point).daily_forecasts[0]

        assert len(day.hourly_forecasts) == 2
        assert day.high_temperature["gfs_seamless"].fahrenheit == 2.0
        assert day.low_temperature["gfs_seamless"].fahrenheit == 0.0
        assert day.total_snowfall["gfs_seamless"].inches == pytest.approx(1.0)

    def test_repeated_hour_at_fall_back(self, make_payload, forecast_point):
        # 01:00 occurs twice on 2025-11-02 in Denver, MDT then MST.
        hours = _hours("2025-11-02")
        raw = make_payload(hours[:2] + ["2025-11-02T01:00"] + hours[2:], ["2025-11-02"])
        now = datetime(2025, 11, 2, 12, 0, tzinfo=DENVER)
        day = _assemble(raw, forecast_point, now=now).daily_forecasts[0]

        assert len(day.hourly_forecasts) == 25
        first, second = day.hourly_forecasts[1], day.hourly_forecasts[2]
        assert first.start.astimezone(UTC) == datetime(2025, 11, 2, 7, 0, tzinfo=UTC)
        assert second.start.astimezone(UTC) == datetime(2025, 11, 2, 8, 0, tzinfo=UTC)
        assert first.end.astimezone(UTC) == second.start.astimezone(UTC)
        assert second.end.astimezone(UTC) == datetime(2025, 11, 2, 9, 0, tzinfo=UTC)


class TestPlusOneHour:
    def test_regular_hour(self):
        start = datetime(2025, 1, 15, 6, 0, tzinfo=DENVER)
        assert _plus_one_hour(start) == datetime(2025, 1, 15, 7, 0, tzinfo=DENVER)

    def test_spring_forward(self):
        start = datetime(2025, 3, 9, 1, 0, tzinfo=DENVER)
        end = _plus_one_hour(start)
        assert end.hour == 3
        assert (end.astimezone(UTC) - start.astimezone(UTC)).total_seconds() == 3600
