"""Typed access to a raw Open-Meteo multi-model forecast response."""

from typing import Any

from summit.errors import MalformedProviderResponse
from summit.weather.coverage import series_key


class MultiModelPayload:
    """Wraps the ``hourly`` and ``daily`` sections of a provider response.

    Lookups raise MalformedProviderResponse when a required array is missing or
    too short. A null entry inside an array is returned as None.
    """

    def __init__(self, raw: dict[str, Any]):
        hourly = raw.get("hourly")
        daily = raw.get("daily")
        if not isinstance(hourly, dict) or not isinstance(daily, dict):
            raise MalformedProviderResponse(
                "provider response missing 'hourly' or 'daily' section"
            )
        self._hourly = hourly
        self._daily = daily
        self.hourly_times: list[str] = self._require(hourly, "time", "hourly")
        self.daily_dates: list[str] = self._require(daily, "time", "daily")

    @staticmethod
    def _require(section: dict[str, Any], key: str, name: str) -> list:
        values = section.get(key)
        if not isinstance(values, list):
            raise MalformedProviderResponse(f"missing {name} array '{key}'")
        return values

    def hourly_series(self, variable: str, model: str) -> list:
        return self._require(self._hourly, series_key(variable, model), "hourly")

    def daily_series(self, variable: str, model: str) -> list:
        return self._require(self._daily, series_key(variable, model), "daily")

    def hourly_value(self, variable: str, model: str, index: int) -> Any:
        return _at(self.hourly_series(variable, model), index, variable, model)

    def daily_value(self, variable: str, model: str, index: int) -> Any:
        return _at(self.daily_series(variable, model), index, variable, model)

    def hourly_slice(self, variable: str, model: str, start: int, end: int) -> list:
        series = self.hourly_series(variable, model)
        if end > len(series):
            raise MalformedProviderResponse(
                f"{series_key(variable, model)} has {len(series)} entries, "
                f"need {end}"
            )
        return series[start:end]


def _at(series: list, index: int, variable: str, model: str) -> Any:
    if index >= len(series):
        raise MalformedProviderResponse(
            f"{series_key(variable, model)} has {len(series)} entries, "
            f"index {index} requested"
        )
    return series[index]
