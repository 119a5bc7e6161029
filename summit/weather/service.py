"""Weather service: timezone lookup, provider fetch and forecast assembly."""

import logging
from typing import Protocol

from summit.errors import MalformedProviderResponse
from summit.models.forecast import Forecast
from summit.models.location import Coordinates, ForecastPoint
from summit.weather.assembler import assemble_forecast

logger = logging.getLogger(__name__)


class ForecastProvider(Protocol):
    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        elevation_meters: float,
        forecast_days: int,
        timezone: str,
    ) -> dict: ...


class DiscussionProvider(Protocol):
    def get_point(self, latitude: float, longitude: float) -> dict: ...

    def get_latest_afd(self, office_id: str) -> dict: ...


class TimezoneLookup(Protocol):
    def get_timezone(self, latitude: float, longitude: float) -> str: ...


class WeatherService:
    def __init__(
        self,
        forecast_provider: ForecastProvider,
        timezones: TimezoneLookup,
        discussion_provider: DiscussionProvider | None = None,
        forecast_days: int = 16,
        primary_model: str = "gfs_seamless",
    ):
        self.forecast_provider = forecast_provider
        self.timezones = timezones
        self.discussion_provider = discussion_provider
        self.forecast_days = forecast_days
        self.primary_model = primary_model

    def get_forecast(self, point: ForecastPoint, forecast_days: int | None = None) -> Forecast:
        days = forecast_days or self.forecast_days
        lat = point.coordinates.latitude
        lon = point.coordinates.longitude

        try:
            tz = self.timezones.get_timezone(lat, lon)
        except Exception:
            logger.exception("Failed to determine timezone for (%.6f, %.6f)", lat, lon)
            raise
        logger.debug("Timezone for (%.6f, %.6f) is %s", lat, lon, tz)

        try:
            raw = self.forecast_provider.get_forecast(
                lat, lon, point.elevation.meters, days, tz
            )
        except Exception:
            logger.exception("Failed to fetch forecast for (%.6f, %.6f)", lat, lon)
            raise

        return assemble_forecast(raw, tz, point, self.primary_model)

    def get_forecast_discussion(self, coordinates: Coordinates) -> str:
        """Latest NWS Area Forecast Discussion text for the point's office."""
        if self.discussion_provider is None:
            raise RuntimeError("no forecast discussion provider configured")

        lat = coordinates.latitude
        lon = coordinates.longitude
        nws_point = self.discussion_provider.get_point(lat, lon)
        office_id = (nws_point.get("properties") or {}).get("cwa")
        if not office_id:
            raise MalformedProviderResponse(
                f"NWS point ({lat:.4f}, {lon:.4f}) has no forecast office"
            )

        afd = self.discussion_provider.get_latest_afd(office_id)
        text = afd.get("productText")
        if text is None:
            raise MalformedProviderResponse(f"AFD for {office_id} has no productText")
        logger.debug("Fetched AFD from %s (%d chars)", office_id, len(text))
        return text
