"""Open-Meteo multi-model forecast API client.

Docs: https://open-meteo.com/en/docs
"""

import logging

from summit.ingest.http import JsonClient
from summit.weather.coverage import ALL_MODELS, DAILY_COVERAGE, HOURLY_COVERAGE

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"


class OpenMeteoClient(JsonClient):
    source = "Open-Meteo"

    def __init__(self, base_url: str = OPEN_METEO_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        elevation_meters: float,
        forecast_days: int,
        timezone: str,
    ) -> dict:
        """Fetch hourly and daily series for every model, in imperial units.

        Timestamps come back local-naive in ``timezone``.
        """
        params = {
            "latitude": f"{latitude:.6f}",
            "longitude": f"{longitude:.6f}",
            "elevation": f"{elevation_meters:.1f}",
            "hourly": ",".join(HOURLY_COVERAGE),
            "daily": ",".join(DAILY_COVERAGE),
            "models": ",".join(ALL_MODELS),
            "timezone": timezone,
            "forecast_days": str(forecast_days),
            "timeformat": "iso8601",
            "wind_speed_unit": "mph",
            "temperature_unit": "fahrenheit",
            "precipitation_unit": "inch",
        }
        logger.debug(
            "Fetching Open-Meteo forecast lat=%.4f lon=%.4f days=%d tz=%s",
            latitude, longitude, forecast_days, timezone,
        )
        return self._get("/v1/forecast", params)
