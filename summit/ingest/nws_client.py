"""NOAA/NWS API client for point metadata and area forecast discussions.

Docs: https://www.weather.gov/documentation/services-web-api
"""

from summit.ingest.http import JsonClient

NWS_BASE_URL = "https://api.weather.gov"


class NwsClient(JsonClient):
    source = "NWS"

    def __init__(self, base_url: str = NWS_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def get_point(self, latitude: float, longitude: float) -> dict:
        """Gridpoint metadata; ``properties.cwa`` is the issuing forecast office."""
        return self._get(
            f"/points/{latitude:.4f},{longitude:.4f}",
            accept="application/geo+json",
        )

    def get_latest_afd(self, office_id: str) -> dict:
        """Latest Area Forecast Discussion product issued by ``office_id``."""
        return self._get(f"/products/types/AFD/locations/{office_id}/latest")
