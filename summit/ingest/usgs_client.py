"""USGS Elevation Point Query Service client.

Docs: https://epqs.nationalmap.gov/v1/docs
"""

from summit.ingest.http import JsonClient

USGS_EPQS_BASE_URL = "https://epqs.nationalmap.gov"


class UsgsElevationClient(JsonClient):
    source = "USGS elevation"

    def __init__(self, base_url: str = USGS_EPQS_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def get_elevation_point(self, latitude: float, longitude: float) -> dict:
        """Elevation in feet at a point. The result's ``value`` holds the number."""
        params = {
            "x": f"{longitude:.6f}",
            "y": f"{latitude:.6f}",
            "units": "Feet",
        }
        return self._get("/v1/json", params)
