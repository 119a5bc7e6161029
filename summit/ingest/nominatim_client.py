"""OpenStreetMap Nominatim reverse-geocoding client.

Docs: https://nominatim.org/release-docs/develop/api/Reverse/
"""

from summit.ingest.http import JsonClient

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"


class NominatimClient(JsonClient):
    source = "Nominatim"

    def __init__(self, base_url: str = NOMINATIM_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def reverse(self, latitude: float, longitude: float) -> dict:
        params = {
            "lat": f"{latitude:.6f}",
            "lon": f"{longitude:.6f}",
            "format": "json",
        }
        return self._get("/reverse", params)
