"""National Avalanche Center (avalanche.org) public API client."""

import logging

from summit.ingest.http import JsonClient

logger = logging.getLogger(__name__)

NAC_BASE_URL = "https://api.avalanche.org"


class NacClient(JsonClient):
    source = "NAC"

    def __init__(self, base_url: str = NAC_BASE_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def get_map_layer(self) -> dict:
        """GeoJSON FeatureCollection of every forecast zone polygon."""
        data = self._get("/v2/public/products/map-layer")
        logger.debug(
            "Fetched NAC map layer with %d features", len(data.get("features", []))
        )
        return data

    def get_forecast(self, center_id: str, zone_id: int) -> dict:
        params = {
            "type": "forecast",
            "center_id": center_id,
            "zone_id": str(zone_id),
        }
        logger.debug("Fetching NAC forecast center=%s zone=%d", center_id, zone_id)
        return self._get("/v2/public/product", params)
