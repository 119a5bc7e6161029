"""Avalanche forecast lookup: coordinate -> zone -> center forecast."""

import logging
from typing import Protocol

from summit.avalanche.geo import ZoneFeature, find_zone, parse_map_layer
from summit.avalanche.mapping import map_forecast_response
from summit.errors import NoZoneMatch
from summit.models.avalanche import AvalancheForecast
from summit.models.location import Coordinates

logger = logging.getLogger(__name__)


class AvalancheProvider(Protocol):
    def get_map_layer(self) -> dict: ...

    def get_forecast(self, center_id: str, zone_id: int) -> dict: ...


class AvalancheService:
    def __init__(self, provider: AvalancheProvider):
        self.provider = provider
        self._zones: list[ZoneFeature] | None = None

    def zones(self) -> list[ZoneFeature]:
        """Parsed zone polygons, fetched once and kept until clear_cache()."""
        if self._zones is None:
            self._zones = parse_map_layer(self.provider.get_map_layer())
            logger.debug("Loaded %d avalanche forecast zones", len(self._zones))
        return self._zones

    def clear_cache(self) -> None:
        self._zones = None

    def find_zone(self, coordinates: Coordinates) -> ZoneFeature:
        zone = find_zone(coordinates.latitude, coordinates.longitude, self.zones())
        if zone is None:
            logger.warning(
                "No avalanche forecast zone for (%.6f, %.6f)",
                coordinates.latitude, coordinates.longitude,
            )
            raise NoZoneMatch(coordinates.latitude, coordinates.longitude)
        return zone

    def get_forecast(self, coordinates: Coordinates) -> AvalancheForecast:
        """Forecast for the zone enclosing ``coordinates``.

        Raises NoZoneMatch when the point is outside every zone. Upstream
        errors from the provider propagate.
        """
        zone = self.find_zone(coordinates)
        logger.debug(
            "Point (%.6f, %.6f) is in zone %d %s (center %s)",
            coordinates.latitude, coordinates.longitude,
            zone.id, zone.name, zone.center_id,
        )

        try:
            raw = self.provider.get_forecast(zone.center_id, zone.id)
        except Exception:
            logger.exception(
                "Failed to fetch avalanche forecast center=%s zone=%d",
                zone.center_id, zone.id,
            )
            raise

        forecast = map_forecast_response(zone, raw)
        logger.debug(
            "Mapped avalanche forecast %s: %d danger ratings, %d problems",
            forecast.zone.name, len(forecast.danger_ratings), len(forecast.problems),
        )
        return forecast
