"""Resolve a coordinate into a ForecastPoint: elevation plus place metadata."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

from summit.errors import (
    MalformedProviderResponse,
    MultipleSourceFailure,
    SourceFetchError,
)
from summit.models.location import Coordinates, ForecastPoint, LocationInfo
from summit.models.units import Elevation

logger = logging.getLogger(__name__)


class ElevationProvider(Protocol):
    def get_elevation_point(self, latitude: float, longitude: float) -> dict: ...


class ReverseGeocodeProvider(Protocol):
    def reverse(self, latitude: float, longitude: float) -> dict: ...


class LocationService:
    def __init__(
        self,
        elevation_provider: ElevationProvider,
        geocode_provider: ReverseGeocodeProvider,
    ):
        self.elevation = elevation_provider
        self.geocode = geocode_provider

    def get_forecast_point(self, coordinates: Coordinates) -> ForecastPoint:
        """Fetch elevation and reverse-geocode concurrently and join them.

        If both fetches fail, MultipleSourceFailure carries both errors. If one
        fails, its SourceFetchError is raised and the other result dropped.
        """
        lat, lon = coordinates.latitude, coordinates.longitude
        logger.debug("Resolving forecast point lat=%.6f lon=%.6f", lat, lon)

        with ThreadPoolExecutor(max_workers=2) as executor:
            elevation_future = executor.submit(self.elevation.get_elevation_point, lat, lon)
            location_future = executor.submit(self.geocode.reverse, lat, lon)
            elevation_raw, elevation_err = _outcome(elevation_future, "elevation")
            location_raw, location_err = _outcome(location_future, "location")

        if elevation_err is not None and location_err is not None:
            logger.error(
                "Elevation and location lookups both failed for (%.6f, %.6f): %s; %s",
                lat, lon, elevation_err.cause, location_err.cause,
            )
            raise MultipleSourceFailure([elevation_err, location_err])
        for err in (elevation_err, location_err):
            if err is not None:
                logger.error(
                    "%s lookup failed for (%.6f, %.6f): %s", err.source, lat, lon, err.cause
                )
                raise err from err.cause

        point = ForecastPoint(
            coordinates=coordinates,
            elevation=translate_elevation(elevation_raw),
            location=translate_location(location_raw),
        )
        logger.debug("Resolved forecast point %s", point.location.name)
        return point


def _outcome(future, source: str) -> tuple[Any, SourceFetchError | None]:
    try:
        return future.result(), None
    except Exception as e:
        return None, SourceFetchError(source, e)


def translate_elevation(raw: dict | None) -> Elevation:
    if not raw or raw.get("value") is None:
        raise MalformedProviderResponse("elevation response has no value")
    try:
        feet = float(raw["value"])
    except (TypeError, ValueError) as e:
        raise MalformedProviderResponse(f"non-numeric elevation: {raw['value']!r}") from e
    return Elevation.from_feet(feet)


def translate_location(raw: dict | None) -> LocationInfo:
    if raw is None:
        raise MalformedProviderResponse("reverse geocode response is empty")
    address = raw.get("address") or {}
    return LocationInfo(
        name=raw.get("name") or raw.get("display_name", ""),
        county=address.get("county", ""),
        state=address.get("state", ""),
        country=address.get("country", ""),
        country_code=address.get("country_code", ""),
    )
