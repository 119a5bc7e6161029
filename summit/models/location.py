"""Location models: coordinates, place metadata and the resolved forecast point."""

from dataclasses import dataclass

from summit.errors import InvalidCoordinates
from summit.models.units import Elevation


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise InvalidCoordinates(f"latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise InvalidCoordinates(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class LocationInfo:
    name: str
    county: str = ""
    state: str = ""
    country: str = ""
    country_code: str = ""


@dataclass(frozen=True)
class ForecastPoint:
    coordinates: Coordinates
    elevation: Elevation
    location: LocationInfo
