"""Forecast zone polygons and point-in-polygon lookup.

GeoJSON coordinates are ``[longitude, latitude]``. MultiPolygon features are
flattened into one ring list at parse time, and each ring is tested on its
own. Interior rings (holes) are therefore treated like outer boundaries: a
point inside a hole is reported as contained.
"""

from dataclasses import dataclass, field
from typing import Any

from summit.errors import MalformedProviderResponse

Ring = list[tuple[float, float]]


@dataclass(frozen=True)
class ZoneFeature:
    id: int
    name: str
    center_id: str
    link: str = ""
    danger_level: int | None = None
    off_season: bool = False
    rings: list[Ring] = field(default_factory=list)


def parse_geometry(geometry: dict[str, Any]) -> list[Ring]:
    geometry_type = geometry.get("type")
    coordinates = geometry.get("coordinates") or []
    if geometry_type == "Polygon":
        polygons = [coordinates]
    elif geometry_type == "MultiPolygon":
        polygons = coordinates
    else:
        raise MalformedProviderResponse(f"unsupported geometry type: {geometry_type}")

    rings: list[Ring] = []
    try:
        for polygon in polygons:
            for ring in polygon:
                rings.append([(float(p[0]), float(p[1])) for p in ring])
    except (TypeError, IndexError, ValueError) as e:
        raise MalformedProviderResponse(
            f"invalid {geometry_type} coordinates: {e}"
        ) from e
    return rings


def parse_map_layer(raw: dict[str, Any]) -> list[ZoneFeature]:
    """Parse a GeoJSON FeatureCollection of forecast zones, keeping order."""
    zones: list[ZoneFeature] = []
    for feature in raw.get("features", []):
        props = feature.get("properties") or {}
        zones.append(
            ZoneFeature(
                id=int(feature.get("id", 0)),
                name=props.get("name", ""),
                center_id=props.get("center_id", ""),
                link=props.get("link", "") or "",
                danger_level=props.get("danger_level"),
                off_season=bool(props.get("off_season", False)),
                rings=parse_geometry(feature.get("geometry") or {}),
            )
        )
    return zones


def point_in_ring(lat: float, lon: float, ring: Ring) -> bool:
    """Ray-casting containment test.

    For each edge (p[i], p[i-1]) the flag toggles when the horizontal ray at
    ``lat`` crosses the edge strictly between its latitudes and ``lon`` lies
    left of the crossing. Points exactly on an edge or vertex may fall either
    way.
    """
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > lat) != (yj > lat) and lon < (xj - xi) * (lat - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def find_zone(lat: float, lon: float, zones: list[ZoneFeature]) -> ZoneFeature | None:
    """First zone, in collection order, with a ring containing the point."""
    for zone in zones:
        for ring in zone.rings:
            if point_in_ring(lat, lon, ring):
                return zone
    return None
