"""Tests for LocationService concurrent elevation and geocode lookups."""

from unittest.mock import MagicMock

import httpx
import pytest

from summit.errors import MalformedProviderResponse, MultipleSourceFailure, SourceFetchError
from summit.ingest.nominatim_client import NominatimClient
from summit.ingest.usgs_client import UsgsElevationClient
from summit.location.service import LocationService, translate_elevation, translate_location
from summit.models.location import Coordinates

ELEVATION = {
    "location": {"x": -107.6584, "y": 39.11539, "spatialReference": {"wkid": 4326}},
    "locationId": 0,
    "value": "8755.12",
    "rasterId": 75,
    "resolution": 1,
}

REVERSE = {
    "place_id": 123,
    "name": "McClure Pass",
    "display_name": "McClure Pass, Gunnison County, Colorado, United States",
    "address": {
        "county": "Gunnison County",
        "state": "Colorado",
        "country": "United States",
        "country_code": "us",
    },
}


@pytest.fixture
def elevation() -> MagicMock:
    client = MagicMock(spec=UsgsElevationClient)
    client.get_elevation_point.return_value = ELEVATION
    return client


@pytest.fixture
def geocode() -> MagicMock:
    client = MagicMock(spec=NominatimClient)
    client.reverse.return_value = REVERSE
    return client


class TestGetForecastPoint:
    def test_joins_both_sources(self, elevation, geocode):
        service = LocationService(elevation, geocode)

        point = service.get_forecast_point(Coordinates(39.11539, -107.6584))

        elevation.get_elevation_point.assert_called_once_with(39.11539, -107.6584)
        geocode.reverse.assert_called_once_with(39.11539, -107.6584)
        assert point.coordinates == Coordinates(39.11539, -107.6584)
        assert point.elevation.feet == pytest.approx(8755.12)
        assert point.elevation.meters == pytest.approx(8755.12 * 0.3048)
        assert point.location.name == "McClure Pass"
        assert point.location.state == "Colorado"

    def test_elevation_failure(self, elevation, geocode):
        elevation.get_elevation_point.side_effect = httpx.ConnectError("down")
        service = LocationService(elevation, geocode)

        with pytest.raises(SourceFetchError) as exc_info:
            service.get_forecast_point(Coordinates(39.1, -107.6))
        assert exc_info.value.source == "elevation"
        assert str(exc_info.value).startswith("failed to get elevation")

    def test_location_failure(self, elevation, geocode):
        geocode.reverse.side_effect = httpx.ConnectError("down")
        service = LocationService(elevation, geocode)

        with pytest.raises(SourceFetchError) as exc_info:
            service.get_forecast_point(Coordinates(39.1, -107.6))
        assert exc_info.value.source == "location"

    def test_both_fail(self, elevation, geocode):
        elevation.get_elevation_point.side_effect = httpx.ConnectError("usgs down")
        geocode.reverse.side_effect = httpx.ConnectError("osm down")
        service = LocationService(elevation, geocode)

        with pytest.raises(MultipleSourceFailure) as exc_info:
            service.get_forecast_point(Coordinates(39.1, -107.6))
        assert [e.source for e in exc_info.value.errors] == ["elevation", "location"]
        assert "usgs down" in str(exc_info.value)
        assert "osm down" in str(exc_info.value)


class TestTranslate:
    def test_elevation_numeric(self):
        assert translate_elevation({"value": 1000}).feet == 1000.0

    @pytest.mark.parametrize("raw", [None, {}, {"value": None}, {"value": "n/a"}])
    def test_elevation_malformed(self, raw):
        with pytest.raises(MalformedProviderResponse):
            translate_elevation(raw)

    def test_location_falls_back_to_display_name(self):
        info = translate_location({"name": "", "display_name": "Somewhere, CO"})
        assert info.name == "Somewhere, CO"
        assert info.county == ""
