"""Wire provider clients and services from an AppConfig."""

from dataclasses import dataclass

from summit.avalanche.service import AvalancheService
from summit.config.schema import AppConfig
from summit.ingest.nac_client import NacClient
from summit.ingest.nominatim_client import NominatimClient
from summit.ingest.nws_client import NwsClient
from summit.ingest.openmeteo_client import OpenMeteoClient
from summit.ingest.usgs_client import UsgsElevationClient
from summit.location.service import LocationService
from summit.timezone import TimezoneResolver
from summit.weather.service import WeatherService


@dataclass
class Services:
    location: LocationService
    weather: WeatherService
    avalanche: AvalancheService


def build_services(
    config: AppConfig, timezones: TimezoneResolver | None = None
) -> Services:
    providers = config.providers
    http = {
        "user_agent": providers.user_agent,
        "timeout": providers.timeout,
        "max_retries": providers.max_retries,
        "retry_base_delay": providers.retry_base_delay,
    }

    location = LocationService(
        elevation_provider=UsgsElevationClient(providers.usgs_url, **http),
        geocode_provider=NominatimClient(providers.nominatim_url, **http),
    )
    weather = WeatherService(
        forecast_provider=OpenMeteoClient(providers.open_meteo_url, **http),
        timezones=timezones if timezones is not None else TimezoneResolver(),
        discussion_provider=NwsClient(providers.nws_url, **http),
        forecast_days=config.forecast.forecast_days,
        primary_model=str(config.forecast.primary_model),
    )
    avalanche = AvalancheService(NacClient(providers.nac_url, **http))
    return Services(location=location, weather=weather, avalanche=avalanche)
