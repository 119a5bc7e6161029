"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from summit.ingest.http import DEFAULT_USER_AGENT
from summit.ingest.nac_client import NAC_BASE_URL
from summit.ingest.nominatim_client import NOMINATIM_BASE_URL
from summit.ingest.nws_client import NWS_BASE_URL
from summit.ingest.openmeteo_client import OPEN_METEO_BASE_URL
from summit.ingest.usgs_client import USGS_EPQS_BASE_URL
from summit.models.common import WeatherModel


class LogConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast_days: int = Field(default=16, ge=1, le=16)
    primary_model: WeatherModel = WeatherModel.GFS_SEAMLESS


class ProvidersConfig(BaseModel):
    model_config = {"extra": "forbid"}

    open_meteo_url: str = OPEN_METEO_BASE_URL
    usgs_url: str = USGS_EPQS_BASE_URL
    nominatim_url: str = NOMINATIM_BASE_URL
    nac_url: str = NAC_BASE_URL
    nws_url: str = NWS_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)


class NamedPoint(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    log: LogConfig = LogConfig()
    forecast: ForecastConfig = ForecastConfig()
    providers: ProvidersConfig = ProvidersConfig()
    points: list[NamedPoint] = []

    def find_point(self, slug: str) -> NamedPoint | None:
        for p in self.points:
            if p.slug == slug:
                return p
        return None
