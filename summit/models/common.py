"""Common types and helpers shared across models."""

import dataclasses
import json
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any


class WeatherModel(StrEnum):
    GFS_SEAMLESS = "gfs_seamless"
    GEM_SEAMLESS = "gem_seamless"
    ECMWF_IFS = "ecmwf_ifs"
    NCEP_NBM_CONUS = "ncep_nbm_conus"
    GFS_GRAPHCAST025 = "gfs_graphcast025"
    ECMWF_AIFS025_SINGLE = "ecmwf_aifs025_single"
    NCEP_NAM_CONUS = "ncep_nam_conus"


def utc_now() -> datetime:
    return datetime.now(UTC)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, indent: int | None = 2) -> str:
    """Serialize a domain dataclass tree (or plain data) to JSON."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj, default=_json_default, indent=indent)
