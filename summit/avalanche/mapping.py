"""Translate a NAC forecast product into an AvalancheForecast."""

import logging
from datetime import UTC, datetime
from typing import Any

from summit.avalanche.geo import ZoneFeature
from summit.errors import MalformedProviderResponse
from summit.models.avalanche import (
    AvalancheCenter,
    AvalancheForecast,
    AvalancheProblem,
    AvalancheSize,
    DangerRating,
    ForecastZone,
    danger_level,
    parse_likelihood,
)

logger = logging.getLogger(__name__)


def map_forecast_response(zone: ZoneFeature, raw: dict[str, Any]) -> AvalancheForecast:
    center = raw.get("avalanche_center") or {}

    zone_state = ""
    zone_url = zone.link
    for fz in raw.get("forecast_zone") or []:
        if fz.get("id") == zone.id:
            zone_state = fz.get("state", "") or ""
            zone_url = fz.get("url") or zone_url
            break

    return AvalancheForecast(
        zone=ForecastZone(id=zone.id, name=zone.name, state=zone_state, url=zone_url),
        center=AvalancheCenter(
            id=center.get("id", ""),
            name=center.get("name", ""),
            url=center.get("url", "") or "",
            city=center.get("city", "") or "",
            state=center.get("state", "") or "",
        ),
        published_time=_parse_timestamp(raw.get("published_time")),
        expires_time=_parse_timestamp(raw.get("expires_time")),
        author=raw.get("author", "") or "",
        bottom_line=raw.get("bottom_line", "") or "",
        hazard_discussion=raw.get("hazard_discussion", "") or "",
        forecast_url=zone.link,
        danger_ratings=map_danger_ratings(raw),
        problems=map_avalanche_problems(raw),
    )


def map_danger_ratings(raw: dict[str, Any]) -> list[DangerRating]:
    return [
        DangerRating(
            valid_day=d.get("valid_day", ""),
            lower=danger_level(_int_field(d.get("lower"), "danger.lower")),
            middle=danger_level(_int_field(d.get("middle"), "danger.middle")),
            upper=danger_level(_int_field(d.get("upper"), "danger.upper")),
        )
        for d in raw.get("danger") or []
    ]


def map_avalanche_problems(raw: dict[str, Any]) -> list[AvalancheProblem]:
    problems = []
    for p in raw.get("forecast_avalanche_problems") or []:
        media = p.get("media") or {}
        problems.append(
            AvalancheProblem(
                name=p.get("name", ""),
                rank=_int_field(p.get("rank"), "problem rank"),
                likelihood=parse_likelihood(p.get("likelihood")),
                discussion=p.get("discussion", "") or "",
                location=list(p.get("location") or []),
                size=parse_size(p.get("size") or []),
                media_url=extract_media_url(media.get("url")),
            )
        )
    return problems


def parse_size(sizes: list[Any]) -> AvalancheSize:
    """Collapse destructive-size strings like ["1", "2.5"] into a min/max."""
    values: list[float] = []
    for s in sizes:
        try:
            values.append(float(s))
        except (TypeError, ValueError):
            logger.debug("Skipping malformed avalanche size %r", s)
    if not values:
        return AvalancheSize()
    return AvalancheSize(min=min(values), max=max(values))


def extract_media_url(value: Any) -> str | None:
    """Resolve the polymorphic media ``url`` field.

    Most centers send an object of size variants (large, medium, original,
    thumbnail) and the original is used. Some send a plain string.
    """
    if isinstance(value, dict):
        return value.get("original") or None
    if isinstance(value, str):
        return value or None
    return None


def _int_field(value: Any, field: str) -> int:
    """Integer field where a missing value counts as 0."""
    try:
        return int(value or 0)
    except (TypeError, ValueError) as e:
        raise MalformedProviderResponse(f"non-numeric {field}: {value!r}") from e


def _parse_timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value)
    except (ValueError, TypeError):
        logger.warning("Unparseable forecast timestamp %r", value)
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
