"""Provider-agnostic avalanche forecast models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class DangerLevel(IntEnum):
    """North American Avalanche Danger Scale."""

    NO_RATING = 0
    LOW = 1
    MODERATE = 2
    CONSIDERABLE = 3
    HIGH = 4
    EXTREME = 5

    @property
    def label(self) -> str:
        return _DANGER_LABELS[self]


_DANGER_LABELS = {
    DangerLevel.NO_RATING: "No Rating",
    DangerLevel.LOW: "Low",
    DangerLevel.MODERATE: "Moderate",
    DangerLevel.CONSIDERABLE: "Considerable",
    DangerLevel.HIGH: "High",
    DangerLevel.EXTREME: "Extreme",
}


def danger_level(value: int) -> DangerLevel | int:
    """Coerce a raw danger value, keeping out-of-scale values as plain ints."""
    try:
        return DangerLevel(value)
    except ValueError:
        return value


def danger_label(value: int) -> str:
    if value in _DANGER_LABELS:
        return _DANGER_LABELS[DangerLevel(value)]
    return f"Unknown ({value})"


class Likelihood(IntEnum):
    UNKNOWN = 0
    UNLIKELY = 1
    POSSIBLE = 2
    LIKELY = 3
    VERY_LIKELY = 4
    ALMOST_CERTAIN = 5

    @property
    def label(self) -> str:
        if self is Likelihood.UNKNOWN:
            return "Unknown (0)"
        return self.name.replace("_", " ").title()


_LIKELIHOOD_KEYS = {
    "unlikely": Likelihood.UNLIKELY,
    "possible": Likelihood.POSSIBLE,
    "likely": Likelihood.LIKELY,
    "verylikely": Likelihood.VERY_LIKELY,
    "almostcertain": Likelihood.ALMOST_CERTAIN,
}


def parse_likelihood(value: str | None) -> Likelihood:
    """Normalize likelihood strings across centers.

    Accepts camelCase ("veryLikely"), spaced ("Very Likely") and snake_case
    ("very_likely") spellings. Anything else is Likelihood.UNKNOWN.
    """
    if not value:
        return Likelihood.UNKNOWN
    key = value.strip().lower().replace(" ", "").replace("_", "")
    return _LIKELIHOOD_KEYS.get(key, Likelihood.UNKNOWN)


@dataclass(frozen=True)
class ForecastZone:
    id: int
    name: str
    state: str = ""
    url: str = ""


@dataclass(frozen=True)
class AvalancheCenter:
    id: str  # e.g. "CAIC", "BTAC"
    name: str
    url: str = ""
    city: str = ""
    state: str = ""


@dataclass(frozen=True)
class DangerRating:
    valid_day: str  # "current" or "tomorrow"
    lower: DangerLevel | int
    middle: DangerLevel | int
    upper: DangerLevel | int


@dataclass(frozen=True)
class AvalancheSize:
    min: float = 0.0
    max: float = 0.0


@dataclass(frozen=True)
class AvalancheProblem:
    name: str
    rank: int  # 1 = primary problem
    likelihood: Likelihood
    discussion: str  # HTML
    location: list[str]  # aspect/elevation pairs, e.g. "north upper"
    size: AvalancheSize
    media_url: str | None = None


@dataclass(frozen=True)
class AvalancheForecast:
    zone: ForecastZone
    center: AvalancheCenter
    published_time: datetime | None
    expires_time: datetime | None
    author: str
    bottom_line: str  # HTML
    hazard_discussion: str  # HTML
    forecast_url: str
    danger_ratings: list[DangerRating] = field(default_factory=list)
    problems: list[AvalancheProblem] = field(default_factory=list)
