"""Error types raised by forecast assembly, zone resolution and upstream fetches."""


class SummitError(Exception):
    """Base class for all summit errors."""


class InvalidCoordinates(SummitError, ValueError):
    """Raised when latitude or longitude falls outside its valid range."""


class InvalidTimezone(SummitError):
    """Raised when an IANA timezone name cannot be resolved."""

    def __init__(self, name: str, message: str | None = None):
        super().__init__(message or f"Unknown timezone: {name!r}")
        self.name = name


class MalformedProviderResponse(SummitError):
    """Raised when a provider payload is missing required sections or arrays."""


class NoZoneMatch(SummitError):
    """Raised when a coordinate falls outside every known forecast zone."""

    def __init__(self, latitude: float, longitude: float):
        super().__init__(
            f"No avalanche forecast zone found for coordinates "
            f"({latitude:.6f}, {longitude:.6f})"
        )
        self.latitude = latitude
        self.longitude = longitude


class SourceFetchError(SummitError):
    """Raised when a single upstream source fails."""

    def __init__(self, source: str, cause: Exception):
        super().__init__(f"failed to get {source}: {cause}")
        self.source = source
        self.cause = cause


class MultipleSourceFailure(SummitError):
    """Raised when every concurrent upstream fetch failed."""

    def __init__(self, errors: list[SourceFetchError]):
        joined = "; ".join(f"{e.source}: {e.cause}" for e in errors)
        super().__init__(f"multiple errors: {joined}")
        self.errors = errors
