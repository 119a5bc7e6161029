"""Coordinate to IANA timezone lookup.

Building the finder loads the boundary index into memory, so a resolver is
built once at startup and handed to whatever needs it.
"""

import logging
import threading

from timezonefinder import TimezoneFinder

from summit.errors import InvalidTimezone

logger = logging.getLogger(__name__)


class TimezoneResolver:
    def __init__(self, finder: TimezoneFinder | None = None):
        self._finder = finder if finder is not None else TimezoneFinder()
        self._lock = threading.Lock()

    def get_timezone(self, latitude: float, longitude: float) -> str:
        """IANA name such as "America/Denver" for the given point."""
        with self._lock:
            name = self._finder.timezone_at(lng=longitude, lat=latitude)
        if not name:
            raise InvalidTimezone(
                "",
                f"could not determine timezone for lat={latitude:.6f}, lon={longitude:.6f}",
            )
        logger.debug("Resolved timezone %s for (%.6f, %.6f)", name, latitude, longitude)
        return name
