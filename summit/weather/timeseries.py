"""Time-series alignment: current-hour lookup and per-day hourly bucketing.

Provider timestamps are local-naive ISO strings ("2025-01-15T06:00" hourly,
"2025-01-15" daily) expressed in the timezone the forecast was requested for.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from summit.errors import InvalidTimezone

logger = logging.getLogger(__name__)

HOURLY_FORMAT = "%Y-%m-%dT%H:%M"
DAILY_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DayBucket:
    """Hourly indices belonging to one daily entry.

    ``start``/``end`` form the half-open range [start, end) spanning the first
    and last matched hour. ``indexes`` lists the matched hours themselves.
    """

    day: date
    daily_index: int
    start: int
    end: int
    indexes: tuple[int, ...]

    @property
    def is_empty(self) -> bool:
        return not self.indexes


def load_timezone(name: str) -> ZoneInfo:
    if not name:
        raise InvalidTimezone(name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezone(name) from e


def parse_local_timestamp(value: str, tz: ZoneInfo) -> datetime | None:
    try:
        return datetime.strptime(value, HOURLY_FORMAT).replace(tzinfo=tz)
    except (ValueError, TypeError):
        return None


def parse_local_series(values: list[str], tz: ZoneInfo) -> list[datetime | None]:
    """Parse hourly timestamps, placing repeated wall-clock hours after DST ends.

    A local time that would not move past the previous parsed instant is given
    fold=1 when that resolves it to the later of its two instants.
    """
    parsed: list[datetime | None] = []
    previous: datetime | None = None
    for raw in values:
        ts = parse_local_timestamp(raw, tz)
        if ts is not None and previous is not None and ts.timestamp() <= previous.timestamp():
            later = ts.replace(fold=1)
            if later.timestamp() > previous.timestamp():
                ts = later
        parsed.append(ts)
        if ts is not None:
            previous = ts
    return parsed


def parse_local_date(value: str) -> date | None:
    try:
        return datetime.strptime(value, DAILY_FORMAT).date()
    except (ValueError, TypeError):
        return None


def find_current_index(
    hourly_times: list[str], tz: ZoneInfo, now: datetime | None = None
) -> int:
    """Index of the latest hourly timestamp not after ``now``.

    Scanning stops at the first timestamp strictly after ``now``. Unparseable
    entries are skipped. Returns 0 when nothing qualifies.
    """
    if now is None:
        now = datetime.now(tz)
    current = 0
    cutoff = now.timestamp()
    for i, ts in enumerate(parse_local_series(hourly_times, tz)):
        if ts is None:
            continue
        if ts.timestamp() > cutoff:
            break
        current = i
    return current


def bucket_hours_by_day(
    hourly_times: list[str], daily_dates: list[str], tz: ZoneInfo
) -> list[DayBucket]:
    """Partition hourly indices into the provider's daily entries.

    The hourly cursor only moves forward. Hours dated before the day being
    filled are passed over for good; the first hour dated after it closes the
    day. Hourly entries must therefore be in ascending order.
    """
    buckets: list[DayBucket] = []
    cursor = 0
    stamps = parse_local_series(hourly_times, tz)
    n = len(stamps)

    for daily_index, raw_day in enumerate(daily_dates):
        day = parse_local_date(raw_day)
        if day is None:
            logger.warning("Skipping unparseable daily date %r", raw_day)
            continue

        matched: list[int] = []
        while cursor < n:
            ts = stamps[cursor]
            if ts is None:
                cursor += 1
                continue
            hour_day = ts.date()
            if hour_day < day:
                cursor += 1
                continue
            if hour_day > day:
                break
            matched.append(cursor)
            cursor += 1

        if matched:
            start, end = matched[0], matched[-1] + 1
        else:
            start = end = cursor
        buckets.append(
            DayBucket(
                day=day,
                daily_index=daily_index,
                start=start,
                end=end,
                indexes=tuple(matched),
            )
        )

    return buckets
