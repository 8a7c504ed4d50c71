"""Civil calendar → Julian Date conversion.

The Gregorian calendar is applied proleptically (as ``datetime`` does). No
timezone resolution happens here: naive datetimes are taken to already be in
the caller's chosen convention, aware ones are expressed in UTC first.
"""

import calendar
import math
from datetime import date, datetime, timezone

from skyobserver.errors import InvalidInputError

J2000 = 2451545.0  # JD of 2000-01-01 12:00 TT
DAYS_PER_CENTURY = 36525.0

_WHEN_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
)


def _check_civil(
    year: int, month: int, day: int, hour: int, minute: int, second: float
) -> None:
    if not 1 <= year <= 9999:
        raise InvalidInputError(f"year out of range: {year}")
    if not 1 <= month <= 12:
        raise InvalidInputError(f"month out of range: {month}")
    last_day = calendar.monthrange(year, month)[1]
    if not 1 <= day <= last_day:
        raise InvalidInputError(f"day out of range for {year}-{month:02d}: {day}")
    if not 0 <= hour <= 23:
        raise InvalidInputError(f"hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise InvalidInputError(f"minute out of range: {minute}")
    if not (math.isfinite(second) and 0 <= second < 60):
        raise InvalidInputError(f"second out of range: {second}")


def julian_date_from_civil(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Julian Date for a Gregorian calendar date and time of day.

    Meeus, "Astronomical Algorithms" ch. 7.

    Raises:
        InvalidInputError: If any field is structurally invalid (month 13,
            February 30, hour 24, ...). Values are never clamped.
    """
    _check_civil(year, month, day, hour, minute, second)

    day_fraction = (hour + (minute + second / 60.0) / 60.0) / 24.0
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12
    a = y // 100
    b = 2 - a + a // 4
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + day
        + day_fraction
        + b
        - 1524.5
    )


def julian_date(dt: datetime | date) -> float:
    """Julian Date of a ``datetime`` (or midnight of a ``date``).

    Raises:
        InvalidInputError: If ``dt`` is not a date/datetime, or if an aware
            ``dt`` falls outside years 1-9999 once expressed in UTC.
    """
    if isinstance(dt, datetime):
        if dt.tzinfo is not None:
            try:
                dt = dt.astimezone(timezone.utc)
            except OverflowError as e:
                raise InvalidInputError(f"timestamp out of range in UTC: {dt}") from e
        return julian_date_from_civil(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second + dt.microsecond / 1e6,
        )
    if isinstance(dt, date):
        return julian_date_from_civil(dt.year, dt.month, dt.day)
    raise InvalidInputError(f"expected datetime, got {type(dt).__name__}")


def julian_centuries(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def parse_when(when: str) -> datetime:
    """Parse a "YYYY-MM-DD HH:MM" string (seconds and a ``T`` separator allowed).

    Returns:
        A naive datetime.

    Raises:
        InvalidInputError: On malformed or structurally invalid input.
    """
    text = when.strip()
    for fmt in _WHEN_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise InvalidInputError(f"unrecognized date/time: {when!r}")
