from __future__ import annotations
from datetime import date, datetime, time, timezone
from typing import Tuple

SECONDS_PER_DAY = 86400
JDN_UNIX_EPOCH = 2440588  # JDN of 1970-01-01


def floor_div(a: int, b: int) -> int:
    """Integer division rounding toward negative infinity (Python ``//``)."""
    return a // b


def split_instant(t: int) -> Tuple[int, int]:
    """Split epoch seconds into (whole days since 1970-01-01, seconds into that day)."""
    days = floor_div(t, SECONDS_PER_DAY)
    return days, t - days * SECONDS_PER_DAY


def hms(t: int) -> Tuple[int, int, int]:
    """Clock hour, minute, second of an epoch-seconds value."""
    _, sod = split_instant(t)
    return sod // 3600, (sod % 3600) // 60, sod % 60


def time_frac_day(t: int) -> float:
    """Fraction of the day elapsed since midnight, in [0, 1)."""
    h, m, s = hms(t)
    return (h + m / 60.0 + s / 3600.0) / 24.0


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def local_epoch_seconds(dt: datetime, tz_offset: int) -> int:
    """
    Wall-clock epoch seconds for a site ``tz_offset`` hours from UTC.

    A naive datetime is taken as the site's wall clock already. An aware
    datetime is first moved to UTC, then shifted by the fixed offset.
    Sub-second parts are dropped.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
        shift = tz_offset * 3600
    else:
        shift = 0
    days = to_jdn(dt.date()) - JDN_UNIX_EPOCH
    return days * SECONDS_PER_DAY + dt.hour * 3600 + dt.minute * 60 + dt.second + shift


def instant_to_local_datetime(t: int) -> datetime:
    """Naive wall-clock datetime for wall-clock epoch seconds."""
    days, sod = split_instant(int(t))
    return datetime.combine(
        from_jdn(days + JDN_UNIX_EPOCH),
        time(sod // 3600, (sod % 3600) // 60, sod % 60),
    )
