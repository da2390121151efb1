from __future__ import annotations
import calendar
import math
from datetime import datetime, timezone

# Time utilities. Everything downstream works in days since J2000.0 noon UTC.

J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
JD_J2000 = 2451545.0
SECONDS_PER_DAY = 86400.0


def to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        # assume UTC if naive
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_julian_days(dt: datetime) -> float:
    """Days (with fraction) between dt and 2000-01-01T12:00 UTC. Negative before the epoch."""
    return (to_utc(dt) - J2000).total_seconds() / SECONDS_PER_DAY


def julian_date(dt: datetime) -> float:
    return JD_J2000 + to_julian_days(dt)


def sidereal_time_rad(days: float, longitude_west_rad: float) -> float:
    """
    Sidereal time in radians for the low-precision body formulas.
    West longitude is positive here. Not wrapped to [0, 2pi).
    """
    return math.radians(280.16 + 360.9856235 * days) - longitude_west_rad


def local_sidereal_time_deg(dt: datetime, longitude_deg: float) -> float:
    """
    Local mean sidereal time in degrees [0, 360); NaN for non-finite input.
    longitude_deg is east-positive.
    """
    days = to_julian_days(dt)
    gmst = 280.46061837 + 360.98564736629 * days
    lst = (gmst + longitude_deg) % 360.0
    # float modulo of a tiny negative sum rounds up to 360.0
    return 0.0 if lst == 360.0 else lst


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
