"""
Low-precision solar ephemeris.

Single-term mean anomaly plus a three-harmonic equation of centre, good to a
fraction of a degree — plenty for lighting, not for an almanac. The Sun is
treated as lying on the ecliptic (zero latitude).
"""
from __future__ import annotations
import math

from .coords import EquatorialCoordinates, ecliptic_to_equatorial

_PERIHELION_RAD = math.radians(102.9372)   # longitude of Earth's perihelion


def sun_mean_anomaly(days: float) -> float:
    """Mean anomaly in radians, unbounded."""
    return math.radians(357.5291 + 0.98560028 * days)


def ecliptic_longitude(mean_anomaly_rad: float) -> float:
    m = mean_anomaly_rad
    # Equation of center
    c = math.radians(1.9148 * math.sin(m) + 0.02 * math.sin(2 * m) + 0.0003 * math.sin(3 * m))
    return m + c + _PERIHELION_RAD + math.pi


def sun_coordinates(days: float) -> EquatorialCoordinates:
    lam = ecliptic_longitude(sun_mean_anomaly(days))
    return ecliptic_to_equatorial(lam)
