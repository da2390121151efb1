"""
Low-precision lunar ephemeris.

Mean elements linear in days since J2000, each perturbed by its largest
harmonic only.
"""
from __future__ import annotations
import math

from .coords import EquatorialCoordinates, ecliptic_to_equatorial

MEAN_DISTANCE_KM = 385001.0


def moon_coordinates(days: float) -> EquatorialCoordinates:
    """Equatorial coordinates of the Moon, with distance in km."""
    L = math.radians(218.316 + 13.176396 * days)   # mean longitude
    M = math.radians(134.963 + 13.064993 * days)   # mean anomaly
    F = math.radians(93.272 + 13.229350 * days)    # mean distance (argument of latitude)

    lam = L + math.radians(6.289) * math.sin(M)
    beta = math.radians(5.128) * math.sin(F)
    distance_km = MEAN_DISTANCE_KM - 20905.0 * math.cos(M)

    return ecliptic_to_equatorial(lam, beta, distance_km)
