"""
Atmospheric refraction near the horizon.

Meeus (Astronomical Algorithms, eq. 16.4) in radians: light bending lifts a body's
apparent altitude, strongly near the horizon and negligibly near zenith.
"""
from __future__ import annotations
import math


def astro_refraction(altitude_rad: float) -> float:
    """
    Refraction correction (radians, positive) to add to a true altitude.

    Altitudes below the horizon are evaluated as 0, where the correction is
    largest (~0.5 deg) but still finite.
    """
    if altitude_rad < 0:
        altitude_rad = 0.0
    return 0.0002967 / math.tan(altitude_rad + 0.00312536 / (altitude_rad + 0.08901179))
