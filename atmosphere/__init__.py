"""
Atmosphere package — what the air does to the view of the sky.

Main exports:
    astro_refraction   — refraction correction (radians) for a true altitude
    SunPhase           — enum: NIGHT / ASTRONOMICAL_TWILIGHT / ... / DAY
    get_sun_phase      — classify a solar altitude in degrees
"""
from .refraction import astro_refraction
from .day_phase import SunPhase, SUN_PHASE_LABELS, get_sun_phase

__all__ = [
    "astro_refraction",
    "SunPhase",
    "SUN_PHASE_LABELS",
    "get_sun_phase",
]
