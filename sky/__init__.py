"""
Sky package — Sun and Moon for an observer.

Main exports:
    observe_sky          — Sun + Moon snapshot for one observer and instant
    get_sun_position     — Sun az/alt (radians)
    get_moon_position    — Moon az/alt (radians, refracted) + distance (km)
    get_moon_illumination — phase 0..1, illuminated fraction, limb angle
    get_sun_properties / get_moon_properties — degree snapshots + phase
    MoonPhase            — enum: NEW_MOON / WAXING_CRESCENT / ... / WANING_CRESCENT
    Observer             — observer location (config)
    PhaseTracker         — consumer-owned "current phase" state
    sun_track, moon_track, horizon_crossings — sampled paths (numpy)
    get_galactic_center_position — Milky Way core az/alt
"""
import logging

from .observer import Observer, GREENWICH
from .moon_phase import MoonPhase, MOON_PHASE_LABELS, CARDINAL_TOLERANCE, get_moon_phase
from .bodies import (
    SUN_DISTANCE_KM,
    MoonPosition,
    MoonIllumination,
    SunProperties,
    MoonProperties,
    SkySnapshot,
    get_sun_position,
    get_moon_position,
    get_moon_illumination,
    get_sun_properties,
    get_moon_properties,
    get_sun_direction,
    get_moon_direction,
    observe_sky,
)
from .galactic import GalacticCenterPosition, get_galactic_center_position
from .tracks import (
    BodyTrack,
    sun_track,
    moon_track,
    horizon_crossings,
    azimuth_altitude_to_vectors,
)
from .tracker import PhaseTracker

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Observer",
    "GREENWICH",
    "MoonPhase",
    "MOON_PHASE_LABELS",
    "CARDINAL_TOLERANCE",
    "get_moon_phase",
    "SUN_DISTANCE_KM",
    "MoonPosition",
    "MoonIllumination",
    "SunProperties",
    "MoonProperties",
    "SkySnapshot",
    "get_sun_position",
    "get_moon_position",
    "get_moon_illumination",
    "get_sun_properties",
    "get_moon_properties",
    "get_sun_direction",
    "get_moon_direction",
    "observe_sky",
    "GalacticCenterPosition",
    "get_galactic_center_position",
    "BodyTrack",
    "sun_track",
    "moon_track",
    "horizon_crossings",
    "azimuth_altitude_to_vectors",
    "PhaseTracker",
]

__version__ = '0.1.0'
