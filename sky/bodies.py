"""
bodies.py — Sun and Moon as seen by an observer.

Pipeline for one instant and one observer:
    datetime → days since J2000 → equatorial (RA/Dec) → sidereal time
             → hour angle → horizontal (az/alt) → [Moon only] refraction

Illumination uses the Sun and Moon equatorial coordinates at the same
instant; it does not depend on the observer.

Conventions:
    - latitude/longitude in degrees, longitude East-positive
    - *_rad results are not range-normalised (asin/atan2 principal ranges,
      azimuth in [0, 2pi] after the +pi rotation)
    - *Properties snapshots are in degrees
    - no exceptions for bad numeric input; results may be NaN

observe_sky() computes both bodies from one shared set of equatorial
coordinates; the get_* functions stay independently callable and always
agree with it for the same instant.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from datetime import datetime

from ephemeris import (
    EquatorialCoordinates,
    HorizontalCoordinates,
    azimuth_altitude_to_vector,
    clamp,
    equatorial_to_horizontal,
    moon_coordinates,
    sidereal_time_rad,
    sun_coordinates,
    to_julian_days,
    to_utc,
)
from atmosphere import SunPhase, astro_refraction, get_sun_phase

from .moon_phase import MoonPhase, get_moon_phase
from .observer import Observer

logger = logging.getLogger(__name__)

SUN_DISTANCE_KM = 149598000.0   # mean Earth–Sun distance


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class MoonPosition:
    azimuth_rad:  float
    altitude_rad: float   # refraction included
    distance_km:  float


@dataclass(frozen=True, slots=True)
class MoonIllumination:
    """
    phase    : 0 new → 0.5 full → 1 (exclusive), increasing through the cycle
    fraction : illuminated fraction of the disk, 0..1
    angle_rad: position angle of the bright limb's midpoint
    """
    phase:     float
    fraction:  float
    angle_rad: float


@dataclass(frozen=True, slots=True)
class SunProperties:
    azimuth_deg:   float
    elevation_deg: float
    phase:         SunPhase


@dataclass(frozen=True, slots=True)
class MoonProperties:
    distance_km:   float
    illumination:  float
    azimuth_deg:   float
    elevation_deg: float
    phase:         MoonPhase


@dataclass(frozen=True, slots=True)
class SkySnapshot:
    """Sun and Moon for one observer at one instant."""
    instant:           datetime
    observer:          Observer
    sun:               SunProperties
    moon:              MoonProperties
    sun_position:      HorizontalCoordinates
    moon_position:     MoonPosition
    moon_illumination: MoonIllumination

    @property
    def sun_direction(self) -> tuple[float, float, float]:
        return azimuth_altitude_to_vector(self.sun_position.azimuth_rad,
                                          self.sun_position.altitude_rad)

    @property
    def moon_direction(self) -> tuple[float, float, float]:
        return azimuth_altitude_to_vector(self.moon_position.azimuth_rad,
                                          self.moon_position.altitude_rad)


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

def _horizontal(coords: EquatorialCoordinates, days: float,
                latitude_deg: float, longitude_deg: float) -> HorizontalCoordinates:
    # West-positive longitude internally
    lw = math.radians(-longitude_deg)
    phi = math.radians(latitude_deg)
    return equatorial_to_horizontal(coords, phi, sidereal_time_rad(days, lw))


def _moon_horizontal(coords: EquatorialCoordinates, days: float,
                     latitude_deg: float, longitude_deg: float) -> MoonPosition:
    h = _horizontal(coords, days, latitude_deg, longitude_deg)
    alt = h.altitude_rad + astro_refraction(h.altitude_rad)
    return MoonPosition(h.azimuth_rad, alt, coords.distance_km)


def _illumination(sun: EquatorialCoordinates, moon: EquatorialCoordinates) -> MoonIllumination:
    d_ra = sun.right_ascension_rad - moon.right_ascension_rad

    # Sun–Moon elongation. Near conjunction/opposition rounding pushes the
    # cosine just past +-1.
    cos_phi = (math.sin(sun.declination_rad) * math.sin(moon.declination_rad)
               + math.cos(sun.declination_rad) * math.cos(moon.declination_rad) * math.cos(d_ra))
    phi = math.acos(clamp(cos_phi, -1.0, 1.0))

    # Sun–Moon–Earth angle
    inc = math.atan2(SUN_DISTANCE_KM * math.sin(phi),
                     moon.distance_km - SUN_DISTANCE_KM * math.cos(phi))

    angle = math.atan2(math.cos(sun.declination_rad) * math.sin(d_ra),
                       math.sin(sun.declination_rad) * math.cos(moon.declination_rad)
                       - math.cos(sun.declination_rad) * math.sin(moon.declination_rad) * math.cos(d_ra))

    fraction = (1.0 + math.cos(inc)) / 2.0
    sign = -1.0 if angle < 0 else 1.0
    # inc == pi with a non-negative angle gives exactly 1.0, which is new moon again
    phase = (0.5 + 0.5 * inc * sign / math.pi) % 1.0
    return MoonIllumination(phase, fraction, angle)


def _sun_properties(h: HorizontalCoordinates) -> SunProperties:
    elevation = math.degrees(h.altitude_rad)
    return SunProperties(math.degrees(h.azimuth_rad), elevation, get_sun_phase(elevation))


def _moon_properties(pos: MoonPosition, illum: MoonIllumination) -> MoonProperties:
    return MoonProperties(
        distance_km   = pos.distance_km,
        illumination  = illum.fraction,
        azimuth_deg   = math.degrees(pos.azimuth_rad),
        elevation_deg = math.degrees(pos.altitude_rad),
        phase         = get_moon_phase(illum.phase),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_sun_position(instant: datetime, latitude_deg: float,
                     longitude_deg: float) -> HorizontalCoordinates:
    """Sun azimuth/altitude in radians. No refraction."""
    days = to_julian_days(instant)
    return _horizontal(sun_coordinates(days), days, latitude_deg, longitude_deg)


def get_moon_position(instant: datetime, latitude_deg: float,
                      longitude_deg: float) -> MoonPosition:
    """Moon azimuth/altitude in radians (altitude refracted) and distance in km."""
    days = to_julian_days(instant)
    return _moon_horizontal(moon_coordinates(days), days, latitude_deg, longitude_deg)


def get_moon_illumination(instant: datetime) -> MoonIllumination:
    days = to_julian_days(instant)
    return _illumination(sun_coordinates(days), moon_coordinates(days))


def get_sun_properties(instant: datetime, latitude_deg: float,
                       longitude_deg: float) -> SunProperties:
    return _sun_properties(get_sun_position(instant, latitude_deg, longitude_deg))


def get_moon_properties(instant: datetime, latitude_deg: float,
                        longitude_deg: float) -> MoonProperties:
    pos = get_moon_position(instant, latitude_deg, longitude_deg)
    return _moon_properties(pos, get_moon_illumination(instant))


def get_sun_direction(instant: datetime, latitude_deg: float,
                      longitude_deg: float) -> tuple[float, float, float]:
    h = get_sun_position(instant, latitude_deg, longitude_deg)
    return azimuth_altitude_to_vector(h.azimuth_rad, h.altitude_rad)


def get_moon_direction(instant: datetime, latitude_deg: float,
                       longitude_deg: float) -> tuple[float, float, float]:
    pos = get_moon_position(instant, latitude_deg, longitude_deg)
    return azimuth_altitude_to_vector(pos.azimuth_rad, pos.altitude_rad)


def observe_sky(instant: datetime, observer: Observer) -> SkySnapshot:
    """
    Sun and Moon for one observer, computing the equatorial coordinates of
    each body once and deriving position, illumination and phase from them.
    """
    days = to_julian_days(instant)
    sun_eq = sun_coordinates(days)
    moon_eq = moon_coordinates(days)

    lat, lon = observer.latitude_deg, observer.longitude_deg
    sun_h = _horizontal(sun_eq, days, lat, lon)
    moon_pos = _moon_horizontal(moon_eq, days, lat, lon)
    illum = _illumination(sun_eq, moon_eq)

    if not (math.isfinite(sun_h.altitude_rad) and math.isfinite(moon_pos.altitude_rad)):
        logger.debug("non-finite altitude for %s at d=%.6f (lat=%r, lon=%r)",
                     observer.name, days, lat, lon)

    snapshot = SkySnapshot(
        instant           = to_utc(instant),
        observer          = observer,
        sun               = _sun_properties(sun_h),
        moon              = _moon_properties(moon_pos, illum),
        sun_position      = sun_h,
        moon_position     = moon_pos,
        moon_illumination = illum,
    )
    logger.debug("observe_sky d=%.6f sun=%.2f° %s moon=%.2f° %s (%.0f%%)",
                 days, snapshot.sun.elevation_deg, snapshot.sun.phase.value,
                 snapshot.moon.elevation_deg, snapshot.moon.phase.value,
                 100.0 * illum.fraction)
    return snapshot
