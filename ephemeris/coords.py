from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

EARTH_OBLIQUITY_RAD = math.radians(23.4397)


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def wrap_deg(x: float) -> float:
    x = x % 360.0
    return x if x >= 0 else x + 360.0


@dataclass(frozen=True, slots=True)
class EquatorialCoordinates:
    declination_rad: float
    right_ascension_rad: float
    # only the Moon carries a distance
    distance_km: Optional[float] = None


@dataclass(frozen=True, slots=True)
class HorizontalCoordinates:
    # azimuth from North towards East
    azimuth_rad: float
    altitude_rad: float


def ecliptic_to_equatorial(longitude_rad: float,
                           latitude_rad: float = 0.0,
                           distance_km: Optional[float] = None) -> EquatorialCoordinates:
    """
    Rotate ecliptic (lambda, beta) into equatorial (dec, ra) with the fixed
    J2000 obliquity. Sun callers leave latitude at 0.
    """
    eps = EARTH_OBLIQUITY_RAD
    ra = math.atan2(math.sin(longitude_rad) * math.cos(eps) - math.tan(latitude_rad) * math.sin(eps),
                    math.cos(longitude_rad))
    dec = math.asin(math.sin(latitude_rad) * math.cos(eps)
                    + math.cos(latitude_rad) * math.sin(eps) * math.sin(longitude_rad))
    return EquatorialCoordinates(dec, ra, distance_km)


def equatorial_to_horizontal(coords: EquatorialCoordinates,
                             latitude_rad: float,
                             sidereal_time_rad: float) -> HorizontalCoordinates:
    """
    Hour angle = LST - RA. atan2 gives azimuth from South, the +pi turns
    it into azimuth from North. Neither output is range-normalised.
    """
    ha = sidereal_time_rad - coords.right_ascension_rad
    dec = coords.declination_rad
    lat = latitude_rad

    alt = math.asin(math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(ha))
    az = math.atan2(math.sin(ha),
                    math.cos(ha) * math.sin(lat) - math.tan(dec) * math.cos(lat)) + math.pi
    return HorizontalCoordinates(az, alt)


def equatorial_to_horizontal_deg(ra_deg: float, dec_deg: float,
                                 lat_deg: float, lst_deg: float) -> tuple[float, float]:
    """
    Return (az_deg, alt_deg) for a fixed RA/Dec. Az measured from North towards East (0..360).
    """
    ha = math.radians((lst_deg - ra_deg) % 360.0)
    dec = math.radians(dec_deg)
    lat = math.radians(lat_deg)

    sin_alt = math.sin(dec)*math.sin(lat) + math.cos(dec)*math.cos(lat)*math.cos(ha)
    alt = math.asin(clamp(sin_alt, -1.0, 1.0))

    cos_az = (math.sin(dec) - math.sin(alt)*math.sin(lat)) / (math.cos(alt)*math.cos(lat) + 1e-12)
    az = math.acos(clamp(cos_az, -1.0, 1.0))
    if math.sin(ha) > 0:
        az = 2*math.pi - az
    return wrap_deg(math.degrees(az)), math.degrees(alt)


def azimuth_altitude_to_vector(azimuth_rad: float, altitude_rad: float) -> tuple[float, float, float]:
    """
    Unit direction vector, +Y up. Azimuth 0 points along +Z and increasing
    azimuth rotates toward +X.
    """
    c = math.cos(altitude_rad)
    return (c*math.sin(azimuth_rad), math.sin(altitude_rad), c*math.cos(azimuth_rad))
