"""
Ephemeris package — time and coordinate math.

Main exports:
    to_julian_days          — datetime → days since J2000.0
    local_sidereal_time_deg — LST in degrees [0, 360)
    sun_coordinates         — Sun RA/Dec (radians)
    moon_coordinates        — Moon RA/Dec (radians) + distance (km)
    equatorial_to_horizontal, azimuth_altitude_to_vector
"""
from .astro_time import (
    J2000,
    JD_J2000,
    to_utc,
    to_julian_days,
    julian_date,
    sidereal_time_rad,
    local_sidereal_time_deg,
    days_in_month,
)
from .coords import (
    EARTH_OBLIQUITY_RAD,
    EquatorialCoordinates,
    HorizontalCoordinates,
    clamp,
    wrap_deg,
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    equatorial_to_horizontal_deg,
    azimuth_altitude_to_vector,
)
from .solar import sun_mean_anomaly, ecliptic_longitude, sun_coordinates
from .lunar import moon_coordinates

__all__ = [
    "J2000",
    "JD_J2000",
    "to_utc",
    "to_julian_days",
    "julian_date",
    "sidereal_time_rad",
    "local_sidereal_time_deg",
    "days_in_month",
    "EARTH_OBLIQUITY_RAD",
    "EquatorialCoordinates",
    "HorizontalCoordinates",
    "clamp",
    "wrap_deg",
    "ecliptic_to_equatorial",
    "equatorial_to_horizontal",
    "equatorial_to_horizontal_deg",
    "azimuth_altitude_to_vector",
    "sun_mean_anomaly",
    "ecliptic_longitude",
    "sun_coordinates",
    "moon_coordinates",
]
