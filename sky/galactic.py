"""
Galactic centre (Sgr A*) position — where the Milky Way's core sits in the
observer's sky. A fixed catalogue position, so only sidereal time moves it.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from ephemeris import equatorial_to_horizontal_deg, local_sidereal_time_deg

GALACTIC_CENTER_RA_DEG  = 266.4
GALACTIC_CENTER_DEC_DEG = -29.0


@dataclass(frozen=True, slots=True)
class GalacticCenterPosition:
    azimuth_deg:  float   # 0 = N, 90 = E
    altitude_deg: float

    @property
    def is_above_horizon(self) -> bool:
        return self.altitude_deg > 0.0


def get_galactic_center_position(instant: datetime, latitude_deg: float,
                                 longitude_deg: float) -> GalacticCenterPosition:
    lst = local_sidereal_time_deg(instant, longitude_deg)
    az, alt = equatorial_to_horizontal_deg(GALACTIC_CENTER_RA_DEG, GALACTIC_CENTER_DEC_DEG,
                                           latitude_deg, lst)
    return GalacticCenterPosition(az, alt)
