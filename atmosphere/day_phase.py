"""
SunPhase — lighting state of the sky from the Sun's altitude.

Bands, in order of increasing solar altitude (degrees):
    NIGHT                  Sun <= -18
    ASTRONOMICAL_TWILIGHT  -18 < Sun <= -12
    NAUTICAL_TWILIGHT      -12 < Sun <= -6
    CIVIL_TWILIGHT          -6 < Sun <  0
    DAY                     Sun >= 0

A twilight boundary belongs to the darker band; the horizon itself counts
as day.
"""
from __future__ import annotations
from enum import Enum
from functools import total_ordering


@total_ordering
class SunPhase(Enum):
    """Sun phases, declared in order of increasing solar altitude."""
    NIGHT                 = "night"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NAUTICAL_TWILIGHT     = "nautical_twilight"
    CIVIL_TWILIGHT        = "civil_twilight"
    DAY                   = "day"

    @classmethod
    def from_altitude(cls, alt_deg: float) -> 'SunPhase':
        if   alt_deg >=   0.0:  return cls.DAY
        elif alt_deg >  -6.0:   return cls.CIVIL_TWILIGHT
        elif alt_deg > -12.0:   return cls.NAUTICAL_TWILIGHT
        elif alt_deg > -18.0:   return cls.ASTRONOMICAL_TWILIGHT
        else:                   return cls.NIGHT

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def label(self) -> str:
        return SUN_PHASE_LABELS[self]

    def __lt__(self, other):
        if not isinstance(other, SunPhase):
            return NotImplemented
        return self.rank < other.rank


_ORDER = list(SunPhase)

SUN_PHASE_LABELS: dict[SunPhase, str] = {
    SunPhase.NIGHT:                 "Night",
    SunPhase.ASTRONOMICAL_TWILIGHT: "Astronomical Twilight",
    SunPhase.NAUTICAL_TWILIGHT:     "Nautical Twilight",
    SunPhase.CIVIL_TWILIGHT:        "Civil Twilight",
    SunPhase.DAY:                   "Day",
}


def get_sun_phase(altitude_deg: float) -> SunPhase:
    return SunPhase.from_altitude(altitude_deg)
