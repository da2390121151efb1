"""
MoonPhase — named lunar phase from the continuous phase value.

phase runs 0 → 0.25 → 0.5 → 0.75 → 1 as New → First Quarter → Full →
Last Quarter → New. The four cardinal phases are points on that cycle, so
they are matched within CARDINAL_TOLERANCE (1e-6 of a synodic month is about
2.5 s); everything between two cardinal points is the intermediate phase.
"""
from __future__ import annotations
from enum import Enum

CARDINAL_TOLERANCE = 1e-6


class MoonPhase(Enum):
    NEW_MOON        = "new_moon"
    WAXING_CRESCENT = "waxing_crescent"
    FIRST_QUARTER   = "first_quarter"
    WAXING_GIBBOUS  = "waxing_gibbous"
    FULL_MOON       = "full_moon"
    WANING_GIBBOUS  = "waning_gibbous"
    LAST_QUARTER    = "last_quarter"
    WANING_CRESCENT = "waning_crescent"

    @classmethod
    def from_phase(cls, phase: float, tolerance: float = CARDINAL_TOLERANCE) -> 'MoonPhase':
        p = phase % 1.0
        for point, cardinal in _CARDINAL_POINTS:
            if abs(p - point) <= tolerance:
                return cardinal
        if   p < 0.25:  return cls.WAXING_CRESCENT
        elif p < 0.5:   return cls.WAXING_GIBBOUS
        elif p < 0.75:  return cls.WANING_GIBBOUS
        # NaN lands here too
        else:           return cls.WANING_CRESCENT

    @property
    def label(self) -> str:
        return MOON_PHASE_LABELS[self]


_CARDINAL_POINTS = (
    (0.0,  MoonPhase.NEW_MOON),
    (0.25, MoonPhase.FIRST_QUARTER),
    (0.5,  MoonPhase.FULL_MOON),
    (0.75, MoonPhase.LAST_QUARTER),
    (1.0,  MoonPhase.NEW_MOON),
)

MOON_PHASE_LABELS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON:        "New Moon",
    MoonPhase.WAXING_CRESCENT: "Waxing Crescent",
    MoonPhase.FIRST_QUARTER:   "First Quarter",
    MoonPhase.WAXING_GIBBOUS:  "Waxing Gibbous",
    MoonPhase.FULL_MOON:       "Full Moon",
    MoonPhase.WANING_GIBBOUS:  "Waning Gibbous",
    MoonPhase.LAST_QUARTER:    "Last Quarter",
    MoonPhase.WANING_CRESCENT: "Waning Crescent",
}


def get_moon_phase(phase: float, tolerance: float = CARDINAL_TOLERANCE) -> MoonPhase:
    return MoonPhase.from_phase(phase, tolerance)
