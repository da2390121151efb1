# tests/test_moon_phase.py
from __future__ import annotations

import pytest

from sky import MOON_PHASE_LABELS, MoonPhase, get_moon_phase


@pytest.mark.parametrize("phase,expected", [
    (0.0, MoonPhase.NEW_MOON),
    (0.1, MoonPhase.WAXING_CRESCENT),
    (0.25, MoonPhase.FIRST_QUARTER),
    (0.26, MoonPhase.WAXING_GIBBOUS),
    (0.4, MoonPhase.WAXING_GIBBOUS),
    (0.5, MoonPhase.FULL_MOON),
    (0.6, MoonPhase.WANING_GIBBOUS),
    (0.75, MoonPhase.LAST_QUARTER),
    (0.9, MoonPhase.WANING_CRESCENT),
    (1.0, MoonPhase.NEW_MOON),
])
def test_moon_phase_buckets(phase, expected):
    assert get_moon_phase(phase) is expected
    assert MoonPhase.from_phase(phase) is expected


def test_cardinal_points_tolerate_rounding():
    assert get_moon_phase(0.7 - 0.45) is MoonPhase.FIRST_QUARTER
    assert get_moon_phase(0.5 + 5e-7) is MoonPhase.FULL_MOON
    assert get_moon_phase(1.0 - 1e-9) is MoonPhase.NEW_MOON


def test_just_outside_tolerance_is_intermediate():
    assert get_moon_phase(0.25 + 1e-3) is MoonPhase.WAXING_GIBBOUS
    assert get_moon_phase(0.75 - 1e-3) is MoonPhase.WANING_GIBBOUS


def test_custom_tolerance():
    assert get_moon_phase(0.26, tolerance=0.02) is MoonPhase.FIRST_QUARTER
    assert get_moon_phase(0.5 + 1e-9, tolerance=0.0) is MoonPhase.WANING_GIBBOUS


def test_out_of_range_phase_wraps():
    assert get_moon_phase(1.25) is MoonPhase.FIRST_QUARTER
    assert get_moon_phase(-0.1) is MoonPhase.WANING_CRESCENT


def test_nan_phase_falls_through():
    assert get_moon_phase(float("nan")) is MoonPhase.WANING_CRESCENT


def test_moon_phase_labels():
    assert set(MOON_PHASE_LABELS) == set(MoonPhase)
    assert MoonPhase.WAXING_GIBBOUS.label == "Waxing Gibbous"
