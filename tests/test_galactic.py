# tests/test_galactic.py
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest

from sky import GalacticCenterPosition, get_galactic_center_position

UTC = timezone.utc


def _one_sidereal_day(start, lat, lon, step_minutes=2):
    n = int(1436 / step_minutes) + 1
    return [get_galactic_center_position(start + timedelta(minutes=step_minutes * i), lat, lon)
            for i in range(n)]


def test_transit_altitude_and_azimuth():
    samples = _one_sidereal_day(datetime(2024, 7, 1, tzinfo=UTC), 40.0, -105.0)
    best = max(samples, key=lambda p: p.altitude_deg)
    # 90 - 40 - 29
    assert best.altitude_deg == pytest.approx(21.0, abs=0.3)
    assert best.azimuth_deg == pytest.approx(180.0, abs=3.0)


def test_west_of_meridian_at_j2000(j2000):
    # LST 280.46° > RA 266.4°: the core has already transited
    pos = get_galactic_center_position(j2000, 40.0, 0.0)
    assert 180.0 < pos.azimuth_deg < 270.0
    assert pos.is_above_horizon


def test_never_rises_in_the_far_north():
    samples = _one_sidereal_day(datetime(2024, 7, 1, tzinfo=UTC), 70.0, 20.0, step_minutes=20)
    assert not any(p.is_above_horizon for p in samples)
    assert max(p.altitude_deg for p in samples) == pytest.approx(-9.0, abs=0.5)


def test_azimuth_range():
    for p in _one_sidereal_day(datetime(2023, 1, 1, tzinfo=UTC), -35.0, 150.0, step_minutes=30):
        assert 0.0 <= p.azimuth_deg < 360.0
        assert -90.0 <= p.altitude_deg <= 90.0


def test_horizon_flag():
    assert GalacticCenterPosition(123.0, 0.5).is_above_horizon
    assert not GalacticCenterPosition(123.0, 0.0).is_above_horizon


def test_nan_longitude_is_not_a_position(j2000):
    pos = get_galactic_center_position(j2000, 40.0, float("nan"))
    assert math.isnan(pos.altitude_deg)
    assert not pos.is_above_horizon
