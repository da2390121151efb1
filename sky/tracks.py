"""
Body tracks — Sun/Moon positions sampled over a time window.

A track is the same computation as get_sun_position / get_moon_position
evaluated on a regular grid of minutes, stored as numpy arrays so callers
can plot a day's path or find horizon crossings without a Python loop of
their own.

Usage:
    track = sun_track(datetime(2024, 6, 21, tzinfo=timezone.utc), 51.48, 0.0)
    rises, sets = horizon_crossings(track)
    twilight_end = horizon_crossings(track, threshold_deg=-18.0)[1]
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Tuple

import numpy as np

from ephemeris import to_utc

from .bodies import get_moon_position, get_sun_position

MINUTES_PER_DAY = 1440.0


@dataclass(frozen=True)
class BodyTrack:
    """Sampled horizontal positions. Arrays share one index."""
    start:        datetime      # UTC
    minutes:      np.ndarray    # offsets from start
    azimuth_deg:  np.ndarray
    altitude_deg: np.ndarray

    def __len__(self) -> int:
        return int(self.minutes.shape[0])

    @property
    def times(self) -> List[datetime]:
        return [self.start + timedelta(minutes=float(m)) for m in self.minutes]

    def time_at(self, minute: float) -> datetime:
        return self.start + timedelta(minutes=float(minute))

    def directions(self) -> np.ndarray:
        """(N, 3) unit vectors, same axes as azimuth_altitude_to_vector."""
        return azimuth_altitude_to_vectors(np.radians(self.azimuth_deg),
                                           np.radians(self.altitude_deg))


def azimuth_altitude_to_vectors(azimuth_rad: np.ndarray,
                                altitude_rad: np.ndarray) -> np.ndarray:
    """Array form of azimuth_altitude_to_vector: returns shape (N, 3)."""
    az = np.asarray(azimuth_rad, dtype=np.float64)
    alt = np.asarray(altitude_rad, dtype=np.float64)
    c = np.cos(alt)
    return np.stack([c * np.sin(az), np.sin(alt), c * np.cos(az)], axis=-1)


def _sample(position: Callable[[datetime, float, float], object],
            start: datetime, latitude_deg: float, longitude_deg: float,
            hours: float, step_minutes: float) -> BodyTrack:
    if step_minutes <= 0:
        raise ValueError(f"step_minutes must be positive, got {step_minutes}")
    if hours < 0:
        raise ValueError(f"hours must not be negative, got {hours}")

    start = to_utc(start)
    n = int(math.floor(hours * 60.0 / step_minutes)) + 1
    minutes = np.arange(n, dtype=np.float64) * step_minutes

    az = np.empty(n, dtype=np.float64)
    alt = np.empty(n, dtype=np.float64)
    for i, m in enumerate(minutes):
        p = position(start + timedelta(minutes=float(m)), latitude_deg, longitude_deg)
        az[i] = p.azimuth_rad
        alt[i] = p.altitude_rad

    return BodyTrack(start, minutes, np.degrees(az), np.degrees(alt))


def sun_track(start: datetime, latitude_deg: float, longitude_deg: float,
              hours: float = 24.0, step_minutes: float = 10.0) -> BodyTrack:
    return _sample(get_sun_position, start, latitude_deg, longitude_deg, hours, step_minutes)


def moon_track(start: datetime, latitude_deg: float, longitude_deg: float,
               hours: float = 24.0, step_minutes: float = 10.0) -> BodyTrack:
    """Moon track; altitudes include refraction like get_moon_position."""
    return _sample(get_moon_position, start, latitude_deg, longitude_deg, hours, step_minutes)


def horizon_crossings(track: BodyTrack,
                      threshold_deg: float = 0.0) -> Tuple[List[datetime], List[datetime]]:
    """
    Times where the track crosses threshold_deg, linearly interpolated
    between samples.

    A sample at exactly threshold_deg counts as up, so a track that only
    touches the threshold gives one rise and one set at the touch and rises
    and sets always alternate. Returns (rises, sets), each in time order.
    """
    alt = track.altitude_deg
    if alt.shape[0] < 2:
        return [], []

    a0, a1 = alt[:-1], alt[1:]
    m0, m1 = track.minutes[:-1], track.minutes[1:]

    up = alt >= threshold_deg
    # NaN samples never bracket a crossing
    finite = np.isfinite(a0) & np.isfinite(a1)
    rising = finite & ~up[:-1] & up[1:]
    setting = finite & up[:-1] & ~up[1:]

    def interpolate(mask: np.ndarray) -> List[datetime]:
        idx = np.nonzero(mask)[0]
        frac = (threshold_deg - a0[idx]) / (a1[idx] - a0[idx])
        at = m0[idx] + frac * (m1[idx] - m0[idx])
        return [track.time_at(m) for m in at]

    return interpolate(rising), interpolate(setting)
