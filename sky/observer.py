from __future__ import annotations
import os
from dataclasses import dataclass

# Environment overrides for the default observer
ENV_LATITUDE = "SKY_LATITUDE_DEG"
ENV_LONGITUDE = "SKY_LONGITUDE_DEG"
ENV_NAME = "SKY_OBSERVER_NAME"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of degrees, got {raw!r}") from e


@dataclass(frozen=True, slots=True)
class Observer:
    """
    Geographic location of the observer.

    No range check is made: the formulas are periodic and simply give
    less meaningful answers outside +-90 / +-180.
    """
    latitude_deg:  float = 0.0    # positive = North
    longitude_deg: float = 0.0    # positive = East
    name:          str   = "Observer"

    @classmethod
    def from_env(cls) -> 'Observer':
        """Observer from SKY_LATITUDE_DEG / SKY_LONGITUDE_DEG / SKY_OBSERVER_NAME, defaults otherwise."""
        defaults = cls()
        return cls(
            latitude_deg  = _env_float(ENV_LATITUDE, defaults.latitude_deg),
            longitude_deg = _env_float(ENV_LONGITUDE, defaults.longitude_deg),
            name          = os.getenv(ENV_NAME) or defaults.name,
        )


# Royal Observatory, Greenwich
GREENWICH = Observer(latitude_deg=51.4769, longitude_deg=-0.0005, name="Greenwich")
