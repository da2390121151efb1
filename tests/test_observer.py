# tests/test_observer.py
from __future__ import annotations

import dataclasses

import pytest

from sky import GREENWICH, Observer
from sky.observer import ENV_LATITUDE, ENV_LONGITUDE, ENV_NAME


@pytest.fixture
def clean_env(monkeypatch):
    for name in (ENV_LATITUDE, ENV_LONGITUDE, ENV_NAME):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults():
    obs = Observer()
    assert (obs.latitude_deg, obs.longitude_deg, obs.name) == (0.0, 0.0, "Observer")


def test_observer_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        GREENWICH.latitude_deg = 0.0


def test_no_range_validation():
    obs = Observer(latitude_deg=123.0, longitude_deg=-540.0)
    assert obs.latitude_deg == 123.0


def test_from_env_without_variables(clean_env):
    assert Observer.from_env() == Observer()


def test_from_env_reads_variables(clean_env):
    clean_env.setenv(ENV_LATITUDE, "-33.87")
    clean_env.setenv(ENV_LONGITUDE, " 151.21 ")
    clean_env.setenv(ENV_NAME, "Sydney")
    assert Observer.from_env() == Observer(-33.87, 151.21, "Sydney")


def test_from_env_blank_values_fall_back(clean_env):
    clean_env.setenv(ENV_LATITUDE, "")
    clean_env.setenv(ENV_NAME, "")
    obs = Observer.from_env()
    assert obs.latitude_deg == 0.0
    assert obs.name == "Observer"


def test_from_env_rejects_non_numbers(clean_env):
    clean_env.setenv(ENV_LONGITUDE, "east")
    with pytest.raises(ValueError, match=ENV_LONGITUDE):
        Observer.from_env()
