# tests/conftest.py
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sky import Observer

UTC = timezone.utc


@pytest.fixture
def j2000():
    return datetime(2000, 1, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def null_island():
    return Observer(latitude_deg=0.0, longitude_deg=0.0, name="Null Island")


@pytest.fixture
def london():
    return Observer(latitude_deg=51.48, longitude_deg=0.0, name="London")


@pytest.fixture
def sydney():
    return Observer(latitude_deg=-33.87, longitude_deg=151.21, name="Sydney")


# Reference events (UTC) for the sanity checks below
@pytest.fixture
def full_moon():
    # total lunar eclipse, 2021-05-26
    return datetime(2021, 5, 26, 11, 14, tzinfo=UTC)


@pytest.fixture
def new_moon():
    # annular solar eclipse, 2021-06-10
    return datetime(2021, 6, 10, 10, 53, tzinfo=UTC)
