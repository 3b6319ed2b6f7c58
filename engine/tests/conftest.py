"""Shared test fixtures for firetrace engine tests."""

import pytest

from firetrace.geometry.ellipse import FireEllipse
from firetrace.types import SiteConditions, SurfaceSpread


@pytest.fixture
def fire_ellipse():
    """Reference fire ellipse: 100 x 50, heading south-east (135 degrees).

    Heading distance is 93.30127..., backing distance 6.69872...
    """
    return FireEllipse(100.0, 50.0, 135.0, 1.0)


@pytest.fixture
def east_ellipse():
    """Same 100 x 50 ellipse heading due east, aligned with the x axis."""
    return FireEllipse(100.0, 50.0, 90.0, 1.0)


@pytest.fixture
def site_conditions():
    """Uniform site inputs matching the landscape defaults."""
    return SiteConditions(
        fuel_model="124",
        cured_herb=0.778,
        dead_1h=0.05,
        dead_10h=0.07,
        dead_100h=0.09,
        live_herb=0.5,
        live_stem=1.5,
        slope=0.25,
        aspect=135.0,
        wind_speed=880.0,
        wind_from=315.0,
    )


@pytest.fixture
def constant_spread_model():
    """Spread model returning a fixed head rate and heading, counting calls."""

    class Model:
        def __init__(self):
            self.calls = 0

        def __call__(self, conditions):
            self.calls += 1
            return SurfaceSpread(head_ros=10.0, heading=90.0, lwr=2.0)

    return Model()
