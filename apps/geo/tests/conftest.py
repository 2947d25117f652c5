"""Pytest configuration and fixtures for engine tests."""

import pytest

from pawmap_geo.types import GeoPoint, Region


@pytest.fixture
def paris():
    """True location used across masking tests."""
    return GeoPoint(48.8566, 2.3522)


@pytest.fixture
def paris_region(paris):
    """A 0.02 degree viewport centered on Paris."""
    return Region(center=paris, latitude_delta=0.02, longitude_delta=0.02)
