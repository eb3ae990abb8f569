"""
Tests for great-circle helpers and compass bearings.
"""

import pytest

from wayfinder.core.enums import CompassDirection
from wayfinder.core.geo import compass_direction, haversine_distance, initial_bearing


def test_haversine_distance_one_degree():
    """Test one degree of longitude on the equator."""
    assert haversine_distance(0.0, 0.0, 0.0, 1.0) == pytest.approx(111_194.93, rel=1e-6)
    assert haversine_distance(5.65, -0.18, 5.65, -0.18) == 0.0


def test_haversine_distance_symmetric():
    """Test that distance does not depend on direction."""
    there = haversine_distance(5.6531, -0.1864, 5.6572, -0.1901)
    back = haversine_distance(5.6572, -0.1901, 5.6531, -0.1864)
    assert there == pytest.approx(back)


def test_initial_bearing_normalized():
    """Test that bearings fall in [0, 360)."""
    assert initial_bearing(0.0, 0.0, 0.0, 1.0) == pytest.approx(90.0)
    assert initial_bearing(0.0, 0.0, 0.0, -1.0) == pytest.approx(270.0)
    assert initial_bearing(0.0, 0.0, -1.0, 0.0) == pytest.approx(180.0)
    assert 0.0 <= initial_bearing(0.0, 0.0, 1.0, -0.0001) < 360.0


@pytest.mark.parametrize(
    "destination,expected",
    [
        ((0.0, 1.0), CompassDirection.EAST),
        ((1.0, 0.0), CompassDirection.NORTH),
        ((-1.0, 0.0), CompassDirection.SOUTH),
        ((0.0, -1.0), CompassDirection.WEST),
        ((1.0, 1.0), CompassDirection.NORTH_EAST),
        ((-1.0, -1.0), CompassDirection.SOUTH_WEST),
        ((1.0, -0.0001), CompassDirection.NORTH),
    ],
)
def test_compass_direction(destination, expected):
    """Test bucketing bearings from the origin into octants."""
    assert compass_direction(0.0, 0.0, *destination) is expected
