"""
Tests for the domain enumerations and their label parsing.
"""

import pytest

from wayfinder.core.enums import CompassDirection, LandmarkType, TimeOfDay, TrafficCondition
from wayfinder.core.exceptions import ValidationError


def test_traffic_condition_multipliers():
    """Test the multipliers carried by each traffic condition."""
    assert (TrafficCondition.LIGHT.distance_multiplier, TrafficCondition.LIGHT.time_multiplier) == (
        1.0,
        1.0,
    )
    assert TrafficCondition.MODERATE.distance_multiplier == 1.2
    assert TrafficCondition.MODERATE.time_multiplier == 1.3
    assert TrafficCondition.HEAVY.distance_multiplier == 1.5
    assert TrafficCondition.HEAVY.time_multiplier == 1.8


def test_traffic_multipliers_increase_with_congestion():
    """Test that both multipliers grow strictly from light to heavy."""
    conditions = list(TrafficCondition)
    for lighter, heavier in zip(conditions, conditions[1:]):
        assert lighter.distance_multiplier < heavier.distance_multiplier
        assert lighter.time_multiplier < heavier.time_multiplier


@pytest.mark.parametrize(
    "label,expected",
    [
        ("Dining", LandmarkType.DINING),
        ("DINING", LandmarkType.DINING),
        (" recreation ", LandmarkType.RECREATION),
        ("Administrative", LandmarkType.ADMINISTRATIVE),
    ],
)
def test_landmark_type_parse(label, expected):
    """Test parsing category labels in several spellings."""
    assert LandmarkType.parse(label) is expected


@pytest.mark.parametrize(
    "label,expected",
    [
        ("normal", TimeOfDay.NORMAL),
        ("NORMAL_HOURS", TimeOfDay.NORMAL),
        ("morning-rush", TimeOfDay.MORNING_RUSH),
        ("Evening Rush", TimeOfDay.EVENING_RUSH),
    ],
)
def test_time_of_day_parse(label, expected):
    """Test parsing time-of-day labels, including the legacy alias."""
    assert TimeOfDay.parse(label) is expected


def test_traffic_condition_parse():
    """Test parsing traffic condition labels."""
    assert TrafficCondition.parse("heavy") is TrafficCondition.HEAVY
    assert TrafficCondition.parse(TrafficCondition.LIGHT) is TrafficCondition.LIGHT


def test_parse_unknown_label():
    """Test that unknown labels raise a validation error."""
    with pytest.raises(ValidationError, match="Unknown LandmarkType 'Castle'"):
        LandmarkType.parse("Castle")
    with pytest.raises(ValidationError):
        TimeOfDay.parse("midnight")


@pytest.mark.parametrize(
    "multiplier,expected",
    [
        (1.0, TrafficCondition.LIGHT),
        (1.09, TrafficCondition.LIGHT),
        (1.1, TrafficCondition.MODERATE),
        (1.39, TrafficCondition.MODERATE),
        (1.4, TrafficCondition.HEAVY),
        (1.5, TrafficCondition.HEAVY),
    ],
)
def test_traffic_condition_from_multiplier(multiplier, expected):
    """Test bucketing an averaged multiplier into a condition."""
    assert TrafficCondition.from_multiplier(multiplier) is expected


def test_compass_direction_from_octant():
    """Test that octants wrap around modulo eight."""
    assert CompassDirection.from_octant(0) is CompassDirection.NORTH
    assert CompassDirection.from_octant(2) is CompassDirection.EAST
    assert CompassDirection.from_octant(7) is CompassDirection.NORTH_WEST
    assert CompassDirection.from_octant(8) is CompassDirection.NORTH
