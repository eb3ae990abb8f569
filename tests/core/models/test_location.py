"""
Tests for the Location model.
"""

import dataclasses

import pytest

from wayfinder.core.enums import LandmarkType
from wayfinder.core.exceptions import ValidationError
from wayfinder.core.models import Location


def test_location_creation():
    """Test creating a location with all fields."""
    location = Location(4, "Balme Library", 5.6545, -0.1875, LandmarkType.ACADEMIC)
    assert location.id == 4
    assert location.coordinates == (5.6545, -0.1875)
    assert location.landmark_type is LandmarkType.ACADEMIC
    assert str(location) == "Balme Library"


def test_location_default_category():
    """Test that locations default to the general category."""
    location = Location(0, "Kiosk", 0.0, 0.0)
    assert location.landmark_type is LandmarkType.GENERAL


def test_location_accepts_integer_coordinates():
    """Test that integer coordinates pass the float type check."""
    location = Location(1, "Origin", 0, 0)
    assert location.latitude == 0


def test_location_is_immutable():
    """Test that a location cannot be modified after creation."""
    location = Location(0, "Kiosk", 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        location.name = "Other"


def test_location_negative_id():
    """Test that negative ids are rejected."""
    with pytest.raises(ValidationError, match="non-negative"):
        Location(-1, "Kiosk", 0.0, 0.0)


def test_location_empty_name():
    """Test that blank names are rejected."""
    with pytest.raises(ValidationError, match="name"):
        Location(0, "   ", 0.0, 0.0)


@pytest.mark.parametrize("latitude,longitude", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1)])
def test_location_coordinates_out_of_range(latitude, longitude):
    """Test that coordinates outside the valid ranges are rejected."""
    with pytest.raises(ValidationError):
        Location(0, "Nowhere", latitude, longitude)


def test_location_invalid_field_types():
    """Test runtime type checking of fields."""
    with pytest.raises(TypeError, match="Invalid field types in Location"):
        Location("0", "Kiosk", 0.0, 0.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Location(True, "Kiosk", 0.0, 0.0)
    with pytest.raises(TypeError):
        Location(0, "Kiosk", 0.0, 0.0, "Dining")  # type: ignore[arg-type]
