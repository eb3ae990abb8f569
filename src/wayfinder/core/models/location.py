"""
Location models for the routing system.

This module defines the vertices of the location graph. A Location is
immutable once created: its id, name, coordinates and category never change,
only the traffic on the edges around it does.
"""

from dataclasses import dataclass

from ...utils.validation.base import validate_dataclass
from ..enums import LandmarkType
from ..exceptions import ValidationError


@validate_dataclass
@dataclass(frozen=True)
class Location:
    """
    A named point on the map.

    Attributes:
        id (int): Unique, small non-negative integer key
        name (str): Caller-facing display name
        latitude (float): Degrees north, in [-90, 90]
        longitude (float): Degrees east, in [-180, 180]
        landmark_type (LandmarkType): Category used for filters and traffic rules
    """

    id: int
    name: str
    latitude: float
    longitude: float
    landmark_type: LandmarkType = LandmarkType.GENERAL

    def __post_init__(self):
        """Validate location after initialization."""
        if isinstance(self.id, int) and self.id < 0:
            raise ValidationError(f"location id must be non-negative, got {self.id}")
        if isinstance(self.name, str) and not self.name.strip():
            raise ValidationError("location name must be a non-empty string")
        if isinstance(self.latitude, (int, float)) and not -90.0 <= self.latitude <= 90.0:
            raise ValidationError(f"latitude {self.latitude} must be between -90 and 90")
        if isinstance(self.longitude, (int, float)) and not -180.0 <= self.longitude <= 180.0:
            raise ValidationError(f"longitude {self.longitude} must be between -180 and 180")

    @property
    def coordinates(self) -> tuple:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return self.name
