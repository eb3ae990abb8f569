"""
Enumerations for location categories, traffic and compass directions.

This module defines the core enumeration types used throughout the routing system:
- LandmarkType: Classification of a location, used for filtering and traffic rules
- TrafficCondition: Congestion level of an edge, carrying its cost multipliers
- TimeOfDay: Coarse traffic regime driving the traffic recompute rules
- CompassDirection: The eight octant labels produced by the bearing helper

All enums accept loosely formatted labels through ``parse`` so that CSV files,
command-line arguments and interactive callers can use "Morning Rush",
"morning-rush" or "MORNING_RUSH" interchangeably.
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar

from .exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def _normalize(label: str) -> str:
    return label.strip().upper().replace("-", "_").replace(" ", "_")


def _parse_label(enum_cls: Type[E], label: str, aliases: Optional[Dict[str, str]] = None) -> E:
    """Resolve a label against member names, values and aliases."""
    if isinstance(label, enum_cls):
        return label
    if not isinstance(label, str):
        raise ValidationError(f"{enum_cls.__name__} label must be a string, got {label!r}")

    key = _normalize(label)
    if aliases and key in aliases:
        return enum_cls[aliases[key]]
    for member in enum_cls:
        if key == member.name or key == _normalize(str(member.label)):
            return member
    raise ValidationError(f"Unknown {enum_cls.__name__} '{label}'")


class LandmarkType(Enum):
    """
    Enumeration of location categories.

    The category of a route's destination node drives the traffic recompute
    rules, and callers may ask for routes via a location of a given category.
    """

    ENTRANCE = "Entrance"
    ACADEMIC = "Academic"
    RESIDENTIAL = "Residential"
    DINING = "Dining"
    RECREATION = "Recreation"
    SERVICES = "Services"
    ADMINISTRATIVE = "Administrative"
    GENERAL = "General"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: str) -> "LandmarkType":
        """Parse a category label such as ``"Dining"`` or ``"DINING"``."""
        return _parse_label(cls, label)


class TrafficCondition(Enum):
    """
    Congestion level of an edge.

    Each member carries ``(distance_multiplier, time_multiplier)``; both grow
    strictly from LIGHT to HEAVY. The distance multiplier scales the search
    cost, the time multiplier scales the walking-time estimate.
    """

    LIGHT = ("Light", 1.0, 1.0)
    MODERATE = ("Moderate", 1.2, 1.3)
    HEAVY = ("Heavy", 1.5, 1.8)

    def __init__(self, label: str, distance_multiplier: float, time_multiplier: float):
        self.label = label
        self.distance_multiplier = distance_multiplier
        self.time_multiplier = time_multiplier

    @classmethod
    def parse(cls, label: str) -> "TrafficCondition":
        """Parse a condition label such as ``"Heavy"`` or ``"HEAVY"``."""
        return _parse_label(cls, label)

    @classmethod
    def from_multiplier(cls, multiplier: float) -> "TrafficCondition":
        """Bucket an averaged distance multiplier back into a condition."""
        if multiplier >= 1.4:
            return cls.HEAVY
        if multiplier >= 1.1:
            return cls.MODERATE
        return cls.LIGHT


class TimeOfDay(Enum):
    """Traffic regime selector."""

    NORMAL = "Normal"
    MORNING_RUSH = "Morning Rush"
    EVENING_RUSH = "Evening Rush"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: str) -> "TimeOfDay":
        """Parse ``"Morning Rush"``, ``"morning-rush"``, ``"NORMAL_HOURS"`` and friends."""
        return _parse_label(cls, label, aliases={"NORMAL_HOURS": "NORMAL"})


class CompassDirection(Enum):
    """Eight-way compass octants, clockwise from North."""

    NORTH = "North"
    NORTH_EAST = "North-East"
    EAST = "East"
    SOUTH_EAST = "South-East"
    SOUTH = "South"
    SOUTH_WEST = "South-West"
    WEST = "West"
    NORTH_WEST = "North-West"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_octant(cls, octant: int) -> "CompassDirection":
        return list(cls)[octant % 8]
