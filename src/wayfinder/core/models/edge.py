"""
Edge models for the routing system.

An Edge is one direction of a walkway between two locations. The graph always
stores edges in pairs (u -> v and v -> u) with the same distance; the traffic
condition of each direction is mutable and may diverge after a traffic update,
because the recompute rule looks at the destination of each direction.
"""

import math
from dataclasses import dataclass

from ...utils.validation.base import validate_dataclass
from ..enums import TrafficCondition
from ..exceptions import GraphOperationError, ValidationError


@validate_dataclass
@dataclass(eq=False)
class Edge:
    """
    Directed half of an undirected walkway.

    Attributes:
        from_id (int): Source location id
        to_id (int): Destination location id
        distance (float): Base physical length in meters, > 0, traffic-independent
        condition (TrafficCondition): Current congestion level (mutable)
    """

    from_id: int
    to_id: int
    distance: float
    condition: TrafficCondition = TrafficCondition.LIGHT

    def __post_init__(self):
        """Validate edge after initialization."""
        if isinstance(self.distance, (int, float)) and not (
            math.isfinite(self.distance) and self.distance > 0
        ):
            raise ValidationError(f"edge distance must be positive and finite, got {self.distance}")
        if self.from_id == self.to_id:
            raise GraphOperationError(f"edge cannot connect location {self.from_id} to itself")
        if not isinstance(self.condition, TrafficCondition):
            raise TypeError("condition must be a TrafficCondition enum")

    def __setattr__(self, name, value):
        # distance and endpoints are fixed once set; only the condition moves
        if name in ("from_id", "to_id", "distance") and name in self.__dict__:
            raise AttributeError(f"Edge.{name} is immutable")
        super().__setattr__(name, value)

    @property
    def endpoints(self) -> tuple:
        """(from_id, to_id) pair."""
        return (self.from_id, self.to_id)

    def __repr__(self) -> str:
        return (
            f"Edge({self.from_id} -> {self.to_id}, {self.distance:g} m, "
            f"{self.condition.label})"
        )
