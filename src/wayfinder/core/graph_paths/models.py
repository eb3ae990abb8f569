"""
Data models for route finding.

This module provides the core data structures used throughout the route finding package:
- Route: An ordered walk through the graph with its derived metrics
- DirectionStep: One leg of turn-by-turn directions
- PerformanceMetrics: Timing and exploration counters of a single search
- AlgorithmResult: Benchmark record of one algorithm for one query
- RoutingResult: Everything the engine returns for a query
- PathValidationError: Exception for inconsistent paths

Route identity is its ordered sequence of location ids; two routes over the
same locations compare equal regardless of how their metrics were obtained.

Example:
    >>> route = Route.from_path([a, b, c], graph)
    >>> route.node_ids
    [0, 1, 2]
    >>> route.total_distance
    200.0
"""

from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from ..config import DEFAULT_WALKING_SPEED
from ..enums import CompassDirection, TrafficCondition
from ..models import Location
from ..traffic import adjusted_distance as edge_adjusted_distance
from ..traffic import estimated_time as edge_estimated_time


class PathValidationError(Exception):
    """
    Raised when a sequence of locations is not a walk over existing edges.

    This exception indicates issues such as:
    - Consecutive locations with no edge between them
    - Non-Location entries in the path
    """


@dataclass(frozen=True, eq=False)
class Route:
    """
    An ordered walk through the location graph.

    An empty route means "no path". A single-location route is the trivial
    walk from a location to itself and has zero distance.

    Attributes:
        path: Locations in order of traversal
        total_distance: Sum of base edge distances in meters
        estimated_time: Sum of per-edge walking minutes, traffic-adjusted
        adjusted_distance: Traffic-adjusted cost, as accumulated by the search
    """

    path: Tuple[Location, ...] = ()
    total_distance: float = 0.0
    estimated_time: float = 0.0
    adjusted_distance: float = 0.0

    def __post_init__(self):
        """Validate initialization parameters."""
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))
        if not all(isinstance(location, Location) for location in self.path):
            raise TypeError("path must contain only Location objects")

    @classmethod
    def empty(cls) -> "Route":
        """The "no path" route."""
        return cls()

    @classmethod
    def from_path(
        cls,
        path: Sequence[Location],
        graph: Any,
        adjusted_distance: Optional[float] = None,
        walking_speed: float = DEFAULT_WALKING_SPEED,
    ) -> "Route":
        """
        Build a route and derive its metrics from the graph's current edges.

        Args:
            path: Locations in order of traversal
            graph: LocationGraph the path walks over
            adjusted_distance: Cost recorded by the search; recomputed from the
                edges when omitted
            walking_speed: Meters per minute for the time estimate

        Raises:
            PathValidationError: If two consecutive locations are not connected
        """
        total = 0.0
        minutes = 0.0
        adjusted = 0.0
        for current, following in zip(path, path[1:]):
            edge = graph.get_edge(current.id, following.id)
            if edge is None:
                raise PathValidationError(
                    f"No edge between {current.name} ({current.id}) "
                    f"and {following.name} ({following.id})"
                )
            total += edge.distance
            minutes += edge_estimated_time(edge, walking_speed)
            adjusted += edge_adjusted_distance(edge)

        return cls(
            path=tuple(path),
            total_distance=total,
            estimated_time=minutes,
            adjusted_distance=adjusted if adjusted_distance is None else adjusted_distance,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self.node_ids == other.node_ids

    def __hash__(self) -> int:
        return hash(tuple(self.node_ids))

    def __len__(self) -> int:
        """Number of locations on the route."""
        return len(self.path)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.path)

    def __getitem__(self, index: int) -> Location:
        return self.path[index]

    def __bool__(self) -> bool:
        return bool(self.path)

    @property
    def node_ids(self) -> List[int]:
        """Location ids in order of traversal; this is the route's identity."""
        return [location.id for location in self.path]

    @property
    def is_empty(self) -> bool:
        return not self.path

    @property
    def source(self) -> Optional[Location]:
        return self.path[0] if self.path else None

    @property
    def destination(self) -> Optional[Location]:
        return self.path[-1] if self.path else None

    def score(self, time_weight: float) -> float:
        """Ranking score: meters plus estimated minutes weighted as meters."""
        return self.total_distance + self.estimated_time * time_weight

    def join(self, other: "Route", graph: Any, walking_speed: float = DEFAULT_WALKING_SPEED) -> "Route":
        """
        Concatenate two legs that meet at a shared junction location.

        The junction appears once in the result and the adjusted distances of
        both legs are summed.

        Raises:
            PathValidationError: If this route does not end where ``other`` starts
        """
        if self.is_empty or other.is_empty:
            raise PathValidationError("cannot join an empty route")
        if self.path[-1].id != other.path[0].id:
            raise PathValidationError(
                f"legs do not meet: {self.path[-1].name} != {other.path[0].name}"
            )
        return Route.from_path(
            self.path + other.path[1:],
            graph,
            adjusted_distance=self.adjusted_distance + other.adjusted_distance,
            walking_speed=walking_speed,
        )

    def average_traffic(self, graph: Any) -> TrafficCondition:
        """
        Traffic condition summarising the route.

        Averages the distance multipliers of the route's edges and buckets the
        mean (>= 1.4 heavy, >= 1.1 moderate, otherwise light). Routes without
        edges are light.
        """
        multipliers = []
        for current, following in zip(self.path, self.path[1:]):
            edge = graph.get_edge(current.id, following.id)
            if edge is not None:
                multipliers.append(edge.condition.distance_multiplier)
        if not multipliers:
            return TrafficCondition.LIGHT
        return TrafficCondition.from_multiplier(sum(multipliers) / len(multipliers))

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the route."""
        return {
            "node_ids": self.node_ids,
            "names": [location.name for location in self.path],
            "total_distance": self.total_distance,
            "adjusted_distance": self.adjusted_distance,
            "estimated_time": self.estimated_time,
        }


@dataclass(frozen=True)
class DirectionStep:
    """One leg of turn-by-turn directions."""

    from_name: str
    to_name: str
    distance: float
    bearing: CompassDirection

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_name,
            "to": self.to_name,
            "distance": self.distance,
            "bearing": self.bearing.label,
        }


@dataclass
class PerformanceMetrics:
    """
    Container for route finding performance metrics.

    Attributes:
        operation: Name of the route finding operation
        start_time: perf_counter() value at operation start
        end_time: perf_counter() value at operation end (0.0 if not completed)
        nodes_explored: Number of frontier pops during the search
        max_memory_used: Peak resident memory during the operation (bytes)

    Example:
        >>> metrics = PerformanceMetrics(operation="dijkstra")
        >>> # ... perform operation ...
        >>> metrics.finish()
        >>> print(f"Operation took {metrics.duration_us} us")
    """

    operation: str
    start_time: float = field(default_factory=perf_counter)
    end_time: float = 0.0
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    def finish(self) -> None:
        self.end_time = perf_counter()

    @property
    def duration_us(self) -> int:
        """Operation duration in whole microseconds."""
        if not self.end_time:
            return 0
        return int((self.end_time - self.start_time) * 1_000_000)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "duration_us": self.duration_us,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Benchmark record of one algorithm answering one query.

    Attributes:
        algorithm_name: "Dijkstra", "A*" or "Floyd-Warshall"
        distance: Base distance of the route found, 0 if unreachable
        adjusted_distance: Traffic-adjusted cost of the route found, 0 if unreachable
        execution_time: Wall-clock microseconds
        nodes_explored: Frontier pops, for the searches that have a frontier
    """

    algorithm_name: str
    distance: float
    execution_time: int
    adjusted_distance: float = 0.0
    nodes_explored: Optional[int] = None

    @property
    def efficiency(self) -> str:
        """Coarse rating of the execution time."""
        if self.execution_time < 1_000:
            return "Excellent"
        if self.execution_time < 5_000:
            return "Good"
        if self.execution_time < 10_000:
            return "Fair"
        return "Poor"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm_name,
            "distance": self.distance,
            "adjusted_distance": self.adjusted_distance,
            "execution_time_us": self.execution_time,
            "nodes_explored": self.nodes_explored,
            "efficiency": self.efficiency,
        }


@dataclass(frozen=True)
class RoutingResult:
    """
    Result of a routing query.

    Attributes:
        optimal: Best-ranked route, empty if the destination is unreachable
        alternatives: Distinct candidate routes, best first (includes ``optimal``)
        algorithm_results: Benchmark records in the order Dijkstra, A*, Floyd-Warshall
    """

    optimal: Route
    alternatives: List[Route] = field(default_factory=list)
    algorithm_results: List[AlgorithmResult] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        """False only when no route connects source and destination."""
        return not self.optimal.is_empty

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reachable": self.reachable,
            "optimal": self.optimal.to_dict(),
            "alternatives": [route.to_dict() for route in self.alternatives],
            "algorithms": [result.to_dict() for result in self.algorithm_results],
        }
