"""
Location graph with an adjacency list representation.

This module provides the LocationGraph class that owns every location and
walkway of a map. The graph is undirected at the API level: adding a walkway
stores two directed Edge objects with the same distance and initial traffic
condition. Each direction keeps its own condition afterwards, because traffic
recomputation looks at the destination of each direction.

Locations and walkways are only ever added, and edge conditions are the only
values that change in place. Every addition or change bumps a generation
counter so derived data (the all-pairs table) can tell whether it still
reflects the current graph.
"""

import logging
from threading import RLock
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .enums import LandmarkType, TimeOfDay, TrafficCondition
from .exceptions import DuplicateResourceError, EdgeNotFoundError, NodeNotFoundError
from .models import Edge, Location
from .traffic import recompute_condition

logger = logging.getLogger(__name__)


class LocationGraph:
    """
    Weighted, undirected location graph keyed by small integer ids.

    Attributes:
        _nodes (Dict[int, Location]): Locations by id, in insertion order
        _adjacency (Dict[int, List[Edge]]): Outgoing edges per location, in insertion order
        _lock (RLock): Lock for thread-safe state access
        _generation (int): Incremented whenever a location, walkway or edge condition changes
    """

    def __init__(self):
        self._nodes: Dict[int, Location] = {}
        self._adjacency: Dict[int, List[Edge]] = {}
        self._lock = RLock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Counter of structural and traffic mutations applied so far."""
        with self._lock:
            return self._generation

    def add_node(
        self,
        node_id: int,
        name: str,
        latitude: float,
        longitude: float,
        landmark_type: LandmarkType = LandmarkType.GENERAL,
    ) -> Location:
        """
        Register a new location.

        Raises:
            DuplicateResourceError: If ``node_id`` is already registered
            ValidationError: If a field value is out of range
        """
        return self.add_location(Location(node_id, name, latitude, longitude, landmark_type))

    def add_location(self, location: Location) -> Location:
        """Register an already constructed Location."""
        with self._lock:
            if location.id in self._nodes:
                raise DuplicateResourceError(f"Location id {location.id} is already registered")
            self._nodes[location.id] = location
            self._adjacency[location.id] = []
            self._generation += 1
            return location

    def add_edge(
        self,
        source_id: int,
        dest_id: int,
        distance: float,
        condition: TrafficCondition = TrafficCondition.LIGHT,
    ) -> Tuple[Edge, Edge]:
        """
        Add a walkway between two registered locations.

        Both directions are inserted with identical distance and condition.

        Returns:
            The (source -> dest, dest -> source) edge pair

        Raises:
            NodeNotFoundError: If either endpoint is not registered
            DuplicateResourceError: If the two locations are already connected
        """
        with self._lock:
            if source_id not in self._nodes:
                raise NodeNotFoundError(f"Source location {source_id} not found in the graph")
            if dest_id not in self._nodes:
                raise NodeNotFoundError(f"Destination location {dest_id} not found in the graph")

            forward = Edge(source_id, dest_id, distance, condition)
            backward = Edge(dest_id, source_id, distance, condition)
            if any(edge.to_id == dest_id for edge in self._adjacency[source_id]):
                raise DuplicateResourceError(
                    f"Locations {source_id} and {dest_id} are already connected"
                )

            self._adjacency[source_id].append(forward)
            self._adjacency[dest_id].append(backward)
            self._generation += 1
            return forward, backward

    def has_node(self, node_id: int) -> bool:
        """Check if a location id is registered."""
        with self._lock:
            return node_id in self._nodes

    def get_node(self, node_id: int) -> Location:
        """
        Look up a location by id.

        Raises:
            NodeNotFoundError: If the id is unknown
        """
        with self._lock:
            try:
                return self._nodes[node_id]
            except KeyError:
                raise NodeNotFoundError(f"Location {node_id} not found in the graph") from None

    def get_node_by_name(self, name: str) -> Location:
        """
        Look up a location by display name.

        Names are not guaranteed unique; the first location registered with
        the name wins.

        Raises:
            NodeNotFoundError: If no location has this name
        """
        with self._lock:
            for location in self._nodes.values():
                if location.name == name:
                    return location
        raise NodeNotFoundError(f"Location named '{name}' not found in the graph")

    def get_nodes(self) -> List[Location]:
        """All locations in insertion order."""
        with self._lock:
            return list(self._nodes.values())

    def get_node_ids(self) -> List[int]:
        """All location ids in insertion order."""
        with self._lock:
            return list(self._nodes)

    def nodes_of_type(self, landmark_type: LandmarkType) -> List[Location]:
        """Locations of the given category, in insertion order."""
        with self._lock:
            return [loc for loc in self._nodes.values() if loc.landmark_type is landmark_type]

    def get_node_count(self) -> int:
        with self._lock:
            return len(self._nodes)

    def get_edges(self, node_id: int) -> List[Edge]:
        """Outgoing edges of a location; empty if the id is unknown."""
        with self._lock:
            return list(self._adjacency.get(node_id, ()))

    def iter_edges(self) -> Iterator[Edge]:
        """Every directed edge in the graph."""
        with self._lock:
            edges = [edge for out in self._adjacency.values() for edge in out]
        return iter(edges)

    def get_edge_count(self) -> int:
        """Number of directed edges (twice the number of walkways)."""
        with self._lock:
            return sum(len(out) for out in self._adjacency.values())

    def get_edge(self, source_id: int, dest_id: int) -> Optional[Edge]:
        """The first edge from ``source_id`` to ``dest_id``, or None."""
        with self._lock:
            for edge in self._adjacency.get(source_id, ()):
                if edge.to_id == dest_id:
                    return edge
            return None

    def has_edge(self, source_id: int, dest_id: int) -> bool:
        return self.get_edge(source_id, dest_id) is not None

    def get_edge_safe(self, source_id: int, dest_id: int) -> Edge:
        """Get the edge between two locations, raising if it does not exist."""
        with self._lock:
            if source_id not in self._nodes:
                raise NodeNotFoundError(f"Source location {source_id} not found in the graph")
            if dest_id not in self._nodes:
                raise NodeNotFoundError(f"Destination location {dest_id} not found in the graph")
            edge = self.get_edge(source_id, dest_id)
            if edge is None:
                raise EdgeNotFoundError(f"No edge exists from {source_id} to {dest_id}")
            return edge

    def set_condition(self, source_id: int, dest_id: int, condition: TrafficCondition) -> None:
        """Change the condition of one direction of a walkway."""
        with self._lock:
            edge = self.get_edge_safe(source_id, dest_id)
            if edge.condition is not condition:
                edge.condition = condition
                self._generation += 1

    def update_traffic_conditions(self, time_of_day: TimeOfDay) -> int:
        """
        Recompute every edge's condition for ``time_of_day``.

        Each direction is evaluated independently against its own destination.
        Applying the same time of day twice yields identical conditions.

        Returns:
            Number of directed edges whose condition changed
        """
        with self._lock:
            changed = 0
            for out in self._adjacency.values():
                for edge in out:
                    destination = self._nodes[edge.to_id]
                    condition = recompute_condition(destination.landmark_type, time_of_day)
                    if edge.condition is not condition:
                        edge.condition = condition
                        changed += 1
            if changed:
                self._generation += 1
            logger.debug(
                "Traffic recomputed for %s: %d of %d edges changed",
                time_of_day.label,
                changed,
                self.get_edge_count(),
            )
            return changed

    def reset_conditions(self, conditions: Mapping[Tuple[int, int], TrafficCondition]) -> int:
        """
        Restore per-direction conditions, e.g. the ones declared in a data file.

        Edges absent from ``conditions`` are left untouched.

        Returns:
            Number of directed edges whose condition changed
        """
        with self._lock:
            changed = 0
            for out in self._adjacency.values():
                for edge in out:
                    condition = conditions.get(edge.endpoints)
                    if condition is not None and edge.condition is not condition:
                        edge.condition = condition
                        changed += 1
            if changed:
                self._generation += 1
            return changed

    def __len__(self) -> int:
        return self.get_node_count()

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, int) and self.has_node(node_id)
