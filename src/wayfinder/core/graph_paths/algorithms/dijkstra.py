"""
Dijkstra's algorithm over traffic-adjusted edge costs.
"""

import logging
from typing import AbstractSet, Dict, Optional

from ...enums import TrafficCondition
from ...traffic import adjusted_distance
from ..base import RouteFinder
from ..models import PerformanceMetrics, Route
from ..utils import PriorityQueue, is_better_cost, reconstruct_path

logger = logging.getLogger(__name__)


class DijkstraFinder(RouteFinder):
    """
    Single-source shortest route with optional pruning.

    Edges whose condition is in ``excluded_conditions`` are never relaxed and
    locations in ``excluded_nodes`` are never expanded, except the source and
    destination which are always allowed. The search stops as soon as the
    destination is popped with its final cost.
    """

    name = "Dijkstra"

    def find_route(
        self,
        source_id: int,
        dest_id: int,
        metrics: Optional[PerformanceMetrics] = None,
        excluded_conditions: Optional[AbstractSet[TrafficCondition]] = None,
        excluded_nodes: Optional[AbstractSet[int]] = None,
        **kwargs,
    ) -> Route:
        """
        Find the route with the lowest adjusted distance.

        Args:
            source_id: Starting location id
            dest_id: Target location id
            metrics: Optional metrics to fill with exploration counters
            excluded_conditions: Traffic conditions whose edges are pruned
            excluded_nodes: Location ids that may not appear on the route

        Returns:
            The route, a single-location route when source equals destination,
            or an empty route if the destination cannot be reached

        Raises:
            NodeNotFoundError: If either id is unknown
        """
        source, _ = self.validate_nodes(source_id, dest_id)
        if source_id == dest_id:
            if metrics is not None:
                metrics.nodes_explored = 0
            return Route.from_path([source], self.graph, walking_speed=self.walking_speed)

        excluded_conditions = excluded_conditions or frozenset()
        blocked = set(excluded_nodes or ()) - {source_id, dest_id}

        distances: Dict[int, float] = {source_id: 0.0}
        predecessors: Dict[int, int] = {}
        frontier = PriorityQueue()
        frontier.push(source_id, 0.0)
        nodes_explored = 0

        with self._search_context(metrics):
            while not frontier.empty():
                self.memory_manager.check_memory()
                entry = frontier.pop()
                current = entry.node_id

                if entry.priority > distances.get(current, float("inf")):
                    continue  # stale entry
                nodes_explored += 1

                if current == dest_id:
                    logger.debug(
                        "Dijkstra reached %s from %s at cost %.2f after %d pops",
                        dest_id,
                        source_id,
                        entry.priority,
                        nodes_explored,
                    )
                    break

                for edge in self.graph.get_edges(current):
                    if edge.condition in excluded_conditions or edge.to_id in blocked:
                        continue
                    new_dist = entry.priority + adjusted_distance(edge)
                    if edge.to_id not in distances or is_better_cost(
                        new_dist, distances[edge.to_id]
                    ):
                        distances[edge.to_id] = new_dist
                        predecessors[edge.to_id] = current
                        frontier.push(edge.to_id, new_dist)

        if metrics is not None:
            metrics.nodes_explored = nodes_explored

        node_ids = reconstruct_path(predecessors, source_id, dest_id)
        if node_ids is None:
            logger.debug("Dijkstra found no route from %s to %s", source_id, dest_id)
            return Route.empty()
        return self._build_route(node_ids, distances[dest_id])
