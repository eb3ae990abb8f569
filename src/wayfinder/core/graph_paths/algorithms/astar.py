"""
A* search guided by great-circle distance.
"""

import logging
from typing import Dict, Optional, Tuple

from ...geo import haversine_distance
from ...models import Location
from ...traffic import adjusted_distance
from ..base import RouteFinder
from ..models import PerformanceMetrics, Route
from ..utils import EPSILON, PriorityQueue, is_better_cost, reconstruct_path

logger = logging.getLogger(__name__)


class AStarFinder(RouteFinder):
    """
    A* over traffic-adjusted edge costs.

    The heuristic is the haversine distance to the destination, scaled by the
    smallest ratio of adjusted edge cost to straight-line edge length (capped
    at 1.0). On a map where no walkway is shorter than the straight line
    between its ends the scale is 1.0 and the heuristic is plain haversine.
    Either way it never overestimates the remaining adjusted distance under
    any traffic regime, so the route is optimal.
    """

    name = "A*"

    def __init__(self, graph, **kwargs):
        super().__init__(graph, **kwargs)
        self._scale: Optional[Tuple[int, float]] = None

    def heuristic_scale(self) -> float:
        """Largest factor keeping straight-line distance below every edge cost."""
        generation = self.graph.generation
        if self._scale is not None and self._scale[0] == generation:
            return self._scale[1]

        scale = 1.0
        for edge in self.graph.iter_edges():
            a = self.graph.get_node(edge.from_id)
            b = self.graph.get_node(edge.to_id)
            straight = haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
            if straight > 0:
                scale = min(scale, adjusted_distance(edge) / straight)
        if scale < 1.0:
            logger.debug("A* heuristic scaled by %.4f at generation %d", scale, generation)
        self._scale = (generation, scale)
        return scale

    def heuristic(self, location: Location, target: Location) -> float:
        """Lower bound in meters on the adjusted cost from ``location`` to ``target``."""
        return self.heuristic_scale() * haversine_distance(
            location.latitude, location.longitude, target.latitude, target.longitude
        )

    def find_route(
        self,
        source_id: int,
        dest_id: int,
        metrics: Optional[PerformanceMetrics] = None,
        **kwargs,
    ) -> Route:
        """
        Find the route with the lowest adjusted distance.

        Returns:
            The route, a single-location route when source equals destination,
            or an empty route if the destination cannot be reached

        Raises:
            NodeNotFoundError: If either id is unknown
        """
        source, target = self.validate_nodes(source_id, dest_id)
        if source_id == dest_id:
            if metrics is not None:
                metrics.nodes_explored = 0
            return Route.from_path([source], self.graph, walking_speed=self.walking_speed)

        h_cache: Dict[int, float] = {}

        def h(node_id: int) -> float:
            if node_id not in h_cache:
                h_cache[node_id] = self.heuristic(self.graph.get_node(node_id), target)
            return h_cache[node_id]

        g_score: Dict[int, float] = {source_id: 0.0}
        predecessors: Dict[int, int] = {}
        open_set = PriorityQueue()
        open_set.push(source_id, h(source_id))
        nodes_explored = 0
        found = False

        with self._search_context(metrics):
            while not open_set.empty():
                self.memory_manager.check_memory()
                entry = open_set.pop()
                current = entry.node_id

                if entry.priority > g_score[current] + h(current) + EPSILON:
                    continue  # superseded by a cheaper push
                nodes_explored += 1

                if current == dest_id:
                    found = True
                    logger.debug(
                        "A* reached %s from %s at cost %.2f after %d pops",
                        dest_id,
                        source_id,
                        g_score[current],
                        nodes_explored,
                    )
                    break

                for edge in self.graph.get_edges(current):
                    tentative_g = g_score[current] + adjusted_distance(edge)
                    if edge.to_id not in g_score or is_better_cost(
                        tentative_g, g_score[edge.to_id]
                    ):
                        g_score[edge.to_id] = tentative_g
                        predecessors[edge.to_id] = current
                        open_set.push(edge.to_id, tentative_g + h(edge.to_id))

        if metrics is not None:
            metrics.nodes_explored = nodes_explored

        node_ids = reconstruct_path(predecessors, source_id, dest_id) if found else None
        if node_ids is None:
            logger.debug("A* found no route from %s to %s", source_id, dest_id)
            return Route.empty()
        return self._build_route(node_ids, g_score[dest_id])
