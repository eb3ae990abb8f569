"""
Alternative route generation.

Builds a small set of meaningfully different routes between two locations,
each produced by a Dijkstra variant, then removes duplicates and ranks them.
Candidates, in generation order:

1. primary      -- unrestricted cheapest route
2. via-landmark -- cheapest detour through a location of the requested category
3. low-traffic  -- cheapest route avoiding heavily congested edges
4. divergent    -- cheapest route forced off the primary route's first hop
5. scenic       -- cheapest detour through a recreation location

Routes are ranked by ``total_distance + estimated_time * time_weight``. The
sort is stable, so equal scores keep generation order and output is
deterministic.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..config import RoutingConfig
from ..enums import LandmarkType
from .algorithms.dijkstra import DijkstraFinder
from .models import Route

logger = logging.getLogger(__name__)

PRIMARY = "primary"
VIA_LANDMARK = "via-landmark"
LOW_TRAFFIC = "low-traffic"
DIVERGENT = "divergent"
SCENIC = "scenic"


class AlternativeRouteGenerator:
    """
    Produces ranked, deduplicated candidate routes.

    Attributes:
        graph: LocationGraph to route over
        dijkstra: Finder used for every candidate
        config: Ranking weight, candidate cap, scenic category and avoided conditions
    """

    def __init__(
        self,
        graph: Any,
        dijkstra: Optional[DijkstraFinder] = None,
        config: Optional[RoutingConfig] = None,
    ):
        self.graph = graph
        self.config = config or RoutingConfig()
        self.dijkstra = dijkstra or DijkstraFinder(
            graph,
            walking_speed=self.config.walking_speed_m_per_min,
            max_memory_mb=self.config.max_memory_mb,
        )

    def route_via_landmark(
        self, source_id: int, dest_id: int, landmark_type: LandmarkType
    ) -> Route:
        """
        Cheapest route from source to destination through a location of a category.

        Every location of ``landmark_type`` other than the endpoints is tried as
        the junction; the junction minimising the summed adjusted distance of
        both legs wins, the earliest registered one on ties.

        Returns:
            The joined route, or an empty route if no junction connects both legs
        """
        best: Optional[Tuple[Route, Route]] = None
        best_cost = float("inf")

        for landmark in self.graph.nodes_of_type(landmark_type):
            if landmark.id in (source_id, dest_id):
                continue
            first_leg = self.dijkstra.find_route(source_id, landmark.id)
            if first_leg.is_empty:
                continue
            second_leg = self.dijkstra.find_route(landmark.id, dest_id)
            if second_leg.is_empty:
                continue
            cost = first_leg.adjusted_distance + second_leg.adjusted_distance
            if cost < best_cost:
                best_cost = cost
                best = (first_leg, second_leg)

        if best is None:
            return Route.empty()
        return best[0].join(best[1], self.graph, walking_speed=self.config.walking_speed_m_per_min)

    def candidates(
        self,
        source_id: int,
        dest_id: int,
        landmark_filter: Optional[LandmarkType] = None,
        primary: Optional[Route] = None,
    ) -> List[Tuple[str, Route]]:
        """
        Generate labelled, non-empty candidates in generation order.

        Duplicates are kept here; ``generate`` removes them.

        Args:
            source_id: Starting location id
            dest_id: Target location id
            landmark_filter: Category for the via-landmark candidate, if any
            primary: Already computed unrestricted route, reused when given
        """
        if primary is None:
            primary = self.dijkstra.find_route(source_id, dest_id)
        found: List[Tuple[str, Route]] = []

        def add(kind: str, route: Route) -> None:
            if not route.is_empty:
                found.append((kind, route))

        add(PRIMARY, primary)
        if primary.is_empty or source_id == dest_id:
            # nothing connects the endpoints, or there is nowhere to go
            return found

        if landmark_filter is not None:
            add(VIA_LANDMARK, self.route_via_landmark(source_id, dest_id, landmark_filter))

        add(
            LOW_TRAFFIC,
            self.dijkstra.find_route(
                source_id, dest_id, excluded_conditions=self.config.avoid_conditions
            ),
        )

        if len(primary) > 2:
            add(
                DIVERGENT,
                self.dijkstra.find_route(source_id, dest_id, excluded_nodes={primary[1].id}),
            )

        add(SCENIC, self.route_via_landmark(source_id, dest_id, self.config.scenic_landmark))
        return found

    def rank(self, routes: List[Route]) -> List[Route]:
        """Stable sort by ranking score, best first."""
        weight = self.config.time_weight
        return sorted(routes, key=lambda route: route.score(weight))

    def generate(
        self,
        source_id: int,
        dest_id: int,
        landmark_filter: Optional[LandmarkType] = None,
        primary: Optional[Route] = None,
    ) -> List[Route]:
        """
        Distinct candidate routes, best first.

        Returns:
            At most ``config.max_alternatives`` routes with pairwise different
            location sequences; empty if the destination is unreachable
        """
        unique: Dict[Tuple[int, ...], Route] = {}
        for kind, route in self.candidates(source_id, dest_id, landmark_filter, primary):
            key = tuple(route.node_ids)
            if key in unique:
                logger.debug("Dropping %s candidate: duplicates an earlier route", kind)
                continue
            unique[key] = route

        ranked = self.rank(list(unique.values()))
        return ranked[: self.config.max_alternatives]
