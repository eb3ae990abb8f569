"""
Routing engine facade.

The engine is the narrow surface presentation layers talk to: it answers
route queries with plain data, applies traffic regimes and keeps the
all-pairs table in step with the graph.

Every public operation runs under one re-entrant lock, so a traffic update
and the table rebuild it triggers are atomic with respect to queries: no
query can see new edge weights together with an old next-hop table.
"""

import logging
from threading import RLock
from typing import List, Mapping, Optional, Tuple, Union

from .config import RoutingConfig
from .enums import CompassDirection, LandmarkType, TimeOfDay, TrafficCondition
from .geo import compass_direction
from .graph import LocationGraph
from .graph_paths.algorithms import AllPairsTable, AStarFinder, DijkstraFinder
from .graph_paths.alternatives import AlternativeRouteGenerator
from .graph_paths.benchmark import BenchmarkHarness
from .graph_paths.models import DirectionStep, Route, RoutingResult

logger = logging.getLogger(__name__)

LandmarkFilter = Optional[Union[LandmarkType, str]]


class RoutingEngine:
    """
    Multi-algorithm routing over a LocationGraph.

    The all-pairs table is built on construction and rebuilt synchronously
    by every traffic mutation made through the engine.

    Attributes:
        graph: The location graph (owned by the caller, mutated only through the engine)
        config: Routing configuration
    """

    def __init__(self, graph: LocationGraph, config: Optional[RoutingConfig] = None):
        self.graph = graph
        self.config = config or RoutingConfig()
        self._lock = RLock()

        speed = self.config.walking_speed_m_per_min
        memory = self.config.max_memory_mb
        self.dijkstra = DijkstraFinder(graph, walking_speed=speed, max_memory_mb=memory)
        self.astar = AStarFinder(graph, walking_speed=speed, max_memory_mb=memory)
        self.table = AllPairsTable(graph, walking_speed=speed, max_memory_mb=memory)
        self.alternatives = AlternativeRouteGenerator(graph, self.dijkstra, self.config)
        self.benchmark = BenchmarkHarness(self.dijkstra, self.astar, self.table)

    @property
    def all_pairs_build_time_us(self) -> int:
        """Duration of the latest all-pairs build in microseconds."""
        with self._lock:
            return self.table.build_time_us

    def _ensure_fresh_table(self) -> None:
        if self.table.is_stale():
            logger.warning(
                "Graph changed outside the engine (generation %d -> %d); rebuilding",
                self.table.generation,
                self.graph.generation,
            )
            self.table.build()

    def find_routes(
        self, source_id: int, dest_id: int, landmark_filter: LandmarkFilter = None
    ) -> RoutingResult:
        """
        Compute the best route, the ranked alternatives and the benchmark.

        Args:
            source_id: Starting location id
            dest_id: Target location id
            landmark_filter: Optional category to route through for the
                via-landmark alternative

        Returns:
            A RoutingResult; unreachable pairs give empty routes and
            ``reachable == False``

        Raises:
            NodeNotFoundError: If either id is unknown
            ValidationError: If ``landmark_filter`` is an unknown label
        """
        if isinstance(landmark_filter, str):
            landmark_filter = LandmarkType.parse(landmark_filter)

        with self._lock:
            self.graph.get_node(source_id)
            self.graph.get_node(dest_id)
            self._ensure_fresh_table()

            run = self.benchmark.run(source_id, dest_id)
            alternatives = self.alternatives.generate(
                source_id,
                dest_id,
                landmark_filter=landmark_filter,
                primary=run.routes[self.dijkstra.name],
            )

        optimal = alternatives[0] if alternatives else Route.empty()
        logger.debug(
            "find_routes %s -> %s: %d alternatives, reachable=%s",
            source_id,
            dest_id,
            len(alternatives),
            bool(alternatives),
        )
        return RoutingResult(
            optimal=optimal, alternatives=alternatives, algorithm_results=run.results
        )

    def find_routes_by_name(
        self, source_name: str, dest_name: str, landmark_filter: LandmarkFilter = None
    ) -> RoutingResult:
        """
        Same as ``find_routes`` with locations given by display name.

        Raises:
            NodeNotFoundError: If either name is unknown
        """
        with self._lock:
            source = self.graph.get_node_by_name(source_name)
            dest = self.graph.get_node_by_name(dest_name)
            return self.find_routes(source.id, dest.id, landmark_filter)

    def update_traffic_conditions(self, time_of_day: Union[TimeOfDay, str]) -> None:
        """Recompute every edge's traffic for ``time_of_day`` and rebuild the table."""
        if isinstance(time_of_day, str):
            time_of_day = TimeOfDay.parse(time_of_day)

        with self._lock:
            changed = self.graph.update_traffic_conditions(time_of_day)
            self.table.build()
        logger.info("Traffic set to %s (%d directed edges changed)", time_of_day.label, changed)

    def restore_traffic_conditions(
        self, conditions: Mapping[Tuple[int, int], TrafficCondition]
    ) -> None:
        """Reinstate per-direction conditions (e.g. as loaded) and rebuild the table."""
        with self._lock:
            changed = self.graph.reset_conditions(conditions)
            self.table.build()
        logger.info("Traffic restored (%d directed edges changed)", changed)

    def bearing(self, from_id: int, to_id: int) -> CompassDirection:
        """
        Compass direction from one location to another.

        Raises:
            NodeNotFoundError: If either id is unknown
        """
        start = self.graph.get_node(from_id)
        end = self.graph.get_node(to_id)
        return compass_direction(start.latitude, start.longitude, end.latitude, end.longitude)

    def directions(self, route: Route) -> List[DirectionStep]:
        """Turn-by-turn steps for a route: one per edge, with its compass bearing."""
        steps = []
        with self._lock:
            for current, following in zip(route.path, route.path[1:]):
                edge = self.graph.get_edge_safe(current.id, following.id)
                steps.append(
                    DirectionStep(
                        from_name=current.name,
                        to_name=following.name,
                        distance=edge.distance,
                        bearing=self.bearing(current.id, following.id),
                    )
                )
        return steps

    def location_names(self) -> List[str]:
        """Display names of all locations, sorted."""
        return sorted(location.name for location in self.graph.get_nodes())


def build_engine(graph: LocationGraph, config: Optional[RoutingConfig] = None) -> RoutingEngine:
    """Construct an engine over an already populated graph (builds the all-pairs table)."""
    return RoutingEngine(graph, config)
