"""
Benchmark harness comparing the three route finding algorithms on one query.

Each algorithm is timed independently with a fresh PerformanceMetrics. The
Floyd-Warshall entry times a lookup in the prebuilt table, not a rebuild.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List

from .algorithms.astar import AStarFinder
from .algorithms.dijkstra import DijkstraFinder
from .algorithms.floyd_warshall import AllPairsTable
from .models import AlgorithmResult, PerformanceMetrics, Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkRun:
    """Benchmark records in fixed order, plus the route each algorithm found."""

    results: List[AlgorithmResult]
    routes: Dict[str, Route]


class BenchmarkHarness:
    """Times Dijkstra, A* and an all-pairs lookup for the same pair."""

    def __init__(self, dijkstra: DijkstraFinder, astar: AStarFinder, table: AllPairsTable):
        self.dijkstra = dijkstra
        self.astar = astar
        self.table = table

    def run(self, source_id: int, dest_id: int) -> BenchmarkRun:
        """
        Run all three algorithms for one pair.

        Returns:
            Records ordered Dijkstra, A*, Floyd-Warshall; distances are 0 for
            an unreachable destination
        """
        results: List[AlgorithmResult] = []
        routes: Dict[str, Route] = {}

        for name, finder in (
            (self.dijkstra.name, self.dijkstra),
            (self.astar.name, self.astar),
            (self.table.name, self.table),
        ):
            metrics = PerformanceMetrics(operation=name)
            route = finder.find_route(source_id, dest_id, metrics=metrics)
            metrics.finish()

            routes[name] = route
            results.append(
                AlgorithmResult(
                    algorithm_name=name,
                    distance=route.total_distance,
                    adjusted_distance=route.adjusted_distance,
                    execution_time=metrics.duration_us,
                    nodes_explored=metrics.nodes_explored,
                )
            )
            logger.debug(
                "%s %s -> %s: %.1f m in %d us",
                name,
                source_id,
                dest_id,
                route.total_distance,
                metrics.duration_us,
            )

        return BenchmarkRun(results=results, routes=routes)
