"""
Floyd-Warshall all-pairs table.

The table stores, for every ordered pair of locations, the cheapest adjusted
distance and the first hop of a cheapest route. It is a snapshot of the edge
weights at build time: after any traffic change it is stale until rebuilt.
Location ids are mapped to dense matrix indices in graph insertion order, so
ids need not be contiguous.
"""

import logging
from math import inf
from typing import Any, Dict, List, Optional

from ...config import DEFAULT_WALKING_SPEED
from ...traffic import adjusted_distance
from ..models import PerformanceMetrics, Route
from ..utils import MemoryManager

logger = logging.getLogger(__name__)

NO_HOP = -1


class AllPairsTable:
    """
    Precomputed distance and next-hop matrices.

    Attributes:
        graph: The LocationGraph the table was built from
        generation: Graph generation the table reflects
        build_time_us: Duration of the last build in microseconds
    """

    name = "Floyd-Warshall"

    def __init__(
        self,
        graph: Any,
        walking_speed: float = DEFAULT_WALKING_SPEED,
        max_memory_mb: Optional[float] = None,
    ):
        self.graph = graph
        self.walking_speed = walking_speed
        self.memory_manager = MemoryManager(max_memory_mb)
        self._index: Dict[int, int] = {}
        self._ids: List[int] = []
        self._dist: List[List[float]] = []
        self._next: List[List[int]] = []
        self.generation = -1
        self.build_time_us = 0
        self.build()

    def build(self) -> None:
        """Recompute both matrices from the graph's current edge weights. O(V^3)."""
        metrics = PerformanceMetrics(operation="floyd_warshall_build")
        self.memory_manager.reset()

        generation = self.graph.generation
        ids = self.graph.get_node_ids()
        index = {node_id: i for i, node_id in enumerate(ids)}
        n = len(ids)

        dist = [[inf] * n for _ in range(n)]
        nxt = [[NO_HOP] * n for _ in range(n)]
        for i in range(n):
            dist[i][i] = 0.0

        for edge in self.graph.iter_edges():
            u, v = index[edge.from_id], index[edge.to_id]
            cost = adjusted_distance(edge)
            # parallel walkways: keep the cheaper one
            if cost < dist[u][v]:
                dist[u][v] = cost
                nxt[u][v] = v

        for k in range(n):
            self.memory_manager.check_memory()
            dist_k = dist[k]
            for i in range(n):
                dist_ik = dist[i][k]
                if dist_ik == inf:
                    continue
                dist_i = dist[i]
                next_i = nxt[i]
                hop = next_i[k]
                for j in range(n):
                    candidate = dist_ik + dist_k[j]
                    if candidate < dist_i[j]:
                        dist_i[j] = candidate
                        next_i[j] = hop

        self._ids, self._index, self._dist, self._next = ids, index, dist, nxt
        self.generation = generation
        metrics.finish()
        self.build_time_us = metrics.duration_us
        logger.info(
            "All-pairs table built for %d locations in %d us (generation %d)",
            n,
            self.build_time_us,
            generation,
        )

    def is_stale(self) -> bool:
        """True if the graph's traffic changed since the last build."""
        return self.generation != self.graph.generation

    def distance(self, source_id: int, dest_id: int) -> float:
        """
        Cheapest adjusted distance between two locations, ``inf`` if unreachable.

        Raises:
            NodeNotFoundError: If either id is unknown to the graph
        """
        self.graph.get_node(source_id)
        self.graph.get_node(dest_id)
        i, j = self._index.get(source_id), self._index.get(dest_id)
        if i is None or j is None:
            return inf
        return self._dist[i][j]

    def find_route(
        self, source_id: int, dest_id: int, metrics: Optional[PerformanceMetrics] = None
    ) -> Route:
        """
        Reconstruct the cheapest route by following next-hop pointers.

        Returns an empty Route if the pair is unreachable or the next-hop chain
        is broken before reaching the destination.

        Raises:
            NodeNotFoundError: If either id is unknown to the graph
        """
        cost = self.distance(source_id, dest_id)
        if metrics is not None:
            metrics.nodes_explored = None
        if cost == inf:
            return Route.empty()

        i, j = self._index[source_id], self._index[dest_id]
        path = [i]
        current = i
        while current != j:
            current = self._next[current][j]
            if current == NO_HOP or len(path) > len(self._ids):
                logger.warning(
                    "Broken next-hop chain from %s to %s; table may be inconsistent",
                    source_id,
                    dest_id,
                )
                return Route.empty()
            path.append(current)

        return Route.from_path(
            [self.graph.get_node(self._ids[k]) for k in path],
            self.graph,
            adjusted_distance=cost,
            walking_speed=self.walking_speed,
        )

    def __len__(self) -> int:
        return len(self._ids)
