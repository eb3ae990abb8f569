from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

from ..config import DEFAULT_WALKING_SPEED
from ..models import Location
from .models import PerformanceMetrics, Route
from .utils import MemoryManager


class RouteFinder(ABC):
    """Abstract base class for single-pair route finding algorithms."""

    #: Display name used in benchmark records
    name: str = ""

    def __init__(
        self,
        graph: Any,
        walking_speed: float = DEFAULT_WALKING_SPEED,
        max_memory_mb: Optional[float] = None,
    ):
        """Initialize finder with graph and optional memory limit."""
        self.graph = graph
        self.walking_speed = walking_speed
        self.memory_manager = MemoryManager(max_memory_mb)

    @abstractmethod
    def find_route(
        self,
        source_id: int,
        dest_id: int,
        metrics: Optional[PerformanceMetrics] = None,
        **kwargs,
    ) -> Route:
        """Find the cheapest route; an empty Route when unreachable."""

    def validate_nodes(self, source_id: int, dest_id: int) -> Tuple[Location, Location]:
        """Resolve both endpoints, raising NodeNotFoundError for unknown ids."""
        return self.graph.get_node(source_id), self.graph.get_node(dest_id)

    @contextmanager
    def _search_context(self, metrics: Optional[PerformanceMetrics]) -> Iterator[None]:
        """Reset the memory window and record peak usage on exit."""
        self.memory_manager.reset()
        try:
            yield
        finally:
            if metrics is not None:
                metrics.max_memory_used = self.memory_manager.peak_memory

    def _build_route(self, node_ids: List[int], cost: float) -> Route:
        return Route.from_path(
            [self.graph.get_node(node_id) for node_id in node_ids],
            self.graph,
            adjusted_distance=cost,
            walking_speed=self.walking_speed,
        )
