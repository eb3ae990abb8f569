"""
Utility functions for route finding operations.

Shared by the single-source searches:
- FrontierEntry / PriorityQueue: the one frontier type both Dijkstra and A* use
- reconstruct_path: predecessor-chain walk back from the destination
- MemoryManager: optional resident-memory guard backed by psutil
"""

import gc
import logging
import os
from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)

# Constants
EPSILON = 1e-9  # Floating point comparison tolerance


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """True if ``new_cost`` beats ``old_cost`` by more than the tolerance."""
    return (new_cost - old_cost) < -EPSILON


@dataclass(frozen=True, order=True)
class FrontierEntry:
    """
    A location waiting on the frontier with its priority key.

    Ordered by priority, then by push sequence. The sequence only makes the
    order total; which of two equal-priority entries pops first is not part
    of any search's contract.
    """

    priority: float
    sequence: int
    node_id: int = field(compare=False)


class PriorityQueue:
    """
    Min-heap of FrontierEntry objects with lazy deletion.

    Superseded entries are not removed on push; the search discards them on
    pop by comparing the entry's key to its best-known cost.
    """

    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._counter = count()

    def push(self, node_id: int, priority: float) -> None:
        heappush(self._heap, FrontierEntry(priority, next(self._counter), node_id))

    def pop(self) -> Optional[FrontierEntry]:
        """Remove and return the lowest-priority entry, or None when empty."""
        if not self._heap:
            return None
        return heappop(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


def reconstruct_path(
    predecessors: Dict[int, int], source_id: int, dest_id: int
) -> Optional[List[int]]:
    """
    Walk the predecessor chain from ``dest_id`` back to ``source_id``.

    Returns:
        Location ids from source to destination, or None if the chain does
        not reach the source
    """
    path = [dest_id]
    current = dest_id
    seen = {dest_id}
    while current != source_id:
        previous = predecessors.get(current)
        if previous is None or previous in seen:
            return None
        path.append(previous)
        seen.add(previous)
        current = previous
    path.reverse()
    return path


def get_memory_usage() -> int:
    """Get current resident memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


class MemoryManager:
    """
    Memory guard for search loops.

    Without a limit the manager is inert and never touches psutil, so the
    guard costs nothing on the benchmarked paths.
    """

    def __init__(self, max_memory_mb: Optional[float] = None, check_interval: int = 256):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self._check_interval = check_interval
        self._calls = 0
        self.start_memory = get_memory_usage() if self.max_memory else 0
        self._peak_memory = self.start_memory

    @property
    def enabled(self) -> bool:
        return self.max_memory is not None

    def check_memory(self) -> None:
        """Raise MemoryError if usage grew past the limit since the search started."""
        if not self.max_memory:
            return
        self._calls += 1
        if self._calls % self._check_interval:
            return

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()
            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current / 1024 / 1024:.1f}MB exceeds "
                    f"limit of {self.max_memory / 1024 / 1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> Optional[int]:
        """Peak resident memory in bytes, None when the guard is disabled."""
        return self._peak_memory if self.max_memory else None

    def reset(self) -> None:
        """Start a new measurement window."""
        self._calls = 0
        if self.max_memory:
            self.start_memory = get_memory_usage()
            self._peak_memory = self.start_memory
