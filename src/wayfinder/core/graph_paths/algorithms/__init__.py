"""Route finding algorithm implementations."""

from .astar import AStarFinder
from .dijkstra import DijkstraFinder
from .floyd_warshall import AllPairsTable

__all__ = [
    "AStarFinder",
    "DijkstraFinder",
    "AllPairsTable",
]
