"""
Wayfinder - Campus Route Finding Engine

Shortest-path routing between named campus locations under time-of-day
traffic conditions. It includes:

- A location graph with per-direction traffic conditions
- Dijkstra, A* and a precomputed Floyd-Warshall all-pairs table
- Ranked alternative routes and a per-query algorithm benchmark
- A CSV loader and a built-in campus dataset
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Wayfinder requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.engine import RoutingEngine, build_engine
from .core.graph import LocationGraph
from .core.models import Edge, Location

__all__ = [
    "LocationGraph",
    "Location",
    "Edge",
    "RoutingEngine",
    "build_engine",
]
