"""Route finding over the location graph."""

from .algorithms import AllPairsTable, AStarFinder, DijkstraFinder
from .alternatives import AlternativeRouteGenerator
from .base import RouteFinder
from .benchmark import BenchmarkHarness, BenchmarkRun
from .models import (
    AlgorithmResult,
    DirectionStep,
    PathValidationError,
    PerformanceMetrics,
    Route,
    RoutingResult,
)

__all__ = [
    "AllPairsTable",
    "AStarFinder",
    "DijkstraFinder",
    "AlternativeRouteGenerator",
    "RouteFinder",
    "BenchmarkHarness",
    "BenchmarkRun",
    "AlgorithmResult",
    "DirectionStep",
    "PathValidationError",
    "PerformanceMetrics",
    "Route",
    "RoutingResult",
]
