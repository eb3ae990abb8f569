"""Core routing functionality."""

from .config import RoutingConfig
from .engine import RoutingEngine, build_engine
from .enums import CompassDirection, LandmarkType, TimeOfDay, TrafficCondition
from .exceptions import (
    ConfigurationError,
    DuplicateResourceError,
    EdgeNotFoundError,
    GraphOperationError,
    LoaderError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .graph import LocationGraph
from .graph_paths import AlgorithmResult, DirectionStep, Route, RoutingResult
from .models import Edge, Location

__all__ = [
    "AlgorithmResult",
    "CompassDirection",
    "ConfigurationError",
    "DirectionStep",
    "DuplicateResourceError",
    "Edge",
    "EdgeNotFoundError",
    "GraphOperationError",
    "LandmarkType",
    "LoaderError",
    "Location",
    "LocationGraph",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "Route",
    "RoutingConfig",
    "RoutingEngine",
    "RoutingResult",
    "TimeOfDay",
    "TrafficCondition",
    "ValidationError",
    "build_engine",
]
