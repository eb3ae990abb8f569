"""Built-in datasets."""

from .campus import CAMPUS_EDGES, CAMPUS_LOCATIONS, build_campus_graph

__all__ = ["CAMPUS_EDGES", "CAMPUS_LOCATIONS", "build_campus_graph"]
