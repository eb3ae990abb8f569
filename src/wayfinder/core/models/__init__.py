"""
Core domain models package for the routing system.

This package provides the fundamental data structures that represent
locations and the walkways between them.
"""

from .edge import Edge
from .location import Location

__all__ = [
    "Edge",
    "Location",
]
