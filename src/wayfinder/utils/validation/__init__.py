"""
Validation package for wayfinder.

This package provides validation utilities for ensuring data integrity
and type safety of graph records.
"""

from .base import DataclassRule, ValidationResult, validate_dataclass
from .schema import EDGE_SCHEMA, LOCATION_SCHEMA, SchemaValidator

__all__ = [
    "ValidationResult",
    "DataclassRule",
    "validate_dataclass",
    "SchemaValidator",
    "LOCATION_SCHEMA",
    "EDGE_SCHEMA",
]
