"""
Schema Validation Components for wayfinder

This module provides JSON schema-based validation for location and edge records
before they are inserted into a LocationGraph. The bulk loader converts each
CSV row into a typed record and validates it here, so range and label checks
live in one declarative place instead of being spread across the parser.
"""

from typing import Any, Dict

from jsonschema import Draft202012Validator

from ...core.enums import LandmarkType, TrafficCondition
from .base import ValidationResult

LOCATION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "integer", "minimum": 0},
        "name": {"type": "string", "minLength": 1, "pattern": r"\S"},
        "latitude": {"type": "number", "minimum": -90, "maximum": 90},
        "longitude": {"type": "number", "minimum": -180, "maximum": 180},
        "landmark_type": {"enum": [member.name for member in LandmarkType]},
    },
    "required": ["id", "name", "latitude", "longitude", "landmark_type"],
    "additionalProperties": False,
}

EDGE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "source_id": {"type": "integer", "minimum": 0},
        "dest_id": {"type": "integer", "minimum": 0},
        "distance": {"type": "number", "exclusiveMinimum": 0},
        "condition": {"enum": [member.name for member in TrafficCondition]},
    },
    "required": ["source_id", "dest_id", "distance", "condition"],
    "additionalProperties": False,
}


class SchemaValidator:
    """
    JSON Schema-based validator for location and edge records.

    Records are plain dictionaries whose enum fields hold member names
    (``"DINING"``, ``"HEAVY"``), as produced by the loader after label parsing.

    Attributes:
        location_schema: Schema applied to location records
        edge_schema: Schema applied to edge records
    """

    def __init__(
        self,
        location_schema: Dict[str, Any] = LOCATION_SCHEMA,
        edge_schema: Dict[str, Any] = EDGE_SCHEMA,
    ):
        Draft202012Validator.check_schema(location_schema)
        Draft202012Validator.check_schema(edge_schema)
        self.location_schema = location_schema
        self.edge_schema = edge_schema
        self._location_validator = Draft202012Validator(location_schema)
        self._edge_validator = Draft202012Validator(edge_schema)

    @staticmethod
    def _collect(validator: Draft202012Validator, record: Dict[str, Any]) -> ValidationResult:
        errors = []
        for error in sorted(validator.iter_errors(record), key=lambda e: list(e.path)):
            location = ".".join(str(part) for part in error.path) or "record"
            errors.append(f"{location}: {error.message}")
        return ValidationResult(is_valid=not errors, errors=errors, context={"record": record})

    def validate_location(self, record: Dict[str, Any]) -> ValidationResult:
        """
        Validate a location record.

        Example:
            >>> SchemaValidator().validate_location(
            ...     {"id": 0, "name": "Main Gate", "latitude": 5.65,
            ...      "longitude": -0.18, "landmark_type": "ENTRANCE"}
            ... ).is_valid
            True
        """
        return self._collect(self._location_validator, record)

    def validate_edge(self, record: Dict[str, Any]) -> ValidationResult:
        """Validate an edge record."""
        return self._collect(self._edge_validator, record)
