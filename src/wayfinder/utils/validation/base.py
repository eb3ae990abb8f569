"""
Base Validation Components for wayfinder

This module provides the foundational validation components used by the models
and the bulk loader. It includes the ValidationResult container for reporting
validation outcomes and the DataclassRule used by the ``validate_dataclass``
decorator to add runtime type checking to model dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin, get_type_hints


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None


class DataclassRule:
    """
    Rule for validating dataclass field types.

    Integers are accepted where a float is declared, matching how coordinates
    and distances arrive from literals and CSV files.

    Attributes:
        dataclass_type: The dataclass type being validated
        type_hints: Resolved type hints of the dataclass fields
    """

    def __init__(self, dataclass_type: Type[Any]):
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        origin = get_origin(expected_type)

        # Handle Optional types
        if origin is Union:
            args = get_args(expected_type)
            if type(None) in args and value is None:
                return True
            return any(self._validate_type(value, arg) for arg in args if arg is not type(None))

        if value is None:
            return False

        if expected_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if expected_type is int:
            return isinstance(value, int) and not isinstance(value, bool)

        if origin in (list, tuple, set, frozenset):
            return isinstance(value, origin)
        if origin is dict:
            return isinstance(value, dict)
        if origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        try:
            return isinstance(value, expected_type)
        except TypeError:
            # Any and other special forms
            return True

    def validate(self, value: Any) -> bool:
        """
        Validate a dataclass instance.

        Args:
            value: Dataclass instance to validate

        Returns:
            bool: True if every field matches its declared type
        """
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if field_name.startswith("_"):
                continue
            if not self._validate_type(getattr(value, field_name), field_type):
                return False
        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first so value checks report
    their specific messages; the type check follows.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        if original_post_init:
            original_post_init(self)

        validator = DataclassRule(cls)
        if not validator.validate(self):
            raise TypeError(f"Invalid field types in {cls.__name__}")

    cls.__post_init__ = validated_post_init
    return cls
