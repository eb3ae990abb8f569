"""
Custom exceptions for the campus routing system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle the error conditions of graph construction, data loading and routing
queries. Unreachable destinations are deliberately absent from this hierarchy:
they are reported as empty routes, not raised.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as value ranges, enum labels or type checks.

    Examples:
        * Non-positive edge distance
        * Latitude outside [-90, 90]
        * Unknown traffic condition label
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation on the location graph is not
    valid for its current structure.

    Examples:
        * Edge from a location to itself
        * Querying an engine whose graph has no locations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive walking speed
        * Negative ranking time weight
        * Malformed WAYFINDER_* environment variable
    """


class LoaderError(Exception):
    """
    Raised when a bulk-load source cannot be read at all.

    Row-level problems never raise this; they are skipped and reported.

    Examples:
        * Missing CSV file
        * Missing or incomplete header row
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    This exception is raised when attempting to access or operate on a
    resource that does not exist in the graph.
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested location is not found.

    Examples:
        * Lookup by non-existent id
        * Lookup by unknown name
        * Edge insertion with an unregistered endpoint
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a required edge between two locations does not exist.
    """


class DuplicateResourceError(Exception):
    """
    Raised when attempting to register a location id that is already taken.
    """
