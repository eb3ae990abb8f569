"""
Tests for custom exceptions.
"""

import pytest

from wayfinder.core.exceptions import (
    DuplicateResourceError,
    EdgeNotFoundError,
    GraphOperationError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from wayfinder.core.graph import LocationGraph


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_not_found_hierarchy():
    """Test that location and edge lookups share a not-found base class."""
    assert issubclass(NodeNotFoundError, ResourceNotFoundError)
    assert issubclass(EdgeNotFoundError, ResourceNotFoundError)
    assert not issubclass(DuplicateResourceError, ResourceNotFoundError)


def test_graph_raises_not_found_for_unknown_location():
    """Test that lookups never fall back to an arbitrary location."""
    graph = LocationGraph()
    graph.add_node(0, "Gate", 0.0, 0.0)
    with pytest.raises(ResourceNotFoundError, match="Location 5 not found"):
        graph.get_node(5)


def test_graph_raises_edge_not_found():
    """Test strict edge lookup between unconnected locations."""
    graph = LocationGraph()
    graph.add_node(0, "Gate", 0.0, 0.0)
    graph.add_node(1, "Hall", 0.0, 0.001)
    with pytest.raises(EdgeNotFoundError, match="No edge exists from 0 to 1"):
        graph.get_edge_safe(0, 1)
