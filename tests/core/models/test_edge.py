"""
Tests for the Edge model.
"""

import pytest

from wayfinder.core.enums import TrafficCondition
from wayfinder.core.exceptions import GraphOperationError, ValidationError
from wayfinder.core.models import Edge


def test_edge_creation():
    """Test creating an edge."""
    edge = Edge(0, 1, 120.0, TrafficCondition.MODERATE)
    assert edge.endpoints == (0, 1)
    assert edge.distance == 120.0
    assert edge.condition is TrafficCondition.MODERATE
    assert repr(edge) == "Edge(0 -> 1, 120 m, Moderate)"


def test_edge_default_condition():
    """Test that new edges start with light traffic."""
    assert Edge(0, 1, 10.0).condition is TrafficCondition.LIGHT


@pytest.mark.parametrize("distance", [0.0, -5.0])
def test_edge_non_positive_distance(distance):
    """Test that zero and negative distances are rejected."""
    with pytest.raises(ValidationError, match="positive"):
        Edge(0, 1, distance)


@pytest.mark.parametrize("distance", [float("nan"), float("inf"), float("-inf")])
def test_edge_non_finite_distance(distance):
    """Test that NaN and infinite distances are rejected."""
    with pytest.raises(ValidationError, match="finite"):
        Edge(0, 1, distance)


def test_edge_self_loop():
    """Test that an edge cannot connect a location to itself."""
    with pytest.raises(GraphOperationError, match="itself"):
        Edge(3, 3, 10.0)


def test_edge_invalid_condition():
    """Test that the condition must be a TrafficCondition."""
    with pytest.raises(TypeError, match="TrafficCondition"):
        Edge(0, 1, 10.0, "Heavy")  # type: ignore[arg-type]


def test_edge_condition_is_mutable():
    """Test that only the traffic condition may change after creation."""
    edge = Edge(0, 1, 10.0)
    edge.condition = TrafficCondition.HEAVY
    assert edge.condition is TrafficCondition.HEAVY

    with pytest.raises(AttributeError, match="immutable"):
        edge.distance = 20.0
    with pytest.raises(AttributeError, match="immutable"):
        edge.to_id = 2
