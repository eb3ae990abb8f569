"""
Tests for the LocationGraph.
"""

import pytest

from wayfinder.core.enums import LandmarkType, TimeOfDay, TrafficCondition
from wayfinder.core.exceptions import (
    DuplicateResourceError,
    GraphOperationError,
    NodeNotFoundError,
    ValidationError,
)
from wayfinder.core.graph import LocationGraph


def snapshot(graph):
    """Condition of every directed edge keyed by its endpoints."""
    return {edge.endpoints: edge.condition for edge in graph.iter_edges()}


def test_add_node_and_lookup():
    """Test registering and retrieving locations."""
    graph = LocationGraph()
    location = graph.add_node(7, "Night Market", 5.6541, -0.1885, LandmarkType.DINING)

    assert graph.get_node(7) is location
    assert graph.get_node_by_name("Night Market") is location
    assert graph.has_node(7)
    assert 7 in graph
    assert "7" not in graph
    assert len(graph) == graph.get_node_count() == 1


def test_add_duplicate_node():
    """Test that a location id can only be registered once."""
    graph = LocationGraph()
    graph.add_node(0, "Gate", 0.0, 0.0)
    with pytest.raises(DuplicateResourceError):
        graph.add_node(0, "Another Gate", 1.0, 1.0)
    assert graph.get_node(0).name == "Gate"


def test_get_node_by_name_first_match():
    """Test that duplicate names resolve to the first registered location."""
    graph = LocationGraph()
    graph.add_node(0, "Hall", 0.0, 0.0)
    graph.add_node(1, "Hall", 1.0, 1.0)
    assert graph.get_node_by_name("Hall").id == 0
    with pytest.raises(NodeNotFoundError):
        graph.get_node_by_name("Chapel")


def test_add_edge_is_bidirectional(triangle_graph):
    """Test that adding a walkway stores both directions."""
    forward = triangle_graph.get_edge(0, 1)
    backward = triangle_graph.get_edge(1, 0)
    assert forward is not None and backward is not None
    assert forward.distance == backward.distance == 100.0
    assert forward.condition is backward.condition is TrafficCondition.LIGHT
    assert triangle_graph.get_edge_count() == 6


def test_add_edge_unknown_endpoint(triangle_graph):
    """Test that both endpoints must be registered."""
    with pytest.raises(NodeNotFoundError, match="Destination location 9"):
        triangle_graph.add_edge(0, 9, 10.0)
    with pytest.raises(NodeNotFoundError, match="Source location 9"):
        triangle_graph.add_edge(9, 0, 10.0)


def test_add_edge_invalid_values(triangle_graph):
    """Test edge validation through the graph."""
    with pytest.raises(ValidationError):
        triangle_graph.add_edge(0, 1, 0.0)
    with pytest.raises(GraphOperationError):
        triangle_graph.add_edge(1, 1, 10.0)
    with pytest.raises(ValidationError, match="finite"):
        triangle_graph.add_edge(0, 1, float("nan"))


def test_add_edge_rejects_parallel_walkway(triangle_graph):
    """Test that two locations can be connected only once, in either direction."""
    with pytest.raises(DuplicateResourceError, match="already connected"):
        triangle_graph.add_edge(0, 1, 60.0)
    with pytest.raises(DuplicateResourceError):
        triangle_graph.add_edge(1, 0, 60.0)

    assert triangle_graph.get_edge(0, 1).distance == 100.0
    assert triangle_graph.get_edge_count() == 6


def test_additions_bump_generation(triangle_graph):
    """Test that new locations and walkways advance the generation."""
    start = triangle_graph.generation
    triangle_graph.add_node(3, "D", 0.0, 0.0015)
    assert triangle_graph.generation == start + 1

    triangle_graph.add_edge(2, 3, 100.0)
    assert triangle_graph.generation == start + 2

    with pytest.raises(DuplicateResourceError):
        triangle_graph.add_edge(3, 2, 100.0)
    assert triangle_graph.generation == start + 2


def test_get_edges(triangle_graph):
    """Test adjacency listing in insertion order."""
    assert [edge.to_id for edge in triangle_graph.get_edges(0)] == [1, 2]
    assert triangle_graph.get_edges(42) == []


def test_nodes_of_type(campus_graph):
    """Test filtering locations by category."""
    recreation = campus_graph.nodes_of_type(LandmarkType.RECREATION)
    assert [location.name for location in recreation] == ["Sports Complex"]
    dining = campus_graph.nodes_of_type(LandmarkType.DINING)
    assert [location.id for location in dining] == [6, 9]


def test_campus_dataset_size(campus_graph):
    """Test the built-in dataset dimensions."""
    assert campus_graph.get_node_count() == 18
    assert campus_graph.get_edge_count() == 62


def test_set_condition_bumps_generation(triangle_graph):
    """Test that only actual condition changes advance the generation."""
    start = triangle_graph.generation
    triangle_graph.set_condition(0, 1, TrafficCondition.LIGHT)
    assert triangle_graph.generation == start

    triangle_graph.set_condition(0, 1, TrafficCondition.HEAVY)
    assert triangle_graph.generation == start + 1
    assert triangle_graph.get_edge(0, 1).condition is TrafficCondition.HEAVY
    assert triangle_graph.get_edge(1, 0).condition is TrafficCondition.LIGHT


def test_update_traffic_per_direction(campus_graph):
    """Test that each direction is recomputed from its own destination."""
    campus_graph.update_traffic_conditions(TimeOfDay.MORNING_RUSH)

    # Balme Library (academic) -> Commonwealth Hall (residential)
    assert campus_graph.get_edge(1, 2).condition is TrafficCondition.LIGHT
    assert campus_graph.get_edge(2, 1).condition is TrafficCondition.HEAVY
    # Bank Area (services) -> Admin Block (administrative), and back
    assert campus_graph.get_edge(8, 12).condition is TrafficCondition.HEAVY
    assert campus_graph.get_edge(12, 8).condition is TrafficCondition.MODERATE


def test_update_traffic_is_idempotent(campus_graph):
    """Test that applying the same time of day twice yields identical conditions."""
    for time_of_day in TimeOfDay:
        campus_graph.update_traffic_conditions(time_of_day)
        first = snapshot(campus_graph)
        generation = campus_graph.generation

        assert campus_graph.update_traffic_conditions(time_of_day) == 0
        assert snapshot(campus_graph) == first
        assert campus_graph.generation == generation


def test_reset_conditions(campus_graph):
    """Test restoring a recorded set of conditions."""
    original = snapshot(campus_graph)
    campus_graph.update_traffic_conditions(TimeOfDay.EVENING_RUSH)
    assert snapshot(campus_graph) != original

    changed = campus_graph.reset_conditions(original)
    assert changed > 0
    assert snapshot(campus_graph) == original
    assert campus_graph.reset_conditions(original) == 0
