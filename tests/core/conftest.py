"""Shared test fixtures."""

import pytest

from wayfinder.core.enums import LandmarkType, TrafficCondition
from wayfinder.core.graph import LocationGraph
from wayfinder.data.campus import build_campus_graph


@pytest.fixture
def triangle_graph() -> LocationGraph:
    """
    Fixture providing a three-location graph with a congested shortcut:

    A --100 Light-- B --100 Light-- C
     \\________500 Heavy__________/

    Locations sit on the equator roughly 55 m apart, so every walkway is at
    least as long as the straight line between its ends.
    """
    graph = LocationGraph()
    graph.add_node(0, "A", 0.0, 0.0)
    graph.add_node(1, "B", 0.0, 0.0005)
    graph.add_node(2, "C", 0.0, 0.001)
    graph.add_edge(0, 1, 100.0, TrafficCondition.LIGHT)
    graph.add_edge(1, 2, 100.0, TrafficCondition.LIGHT)
    graph.add_edge(0, 2, 500.0, TrafficCondition.HEAVY)
    return graph


@pytest.fixture
def landmark_graph(triangle_graph) -> LocationGraph:
    """
    Fixture extending the triangle with a dining hall D between A and C:

    A --150-- D --150-- C
    """
    triangle_graph.add_node(3, "D", 0.0005, 0.0005, LandmarkType.DINING)
    triangle_graph.add_edge(0, 3, 150.0, TrafficCondition.LIGHT)
    triangle_graph.add_edge(3, 2, 150.0, TrafficCondition.LIGHT)
    return triangle_graph


@pytest.fixture
def disconnected_graph() -> LocationGraph:
    """
    Fixture providing two components with no walkway between them:

    0 -- 1      2 -- 3
    """
    graph = LocationGraph()
    graph.add_node(0, "North Gate", 0.0, 0.0)
    graph.add_node(1, "Library", 0.0, 0.001)
    graph.add_node(2, "South Gate", 1.0, 0.0)
    graph.add_node(3, "Stadium", 1.0, 0.001)
    graph.add_edge(0, 1, 150.0)
    graph.add_edge(2, 3, 150.0)
    return graph


@pytest.fixture
def campus_graph() -> LocationGraph:
    """Fixture providing the built-in campus dataset."""
    return build_campus_graph()
