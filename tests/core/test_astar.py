"""
Tests for A* route finding.
"""

import pytest

from wayfinder.core.enums import TimeOfDay
from wayfinder.core.exceptions import NodeNotFoundError
from wayfinder.core.graph import LocationGraph
from wayfinder.core.graph_paths.algorithms import AStarFinder, DijkstraFinder

TRAFFIC_REGIMES = [None, *TimeOfDay]


def test_astar_triangle(triangle_graph):
    """Test the A* route on the triangle graph."""
    route = AStarFinder(triangle_graph).find_route(0, 2)
    assert route.node_ids == [0, 1, 2]
    assert route.adjusted_distance == pytest.approx(200.0)


@pytest.mark.parametrize("time_of_day", TRAFFIC_REGIMES)
def test_astar_matches_dijkstra_on_campus(campus_graph, time_of_day):
    """Test that A* and Dijkstra agree on cost for every campus pair."""
    if time_of_day is not None:
        campus_graph.update_traffic_conditions(time_of_day)
    dijkstra = DijkstraFinder(campus_graph)
    astar = AStarFinder(campus_graph)
    ids = campus_graph.get_node_ids()

    for source in ids:
        for dest in ids:
            expected = dijkstra.find_route(source, dest)
            actual = astar.find_route(source, dest)
            assert actual.adjusted_distance == pytest.approx(expected.adjusted_distance), (
                source,
                dest,
            )


@pytest.mark.parametrize("time_of_day", TRAFFIC_REGIMES)
def test_astar_heuristic(campus_graph, time_of_day):
    """Test that the heuristic is zero at the target and never overestimates."""
    if time_of_day is not None:
        campus_graph.update_traffic_conditions(time_of_day)
    astar = AStarFinder(campus_graph)
    target = campus_graph.get_node(7)
    assert astar.heuristic(target, target) == 0.0

    dijkstra = DijkstraFinder(campus_graph)
    for location in campus_graph.get_nodes():
        cost = dijkstra.find_route(location.id, target.id).adjusted_distance
        assert astar.heuristic(location, target) <= cost + 1e-9


def test_heuristic_scale(triangle_graph):
    """Test that the heuristic is scaled down only for shortcut walkways."""
    assert AStarFinder(triangle_graph).heuristic_scale() == 1.0

    graph = LocationGraph()
    graph.add_node(0, "West", 0.0, 0.0)
    graph.add_node(1, "East", 0.0, 0.001)
    graph.add_edge(0, 1, 50.0)
    astar = AStarFinder(graph)

    assert astar.heuristic_scale() < 1.0
    assert astar.heuristic(graph.get_node(0), graph.get_node(1)) == pytest.approx(50.0)
    assert astar.find_route(0, 1).node_ids == [0, 1]


def test_heuristic_scale_follows_graph_changes(triangle_graph):
    """Test that the cached scale is recomputed after the graph changes."""
    astar = AStarFinder(triangle_graph)
    assert astar.heuristic_scale() == 1.0

    triangle_graph.add_node(3, "D", 0.0, 0.003)
    triangle_graph.add_edge(2, 3, 10.0)
    assert astar.heuristic_scale() < 1.0


def test_astar_unreachable(disconnected_graph):
    """Test that A* returns an empty route across components."""
    route = AStarFinder(disconnected_graph).find_route(1, 2)
    assert route.is_empty


def test_astar_route_to_self(triangle_graph):
    """Test the trivial single-location route."""
    route = AStarFinder(triangle_graph).find_route(2, 2)
    assert route.node_ids == [2]
    assert route.total_distance == 0.0


def test_astar_unknown_location(triangle_graph):
    """Test that unknown ids are refused."""
    with pytest.raises(NodeNotFoundError):
        AStarFinder(triangle_graph).find_route(0, 42)
