"""
University of Ghana, Legon campus dataset.

Eighteen locations and thirty-one two-way walkways with their baseline
traffic conditions. Used when no CSV files are supplied.
"""

from ..core.enums import LandmarkType, TrafficCondition
from ..core.graph import LocationGraph

# (id, name, latitude, longitude, category)
CAMPUS_LOCATIONS = (
    (0, "Main Entrance", 5.6531, -0.1864, LandmarkType.ENTRANCE),
    (1, "Balme Library", 5.6545, -0.1875, LandmarkType.ACADEMIC),
    (2, "Commonwealth Hall", 5.6558, -0.1889, LandmarkType.RESIDENTIAL),
    (3, "Legon Hall", 5.6572, -0.1901, LandmarkType.RESIDENTIAL),
    (4, "School of Medicine", 5.6539, -0.1851, LandmarkType.ACADEMIC),
    (5, "Business School", 5.6551, -0.1867, LandmarkType.ACADEMIC),
    (6, "Central Cafeteria", 5.6544, -0.1881, LandmarkType.DINING),
    (7, "Sports Complex", 5.6566, -0.1894, LandmarkType.RECREATION),
    (8, "Bank Area", 5.6548, -0.1873, LandmarkType.SERVICES),
    (9, "Night Market", 5.6541, -0.1885, LandmarkType.DINING),
    (10, "Engineering Block", 5.6537, -0.1859, LandmarkType.ACADEMIC),
    (11, "Arts Block", 5.6549, -0.1871, LandmarkType.ACADEMIC),
    (12, "Admin Block", 5.6546, -0.1869, LandmarkType.ADMINISTRATIVE),
    (13, "JQB Library", 5.6543, -0.1877, LandmarkType.ACADEMIC),
    (14, "Chemistry Block", 5.6540, -0.1863, LandmarkType.ACADEMIC),
    (15, "Physics Block", 5.6542, -0.1865, LandmarkType.ACADEMIC),
    (16, "Mathematics Block", 5.6544, -0.1867, LandmarkType.ACADEMIC),
    (17, "Law Faculty", 5.6547, -0.1872, LandmarkType.ACADEMIC),
)

_L = TrafficCondition.LIGHT
_M = TrafficCondition.MODERATE
_H = TrafficCondition.HEAVY

# (source id, destination id, metres, condition)
CAMPUS_EDGES = (
    (0, 1, 450, _M),
    (0, 4, 320, _L),
    (0, 12, 380, _H),
    (1, 2, 280, _L),
    (1, 5, 220, _M),
    (1, 6, 180, _H),
    (1, 8, 160, _M),
    (1, 11, 140, _L),
    (1, 13, 200, _L),
    (2, 3, 350, _L),
    (2, 7, 290, _M),
    (3, 7, 200, _L),
    (4, 10, 180, _L),
    (4, 14, 160, _L),
    (4, 15, 170, _L),
    (5, 6, 190, _H),
    (5, 8, 120, _M),
    (6, 9, 240, _H),
    (8, 11, 110, _L),
    (8, 12, 90, _M),
    (8, 17, 130, _M),
    (10, 14, 130, _L),
    (10, 15, 120, _L),
    (11, 12, 80, _L),
    (11, 13, 100, _L),
    (11, 16, 90, _L),
    (12, 13, 85, _M),
    (13, 6, 120, _M),
    (14, 15, 80, _L),
    (15, 16, 70, _L),
    (16, 17, 110, _M),
)


def build_campus_graph() -> LocationGraph:
    """Return a new graph populated with the campus dataset."""
    graph = LocationGraph()
    for node_id, name, latitude, longitude, landmark_type in CAMPUS_LOCATIONS:
        graph.add_node(node_id, name, latitude, longitude, landmark_type)
    for source_id, dest_id, distance, condition in CAMPUS_EDGES:
        graph.add_edge(source_id, dest_id, float(distance), condition)
    return graph
