"""
Traffic cost model.

Pure functions mapping an edge and its traffic condition to search cost and
walking time, plus the deterministic rule table that recomputes an edge's
condition for a time of day from the category of the edge's destination.
"""

from typing import Dict, FrozenSet, Tuple

from .config import DEFAULT_WALKING_SPEED
from .enums import LandmarkType, TimeOfDay, TrafficCondition
from .models import Edge

# Rush-hour rules take precedence; combinations they do not match fall through
# to the category defaults below.
RUSH_HOUR_RULES: Dict[TimeOfDay, Tuple[Tuple[FrozenSet[LandmarkType], TrafficCondition], ...]] = {
    TimeOfDay.MORNING_RUSH: (
        (frozenset({LandmarkType.ACADEMIC, LandmarkType.ADMINISTRATIVE}), TrafficCondition.HEAVY),
        (frozenset({LandmarkType.DINING, LandmarkType.SERVICES}), TrafficCondition.MODERATE),
    ),
    TimeOfDay.EVENING_RUSH: (
        (frozenset({LandmarkType.RESIDENTIAL, LandmarkType.DINING}), TrafficCondition.HEAVY),
        (frozenset({LandmarkType.RECREATION}), TrafficCondition.MODERATE),
    ),
    TimeOfDay.NORMAL: (),
}

DEFAULT_RULES: Tuple[Tuple[FrozenSet[LandmarkType], TrafficCondition], ...] = (
    (frozenset({LandmarkType.DINING, LandmarkType.SERVICES}), TrafficCondition.MODERATE),
    (frozenset({LandmarkType.ENTRANCE, LandmarkType.ADMINISTRATIVE}), TrafficCondition.HEAVY),
)


def adjusted_distance(edge: Edge) -> float:
    """Search cost of an edge: base distance scaled by its distance multiplier."""
    return edge.distance * edge.condition.distance_multiplier


def estimated_time(edge: Edge, walking_speed: float = DEFAULT_WALKING_SPEED) -> float:
    """Walking minutes along an edge, slowed by its time multiplier."""
    return (edge.distance / walking_speed) * edge.condition.time_multiplier


def recompute_condition(
    destination_type: LandmarkType, time_of_day: TimeOfDay
) -> TrafficCondition:
    """
    Traffic condition of an edge arriving at a location of ``destination_type``.

    Args:
        destination_type: Category of the edge's destination location
        time_of_day: Traffic regime

    Returns:
        The condition from the first matching rush-hour rule, else the
        category default (Dining/Services moderate, Entrance/Administrative
        heavy, everything else light)
    """
    for categories, condition in RUSH_HOUR_RULES.get(time_of_day, ()):
        if destination_type in categories:
            return condition
    for categories, condition in DEFAULT_RULES:
        if destination_type in categories:
            return condition
    return TrafficCondition.LIGHT
