"""
Routing configuration.

Tunables for the cost model, route ranking and the optional search memory
guard. Defaults reproduce the reference campus behaviour: 5 km/h walking,
one minute of walking ranked as 50 meters, and at most five candidate routes.
"""

import os
from typing import FrozenSet, Iterable, Optional

from .enums import LandmarkType, TrafficCondition
from .exceptions import ConfigurationError

DEFAULT_WALKING_SPEED = 83.33  # meters per minute
DEFAULT_TIME_WEIGHT = 50.0  # meters per minute of estimated time
DEFAULT_MAX_ALTERNATIVES = 5

ENV_PREFIX = "WAYFINDER_"


class RoutingConfig:
    """
    Configuration for the routing engine.

    Attributes:
        walking_speed_m_per_min: Speed used to turn distance into minutes
        time_weight: Meters credited per estimated minute when ranking routes
        max_alternatives: Maximum number of candidate routes to generate
        scenic_landmark: Category the scenic candidate is routed through
        avoid_conditions: Conditions pruned when building the low-traffic candidate
        max_memory_mb: Optional memory ceiling for a single search, None disables it
    """

    def __init__(
        self,
        walking_speed_m_per_min: float = DEFAULT_WALKING_SPEED,
        time_weight: float = DEFAULT_TIME_WEIGHT,
        max_alternatives: int = DEFAULT_MAX_ALTERNATIVES,
        scenic_landmark: LandmarkType = LandmarkType.RECREATION,
        avoid_conditions: Iterable[TrafficCondition] = (TrafficCondition.HEAVY,),
        max_memory_mb: Optional[float] = None,
    ):
        if walking_speed_m_per_min <= 0:
            raise ConfigurationError("walking_speed_m_per_min must be positive")
        if time_weight < 0:
            raise ConfigurationError("time_weight must be non-negative")
        if not isinstance(max_alternatives, int) or max_alternatives < 1:
            raise ConfigurationError("max_alternatives must be a positive integer")
        if not isinstance(scenic_landmark, LandmarkType):
            raise ConfigurationError("scenic_landmark must be a LandmarkType")
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive when set")

        self.walking_speed_m_per_min = float(walking_speed_m_per_min)
        self.time_weight = float(time_weight)
        self.max_alternatives = max_alternatives
        self.scenic_landmark = scenic_landmark
        self.avoid_conditions: FrozenSet[TrafficCondition] = frozenset(avoid_conditions)
        self.max_memory_mb = max_memory_mb

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "RoutingConfig":
        """
        Build a configuration from ``WAYFINDER_*`` environment variables.

        Recognised variables: WAYFINDER_WALKING_SPEED, WAYFINDER_TIME_WEIGHT,
        WAYFINDER_MAX_ALTERNATIVES and WAYFINDER_MAX_MEMORY_MB. Unset variables
        fall back to the defaults.

        Raises:
            ConfigurationError: If a variable is set but not a valid number
        """
        env = os.environ if environ is None else environ

        def read(name: str, convert, default):
            raw = env.get(ENV_PREFIX + name)
            if raw is None or not raw.strip():
                return default
            try:
                return convert(raw.strip())
            except ValueError:
                raise ConfigurationError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}")

        return cls(
            walking_speed_m_per_min=read("WALKING_SPEED", float, DEFAULT_WALKING_SPEED),
            time_weight=read("TIME_WEIGHT", float, DEFAULT_TIME_WEIGHT),
            max_alternatives=read("MAX_ALTERNATIVES", int, DEFAULT_MAX_ALTERNATIVES),
            max_memory_mb=read("MAX_MEMORY_MB", float, None),
        )

    def __repr__(self) -> str:
        return (
            f"RoutingConfig(walking_speed_m_per_min={self.walking_speed_m_per_min}, "
            f"time_weight={self.time_weight}, max_alternatives={self.max_alternatives}, "
            f"scenic_landmark={self.scenic_landmark.name}, "
            f"avoid_conditions={sorted(c.name for c in self.avoid_conditions)}, "
            f"max_memory_mb={self.max_memory_mb})"
        )
