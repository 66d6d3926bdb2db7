"""Configuration constants for Campus Navigator.

All configurable parameters are centralized here for easy tuning.

Classes:
    SpeedConfig: Travel speeds by path type
    GeoConfig: Earth model and flat-earth projection factors
    RouteCostConfig: Coefficients of the route cost scalar
    RankingConfig: Default preference-score weights
    SearchConfig: Multi-route search defaults
    EngineLabels: Human-readable route names per engine
"""


class SpeedConfig:
    """Travel speeds (km/h) used to derive edge travel times."""

    DRIVING_KMH = 30.0  # Campus roads
    CYCLING_KMH = 12.0
    WALKING_KMH = 5.0  # Also used for stairs and unknown path types

    SPEED_BY_PATH_TYPE = {
        "road": DRIVING_KMH,
        "drive": DRIVING_KMH,
        "car": DRIVING_KMH,
        "bike": CYCLING_KMH,
        "cycle": CYCLING_KMH,
        "walkway": WALKING_KMH,
        "footpath": WALKING_KMH,
        "stairs": WALKING_KMH,
    }
    DEFAULT_PATH_TYPE = "walkway"


assert all(speed > 0 for speed in SpeedConfig.SPEED_BY_PATH_TYPE.values()), "Speeds must be positive"
assert SpeedConfig.DEFAULT_PATH_TYPE in SpeedConfig.SPEED_BY_PATH_TYPE


class GeoConfig:
    """Earth model parameters."""

    # WGS84 spherical approximation
    EARTH_RADIUS_M = 6_371_000

    # Flat-earth projection used by the A* heuristic: ~111 km per degree
    METERS_PER_DEGREE = 111_000.0


class RouteCostConfig:
    """Coefficients of Route.estimated_cost.

    estimated_cost = total_distance_m * PER_METER + total_time_min * PER_MINUTE

    An arbitrary ranking scalar, not a physical quantity.
    """

    PER_METER = 0.001
    PER_MINUTE = 0.1


class RankingConfig:
    """Default weights for the preference-score sort."""

    DISTANCE_WEIGHT = 0.4
    TIME_WEIGHT = 0.3
    LANDMARK_WEIGHT = 0.3


class SearchConfig:
    """Multi-route search defaults."""

    DEFAULT_MAX_ROUTES = 5
    NEAREST_NODE_THRESHOLD_M = 150.0  # Snapping radius for coordinate lookups


class EngineLabels:
    """Route names assigned by engines and the route service."""

    DIJKSTRA = "Dijkstra Shortest Path"
    ASTAR = "A* Optimal Path"
    FLOYD_WARSHALL = "Floyd-Warshall Shortest Path"
    DIRECT = "Direct Route"

    # Labels used when several engines are compared side by side
    SHORTEST_DISTANCE = "Shortest Distance Route"
    OPTIMAL_ASTAR = "Optimal Route (A*)"
    ALTERNATIVE = "Alternative Route"
    VIA_PREFIX = "Route via "
    COMBINED = "Combined Route"
