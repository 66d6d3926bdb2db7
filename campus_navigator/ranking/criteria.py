"""Comparison functions and scoring used to rank routes.

Comparators follow the cmp convention: compare(a, b) < 0 if a ranks
before b, 0 on a tie, > 0 otherwise. Both sort families accept any
comparator, so custom orderings plug in next to the built-in keys.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from campus_navigator.constants import RankingConfig
from campus_navigator.model.route import Route

Compare = Callable[[Route, Route], int]


class SortCriterion(Enum):
    """Built-in ranking keys."""

    DISTANCE = "distance"
    TIME = "time"
    COST = "cost"
    LANDMARKS = "landmarks"


class SortAlgorithm(Enum):
    """Sort family: QUICK is in place and unstable, MERGE is stable."""

    QUICK = "quick"
    MERGE = "merge"


def compare_by(key: Callable[[Route], Any]) -> Compare:
    """Ascending comparator on a key function."""

    def compare(a: Route, b: Route) -> int:
        key_a, key_b = key(a), key(b)
        return (key_a > key_b) - (key_a < key_b)

    return compare


by_distance = compare_by(lambda route: route.total_distance_m)
by_time = compare_by(lambda route: route.total_time_min)
by_cost = compare_by(lambda route: route.estimated_cost)
by_distance_then_time = compare_by(lambda route: (route.total_distance_m, route.total_time_min))
# More landmarks first
by_landmark_count = compare_by(lambda route: -len(route.landmarks))


@dataclass(frozen=True)
class PreferenceWeights:
    """Weights of the preference score; lower scores rank first."""

    distance: float = RankingConfig.DISTANCE_WEIGHT
    time: float = RankingConfig.TIME_WEIGHT
    landmarks: float = RankingConfig.LANDMARK_WEIGHT


def preference_score(route: Route, weights: PreferenceWeights) -> float:
    """Weighted sum of distance (km), time (hours) and inverse landmark count.

    The landmark term is 1 / (1 + landmarks), so routes passing more
    landmarks score lower (better).
    """
    distance_km = route.total_distance_m / 1000.0
    time_hours = route.total_time_min / 60.0
    landmark_term = 1.0 / (1.0 + len(route.landmarks))
    return distance_km * weights.distance + time_hours * weights.time + landmark_term * weights.landmarks


def by_preference(weights: PreferenceWeights) -> Compare:
    return compare_by(lambda route: preference_score(route=route, weights=weights))
