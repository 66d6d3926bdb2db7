"""Criterion/algorithm dispatch for route sorting."""

from typing import Optional

from campus_navigator.model.route import Route
from campus_navigator.ranking.criteria import (
    Compare,
    SortAlgorithm,
    SortCriterion,
    by_cost,
    by_distance,
    by_landmark_count,
    by_time,
)
from campus_navigator.ranking.merge_sort import MergeSort
from campus_navigator.ranking.quick_sort import QuickSort

_COMPARATORS: dict[SortCriterion, Compare] = {
    SortCriterion.DISTANCE: by_distance,
    SortCriterion.TIME: by_time,
    SortCriterion.COST: by_cost,
    SortCriterion.LANDMARKS: by_landmark_count,
}
assert set(_COMPARATORS) == set(SortCriterion)


def sort_routes(
    routes: Optional[list[Route]],
    criterion: SortCriterion = SortCriterion.DISTANCE,
    algorithm: SortAlgorithm = SortAlgorithm.MERGE,
) -> list[Route]:
    """Sort routes ascending by a built-in criterion (LANDMARKS: most first)."""
    compare = _COMPARATORS[criterion]
    if algorithm is SortAlgorithm.QUICK:
        return QuickSort.sort(routes=routes, compare=compare)
    return MergeSort.sort(routes=routes, compare=compare)
