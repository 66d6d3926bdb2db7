"""Route ranking: two sort families over distance, time, cost and preferences.

- QuickSort: in place on a copy, last-element pivot, not stable
- MergeSort: stable; multi-criteria and preference-score sorts
- sort_routes: SortCriterion x SortAlgorithm dispatch
"""

from campus_navigator.ranking.criteria import (
    Compare,
    PreferenceWeights,
    SortAlgorithm,
    SortCriterion,
    compare_by,
    preference_score,
)
from campus_navigator.ranking.merge_sort import MergeSort
from campus_navigator.ranking.quick_sort import QuickSort
from campus_navigator.ranking.route_sorter import sort_routes

__all__ = [
    "QuickSort",
    "MergeSort",
    "sort_routes",
    "Compare",
    "compare_by",
    "PreferenceWeights",
    "preference_score",
    "SortAlgorithm",
    "SortCriterion",
]
