"""Merge sort for routes.

Top-down merge sort: O(n log n) guaranteed, O(n) extra memory, stable.
Stability is what makes sort_by_multiple_criteria work: sorting by the
secondary key first and then by the primary key keeps the secondary order
among routes with equal primary keys.
"""

from typing import Optional

from campus_navigator.model.route import Route
from campus_navigator.ranking.criteria import (
    Compare,
    PreferenceWeights,
    by_cost,
    by_distance,
    by_preference,
    by_time,
)


class MergeSort:
    """Stable sort; every method returns a new list."""

    @staticmethod
    def sort(routes: Optional[list[Route]], compare: Compare) -> list[Route]:
        """Sort with a caller-supplied comparator."""
        if not routes:
            return []
        return MergeSort._merge_sort(items=list(routes), compare=compare)

    @staticmethod
    def sort_by_distance(routes: Optional[list[Route]]) -> list[Route]:
        return MergeSort.sort(routes=routes, compare=by_distance)

    @staticmethod
    def sort_by_time(routes: Optional[list[Route]]) -> list[Route]:
        return MergeSort.sort(routes=routes, compare=by_time)

    @staticmethod
    def sort_by_cost(routes: Optional[list[Route]]) -> list[Route]:
        return MergeSort.sort(routes=routes, compare=by_cost)

    @staticmethod
    def sort_by_multiple_criteria(routes: Optional[list[Route]]) -> list[Route]:
        """Distance ascending, ties ordered by time (two stable passes)."""
        by_time_first = MergeSort.sort_by_time(routes=routes)
        return MergeSort.sort_by_distance(routes=by_time_first)

    @staticmethod
    def sort_by_preference_score(
        routes: Optional[list[Route]],
        weights: PreferenceWeights = PreferenceWeights(),
    ) -> list[Route]:
        """Ascending preference score (see criteria.preference_score)."""
        return MergeSort.sort(routes=routes, compare=by_preference(weights=weights))

    @staticmethod
    def _merge_sort(items: list[Route], compare: Compare) -> list[Route]:
        if len(items) <= 1:
            return items
        mid = len(items) // 2
        left = MergeSort._merge_sort(items=items[:mid], compare=compare)
        right = MergeSort._merge_sort(items=items[mid:], compare=compare)
        return MergeSort._merge(left=left, right=right, compare=compare)

    @staticmethod
    def _merge(left: list[Route], right: list[Route], compare: Compare) -> list[Route]:
        merged: list[Route] = []
        i = j = 0
        while i < len(left) and j < len(right):
            # <= takes from the left run on ties, which keeps the sort stable
            if compare(left[i], right[j]) <= 0:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged
