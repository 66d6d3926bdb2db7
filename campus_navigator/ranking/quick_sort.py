"""Quick sort for routes.

Lomuto partition with the last element as pivot, sorting a copy of the
input in place. O(n log n) on average, O(n²) worst case (e.g. already
sorted input). Not stable: routes with equal keys may change relative
order.
"""

from typing import Optional

from campus_navigator.model.route import Route
from campus_navigator.ranking.criteria import (
    Compare,
    by_cost,
    by_distance,
    by_distance_then_time,
    by_landmark_count,
    by_time,
)


class QuickSort:
    """Partition-exchange sort; every method returns a new list."""

    @staticmethod
    def sort(routes: Optional[list[Route]], compare: Compare) -> list[Route]:
        """Sort with a caller-supplied comparator."""
        if not routes:
            return []
        items = list(routes)
        QuickSort._quick_sort(items=items, low=0, high=len(items) - 1, compare=compare)
        return items

    @staticmethod
    def sort_by_distance(routes: Optional[list[Route]]) -> list[Route]:
        return QuickSort.sort(routes=routes, compare=by_distance)

    @staticmethod
    def sort_by_time(routes: Optional[list[Route]]) -> list[Route]:
        return QuickSort.sort(routes=routes, compare=by_time)

    @staticmethod
    def sort_by_cost(routes: Optional[list[Route]]) -> list[Route]:
        return QuickSort.sort(routes=routes, compare=by_cost)

    @staticmethod
    def sort_by_distance_and_time(routes: Optional[list[Route]]) -> list[Route]:
        """Distance ascending, ties broken by time in the comparator itself."""
        return QuickSort.sort(routes=routes, compare=by_distance_then_time)

    @staticmethod
    def sort_by_landmark_count(routes: Optional[list[Route]]) -> list[Route]:
        """Routes passing more landmarks first."""
        return QuickSort.sort(routes=routes, compare=by_landmark_count)

    @staticmethod
    def _quick_sort(items: list[Route], low: int, high: int, compare: Compare) -> None:
        # Recurse into the smaller side and loop on the larger to bound stack depth
        while low < high:
            pivot = QuickSort._partition(items=items, low=low, high=high, compare=compare)
            if pivot - low < high - pivot:
                QuickSort._quick_sort(items=items, low=low, high=pivot - 1, compare=compare)
                low = pivot + 1
            else:
                QuickSort._quick_sort(items=items, low=pivot + 1, high=high, compare=compare)
                high = pivot - 1

    @staticmethod
    def _partition(items: list[Route], low: int, high: int, compare: Compare) -> int:
        pivot = items[high]
        i = low - 1
        for j in range(low, high):
            if compare(items[j], pivot) <= 0:
                i += 1
                items[i], items[j] = items[j], items[i]
        items[i + 1], items[high] = items[high], items[i + 1]
        return i + 1
