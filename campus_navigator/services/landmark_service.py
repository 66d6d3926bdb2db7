"""Landmark Catalog - Searchable registry of campus landmarks.

Landmarks are kept in insertion order with a lowercase-category index for
direct category lookups. Keyword search drives the via-landmark routing
of RouteService.find_routes_by_landmark.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.landmark import Landmark, LandmarkType
from campus_navigator.model.node import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LandmarkStats:
    """Summary of a landmark catalog (all zero or empty for an empty catalog)."""

    count: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    type_counts: dict[str, int] = field(default_factory=dict)
    average_importance: float = 0.0

    @property
    def categories(self) -> set[str]:
        return set(self.category_counts)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class LandmarkCatalog:
    """Registry of landmarks with keyword, category and proximity lookups.

    Example:
        catalog = LandmarkCatalog()
        catalog.add(landmark=Landmark(id="lm_library", name="Balme Library", category="Academic", node=library))
        catalog.search(keyword="library")  # [Landmark('Balme Library', ...)]
    """

    def __init__(self) -> None:
        self.landmarks: dict[str, Landmark] = {}
        self._by_category: dict[str, list[Landmark]] = {}

    def __len__(self) -> int:
        return len(self.landmarks)

    def __contains__(self, landmark_id: object) -> bool:
        return landmark_id in self.landmarks

    # =========================================================================
    # Registry
    # =========================================================================

    def add(self, landmark: Landmark) -> bool:
        """Register a landmark; returns False if its id is already present."""
        if landmark.id in self.landmarks:
            return False
        self.landmarks[landmark.id] = landmark
        self._by_category.setdefault(landmark.category.lower(), []).append(landmark)
        return True

    def remove(self, landmark_id: str) -> bool:
        """Unregister a landmark; returns False if the id is unknown."""
        landmark = self.landmarks.pop(landmark_id, None)
        if landmark is None:
            return False

        category = landmark.category.lower()
        members = self._by_category[category]
        members.remove(landmark)
        if not members:
            del self._by_category[category]
        return True

    def get(self, landmark_id: str) -> Optional[Landmark]:
        return self.landmarks.get(landmark_id)

    def all(self) -> list[Landmark]:
        return list(self.landmarks.values())

    # =========================================================================
    # Queries
    # =========================================================================

    def search(self, keyword: Optional[str]) -> list[Landmark]:
        """Landmarks whose name, category or description contains keyword.

        Returns:
            Matches sorted by importance (most important first); empty for a
            blank keyword.
        """
        if keyword is None or not keyword.strip():
            return []

        term = keyword.strip().lower()
        matches = [landmark for landmark in self.landmarks.values() if landmark.matches(search_term=term)]
        matches.sort(key=lambda landmark: landmark.importance, reverse=True)
        logger.debug(f"Landmark search '{term}': {len(matches)} matches")
        return matches

    def by_category(self, category: str) -> list[Landmark]:
        """Exact (case-insensitive) category lookup."""
        return list(self._by_category.get(category.lower(), []))

    def by_type(self, landmark_type: LandmarkType) -> list[Landmark]:
        return [landmark for landmark in self.landmarks.values() if landmark.type is landmark_type]

    def near(self, node: Node, max_distance_m: float) -> list[Landmark]:
        """Landmarks within max_distance_m (great-circle) of node, closest first."""
        in_range = []
        for landmark in self.landmarks.values():
            distance_m = node.distance_to(other=landmark.node)
            if distance_m <= max_distance_m:
                in_range.append((distance_m, landmark))
        in_range.sort(key=lambda pair: pair[0])
        return [landmark for _, landmark in in_range]

    def most_important(self, limit: int) -> list[Landmark]:
        ranked = sorted(self.landmarks.values(), key=lambda landmark: landmark.importance, reverse=True)
        return ranked[: max(0, limit)]

    def categories(self) -> set[str]:
        """Distinct categories as registered (case preserved)."""
        return {landmark.category for landmark in self.landmarks.values()}

    def statistics(self) -> LandmarkStats:
        """Counts per category and per type, plus the mean importance."""
        if not self.landmarks:
            return LandmarkStats()

        category_counts: dict[str, int] = {}
        type_counts: dict[str, int] = {}
        for landmark in self.landmarks.values():
            category_counts[landmark.category] = category_counts.get(landmark.category, 0) + 1
            type_counts[landmark.type.value] = type_counts.get(landmark.type.value, 0) + 1

        importances = [landmark.importance for landmark in self.landmarks.values()]
        return LandmarkStats(
            count=len(self.landmarks),
            category_counts=category_counts,
            type_counts=type_counts,
            average_importance=sum(importances) / len(importances),
        )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_graph(cls, graph: CampusGraph, category: str = "") -> "LandmarkCatalog":
        """Catalog with one landmark per graph node flagged is_landmark.

        Landmark ids are "lm_<node id>"; name and description come from the node.
        The category defaults to empty, so keyword search only matches the
        node name and description.
        """
        catalog = cls()
        for node in graph.get_landmarks():
            catalog.add(
                landmark=Landmark(
                    id=f"lm_{node.id}",
                    name=node.name,
                    category=category,
                    node=node,
                    description=node.description,
                )
            )
        return catalog

    def __repr__(self) -> str:
        return f"LandmarkCatalog(landmarks={len(self.landmarks)}, categories={len(self._by_category)})"
