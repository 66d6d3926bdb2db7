"""Landmark - A notable campus location with a category and importance.

Landmarks wrap a graph Node (single source of truth for location) and add
search metadata used by keyword-driven via-landmark routing.
"""

from dataclasses import dataclass, field
from enum import Enum

from campus_navigator.model.node import Node


class LandmarkType(Enum):
    """Landmark type derived from the free-form category."""

    ACADEMIC = "Academic Buildings"
    RESIDENTIAL = "Residential Halls"
    DINING = "Dining & Food"
    RECREATION = "Recreation & Sports"
    SERVICE = "Services & Facilities"
    TRANSPORT = "Transportation"
    OTHER = "Other"


# Category substring -> type, checked in order
_CATEGORY_KEYWORDS = (
    ("academic", LandmarkType.ACADEMIC),
    ("residential", LandmarkType.RESIDENTIAL),
    ("dining", LandmarkType.DINING),
    ("recreation", LandmarkType.RECREATION),
    ("service", LandmarkType.SERVICE),
    ("transport", LandmarkType.TRANSPORT),
)


@dataclass(frozen=True)
class Landmark:
    """A searchable landmark located at a graph node.

    Attributes:
        id: Unique identifier (e.g., "lm_library")
        name: Display name
        category: Free-form category (e.g., "Academic")
        node: Graph node where the landmark is located
        description: Free text matched by keyword search
        importance: 0.0 (least) to 1.0 (most important), clamped

    Example:
        landmark = Landmark(id="lm_library", name="Balme Library", category="Academic", node=library)
    """

    id: str
    name: str = field(compare=False)
    category: str = field(compare=False)
    node: Node = field(compare=False)
    description: str = field(default="", compare=False)
    importance: float = field(default=0.5, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "importance", max(0.0, min(1.0, self.importance)))

    @property
    def type(self) -> LandmarkType:
        category = self.category.lower()
        for keyword, landmark_type in _CATEGORY_KEYWORDS:
            if keyword in category:
                return landmark_type
        return LandmarkType.OTHER

    def matches(self, search_term: str) -> bool:
        """Case-insensitive substring match on name, category or description."""
        term = search_term.lower()
        return term in self.name.lower() or term in self.category.lower() or term in self.description.lower()

    def __repr__(self) -> str:
        return f"Landmark('{self.name}', category='{self.category}', importance={self.importance:.2f})"
