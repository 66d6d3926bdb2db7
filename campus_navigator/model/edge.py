"""Edge - A directed connection between two campus nodes.

Edges carry a physical distance, a routing weight (defaults to the
distance, may differ for time-based costs) and a path type that selects
the travel speed. Bidirectional connectivity is two Edge objects.

Edges use identity equality: two parallel edges between the same ordered
pair of nodes are distinct objects and can both live in a graph. Code that
needs to collapse edges by their endpoints uses the explicit EdgeKey.
"""

from dataclasses import dataclass
from math import ceil
from typing import Any

import numpy as np

from campus_navigator.constants import SpeedConfig
from campus_navigator.model.node import Node


@dataclass(frozen=True)
class EdgeKey:
    """Composite (source id, destination id) key for edge deduplication.

    Never used for storage: parallel edges share a key.
    """

    source_id: str
    destination_id: str

    def reversed(self) -> "EdgeKey":
        return EdgeKey(source_id=self.destination_id, destination_id=self.source_id)


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed, weighted connection between two nodes.

    Attributes:
        source: Start node (shared with the graph, not owned)
        destination: End node (shared with the graph, not owned)
        distance_m: Physical length in meters
        weight: Routing cost; defaults to distance_m when None
        path_type: Free-form tag ("walkway", "road", "stairs", ...)
        speed_kmh: Explicit speed override; 0 means "use the path type speed"

    Example:
        edge = Edge(source=gate, destination=hall, distance_m=300.0)
        edge.travel_time_min  # 4 (300 m at 5 km/h, rounded up)
    """

    source: Node
    destination: Node
    distance_m: float
    weight: float | None = None
    path_type: str = SpeedConfig.DEFAULT_PATH_TYPE
    speed_kmh: float = 0.0

    def __post_init__(self) -> None:
        """Default the weight and reject NaN or negative costs."""
        if self.weight is None:
            object.__setattr__(self, "weight", float(self.distance_m))
        if np.isnan(self.distance_m) or np.isnan(self.weight):
            raise ValueError(f"Edge {self.source.id}->{self.destination.id} cannot have NaN distance or weight")
        if self.distance_m < 0:
            raise ValueError(f"Edge {self.source.id}->{self.destination.id} has negative distance {self.distance_m}")
        if self.weight < 0:
            raise ValueError(f"Edge {self.source.id}->{self.destination.id} has negative weight {self.weight}")

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(source_id=self.source.id, destination_id=self.destination.id)

    @property
    def effective_speed_kmh(self) -> float:
        """Explicit speed override if positive, else the path type's speed."""
        if self.speed_kmh > 0:
            return self.speed_kmh
        path_type = (self.path_type or SpeedConfig.DEFAULT_PATH_TYPE).lower()
        return SpeedConfig.SPEED_BY_PATH_TYPE.get(path_type, SpeedConfig.WALKING_KMH)

    @property
    def travel_time_min(self) -> int:
        """Travel time in whole minutes, rounded up."""
        hours = (self.distance_m / 1000.0) / self.effective_speed_kmh
        return ceil(hours * 60)

    def reverse(self) -> "Edge":
        """Edge with swapped endpoints and identical distance, weight, type and speed."""
        return Edge(
            source=self.destination,
            destination=self.source,
            distance_m=self.distance_m,
            weight=self.weight,
            path_type=self.path_type,
            speed_kmh=self.speed_kmh,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.id,
            "destination": self.destination.id,
            "distance_m": self.distance_m,
            "weight": self.weight,
            "path_type": self.path_type,
            "speed_kmh": self.speed_kmh,
        }

    def __repr__(self) -> str:
        return (
            f"Edge({self.source.name} -> {self.destination.name}, {self.distance_m:.1f}m, "
            f"{self.travel_time_min}min, {self.path_type})"
        )
