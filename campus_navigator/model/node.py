"""Node - A campus location in the routing graph.

A Node is a point with coordinates and a display name. Identity is the id
alone: two Node objects with the same id compare and hash equal even if
their other attributes differ.

Nodes are created when campus data is loaded and are never mutated once
inserted into a CampusGraph.
"""

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from campus_navigator.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class Node:
    """A campus location.

    Attributes:
        id: Unique identifier (e.g., "library")
        name: Display name (e.g., "Balme Library")
        lat: Latitude in decimal degrees (WGS84)
        lon: Longitude in decimal degrees (WGS84)
        description: Optional free text
        is_landmark: Whether the location is notable enough for via-routes

    Example:
        node = Node(id="library", name="Balme Library", lat=5.6525, lon=-0.1845, is_landmark=True)
    """

    id: str
    name: str = field(compare=False)
    lat: float = field(compare=False)
    lon: float = field(compare=False)
    description: str = field(default="", compare=False)
    is_landmark: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if np.isnan(self.lat) or np.isnan(self.lon):
            raise ValueError(f"Node {self.id} cannot have NaN coordinates ({self.lat}, {self.lon})")

    @property
    def lat_lon(self) -> tuple[float, float]:
        """Return (lat, lon) tuple - standard geographic order."""
        return (self.lat, self.lon)

    def distance_to(self, other: "Node") -> float:
        """Great-circle distance to another node in meters."""
        return GeoCalculator.haversine_distance_m(lat1=self.lat, lon1=self.lon, lat2=other.lat, lon2=other.lon)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "lat": self.lat,
            "lon": self.lon,
            "description": self.description,
            "is_landmark": self.is_landmark,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Node":
        """Create Node from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            description=data.get("description", ""),
            is_landmark=bool(data.get("is_landmark", False)),
        )

    def __repr__(self) -> str:
        marker = ", landmark" if self.is_landmark else ""
        return f"Node({self.id}, '{self.name}', lat={self.lat:.6f}, lon={self.lon:.6f}{marker})"
