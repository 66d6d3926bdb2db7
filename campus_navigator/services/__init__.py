"""High-level services built on the graph model and the pathfinding engines.

- LandmarkCatalog: keyword, category and proximity search over landmarks, statistics
- RouteService: best route, alternatives, via-landmark search, statistics
"""

from campus_navigator.services.landmark_service import LandmarkCatalog, LandmarkStats
from campus_navigator.services.route_service import RouteService, RouteStats

__all__ = [
    "LandmarkCatalog",
    "LandmarkStats",
    "RouteService",
    "RouteStats",
]
