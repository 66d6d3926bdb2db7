"""Data model classes for campus graph representation.

- Node: Campus location (id, name, coordinates, landmark flag)
- Edge: Directed connection with distance, weight, path type and travel time
- EdgeKey: (source id, destination id) key for edge deduplication
- Route: Ordered path of nodes/edges with accumulated totals
- Landmark: Searchable landmark metadata wrapping a Node
- CampusGraph: Central container owning nodes and edges
"""

from campus_navigator.model.campus_graph import CampusGraph, UnknownNodeError
from campus_navigator.model.edge import Edge, EdgeKey
from campus_navigator.model.landmark import Landmark, LandmarkType
from campus_navigator.model.node import Node
from campus_navigator.model.route import Route

__all__ = [
    "Node",
    "Edge",
    "EdgeKey",
    "Route",
    "Landmark",
    "LandmarkType",
    "CampusGraph",
    "UnknownNodeError",
]
