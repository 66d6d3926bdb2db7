"""CampusGraph - The routing universe of nodes and directed edges.

Owns the node table, the adjacency lists and the flat edge list.
Provides operations for:
- Building the graph (nodes, directed or bidirectional edges)
- Neighbor and reachability queries
- Landmark filtering and name search
- Serialization/deserialization

Thread safety: none. A graph is built once and then treated as read-only
while routes are computed on it. Callers that mutate a graph while another
thread computes a route on it must provide their own locking (or build a
fresh graph per query session).
"""

import logging
from collections import deque
from typing import Any, Optional

from campus_navigator.constants import SearchConfig
from campus_navigator.model.edge import Edge
from campus_navigator.model.node import Node

logger = logging.getLogger(__name__)


class UnknownNodeError(KeyError):
    """Raised by strict lookups when a node id is not in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Unknown node id: {self.node_id!r}"


class CampusGraph:
    """Directed graph of campus locations.

    Node ids are unique: re-adding an id overwrites the node. Adjacency lists
    keep insertion order and may hold parallel edges between the same pair.

    Example:
        graph = CampusGraph()
        graph.add_edge(edge=Edge(source=gate, destination=hall, distance_m=300.0))
        graph.get_neighbors(node_id="main_gate")  # [hall]
    """

    def __init__(self) -> None:
        """Initialize empty graph."""
        self.nodes: dict[str, Node] = {}
        self.adjacency: dict[str, list[Edge]] = {}
        self.edges: list[Edge] = []

    # =========================================================================
    # Building
    # =========================================================================

    def add_node(self, node: Node) -> None:
        """Insert or overwrite a node; its adjacency list is created if absent."""
        self.nodes[node.id] = node
        self.adjacency.setdefault(node.id, [])

    def add_edge(self, edge: Edge, bidirectional: bool = True) -> None:
        """Add an edge, auto-adding both endpoints.

        Args:
            edge: Edge to add
            bidirectional: Also add edge.reverse()
        """
        self.add_node(node=edge.source)
        self.add_node(node=edge.destination)

        self.adjacency[edge.source.id].append(edge)
        self.edges.append(edge)

        if bidirectional:
            reverse_edge = edge.reverse()
            self.adjacency[reverse_edge.source.id].append(reverse_edge)
            self.edges.append(reverse_edge)

    def connect(
        self,
        source_id: str,
        destination_id: str,
        distance_m: Optional[float] = None,
        weight: Optional[float] = None,
        path_type: str = "walkway",
        speed_kmh: float = 0.0,
        bidirectional: bool = True,
    ) -> Edge:
        """Connect two existing nodes, measuring the distance if not given.

        Args:
            source_id, destination_id: Ids of nodes already in the graph
            distance_m: Edge length; great-circle distance between the nodes if None
            weight: Routing cost; defaults to the distance
            path_type: Path type tag
            speed_kmh: Explicit speed override (0 = by path type)
            bidirectional: Also add the reverse edge

        Returns:
            The forward edge.

        Raises:
            UnknownNodeError: If either node is missing.
        """
        source = self.require_node(node_id=source_id)
        destination = self.require_node(node_id=destination_id)
        if distance_m is None:
            distance_m = source.distance_to(other=destination)

        edge = Edge(
            source=source,
            destination=destination,
            distance_m=distance_m,
            weight=weight,
            path_type=path_type,
            speed_kmh=speed_kmh,
        )
        self.add_edge(edge=edge, bidirectional=bidirectional)
        return edge

    # =========================================================================
    # Node Queries
    # =========================================================================

    def get_node(self, node_id: str) -> Optional[Node]:
        """Return the node or None; never raises."""
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def require_node(self, node_id: str) -> Node:
        """Return the node.

        Raises:
            UnknownNodeError: If the id is not in the graph.
        """
        node = self.nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        return node

    def all_nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return list(self.nodes.values())

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def get_landmarks(self) -> list[Node]:
        return [node for node in self.nodes.values() if node.is_landmark]

    def find_nodes_by_name(self, search_term: str) -> list[Node]:
        """Nodes whose name contains search_term (case-insensitive)."""
        term = search_term.lower()
        return [node for node in self.nodes.values() if term in node.name.lower()]

    def find_nearest_node(
        self,
        lat: float,
        lon: float,
        threshold_m: float = SearchConfig.NEAREST_NODE_THRESHOLD_M,
    ) -> Optional[Node]:
        """Find nearest node within threshold distance.

        Returns:
            Nearest Node or None if none within threshold.
        """
        probe = Node(id="__probe__", name="", lat=lat, lon=lon)
        best_dist = threshold_m
        best_node = None

        for node in self.nodes.values():
            dist = node.distance_to(other=probe)
            if dist < best_dist:
                best_dist = dist
                best_node = node

        return best_node

    # =========================================================================
    # Edge Queries
    # =========================================================================

    def get_edges_from(self, node_id: str) -> list[Edge]:
        """Outgoing edges in insertion order; empty for unknown ids."""
        return self.adjacency.get(node_id, [])

    def get_neighbors(self, node_id: str) -> list[Node]:
        """Destination nodes of the outgoing edges, as currently stored in the graph."""
        return [self.nodes[edge.destination.id] for edge in self.get_edges_from(node_id=node_id)]

    def cheapest_edge(self, source_id: str, destination_id: str) -> Optional[Edge]:
        """Lowest-weight edge from source to destination (first one on ties)."""
        best: Optional[Edge] = None
        for edge in self.get_edges_from(node_id=source_id):
            if edge.destination.id == destination_id and (best is None or edge.weight < best.weight):
                best = edge
        return best

    def has_path(self, source_id: str, destination_id: str) -> bool:
        """Breadth-first reachability check; False for unknown ids."""
        if source_id not in self.nodes or destination_id not in self.nodes:
            return False

        visited = {source_id}
        queue = deque([source_id])
        while queue:
            current = queue.popleft()
            if current == destination_id:
                return True
            for edge in self.get_edges_from(node_id=current):
                neighbor_id = edge.destination.id
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    queue.append(neighbor_id)
        return False

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Serialize graph to JSON-compatible dict.

        Every stored edge is written, reverse edges included, so from_dict
        restores them one-way.
        """
        return {
            "version": "1.0",
            "nodes": [node.to_dict() for node in self.nodes.values()],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CampusGraph":
        """Deserialize graph from dict.

        Edge entries may carry a "bidirectional" flag (default False) so that
        hand-written campus files can list each walkway once.

        Raises:
            KeyError: If a required field is missing.
            UnknownNodeError: If an edge references a node that is not listed.
        """
        graph = cls()
        for node_data in data["nodes"]:
            graph.add_node(node=Node.from_dict(data=node_data))

        for edge_data in data["edges"]:
            graph.connect(
                source_id=edge_data["source"],
                destination_id=edge_data["destination"],
                distance_m=edge_data.get("distance_m"),
                weight=edge_data.get("weight"),
                path_type=edge_data.get("path_type", "walkway"),
                speed_kmh=edge_data.get("speed_kmh", 0.0),
                bidirectional=edge_data.get("bidirectional", False),
            )

        logger.debug(f"Graph restored: {graph.node_count} nodes, {graph.edge_count} edges")
        return graph

    def __repr__(self) -> str:
        return f"CampusGraph(nodes={self.node_count}, edges={self.edge_count})"
