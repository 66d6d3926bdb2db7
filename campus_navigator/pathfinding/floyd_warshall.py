"""Floyd-Warshall all-pairs shortest paths.

Dynamic programming over intermediate nodes: for every k,
dist[i][j] = min(dist[i][j], dist[i][k] + dist[k][j]), recording the next
hop for path reconstruction. Each k step is one vectorised NumPy update
over the full matrix.

Complexity: O(V³) time, O(V²) memory. Only suitable for small graphs; it
is never the default engine. The single-pair entry point still runs the
full computation, so repeated single-pair queries should use Dijkstra or
A* instead.

Unreachable pairs are +inf inside the matrices only; AllPairsResult
exposes them as None.
"""

import logging
from typing import Optional

import numpy as np

from campus_navigator.constants import EngineLabels
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.path_builder import route_from_node_ids, single_node_route

logger = logging.getLogger(__name__)

NO_HOP = -1


class AllPairsResult:
    """Distance and next-hop matrices of a Floyd-Warshall run.

    Attributes:
        node_ids: Node id per matrix index, in graph insertion order
        dist: (V, V) float matrix, +inf where unreachable
        next_hop: (V, V) int matrix of the next node index, NO_HOP if none
    """

    def __init__(
        self,
        graph: CampusGraph,
        node_ids: list[str],
        dist: np.ndarray,
        next_hop: np.ndarray,
    ) -> None:
        self.graph = graph
        self.node_ids = node_ids
        self.index = {node_id: i for i, node_id in enumerate(node_ids)}
        self.dist = dist
        self.next_hop = next_hop

    def distance(self, source_id: str, target_id: str) -> Optional[float]:
        """Shortest distance, or None if unknown ids or unreachable."""
        i = self.index.get(source_id)
        j = self.index.get(target_id)
        if i is None or j is None:
            return None
        value = self.dist[i, j]
        return float(value) if np.isfinite(value) else None

    def path_ids(self, source_id: str, target_id: str) -> Optional[list[str]]:
        """Node ids along the shortest path by walking next hops."""
        i = self.index.get(source_id)
        j = self.index.get(target_id)
        if i is None or j is None:
            return None
        if i == j:
            return [source_id]

        path = [source_id]
        current = i
        # A simple path visits each node at most once
        for _ in range(len(self.node_ids)):
            current = int(self.next_hop[current, j])
            if current == NO_HOP:
                return None
            path.append(self.node_ids[current])
            if current == j:
                return path
        return None

    def route(self, source_id: str, target_id: str) -> Optional[Route]:
        """Reconstructed route, or None if no path exists."""
        if source_id == target_id:
            node = self.graph.get_node(node_id=source_id)
            return single_node_route(node=node, name=EngineLabels.DIRECT) if node is not None else None

        path_ids = self.path_ids(source_id=source_id, target_id=target_id)
        if path_ids is None:
            return None
        return route_from_node_ids(graph=self.graph, node_ids=path_ids, name=EngineLabels.FLOYD_WARSHALL)

    def routes(self) -> dict[str, dict[str, Route]]:
        """Routes for every reachable ordered pair (i != j)."""
        result: dict[str, dict[str, Route]] = {}
        for source_id in self.node_ids:
            destinations: dict[str, Route] = {}
            for target_id in self.node_ids:
                if target_id == source_id:
                    continue
                route = self.route(source_id=source_id, target_id=target_id)
                if route is not None:
                    destinations[target_id] = route
            result[source_id] = destinations
        return result

    def has_negative_cycle(self) -> bool:
        return bool(np.any(np.diag(self.dist) < 0))


class FloydWarshallEngine:
    """All-pairs shortest paths with a single-pair convenience entry point.

    Example:
        result = FloydWarshallEngine().compute_all_pairs(graph=graph)
        result.distance(source_id="main_gate", target_id="library")
    """

    name = EngineLabels.FLOYD_WARSHALL

    def compute_all_pairs(self, graph: CampusGraph) -> AllPairsResult:
        """Run the full O(V³) computation."""
        node_ids = list(graph.nodes)
        n = len(node_ids)
        index = {node_id: i for i, node_id in enumerate(node_ids)}

        dist = np.full((n, n), np.inf)
        next_hop = np.full((n, n), NO_HOP, dtype=np.int64)
        np.fill_diagonal(dist, 0.0)

        # Direct edges; parallel edges keep the cheapest
        for edge in graph.edges:
            i = index[edge.source.id]
            j = index[edge.destination.id]
            if edge.weight < dist[i, j]:
                dist[i, j] = edge.weight
                next_hop[i, j] = j

        for k in range(n):
            through_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
            improved = through_k < dist
            if not improved.any():
                continue
            dist = np.where(improved, through_k, dist)
            next_hop = np.where(improved, next_hop[:, k, np.newaxis], next_hop)

        logger.debug(f"Floyd-Warshall: computed {n}x{n} distance matrix")
        return AllPairsResult(graph=graph, node_ids=node_ids, dist=dist, next_hop=next_hop)

    def find_path(self, graph: CampusGraph, source_id: str, target_id: str) -> Optional[Route]:
        """Shortest route for one pair (runs the full all-pairs computation).

        Returns:
            Route, or None if either id is unknown or the target is unreachable.
        """
        if not graph.has_node(node_id=source_id) or not graph.has_node(node_id=target_id):
            return None
        if source_id == target_id:
            return single_node_route(node=graph.nodes[source_id], name=EngineLabels.DIRECT)

        return self.compute_all_pairs(graph=graph).route(source_id=source_id, target_id=target_id)

    def has_negative_cycle(self, graph: CampusGraph) -> bool:
        """True if any node's shortest distance to itself is negative."""
        if graph.node_count == 0:
            return False
        return self.compute_all_pairs(graph=graph).has_negative_cycle()
