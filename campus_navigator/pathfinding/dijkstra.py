"""Dijkstra's algorithm for single-source shortest paths.

Classic binary-heap relaxation over edge weights (which may be distances
or time-based costs). Weights are non-negative by construction (Edge
rejects negative values), so the search may stop as soon as the target is
popped from the frontier.

Complexity: O((V + E) log V).

Tie-break: heap entries are (distance, node_id), so among frontier nodes
with equal distance the lexicographically smallest id is expanded first.
"""

import heapq
import logging
from typing import Optional

from campus_navigator.constants import EngineLabels
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.edge import Edge
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.path_builder import route_from_predecessors, single_node_route

logger = logging.getLogger(__name__)


class DijkstraEngine:
    """Shortest path by cumulative edge weight.

    Example:
        route = DijkstraEngine().find_path(graph=graph, source_id="main_gate", target_id="library")
    """

    name = EngineLabels.DIJKSTRA

    def find_path(self, graph: CampusGraph, source_id: str, target_id: str) -> Optional[Route]:
        """Find the minimum-weight route from source to target.

        Returns:
            Route, or None if either id is unknown or the target is unreachable.
        """
        source = graph.get_node(node_id=source_id)
        if source is None or not graph.has_node(node_id=target_id):
            return None

        if source_id == target_id:
            return single_node_route(node=source, name=EngineLabels.DIRECT)

        distances, predecessors = self._relax(graph=graph, source_id=source_id, target_id=target_id)
        if target_id not in distances:
            logger.debug(f"Dijkstra: {target_id} unreachable from {source_id}")
            return None

        return route_from_predecessors(
            graph=graph,
            predecessors=predecessors,
            source_id=source_id,
            target_id=target_id,
            name=self.name,
        )

    def find_all_shortest_paths(self, graph: CampusGraph, source_id: str) -> dict[str, Route]:
        """Shortest routes from source to every reachable node (source excluded).

        Returns:
            Mapping node id -> Route; empty if the source is unknown.
        """
        if not graph.has_node(node_id=source_id):
            return {}

        distances, predecessors = self._relax(graph=graph, source_id=source_id, target_id=None)

        routes: dict[str, Route] = {}
        for node_id in graph.nodes:
            if node_id == source_id or node_id not in distances:
                continue
            route = route_from_predecessors(
                graph=graph,
                predecessors=predecessors,
                source_id=source_id,
                target_id=node_id,
                name=self.name,
            )
            if route is not None:
                routes[node_id] = route
        return routes

    def shortest_distances(self, graph: CampusGraph, source_id: str) -> dict[str, float]:
        """Final distance of every node reachable from source (source maps to 0)."""
        if not graph.has_node(node_id=source_id):
            return {}
        distances, _ = self._relax(graph=graph, source_id=source_id, target_id=None)
        return distances

    @staticmethod
    def _relax(
        graph: CampusGraph,
        source_id: str,
        target_id: Optional[str],
    ) -> tuple[dict[str, float], dict[str, Edge]]:
        """Run the relaxation loop.

        Args:
            target_id: Stop when this node is popped; None runs to completion.

        Returns:
            (distances, predecessors). A node absent from distances was never
            reached; predecessors maps node id -> edge of its best known path.
        """
        distances: dict[str, float] = {source_id: 0.0}
        predecessors: dict[str, Edge] = {}
        closed: set[str] = set()
        frontier: list[tuple[float, str]] = [(0.0, source_id)]

        while frontier:
            dist, node_id = heapq.heappop(frontier)
            if node_id in closed:
                continue
            closed.add(node_id)

            if node_id == target_id:
                break

            for edge in graph.get_edges_from(node_id=node_id):
                neighbor_id = edge.destination.id
                if neighbor_id in closed:
                    continue
                candidate = dist + edge.weight
                known = distances.get(neighbor_id)
                if known is None or candidate < known:
                    distances[neighbor_id] = candidate
                    predecessors[neighbor_id] = edge
                    heapq.heappush(frontier, (candidate, neighbor_id))

        logger.debug(f"Dijkstra from {source_id}: closed {len(closed)} of {graph.node_count} nodes")
        return distances, predecessors
