"""A* search with a straight-line distance heuristic.

Best-first search ordered by f = g + w * h, where g is the accumulated
edge weight from the source and h estimates the remaining cost to the
target. The default heuristic is the flat-earth distance between the
node and the target (GeoCalculator.flat_earth_distance_m).

Optimality holds only when w == 1.0 and h never overestimates the
remaining weight, i.e. when edge weights are plain distances at least as
long as the straight line between their endpoints. Nodes are never
re-expanded once closed, so an inconsistent heuristic (including any
w > 1.0) can return a suboptimal route.
"""

import heapq
import logging
from collections.abc import Callable
from typing import Optional

from campus_navigator.constants import EngineLabels
from campus_navigator.core.geo_calculator import GeoCalculator
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.edge import Edge
from campus_navigator.model.node import Node
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.path_builder import route_from_predecessors, single_node_route

logger = logging.getLogger(__name__)

Heuristic = Callable[[Node, Node], float]


def straight_line_heuristic(node: Node, target: Node) -> float:
    """Flat-earth distance from node to target in meters."""
    return GeoCalculator.flat_earth_distance_m(lat1=node.lat, lon1=node.lon, lat2=target.lat, lon2=target.lon)


def manhattan_heuristic(node: Node, target: Node) -> float:
    """Projected north-south plus east-west distance; not admissible on diagonal edges."""
    return GeoCalculator.manhattan_distance_m(lat1=node.lat, lon1=node.lon, lat2=target.lat, lon2=target.lon)


class AStarEngine:
    """Heuristic-guided shortest path search.

    Args:
        heuristic_weight: Multiplier on h. 1.0 keeps the search optimal for
            admissible heuristics; values above 1.0 expand fewer nodes but
            may return a longer route.
        heuristic: Function (node, target) -> estimated remaining cost.

    Example:
        route = AStarEngine(heuristic_weight=1.5).find_path(graph=graph, source_id="a", target_id="b")
    """

    name = EngineLabels.ASTAR

    def __init__(self, heuristic_weight: float = 1.0, heuristic: Heuristic = straight_line_heuristic) -> None:
        if heuristic_weight < 0:
            raise ValueError(f"heuristic_weight must be non-negative, got {heuristic_weight}")
        self.heuristic_weight = heuristic_weight
        self.heuristic = heuristic

    def find_path(self, graph: CampusGraph, source_id: str, target_id: str) -> Optional[Route]:
        """Find a route from source to target.

        Returns:
            Route, or None if either id is unknown or the target is unreachable.
        """
        source = graph.get_node(node_id=source_id)
        target = graph.get_node(node_id=target_id)
        if source is None or target is None:
            return None

        if source_id == target_id:
            return single_node_route(node=source, name=EngineLabels.DIRECT)

        g_score: dict[str, float] = {source_id: 0.0}
        predecessors: dict[str, Edge] = {}
        closed: set[str] = set()
        open_heap: list[tuple[float, str]] = [(self._estimate(node=source, target=target), source_id)]

        while open_heap:
            _, node_id = heapq.heappop(open_heap)
            if node_id in closed:
                continue

            if node_id == target_id:
                logger.debug(f"A* {source_id}->{target_id}: expanded {len(closed)} nodes")
                return route_from_predecessors(
                    graph=graph,
                    predecessors=predecessors,
                    source_id=source_id,
                    target_id=target_id,
                    name=self.name,
                )

            closed.add(node_id)
            for edge in graph.get_edges_from(node_id=node_id):
                neighbor = graph.nodes[edge.destination.id]
                if neighbor.id in closed:
                    continue
                tentative = g_score[node_id] + edge.weight
                known = g_score.get(neighbor.id)
                if known is not None and tentative >= known:
                    continue
                g_score[neighbor.id] = tentative
                predecessors[neighbor.id] = edge
                f_score = tentative + self._estimate(node=neighbor, target=target)
                heapq.heappush(open_heap, (f_score, neighbor.id))

        logger.debug(f"A*: {target_id} unreachable from {source_id}")
        return None

    def _estimate(self, node: Node, target: Node) -> float:
        return self.heuristic_weight * self.heuristic(node, target)
