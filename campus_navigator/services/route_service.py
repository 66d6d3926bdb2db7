"""Route Service - Multi-engine route search, alternatives and ranking.

Orchestrates the pathfinding engines on one CampusGraph:
1. Single best route with a selectable engine
2. Alternatives: all three engines plus one via-route per landmark,
   deduplicated by exact node-id sequence and ranked distance-then-time
3. Keyword-driven via-landmark search ranked by preference score
4. One-to-many queries and summary statistics

"No route" is always an empty result (None, [] or {}); strict lookups are
opt-in through find_best_route(strict=True).
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Optional

from campus_navigator.constants import EngineLabels, SearchConfig
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.astar import AStarEngine
from campus_navigator.pathfinding.dijkstra import DijkstraEngine
from campus_navigator.pathfinding.engines import Engine, find_path
from campus_navigator.pathfinding.floyd_warshall import FloydWarshallEngine
from campus_navigator.pathfinding.path_builder import concatenate_routes
from campus_navigator.ranking.criteria import PreferenceWeights, SortAlgorithm, SortCriterion
from campus_navigator.ranking.merge_sort import MergeSort
from campus_navigator.ranking.route_sorter import sort_routes
from campus_navigator.services.landmark_service import LandmarkCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteStats:
    """Summary statistics over a set of routes (all zero for an empty set)."""

    count: int = 0
    total_distance_m: float = 0.0
    average_distance_m: float = 0.0
    min_distance_m: float = 0.0
    max_distance_m: float = 0.0
    total_time_min: int = 0
    average_time_min: float = 0.0
    min_time_min: int = 0
    max_time_min: int = 0
    routes_with_landmarks: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RouteService:
    """High-level routing over a campus graph.

    The graph is treated as read-only; build or load it before creating the
    service. The landmark catalog defaults to one built from the graph's
    landmark nodes.

    Example:
        service = RouteService(graph=sample_campus_graph())
        best = service.find_best_route(source_id="main_gate", target_id="library")
        options = service.find_multiple_routes(source_id="main_gate", target_id="sports", max_routes=3)
    """

    def __init__(self, graph: CampusGraph, catalog: Optional[LandmarkCatalog] = None) -> None:
        self.graph = graph
        self.catalog = catalog if catalog is not None else LandmarkCatalog.from_graph(graph=graph)
        self._dijkstra = DijkstraEngine()

    # =========================================================================
    # Single route
    # =========================================================================

    def find_best_route(
        self,
        source_id: str,
        target_id: str,
        engine: Engine = Engine.DIJKSTRA,
        heuristic_weight: float = 1.0,
        strict: bool = False,
    ) -> Optional[Route]:
        """Best route according to one engine.

        Args:
            source_id: Start node id
            target_id: Destination node id
            engine: Engine to run
            heuristic_weight: A* heuristic scale (ignored by other engines)
            strict: Raise for unknown ids instead of returning None

        Returns:
            Route, or None if an id is unknown (non-strict) or no path exists.

        Raises:
            UnknownNodeError: In strict mode, if either id is not in the graph.
        """
        if strict:
            self.graph.require_node(node_id=source_id)
            self.graph.require_node(node_id=target_id)

        route = find_path(
            graph=self.graph,
            source_id=source_id,
            target_id=target_id,
            engine=engine,
            heuristic_weight=heuristic_weight,
        )
        if route is None:
            logger.info(f"No route {source_id} -> {target_id} ({engine.value})")
        else:
            logger.info(f"Best route {source_id} -> {target_id} ({engine.value}): {route}")
        return route

    def find_route_via_intermediate(self, source_id: str, target_id: str, via_id: str) -> Optional[Route]:
        """Shortest route source -> via -> target as two concatenated Dijkstra legs.

        Returns:
            Combined route, or None if either leg does not exist.
        """
        first_leg = self._dijkstra.find_path(graph=self.graph, source_id=source_id, target_id=via_id)
        if first_leg is None:
            return None
        second_leg = self._dijkstra.find_path(graph=self.graph, source_id=via_id, target_id=target_id)
        if second_leg is None:
            return None
        return concatenate_routes(first=first_leg, second=second_leg)

    # =========================================================================
    # Alternatives
    # =========================================================================

    def find_multiple_routes(
        self,
        source_id: str,
        target_id: str,
        max_routes: int = SearchConfig.DEFAULT_MAX_ROUTES,
    ) -> list[Route]:
        """Distinct route options from all engines plus via-landmark detours.

        Every landmark node of the graph is tried as an intermediate before
        the ranked list (distance, then time) is truncated to max_routes.

        Returns:
            Up to max_routes routes with pairwise distinct node sequences.
        """
        if max_routes <= 0:
            return []

        candidates: list[Route] = []
        labelled_engines = (
            (DijkstraEngine(), EngineLabels.SHORTEST_DISTANCE),
            (AStarEngine(), EngineLabels.OPTIMAL_ASTAR),
            (FloydWarshallEngine(), EngineLabels.ALTERNATIVE),
        )
        for engine, label in labelled_engines:
            route = engine.find_path(graph=self.graph, source_id=source_id, target_id=target_id)
            if route is not None:
                route.name = label
                self._add_unique(routes=candidates, route=route)

        for landmark in self.graph.get_landmarks():
            via_route = self.find_route_via_intermediate(source_id=source_id, target_id=target_id, via_id=landmark.id)
            if via_route is not None:
                via_route.name = f"{EngineLabels.VIA_PREFIX}{landmark.name}"
                self._add_unique(routes=candidates, route=via_route)

        ranked = MergeSort.sort_by_multiple_criteria(routes=candidates)[:max_routes]
        logger.info(f"Found {len(candidates)} distinct routes {source_id} -> {target_id}, returning {len(ranked)}")
        return ranked

    def find_routes_by_landmark(
        self,
        source_id: str,
        target_id: str,
        keyword: str,
        weights: PreferenceWeights = PreferenceWeights(),
    ) -> list[Route]:
        """Via-routes through catalog landmarks matching keyword.

        Matching is a case-insensitive substring test on landmark name,
        category and description. Landmarks located off the graph are skipped.

        Returns:
            Distinct routes ranked by ascending preference score.
        """
        routes: list[Route] = []
        for landmark in self.catalog.search(keyword=keyword):
            via_route = self.find_route_via_intermediate(
                source_id=source_id,
                target_id=target_id,
                via_id=landmark.node.id,
            )
            if via_route is not None:
                via_route.name = f"{EngineLabels.VIA_PREFIX}{landmark.name}"
                self._add_unique(routes=routes, route=via_route)

        logger.info(f"Landmark search '{keyword}' {source_id} -> {target_id}: {len(routes)} routes")
        return MergeSort.sort_by_preference_score(routes=routes, weights=weights)

    def find_routes_to_multiple_destinations(self, source_id: str, target_ids: list[str]) -> dict[str, Route]:
        """Shortest route to each reachable target from one Dijkstra run.

        Unreachable or unknown targets are omitted; the source itself maps to
        its single-node route if requested.
        """
        all_routes = self._dijkstra.find_all_shortest_paths(graph=self.graph, source_id=source_id)
        routes: dict[str, Route] = {}
        for target_id in target_ids:
            if target_id in all_routes:
                routes[target_id] = all_routes[target_id]
            elif target_id == source_id and self.graph.has_node(node_id=source_id):
                routes[target_id] = self._dijkstra.find_path(
                    graph=self.graph,
                    source_id=source_id,
                    target_id=target_id,
                )
        return routes

    # =========================================================================
    # Ranking and analysis
    # =========================================================================

    @staticmethod
    def sort_routes(
        routes: Optional[list[Route]],
        criterion: SortCriterion = SortCriterion.DISTANCE,
        algorithm: SortAlgorithm = SortAlgorithm.MERGE,
    ) -> list[Route]:
        return sort_routes(routes=routes, criterion=criterion, algorithm=algorithm)

    @staticmethod
    def analyze_routes(routes: Optional[list[Route]]) -> RouteStats:
        """Count, distance and time totals/extremes, and routes passing landmarks."""
        if not routes:
            return RouteStats()

        distances = [route.total_distance_m for route in routes]
        times = [route.total_time_min for route in routes]
        return RouteStats(
            count=len(routes),
            total_distance_m=sum(distances),
            average_distance_m=sum(distances) / len(routes),
            min_distance_m=min(distances),
            max_distance_m=max(distances),
            total_time_min=sum(times),
            average_time_min=sum(times) / len(routes),
            min_time_min=min(times),
            max_time_min=max(times),
            routes_with_landmarks=sum(1 for route in routes if route.landmarks),
        )

    @staticmethod
    def _add_unique(routes: list[Route], route: Route) -> bool:
        """Append route unless a route with the same node sequence is present."""
        if any(existing.same_path_as(other=route) for existing in routes):
            logger.debug(f"Skipping duplicate route {route.name}: {' -> '.join(route.node_ids)}")
            return False
        routes.append(route)
        return True
