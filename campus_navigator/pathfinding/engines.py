"""Engine selection for the pathfinding algorithms.

All engines share one contract (PathEngine.find_path). Engine is a closed
enum of identifiers; create_engine maps each member to an implementation,
and the module-level assertion keeps the mapping exhaustive when a new
member is added.
"""

from enum import Enum
from typing import Optional, Protocol

from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.astar import AStarEngine
from campus_navigator.pathfinding.dijkstra import DijkstraEngine
from campus_navigator.pathfinding.floyd_warshall import FloydWarshallEngine


class Engine(Enum):
    """Available shortest-path engines."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    FLOYD_WARSHALL = "floyd_warshall"


class PathEngine(Protocol):
    """Common interface of the pathfinding engines."""

    name: str

    def find_path(self, graph: CampusGraph, source_id: str, target_id: str) -> Optional[Route]: ...


_ENGINE_CLASSES: dict[Engine, type] = {
    Engine.DIJKSTRA: DijkstraEngine,
    Engine.ASTAR: AStarEngine,
    Engine.FLOYD_WARSHALL: FloydWarshallEngine,
}
assert set(_ENGINE_CLASSES) == set(Engine), "Every Engine member needs an implementation"


def create_engine(engine: Engine, heuristic_weight: float = 1.0) -> PathEngine:
    """Instantiate the engine for an identifier.

    Args:
        engine: Engine identifier
        heuristic_weight: Only used by A*

    Returns:
        Engine instance implementing PathEngine.
    """
    if engine is Engine.ASTAR:
        return AStarEngine(heuristic_weight=heuristic_weight)
    return _ENGINE_CLASSES[engine]()


def find_path(
    graph: CampusGraph,
    source_id: str,
    target_id: str,
    engine: Engine = Engine.DIJKSTRA,
    heuristic_weight: float = 1.0,
) -> Optional[Route]:
    """Find a route with the selected engine; None when no route exists."""
    return create_engine(engine=engine, heuristic_weight=heuristic_weight).find_path(
        graph=graph,
        source_id=source_id,
        target_id=target_id,
    )
