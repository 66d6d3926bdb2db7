"""Shortest-path engines over a CampusGraph.

- DijkstraEngine: single-source shortest paths (plus all-destinations variant)
- AStarEngine: heuristic-guided search with an optional heuristic weight
- FloydWarshallEngine: all-pairs shortest paths, negative-cycle check
- Engine / find_path: enum-based engine selection behind one contract

Every engine returns None (never raises) for unknown ids or unreachable
targets, and a single-node route when source == target.
"""

from campus_navigator.pathfinding.astar import AStarEngine
from campus_navigator.pathfinding.dijkstra import DijkstraEngine
from campus_navigator.pathfinding.engines import Engine, PathEngine, create_engine, find_path
from campus_navigator.pathfinding.floyd_warshall import AllPairsResult, FloydWarshallEngine

__all__ = [
    "DijkstraEngine",
    "AStarEngine",
    "FloydWarshallEngine",
    "AllPairsResult",
    "Engine",
    "PathEngine",
    "create_engine",
    "find_path",
]
