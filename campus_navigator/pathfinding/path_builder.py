"""Route assembly shared by the pathfinding engines.

Engines produce either a predecessor-edge map (Dijkstra, A*) or an ordered
list of node ids (Floyd-Warshall next-hop walk). These helpers turn both
into Route objects, and concatenate two legs into a via-route.

Path nodes are always looked up in the graph's node table by id, never
taken from the edges: add_node may have replaced a node after its edges
were created, and the route must show the current name and landmark flag.
"""

from typing import Optional

from campus_navigator.constants import EngineLabels
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.edge import Edge
from campus_navigator.model.node import Node
from campus_navigator.model.route import Route


def single_node_route(node: Node, name: str = EngineLabels.DIRECT) -> Route:
    """Degenerate route for source == target: one node, no edges."""
    route = Route(name=name)
    route.add_node(node)
    return route


def route_from_predecessors(
    graph: CampusGraph,
    predecessors: dict[str, Edge],
    source_id: str,
    target_id: str,
    name: str,
) -> Optional[Route]:
    """Walk a predecessor-edge map back from target to source.

    Args:
        graph: Graph the search ran on; supplies the path nodes
        predecessors: node id -> edge used to reach it
        source_id: Start node of the search
        target_id: Node to reconstruct the path to
        name: Route label

    Returns:
        Route from source to target, or None if target was never reached.
    """
    source = graph.nodes[source_id]
    if target_id == source_id:
        return single_node_route(node=source, name=name)

    edges_rev: list[Edge] = []
    current = target_id
    while current != source_id:
        edge = predecessors.get(current)
        if edge is None:
            return None
        edges_rev.append(edge)
        current = edge.source.id

    route = Route(name=name)
    route.add_node(source)
    for edge in reversed(edges_rev):
        route.add_node(graph.nodes[edge.destination.id])
        route.add_edge(edge)
    return route


def route_from_node_ids(graph: CampusGraph, node_ids: list[str], name: str) -> Optional[Route]:
    """Build a route along a node-id sequence using the cheapest edge per hop.

    Returns:
        Route, or None if the sequence is empty or a hop has no edge.
    """
    if not node_ids:
        return None

    first = graph.get_node(node_id=node_ids[0])
    if first is None:
        return None

    route = Route(name=name)
    route.add_node(first)
    for current_id, next_id in zip(node_ids, node_ids[1:]):
        edge = graph.cheapest_edge(source_id=current_id, destination_id=next_id)
        if edge is None:
            return None
        route.add_node(graph.nodes[next_id])
        route.add_edge(edge)
    return route


def concatenate_routes(first: Route, second: Route, name: str = EngineLabels.COMBINED) -> Route:
    """Join two legs that meet at first.end == second.start.

    The second leg's first node is dropped (it duplicates the first leg's
    last node). Totals are the sums of both legs' edges.
    """
    if first.end is not None and second.start is not None and first.end.id != second.start.id:
        raise ValueError(f"Legs do not meet: {first.end.id} != {second.start.id}")

    combined = Route(name=name)
    for node in first.path:
        combined.add_node(node)
    for edge in first.edges:
        combined.add_edge(edge)
    for node in second.path[1:]:
        combined.add_node(node)
    for edge in second.edges:
        combined.add_edge(edge)
    return combined
