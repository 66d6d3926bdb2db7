"""Route - The result of a pathfinding computation.

A Route is an ordered path of nodes plus the edges between them. Totals
are accumulated edge by edge as the route is assembled, so the travel time
reflects per-edge path types instead of being recomputed from the total
distance.

Routes are built by the pathfinding layer (see pathfinding/path_builder.py)
and handed to callers; nothing mutates a Route after assembly.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from campus_navigator.constants import RouteCostConfig
from campus_navigator.core.geo_calculator import GeoCalculator
from campus_navigator.model.edge import Edge
from campus_navigator.model.node import Node

if TYPE_CHECKING:
    from campus_navigator.model.campus_graph import CampusGraph

logger = logging.getLogger(__name__)


def format_duration(minutes: int) -> str:
    """Readable duration, e.g. "< 1 minute", "25 minutes", "1 hour 5 minutes"."""
    if minutes < 1:
        return "< 1 minute"
    if minutes < 60:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"

    hours, remainder = divmod(minutes, 60)
    hours_text = "1 hour" if hours == 1 else f"{hours} hours"
    if remainder == 0:
        return hours_text
    minutes_text = "1 minute" if remainder == 1 else f"{remainder} minutes"
    return f"{hours_text} {minutes_text}"


@dataclass
class Route:
    """An ordered path through the campus graph.

    Invariant: len(edges) == len(path) - 1, and edges[i] connects path[i]
    to path[i + 1]. A route with an empty path is never returned by the
    engines; "no route" is signalled with None.

    Attributes:
        name: Human-readable label (e.g., "Dijkstra Shortest Path")
        path: Nodes from start to end, inclusive
        edges: Traversed edges in order
        total_distance_m: Sum of edge distances
        total_time_min: Sum of edge travel times
    """

    name: str = ""
    path: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    total_distance_m: float = 0.0
    total_time_min: int = 0

    def add_node(self, node: Node) -> None:
        self.path.append(node)

    def add_edge(self, edge: Edge) -> None:
        """Append an edge and accumulate its distance and time."""
        self.edges.append(edge)
        self.total_distance_m += edge.distance_m
        self.total_time_min += edge.travel_time_min

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def is_empty(self) -> bool:
        return not self.path

    @property
    def start(self) -> Optional[Node]:
        return self.path[0] if self.path else None

    @property
    def end(self) -> Optional[Node]:
        return self.path[-1] if self.path else None

    @property
    def node_ids(self) -> tuple[str, ...]:
        return tuple(node.id for node in self.path)

    @property
    def landmarks(self) -> list[Node]:
        """Path nodes flagged as landmarks, in path order."""
        return [node for node in self.path if node.is_landmark]

    @property
    def average_speed_kmh(self) -> float:
        """Overall speed in km/h; 0.0 when distance or time is zero."""
        if self.total_distance_m <= 0 or self.total_time_min <= 0:
            return 0.0
        return (self.total_distance_m / 1000.0) / (self.total_time_min / 60.0)

    @property
    def formatted_time(self) -> str:
        return format_duration(minutes=self.total_time_min)

    @property
    def estimated_cost(self) -> float:
        """Ranking scalar mixing distance and time (no physical meaning)."""
        return self.total_distance_m * RouteCostConfig.PER_METER + self.total_time_min * RouteCostConfig.PER_MINUTE

    def same_path_as(self, other: "Route") -> bool:
        """True iff both routes visit the identical ordered sequence of node ids."""
        return self.node_ids == other.node_ids

    def passes_through(self, landmark_name: str) -> bool:
        """Case-insensitive substring match against the landmarks on this route."""
        term = landmark_name.lower()
        return any(term in landmark.name.lower() for landmark in self.landmarks)

    # =========================================================================
    # Presentation
    # =========================================================================

    def directions(self) -> list[str]:
        """Step-by-step directions, one line per traversed edge."""
        return [f"Go {edge.distance_m:.0f}m to {node.name}" for edge, node in zip(self.edges, self.path[1:])]

    def describe(self) -> str:
        """Multi-line summary: endpoints, totals, overall heading and landmarks."""
        if self.start is None or self.end is None:
            return "Invalid route"

        lines = [f"Route: {self.start.name} → {self.end.name}"]
        lines.append(f"Distance: {self.total_distance_m:.1f} meters")
        lines.append(f"Time: {self.total_time_min} min")
        if self.start.id != self.end.id:
            bearing = GeoCalculator.initial_bearing_deg(
                lat1=self.start.lat,
                lon1=self.start.lon,
                lat2=self.end.lat,
                lon2=self.end.lon,
            )
            lines.append(f"Heading: {GeoCalculator.compass_direction(bearing_deg=bearing)}")
        if self.landmarks:
            lines.append("Landmarks: " + ", ".join(landmark.name for landmark in self.landmarks))
        return "\n".join(lines)

    # =========================================================================
    # Transformations
    # =========================================================================

    def reversed(self, graph: "CampusGraph") -> Optional["Route"]:
        """Route travelling the same nodes backwards, using the graph's own edges.

        Each leg uses the cheapest graph edge in the opposite direction.
        Returns None if any leg has no reverse edge (one-way connection).
        """
        reverse = Route(name=f"{self.name} (reversed)")
        for node in reversed(self.path):
            reverse.add_node(node)
        for edge in reversed(self.edges):
            back = graph.cheapest_edge(source_id=edge.destination.id, destination_id=edge.source.id)
            if back is None:
                logger.debug(f"No reverse edge for {edge.destination.id}->{edge.source.id}")
                return None
            reverse.add_edge(back)
        return reverse

    def __str__(self) -> str:
        label = self.name or "Unnamed"
        return f"Route{{{label}, {self.total_distance_m:.1f}m, {self.total_time_min}min, landmarks={len(self.landmarks)}}}"
