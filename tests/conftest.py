"""Shared pytest fixtures for campus_navigator tests.

Provides small hand-built graphs with known shortest paths and the
built-in sample campus.

COORDINATE SYSTEM:
    Hand-built graphs sit near the equator (lat~0) and prime meridian
    (lon~0), where 0.001° ≈ 111 m in both directions. Edge distances are
    given explicitly and never derived from coordinates, so expected
    results can be computed by hand.
"""

import pytest

from campus_navigator.data_loader import sample_campus_graph, sample_landmark_catalog
from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.edge import Edge
from campus_navigator.model.node import Node
from campus_navigator.services.landmark_service import LandmarkCatalog


# =============================================================================
# HAND-BUILT GRAPHS
# =============================================================================


@pytest.fixture
def line_graph() -> CampusGraph:
    """A(0,0) - B(0,0.001) - C(0,0.002), 100 m walkways in both directions.

    Shortest A->C is [A, B, C]: 200 m, 2 + 2 min (1.2 min per edge, rounded up).
    """
    a = Node(id="A", name="Alpha", lat=0.0, lon=0.0)
    b = Node(id="B", name="Bravo", lat=0.0, lon=0.001)
    c = Node(id="C", name="Charlie", lat=0.0, lon=0.002)

    graph = CampusGraph()
    graph.add_edge(edge=Edge(source=a, destination=b, distance_m=100.0, path_type="walkway"))
    graph.add_edge(edge=Edge(source=b, destination=c, distance_m=100.0, path_type="walkway"))
    return graph


@pytest.fixture
def diamond_graph() -> CampusGraph:
    """Direct path S-M-T (200 m) and a detour S-L-T (300 m) via landmark L.

          L (landmark)
         / \\
        S-M-T

    Only L is a landmark; M is a plain junction.
    """
    s = Node(id="S", name="Start", lat=0.0, lon=0.0)
    m = Node(id="M", name="Middle", lat=0.0, lon=0.001)
    t = Node(id="T", name="Target", lat=0.0, lon=0.002)
    lm = Node(id="L", name="Clock Tower", lat=0.001, lon=0.001, description="Historic tower", is_landmark=True)

    graph = CampusGraph()
    for node in (s, m, t, lm):
        graph.add_node(node=node)
    graph.connect(source_id="S", destination_id="M", distance_m=100.0)
    graph.connect(source_id="M", destination_id="T", distance_m=100.0)
    graph.connect(source_id="S", destination_id="L", distance_m=150.0)
    graph.connect(source_id="L", destination_id="T", distance_m=150.0)
    return graph


@pytest.fixture
def one_way_graph() -> CampusGraph:
    """A -> B one-way (100 m), B <-> C two-way (100 m), D isolated."""
    graph = CampusGraph()
    graph.add_node(node=Node(id="A", name="Alpha", lat=0.0, lon=0.0))
    graph.add_node(node=Node(id="B", name="Bravo", lat=0.0, lon=0.001))
    graph.add_node(node=Node(id="C", name="Charlie", lat=0.0, lon=0.002))
    graph.add_node(node=Node(id="D", name="Delta", lat=0.001, lon=0.0))
    graph.connect(source_id="A", destination_id="B", distance_m=100.0, bidirectional=False)
    graph.connect(source_id="B", destination_id="C", distance_m=100.0)
    return graph


# =============================================================================
# SAMPLE CAMPUS
# =============================================================================


@pytest.fixture
def campus_graph() -> CampusGraph:
    """Eight-location sample campus (all landmarks, nine two-way walkways)."""
    return sample_campus_graph()


@pytest.fixture
def campus_catalog(campus_graph: CampusGraph) -> LandmarkCatalog:
    """Sample campus catalog: eight on-graph and three off-graph landmarks."""
    return sample_landmark_catalog(graph=campus_graph)
