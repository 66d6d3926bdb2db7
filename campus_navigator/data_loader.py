"""Campus data loading.

A LoadSession is created per run and owns the CampusGraph that loaders
populate. It records which sources were already loaded, so loading the
same file twice in one session is a no-op.

Also provides the built-in sample campus (eight University of Ghana
locations) used by examples and tests.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from campus_navigator.model.campus_graph import CampusGraph
from campus_navigator.model.landmark import Landmark
from campus_navigator.model.node import Node
from campus_navigator.services.landmark_service import LandmarkCatalog

logger = logging.getLogger(__name__)


@dataclass
class LoadSession:
    """Per-run loading context.

    Attributes:
        graph: Graph that loaders add nodes and edges to
        loaded_sources: Resolved paths (or caller labels) already loaded
    """

    graph: CampusGraph = field(default_factory=CampusGraph)
    loaded_sources: set[str] = field(default_factory=set)

    def is_loaded(self, source: str) -> bool:
        return source in self.loaded_sources


def load_graph_dict(data: dict[str, Any], session: LoadSession) -> CampusGraph:
    """Merge serialized campus data (CampusGraph.to_dict format) into the session graph.

    Nodes with existing ids overwrite the session's nodes; edges are
    appended as stored (reverse edges only where the data lists them or
    flags an entry "bidirectional").

    Returns:
        The session graph.

    Raises:
        KeyError: If a required field is missing.
        UnknownNodeError: If an edge references an unlisted node.
    """
    parsed = CampusGraph.from_dict(data=data)
    for node in parsed.all_nodes():
        session.graph.add_node(node=node)
    for edge in parsed.edges:
        session.graph.add_edge(edge=edge, bidirectional=False)

    logger.info(f"Loaded {parsed.node_count} nodes and {parsed.edge_count} edges")
    return session.graph


def load_graph_json(path: Union[str, Path], session: LoadSession) -> CampusGraph:
    """Load a campus JSON file into the session graph, once per session.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    source = str(Path(path).resolve())
    if session.is_loaded(source=source):
        logger.debug(f"Skipping already loaded source {source}")
        return session.graph

    with open(path) as f:
        data = json.load(f)

    load_graph_dict(data=data, session=session)
    session.loaded_sources.add(source)
    return session.graph


def save_graph_json(graph: CampusGraph, path: Union[str, Path]) -> Path:
    """Write graph.to_dict() as indented JSON, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w") as f:
        json.dump(graph.to_dict(), f, indent=2)
    logger.info(f"Campus graph saved: {target.name}")
    return target


# =============================================================================
# Sample campus
# =============================================================================

# id, name, lat, lon, description
_SAMPLE_NODES = (
    ("main_gate", "Main Gate", 5.6508, -0.1870, "University entrance"),
    ("great_hall", "Great Hall", 5.6520, -0.1850, "Main assembly hall"),
    ("library", "Balme Library", 5.6525, -0.1845, "Main university library"),
    ("comp_sci", "Computer Science Department", 5.6530, -0.1840, "DCIT Department"),
    ("night_market", "Night Market", 5.6515, -0.1860, "Food and shopping area"),
    ("commonwealth", "Commonwealth Hall", 5.6540, -0.1820, "Residential hall"),
    ("legon", "Legon Hall", 5.6545, -0.1825, "Residential hall"),
    ("sports", "Sports Complex", 5.6550, -0.1830, "Sports facilities"),
)

# source, destination, distance_m (walkways in both directions)
_SAMPLE_EDGES = (
    ("main_gate", "great_hall", 300.0),
    ("great_hall", "library", 200.0),
    ("library", "comp_sci", 150.0),
    ("main_gate", "night_market", 250.0),
    ("night_market", "great_hall", 200.0),
    ("great_hall", "commonwealth", 400.0),
    ("commonwealth", "legon", 100.0),
    ("legon", "sports", 200.0),
    ("comp_sci", "sports", 300.0),
)

# landmark id, node id, category, description, importance
_SAMPLE_LANDMARKS = (
    ("lm_main_gate", "main_gate", "Transport", "Main entrance to the university", 1.0),
    ("lm_great_hall", "great_hall", "Academic", "Main assembly and graduation hall", 0.9),
    ("lm_library", "library", "Academic", "Main university library with study areas", 0.8),
    ("lm_comp_sci", "comp_sci", "Academic", "DCIT Department building", 0.7),
    ("lm_night_market", "night_market", "Dining", "Food court and shopping area", 0.8),
    ("lm_commonwealth", "commonwealth", "Residential", "Traditional residential hall", 0.6),
    ("lm_legon", "legon", "Residential", "Traditional residential hall", 0.6),
    ("lm_sports", "sports", "Recreation", "Main sports and recreation facilities", 0.7),
)

# Service landmarks located between graph nodes (not routable)
_SAMPLE_OFF_GRAPH_LANDMARKS = (
    ("lm_bank", Node(id="bank", name="GCB Bank", lat=5.6518, lon=-0.1855), "Service", "Ghana Commercial Bank branch", 0.5),
    ("lm_medical", Node(id="medical", name="Medical Center", lat=5.6535, lon=-0.1835), "Service", "University health services", 0.7),
    ("lm_src", Node(id="src", name="SRC Building", lat=5.6522, lon=-0.1848), "Service", "Students Representative Council offices", 0.6),
)


def sample_campus_graph() -> CampusGraph:
    """Eight-location sample campus, every location a landmark, nine walkways."""
    graph = CampusGraph()
    for node_id, name, lat, lon, description in _SAMPLE_NODES:
        graph.add_node(node=Node(id=node_id, name=name, lat=lat, lon=lon, description=description, is_landmark=True))
    for source_id, destination_id, distance_m in _SAMPLE_EDGES:
        graph.connect(source_id=source_id, destination_id=destination_id, distance_m=distance_m)

    logger.debug(f"Sample campus created: {graph}")
    return graph


def sample_landmark_catalog(graph: CampusGraph) -> LandmarkCatalog:
    """Landmark catalog for the sample campus.

    Landmarks whose node is missing from graph are skipped; the three
    service landmarks always use their own off-graph nodes.
    """
    catalog = LandmarkCatalog()
    for landmark_id, node_id, category, description, importance in _SAMPLE_LANDMARKS:
        node = graph.get_node(node_id=node_id)
        if node is None:
            continue
        catalog.add(
            landmark=Landmark(
                id=landmark_id,
                name=node.name,
                category=category,
                node=node,
                description=description,
                importance=importance,
            )
        )
    for landmark_id, node, category, description, importance in _SAMPLE_OFF_GRAPH_LANDMARKS:
        catalog.add(
            landmark=Landmark(
                id=landmark_id,
                name=node.name,
                category=category,
                node=node,
                description=description,
                importance=importance,
            )
        )
    return catalog
