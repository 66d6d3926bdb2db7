"""Tests for campus data loading.

Tests: LoadSession, load_graph_dict, load_graph_json, save_graph_json,
sample campus
"""

import json
from pathlib import Path

import pytest

from campus_navigator.data_loader import (
    LoadSession,
    load_graph_dict,
    load_graph_json,
    sample_campus_graph,
    sample_landmark_catalog,
    save_graph_json,
)
from campus_navigator.model.campus_graph import UnknownNodeError


class TestSampleCampus:
    """Built-in eight-location campus."""

    def test_sample_graph_shape(self) -> None:
        graph = sample_campus_graph()
        assert graph.node_count == 8
        assert graph.edge_count == 18  # nine walkways, both directions
        assert len(graph.get_landmarks()) == 8
        assert graph.get_node(node_id="library").name == "Balme Library"

    def test_sample_graph_is_connected(self) -> None:
        graph = sample_campus_graph()
        assert all(graph.has_path(source_id="main_gate", destination_id=node_id) for node_id in graph.nodes)

    def test_each_call_builds_a_fresh_graph(self) -> None:
        first = sample_campus_graph()
        second = sample_campus_graph()
        first.connect(source_id="main_gate", destination_id="sports", distance_m=1.0)
        assert second.cheapest_edge(source_id="main_gate", destination_id="sports") is None

    def test_sample_catalog_skips_missing_nodes(self) -> None:
        graph = sample_campus_graph()
        graph.nodes.pop("library")
        catalog = sample_landmark_catalog(graph=graph)
        assert catalog.get(landmark_id="lm_library") is None
        assert len(catalog) == 10


class TestLoadSession:
    """Loading campus data into a per-run session."""

    def test_sessions_are_independent(self) -> None:
        first, second = LoadSession(), LoadSession()
        load_graph_dict(data=sample_campus_graph().to_dict(), session=first)
        assert first.graph.node_count == 8
        assert second.graph.node_count == 0
        assert second.loaded_sources == set()

    def test_load_dict_merges_into_session_graph(self) -> None:
        session = LoadSession(graph=sample_campus_graph())
        data = {
            "nodes": [
                {"id": "main_gate", "name": "Main Gate", "lat": 5.6508, "lon": -0.1870, "is_landmark": True},
                {"id": "chapel", "name": "Chapel", "lat": 5.6500, "lon": -0.1880},
            ],
            "edges": [{"source": "main_gate", "destination": "chapel", "distance_m": 120.0, "bidirectional": True}],
        }
        graph = load_graph_dict(data=data, session=session)

        assert graph is session.graph
        assert graph.node_count == 9
        assert graph.edge_count == 20
        assert graph.has_path(source_id="chapel", destination_id="sports")

    def test_load_dict_unknown_edge_endpoint(self) -> None:
        data = {"nodes": [], "edges": [{"source": "a", "destination": "b"}]}
        with pytest.raises(UnknownNodeError):
            load_graph_dict(data=data, session=LoadSession())

    def test_load_dict_missing_field(self) -> None:
        with pytest.raises(KeyError):
            load_graph_dict(data={"edges": []}, session=LoadSession())

    def test_json_roundtrip_and_idempotent_reload(self, tmp_path: Path) -> None:
        path = save_graph_json(graph=sample_campus_graph(), path=tmp_path / "campus" / "graph.json")
        assert path.exists()

        session = LoadSession()
        load_graph_json(path=path, session=session)
        load_graph_json(path=str(path), session=session)

        assert session.graph.node_count == 8
        assert session.graph.edge_count == 18
        assert session.is_loaded(source=str(path.resolve()))

    def test_invalid_json_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        session = LoadSession()
        with pytest.raises(json.JSONDecodeError):
            load_graph_json(path=path, session=session)
        assert session.loaded_sources == set()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph_json(path=tmp_path / "absent.json", session=LoadSession())
