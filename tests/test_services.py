"""Tests for campus_navigator services.

Tests: RouteService (best route, alternatives, via-landmark search,
multi-destination, ranking, statistics), LandmarkCatalog
"""

import logging

import pytest

from campus_navigator.constants import EngineLabels
from campus_navigator.model.campus_graph import CampusGraph, UnknownNodeError
from campus_navigator.model.landmark import Landmark, LandmarkType
from campus_navigator.model.node import Node
from campus_navigator.model.route import Route
from campus_navigator.pathfinding.engines import Engine
from campus_navigator.ranking.criteria import SortAlgorithm, SortCriterion
from campus_navigator.services.landmark_service import LandmarkCatalog, LandmarkStats
from campus_navigator.services.route_service import RouteService, RouteStats


# =============================================================================
# ROUTE SERVICE - SINGLE ROUTE
# =============================================================================


class TestFindBestRoute:
    """RouteService.find_best_route - one engine, optional strict ids."""

    @pytest.mark.parametrize("engine", list(Engine))
    def test_every_engine(self, engine: Engine, campus_graph: CampusGraph) -> None:
        route = RouteService(graph=campus_graph).find_best_route(
            source_id="main_gate",
            target_id="comp_sci",
            engine=engine,
        )
        assert route.node_ids == ("main_gate", "great_hall", "library", "comp_sci")

    def test_unknown_id_returns_none(self, campus_graph: CampusGraph) -> None:
        assert RouteService(graph=campus_graph).find_best_route(source_id="ghost", target_id="library") is None

    def test_strict_unknown_id_raises(self, campus_graph: CampusGraph) -> None:
        """Strict mode tells a bad id apart from a missing path."""
        with pytest.raises(UnknownNodeError) as exc_info:
            RouteService(graph=campus_graph).find_best_route(source_id="main_gate", target_id="ghost", strict=True)
        assert exc_info.value.node_id == "ghost"

    def test_strict_unreachable_returns_none(self, one_way_graph: CampusGraph) -> None:
        assert RouteService(graph=one_way_graph).find_best_route(source_id="C", target_id="A", strict=True) is None

    def test_logs_result(self, campus_graph: CampusGraph, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="campus_navigator")
        RouteService(graph=campus_graph).find_best_route(source_id="main_gate", target_id="library")
        assert "Best route main_gate -> library" in caplog.text

    def test_route_via_intermediate(self, diamond_graph: CampusGraph) -> None:
        route = RouteService(graph=diamond_graph).find_route_via_intermediate(source_id="S", target_id="T", via_id="L")
        assert route.node_ids == ("S", "L", "T")
        assert route.total_distance_m == 300.0
        assert route.name == EngineLabels.COMBINED

    def test_route_via_unknown_intermediate(self, diamond_graph: CampusGraph) -> None:
        service = RouteService(graph=diamond_graph)
        assert service.find_route_via_intermediate(source_id="S", target_id="T", via_id="ghost") is None

    def test_route_via_source_is_direct_route(self, diamond_graph: CampusGraph) -> None:
        route = RouteService(graph=diamond_graph).find_route_via_intermediate(source_id="S", target_id="T", via_id="S")
        assert route.node_ids == ("S", "M", "T")


# =============================================================================
# ROUTE SERVICE - ALTERNATIVES
# =============================================================================


class TestFindMultipleRoutes:
    """RouteService.find_multiple_routes - engines + via-landmark detours."""

    def test_via_landmark_detour(self, diamond_graph: CampusGraph) -> None:
        """Off-path landmark: detour is never shorter and passes exactly that landmark."""
        routes = RouteService(graph=diamond_graph).find_multiple_routes(source_id="S", target_id="T", max_routes=5)

        assert [route.node_ids for route in routes] == [("S", "M", "T"), ("S", "L", "T")]
        direct, detour = routes
        assert direct.name == EngineLabels.SHORTEST_DISTANCE
        assert detour.name == "Route via Clock Tower"
        assert detour.total_distance_m >= direct.total_distance_m
        assert [node.id for node in detour.landmarks] == ["L"]

    def test_engines_agreeing_are_deduplicated(self, line_graph: CampusGraph) -> None:
        """All three engines find [A, B, C]; no landmarks, so one route."""
        routes = RouteService(graph=line_graph).find_multiple_routes(source_id="A", target_id="C")
        assert len(routes) == 1
        assert routes[0].name == EngineLabels.SHORTEST_DISTANCE

    def test_replaced_junction_counts_as_landmark(self, line_graph: CampusGraph) -> None:
        """B becomes a landmark after its edges exist: the via-route through it is the direct route."""
        line_graph.add_node(node=Node(id="B", name="Library", lat=0.0, lon=0.001, is_landmark=True))
        service = RouteService(graph=line_graph)

        routes = service.find_multiple_routes(source_id="A", target_id="C")
        assert [route.node_ids for route in routes] == [("A", "B", "C")]
        assert [node.id for node in routes[0].landmarks] == ["B"]

        scenic = service.find_routes_by_landmark(source_id="A", target_id="C", keyword="library")
        assert [route.name for route in scenic] == ["Route via Library"]
        assert scenic[0].passes_through(landmark_name="library")

    def test_sample_campus_alternatives(self, campus_graph: CampusGraph) -> None:
        """main_gate -> sports: direct, via Commonwealth Hall, via Night Market."""
        routes = RouteService(graph=campus_graph).find_multiple_routes(source_id="main_gate", target_id="sports")

        assert [route.total_distance_m for route in routes] == [950.0, 1000.0, 1100.0]
        assert len({route.node_ids for route in routes}) == len(routes)
        assert routes[1].node_ids == ("main_gate", "great_hall", "commonwealth", "legon", "sports")
        assert routes[2].name == "Route via Night Market"

    def test_truncated_to_max_routes(self, campus_graph: CampusGraph) -> None:
        routes = RouteService(graph=campus_graph).find_multiple_routes(
            source_id="main_gate",
            target_id="sports",
            max_routes=2,
        )
        assert [route.total_distance_m for route in routes] == [950.0, 1000.0]

    def test_non_positive_max_routes(self, campus_graph: CampusGraph) -> None:
        service = RouteService(graph=campus_graph)
        assert service.find_multiple_routes(source_id="main_gate", target_id="sports", max_routes=0) == []

    def test_no_route(self, one_way_graph: CampusGraph) -> None:
        service = RouteService(graph=one_way_graph)
        assert service.find_multiple_routes(source_id="C", target_id="A") == []
        assert service.find_multiple_routes(source_id="ghost", target_id="A") == []


class TestFindRoutesByLandmark:
    """RouteService.find_routes_by_landmark - keyword-filtered detours."""

    def test_keyword_matches_names(self, campus_graph: CampusGraph, campus_catalog: LandmarkCatalog) -> None:
        """'hall' matches three halls; via Legon duplicates via Commonwealth."""
        service = RouteService(graph=campus_graph, catalog=campus_catalog)
        routes = service.find_routes_by_landmark(source_id="main_gate", target_id="sports", keyword="hall")

        assert [route.name for route in routes] == ["Route via Great Hall", "Route via Commonwealth Hall"]
        assert all(route.passes_through(landmark_name="hall") for route in routes)

    def test_keyword_matches_description(self, diamond_graph: CampusGraph) -> None:
        routes = RouteService(graph=diamond_graph).find_routes_by_landmark(
            source_id="S",
            target_id="T",
            keyword="historic",
        )
        assert [route.node_ids for route in routes] == [("S", "L", "T")]

    def test_off_graph_landmarks_skipped(self, campus_graph: CampusGraph, campus_catalog: LandmarkCatalog) -> None:
        service = RouteService(graph=campus_graph, catalog=campus_catalog)
        assert service.find_routes_by_landmark(source_id="main_gate", target_id="sports", keyword="service") == []

    def test_default_catalog_has_no_category_to_match(self, campus_graph: CampusGraph) -> None:
        """Landmarks taken from the graph carry no category, so "other" matches nothing."""
        service = RouteService(graph=campus_graph)
        assert service.catalog.categories() == {""}
        assert service.find_routes_by_landmark(source_id="main_gate", target_id="sports", keyword="other") == []

    def test_blank_keyword(self, campus_graph: CampusGraph, campus_catalog: LandmarkCatalog) -> None:
        service = RouteService(graph=campus_graph, catalog=campus_catalog)
        assert service.find_routes_by_landmark(source_id="main_gate", target_id="sports", keyword="  ") == []


class TestMultipleDestinations:
    """RouteService.find_routes_to_multiple_destinations."""

    def test_known_reachable_targets_only(self, campus_graph: CampusGraph) -> None:
        routes = RouteService(graph=campus_graph).find_routes_to_multiple_destinations(
            source_id="main_gate",
            target_ids=["library", "sports", "ghost", "main_gate"],
        )
        assert set(routes) == {"library", "sports", "main_gate"}
        assert routes["library"].total_distance_m == 500.0
        assert routes["sports"].total_distance_m == 950.0
        assert routes["main_gate"].node_ids == ("main_gate",)

    def test_unknown_source(self, campus_graph: CampusGraph) -> None:
        service = RouteService(graph=campus_graph)
        assert service.find_routes_to_multiple_destinations(source_id="ghost", target_ids=["library"]) == {}


# =============================================================================
# ROUTE SERVICE - RANKING AND STATISTICS
# =============================================================================


def _route(distance_m: float, time_min: int, with_landmark: bool = False) -> Route:
    route = Route(name=f"{distance_m}", total_distance_m=distance_m, total_time_min=time_min)
    route.add_node(Node(id="n", name="N", lat=0.0, lon=0.0, is_landmark=with_landmark))
    return route


class TestRankingAndAnalysis:
    """RouteService.sort_routes and analyze_routes."""

    def test_sort_routes(self) -> None:
        routes = [_route(1200.0, 15), _route(800.0, 20), _route(1500.0, 5), _route(900.0, 11)]
        by_distance = RouteService.sort_routes(routes=routes)
        by_time = RouteService.sort_routes(routes=routes, criterion=SortCriterion.TIME, algorithm=SortAlgorithm.QUICK)
        assert [route.total_distance_m for route in by_distance] == [800.0, 900.0, 1200.0, 1500.0]
        assert [route.total_time_min for route in by_time] == [5, 11, 15, 20]

    def test_analyze_routes(self) -> None:
        routes = [_route(1000.0, 10, with_landmark=True), _route(500.0, 4), _route(1500.0, 16, with_landmark=True)]
        stats = RouteService.analyze_routes(routes=routes)

        assert stats.count == 3
        assert stats.total_distance_m == 3000.0
        assert stats.average_distance_m == 1000.0
        assert stats.min_distance_m == 500.0
        assert stats.max_distance_m == 1500.0
        assert stats.total_time_min == 30
        assert stats.average_time_min == 10.0
        assert stats.min_time_min == 4
        assert stats.max_time_min == 16
        assert stats.routes_with_landmarks == 2

    def test_analyze_no_routes(self) -> None:
        assert RouteService.analyze_routes(routes=[]) == RouteStats()
        assert RouteService.analyze_routes(routes=None).count == 0

    def test_stats_to_dict(self) -> None:
        data = RouteService.analyze_routes(routes=[_route(100.0, 2)]).to_dict()
        assert data["count"] == 1
        assert data["average_distance_m"] == 100.0


# =============================================================================
# LANDMARK CATALOG
# =============================================================================


class TestLandmarkCatalog:
    """LandmarkCatalog - registry and lookups."""

    def test_sample_catalog_size(self, campus_catalog: LandmarkCatalog) -> None:
        assert len(campus_catalog) == 11
        assert "lm_library" in campus_catalog

    def test_add_duplicate_id_rejected(self, campus_catalog: LandmarkCatalog) -> None:
        duplicate = campus_catalog.get(landmark_id="lm_library")
        assert campus_catalog.add(landmark=duplicate) is False
        assert len(campus_catalog) == 11

    def test_remove_updates_category_index(self, campus_catalog: LandmarkCatalog) -> None:
        assert campus_catalog.remove(landmark_id="lm_night_market") is True
        assert campus_catalog.get(landmark_id="lm_night_market") is None
        assert campus_catalog.by_category(category="Dining") == []
        assert "Dining" not in campus_catalog.categories()
        assert campus_catalog.remove(landmark_id="lm_night_market") is False

    def test_search_ranked_by_importance(self, campus_catalog: LandmarkCatalog) -> None:
        ids = [landmark.id for landmark in campus_catalog.search(keyword="Hall")]
        assert ids == ["lm_great_hall", "lm_commonwealth", "lm_legon"]

    def test_search_blank_keyword(self, campus_catalog: LandmarkCatalog) -> None:
        assert campus_catalog.search(keyword="") == []
        assert campus_catalog.search(keyword=None) == []

    def test_by_category_case_insensitive(self, campus_catalog: LandmarkCatalog) -> None:
        ids = {landmark.id for landmark in campus_catalog.by_category(category="ACADEMIC")}
        assert ids == {"lm_great_hall", "lm_library", "lm_comp_sci"}

    def test_by_type(self, campus_catalog: LandmarkCatalog) -> None:
        ids = {landmark.id for landmark in campus_catalog.by_type(landmark_type=LandmarkType.SERVICE)}
        assert ids == {"lm_bank", "lm_medical", "lm_src"}

    def test_near_sorted_by_distance(self, campus_graph: CampusGraph, campus_catalog: LandmarkCatalog) -> None:
        """Within 100 m of the library: itself, SRC (~47 m), Great Hall and CS (~78 m)."""
        library = campus_graph.get_node(node_id="library")
        ids = [landmark.id for landmark in campus_catalog.near(node=library, max_distance_m=100.0)]
        assert ids[:2] == ["lm_library", "lm_src"]
        assert set(ids) == {"lm_library", "lm_src", "lm_great_hall", "lm_comp_sci"}

    def test_most_important(self, campus_catalog: LandmarkCatalog) -> None:
        top = campus_catalog.most_important(limit=3)
        assert [landmark.id for landmark in top[:2]] == ["lm_main_gate", "lm_great_hall"]
        assert len(top) == 3
        assert campus_catalog.most_important(limit=0) == []

    def test_categories(self, campus_catalog: LandmarkCatalog) -> None:
        assert campus_catalog.categories() == {"Transport", "Academic", "Dining", "Residential", "Recreation", "Service"}

    def test_from_graph(self, diamond_graph: CampusGraph) -> None:
        catalog = LandmarkCatalog.from_graph(graph=diamond_graph)
        landmark = catalog.get(landmark_id="lm_L")
        assert len(catalog) == 1
        assert landmark.name == "Clock Tower"
        assert landmark.node.id == "L"
        assert landmark.description == "Historic tower"

    def test_statistics(self, campus_catalog: LandmarkCatalog) -> None:
        stats = campus_catalog.statistics()
        assert stats.count == 11
        assert stats.category_counts == {
            "Transport": 1,
            "Academic": 3,
            "Dining": 1,
            "Residential": 2,
            "Recreation": 1,
            "Service": 3,
        }
        assert stats.type_counts[LandmarkType.SERVICE.value] == 3
        assert stats.type_counts[LandmarkType.ACADEMIC.value] == 3
        assert stats.categories == campus_catalog.categories()
        # (6.1 on-graph + 1.8 off-graph) / 11
        assert stats.average_importance == pytest.approx(7.9 / 11)

    def test_statistics_empty(self) -> None:
        stats = LandmarkCatalog().statistics()
        assert stats == LandmarkStats()
        assert stats.to_dict() == {"count": 0, "category_counts": {}, "type_counts": {}, "average_importance": 0.0}

    def test_add_custom_landmark(self) -> None:
        catalog = LandmarkCatalog()
        node = Node(id="chapel", name="Chapel", lat=0.0, lon=0.0)
        assert catalog.add(landmark=Landmark(id="lm_chapel", name="Chapel", category="Worship", node=node)) is True
        assert catalog.by_type(landmark_type=LandmarkType.OTHER)[0].id == "lm_chapel"
