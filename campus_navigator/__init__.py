"""Campus Navigator - Route finding and route ranking on a campus graph.

A small routing core featuring:
- Graph model of campus locations, directed walkways and landmarks
- Dijkstra, A* and Floyd-Warshall engines behind one interface
- Multi-route search with deduplication and via-landmark alternatives
- Quick sort and stable merge sort ranking by distance, time, cost or preference

Modules:
    core: Foundation classes (geo calculations)
    model: Data structures (Node, Edge, Route, Landmark, CampusGraph)
    pathfinding: Shortest-path engines and route assembly
    ranking: Route comparators and sort algorithms
    services: Route search orchestration and landmark catalog
    data_loader: Per-run load sessions, JSON import/export, sample campus

Example:
    from campus_navigator.data_loader import sample_campus_graph
    from campus_navigator.services import RouteService
    from campus_navigator.pathfinding import Engine
"""
