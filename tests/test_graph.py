"""Unit tests for the adjacency-list graph."""

import pytest

from pybasics.data_structures.graph import Graph, main


@pytest.fixture
def grid_graph() -> Graph:
    """The 2x3 grid used by the demo: 0-1-2 over 3-4-5."""
    graph = Graph()
    for i in range(6):
        graph.add_vertex(i)
    for v1, v2 in [(0, 1), (1, 2), (0, 3), (1, 4), (2, 5), (3, 4), (4, 5)]:
        graph.add_edge(v1, v2)
    return graph


class TestGraphStructure:
    """Tests for vertex and edge bookkeeping."""

    def test_add_vertex_is_idempotent(self) -> None:
        """Test that re-adding a vertex keeps its neighbors."""
        graph = Graph()
        graph.add_edge("a", "b")
        graph.add_vertex("a")

        assert graph.get_neighbors("a") == ["b"]
        assert len(graph) == 2

    def test_edges_are_symmetric(self, grid_graph: Graph) -> None:
        """Test that every edge appears in both neighbor lists."""
        for vertex, neighbors in grid_graph.adjacency().items():
            for neighbor in neighbors:
                assert vertex in grid_graph.get_neighbors(neighbor)

    def test_add_edge_creates_missing_vertices(self) -> None:
        """Test that add_edge registers unknown endpoints."""
        graph = Graph()
        graph.add_edge(1, 2)

        assert graph.has_vertex(1)
        assert graph.has_vertex(2)

    def test_neighbors_of_unknown_vertex(self) -> None:
        """Test that an unknown vertex has no neighbors."""
        assert Graph().get_neighbors(99) == []

    def test_get_neighbors_returns_copy(self, grid_graph: Graph) -> None:
        """Test that mutating the returned list leaves the graph intact."""
        grid_graph.get_neighbors(0).append(42)

        assert grid_graph.get_neighbors(0) == [1, 3]

    def test_edges_listed_once(self, grid_graph: Graph) -> None:
        """Test that each undirected edge is reported a single time."""
        assert len(grid_graph.edges()) == 7


class TestGraphTraversal:
    """Tests for BFS and DFS order."""

    def test_bfs_order(self, grid_graph: Graph) -> None:
        """Test breadth-first order from vertex 0."""
        assert grid_graph.bfs(0) == [0, 1, 3, 2, 4, 5]

    def test_dfs_order(self, grid_graph: Graph) -> None:
        """Test depth-first order from vertex 0."""
        assert grid_graph.dfs(0) == [0, 1, 2, 5, 4, 3]

    def test_traversals_visit_each_vertex_once(self, grid_graph: Graph) -> None:
        """Test that both traversals return a permutation of the vertices."""
        for order in (grid_graph.bfs(0), grid_graph.dfs(0)):
            assert sorted(order) == [0, 1, 2, 3, 4, 5]

    def test_unreachable_vertices_are_skipped(self) -> None:
        """Test that traversal stays inside the start vertex's component."""
        graph = Graph()
        graph.add_edge(1, 2)
        graph.add_vertex(3)

        assert graph.bfs(1) == [1, 2]
        assert graph.dfs(1) == [1, 2]

    def test_traversal_from_unknown_vertex(self) -> None:
        """Test that an unknown start vertex is returned on its own."""
        graph = Graph()

        assert graph.bfs("x") == ["x"]
        assert graph.dfs("x") == ["x"]

    def test_dfs_on_long_path(self) -> None:
        """Test that a long path does not hit the recursion limit."""
        graph = Graph()
        for i in range(5000):
            graph.add_edge(i, i + 1)

        assert graph.dfs(0) == list(range(5001))


def test_main_output(capsys) -> None:
    """Test the demo prints both traversals."""
    main()
    out = capsys.readouterr().out

    assert "BFS path: [0, 1, 3, 2, 4, 5]" in out
    assert "DFS path: [0, 1, 2, 5, 4, 3]" in out
    assert "Neighbors: [0, 2, 4]" in out
