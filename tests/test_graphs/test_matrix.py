"""Tests for AdjacencyMatrixGraph."""

import pytest

from graphkit.graphs import AdjacencyMatrixGraph


class TestAdjacencyMatrixGraph:
    """Tests for the dense matrix representation."""

    def test_constructor_size(self):
        """Test size is the allocated dimension."""
        G = AdjacencyMatrixGraph(5)
        assert G.size() == 5
        assert list(G.edges()) == []

    def test_empty_matrix(self):
        """Test a zero-vertex matrix is valid."""
        G = AdjacencyMatrixGraph(0)
        assert G.size() == 0
        assert list(G.neighbors(0)) == []

    def test_negative_dimension(self):
        """Test a negative dimension is rejected."""
        with pytest.raises(ValueError):
            AdjacencyMatrixGraph(-1)

    def test_size_independent_of_edges(self):
        """Test size does not change with edges."""
        G = AdjacencyMatrixGraph(6)
        G.add_edge(0, 1)
        G.remove_edge(0, 1)
        assert G.size() == 6

    def test_add_edge_out_of_range(self):
        """Test add_edge beyond the matrix fails fast."""
        G = AdjacencyMatrixGraph(3)
        with pytest.raises(IndexError):
            G.add_edge(0, 3)
        with pytest.raises(IndexError):
            G.add_edge(5, 0)

    def test_out_of_range_queries_are_absorbed(self):
        """Test lookups and removals beyond the matrix report no edge."""
        G = AdjacencyMatrixGraph(3)
        G.add_edge(0, 1, 4)

        assert G.get_edge_weight(0, 7) is None
        G.remove_edge(7, 0)
        assert G.get_edge_weight(0, 1) == 4

    def test_neighbors_out_of_range_empty(self):
        """Test neighbors of an unknown vertex is empty, not an error."""
        G = AdjacencyMatrixGraph(3)
        assert list(G.neighbors(10)) == []
        assert list(G.neighbors(-1)) == []
        assert list(G.neighbors_filtered(10, lambda v, w: True)) == []

    def test_neighbors_ascending(self):
        """Test neighbors come out in ascending id order."""
        G = AdjacencyMatrixGraph(5)
        G.add_edge(0, 3)
        G.add_edge(0, 1)
        G.add_edge(0, 2)

        assert list(G.neighbors(0)) == [1, 2, 3]

    def test_neighbors_yields_python_ints(self):
        """Test neighbor ids are plain ints rather than numpy scalars."""
        G = AdjacencyMatrixGraph(3)
        G.add_edge(0, 2)
        assert all(type(v) is int for v in G.neighbors(0))

    def test_no_neighbors(self):
        """Test a vertex without edges has no neighbors."""
        G = AdjacencyMatrixGraph(3)
        G.add_edge(0, 1)
        assert list(G.neighbors(2)) == []

    def test_multiple_edges_directed(self):
        """Test several directed edges keep their own weights."""
        G = AdjacencyMatrixGraph(4, directed=True)
        G.add_edge(0, 1, 10)
        G.add_edge(0, 2, 20)
        G.add_edge(1, 2, 30)
        G.add_edge(2, 3, 40)

        assert G.get_edge_weight(0, 1) == 10
        assert G.get_edge_weight(0, 2) == 20
        assert G.get_edge_weight(1, 2) == 30
        assert G.get_edge_weight(2, 3) == 40
        assert G.get_edge_weight(3, 2) is None

    def test_edges_row_major(self):
        """Test edges() walks the matrix row by row."""
        G = AdjacencyMatrixGraph(3, directed=True)
        G.add_edge(2, 0, 1)
        G.add_edge(0, 2, 2)
        G.add_edge(0, 1, 3)

        assert [e.as_tuple() for e in G.edges()] == [(0, 1), (0, 2), (2, 0)]
