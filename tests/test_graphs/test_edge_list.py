"""Tests for EdgeListGraph."""

from graphkit.graphs import EdgeListGraph


class TestEdgeListGraph:
    """Tests for the edge-list representation."""

    def test_constructor(self):
        """Test empty graphs of both kinds have no vertices."""
        assert EdgeListGraph().size() == 0
        assert EdgeListGraph(directed=True).size() == 0

    def test_size_counts_distinct_endpoints(self):
        """Test size counts distinct endpoints, not the largest id."""
        G = EdgeListGraph()
        G.add_edge(0, 1, 10)
        G.add_edge(1, 2, 20)
        assert G.size() == 3

        H = EdgeListGraph()
        H.add_edge(0, 5)
        assert H.size() == 2

    def test_size_tracks_removal(self):
        """Test endpoints of removed edges stop counting."""
        G = EdgeListGraph()
        G.add_edge(0, 1, 10)
        G.add_edge(2, 3, 10)
        assert G.size() == 4
        G.remove_edge(2, 3)
        assert G.size() == 2

    def test_remove_non_existent_edge(self):
        """Test removing a missing edge leaves the graph unchanged."""
        G = EdgeListGraph()
        G.add_edge(0, 1, 10)
        G.remove_edge(1, 2)

        assert G.size() == 2
        assert G.get_edge_weight(0, 1) == 10

    def test_neighbors_insertion_order(self):
        """Test neighbors follow insertion order rather than id order."""
        G = EdgeListGraph()
        G.add_edge(0, 3)
        G.add_edge(0, 1)
        G.add_edge(0, 2)

        assert list(G.neighbors(0)) == [3, 1, 2]

    def test_duplicate_edges_visible(self):
        """Test adding an edge twice makes the neighbor appear twice."""
        G = EdgeListGraph()
        G.add_edge(0, 1, 1)
        G.add_edge(0, 1, 2)

        assert list(G.neighbors(0)) == [1, 1]
        assert list(G.neighbors(1)) == [0, 0]
        assert G.get_edge_weight(0, 1) == 2

    def test_remove_drops_all_duplicates(self):
        """Test a single remove clears every duplicate record."""
        G = EdgeListGraph()
        G.add_edge(0, 1)
        G.add_edge(0, 1)
        G.remove_edge(1, 0)

        assert list(G.neighbors(0)) == []
        assert list(G.edges()) == []

    def test_undirected_self_loop_records(self):
        """Test an undirected self loop is stored as two records."""
        G = EdgeListGraph()
        G.add_edge(0, 0)
        assert G.size() == 1
        assert list(G.neighbors(0)) == [0, 0]

    def test_unknown_vertex_has_no_neighbors(self):
        """Test neighbors of an unregistered vertex is empty."""
        G = EdgeListGraph()
        G.add_edge(1, 2, 10)
        assert list(G.neighbors(0)) == []
        assert list(G.neighbors(99)) == []

    def test_filtered_neighbors(self):
        """Test filtering keeps insertion order."""
        G = EdgeListGraph()
        G.add_edge(0, 3, 25)
        G.add_edge(0, 1, 5)
        G.add_edge(0, 2, 15)

        assert list(G.neighbors_filtered(0, lambda v, w: w > 10)) == [3, 2]

    def test_float_weights(self):
        """Test float weights and missing edges."""
        G = EdgeListGraph()
        G.add_edge(0, 1, 1.5)
        G.add_edge(1, 2, 2.5)

        assert G.get_edge_weight(0, 1) == 1.5
        assert G.get_edge_weight(1, 2) == 2.5
        assert G.get_edge_weight(0, 2) is None

    def test_empty_graph_lookup(self):
        """Test lookups on an empty graph report no edge."""
        G = EdgeListGraph()
        assert G.get_edge_weight(0, 1) is None

    def test_edges_insertion_order(self):
        """Test edges() yields records as stored, mirrors interleaved."""
        G = EdgeListGraph()
        G.add_edge(2, 0, 1)
        assert [e.as_tuple() for e in G.edges()] == [(2, 0), (0, 2)]

    def test_vertices_sparse_ids(self):
        """Test vertices() lists stored endpoints, skipping gap ids."""
        G = EdgeListGraph()
        G.add_edge(5, 6)
        G.add_edge(9, 5)

        assert G.size() == 3
        assert list(G.vertices()) == [5, 6, 9]
        assert G.has_vertex(9)
        assert not G.has_vertex(0)
        assert not G.has_vertex(7)

    def test_vertices_track_removal(self):
        """Test endpoints of removed edges leave vertices()."""
        G = EdgeListGraph()
        G.add_edge(0, 1)
        G.add_edge(4, 7)
        G.remove_edge(7, 4)

        assert list(G.vertices()) == [0, 1]
        assert not G.has_vertex(4)
