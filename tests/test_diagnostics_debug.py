"""Tests for debug mode functionality."""

import pytest

from graphkit.diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    verify_mutation,
)
from graphkit.diagnostics.debug_mode import _parse_flag
from graphkit.graphs import AdjacencyMatrixGraph, Edge, EdgeListGraph


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    # Back to previous (False in this block)
    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    # Back to True
    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        # Back to True
        assert is_debug_enabled()

    # Back to False
    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test the previous flag is restored when the block raises."""
    set_debug_enabled(False)

    with pytest.raises(KeyError):
        with debug_context(True):
            raise KeyError("boom")

    assert not is_debug_enabled()


def test_mutations_pass_in_debug_mode(make_populated) -> None:
    """Test well-formed mutations pass the symmetry check in debug mode."""
    with debug_context(True):
        G = make_populated([(0, 1, 1), (1, 2, 2), (2, 0, 3)])
        G.add_edge(0, 1, 9)
        G.remove_edge(1, 2)

    assert G.get_edge_weight(1, 0) == 9
    assert G.get_edge_weight(2, 1) is None


def test_corrupted_graph_detected_in_debug_mode() -> None:
    """Test a broken mirror is caught on the next mutation in debug mode."""
    G = EdgeListGraph()
    G.add_edge(0, 1)
    # bypass add_edge to store a record without its mirror
    G._edges.append(Edge(2, 3, 0))

    set_debug_enabled(False)
    # Should not raise: the check only runs in debug mode
    G.add_edge(4, 5)

    set_debug_enabled(True)
    with pytest.raises(ValueError, match="not symmetric"):
        G.add_edge(6, 7)


def test_corrupted_matrix_detected_in_debug_mode() -> None:
    """Test the matrix representation runs the same check."""
    G = AdjacencyMatrixGraph(3)
    G._present[0, 2] = True
    G._weights[0, 2] = 1

    with debug_context(True):
        with pytest.raises(ValueError, match="not symmetric"):
            G.remove_edge(0, 1)


def test_directed_graphs_skip_symmetry_check() -> None:
    """Test directed graphs are never checked for symmetry."""
    G = EdgeListGraph(directed=True)
    with debug_context(True):
        G.add_edge(0, 1)

    assert G.get_edge_weight(1, 0) is None


def test_verify_mutation_only_in_debug_mode() -> None:
    """Test verify_mutation is silent while debug mode is off."""
    G = EdgeListGraph()
    G._edges.append(Edge(0, 1, 0))

    set_debug_enabled(False)
    # Should not raise
    verify_mutation(G)

    set_debug_enabled(True)
    with pytest.raises(ValueError, match=r"\(0, 1\)"):
        verify_mutation(G)


def test_verify_mutation_ignores_directed_graphs() -> None:
    """Test a one-way edge is valid for a directed graph even in debug mode."""
    G = AdjacencyMatrixGraph(2, directed=True)
    G.add_edge(0, 1)

    with debug_context(True):
        # Should not raise
        verify_mutation(G)


def test_env_flag_values() -> None:
    """Test the accepted spellings of the GRAPHKIT_DEBUG flag."""
    for value in ("1", "true", "YES", " on "):
        assert _parse_flag(value)
    for value in (None, "", "0", "false", "off", "debug"):
        assert not _parse_flag(value)
