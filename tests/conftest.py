"""Pytest configuration and shared fixtures for graphkit tests.

This module provides:
- A graph factory parametrised over the three representations
- Debug mode and logging reset around every test
"""

from typing import Callable

import pytest

from graphkit.diagnostics import is_debug_enabled, set_debug_enabled
from graphkit.graphs import AdjacencyMatrixGraph, AdjacencySetGraph, EdgeListGraph, Graph

GraphFactory = Callable[..., Graph]


def _make(kind: str, vertices: int = 8, directed: bool = False, **kwargs) -> Graph:
    if kind == "matrix":
        return AdjacencyMatrixGraph(vertices, directed=directed, **kwargs)
    if kind == "set":
        return AdjacencySetGraph(directed=directed, **kwargs)
    return EdgeListGraph(directed=directed, **kwargs)


@pytest.fixture(params=["matrix", "set", "edge_list"])
def graph_kind(request) -> str:
    """Name of the representation under test."""
    return request.param


@pytest.fixture
def make_graph(graph_kind: str) -> GraphFactory:
    """Factory building an empty graph of the current representation.

    Call as make_graph(vertices=..., directed=..., weight_factory=...).
    vertices only sizes the matrix; the other representations grow on demand.
    """

    def factory(vertices: int = 8, directed: bool = False, **kwargs) -> Graph:
        return _make(graph_kind, vertices=vertices, directed=directed, **kwargs)

    return factory


@pytest.fixture
def make_populated(make_graph: GraphFactory) -> Callable[..., Graph]:
    """Factory building a graph of the current representation from an edge list.

    The matrix is sized to one past the largest endpoint.
    """

    def factory(edges, directed: bool = False, vertices=None) -> Graph:
        edges = list(edges)
        if vertices is None:
            vertices = 1 + max((max(u, v) for u, v, *_ in edges), default=-1)
        graph = make_graph(vertices=vertices, directed=directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    return factory


@pytest.fixture(autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the global debug flag after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
