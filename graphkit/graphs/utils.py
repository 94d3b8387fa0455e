"""
Utility functions for graph representations.

Provides a representation factory, dense numpy export and degree counts.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type, Union

import numpy as np

from .adjacency import AdjacencySetGraph
from .core import Graph
from .edge_list import EdgeListGraph
from .matrix import AdjacencyMatrixGraph

EdgeSpec = Union[Tuple[int, int], Tuple[int, int, object]]

REPRESENTATIONS: Dict[str, Type[Graph]] = {
    "matrix": AdjacencyMatrixGraph,
    "set": AdjacencySetGraph,
    "edge_list": EdgeListGraph,
}


def build_graph(
    kind: str,
    edges: Iterable[EdgeSpec],
    directed: bool = False,
    vertices: Optional[int] = None,
    weight_factory: Callable[[], object] = int,
) -> Graph:
    """
    Build a graph of the requested representation from an edge iterable.

    Args:
        kind: One of "matrix", "set", "edge_list".
        edges: (u, v) or (u, v, weight) tuples.
        directed: If True, build a directed graph.
        vertices: Matrix dimension. Defaults to one past the largest
            endpoint; ignored by the other representations.
        weight_factory: Default weight constructor.

    Returns:
        Populated graph.

    Raises:
        ValueError: If kind is unknown.

    Example:
        >>> G = build_graph("set", [(0, 1), (1, 2, 5)])
        >>> G.get_edge_weight(2, 1)
        5
    """
    if kind not in REPRESENTATIONS:
        raise ValueError(
            f"Unknown graph representation {kind!r}; expected one of {sorted(REPRESENTATIONS)}"
        )

    edge_list: List[Sequence] = [tuple(edge) for edge in edges]

    if kind == "matrix":
        if vertices is None:
            vertices = 1 + max((max(e[0], e[1]) for e in edge_list), default=-1)
        graph: Graph = AdjacencyMatrixGraph(vertices, directed=directed, weight_factory=weight_factory)
    else:
        graph = REPRESENTATIONS[kind](directed=directed, weight_factory=weight_factory)

    for edge in edge_list:
        if len(edge) == 2:
            graph.add_edge(edge[0], edge[1])
        else:
            graph.add_edge(edge[0], edge[1], edge[2])

    return graph


def adjacency_matrix(graph: Graph, dtype: type = float) -> np.ndarray:
    """
    Export a graph as a dense numeric adjacency matrix.

    W[i, j] is the weight of edge i->j and 0 where there is no edge, so an
    edge whose weight is 0 is indistinguishable from a missing one here.
    The matrix covers every vertex id that appears in an edge, which can
    exceed size() for sparse edge lists.

    Args:
        graph: Any graph representation.
        dtype: numpy dtype of the result (default float).

    Returns:
        (n, n) numpy array.
    """
    edges = list(graph.edges())
    n = max([graph.size()] + [1 + max(e.begin, e.end) for e in edges])

    W = np.zeros((n, n), dtype=dtype)
    for edge in edges:
        W[edge.begin, edge.end] = graph.get_edge_weight(edge.begin, edge.end)
    return W


def degree_sequence(graph: Graph) -> List[int]:
    """
    Out-degree of every vertex id, counted over neighbors().

    Entry i is the degree of vertex i. The list covers ids up to the largest
    vertex, which can exceed size() for sparse edge lists; ids in the gaps
    have degree 0. Every duplicate edge-list record adds to the count.
    """
    n = max([graph.size()] + [v + 1 for v in graph.vertices()])
    return [sum(1 for _ in graph.neighbors(u)) for u in range(n)]
