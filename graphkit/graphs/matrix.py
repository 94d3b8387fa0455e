"""
Dense adjacency-matrix graph.

Stores a V x V table of optional weights as two numpy arrays: an object
array holding the weights and a boolean mask marking which cells hold an
edge. The mask keeps "no edge" distinct from an edge whose weight is the
default (0).

Complexity:
    - add_edge / remove_edge / get_edge_weight: O(1)
    - neighbors: O(V) per vertex (row scan)
    - memory: O(V^2)
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

import numpy as np

from .core import Edge, Graph, NeighborPredicate, W


class AdjacencyMatrixGraph(Graph[W]):
    """
    Graph backed by a fixed-size adjacency matrix.

    The vertex count is fixed at construction. add_edge raises IndexError
    for vertices outside [0, size()); neighbors() of such a vertex is an
    empty sequence and lookups report no edge.

    Args:
        vertices: Number of vertices (matrix dimension).
        directed: If True, graph is directed; otherwise undirected.
        weight_factory: Default weight constructor (default int).

    Example:
        >>> G = AdjacencyMatrixGraph(3)
        >>> G.add_edge(0, 1, 10)
        >>> G.get_edge_weight(1, 0)
        10
        >>> list(G.neighbors(0))
        [1]
    """

    def __init__(
        self,
        vertices: int,
        directed: bool = False,
        weight_factory: Callable[[], W] = int,
    ):
        super().__init__(directed=directed, weight_factory=weight_factory)
        if vertices < 0:
            raise ValueError(f"vertices must be non-negative, got {vertices}")
        # np.empty with dtype=object is filled with None
        self._weights = np.empty((vertices, vertices), dtype=object)
        self._present = np.zeros((vertices, vertices), dtype=bool)

    def size(self) -> int:
        return self._present.shape[0]

    def _in_range(self, vertex: int) -> bool:
        return 0 <= vertex < self._present.shape[0]

    def add_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        for vertex in (begin, end):
            if not self._in_range(vertex):
                raise IndexError(
                    f"Vertex {vertex} out of range for matrix graph of size {self.size()}"
                )
        weight = self._resolve_weight(weight)

        self._weights[begin, end] = weight
        self._present[begin, end] = True
        if not self._directed:
            self._weights[end, begin] = weight
            self._present[end, begin] = True

        self._after_mutation()

    def remove_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        if not (self._in_range(begin) and self._in_range(end)):
            return

        self._weights[begin, end] = None
        self._present[begin, end] = False
        if not self._directed:
            self._weights[end, begin] = None
            self._present[end, begin] = False

        self._after_mutation()

    def get_edge_weight(self, begin: int, end: int) -> Optional[W]:
        if not (self._in_range(begin) and self._in_range(end)):
            return None
        if not self._present[begin, end]:
            return None
        return self._weights[begin, end]

    def neighbors(self, vertex: int) -> Iterator[int]:
        """
        Iterate neighbors of vertex in ascending id order.

        Returns an empty iterator for vertices outside [0, size()).
        """
        if not self._in_range(vertex):
            return iter(())
        return self._scan_row(vertex)

    def neighbors_filtered(self, vertex: int, predicate: NeighborPredicate) -> Iterator[int]:
        """Iterate neighbors v of vertex with predicate(v, weight) true, ascending."""
        if not self._in_range(vertex):
            return iter(())
        return self._scan_row(vertex, predicate)

    def _scan_row(
        self, vertex: int, predicate: Optional[NeighborPredicate] = None
    ) -> Iterator[int]:
        for column in np.flatnonzero(self._present[vertex]):
            neighbor = int(column)
            if predicate is None or predicate(neighbor, self._weights[vertex, neighbor]):
                yield neighbor

    def edges(self) -> Iterator[Edge[W]]:
        """Yield stored edges in row-major order."""
        for begin in range(self.size()):
            for end in self._scan_row(begin):
                yield Edge(begin, end, self._weights[begin, end])
