"""
Sorted adjacency-set graph.

Each vertex owns a list of neighbor ids kept in ascending order plus a
parallel list of weights; lookups bisect on the neighbor id. Storage grows
automatically to cover the largest endpoint ever added and never shrinks.

Complexity:
    - get_edge_weight: O(log deg(v))
    - add_edge / remove_edge: O(deg(v)) (list insertion)
    - neighbors: O(deg(v)), ascending id order
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Iterator, List, Optional

from .core import Edge, Graph, NeighborPredicate, W


class AdjacencySetGraph(Graph[W]):
    """
    Graph backed by per-vertex sorted neighbor sets.

    size() is one past the largest vertex id ever passed to add_edge.
    neighbors() of a vertex at or beyond size() raises IndexError; weight
    lookups and removals outside that bound report no edge.

    Args:
        directed: If True, graph is directed; otherwise undirected.
        weight_factory: Default weight constructor (default int).

    Example:
        >>> G = AdjacencySetGraph()
        >>> G.add_edge(0, 3)
        >>> G.add_edge(0, 1)
        >>> list(G.neighbors(0))
        [1, 3]
        >>> G.size()
        4
    """

    def __init__(self, directed: bool = False, weight_factory: Callable[[], W] = int):
        super().__init__(directed=directed, weight_factory=weight_factory)
        self._neighbor_ids: List[List[int]] = []
        self._weights: List[List[W]] = []

    def size(self) -> int:
        return len(self._neighbor_ids)

    def _grow(self, vertex: int) -> None:
        while len(self._neighbor_ids) <= vertex:
            self._neighbor_ids.append([])
            self._weights.append([])

    def _insert(self, begin: int, end: int, weight: W) -> None:
        ids = self._neighbor_ids[begin]
        idx = bisect_left(ids, end)
        if idx < len(ids) and ids[idx] == end:
            self._weights[begin][idx] = weight
        else:
            ids.insert(idx, end)
            self._weights[begin].insert(idx, weight)

    def _erase(self, begin: int, end: int) -> None:
        ids = self._neighbor_ids[begin]
        idx = bisect_left(ids, end)
        if idx < len(ids) and ids[idx] == end:
            del ids[idx]
            del self._weights[begin][idx]

    def add_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        self._check_vertex_id(begin)
        self._check_vertex_id(end)
        weight = self._resolve_weight(weight)

        self._grow(max(begin, end))
        self._insert(begin, end, weight)
        if not self._directed:
            self._insert(end, begin, weight)

        self._after_mutation()

    def remove_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        if min(begin, end) < 0 or max(begin, end) >= self.size():
            return

        self._erase(begin, end)
        if not self._directed:
            self._erase(end, begin)

        self._after_mutation()

    def get_edge_weight(self, begin: int, end: int) -> Optional[W]:
        if min(begin, end) < 0 or max(begin, end) >= self.size():
            return None
        ids = self._neighbor_ids[begin]
        idx = bisect_left(ids, end)
        if idx < len(ids) and ids[idx] == end:
            return self._weights[begin][idx]
        return None

    def _row(self, vertex: int) -> int:
        if not 0 <= vertex < self.size():
            raise IndexError(
                f"Vertex {vertex} out of range for adjacency-set graph of size {self.size()}"
            )
        return vertex

    def neighbors(self, vertex: int) -> Iterator[int]:
        """
        Iterate neighbors of vertex in ascending id order.

        Raises:
            IndexError: If vertex is outside [0, size()). Raised on call,
                not on first iteration.
        """
        return self._walk(self._row(vertex))

    def neighbors_filtered(self, vertex: int, predicate: NeighborPredicate) -> Iterator[int]:
        """
        Iterate neighbors v of vertex with predicate(v, weight) true, ascending.

        Raises:
            IndexError: If vertex is outside [0, size()).
        """
        return self._walk(self._row(vertex), predicate)

    def _walk(self, vertex: int, predicate: Optional[NeighborPredicate] = None) -> Iterator[int]:
        for neighbor, weight in zip(self._neighbor_ids[vertex], self._weights[vertex]):
            if predicate is None or predicate(neighbor, weight):
                yield neighbor

    def edges(self) -> Iterator[Edge[W]]:
        """Yield stored edges ordered by (begin, end)."""
        for begin, (ids, weights) in enumerate(zip(self._neighbor_ids, self._weights)):
            for end, weight in zip(ids, weights):
                yield Edge(begin, end, weight)
