"""
Edge-list graph.

Stores a flat list of directed Edge records; an undirected edge is two
records. Appending never checks for an existing record, so adding the same
edge twice leaves two records and the neighbor appears twice. An undirected
self loop (v, v) is likewise two identical records, so neighbors(v) yields
v twice where the other representations yield it once.

Complexity:
    - add_edge: O(1) amortized
    - remove_edge / get_edge_weight: O(E)
    - neighbors: O(E) scan, insertion order
    - size / vertices / has_vertex: O(E) after a mutation, then cached
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Set

from .core import Edge, Graph, NeighborPredicate, W


class EdgeListGraph(Graph[W]):
    """
    Graph backed by a list of edge records.

    size() counts the distinct endpoints of the records currently stored,
    so vertex ids need not be dense: a graph holding only (0, 5) has size 2
    and vertices() [0, 5]. Traversals and the connectivity analyzer walk
    vertices(), so ids at or beyond size() are reached like any other.
    neighbors() of an unknown vertex is an empty sequence.

    get_edge_weight reports the most recently added matching record and
    remove_edge drops every matching record, which makes lookups behave
    like the other representations under repeated add_edge calls.
    neighbors() does not collapse records: a re-added edge shows up once per
    record, and an undirected self loop (v, v) shows v twice in
    neighbors(v).

    Args:
        directed: If True, graph is directed; otherwise undirected.
        weight_factory: Default weight constructor (default int).

    Example:
        >>> G = EdgeListGraph()
        >>> G.add_edge(0, 2)
        >>> G.add_edge(0, 1)
        >>> list(G.neighbors(0))
        [2, 1]
    """

    def __init__(self, directed: bool = False, weight_factory: Callable[[], W] = int):
        super().__init__(directed=directed, weight_factory=weight_factory)
        self._edges: List[Edge[W]] = []
        self._endpoints_cache: Optional[Set[int]] = None

    def _endpoints(self) -> Set[int]:
        if self._endpoints_cache is None:
            endpoints = set()
            for edge in self._edges:
                endpoints.add(edge.begin)
                endpoints.add(edge.end)
            self._endpoints_cache = endpoints
        return self._endpoints_cache

    def size(self) -> int:
        return len(self._endpoints())

    def vertices(self) -> Iterator[int]:
        """Yield the distinct endpoints of stored records in ascending order."""
        return iter(sorted(self._endpoints()))

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._endpoints()

    def add_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        self._check_vertex_id(begin)
        self._check_vertex_id(end)
        weight = self._resolve_weight(weight)

        self._edges.append(Edge(begin, end, weight))
        if not self._directed:
            self._edges.append(Edge(end, begin, weight))
        self._endpoints_cache = None

        self._after_mutation()

    def remove_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        targets = {(begin, end)}
        if not self._directed:
            targets.add((end, begin))

        kept = [edge for edge in self._edges if edge.as_tuple() not in targets]
        if len(kept) == len(self._edges):
            return

        self._edges[:] = kept
        self._endpoints_cache = None

        self._after_mutation()

    def get_edge_weight(self, begin: int, end: int) -> Optional[W]:
        for edge in reversed(self._edges):
            if edge.begin == begin and edge.end == end:
                return edge.weight
        return None

    def neighbors(self, vertex: int) -> Iterator[int]:
        """Iterate neighbors of vertex in insertion order, duplicates included."""
        return self._scan(vertex)

    def neighbors_filtered(self, vertex: int, predicate: NeighborPredicate) -> Iterator[int]:
        """Iterate neighbors v of vertex with predicate(v, weight) true, insertion order."""
        return self._scan(vertex, predicate)

    def _scan(self, vertex: int, predicate: Optional[NeighborPredicate] = None) -> Iterator[int]:
        for edge in self._edges:
            if edge.begin != vertex:
                continue
            if predicate is None or predicate(edge.end, edge.weight):
                yield edge.end

    def edges(self) -> Iterator[Edge[W]]:
        """Yield stored records in insertion order."""
        yield from list(self._edges)
