"""
Core graph contract.

Defines the abstract Graph interface every representation implements, the
Edge record and the vertex Color used by traversals. Vertices are dense,
zero-based integers; a missing edge is reported as None, which is never a
valid stored weight.

Representations:
    - AdjacencyMatrixGraph (graphs.matrix): O(1) lookup, O(V) neighbor scan.
    - AdjacencySetGraph (graphs.adjacency): O(log deg) lookup, sorted neighbors.
    - EdgeListGraph (graphs.edge_list): O(1) append, O(E) lookup and scan.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from ..diagnostics.debug_mode import verify_mutation

W = TypeVar("W")

NeighborPredicate = Callable[[int, Any], bool]


class Color(enum.Enum):
    """Traversal status of a vertex.

    WHITE: not yet discovered.
    GRAY: discovered, neighbors still being processed.
    BLACK: every neighbor processed.
    """

    WHITE = 0
    GRAY = 1
    BLACK = 2


@dataclass(frozen=True)
class Edge(Generic[W]):
    """
    A directed edge record.

    Undirected graphs describe one logical edge with two records,
    (begin, end) and (end, begin), carrying the same weight.

    Attributes:
        begin: Source vertex.
        end: Target vertex.
        weight: Stored weight.
    """

    begin: int
    end: int
    weight: Any = None

    def as_tuple(self) -> tuple[int, int]:
        """Return the (begin, end) endpoint pair."""
        return (self.begin, self.end)


class Graph(ABC, Generic[W]):
    """
    Abstract weighted graph over vertices 0..size()-1.

    Subclasses own their storage; this base only carries the immutable
    configuration (directedness and the default weight factory) and the
    shared argument checks.

    Args:
        directed: If True, edges are one-way; otherwise every mutation also
            applies to the mirrored (end, begin) entry.
        weight_factory: Zero-argument callable producing the default weight
            used when add_edge is called without one (default int, i.e. 0).
    """

    def __init__(self, directed: bool = False, weight_factory: Callable[[], W] = int):
        self._directed = bool(directed)
        self._weight_factory = weight_factory

    @property
    def is_directed(self) -> bool:
        """Whether the graph is directed."""
        return self._directed

    def default_weight(self) -> W:
        """Return a freshly constructed default weight."""
        return self._weight_factory()

    @abstractmethod
    def add_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        """
        Insert or overwrite the edge (begin, end).

        For undirected graphs the mirror (end, begin) is written with the
        same weight.

        Args:
            begin: Source vertex.
            end: Target vertex.
            weight: Edge weight. None means the default weight.
        """

    @abstractmethod
    def remove_edge(self, begin: int, end: int, weight: Optional[W] = None) -> None:
        """
        Delete the edge (begin, end) and, if undirected, its mirror.

        Removing an edge that does not exist is a no-op. The weight
        argument is accepted for interface symmetry and ignored.
        """

    @abstractmethod
    def get_edge_weight(self, begin: int, end: int) -> Optional[W]:
        """Return the weight of (begin, end), or None if there is no such edge."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of vertices (meaning is representation-specific)."""

    @abstractmethod
    def neighbors(self, vertex: int) -> Iterator[int]:
        """Return a fresh lazy iterator over the neighbors of vertex."""

    @abstractmethod
    def neighbors_filtered(self, vertex: int, predicate: NeighborPredicate) -> Iterator[int]:
        """
        Return a lazy iterator over neighbors accepted by predicate.

        predicate(neighbor, weight) is evaluated one candidate at a time,
        in the same order neighbors() would yield them.
        """

    @abstractmethod
    def edges(self) -> Iterator[Edge[W]]:
        """Yield every stored directed edge record."""

    def vertices(self) -> Iterator[int]:
        """
        Yield every vertex id in ascending order.

        Dense representations hold exactly the ids 0..size()-1. Traversals
        and the connectivity analyzer start new trees from these ids.
        """
        return iter(range(self.size()))

    def has_vertex(self, vertex: int) -> bool:
        """Return True if vertex is one of vertices()."""
        return 0 <= vertex < self.size()

    def has_edge(self, begin: int, end: int) -> bool:
        """Return True if (begin, end) is stored."""
        return self.get_edge_weight(begin, end) is not None

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"{self.__class__.__name__}({kind}, size={self.size()})"

    def _resolve_weight(self, weight: Optional[W]) -> W:
        return self.default_weight() if weight is None else weight

    @staticmethod
    def _check_vertex_id(vertex: int) -> None:
        if vertex < 0:
            raise IndexError(f"Vertex {vertex} is negative")

    def _after_mutation(self) -> None:
        verify_mutation(self)
