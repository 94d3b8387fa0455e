"""
Bridges and articulation points.

Tarjan's single-pass low-link algorithm: one depth-first scan over every
component records, per vertex, its discovery time and the smallest
discovery time reachable from its subtree through at most one back edge.

    - Tree edge (u, v) is a bridge iff low[v] > tin[u].
    - Non-root u is an articulation point iff some child v has low[v] >= tin[u].
    - A DFS root is an articulation point iff it has more than one child.

The scan uses an explicit stack, so path-like graphs are not limited by the
interpreter recursion limit.

References:
    - Tarjan, R. "Depth-first search and linear graph algorithms",
      SIAM J. Computing 1(2), 1972.
"""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from ..logging import get_logger
from .core import Color, Edge, Graph

logger = get_logger(__name__)

_UNSET = -1


class _Frame:
    """One pending vertex on the explicit DFS stack."""

    __slots__ = ("vertex", "pending", "parent_edge_skipped")

    def __init__(self, vertex: int, pending: Iterator[int]):
        self.vertex = vertex
        self.pending = pending
        # the first neighbor equal to the parent is the tree edge's mirror;
        # any later one is a parallel edge and counts as a back edge
        self.parent_edge_skipped = False


class BridgesAndArticulationPoints:
    """
    Finds every bridge and articulation point of an undirected graph.

    The analyzer is single-use: construct it for a graph, call
    find_bridges_and_articulation_points() once, then read bridges and
    articulation_points.

    Args:
        graph: Undirected graph to analyze. It is read, never mutated.

    Raises:
        ValueError: If graph is directed.

    Example:
        >>> G = AdjacencySetGraph()
        >>> for u, v in [(0, 1), (0, 2), (0, 3)]:
        ...     G.add_edge(u, v)
        >>> finder = BridgesAndArticulationPoints(G)
        >>> finder.find_bridges_and_articulation_points()
        >>> len(finder.bridges), finder.articulation_points
        (3, {0})
    """

    def __init__(self, graph: Graph):
        if graph.is_directed:
            raise ValueError("Bridges and articulation points require an undirected graph")

        n = graph.size()
        self.graph = graph
        self._time = 0
        self._time_in: List[int] = [_UNSET] * n
        self._low: List[int] = [_UNSET] * n
        self._color: List[Color] = [Color.WHITE] * n
        self._parent: List[int] = [_UNSET] * n
        self._bridges: List[Edge] = []
        self._articulation_points: Set[int] = set()
        self._root_children = 0
        self._scanned = False

    @property
    def bridges(self) -> List[Edge]:
        """Bridge edges (u, v) in the order they were found, u the DFS parent."""
        return list(self._bridges)

    @property
    def articulation_points(self) -> Set[int]:
        """Articulation-point vertex ids."""
        return set(self._articulation_points)

    def find_bridges_and_articulation_points(self) -> None:
        """
        Run the scan over every component of the graph.

        A new DFS tree starts at each still-unvisited vertex of
        graph.vertices(), so sparse edge-list ids are covered.

        Raises:
            RuntimeError: If called a second time on the same analyzer.
        """
        if self._scanned:
            raise RuntimeError(
                "BridgesAndArticulationPoints is single-use; construct a new analyzer"
            )
        self._scanned = True

        for u in self.graph.vertices():
            self._ensure(u)
            if self._color[u] is Color.WHITE:
                self._root_children = 0
                self._scan_from(u)
                if self._root_children > 1:
                    self._articulation_points.add(u)

        logger.debug(
            "Connectivity scan complete: %d bridges, %d articulation points in %d-vertex graph",
            len(self._bridges),
            len(self._articulation_points),
            self.graph.size(),
        )

    def _ensure(self, vertex: int) -> None:
        # sparse edge-list ids can exceed size()
        missing = vertex + 1 - len(self._color)
        if missing > 0:
            self._time_in.extend([_UNSET] * missing)
            self._low.extend([_UNSET] * missing)
            self._color.extend([Color.WHITE] * missing)
            self._parent.extend([_UNSET] * missing)

    def _enter(self, u: int) -> _Frame:
        self._color[u] = Color.GRAY
        self._time_in[u] = self._time
        self._low[u] = self._time
        self._time += 1
        return _Frame(u, self.graph.neighbors(u))

    def _scan_from(self, root: int) -> None:
        stack = [self._enter(root)]

        while stack:
            frame = stack[-1]
            u = frame.vertex
            for v in frame.pending:
                self._ensure(v)
                if self._color[v] is Color.WHITE:
                    self._parent[v] = u
                    if self._parent[u] == _UNSET:
                        self._root_children += 1
                    stack.append(self._enter(v))
                    break
                if v == self._parent[u] and not frame.parent_edge_skipped:
                    frame.parent_edge_skipped = True
                    continue
                self._low[u] = min(self._low[u], self._time_in[v])
            else:
                stack.pop()
                self._color[u] = Color.BLACK
                if stack:
                    self._finish_tree_edge(stack[-1].vertex, u)

    def _finish_tree_edge(self, u: int, v: int) -> None:
        if self._low[v] > self._time_in[u]:
            self._bridges.append(Edge(u, v, self.graph.get_edge_weight(u, v)))

        if self._low[v] >= self._time_in[u] and self._parent[u] != _UNSET:
            self._articulation_points.add(u)

        self._low[u] = min(self._low[u], self._low[v])


def find_bridges_and_articulation_points(graph: Graph) -> Tuple[List[Edge], Set[int]]:
    """
    Compute bridges and articulation points of an undirected graph.

    Args:
        graph: Undirected graph.

    Returns:
        Tuple of:
        - bridges: Edge records in discovery order
        - articulation_points: Set of vertex ids

    Example:
        >>> G = EdgeListGraph()
        >>> G.add_edge(0, 1)
        >>> G.add_edge(1, 2)
        >>> bridges, points = find_bridges_and_articulation_points(G)
        >>> [b.as_tuple() for b in bridges], points
        ([(1, 2), (0, 1)], {1})
    """
    finder = BridgesAndArticulationPoints(graph)
    finder.find_bridges_and_articulation_points()
    return finder.bridges, finder.articulation_points
