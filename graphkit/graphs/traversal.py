"""
Graph traversal algorithms: BFS and DFS.

Both traversals work on any Graph representation and report progress to a
Visitor. Neighbors are visited in the order the representation yields them
(ascending for matrix and adjacency-set graphs, insertion order for edge
lists), so event order is deterministic per representation.

Vertex colors live in a list allocated per call and indexed by vertex id.
Full-graph searches start new trees from graph.vertices(), so edge lists
with sparse ids (at or beyond size()) are covered; the color table grows
to reach them.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional, Tuple

from ..logging import get_logger
from .core import Color, Graph
from .visitors import Visitor

logger = get_logger(__name__)


def _color_of(color: List[Color], vertex: int) -> Color:
    if vertex >= len(color):
        color.extend([Color.WHITE] * (vertex + 1 - len(color)))
    return color[vertex]


def _check_start(graph: Graph, start: int) -> None:
    if not graph.has_vertex(start):
        raise IndexError(f"Start vertex {start} is not a vertex of {graph!r}")


def bfs(graph: Graph, start: int, visitor: Optional[Visitor] = None) -> Visitor:
    """
    Breadth-first search from a start vertex.

    Visits only the component reachable from start. For every dequeued
    vertex u the visitor sees examine_vertex(u), then for each neighbor v
    examine_edge(u, v) followed by either tree_edge(u, v) and
    discover_vertex(v) (v undiscovered) or non_tree_edge(u, v), and
    finally finish_vertex(u).

    Args:
        graph: Graph to traverse.
        start: Start vertex.
        visitor: Event observer (default: a no-op Visitor).

    Returns:
        The visitor, for chaining.

    Raises:
        IndexError: If the graph is non-empty and start is not one of its
            vertices().

    Complexity: O(V + E) neighbor visits, plus the per-vertex scan cost of
    the representation (O(V) for a matrix row, O(E) for an edge list).

    Example:
        >>> G = AdjacencyMatrixGraph(3)
        >>> G.add_edge(0, 1)
        >>> G.add_edge(1, 2)
        >>> bfs(G, 0, RecordingVisitor()).finished
        [0, 1, 2]
    """
    if visitor is None:
        visitor = Visitor()

    n = graph.size()
    if n == 0:
        return visitor
    _check_start(graph, start)

    color = [Color.WHITE] * n

    _color_of(color, start)
    color[start] = Color.GRAY
    visitor.discover_vertex(start, graph)
    queue = deque([start])
    reached = 1

    while queue:
        u = queue.popleft()
        visitor.examine_vertex(u, graph)

        for v in graph.neighbors(u):
            visitor.examine_edge(u, v, graph)

            if _color_of(color, v) is Color.WHITE:
                visitor.tree_edge(u, v, graph)
                color[v] = Color.GRAY
                visitor.discover_vertex(v, graph)
                queue.append(v)
                reached += 1
            else:
                # back or cross edge; BFS does not tell them apart
                visitor.non_tree_edge(u, v, graph)

        color[u] = Color.BLACK
        visitor.finish_vertex(u, graph)

    logger.debug("bfs from %d reached %d of %d vertices", start, reached, n)
    return visitor


def _dfs_visit(graph: Graph, root: int, visitor: Visitor, color: List[Color]) -> None:
    # Explicit stack of (vertex, partially consumed neighbor iterator); the
    # event order matches _dfs_visit_recursive exactly.
    color[root] = Color.GRAY
    visitor.discover_vertex(root, graph)
    stack: List[Tuple[int, Iterator[int]]] = [(root, graph.neighbors(root))]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            visitor.examine_edge(u, v, graph)
            if _color_of(color, v) is Color.WHITE:
                visitor.tree_edge(u, v, graph)
                color[v] = Color.GRAY
                visitor.discover_vertex(v, graph)
                stack.append((v, graph.neighbors(v)))
                break
            visitor.non_tree_edge(u, v, graph)
        else:
            stack.pop()
            color[u] = Color.BLACK
            visitor.finish_vertex(u, graph)


def _dfs_visit_recursive(graph: Graph, u: int, visitor: Visitor, color: List[Color]) -> None:
    color[u] = Color.GRAY
    visitor.discover_vertex(u, graph)

    for v in graph.neighbors(u):
        visitor.examine_edge(u, v, graph)
        if _color_of(color, v) is Color.WHITE:
            visitor.tree_edge(u, v, graph)
            _dfs_visit_recursive(graph, v, visitor, color)
        else:
            visitor.non_tree_edge(u, v, graph)

    color[u] = Color.BLACK
    visitor.finish_vertex(u, graph)


def dfs(graph: Graph, visitor: Optional[Visitor] = None) -> Visitor:
    """
    Depth-first search over every component.

    Starts a new DFS tree at each still-undiscovered vertex of
    graph.vertices(), i.e. ids 0..size()-1 for dense representations. For
    a vertex u the visitor sees discover_vertex(u), then for each neighbor
    v examine_edge(u, v) followed by tree_edge(u, v) and the whole visit of
    v, or non_tree_edge(u, v); finally finish_vertex(u).

    Uses an explicit stack, so graph depth is not limited by the Python
    recursion limit. Event order is identical to dfs_recursive.

    Args:
        graph: Graph to traverse.
        visitor: Event observer (default: a no-op Visitor).

    Returns:
        The visitor, for chaining.

    Example:
        >>> G = AdjacencySetGraph()
        >>> G.add_edge(0, 1)
        >>> G.add_edge(2, 3)
        >>> dfs(G, RecordingVisitor()).discovered
        [0, 1, 2, 3]
    """
    if visitor is None:
        visitor = Visitor()

    color = [Color.WHITE] * graph.size()
    roots = 0
    for u in graph.vertices():
        if _color_of(color, u) is Color.WHITE:
            roots += 1
            _dfs_visit(graph, u, visitor, color)

    logger.debug("dfs over %d vertices built %d trees", graph.size(), roots)
    return visitor


def dfs_from(graph: Graph, start: int, visitor: Optional[Visitor] = None) -> Visitor:
    """
    Depth-first search of the component containing start only.

    Args:
        graph: Graph to traverse.
        start: Root vertex.
        visitor: Event observer (default: a no-op Visitor).

    Returns:
        The visitor, for chaining.

    Raises:
        IndexError: If the graph is non-empty and start is not one of its
            vertices().
    """
    if visitor is None:
        visitor = Visitor()

    n = graph.size()
    if n == 0:
        return visitor
    _check_start(graph, start)

    color = [Color.WHITE] * n
    _color_of(color, start)
    _dfs_visit(graph, start, visitor, color)
    return visitor


def dfs_recursive(graph: Graph, visitor: Optional[Visitor] = None) -> Visitor:
    """
    Depth-first search over every component (recursive implementation).

    Same events and order as dfs(). Recursion depth equals the longest
    tree path, so long paths can exceed the interpreter recursion limit;
    prefer dfs() for large graphs.

    Args:
        graph: Graph to traverse.
        visitor: Event observer (default: a no-op Visitor).

    Returns:
        The visitor, for chaining.
    """
    if visitor is None:
        visitor = Visitor()

    color = [Color.WHITE] * graph.size()
    for u in graph.vertices():
        if _color_of(color, u) is Color.WHITE:
            _dfs_visit_recursive(graph, u, visitor, color)

    return visitor
