"""
Traversal event observers.

A Visitor receives the events bfs / dfs emit while walking a graph. Every
hook is a no-op by default so subclasses override only what they need.
Hooks get the graph being traversed and must not mutate it.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

from ..logging import get_logger
from .core import Graph


class Visitor:
    """Base observer with six no-op event hooks."""

    def discover_vertex(self, u: int, graph: Graph) -> None:
        """Invoked when u is first reached (colored gray)."""

    def examine_vertex(self, u: int, graph: Graph) -> None:
        """Invoked when u is dequeued, before its edges (BFS only)."""

    def examine_edge(self, u: int, v: int, graph: Graph) -> None:
        """Invoked on every out-edge (u, v) before it is classified."""

    def tree_edge(self, u: int, v: int, graph: Graph) -> None:
        """Invoked when (u, v) leads to an undiscovered vertex."""

    def non_tree_edge(self, u: int, v: int, graph: Graph) -> None:
        """Invoked when (u, v) leads to an already discovered vertex."""

    def finish_vertex(self, u: int, graph: Graph) -> None:
        """Invoked after every edge of u has been examined (colored black)."""


class RecordingVisitor(Visitor):
    """
    Visitor that records every event it receives.

    Attributes:
        events: (event_name, *vertices) tuples in arrival order.
        discovered: Vertices in discovery order.
        finished: Vertices in finish order.
        tree_edges: (u, v) tree edges in arrival order.
        non_tree_edges: (u, v) non-tree edges in arrival order.
    """

    def __init__(self) -> None:
        self.events: List[Tuple[Any, ...]] = []
        self.discovered: List[int] = []
        self.finished: List[int] = []
        self.tree_edges: List[Tuple[int, int]] = []
        self.non_tree_edges: List[Tuple[int, int]] = []

    def discover_vertex(self, u: int, graph: Graph) -> None:
        self.events.append(("discover_vertex", u))
        self.discovered.append(u)

    def examine_vertex(self, u: int, graph: Graph) -> None:
        self.events.append(("examine_vertex", u))

    def examine_edge(self, u: int, v: int, graph: Graph) -> None:
        self.events.append(("examine_edge", u, v))

    def tree_edge(self, u: int, v: int, graph: Graph) -> None:
        self.events.append(("tree_edge", u, v))
        self.tree_edges.append((u, v))

    def non_tree_edge(self, u: int, v: int, graph: Graph) -> None:
        self.events.append(("non_tree_edge", u, v))
        self.non_tree_edges.append((u, v))

    def finish_vertex(self, u: int, graph: Graph) -> None:
        self.events.append(("finish_vertex", u))
        self.finished.append(u)


class LoggingVisitor(Visitor):
    """
    Visitor that reports every event through the graphkit logger.

    Args:
        prefix: Tag prepended to each message, e.g. "BFS" or "DFS".
        logger: Logger to use (default: graphkit.graphs.visitors).
        level: Log level for event messages (default DEBUG).
    """

    def __init__(
        self,
        prefix: str = "traversal",
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
    ) -> None:
        self.prefix = prefix
        self.logger = logger if logger is not None else get_logger(__name__)
        self.level = level

    def discover_vertex(self, u: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Discovered vertex %d", self.prefix, u)

    def examine_vertex(self, u: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Examining vertex %d", self.prefix, u)

    def examine_edge(self, u: int, v: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Examining edge (%d, %d)", self.prefix, u, v)

    def tree_edge(self, u: int, v: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Tree edge (%d, %d)", self.prefix, u, v)

    def non_tree_edge(self, u: int, v: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Non-tree edge (%d, %d)", self.prefix, u, v)

    def finish_vertex(self, u: int, graph: Graph) -> None:
        self.logger.log(self.level, "%s: Finished vertex %d", self.prefix, u)
