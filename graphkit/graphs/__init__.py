"""
Graph package for graphkit.

This package provides:
- A uniform Graph contract (add/remove/lookup edges, lazy neighbor iteration)
- Three representations: AdjacencyMatrixGraph, AdjacencySetGraph, EdgeListGraph
- Visitor-driven traversals (BFS, DFS)
- Bridges and articulation points (Tarjan's low-link algorithm)

Neighbor order is a property of the representation: ascending ids for the
matrix and adjacency-set graphs, insertion order for edge lists.
"""

from .adjacency import AdjacencySetGraph
from .connectivity import BridgesAndArticulationPoints, find_bridges_and_articulation_points
from .core import Color, Edge, Graph
from .edge_list import EdgeListGraph
from .matrix import AdjacencyMatrixGraph
from .traversal import bfs, dfs, dfs_from, dfs_recursive
from .utils import REPRESENTATIONS, adjacency_matrix, build_graph, degree_sequence
from .visitors import LoggingVisitor, RecordingVisitor, Visitor

__all__ = [
    "Graph",
    "Edge",
    "Color",
    "AdjacencyMatrixGraph",
    "AdjacencySetGraph",
    "EdgeListGraph",
    "Visitor",
    "RecordingVisitor",
    "LoggingVisitor",
    "bfs",
    "dfs",
    "dfs_from",
    "dfs_recursive",
    "BridgesAndArticulationPoints",
    "find_bridges_and_articulation_points",
    "REPRESENTATIONS",
    "build_graph",
    "adjacency_matrix",
    "degree_sequence",
]

# Example usage:
# from graphkit.graphs import AdjacencySetGraph, find_bridges_and_articulation_points
#
# G = AdjacencySetGraph()
# G.add_edge(0, 1)
# G.add_edge(1, 2)
# bridges, points = find_bridges_and_articulation_points(G)  # 2 bridges, {1}
