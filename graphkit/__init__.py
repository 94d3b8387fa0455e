"""graphkit - interchangeable graph representations, visitor traversals and connectivity analysis."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_symmetric,
    debug_context,
    edge_weight_map,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
    verify_mutation,
)

# Graphs
from .graphs import (
    REPRESENTATIONS,
    AdjacencyMatrixGraph,
    AdjacencySetGraph,
    BridgesAndArticulationPoints,
    Color,
    Edge,
    EdgeListGraph,
    Graph,
    LoggingVisitor,
    RecordingVisitor,
    Visitor,
    adjacency_matrix,
    bfs,
    build_graph,
    degree_sequence,
    dfs,
    dfs_from,
    dfs_recursive,
    find_bridges_and_articulation_points,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "Edge",
    "Color",
    "AdjacencyMatrixGraph",
    "AdjacencySetGraph",
    "EdgeListGraph",
    "REPRESENTATIONS",
    "build_graph",
    "adjacency_matrix",
    "degree_sequence",
    # Traversal
    "Visitor",
    "RecordingVisitor",
    "LoggingVisitor",
    "bfs",
    "dfs",
    "dfs_from",
    "dfs_recursive",
    # Connectivity
    "BridgesAndArticulationPoints",
    "find_bridges_and_articulation_points",
    # Diagnostics
    "edge_weight_map",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "verify_mutation",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
