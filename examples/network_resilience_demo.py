"""Example: Network Resilience with graphkit

Models a small backbone network, walks it with BFS and DFS visitors, and
finds the links and routers whose failure would split it.
"""

import numpy as np

import graphkit as gk
from graphkit import (
    RecordingVisitor,
    Visitor,
    bfs,
    build_graph,
    dfs,
    find_bridges_and_articulation_points,
)

# (router, router, latency in ms)
BACKBONE = [
    (0, 1, 4), (1, 2, 3), (2, 0, 5),      # core ring
    (2, 3, 12),                           # uplink to the east site
    (3, 4, 2), (4, 5, 2), (5, 3, 3),      # east ring
    (5, 6, 9),                            # single-homed branch office
    (1, 7, 7), (7, 8, 1),                 # west spur
]


class HopCounter(Visitor):
    """Records the BFS hop distance of every reached router."""

    def __init__(self, start):
        self.hops = {start: 0}

    def tree_edge(self, u, v, graph):
        self.hops[v] = self.hops[u] + 1


def example_reachability():
    """Example: hop counts from the core with a custom visitor."""
    print("=" * 60)
    print("Example 1: Hop Counts from Router 0 (BFS)")
    print("=" * 60)

    G = build_graph("set", BACKBONE)
    counter = bfs(G, 0, HopCounter(0))
    for router in sorted(counter.hops):
        print(f"  router {router}: {counter.hops[router]} hops")

    print()


def example_spanning_forest():
    """Example: DFS tree edges across all three representations."""
    print("=" * 60)
    print("Example 2: DFS Spanning Tree per Representation")
    print("=" * 60)

    for kind in gk.REPRESENTATIONS:
        G = build_graph(kind, BACKBONE)
        visitor = dfs(G, RecordingVisitor())
        print(f"  {kind:>9}: discovered {visitor.discovered}")
        print(f"  {'':>9}  tree edges {visitor.tree_edges}")

    print()


def example_single_points_of_failure():
    """Example: bridges and articulation points."""
    print("=" * 60)
    print("Example 3: Single Points of Failure")
    print("=" * 60)

    G = build_graph("edge_list", BACKBONE)
    bridges, routers = find_bridges_and_articulation_points(G)

    print("Critical links:")
    for edge in bridges:
        print(f"  {edge.begin} <-> {edge.end} ({edge.weight} ms)")
    print(f"Critical routers: {sorted(routers)}")

    # A redundant link from the branch office removes one bridge
    G.add_edge(6, 4, 15)
    bridges, routers = find_bridges_and_articulation_points(G)
    print(f"\nAfter adding link 6 <-> 4: {len(bridges)} critical links, routers {sorted(routers)}")

    print()


def example_matrix_export():
    """Example: dense export for numeric work."""
    print("=" * 60)
    print("Example 4: Latency Matrix Export")
    print("=" * 60)

    G = build_graph("matrix", BACKBONE)
    W = gk.adjacency_matrix(G)
    print(f"Matrix shape: {W.shape}")
    print(f"Total link latency: {np.triu(W).sum():.0f} ms")
    print(f"Degrees: {gk.degree_sequence(G)}")

    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Network Resilience - graphkit Examples")
    print("=" * 60 + "\n")

    example_reachability()
    example_spanning_forest()
    example_single_points_of_failure()
    example_matrix_export()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
