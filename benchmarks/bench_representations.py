"""Benchmark traversals and connectivity across graph representations."""

import time
from typing import Dict

import numpy as np

import graphkit as gk


def random_edges(n_vertices: int, n_edges: int, seed: int = 0):
    """Random undirected edge tuples with integer weights, no self loops."""
    rng = np.random.default_rng(seed)
    begins = rng.integers(0, n_vertices, size=n_edges)
    ends = rng.integers(0, n_vertices, size=n_edges)
    weights = rng.integers(1, 100, size=n_edges)
    return [
        (int(u), int(v), int(w))
        for u, v, w in zip(begins, ends, weights)
        if u != v
    ]


def benchmark_representation(
    kind: str,
    n_vertices: int = 2000,
    n_edges: int = 8000,
    seed: int = 0,
) -> Dict[str, float]:
    """Time build, BFS, DFS and bridge finding for one representation.

    Args:
        kind: Representation name ("matrix", "set", "edge_list").
        n_vertices: Number of vertices.
        n_edges: Number of random edges to draw.
        seed: Random seed.

    Returns:
        Dictionary with timing results in seconds.
    """
    edges = random_edges(n_vertices, n_edges, seed=seed)
    timings: Dict[str, float] = {"n_vertices": n_vertices, "n_edges": len(edges)}

    start = time.perf_counter()
    G = gk.build_graph(kind, edges, vertices=n_vertices)
    timings["build_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    gk.bfs(G, 0)
    timings["bfs_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    gk.dfs(G)
    timings["dfs_sec"] = time.perf_counter() - start

    start = time.perf_counter()
    gk.find_bridges_and_articulation_points(G)
    timings["bridges_sec"] = time.perf_counter() - start

    return timings


if __name__ == "__main__":
    print("Benchmarking graph representations...")

    # edge lists scan every record per neighbor query, keep them small
    sizes = {"matrix": (2000, 8000), "set": (2000, 8000), "edge_list": (300, 1200)}
    for kind, (n_vertices, n_edges) in sizes.items():
        results = benchmark_representation(kind, n_vertices=n_vertices, n_edges=n_edges)
        print(f"{kind} ({n_vertices} vertices, {results['n_edges']} edges):")
        for step in ("build", "bfs", "dfs", "bridges"):
            print(f"  {step:>7}: {results[step + '_sec'] * 1e3:.2f} ms")
