"""Core diagnostic functions for graph representations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from ..graphs.core import Graph


def edge_weight_map(graph: "Graph") -> Dict[Tuple[int, int], Any]:
    """
    Collect the effective weight of every stored directed edge.

    Representations that keep duplicate records (EdgeListGraph) resolve
    to the same weight get_edge_weight would report.

    Parameters
    ----------
    graph:
        Any graph representation.

    Returns
    -------
    dict
        Mapping (begin, end) -> weight.
    """
    return {
        (edge.begin, edge.end): graph.get_edge_weight(edge.begin, edge.end)
        for edge in graph.edges()
    }


def _first_asymmetry(graph: "Graph") -> Optional[Tuple[int, int, Any, Any]]:
    for (u, v), weight in edge_weight_map(graph).items():
        mirror = graph.get_edge_weight(v, u)
        if mirror is None or mirror != weight:
            return u, v, weight, mirror
    return None


def is_symmetric(graph: "Graph") -> bool:
    """
    Check whether every stored edge (u, v, w) has a mirror (v, u, w).

    Parameters
    ----------
    graph:
        Any graph representation.

    Returns
    -------
    bool
        True if the edge set is symmetric with matching weights.
    """
    return _first_asymmetry(graph) is None


def assert_symmetric(graph: "Graph") -> None:
    """
    Assert that an undirected graph satisfies its symmetry invariant.

    Parameters
    ----------
    graph:
        Any graph representation.

    Raises
    ------
    ValueError
        If some edge has no mirror or the mirror carries another weight.
    """
    found = _first_asymmetry(graph)
    if found is not None:
        u, v, weight, mirror = found
        raise ValueError(
            f"Graph is not symmetric: edge ({u}, {v}) has weight {weight!r} "
            f"but ({v}, {u}) has {mirror!r}."
        )
