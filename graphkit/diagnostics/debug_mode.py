"""Debug mode for graphkit.

While debug mode is on, every mutating call on a graph (add_edge,
remove_edge) re-checks the representation invariants before returning.
Today that is the symmetry invariant of undirected graphs: each stored
(u, v, w) must have a mirror (v, u, w). Directed graphs carry no symmetry
invariant and are never checked.

The initial state comes from the GRAPHKIT_DEBUG environment variable
("1", "true", "yes" or "on", case-insensitive). Checks cost O(E) lookups
per mutation, so keep debug mode off outside tests and investigations.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from .core import assert_symmetric

if TYPE_CHECKING:
    from ..graphs.core import Graph

_DEBUG_ENV_VAR = "GRAPHKIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_flag(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _parse_flag(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether graph mutations are currently verified.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally turn mutation verification on or off.

    Parameters
    ----------
    enabled:
        Whether to verify graph invariants after every mutation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily turn mutation verification on or off.

    The previous state is restored on exit, also when the block raises.

    Parameters
    ----------
    enabled:
        Whether to verify graph invariants within the context.

    Example
    -------
    >>> G = EdgeListGraph()
    >>> with debug_context(True):
    ...     G.add_edge(0, 1)  # symmetry is verified here
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def verify_mutation(graph: "Graph") -> None:
    """
    Check the invariants of a graph that was just mutated.

    Does nothing unless debug mode is enabled. Only undirected graphs are
    checked, since only they promise a symmetric edge set.

    Parameters
    ----------
    graph:
        The graph whose add_edge or remove_edge call just completed.

    Raises
    ------
    ValueError
        If debug mode is on and an undirected graph lost its symmetry.
    """
    if not _debug_enabled or graph.is_directed:
        return
    assert_symmetric(graph)
