"""Diagnostics and debugging utilities for graphkit."""

from .core import (
    assert_symmetric,
    edge_weight_map,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    verify_mutation,
)

__all__ = [
    "edge_weight_map",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "verify_mutation",
]
