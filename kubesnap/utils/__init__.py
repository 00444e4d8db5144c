"""Utility functions for kubesnap."""

from kubesnap.utils.resource_parser import (
    container_memory,
    parse_memory_quantity,
)
from kubesnap.utils.tree import (
    TreeNodeKind,
    find_items,
    is_present,
    node_kind,
    resolve_path,
)

__all__ = [
    # Tree traversal
    "TreeNodeKind",
    # Quantities
    "container_memory",
    "find_items",
    "is_present",
    "node_kind",
    "parse_memory_quantity",
    "resolve_path",
]
