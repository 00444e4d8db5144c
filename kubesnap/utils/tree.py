"""Safe traversal helpers for decoded JSON-like trees.

Snapshot payloads are plain ``dict``/``list``/scalar trees whose shape drifts
between collector versions. The helpers here never raise on unexpected
shapes: a lookup that misses, or meets a scalar where a mapping was expected,
resolves to ``None``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from kubesnap.constants.limits import ITEMS_SEARCH_MAX_DEPTH
from kubesnap.constants.values import PAYLOAD_ITEMS_KEY


class TreeNodeKind(Enum):
    """Shape of one node in a decoded tree."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def node_kind(value: Any) -> TreeNodeKind:
    """Classify ``value`` as mapping, sequence, or scalar.

    Strings and bytes are scalars even though they are sequences in Python.
    """
    if isinstance(value, Mapping):
        return TreeNodeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return TreeNodeKind.SEQUENCE
    return TreeNodeKind.SCALAR


def _children(value: Any) -> list[tuple[Any, Any]]:
    """Return ``(key, child)`` pairs in document order."""
    kind = node_kind(value)
    if kind is TreeNodeKind.MAPPING:
        return list(value.items())
    if kind is TreeNodeKind.SEQUENCE:
        return list(enumerate(value))
    return []


def find_items(
    root: Any,
    key: str = PAYLOAD_ITEMS_KEY,
    max_depth: int = ITEMS_SEARCH_MAX_DEPTH,
) -> list[Any] | None:
    """Find the first sequence stored under ``key`` anywhere below ``root``.

    The search is depth-first and pre-order: at each mapping the entries are
    visited in insertion order and each child subtree is exhausted before the
    next sibling is considered. Nodes deeper than ``max_depth`` are not
    expanded.

    Args:
        root: Decoded tree to search.
        key: Mapping key whose sequence value is wanted.
        max_depth: Maximum nesting level to expand.

    Returns:
        The first matching sequence as a list, or None when none exists.
    """
    stack: list[tuple[Any, Any, int]] = [(None, root, 0)]
    while stack:
        node_key, node, depth = stack.pop()
        kind = node_kind(node)
        if node_key == key and kind is TreeNodeKind.SEQUENCE:
            return list(node)
        if kind is TreeNodeKind.SCALAR or depth >= max_depth:
            continue
        for child_key, child in reversed(_children(node)):
            stack.append((child_key, child, depth + 1))
    return None


def split_path(path: str | Sequence[str]) -> tuple[str, ...]:
    """Split a dotted path into its segments."""
    if isinstance(path, str):
        return tuple(segment for segment in path.split(".") if segment)
    return tuple(path)


def resolve_path(root: Any, path: str | Sequence[str]) -> Any | None:
    """Resolve ``path`` inside nested mappings.

    Every segment must land on a mapping that contains it; anything else
    short-circuits to None.
    """
    current = root
    for segment in split_path(path):
        if node_kind(current) is not TreeNodeKind.MAPPING:
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current


def is_present(value: Any) -> bool:
    """Return True when ``value`` is set and non-empty.

    Empty mappings, empty sequences, empty strings and None are absent; any
    other scalar (including ``False`` and ``0``) is present.
    """
    if value is None:
        return False
    kind = node_kind(value)
    if kind is TreeNodeKind.SCALAR:
        return value != ""
    return len(value) > 0


def as_mapping(value: Any) -> dict[str, Any]:
    """Return ``value`` when it is a mapping, otherwise an empty dict."""
    if node_kind(value) is TreeNodeKind.MAPPING:
        return dict(value)
    return {}


def as_list(value: Any) -> list[Any]:
    """Return ``value`` as a list when it is a sequence, otherwise empty."""
    if node_kind(value) is TreeNodeKind.SEQUENCE:
        return list(value)
    return []


def with_string_keys(value: Any, _memo: dict[int, Any] | None = None) -> Any:
    """Copy a decoded tree with every mapping key converted to ``str``.

    YAML documents can carry integer, boolean or timestamp keys. Containers
    are rebuilt (sequences become lists); scalars are shared. Nodes reached
    more than once, including through YAML aliases, are copied once.
    """
    memo: dict[int, Any] = {} if _memo is None else _memo
    kind = node_kind(value)
    if kind is TreeNodeKind.SCALAR:
        return value
    if id(value) in memo:
        return memo[id(value)]

    if kind is TreeNodeKind.MAPPING:
        mapping: dict[str, Any] = {}
        memo[id(value)] = mapping
        for key, item in value.items():
            mapping[str(key)] = with_string_keys(item, memo)
        return mapping

    items: list[Any] = []
    memo[id(value)] = items
    items.extend(with_string_keys(item, memo) for item in value)
    return items


__all__ = [
    "TreeNodeKind",
    "as_list",
    "as_mapping",
    "find_items",
    "is_present",
    "node_kind",
    "resolve_path",
    "split_path",
    "with_string_keys",
]
