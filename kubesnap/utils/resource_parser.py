"""Resource parsing utilities for Kubernetes quantities.

Provides functions to parse memory quantity strings into bytes:
- Binary suffixes: Ki, Mi, Gi, Ti, Pi, Ei
- Decimal suffixes: k, M, G, T, P, E
- Exponent form: "129e6"
"""

from __future__ import annotations

from typing import Any

from kubesnap.utils.tree import as_mapping

# Module-level constants to avoid re-creating on every function call.
# Two-letter binary suffixes are checked before the one-letter decimal ones.
_MEMORY_BYTES_MULTIPLIERS: tuple[tuple[str, float], ...] = (
    ("Ki", 1024),
    ("Mi", 1024**2),
    ("Gi", 1024**3),
    ("Ti", 1024**4),
    ("Pi", 1024**5),
    ("Ei", 1024**6),
    ("k", 1000),
    ("M", 1000**2),
    ("G", 1000**3),
    ("T", 1000**4),
    ("P", 1000**5),
    ("E", 1000**6),
    ("m", 1 / 1000),
)


def parse_memory_quantity(value: Any) -> float | None:
    """Parse a memory quantity into bytes.

    Args:
        value: Quantity as string (e.g., "512Mi", "1G", "129e6") or number.

    Returns:
        Bytes as float, or None when the value is missing or unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        return None

    for suffix, mult in _MEMORY_BYTES_MULTIPLIERS:
        if text.endswith(suffix):
            try:
                return float(text[: -len(suffix)]) * mult
            except ValueError:
                return None

    # Plain bytes or exponent notation
    try:
        return float(text)
    except ValueError:
        return None


def container_memory(container: Any, container_type: str) -> float | None:
    """Read a container's memory request or limit.

    Utility function to extract and parse memory from a structure like:
    {"resources": {"limits": {"memory": "512Mi"}}}

    Args:
        container: Container dictionary from a pod spec
        container_type: Key for container resources ("limits" or "requests")

    Returns:
        Parsed memory value in bytes, or None when not declared.
    """
    resources = as_mapping(as_mapping(container).get("resources"))
    values = as_mapping(resources.get(container_type))
    return parse_memory_quantity(values.get("memory"))


__all__ = [
    "container_memory",
    "parse_memory_quantity",
]
