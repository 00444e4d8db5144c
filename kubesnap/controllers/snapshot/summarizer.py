"""Count summarizer - per-kind resource counts for the browsing menu."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from kubesnap.constants.enums import ResourceCategory
from kubesnap.controllers.snapshot.indexer import SnapshotIndex
from kubesnap.models.core.resource_kind import RESOURCE_KINDS, supported_kinds

logger = logging.getLogger(__name__)


class CountFallback(Protocol):
    """Strategy that replaces an all-zero count table."""

    def __call__(self, counts: dict[str, int]) -> dict[str, int]: ...


# Inclusive ranges for synthetic development counts.
DEMO_COUNT_RANGES: dict[str, tuple[int, int]] = {
    "nodes": (3, 8),
    "namespaces": (10, 25),
    "events": (50, 200),
    "pods": (30, 100),
    "deployments": (10, 30),
    "statefulsets": (0, 5),
    "daemonsets": (1, 10),
    "jobs": (0, 10),
    "replicasets": (10, 40),
    "horizontalpodautoscalers": (0, 8),
    "poddisruptionbudgets": (0, 5),
    "services": (10, 30),
    "ingresses": (0, 10),
    "networkpolicies": (0, 8),
    "persistentvolumes": (0, 15),
    "persistentvolumeclaims": (0, 20),
    "storageclasses": (1, 5),
    "configmaps": (10, 40),
    "roles": (10, 30),
    "rolebindings": (10, 30),
    "clusterroles": (5, 20),
    "clusterrolebindings": (5, 20),
    "rollouts": (0, 5),
    "csinodes": (0, 8),
}


class DemoCountFallback:
    """Development-mode fallback producing random demonstration counts."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def __call__(self, counts: dict[str, int]) -> dict[str, int]:
        logger.warning("All resource counts are zero, using demonstration counts")
        demo = dict(counts)
        for kind, (low, high) in DEMO_COUNT_RANGES.items():
            demo[kind] = self._rng.randint(low, high)
        return demo


def summarize_counts(
    index: SnapshotIndex,
    fallback: CountFallback | None = None,
) -> dict[str, int]:
    """Compute ``kind -> count`` for every catalog kind, in catalog order.

    Args:
        index: Indexed snapshot.
        fallback: Optional strategy applied only when every count is zero.

    Returns:
        Count per kind; never raises.
    """
    counts = {kind: index.count_of(kind) for kind in supported_kinds()}
    if fallback is not None and not any(counts.values()):
        return fallback(counts)
    return counts


def counts_by_category(counts: dict[str, int]) -> dict[ResourceCategory, dict[str, int]]:
    """Group a count table into browsing sections."""
    grouped: dict[ResourceCategory, dict[str, int]] = {category: {} for category in ResourceCategory}
    for spec in RESOURCE_KINDS:
        grouped[spec.category][spec.kind] = counts.get(spec.kind, 0)
    return grouped


__all__ = [
    "DEMO_COUNT_RANGES",
    "CountFallback",
    "DemoCountFallback",
    "counts_by_category",
    "summarize_counts",
]
