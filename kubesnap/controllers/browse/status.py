"""Per-kind status classification for browsing views."""

from __future__ import annotations

from typing import Any

from kubesnap.constants.enums import ResourceStatus
from kubesnap.utils.tree import as_mapping

_REPLICA_CONTROLLERS = frozenset({"deployments", "statefulsets", "daemonsets"})
_PHASE_KINDS = frozenset({"pods", "rollouts"})


def _replicas(status: dict[str, Any], field: str) -> int:
    value = status.get(field) or 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def classify_status(kind: str, status: Any) -> str:
    """Derive the display status of a resource from its ``status`` section.

    Pods and rollouts report their literal phase. Controller kinds derive a
    label from replica or job counters. Every other kind, including kinds
    outside the catalog, is "Unknown".
    """
    status = as_mapping(status)

    if kind in _PHASE_KINDS:
        phase = status.get("phase")
        return str(phase) if phase else ResourceStatus.UNKNOWN.value

    if kind in _REPLICA_CONTROLLERS:
        replicas = _replicas(status, "replicas")
        available = _replicas(status, "availableReplicas")
        if available == replicas and replicas > 0:
            return ResourceStatus.READY.value
        if available < replicas:
            return ResourceStatus.PROGRESSING.value
        return ResourceStatus.NOT_READY.value

    if kind == "replicasets":
        replicas = _replicas(status, "replicas")
        available = _replicas(status, "availableReplicas")
        if available == replicas and replicas > 0:
            return ResourceStatus.READY.value
        return ResourceStatus.NOT_READY.value

    if kind == "jobs":
        if status.get("succeeded"):
            return ResourceStatus.COMPLETED.value
        if status.get("active"):
            return ResourceStatus.RUNNING.value
        if status.get("failed"):
            return ResourceStatus.FAILED.value
        return ResourceStatus.PENDING.value

    return ResourceStatus.UNKNOWN.value


__all__ = ["classify_status"]
