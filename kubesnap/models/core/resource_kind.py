"""Closed catalog of supported resource kinds.

Every kind maps to the key under which raw snapshot payloads store its list
(``pods`` <-> ``podList``), the browsing category it belongs to, and where its
pod spec lives when it runs containers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from kubesnap.constants.enums import ResourceCategory
from kubesnap.models.errors import UnsupportedKindError

_TEMPLATE_SPEC: tuple[str, ...] = ("template", "spec")


class ResourceKindSpec(BaseModel):
    """Static description of one supported resource kind."""

    model_config = ConfigDict(frozen=True)

    kind: str
    raw_key: str
    label: str
    category: ResourceCategory
    namespaced: bool = True
    # Path from ``spec`` to the pod spec; None when the kind has no containers.
    pod_template_path: tuple[str, ...] | None = None

    @property
    def has_containers(self) -> bool:
        return self.pod_template_path is not None


def _kind(
    kind: str,
    raw_key: str,
    label: str,
    category: ResourceCategory,
    *,
    namespaced: bool = True,
    pod_template_path: tuple[str, ...] | None = None,
) -> ResourceKindSpec:
    return ResourceKindSpec(
        kind=kind,
        raw_key=raw_key,
        label=label,
        category=category,
        namespaced=namespaced,
        pod_template_path=pod_template_path,
    )


RESOURCE_KINDS: tuple[ResourceKindSpec, ...] = (
    # Cluster
    _kind("nodes", "nodeList", "Nodes", ResourceCategory.CLUSTER, namespaced=False),
    _kind("namespaces", "namespaceList", "Namespaces", ResourceCategory.CLUSTER, namespaced=False),
    _kind("events", "eventList", "Events", ResourceCategory.CLUSTER),
    # Workloads
    _kind("pods", "podList", "Pods", ResourceCategory.WORKLOADS, pod_template_path=()),
    _kind("deployments", "deploymentList", "Deployments", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    _kind("statefulsets", "statefulSetList", "Stateful Sets", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    _kind("daemonsets", "daemonSetList", "Daemon Sets", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    _kind("jobs", "jobList", "Jobs", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    _kind("replicasets", "replicaSetList", "Replica Sets", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    _kind("rollouts", "rolloutList", "Rollouts", ResourceCategory.WORKLOADS, pod_template_path=_TEMPLATE_SPEC),
    # Autoscaling
    _kind("horizontalpodautoscalers", "horizontalPodAutoscalerList", "Horizontal Pod Autoscalers", ResourceCategory.AUTOSCALING),
    _kind("poddisruptionbudgets", "podDisruptionBudgetList", "Pod Disruption Budgets", ResourceCategory.AUTOSCALING),
    # Networking
    _kind("services", "serviceList", "Services", ResourceCategory.NETWORKING),
    _kind("ingresses", "ingressList", "Ingresses", ResourceCategory.NETWORKING),
    _kind("networkpolicies", "networkPolicyList", "Network Policies", ResourceCategory.NETWORKING),
    # Storage
    _kind("persistentvolumes", "persistentVolumeList", "Persistent Volumes", ResourceCategory.STORAGE, namespaced=False),
    _kind("persistentvolumeclaims", "persistentVolumeClaimList", "Persistent Volume Claims", ResourceCategory.STORAGE),
    _kind("storageclasses", "storageClassList", "Storage Classes", ResourceCategory.STORAGE, namespaced=False),
    _kind("csinodes", "csiNodeList", "CSI Nodes", ResourceCategory.STORAGE, namespaced=False),
    # Configuration
    _kind("configmaps", "configMapList", "Config Maps", ResourceCategory.CONFIGURATION),
    # Security
    _kind("roles", "roleList", "Roles", ResourceCategory.SECURITY),
    _kind("rolebindings", "roleBindingList", "Role Bindings", ResourceCategory.SECURITY),
    _kind("clusterroles", "clusterRoleList", "Cluster Roles", ResourceCategory.SECURITY, namespaced=False),
    _kind("clusterrolebindings", "clusterRoleBindingList", "Cluster Role Bindings", ResourceCategory.SECURITY, namespaced=False),
)

RESOURCE_KINDS_BY_ID: dict[str, ResourceKindSpec] = {spec.kind: spec for spec in RESOURCE_KINDS}


def supported_kinds() -> tuple[str, ...]:
    """Return every catalog kind identifier in catalog order."""
    return tuple(spec.kind for spec in RESOURCE_KINDS)


def get_kind_spec(kind: str) -> ResourceKindSpec:
    """Look up a catalog entry.

    Raises:
        UnsupportedKindError: If ``kind`` is not part of the catalog.
    """
    spec = RESOURCE_KINDS_BY_ID.get(kind)
    if spec is None:
        raise UnsupportedKindError(kind)
    return spec


def raw_key_for(kind: str) -> str:
    """Return the raw payload key that stores ``kind``'s resource list."""
    return get_kind_spec(kind).raw_key


def kinds_in_category(category: ResourceCategory) -> tuple[str, ...]:
    """Return the kinds browsed under ``category``, in catalog order."""
    return tuple(spec.kind for spec in RESOURCE_KINDS if spec.category is category)


__all__ = [
    "RESOURCE_KINDS",
    "RESOURCE_KINDS_BY_ID",
    "ResourceKindSpec",
    "get_kind_spec",
    "kinds_in_category",
    "raw_key_for",
    "supported_kinds",
]
