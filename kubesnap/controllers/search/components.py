"""Component descriptors checked by the component search.

Each descriptor is a fixed structural check over one resource. Path checks
resolve a dotted path inside the pod-level spec; container checks look at
every regular and init container; the disruption-budget check consults the
budgets indexed for the resource's namespace.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from kubesnap.models.core.resource import Resource
from kubesnap.models.errors import InvalidQueryError
from kubesnap.utils.tree import as_mapping, is_present, resolve_path, split_path


@dataclass(frozen=True)
class ComponentContext:
    """Cross-resource lookups shared by every check in one search."""

    # namespace -> matchLabels of every PodDisruptionBudget in it
    pdb_selectors: dict[str, list[dict[str, str]]] = field(default_factory=dict)

    @classmethod
    def from_resources(cls, pdbs: Iterable[Resource]) -> ComponentContext:
        selectors: dict[str, list[dict[str, str]]] = {}
        for pdb in pdbs:
            match_labels = as_mapping(resolve_path(pdb.spec, ("selector", "matchLabels")))
            if not match_labels:
                continue
            selectors.setdefault(pdb.namespace or "", []).append(
                {str(key): str(value) for key, value in match_labels.items()}
            )
        return cls(pdb_selectors=selectors)


ComponentCheck = Callable[[Resource, ComponentContext], bool]


@dataclass(frozen=True)
class ComponentDescriptor:
    """One searchable component."""

    key: str
    label: str
    description: str
    check: ComponentCheck


def _pod_spec_path(path: str) -> ComponentCheck:
    segments = split_path(path)

    def check(resource: Resource, context: ComponentContext) -> bool:
        return is_present(resolve_path(resource.pod_spec, segments))

    return check


def _spec_path(path: str) -> ComponentCheck:
    segments = split_path(path)

    def check(resource: Resource, context: ComponentContext) -> bool:
        return is_present(resolve_path(resource.spec, segments))

    return check


def _any_container(path: str) -> ComponentCheck:
    segments = split_path(path)

    def check(resource: Resource, context: ComponentContext) -> bool:
        return any(
            is_present(resolve_path(container, segments)) for container in resource.containers
        )

    return check


def _selector_matches_labels(
    selector_match_labels: dict[str, str],
    workload_labels: dict[str, str],
) -> bool:
    """Return True when selector labels are a subset of workload labels."""
    if not selector_match_labels or not workload_labels:
        return False
    for key, expected_value in selector_match_labels.items():
        if workload_labels.get(key) != expected_value:
            return False
    return True


def _check_pod_disruption_budget(resource: Resource, context: ComponentContext) -> bool:
    """Check whether a budget in the same namespace selects this resource's pods."""
    selectors = context.pdb_selectors.get(resource.namespace or "", [])
    if not selectors:
        return False
    labels = resource.pod_labels
    return any(_selector_matches_labels(selector, labels) for selector in selectors)


COMPONENTS: list[ComponentDescriptor] = [
    ComponentDescriptor(
        key="topologySpreadConstraints",
        label="Topology Spread Constraints",
        description="Pods are spread across topology domains",
        check=_pod_spec_path("topologySpreadConstraints"),
    ),
    ComponentDescriptor(
        key="podAntiAffinity",
        label="Pod Anti-Affinity",
        description="Pods avoid co-location with matching pods",
        check=_pod_spec_path("affinity.podAntiAffinity"),
    ),
    ComponentDescriptor(
        key="podAffinity",
        label="Pod Affinity",
        description="Pods prefer co-location with matching pods",
        check=_pod_spec_path("affinity.podAffinity"),
    ),
    ComponentDescriptor(
        key="nodeAffinity",
        label="Node Affinity",
        description="Pods are constrained to nodes by affinity terms",
        check=_pod_spec_path("affinity.nodeAffinity"),
    ),
    ComponentDescriptor(
        key="nodeSelector",
        label="Node Selector",
        description="Pods are constrained to nodes by labels",
        check=_pod_spec_path("nodeSelector"),
    ),
    ComponentDescriptor(
        key="tolerations",
        label="Tolerations",
        description="Pods tolerate node taints",
        check=_pod_spec_path("tolerations"),
    ),
    ComponentDescriptor(
        key="topologyKeys",
        label="Topology Keys",
        description="Service routing honours topology keys",
        check=_spec_path("topologyKeys"),
    ),
    ComponentDescriptor(
        key="resources.requests",
        label="Resource Requests",
        description="At least one container declares resource requests",
        check=_any_container("resources.requests"),
    ),
    ComponentDescriptor(
        key="podDisruptionBudget",
        label="Pod Disruption Budget",
        description="A disruption budget in the namespace selects the pods",
        check=_check_pod_disruption_budget,
    ),
    ComponentDescriptor(
        key="livenessProbe",
        label="Liveness Probe",
        description="At least one container declares a liveness probe",
        check=_any_container("livenessProbe"),
    ),
    ComponentDescriptor(
        key="readinessProbe",
        label="Readiness Probe",
        description="At least one container declares a readiness probe",
        check=_any_container("readinessProbe"),
    ),
    ComponentDescriptor(
        key="startupProbe",
        label="Startup Probe",
        description="At least one container declares a startup probe",
        check=_any_container("startupProbe"),
    ),
]

COMPONENTS_BY_KEY: dict[str, ComponentDescriptor] = {
    component.key: component for component in COMPONENTS
}


def get_component(key: str) -> ComponentDescriptor:
    """Get a component descriptor by key.

    Raises:
        InvalidQueryError: If ``key`` is not a known component.
    """
    component = COMPONENTS_BY_KEY.get(key)
    if component is None:
        raise InvalidQueryError(f"Unknown component: {key!r}")
    return component


def component_keys() -> tuple[str, ...]:
    return tuple(COMPONENTS_BY_KEY)


def present_components(
    resource: Resource,
    components: Iterable[ComponentDescriptor],
    context: ComponentContext,
) -> list[str]:
    """Keys of ``components`` present on ``resource``, in the order given."""
    return [component.key for component in components if component.check(resource, context)]


__all__ = [
    "COMPONENTS",
    "COMPONENTS_BY_KEY",
    "ComponentCheck",
    "ComponentContext",
    "ComponentDescriptor",
    "component_keys",
    "get_component",
    "present_components",
]

