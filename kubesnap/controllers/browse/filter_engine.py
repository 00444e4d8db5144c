"""Filter engine - structural filters over resource lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

from kubesnap.controllers.browse.status import classify_status
from kubesnap.models.core.resource import Resource
from kubesnap.utils.tree import as_mapping, is_present, resolve_path

logger = logging.getLogger(__name__)


class ResourceFilter(BaseModel):
    """Browse filter. Every field is optional; set fields are AND-combined.

    ``has_node_selector`` only constrains when True.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str | None = None
    status: str | None = None
    has_node_selector: bool | None = None
    search_term: str | None = None

    @field_validator("namespace", "status", "search_term", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_empty(self) -> bool:
        return (
            self.namespace is None
            and self.status is None
            and not self.has_node_selector
            and self.search_term is None
        )


def _label_text(resource: Resource) -> str:
    return " ".join(f"{key}:{value}" for key, value in resource.metadata.labels.items())


def search_text(resource: Resource) -> str:
    """Lower-cased text a search term is matched against.

    Name, namespace and ``key:value`` labels, space-joined. Events also carry
    reason, message and the involved object; namespaces carry their uid.
    """
    parts = [resource.name, resource.namespace or "", _label_text(resource)]
    if resource.kind == "events":
        involved = as_mapping(resource.raw.get("involvedObject"))
        parts.extend(
            str(value or "")
            for value in (
                resource.raw.get("reason"),
                resource.raw.get("message"),
                involved.get("kind"),
                involved.get("name"),
            )
        )
    elif resource.kind == "namespaces":
        parts.append(resource.metadata.uid or "")
    return " ".join(parts).lower()


def has_node_selector(resource: Resource) -> bool:
    """True when the pod-level spec pins scheduling to particular nodes."""
    pod_spec = resource.pod_spec
    return is_present(pod_spec.get("nodeSelector")) or is_present(
        resolve_path(pod_spec, ("affinity", "nodeAffinity"))
    )


def matches_filter(resource: Resource, predicate: ResourceFilter, kind: str | None = None) -> bool:
    """Evaluate ``predicate`` against one resource."""
    if predicate.namespace is not None and resource.namespace != predicate.namespace:
        return False

    if predicate.status is not None:
        status = classify_status(kind or resource.kind, resource.status)
        if status.lower() != predicate.status.lower():
            return False

    if predicate.has_node_selector and not has_node_selector(resource):
        return False

    if predicate.search_term is not None:
        if predicate.search_term.lower() not in search_text(resource):
            return False

    return True


def filter_resources(
    resources: Iterable[Resource],
    predicate: ResourceFilter | None = None,
    kind: str | None = None,
) -> list[Resource]:
    """Return the resources matching ``predicate``, in input order.

    Args:
        resources: Resources to filter.
        predicate: Filter to apply; None or an empty filter keeps everything.
        kind: Kind used for status classification; taken from each resource
            when omitted.
    """
    resources = list(resources)
    if predicate is None or predicate.is_empty:
        return resources

    filtered = [resource for resource in resources if matches_filter(resource, predicate, kind)]
    logger.debug("Filter kept %d of %d resources", len(filtered), len(resources))
    return filtered


__all__ = [
    "ResourceFilter",
    "filter_resources",
    "has_node_selector",
    "matches_filter",
    "search_text",
]
