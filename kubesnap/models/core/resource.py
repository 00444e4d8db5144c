"""Normalized Kubernetes resource models."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubesnap.models.core.resource_kind import get_kind_spec
from kubesnap.utils.tree import as_list, as_mapping, resolve_path, with_string_keys


def _parse_iso_timestamp(timestamp: Any) -> datetime | None:
    """Parse kubernetes timestamps into aware datetimes.

    YAML documents decode unquoted timestamps to ``datetime`` already; naive
    values are taken as UTC.
    """
    parsed: datetime | None = None
    if isinstance(timestamp, datetime):
        parsed = timestamp
    elif isinstance(timestamp, str) and timestamp:
        with suppress(ValueError, TypeError):
            parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if parsed is not None and parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _string_map(value: Any) -> dict[str, str]:
    return {str(key): str(item) for key, item in as_mapping(value).items()}


class ResourceMetadata(BaseModel):
    """Identity and labelling of one resource."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    namespace: str | None = None
    uid: str | None = None
    creation_timestamp: datetime | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> ResourceMetadata:
        metadata = as_mapping(raw)
        namespace = metadata.get("namespace")
        uid = metadata.get("uid")
        return cls(
            name=str(metadata.get("name") or ""),
            namespace=str(namespace) if namespace else None,
            uid=str(uid) if uid else None,
            creation_timestamp=_parse_iso_timestamp(metadata.get("creationTimestamp")),
            labels=_string_map(metadata.get("labels")),
            annotations=_string_map(metadata.get("annotations")),
        )


class Resource(BaseModel):
    """A single Kubernetes object captured in a snapshot."""

    model_config = ConfigDict(frozen=True)

    kind: str
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    spec: dict[str, Any] = Field(default_factory=dict)
    status: dict[str, Any] = Field(default_factory=dict)
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_raw(cls, kind: str, raw: Any) -> Resource:
        """Build a resource from a decoded API object.

        The raw body is copied with every mapping key turned into a string,
        so later mutation of the caller's payload cannot leak into the
        snapshot. Sections that are missing or not mappings become empty
        mappings.

        Raises:
            UnsupportedKindError: If ``kind`` is not part of the catalog.
        """
        get_kind_spec(kind)
        body = with_string_keys(as_mapping(raw))
        return cls(
            kind=kind,
            metadata=ResourceMetadata.from_raw(body.get("metadata")),
            spec=as_mapping(body.get("spec")),
            status=as_mapping(body.get("status")),
            raw=body,
        )

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str | None:
        return self.metadata.namespace

    @property
    def pod_spec(self) -> dict[str, Any]:
        """Pod-level spec: the spec itself for pods, the template spec for workloads."""
        template_path = get_kind_spec(self.kind).pod_template_path
        if template_path is None:
            return {}
        if not template_path:
            return self.spec
        return as_mapping(resolve_path(self.spec, template_path))

    @property
    def pod_labels(self) -> dict[str, str]:
        """Labels stamped on the pods this resource runs."""
        template_path = get_kind_spec(self.kind).pod_template_path
        if template_path is None:
            return {}
        if not template_path:
            return dict(self.metadata.labels)
        template = resolve_path(self.spec, template_path[:-1])
        return _string_map(resolve_path(template, ("metadata", "labels")))

    @property
    def containers(self) -> list[dict[str, Any]]:
        """Regular and init containers declared in the pod spec."""
        pod_spec = self.pod_spec
        containers = as_list(pod_spec.get("containers")) + as_list(pod_spec.get("initContainers"))
        return [container for container in containers if isinstance(container, dict)]


__all__ = ["Resource", "ResourceMetadata"]
