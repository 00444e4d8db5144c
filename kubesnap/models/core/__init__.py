"""Core resource models."""

from kubesnap.models.core.resource import Resource, ResourceMetadata
from kubesnap.models.core.resource_kind import (
    RESOURCE_KINDS,
    ResourceKindSpec,
    get_kind_spec,
    kinds_in_category,
    raw_key_for,
    supported_kinds,
)

__all__ = [
    "RESOURCE_KINDS",
    "Resource",
    "ResourceKindSpec",
    "ResourceMetadata",
    "get_kind_spec",
    "kinds_in_category",
    "raw_key_for",
    "supported_kinds",
]
