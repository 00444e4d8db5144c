"""Resource browsing: status classification and filtering."""

from kubesnap.controllers.browse.filter_engine import (
    ResourceFilter,
    filter_resources,
    has_node_selector,
    matches_filter,
    search_text,
)
from kubesnap.controllers.browse.status import classify_status

__all__ = [
    "ResourceFilter",
    "classify_status",
    "filter_resources",
    "has_node_selector",
    "matches_filter",
    "search_text",
]
