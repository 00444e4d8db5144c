"""Component search over indexed snapshots."""

from kubesnap.controllers.search.components import (
    COMPONENTS,
    COMPONENTS_BY_KEY,
    ComponentContext,
    ComponentDescriptor,
    component_keys,
    get_component,
)
from kubesnap.controllers.search.engine import ComponentSearchEngine, resolve_selection, search
from kubesnap.controllers.search.memory_balance import (
    container_has_memory_imbalance,
    has_memory_imbalance,
)

__all__ = [
    "COMPONENTS",
    "COMPONENTS_BY_KEY",
    "ComponentContext",
    "ComponentDescriptor",
    "ComponentSearchEngine",
    "component_keys",
    "container_has_memory_imbalance",
    "get_component",
    "has_memory_imbalance",
    "resolve_selection",
    "search",
]
