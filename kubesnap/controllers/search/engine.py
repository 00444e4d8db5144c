"""Component search engine - cross-resource component presence search."""

from __future__ import annotations

import logging

from kubesnap.constants.enums import SearchMode
from kubesnap.controllers.search.components import (
    ComponentContext,
    ComponentDescriptor,
    get_component,
    present_components,
)
from kubesnap.controllers.search.memory_balance import has_memory_imbalance
from kubesnap.controllers.snapshot.indexer import SnapshotIndex
from kubesnap.models.core.resource_kind import get_kind_spec
from kubesnap.models.errors import InvalidQueryError
from kubesnap.models.search.match_record import MatchRecord, SearchResult
from kubesnap.models.search.search_query import SearchQuery
from kubesnap.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


def resolve_selection(
    selected_components: tuple[str, ...] | list[str],
    selected_resource_kinds: tuple[str, ...] | list[str],
) -> list[ComponentDescriptor]:
    """Validate a component/kind selection before any scanning.

    Raises:
        InvalidQueryError: If either selection is empty or names an unknown
            component.
        UnsupportedKindError: If a kind is outside the catalog.
    """
    if not selected_components:
        raise InvalidQueryError("At least one component must be selected")
    if not selected_resource_kinds:
        raise InvalidQueryError("At least one resource kind must be selected")
    components = [get_component(key) for key in selected_components]
    for kind in selected_resource_kinds:
        get_kind_spec(kind)
    return components


class ComponentSearchEngine:
    """Scans selected resource kinds for selected components.

    Include mode matches resources with at least one selected component;
    exclude mode matches resources with none of them. Every match carries
    the memory-imbalance flag, which never affects matching.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self._imbalance_ratio = settings.memory_imbalance_ratio

    def search(self, query: SearchQuery, index: SnapshotIndex) -> SearchResult:
        """Run ``query`` against ``index``.

        Raises:
            InvalidQueryError: If the query selects nothing or an unknown
                component.
            UnsupportedKindError: If the query names an unknown kind.
        """
        components = resolve_selection(query.selected_components, query.selected_resource_kinds)
        context = ComponentContext.from_resources(index.resources_of("poddisruptionbudgets"))

        matches: list[MatchRecord] = []
        total_resources = 0
        for kind in query.selected_resource_kinds:
            resources = index.resources_of(kind)
            total_resources += len(resources)
            for resource in resources:
                present = present_components(resource, components, context)
                if query.mode is SearchMode.INCLUDE and not present:
                    continue
                if query.mode is SearchMode.EXCLUDE and present:
                    continue
                matches.append(
                    MatchRecord(
                        kind=kind,
                        namespace=resource.namespace,
                        name=resource.name,
                        matched_components=tuple(present),
                        has_memory_imbalance=has_memory_imbalance(resource, self._imbalance_ratio),
                    )
                )

        logger.info(
            "Component search (%s) matched %d of %d resources",
            query.mode.value,
            len(matches),
            total_resources,
        )
        return SearchResult(
            matches=tuple(matches),
            total_resources=total_resources,
            mode=query.mode,
            selected_components=query.selected_components,
            selected_resource_kinds=query.selected_resource_kinds,
        )


def search(
    query: SearchQuery,
    index: SnapshotIndex,
    settings: AppSettings | None = None,
) -> SearchResult:
    """Run a component search with the given (or default) settings."""
    return ComponentSearchEngine(settings).search(query, index)


__all__ = ["ComponentSearchEngine", "resolve_selection", "search"]
