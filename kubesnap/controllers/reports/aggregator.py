"""Report aggregator - per-kind component usage matrix."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from kubesnap.constants.values import TOTAL_RESOURCES_KEY
from kubesnap.controllers.search.components import ComponentContext
from kubesnap.controllers.search.engine import resolve_selection
from kubesnap.controllers.snapshot.indexer import SnapshotIndex
from kubesnap.models.reports.report_data import ReportCell

logger = logging.getLogger(__name__)

UsageReport = dict[str, dict[str, int]]


def aggregate(
    selected_components: Sequence[str],
    selected_resource_kinds: Sequence[str],
    index: SnapshotIndex,
) -> UsageReport:
    """Count, per kind, how many resources carry each selected component.

    Columns are independent: one resource may count toward several. Each row
    starts with ``total_resources`` followed by the components in selection
    order. Only raw counts are returned.

    Raises:
        InvalidQueryError: If either selection is empty or names an unknown
            component.
        UnsupportedKindError: If a kind is outside the catalog.
    """
    selected_components = tuple(dict.fromkeys(selected_components))
    selected_resource_kinds = tuple(dict.fromkeys(selected_resource_kinds))
    components = resolve_selection(selected_components, selected_resource_kinds)
    context = ComponentContext.from_resources(index.resources_of("poddisruptionbudgets"))

    report: UsageReport = {}
    for kind in selected_resource_kinds:
        resources = index.resources_of(kind)
        row = {TOTAL_RESOURCES_KEY: len(resources)}
        for component in components:
            row[component.key] = sum(
                1 for resource in resources if component.check(resource, context)
            )
        report[kind] = row
        logger.debug("Usage row for %s: %s", kind, row)

    logger.info(
        "Aggregated %d components across %d kinds",
        len(components),
        len(selected_resource_kinds),
    )
    return report


def report_cells(report: UsageReport) -> list[ReportCell]:
    """Flatten a usage report into one cell per kind and component."""
    cells: list[ReportCell] = []
    for kind, row in report.items():
        total = row.get(TOTAL_RESOURCES_KEY, 0)
        for component_key, count in row.items():
            if component_key == TOTAL_RESOURCES_KEY:
                continue
            cells.append(
                ReportCell(
                    resource_kind=kind,
                    component_key=component_key,
                    count_present=count,
                    total_resources_of_kind=total,
                )
            )
    return cells


__all__ = ["UsageReport", "aggregate", "report_cells"]
