"""Report generator - markdown and JSON rendering of snapshot views."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from kubesnap.constants.values import APP_TITLE, NOT_AVAILABLE, TOTAL_RESOURCES_KEY
from kubesnap.controllers.browse.status import classify_status
from kubesnap.controllers.reports.external import score_grade
from kubesnap.controllers.snapshot.summarizer import counts_by_category
from kubesnap.models.core.resource import Resource
from kubesnap.models.core.resource_kind import RESOURCE_KINDS_BY_ID
from kubesnap.models.reports.external_reports import BestPracticesReport
from kubesnap.models.reports.report_data import usage_percentage
from kubesnap.models.search.match_record import SearchResult
from kubesnap.models.snapshot.snapshot import Snapshot


def kind_label(kind: str) -> str:
    spec = RESOURCE_KINDS_BY_ID.get(kind)
    return spec.label if spec else kind


def resource_row(resource: Resource) -> dict[str, Any]:
    """Browse-list row for one resource."""
    return {
        "name": resource.name,
        "namespace": resource.namespace or NOT_AVAILABLE,
        "status": classify_status(resource.kind, resource.status),
        "labels": dict(resource.metadata.labels),
        "created": (
            resource.metadata.creation_timestamp.isoformat()
            if resource.metadata.creation_timestamp
            else None
        ),
    }


def node_pod_row(pod: Resource) -> dict[str, Any]:
    """Placement row for one pod on a node."""
    return {
        "name": pod.name,
        "namespace": pod.namespace or NOT_AVAILABLE,
        "phase": pod.status.get("phase") or NOT_AVAILABLE,
        "containers": len(pod.containers),
    }


def usage_rows(report: dict[str, dict[str, int]]) -> list[dict[str, Any]]:
    """One row per kind with ``count`` and ``percentage`` per component."""
    rows: list[dict[str, Any]] = []
    for kind, row in report.items():
        total = row.get(TOTAL_RESOURCES_KEY, 0)
        components = {
            key: {"count": count, "percentage": usage_percentage(count, total)}
            for key, count in row.items()
            if key != TOTAL_RESOURCES_KEY
        }
        rows.append({"kind": kind, TOTAL_RESOURCES_KEY: total, "components": components})
    return rows


class SnapshotReportGenerator:
    """Render snapshot views as markdown documents or JSON."""

    TABLE_HEADER_KIND_COUNT = (
        "| Kind | Count |",
        "| --- | ---: |",
    )

    def __init__(self, snapshot: Snapshot | None = None):
        self.snapshot = snapshot
        self.lines: list[str] = []

    def _add(self, line: str = "") -> None:
        """Add a line to the report."""
        self.lines.append(line)

    def _add_lines(self, *lines: str) -> None:
        """Add multiple lines to the report."""
        self.lines.extend(lines)

    def _add_table(self, headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> None:
        self._add("| " + " | ".join(headers) + " |")
        self._add("| " + " | ".join("---" for _ in headers) + " |")
        for row in rows:
            self._add("| " + " | ".join(_cell(value) for value in row) + " |")
        self._add()

    def _status_marker(self, condition: bool) -> str:
        """Return an ASCII status marker for a condition."""
        return "[WARN]" if condition else "[OK]"

    def _timestamp(self) -> str:
        if self.snapshot is not None:
            return self.snapshot.timestamp.isoformat()
        return datetime.now(timezone.utc).isoformat()

    def _add_header(self, title: str) -> None:
        self.lines = []
        self._add(f"# {title}")
        self._add()
        if self.snapshot is not None:
            self._add_lines(
                f"- **Cluster:** {self.snapshot.cluster_id}",
                f"- **Region:** {self.snapshot.region}",
            )
        self._add_lines(f"- **Captured:** {self._timestamp()}", "")

    def _add_footer(self) -> None:
        self._add_lines("---", f"*Generated by {APP_TITLE}*")

    def _render(self) -> str:
        return "\n".join(self.lines)

    # ------------------------------------------------------------------
    # Markdown views
    # ------------------------------------------------------------------

    def counts_markdown(self, counts: dict[str, int]) -> str:
        """Resource counts grouped by browsing category."""
        self._add_header("Resource Summary")
        for category, category_counts in counts_by_category(counts).items():
            self._add(f"## {category.value.title()}")
            self._add()
            self._add_lines(*self.TABLE_HEADER_KIND_COUNT)
            for kind, count in category_counts.items():
                self._add(f"| {kind_label(kind)} | {count} |")
            self._add()
        self._add(f"**Total resources:** {sum(counts.values())}")
        self._add()
        self._add_footer()
        return self._render()

    def resources_markdown(self, kind: str, resources: Sequence[Resource]) -> str:
        """Browse list of one kind."""
        self._add_header(f"{kind_label(kind)} ({len(resources)})")
        rows = [resource_row(resource) for resource in resources]
        self._add_table(
            ("Name", "Namespace", "Status", "Labels"),
            (
                (row["name"], row["namespace"], row["status"], _labels_text(row["labels"]))
                for row in rows
            ),
        )
        self._add_footer()
        return self._render()

    def search_markdown(self, result: SearchResult) -> str:
        """Component search matches."""
        self._add_header("Component Search")
        self._add_lines(
            f"- **Mode:** {result.mode.value}",
            f"- **Components:** {', '.join(result.selected_components)}",
            f"- **Resource kinds:** {', '.join(kind_label(k) for k in result.selected_resource_kinds)}",
            f"- **Matches:** {result.match_count} of {result.total_resources} resources",
            f"- **Memory imbalance:** {result.imbalance_count}",
            "",
        )
        self._add_table(
            ("Kind", "Namespace", "Name", "Components", "Memory"),
            (
                (
                    kind_label(match.kind),
                    match.namespace or NOT_AVAILABLE,
                    match.name,
                    ", ".join(match.matched_components) or "-",
                    self._status_marker(match.has_memory_imbalance),
                )
                for match in result.matches
            ),
        )
        self._add_footer()
        return self._render()

    def usage_markdown(self, report: dict[str, dict[str, int]]) -> str:
        """Component usage matrix with percentages."""
        self._add_header("Component Usage Report")
        component_keys: list[str] = []
        for row in report.values():
            for key in row:
                if key != TOTAL_RESOURCES_KEY and key not in component_keys:
                    component_keys.append(key)
        table_rows = []
        for row in usage_rows(report):
            cells = [kind_label(row["kind"]), row[TOTAL_RESOURCES_KEY]]
            for key in component_keys:
                usage = row["components"].get(key)
                cells.append(
                    f"{usage['count']} ({usage['percentage']}%)" if usage else NOT_AVAILABLE
                )
            table_rows.append(cells)
        self._add_table(("Kind", "Total", *component_keys), table_rows)
        self._add_footer()
        return self._render()

    def best_practices_markdown(self, report: BestPracticesReport) -> str:
        """Best-practices scores and failed checks."""
        self._add_header("Best Practices Analysis")
        self._add(
            f"**Overall score:** {report.overall_score:.0f} ({score_grade(report.overall_score).value})"
        )
        self._add()
        for name, category in report.categories.items():
            self._add(f"## {name} - {category.score:.0f} ({score_grade(category.score).value})")
            self._add()
            if not category.failed_checks:
                self._add("All checks passed.")
                self._add()
                continue
            for check in category.failed_checks:
                self._add(f"- **{check.name}**: {check.details or check.explanation}")
                if check.recommendation:
                    self._add(f"  - Recommendation: {check.recommendation}")
                if check.reference:
                    self._add(f"  - Reference: {check.reference}")
            self._add()
        self._add_footer()
        return self._render()

    def node_pods_markdown(self, node_pods: dict[str, list[Resource]]) -> str:
        """Pods placed on each node."""
        self._add_header("Node Pods")
        for node_name, pods in node_pods.items():
            self._add(f"## {node_name} ({len(pods)} pods)")
            self._add()
            self._add_table(
                ("Name", "Namespace", "Phase", "Containers"),
                (
                    (row["name"], row["namespace"], row["phase"], row["containers"])
                    for row in map(node_pod_row, pods)
                ),
            )
        self._add_footer()
        return self._render()

    # ------------------------------------------------------------------
    # JSON views
    # ------------------------------------------------------------------

    def _metadata(self, view: str) -> dict[str, Any]:
        metadata: dict[str, Any] = {"view": view, "generated": self._timestamp()}
        if self.snapshot is not None:
            metadata["cluster"] = self.snapshot.cluster_id
            metadata["region"] = self.snapshot.region
        return metadata

    def _dump(self, view: str, body: Any) -> str:
        return json.dumps({"metadata": self._metadata(view), view: body}, indent=2, default=str)

    def counts_json(self, counts: dict[str, int]) -> str:
        return self._dump("counts", counts)

    def resources_json(self, kind: str, resources: Sequence[Resource]) -> str:
        return self._dump("resources", {"kind": kind, "items": [resource_row(r) for r in resources]})

    def search_json(self, result: SearchResult) -> str:
        return self._dump("search", result.model_dump(mode="json"))

    def usage_json(self, report: dict[str, dict[str, int]]) -> str:
        return self._dump("usage", usage_rows(report))

    def best_practices_json(self, report: BestPracticesReport) -> str:
        body = report.model_dump(mode="json")
        body["grade"] = score_grade(report.overall_score).value
        return self._dump("best_practices", body)

    def node_pods_json(self, node_pods: dict[str, list[Resource]]) -> str:
        return self._dump(
            "node_pods",
            {node: [node_pod_row(pod) for pod in pods] for node, pods in node_pods.items()},
        )


def _labels_text(labels: dict[str, str]) -> str:
    return ", ".join(f"{key}={value}" for key, value in labels.items()) or "-"


def _cell(value: Any) -> str:
    return str(value).replace("|", "\\|")


__all__ = [
    "SnapshotReportGenerator",
    "kind_label",
    "node_pod_row",
    "resource_row",
    "usage_rows",
]
