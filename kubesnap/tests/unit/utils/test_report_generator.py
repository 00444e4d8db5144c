"""Tests for the snapshot report generator."""

from __future__ import annotations

import json
from typing import Any

import pytest

from kubesnap.controllers.reports.aggregator import aggregate
from kubesnap.controllers.reports.external import read_best_practices, read_node_pods
from kubesnap.controllers.search.engine import search
from kubesnap.controllers.snapshot.indexer import SnapshotIndex, index_snapshot
from kubesnap.controllers.snapshot.summarizer import summarize_counts
from kubesnap.models.search.search_query import SearchQuery
from kubesnap.models.snapshot.snapshot import Snapshot
from kubesnap.utils.report_generator import (
    SnapshotReportGenerator,
    kind_label,
    resource_row,
    usage_rows,
)


class TestSnapshotReportGenerator:
    """Tests for SnapshotReportGenerator."""

    @pytest.fixture
    def snapshot(self, cluster_payload: dict[str, Any]) -> Snapshot:
        return Snapshot(cluster_id="prod", region="EU", payload=cluster_payload)

    @pytest.fixture
    def index(self, snapshot: Snapshot) -> SnapshotIndex:
        return index_snapshot(snapshot)

    @pytest.fixture
    def generator(self, snapshot: Snapshot) -> SnapshotReportGenerator:
        return SnapshotReportGenerator(snapshot)

    def test_counts_markdown(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        markdown = generator.counts_markdown(summarize_counts(index))
        assert markdown.startswith("# Resource Summary")
        assert "- **Cluster:** prod" in markdown
        assert "## Workloads" in markdown
        assert "| Deployments | 3 |" in markdown
        assert "**Total resources:** 14" in markdown

    def test_counts_markdown_fills_every_category(self, generator: SnapshotReportGenerator) -> None:
        markdown = generator.counts_markdown({"pods": 2})
        assert "## Networking" in markdown
        assert "| Pods | 2 |" in markdown
        assert "| Services | 0 |" in markdown
        assert "**Total resources:** 2" in markdown

    def test_counts_json(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        data = json.loads(generator.counts_json(summarize_counts(index)))
        assert data["metadata"]["cluster"] == "prod"
        assert data["metadata"]["region"] == "EU"
        assert data["counts"]["pods"] == 2

    def test_resources_markdown(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        markdown = generator.resources_markdown("deployments", index.resources_of("deployments"))
        assert "# Deployments (3)" in markdown
        assert "| ledger | payments | Progressing | app=ledger |" in markdown

    def test_search_markdown(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        query = SearchQuery(selected_components=["nodeSelector"], selected_resource_kinds=["deployments"])
        markdown = generator.search_markdown(search(query, index))
        assert "- **Matches:** 1 of 3 resources" in markdown
        assert "| Deployments | payments | ledger | nodeSelector | [WARN] |" in markdown

    def test_search_json(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        query = SearchQuery(
            selected_components=["nodeSelector"], selected_resource_kinds=["pods"], mode="exclude"
        )
        data = json.loads(generator.search_json(search(query, index)))
        assert data["search"]["match_count"] == 2
        assert data["search"]["mode"] == "exclude"
        assert data["search"]["matches"][0]["name"] == "api-7d9f"

    def test_usage_markdown(self, generator: SnapshotReportGenerator, index: SnapshotIndex) -> None:
        report = aggregate(["nodeSelector", "resources.requests"], ["deployments"], index)
        markdown = generator.usage_markdown(report)
        assert "| Kind | Total | nodeSelector | resources.requests |" in markdown
        assert "| Deployments | 3 | 1 (33%) | 2 (67%) |" in markdown

    def test_usage_rows_empty_kind(self, index: SnapshotIndex) -> None:
        rows = usage_rows(aggregate(["nodeSelector"], ["rollouts"], index))
        assert rows == [
            {
                "kind": "rollouts",
                "total_resources": 0,
                "components": {"nodeSelector": {"count": 0, "percentage": 0}},
            }
        ]

    def test_best_practices_markdown(self, generator: SnapshotReportGenerator) -> None:
        report = read_best_practices(
            {
                "overall_score": 65,
                "categories": {
                    "security": {
                        "score": 40,
                        "checks": [
                            {
                                "name": "Privileged",
                                "passed": False,
                                "details": "2 privileged containers",
                                "recommendation": "Drop privileged mode",
                            }
                        ],
                    },
                    "reliability": {"score": 90, "checks": [{"name": "Probes", "passed": True}]},
                },
            }
        )
        markdown = generator.best_practices_markdown(report)
        assert "**Overall score:** 65 (Needs Improvement)" in markdown
        assert "## security - 40 (Poor)" in markdown
        assert "- **Privileged**: 2 privileged containers" in markdown
        assert "  - Recommendation: Drop privileged mode" in markdown
        assert "All checks passed." in markdown

    def test_node_pods(self, generator: SnapshotReportGenerator) -> None:
        node_pods = read_node_pods(
            {"node-1": [{"metadata": {"name": "api", "namespace": "web"}, "spec": {"containers": [{}]}}]}
        )
        markdown = generator.node_pods_markdown(node_pods)
        assert "## node-1 (1 pods)" in markdown
        assert "| api | web | N/A | 1 |" in markdown
        data = json.loads(generator.node_pods_json(node_pods))
        assert data["node_pods"]["node-1"][0]["containers"] == 1

    def test_markdown_cells_are_escaped(self) -> None:
        generator = SnapshotReportGenerator()
        index = index_snapshot({"data": {"podList": [{"metadata": {"name": "a|b"}}]}})
        assert "a\\|b" in generator.resources_markdown("pods", index.resources_of("pods"))


class TestRowHelpers:
    """Tests for row helpers."""

    def test_kind_label(self) -> None:
        assert kind_label("horizontalpodautoscalers") == "Horizontal Pod Autoscalers"
        assert kind_label("widgets") == "widgets"

    def test_resource_row_cluster_scoped(self, cluster_payload: dict[str, Any]) -> None:
        node = index_snapshot(cluster_payload).resources_of("nodes")[0]
        row = resource_row(node)
        assert row["namespace"] == "N/A"
        assert row["status"] == "Unknown"
        assert row["labels"] == {"zone": "a"}
