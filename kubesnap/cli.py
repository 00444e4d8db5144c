"""Command-line interface for browsing and searching cluster snapshots."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from kubesnap.constants.enums import OutputFormat, ResourceStatus, SearchMode
from kubesnap.constants.values import (
    APP_TITLE,
    NOT_AVAILABLE,
    STATUS_STYLE_ERROR,
    STATUS_STYLE_NEUTRAL,
    STATUS_STYLE_OK,
    STATUS_STYLE_WARN,
    TOTAL_RESOURCES_KEY,
)
from kubesnap.controllers.browse.filter_engine import ResourceFilter, filter_resources
from kubesnap.controllers.reports.aggregator import aggregate
from kubesnap.controllers.reports.external import (
    read_best_practices,
    read_node_pods,
    score_grade,
)
from kubesnap.controllers.search.components import COMPONENTS, component_keys
from kubesnap.controllers.search.engine import search
from kubesnap.controllers.snapshot.indexer import index_snapshot
from kubesnap.controllers.snapshot.loader import SnapshotLoader
from kubesnap.controllers.snapshot.summarizer import DemoCountFallback, summarize_counts
from kubesnap.models.core.resource_kind import supported_kinds
from kubesnap.models.errors import KubeSnapError
from kubesnap.models.search.search_query import SearchQuery
from kubesnap.models.snapshot.snapshot import Snapshot
from kubesnap.models.state.app_settings import AppSettings, ConfigError
from kubesnap.models.state.config_manager import ConfigManager
from kubesnap.utils.report_generator import (
    SnapshotReportGenerator,
    kind_label,
    node_pod_row,
    resource_row,
    usage_rows,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_STATUS_STYLES = {
    ResourceStatus.READY.value: STATUS_STYLE_OK,
    ResourceStatus.COMPLETED.value: STATUS_STYLE_OK,
    ResourceStatus.RUNNING.value: STATUS_STYLE_OK,
    "Succeeded": STATUS_STYLE_OK,
    ResourceStatus.PROGRESSING.value: STATUS_STYLE_WARN,
    ResourceStatus.PENDING.value: STATUS_STYLE_WARN,
    ResourceStatus.NOT_READY.value: STATUS_STYLE_ERROR,
    ResourceStatus.FAILED.value: STATUS_STYLE_ERROR,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description="Browse, search and report on Kubernetes cluster snapshots",
    )
    parser.add_argument("--config", type=Path, help="Settings file path")
    parser.add_argument(
        "--format",
        choices=[output_format.value for output_format in OutputFormat],
        default=OutputFormat.TABLE.value,
        help="Output format (table, markdown, json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    snapshot_args = argparse.ArgumentParser(add_help=False)
    snapshot_args.add_argument("snapshot", type=Path, help="Snapshot file (JSON, gzip JSON or YAML)")
    snapshot_args.add_argument("--cluster-id", help="Cluster ID (defaults to the snapshot file name)")
    snapshot_args.add_argument("--region", help="Cluster region")
    snapshot_args.add_argument("--date", help="Capture date of a historical snapshot (ISO format)")

    commands = parser.add_subparsers(dest="command", required=True)

    counts = commands.add_parser("counts", parents=[snapshot_args], help="Resource counts per kind")
    counts.add_argument(
        "--demo",
        action="store_true",
        help="Use demonstration counts when the snapshot is empty",
    )

    browse = commands.add_parser("browse", parents=[snapshot_args], help="List resources of one kind")
    browse.add_argument("kind", choices=supported_kinds())
    browse.add_argument("--namespace", help="Exact namespace")
    browse.add_argument("--status", help="Derived status, case-insensitive")
    browse.add_argument(
        "--node-selector",
        action="store_true",
        help="Only resources pinned to nodes by selector or node affinity",
    )
    browse.add_argument("--search", help="Substring of name, namespace or labels")

    for name, help_text in (
        ("search", "Find resources by component presence"),
        ("report", "Component usage per resource kind"),
    ):
        command = commands.add_parser(name, parents=[snapshot_args], help=help_text)
        command.add_argument(
            "--component",
            "-c",
            dest="components",
            action="append",
            default=[],
            metavar="COMPONENT",
            help=f"Component key, repeatable ({', '.join(component_keys())})",
        )
        command.add_argument(
            "--kind",
            "-k",
            dest="kinds",
            action="append",
            default=[],
            metavar="KIND",
            help="Resource kind, repeatable",
        )
        if name == "search":
            command.add_argument(
                "--mode",
                choices=[mode.value for mode in SearchMode],
                default=SearchMode.INCLUDE.value,
            )

    commands.add_parser("components", help="List searchable components")

    best_practices = commands.add_parser("best-practices", help="Render a best-practices report")
    best_practices.add_argument("report_file", type=Path)

    node_pods = commands.add_parser("node-pods", help="Render a node placement report")
    node_pods.add_argument("report_file", type=Path)

    return parser


def configure_logging(settings: AppSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _status_text(status: str) -> Text:
    return Text(status, style=_STATUS_STYLES.get(status, STATUS_STYLE_NEUTRAL))


def _memory_text(imbalanced: bool) -> Text:
    if imbalanced:
        return Text("imbalanced", style=STATUS_STYLE_WARN)
    return Text("ok", style=STATUS_STYLE_OK)


def _cell(value: Any) -> Text | str:
    """Table cell; plain values are escaped so data never parses as markup."""
    if isinstance(value, Text):
        return value
    return escape(str(value))


def _print_table(console: Console, title: str, columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    table = Table(title=escape(title))
    for column in columns:
        table.add_column(escape(column))
    for row in rows:
        table.add_row(*(_cell(value) for value in row))
    console.print(table)


class CommandRunner:
    """Executes one parsed command, loading its snapshot when it takes one."""

    def __init__(self, args: argparse.Namespace, settings: AppSettings, console: Console) -> None:
        self.args = args
        self.settings = settings
        self.console = console
        self.output_format = OutputFormat(args.format)
        self.loader = SnapshotLoader(settings=settings)
        self.snapshot: Snapshot | None = None
        if getattr(args, "snapshot", None) is not None:
            self.snapshot = self.loader.load_file(
                args.snapshot,
                cluster_id=args.cluster_id or _cluster_id_from_path(args.snapshot),
                region=args.region,
                date=args.date,
            )
        self.generator = SnapshotReportGenerator(self.snapshot)

    def run(self) -> None:
        handler = getattr(self, f"_run_{self.args.command.replace('-', '_')}")
        handler()

    def _emit(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _run_counts(self) -> None:
        fallback = None
        if self.args.demo or self.settings.demo_counts_fallback:
            fallback = DemoCountFallback()
        counts = summarize_counts(index_snapshot(self.snapshot), fallback=fallback)

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.counts_json(counts))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.counts_markdown(counts))
        else:
            _print_table(
                self.console,
                "Resource Summary",
                ("Kind", "Count"),
                [(kind_label(kind), count) for kind, count in counts.items()],
            )

    def _run_browse(self) -> None:
        kind = self.args.kind
        predicate = ResourceFilter(
            namespace=self.args.namespace,
            status=self.args.status,
            has_node_selector=self.args.node_selector or None,
            search_term=self.args.search,
        )
        resources = filter_resources(
            index_snapshot(self.snapshot).resources_of(kind), predicate, kind=kind
        )

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.resources_json(kind, resources))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.resources_markdown(kind, resources))
        else:
            rows = [resource_row(resource) for resource in resources]
            _print_table(
                self.console,
                f"{kind_label(kind)} ({len(rows)})",
                ("Name", "Namespace", "Status"),
                [(row["name"], row["namespace"], _status_text(row["status"])) for row in rows],
            )

    def _run_search(self) -> None:
        query = SearchQuery(
            selected_components=tuple(self.args.components),
            selected_resource_kinds=tuple(self.args.kinds),
            mode=SearchMode(self.args.mode),
        )
        result = search(query, index_snapshot(self.snapshot), settings=self.settings)

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.search_json(result))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.search_markdown(result))
        else:
            _print_table(
                self.console,
                f"Component Search: {result.match_count} of {result.total_resources} resources",
                ("Kind", "Namespace", "Name", "Components", "Memory"),
                [
                    (
                        kind_label(match.kind),
                        match.namespace or NOT_AVAILABLE,
                        match.name,
                        ", ".join(match.matched_components) or "-",
                        _memory_text(match.has_memory_imbalance),
                    )
                    for match in result.matches
                ],
            )

    def _run_report(self) -> None:
        report = aggregate(self.args.components, self.args.kinds, index_snapshot(self.snapshot))

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.usage_json(report))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.usage_markdown(report))
        else:
            component_columns = list(dict.fromkeys(self.args.components))
            rows = []
            for row in usage_rows(report):
                cells: list[Any] = [kind_label(row["kind"]), row[TOTAL_RESOURCES_KEY]]
                for key in component_columns:
                    usage = row["components"][key]
                    cells.append(f"{usage['count']} ({usage['percentage']}%)")
                rows.append(cells)
            _print_table(
                self.console, "Component Usage", ("Kind", "Total", *component_columns), rows
            )

    def _run_components(self) -> None:
        _print_table(
            self.console,
            "Components",
            ("Key", "Label", "Description"),
            [(c.key, c.label, c.description) for c in COMPONENTS],
        )

    def _run_best_practices(self) -> None:
        report = read_best_practices(SnapshotLoader.read_payload(self.args.report_file))

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.best_practices_json(report))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.best_practices_markdown(report))
        else:
            grade = score_grade(report.overall_score)
            _print_table(
                self.console,
                f"Best Practices: {report.overall_score:.0f} ({grade.value})",
                ("Category", "Score", "Grade", "Failed checks"),
                [
                    (
                        name,
                        f"{category.score:.0f}",
                        score_grade(category.score).value,
                        len(category.failed_checks),
                    )
                    for name, category in report.categories.items()
                ],
            )

    def _run_node_pods(self) -> None:
        node_pods = read_node_pods(SnapshotLoader.read_payload(self.args.report_file))

        if self.output_format is OutputFormat.JSON:
            self._emit(self.generator.node_pods_json(node_pods))
        elif self.output_format is OutputFormat.MARKDOWN:
            self._emit(self.generator.node_pods_markdown(node_pods))
        else:
            for node_name, pods in node_pods.items():
                rows = [node_pod_row(pod) for pod in pods]
                _print_table(
                    self.console,
                    f"{node_name} ({len(rows)} pods)",
                    ("Name", "Namespace", "Phase", "Containers"),
                    [
                        (row["name"], row["namespace"], row["phase"], row["containers"])
                        for row in rows
                    ],
                )


def _cluster_id_from_path(path: Path) -> str:
    name = path.name
    for suffix in reversed(path.suffixes):
        name = name.removesuffix(suffix)
    return name or path.name


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        settings = ConfigManager(args.config).load()
        configure_logging(settings, args.verbose)
        CommandRunner(args, settings, console).run()
    except (KubeSnapError, ConfigError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"Could not complete operation: {e}", markup=False, highlight=False, emoji=False)
        return 1
    return 0


__all__ = ["CommandRunner", "build_parser", "main"]
