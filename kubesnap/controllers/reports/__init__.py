"""Usage aggregation and external report readers."""

from kubesnap.controllers.reports.aggregator import UsageReport, aggregate, report_cells
from kubesnap.controllers.reports.external import (
    read_best_practices,
    read_node_pods,
    score_grade,
)

__all__ = [
    "UsageReport",
    "aggregate",
    "read_best_practices",
    "read_node_pods",
    "report_cells",
    "score_grade",
]
