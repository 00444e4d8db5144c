"""Readers for pre-computed best-practices and node placement reports."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from kubesnap.constants.enums import ScoreGrade
from kubesnap.constants.limits import SCORE_GOOD_MIN, SCORE_NEEDS_IMPROVEMENT_MIN
from kubesnap.models.core.resource import Resource
from kubesnap.models.errors import ReportFormatError
from kubesnap.models.reports.external_reports import BestPracticesReport
from kubesnap.utils.tree import TreeNodeKind, node_kind

logger = logging.getLogger(__name__)


def score_grade(score: float) -> ScoreGrade:
    """Grade a 0-100 best-practices score."""
    if score >= SCORE_GOOD_MIN:
        return ScoreGrade.GOOD
    if score >= SCORE_NEEDS_IMPROVEMENT_MIN:
        return ScoreGrade.NEEDS_IMPROVEMENT
    return ScoreGrade.POOR


def read_best_practices(payload: Any) -> BestPracticesReport:
    """Validate a best-practices analysis document.

    Raises:
        ReportFormatError: If the payload does not have the expected shape.
    """
    try:
        report = BestPracticesReport.model_validate(payload)
    except ValidationError as e:
        raise ReportFormatError(f"Invalid best-practices report: {e}") from e
    logger.debug(
        "Read best-practices report: score %.1f, %d categories",
        report.overall_score,
        len(report.categories),
    )
    return report


def read_node_pods(payload: Any) -> dict[str, list[Resource]]:
    """Validate a ``node name -> pods`` placement document.

    Raises:
        ReportFormatError: If the payload is not a mapping of node names to
            lists of pod objects.
    """
    if node_kind(payload) is not TreeNodeKind.MAPPING:
        raise ReportFormatError("Node pods report must be a mapping of node names to pods")

    node_pods: dict[str, list[Resource]] = {}
    for node_name, pods in payload.items():
        if node_kind(pods) is not TreeNodeKind.SEQUENCE:
            raise ReportFormatError(f"Pods for node {node_name!r} must be a list")
        if any(node_kind(pod) is not TreeNodeKind.MAPPING for pod in pods):
            raise ReportFormatError(f"Pods for node {node_name!r} must be objects")
        node_pods[str(node_name)] = [Resource.from_raw("pods", pod) for pod in pods]

    logger.debug("Read node pods report for %d nodes", len(node_pods))
    return node_pods


__all__ = ["read_best_practices", "read_node_pods", "score_grade"]
