"""Report models."""

from kubesnap.models.reports.external_reports import (
    BestPracticeCategory,
    BestPracticeCheck,
    BestPracticesReport,
)
from kubesnap.models.reports.report_data import ReportCell, usage_percentage

__all__ = [
    "BestPracticeCategory",
    "BestPracticeCheck",
    "BestPracticesReport",
    "ReportCell",
    "usage_percentage",
]
