"""Consumer-side shapes of pre-computed external reports.

Best-practices scoring and node placement reports are produced elsewhere and
rendered as-is; these models only validate what the renderers read.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BestPracticeCheck(BaseModel):
    """One best-practices check outcome."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    passed: bool
    details: str = ""
    explanation: str = ""
    recommendation: str = ""
    reference: str | None = None


class BestPracticeCategory(BaseModel):
    """Score and checks for one best-practices category."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    score: float
    checks: list[BestPracticeCheck] = Field(default_factory=list)

    @property
    def failed_checks(self) -> list[BestPracticeCheck]:
        return [check for check in self.checks if not check.passed]


class BestPracticesReport(BaseModel):
    """Overall best-practices analysis."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    overall_score: float
    categories: dict[str, BestPracticeCategory] = Field(default_factory=dict)


__all__ = [
    "BestPracticeCategory",
    "BestPracticeCheck",
    "BestPracticesReport",
]
