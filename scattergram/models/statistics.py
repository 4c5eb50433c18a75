"""
Statistics result data models.

Contains dataclasses for representing the output of the aggregation engine
and the per-school outcome of a reporting run.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .applicant import DecisionType, TargetProfile


def acceptance_rate(accepted: int, total: int) -> Optional[float]:
    """
    Percentage of ``total`` that was accepted.

    Returns None when there is nothing to divide by. An empty bucket has an
    undefined rate, not a 0% rate.
    """
    if total <= 0:
        return None
    return accepted * 100 / total


@dataclass(frozen=True)
class CategoryTally:
    """Accepted and total counts for one decision-plan category."""
    accepted: int = 0
    total: int = 0

    @property
    def rate(self) -> Optional[float]:
        return acceptance_rate(self.accepted, self.total)


@dataclass(frozen=True)
class StatisticsReport:
    """
    Acceptance statistics for one school, relative to one student.

    Example for a school with three applicants (two accepted):
        overall_total: 3
        overall_accepted: 2
        overall_rate: 66.67
        per_category: {RD: 1/2, ED: 1/1}
        boxed_overall_total: 1
        boxed_overall_accepted: 1
        boxed_overall_rate: 100.0
        boxed_per_category: {RD: 1/1}

    boxed_per_category only has keys for categories with at least one
    applicant inside the tolerance window.
    """
    overall_total: int
    overall_accepted: int
    overall_rate: Optional[float]
    per_category: Dict[DecisionType, CategoryTally]
    boxed_overall_total: int
    boxed_overall_accepted: int
    boxed_overall_rate: Optional[float]
    boxed_per_category: Dict[DecisionType, CategoryTally]
    profile: Optional[TargetProfile] = None

    @property
    def overall_denied(self) -> int:
        return self.overall_total - self.overall_accepted


@dataclass
class SchoolResult:
    """
    Outcome of processing one school on the student's list.

    Exactly one of these holds:
    - report is set: statistics were computed
    - skipped is True: nothing to compute (no UUID, no scattergram data)
    - error is set: fetching or decoding failed
    """
    name: str
    uuid: Optional[str] = None
    report: Optional[StatisticsReport] = None
    skipped: bool = False
    reason: str = ""
    error: Optional[Exception] = field(default=None, repr=False)

    @property
    def succeeded(self) -> bool:
        return self.report is not None
