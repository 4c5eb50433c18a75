"""
Acceptance Statistics Aggregation Engine.

This module turns a school's historical applicant records into acceptance
statistics, both for the whole applicant pool and for the "boxed" pool of
applicants that look like the student.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Optional

from ..errors import PreconditionError
from ..models import (
    ApplicantRecord,
    CategoryTally,
    DecisionType,
    StatisticsReport,
    TargetProfile,
    acceptance_rate,
)

logger = logging.getLogger(__name__)


class AggregationEngine:
    """
    Computes acceptance statistics for one school.

    ═══════════════════════════════════════════════════════════════════════════
    POPULATIONS
    ═══════════════════════════════════════════════════════════════════════════

    Every record lands in exactly one of two groups:

    - ACCEPTED: accepted outright, or accepted off the waitlist
    - DENIED:   denied, denied off the waitlist, or waitlist never resolved

    ALL = ACCEPTED + DENIED is the denominator for every rate.

    ═══════════════════════════════════════════════════════════════════════════
    BOXED STATISTICS
    ═══════════════════════════════════════════════════════════════════════════

    The boxed view only counts applicants inside the student's tolerance
    window (score -20/+30, GPA -0.21/+0.11, inclusive). A record with no
    score or no GPA can never be inside the window, but it still counts in
    the overall numbers.

    Example (student 1300 / 3.7):
        RD 1300 3.7 accepted  → counted overall, counted boxed
        RD 1200 3.2 denied    → counted overall only
        ED 1350 3.9 accepted  → counted overall only (1350 > 1330)

        overall: 2/3 = 66.67%     boxed: 1/1 = 100.00%

    ═══════════════════════════════════════════════════════════════════════════
    EMPTY BUCKETS
    ═══════════════════════════════════════════════════════════════════════════

    A rate over zero applicants is None ("undefined"), never 0% and never an
    exception. The engine does not raise for missing or partial data.
    """

    def aggregate(self, records: Iterable[ApplicantRecord],
                  profile: Optional[TargetProfile] = None,
                  require_boxed: bool = False) -> StatisticsReport:
        """
        Aggregate one school's applicant records.

        Args:
            records: Historical applicant records for the school
            profile: The student's own score and GPA (may be None/incomplete)
            require_boxed: Raise instead of skipping boxed figures when the
                profile can't produce a tolerance window

        Returns:
            StatisticsReport with overall, per-category and boxed figures

        Raises:
            PreconditionError: only when require_boxed is True and the
                profile is missing or incomplete
        """
        records = list(records)

        # STEP 1: Partition into accepted / denied
        accepted = [r for r in records if r.is_accepted]
        denied = [r for r in records if not r.is_accepted]
        everyone = accepted + denied

        # STEP 2-3: Overall and per-category tallies
        per_category = self._tally_by_category(everyone, accepted)
        overall_total = len(everyone)
        overall_accepted = len(accepted)

        # STEP 4-5: Tolerance window (or none at all)
        window = None
        if profile is not None and profile.is_complete:
            window = profile.window()
        elif require_boxed:
            raise PreconditionError(
                "boxed statistics need a profile with both a test score and a GPA"
            )

        # STEP 6: Boxed tallies over qualifying records only
        if window is not None:
            boxed_all = [r for r in everyone if window.contains(r)]
            boxed_accepted = [r for r in boxed_all if r.is_accepted]
            boxed_per_category = self._tally_by_category(boxed_all, boxed_accepted)
        else:
            boxed_per_category = {}

        # STEP 7: Boxed overall is the sum of the boxed categories
        boxed_total = sum(t.total for t in boxed_per_category.values())
        boxed_accepted_count = sum(t.accepted for t in boxed_per_category.values())

        logger.debug(
            "Aggregated %d records (%d accepted), %d boxed (%d accepted)",
            overall_total, overall_accepted, boxed_total, boxed_accepted_count,
        )

        return StatisticsReport(
            overall_total=overall_total,
            overall_accepted=overall_accepted,
            overall_rate=acceptance_rate(overall_accepted, overall_total),
            per_category=per_category,
            boxed_overall_total=boxed_total,
            boxed_overall_accepted=boxed_accepted_count,
            boxed_overall_rate=acceptance_rate(boxed_accepted_count, boxed_total),
            boxed_per_category=boxed_per_category,
            profile=profile,
        )

    def _tally_by_category(self, everyone: list, accepted: list) -> Dict[DecisionType, CategoryTally]:
        """
        Count totals over ``everyone`` and acceptances over ``accepted``.

        Keys are exactly the categories present in ``everyone``, in
        DecisionType declaration order.
        """
        totals = Counter(self._category(r) for r in everyone)
        accepts = Counter(self._category(r) for r in accepted)
        return {
            category: CategoryTally(accepted=accepts[category], total=totals[category])
            for category in DecisionType
            if totals[category] > 0
        }

    @staticmethod
    def _category(record: ApplicantRecord) -> DecisionType:
        # Records built by hand may carry None; they still count, as UNKNOWN
        if isinstance(record.decision_type, DecisionType):
            return record.decision_type
        return DecisionType.UNKNOWN
