"""
Applicant data models.

Contains the ApplicantRecord dataclass and the enums describing a single
historical application, plus the TargetProfile of the student we are
comparing against.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import (
    TEST_SCORE_BELOW,
    TEST_SCORE_ABOVE,
    GPA_BELOW,
    GPA_ABOVE,
    GPA_EPSILON,
)
from ..errors import PreconditionError


class DecisionType(Enum):
    """
    Admissions track an application was submitted under.

    Values are the tags the service uses in ``typeName``. Declaration order is
    the display order.

    UNKNOWN: tag missing or not one we recognize (never an error)
    """
    REA = "REA"
    EA = "EA"
    EA2 = "EA2"
    ED = "ED"
    ED2 = "ED2"
    RD = "RD"
    ROLL = "ROLL"
    OTH = "OTH"
    UNKNOWN = "Unknown"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "DecisionType":
        """Map a raw ``typeName`` tag to a DecisionType, defaulting to UNKNOWN."""
        if not isinstance(tag, str):
            return cls.UNKNOWN
        try:
            return cls(tag.strip().upper())
        except ValueError:
            return cls.UNKNOWN


class Outcome(Enum):
    """
    Final result of an application.

    The service groups applicants into these buckets (``apps.accepted``,
    ``apps.waitlistedDenied``, ...). Only ACCEPTED and WAITLISTED_ACCEPTED
    count as accepted; everything else is denied.
    """
    ACCEPTED = "accepted"
    DENIED = "denied"
    WAITLISTED_ACCEPTED = "waitlistedAccepted"
    WAITLISTED_DENIED = "waitlistedDenied"
    WAITLISTED_UNKNOWN = "waitlistedUnknown"

    @property
    def is_accepted(self) -> bool:
        return self in (Outcome.ACCEPTED, Outcome.WAITLISTED_ACCEPTED)


class ScoreScale(Enum):
    """Scale the test score is expressed on (SAT 400-1600, ACT 1-36)."""
    SAT = "sat"
    ACT = "act"


@dataclass(frozen=True)
class ApplicantRecord:
    """
    One historical application from a school's scattergram.

    This is the unit the aggregation engine counts. Missing data is kept as
    None rather than guessed: a record without a score or GPA still counts in
    the overall totals, it just can't be placed inside the tolerance window.

    Attributes:
        decision_type: Admissions track (UNKNOWN when the tag was missing)
        test_score: Combined test score, None when the applicant had none
        gpa: Unweighted GPA, None when missing
        outcome: Final decision bucket
        test_scale: Which scale test_score is on
    """
    decision_type: DecisionType
    test_score: Optional[int]
    gpa: Optional[float]
    outcome: Outcome
    test_scale: ScoreScale = ScoreScale.SAT

    @property
    def is_accepted(self) -> bool:
        return self.outcome.is_accepted


@dataclass(frozen=True)
class ToleranceWindow:
    """
    Inclusive score and GPA ranges around a student's own profile.

    Example for a 1300 / 3.7 student:
        test_score_range: 1280 .. 1330
        gpa_range:        3.49 .. 3.81
    """
    test_score_low: int
    test_score_high: int
    gpa_low: float
    gpa_high: float
    test_scale: ScoreScale = ScoreScale.SAT

    def contains(self, record: ApplicantRecord) -> bool:
        """True when both the record's score and GPA fall inside the window."""
        if record.test_score is None or record.gpa is None:
            return False
        if record.test_scale != self.test_scale:
            return False
        in_score = self.test_score_low <= record.test_score <= self.test_score_high
        in_gpa = (self.gpa_low - GPA_EPSILON) <= record.gpa <= (self.gpa_high + GPA_EPSILON)
        return in_score and in_gpa


@dataclass(frozen=True)
class TargetProfile:
    """
    The student's own academic profile.

    Both values are needed to build a tolerance window. They arrive embedded
    in the application statistics response (``userInfo.academics``).
    """
    test_score: Optional[int]
    gpa: Optional[float]
    test_scale: ScoreScale = ScoreScale.SAT

    @property
    def is_complete(self) -> bool:
        return self.test_score is not None and self.gpa is not None

    def window(self) -> ToleranceWindow:
        """
        Build the tolerance window for this profile.

        Raises:
            PreconditionError: if the score or GPA is missing
        """
        if not self.is_complete:
            raise PreconditionError(
                f"profile needs both a test score and a GPA "
                f"(got test_score={self.test_score}, gpa={self.gpa})"
            )
        return ToleranceWindow(
            test_score_low=self.test_score - TEST_SCORE_BELOW,
            test_score_high=self.test_score + TEST_SCORE_ABOVE,
            gpa_low=self.gpa - GPA_BELOW,
            gpa_high=self.gpa + GPA_ABOVE,
            test_scale=self.test_scale,
        )
