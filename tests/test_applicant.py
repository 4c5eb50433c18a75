"""Tests for applicant models, the tolerance window and rate helpers."""

import pytest

from conftest import make_record
from scattergram.errors import PreconditionError
from scattergram.models import (
    CategoryTally,
    DecisionType,
    Outcome,
    ScoreScale,
    TargetProfile,
    acceptance_rate,
)


@pytest.mark.parametrize("tag, expected", [
    ("RD", DecisionType.RD),
    ("ed2", DecisionType.ED2),
    (" ROLL ", DecisionType.ROLL),
    ("OTH", DecisionType.OTH),
    ("SPECIAL", DecisionType.UNKNOWN),
    ("", DecisionType.UNKNOWN),
    (None, DecisionType.UNKNOWN),
    (7, DecisionType.UNKNOWN),
])
def test_decision_type_from_tag(tag, expected):
    assert DecisionType.from_tag(tag) is expected


def test_accepted_outcomes():
    accepted = {o for o in Outcome if o.is_accepted}
    assert accepted == {Outcome.ACCEPTED, Outcome.WAITLISTED_ACCEPTED}


def test_record_defaults_to_sat_scale():
    record = make_record()
    assert record.test_scale is ScoreScale.SAT
    assert record.is_accepted


def test_window_is_asymmetric():
    window = TargetProfile(test_score=1300, gpa=3.7).window()
    assert (window.test_score_low, window.test_score_high) == (1280, 1330)
    assert window.gpa_low == pytest.approx(3.49)
    assert window.gpa_high == pytest.approx(3.81)


def test_window_rejects_missing_values():
    window = TargetProfile(test_score=1300, gpa=3.7).window()
    assert not window.contains(make_record(score=None))
    assert not window.contains(make_record(gpa=None))
    assert window.contains(make_record())


def test_incomplete_profile_has_no_window():
    profile = TargetProfile(test_score=1300, gpa=None)
    assert not profile.is_complete
    with pytest.raises(PreconditionError):
        profile.window()


def test_acceptance_rate_zero_denominator():
    assert acceptance_rate(0, 0) is None
    assert acceptance_rate(1, 4) == pytest.approx(25.0)
    assert CategoryTally().rate is None
    assert CategoryTally(accepted=2, total=3).rate == pytest.approx(66.6667, abs=1e-3)
