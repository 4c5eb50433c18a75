"""Shared test helpers: PATH setup, lightweight HTTP fakes, and payload builders."""

import json
import sys
from pathlib import Path
from urllib.parse import urlsplit

import pytest

# Ensure the package is importable without installing (prepend project root)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scattergram.models import ApplicantRecord, DecisionType, Outcome  # noqa: E402

API_BASE = "https://api.example.test/"


# ---------- Lightweight fakes ----------
class FakeResponse:
    """Just enough of requests.Response for the transport executor."""

    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeHttp:
    """
    Drop-in for requests.Session.

    Routes are matched on the URL path (query strings are ignored). Each value
    is a FakeResponse, an exception to raise, or a callable taking the call
    kwargs and returning either.
    """

    def __init__(self, routes=None) -> None:
        self.routes = dict(routes or {})
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        path = urlsplit(url).path
        if path not in self.routes:
            return FakeResponse(404, "not found")
        outcome = self.routes[path]
        if callable(outcome) and not isinstance(outcome, FakeResponse):
            outcome = outcome(kwargs)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def json_response(payload, status_code: int = 200) -> FakeResponse:
    return FakeResponse(status_code, json.dumps(payload))


# ---------- Record builders ----------
def make_record(decision=DecisionType.RD, score=1300, gpa=3.7,
                outcome=Outcome.ACCEPTED, **kwargs) -> ApplicantRecord:
    return ApplicantRecord(decision_type=decision, test_score=score, gpa=gpa,
                           outcome=outcome, **kwargs)


# ---------- Payload builders ----------
def app_payload(type_name="RD", sat=1300, gpa=3.7, act=0):
    return {
        "currentStudent": False,
        "typeName": type_name,
        "actComposite": act,
        "actCompositeStudent": 0,
        "highestComboSat": sat,
        "studentSAT1600Composite": 0,
        "gpa": gpa,
    }


def stats_payload(sat_apps=None, act_apps=None, sat=1300, gpa=3.7, act=29):
    """An application-statistics body shaped like the service's."""
    gpa_section = {"gpaCount": 3, "gpaAvg": 3.6}
    if sat_apps is not None:
        gpa_section["sat"] = {"count": 3, "avg": 1283.3, "apps": sat_apps}
    if act_apps is not None:
        gpa_section["act"] = {"count": 1, "avg": 30.0, "apps": act_apps}
    return {
        "scattergrams": {"gpa": gpa_section, "weightedGpa": None},
        "userInfo": {
            "userId": 42,
            "academics": {
                "gpa": 3.9,
                "rawCumulativeGpa": gpa,
                "rawWeightedGpa": 0,
                "sat": sat,
                "psat": 0,
                "act": act,
            },
        },
    }


def scenario_sat_apps():
    """The three-applicant school used across tests (2 accepted, 1 denied)."""
    return {
        "accepted": [app_payload("RD", 1300, 3.7), app_payload("ED", 1350, 3.9)],
        "denied": [app_payload("RD", 1200, 3.2)],
        "waitlistedAccepted": [],
        "waitlistedDenied": [],
        "waitlistedUnknown": [],
    }


def school_payload(name, uuid):
    college = {"name": name, "uuid": uuid, "id": "c-" + name[:3]} if name else None
    return {"id": 1, "collegeId": "", "college": college, "interestLevel": 2}


@pytest.fixture()
def fake_http():
    return FakeHttp()


@pytest.fixture()
def scenario_records():
    return [
        make_record(DecisionType.RD, 1300, 3.7, Outcome.ACCEPTED),
        make_record(DecisionType.RD, 1200, 3.2, Outcome.DENIED),
        make_record(DecisionType.ED, 1350, 3.9, Outcome.ACCEPTED),
    ]
