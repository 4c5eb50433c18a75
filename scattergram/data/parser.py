"""
Response parsing.

This module turns the student API's camelCase JSON into the dataclasses in
``scattergram.models`` and flattens a school's scattergram into the
ApplicantRecords the aggregation engine counts.

Parse functions raise ValueError/TypeError on shapes they can't make sense
of; the resource contract that called them turns those into DecodeError.
"""

import json
import math
from typing import Callable, Iterable, List, Optional

from ..config import SITE_CONFIG_PREFIX, SITE_CONFIG_SUFFIX
from ..models import (
    DecisionType,
    Outcome,
    ScoreScale,
    ApplicantRecord,
    TargetProfile,
    SiteConfig,
    Paged,
    CoreMapping,
    SchoolArea,
    EdocsCollege,
    Deadline,
    College,
    School,
    ScattergramSource,
    App,
    Apps,
    ScoreScattergram,
    GpaScattergram,
    Scattergrams,
    Academics,
    UserInfo,
    ApplicationStatistics,
)


# =============================================================================
# FIELD HELPERS
# =============================================================================
# The service uses 0 for "no score" and "" for "no value". Both become None
# so the rest of the system only has one way to say "missing".

def none_if_zero(value):
    """Return None for None or 0, the value otherwise."""
    if value is None or value == 0:
        return None
    return value


def none_if_empty_string(value) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value or None


def bool_from_int_opt(value) -> Optional[bool]:
    """Decode a 0/1 flag. Anything other than None, 0 or 1 is rejected."""
    if value is None:
        return None
    if value in (0, 1):
        return bool(value)
    raise ValueError(f"invalid flag value {value!r}, expected zero or one")


def _opt_int(value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValueError(f"expected a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value) if value.strip() else None
    raise TypeError(f"expected a number, got {type(value).__name__}")


def _opt_float(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("expected a number, got a boolean")
    if isinstance(value, str):
        if not value.strip():
            return None
        value = float(value)
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"expected a finite number, got {value!r}")
        return number
    raise TypeError(f"expected a number, got {type(value).__name__}")


def _score(value) -> Optional[int]:
    return none_if_zero(_opt_int(value))


def _object(data, what: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{what} should be an object, got {type(data).__name__}")
    return data


def _array(data, what: str) -> list:
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"{what} should be an array, got {type(data).__name__}")
    return data


def _nested(data: dict, key: str, parser: Callable):
    value = data.get(key)
    return parser(value) if value is not None else None


def _text(data: dict, key: str) -> Optional[str]:
    return none_if_empty_string(data.get(key))


# =============================================================================
# SITE CONFIG
# =============================================================================

def parse_site_config_script(body: str) -> SiteConfig:
    """
    Parse the portal's config script.

    The body looks like ``window.REWRITTEN_CONFIG = {...};``. Both the prefix
    and the trailing semicolon must be present.
    """
    text = body.strip()
    if not text.startswith(SITE_CONFIG_PREFIX):
        raise ValueError("config.js prefix not found")
    text = text[len(SITE_CONFIG_PREFIX):]
    if not text.endswith(SITE_CONFIG_SUFFIX):
        raise ValueError("config.js suffix not found")
    text = text[:-len(SITE_CONFIG_SUFFIX)]

    data = _object(json.loads(text), "site config")
    return SiteConfig(
        api_host=_text(data, "API_HOST"),
        portal_api_host=_text(data, "PORTAL_API_HOST"),
        ds_api_url=_text(data, "DS_API_URL"),
        extra=data,
    )


# =============================================================================
# COLLEGES AND SCHOOL LISTS
# =============================================================================

def parse_core_mapping(data) -> CoreMapping:
    data = _object(data, "coreMapping")
    return CoreMapping(uuid=_text(data, "uuid"))


def parse_school_area(data) -> SchoolArea:
    data = _object(data, "schoolArea")
    return SchoolArea(
        hobsons_id=_opt_int(data.get("hobsonsId")),
        area_id=_opt_int(data.get("areaId")),
    )


def parse_edocs_college(data) -> EdocsCollege:
    data = _object(data, "edocsCollege")
    return EdocsCollege(
        is_electronic=bool_from_int_opt(data.get("isElectronic")),
        college_id=_text(data, "collegeId"),
        commonapp_id=_opt_int(data.get("commonappId")),
        commonapp_is_exclusive=bool_from_int_opt(data.get("commonappIsExclusive")),
        ceeb_code=_text(data, "ceebCode"),
        delivery_type=_text(data, "deliveryType"),
    )


def parse_deadline(data) -> Deadline:
    data = _object(data, "deadline")
    return Deadline(
        id=_opt_int(data.get("id")),
        day=_opt_int(data.get("day")),
        month=_opt_int(data.get("month")),
        label=_text(data, "label"),
        deadline_label=_text(data, "deadlineLabel"),
        deadline_type=data.get("type"),
        deadline_date=_text(data, "deadlineDate"),
    )


def parse_college(data) -> College:
    data = _object(data, "college")
    return College(
        id=_text(data, "id"),
        uuid=_text(data, "uuid"),
        name=_text(data, "name"),
        short_name=_text(data, "shortName"),
        city=_text(data, "city"),
        state=_text(data, "state"),
        country=_text(data, "country"),
        url=_text(data, "url"),
        sector=_opt_int(data.get("sector")),
        ssr_required=bool_from_int_opt(data.get("ssrRequired")),
        teacher_recs_required=bool_from_int_opt(data.get("teacherRecsRequired")),
        is_college_active=bool_from_int_opt(data.get("isCollegeActive")),
        edocs_college=_nested(data, "edocsCollege", parse_edocs_college),
        school_area=_nested(data, "schoolArea", parse_school_area),
        core_mapping=_nested(data, "coreMapping", parse_core_mapping),
        deadlines=[parse_deadline(d) for d in _array(data.get("deadlines"), "deadlines")],
    )


def parse_school(data) -> School:
    data = _object(data, "school")
    return School(
        id=_opt_int(data.get("id")),
        college_id=_text(data, "collegeId"),
        college=_nested(data, "college", parse_college),
        interest_level=_opt_int(data.get("interestLevel")),
        interest_level_label=_text(data, "interestLevelLabel"),
        expected_outcome_label=_text(data, "expectedOutcomeLabel"),
        date_added=_text(data, "dateAdded"),
    )


def parse_paged(data, item_parser: Callable) -> Paged:
    """Parse a page envelope; ``data`` is required, the counters are not."""
    data = _object(data, "page")
    if "data" not in data:
        raise KeyError("data")
    return Paged(
        data=[item_parser(item) for item in _array(data["data"], "data")],
        page=_opt_int(data.get("page")),
        limit=_opt_int(data.get("limit")),
        total_items=_opt_int(data.get("totalItems")),
        total_pages=_opt_int(data.get("totalPages")),
    )


def parse_schools_page(data) -> Paged:
    return parse_paged(data, parse_school)


def parse_scattergram_source(data) -> ScattergramSource:
    data = _object(data, "scattergram source")
    return ScattergramSource(
        id=_text(data, "id"),
        name=_text(data, "name"),
        core_mapping=_nested(data, "coreMapping", parse_core_mapping),
        total_applying=_opt_int(data.get("totalApplying")),
    )


def parse_scattergram_sources(data) -> List[ScattergramSource]:
    if data is None:
        raise TypeError("scattergram sources should be an array, got null")
    return [parse_scattergram_source(s) for s in _array(data, "scattergram sources")]


# =============================================================================
# APPLICATION STATISTICS
# =============================================================================

def parse_app(data) -> App:
    data = _object(data, "app")
    return App(
        type_name=data.get("typeName"),
        current_student=data.get("currentStudent"),
        act_composite=_score(data.get("actComposite")),
        act_composite_student=_score(data.get("actCompositeStudent")),
        highest_combo_sat=_score(data.get("highestComboSat")),
        student_sat1600_composite=_score(data.get("studentSAT1600Composite")),
        gpa=_opt_float(data.get("gpa")),
    )


def parse_apps(data) -> Apps:
    data = _object(data, "apps")

    def bucket(key):
        return [parse_app(a) for a in _array(data.get(key), key)]

    return Apps(
        accepted=bucket("accepted"),
        denied=bucket("denied"),
        waitlisted_accepted=bucket("waitlistedAccepted"),
        waitlisted_denied=bucket("waitlistedDenied"),
        waitlisted_unknown=bucket("waitlistedUnknown"),
    )


def parse_score_scattergram(data) -> ScoreScattergram:
    data = _object(data, "test scattergram")
    return ScoreScattergram(
        count=_opt_int(data.get("count")),
        avg=_opt_float(data.get("avg")),
        gpa_avg=_opt_float(data.get("gpaAvg")),
        apps=_nested(data, "apps", parse_apps),
    )


def parse_gpa_scattergram(data) -> GpaScattergram:
    data = _object(data, "gpa scattergram")
    return GpaScattergram(
        gpa_count=_opt_int(data.get("gpaCount")),
        gpa_avg=_opt_float(data.get("gpaAvg")),
        act=_nested(data, "act", parse_score_scattergram),
        sat=_nested(data, "sat", parse_score_scattergram),
    )


def parse_academics(data) -> Academics:
    data = _object(data, "academics")
    return Academics(
        gpa=_opt_float(data.get("gpa")),
        raw_cumulative_gpa=_opt_float(data.get("rawCumulativeGpa")),
        raw_weighted_gpa=none_if_zero(_opt_float(data.get("rawWeightedGpa"))),
        sat=_score(data.get("sat")),
        psat=_score(data.get("psat")),
        act=_score(data.get("act")),
    )


def parse_application_statistics(data) -> ApplicationStatistics:
    data = _object(data, "application statistics")
    scattergrams = None
    if data.get("scattergrams") is not None:
        raw = _object(data["scattergrams"], "scattergrams")
        scattergrams = Scattergrams(
            gpa=_nested(raw, "gpa", parse_gpa_scattergram),
            weighted_gpa=_nested(raw, "weightedGpa", parse_gpa_scattergram),
        )
    user_info = None
    if data.get("userInfo") is not None:
        raw = _object(data["userInfo"], "userInfo")
        user_info = UserInfo(
            user_id=_opt_int(raw.get("userId")),
            academics=_nested(raw, "academics", parse_academics),
        )
    return ApplicationStatistics(scattergrams=scattergrams, user_info=user_info)


def json_body(parser: Callable) -> Callable[[str], object]:
    """Wrap a dict parser so it accepts the raw response text."""
    def parse(body: str):
        return parser(json.loads(body))
    return parse


# =============================================================================
# SCATTERGRAM → APPLICANT RECORDS
# =============================================================================

# Outcome bucket on the Apps object → Outcome
OUTCOME_BUCKETS = (
    ("accepted", Outcome.ACCEPTED),
    ("waitlisted_accepted", Outcome.WAITLISTED_ACCEPTED),
    ("denied", Outcome.DENIED),
    ("waitlisted_denied", Outcome.WAITLISTED_DENIED),
    ("waitlisted_unknown", Outcome.WAITLISTED_UNKNOWN),
)


class ScattergramParser:
    """
    Extracts aggregation inputs from an ApplicationStatistics response.

    KEY RESPONSIBILITY: flatten the outcome-bucketed applicant lists of the
    unweighted-GPA scattergram into ApplicantRecords, and pull the student's
    own score and GPA into a TargetProfile.

    SAT vs ACT:
    The service keeps SAT and ACT reporters in separate lists. Each record is
    tagged with its scale. By default only SAT-scale records are returned;
    ACT data is decoded but not merged into the totals.
    """

    def has_scattergram(self, stats: ApplicationStatistics) -> bool:
        return stats.scattergrams is not None and stats.scattergrams.gpa is not None

    def records(self, stats: ApplicationStatistics,
                scales: Iterable[ScoreScale] = (ScoreScale.SAT,)) -> List[ApplicantRecord]:
        """
        Flatten the scattergram into ApplicantRecords.

        Args:
            stats: Decoded application statistics for one school
            scales: Which test lists to include

        Returns:
            Records in bucket order; empty when there is no scattergram
        """
        if not self.has_scattergram(stats):
            return []
        gpa_scattergram = stats.scattergrams.gpa

        records = []
        for scale in scales:
            if scale == ScoreScale.SAT:
                section = gpa_scattergram.sat
            else:
                section = gpa_scattergram.act
            if section is None or section.apps is None:
                continue
            records.extend(self._records_from_apps(section.apps, scale))
        return records

    def profile(self, stats: ApplicationStatistics,
                scale: ScoreScale = ScoreScale.SAT) -> Optional[TargetProfile]:
        """
        The student's own profile, or None when the response has no academics.

        Uses the raw cumulative (unweighted) GPA. Either field may still be
        None; the engine decides what to do with an incomplete profile.
        """
        if stats.user_info is None or stats.user_info.academics is None:
            return None
        academics = stats.user_info.academics
        score = academics.sat if scale == ScoreScale.SAT else academics.act
        return TargetProfile(
            test_score=score,
            gpa=academics.raw_cumulative_gpa,
            test_scale=scale,
        )

    def _records_from_apps(self, apps: Apps, scale: ScoreScale) -> List[ApplicantRecord]:
        records = []
        for attribute, outcome in OUTCOME_BUCKETS:
            for app in getattr(apps, attribute):
                if scale == ScoreScale.SAT:
                    score = app.highest_combo_sat
                else:
                    score = app.act_composite
                records.append(ApplicantRecord(
                    decision_type=DecisionType.from_tag(app.type_name),
                    test_score=score,
                    gpa=app.gpa,
                    outcome=outcome,
                    test_scale=scale,
                ))
        return records
