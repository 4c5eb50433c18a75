"""
Remote resource data models.

These dataclasses mirror the JSON the student API returns. Every field is
optional because the service omits fields freely; decoding lives in
``scattergram.data.parser``.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class SiteConfig:
    """
    Settings from the portal's ``rewritten_config.js`` blob.

    Only ``api_host`` is needed to talk to the API; the rest are kept so the
    whole blob can be inspected when debugging.
    """
    api_host: Optional[str] = None
    portal_api_host: Optional[str] = None
    ds_api_url: Optional[str] = None
    extra: dict = field(default_factory=dict)


@dataclass
class Paged(Generic[T]):
    """One page of a paginated collection."""
    data: List[T]
    page: Optional[int] = None
    limit: Optional[int] = None
    total_items: Optional[int] = None
    total_pages: Optional[int] = None


@dataclass
class CoreMapping:
    uuid: Optional[str] = None


@dataclass
class SchoolArea:
    hobsons_id: Optional[int] = None
    area_id: Optional[int] = None


@dataclass
class EdocsCollege:
    is_electronic: Optional[bool] = None
    college_id: Optional[str] = None
    commonapp_id: Optional[int] = None
    commonapp_is_exclusive: Optional[bool] = None
    ceeb_code: Optional[str] = None
    delivery_type: Optional[str] = None


@dataclass
class Deadline:
    """An application deadline (e.g. "Early Decision: Nov 1")."""
    id: Optional[int] = None
    day: Optional[int] = None
    month: Optional[int] = None
    label: Optional[str] = None
    deadline_label: Optional[str] = None
    deadline_type: Optional[str] = None
    deadline_date: Optional[str] = None


@dataclass
class College:
    """
    College detail, as embedded in a list entry or fetched by UUID.

    ``uuid`` is what the statistics resource is keyed by; a college without
    one cannot be looked up.
    """
    id: Optional[str] = None
    uuid: Optional[str] = None
    name: Optional[str] = None
    short_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    url: Optional[str] = None
    sector: Optional[int] = None
    ssr_required: Optional[bool] = None
    teacher_recs_required: Optional[bool] = None
    is_college_active: Optional[bool] = None
    edocs_college: Optional[EdocsCollege] = None
    school_area: Optional[SchoolArea] = None
    core_mapping: Optional[CoreMapping] = None
    deadlines: List[Deadline] = field(default_factory=list)


@dataclass
class School:
    """An entry on the student's "colleges I'm thinking about" list."""
    id: Optional[int] = None
    college_id: Optional[str] = None
    college: Optional[College] = None
    interest_level: Optional[int] = None
    interest_level_label: Optional[str] = None
    expected_outcome_label: Optional[str] = None
    date_added: Optional[str] = None

    @property
    def name(self) -> str:
        if self.college and self.college.name:
            return self.college.name
        return "NO NAME"

    @property
    def uuid(self) -> Optional[str]:
        return self.college.uuid if self.college else None


@dataclass
class ScattergramSource:
    """A school the student's high school has scattergram data for."""
    id: Optional[str] = None
    name: Optional[str] = None
    core_mapping: Optional[CoreMapping] = None
    total_applying: Optional[int] = None


@dataclass
class App:
    """
    One applicant dot on a scattergram, exactly as the service sends it.

    Zero scores are decoded as None.
    """
    type_name: Optional[str] = None
    current_student: Optional[bool] = None
    act_composite: Optional[int] = None
    act_composite_student: Optional[int] = None
    highest_combo_sat: Optional[int] = None
    student_sat1600_composite: Optional[int] = None
    gpa: Optional[float] = None


@dataclass
class Apps:
    """Applicant dots grouped by outcome bucket."""
    accepted: List[App] = field(default_factory=list)
    denied: List[App] = field(default_factory=list)
    waitlisted_accepted: List[App] = field(default_factory=list)
    waitlisted_denied: List[App] = field(default_factory=list)
    waitlisted_unknown: List[App] = field(default_factory=list)


@dataclass
class ScoreScattergram:
    """Applicants who reported one kind of test (SAT or ACT)."""
    count: Optional[int] = None
    avg: Optional[float] = None
    gpa_avg: Optional[float] = None
    apps: Optional[Apps] = None


@dataclass
class GpaScattergram:
    """Scattergram plotted against one GPA flavor."""
    gpa_count: Optional[int] = None
    gpa_avg: Optional[float] = None
    act: Optional[ScoreScattergram] = None
    sat: Optional[ScoreScattergram] = None


@dataclass
class Scattergrams:
    gpa: Optional[GpaScattergram] = None
    weighted_gpa: Optional[GpaScattergram] = None


@dataclass
class Academics:
    """The student's own scores. Zero means "not reported" and becomes None."""
    gpa: Optional[float] = None
    raw_cumulative_gpa: Optional[float] = None
    raw_weighted_gpa: Optional[float] = None
    sat: Optional[int] = None
    psat: Optional[int] = None
    act: Optional[int] = None


@dataclass
class UserInfo:
    user_id: Optional[int] = None
    academics: Optional[Academics] = None


@dataclass
class ApplicationStatistics:
    """Response of the application-statistics-by-UUID resource."""
    scattergrams: Optional[Scattergrams] = None
    user_info: Optional[UserInfo] = None
