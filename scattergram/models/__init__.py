"""
Data models for the scattergram system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .applicant import (
    DecisionType,
    Outcome,
    ScoreScale,
    ApplicantRecord,
    TargetProfile,
    ToleranceWindow,
)
from .statistics import (
    acceptance_rate,
    CategoryTally,
    StatisticsReport,
    SchoolResult,
)
from .resources import (
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

__all__ = [
    # Applicant models
    "DecisionType",
    "Outcome",
    "ScoreScale",
    "ApplicantRecord",
    "TargetProfile",
    "ToleranceWindow",
    # Statistics results
    "acceptance_rate",
    "CategoryTally",
    "StatisticsReport",
    "SchoolResult",
    # Remote resources
    "SiteConfig",
    "Paged",
    "CoreMapping",
    "SchoolArea",
    "EdocsCollege",
    "Deadline",
    "College",
    "School",
    "ScattergramSource",
    "App",
    "Apps",
    "ScoreScattergram",
    "GpaScattergram",
    "Scattergrams",
    "Academics",
    "UserInfo",
    "ApplicationStatistics",
]
