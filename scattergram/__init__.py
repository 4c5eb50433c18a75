"""
Scattergram Statistics Package
==============================

Acceptance statistics for every school on a student's college list, computed
from the historical applicant scattergrams of the student's high school.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                            DATA LAYER                                    │
│                                                                         │
│  ┌──────────────────┐  ┌───────────────────┐  ┌─────────────────────┐  │
│  │ ResourceContract │  │ TransportExecutor │  │      Session        │  │
│  │ (what to fetch)  │  │ (how to fetch)    │  │ (host + credential) │  │
│  └──────────────────┘  └───────────────────┘  └─────────────────────┘  │
│                                                                         │
│  ┌───────────────────────────────────────────────────────────────────┐  │
│  │ ScattergramParser (response → ApplicantRecords + TargetProfile)   │  │
│  └───────────────────────────────────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌───────────────────────────────┐  ┌───────────────────────────────┐   │
│  │      AggregationEngine        │  │   sat_to_act / act_to_sat     │   │
│  │ (overall + boxed statistics)  │  │   (score conversion)          │   │
│  └───────────────────────────────┘  └───────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns StatisticsReport
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     ScattergramReporter                                  │
│      (Orchestrator - bounded fan-out, one task per school)              │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

scattergram/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m scattergram
├── config.py            # Configuration constants
├── errors.py            # Error kinds
├── logging_config.py    # Logging setup for the CLI
├── reporter.py          # ScattergramReporter orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── applicant.py     # ApplicantRecord, TargetProfile, ToleranceWindow
│   ├── statistics.py    # StatisticsReport, CategoryTally, SchoolResult
│   └── resources.py     # Response shapes (School, College, Apps, ...)
│
├── data/                # Talking to the student API
│   ├── contracts.py     # ResourceContract and the concrete contracts
│   ├── transport.py     # TransportExecutor
│   ├── session.py       # Session, connect()
│   └── parser.py        # JSON → models, ScattergramParser
│
├── engines/
│   ├── aggregation.py   # AggregationEngine
│   └── conversion.py    # SAT/ACT concordance
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from scattergram import connect, ScattergramReporter

    session = connect(key)
    ScattergramReporter(session).run()

Or aggregate records you already have:

    from scattergram import AggregationEngine, TargetProfile

    report = AggregationEngine().aggregate(records, TargetProfile(1300, 3.7))

Running from command line:

    python -m scattergram --key <token>

"""

# Version
__version__ = "1.0.0"

# Main exports
from .reporter import ScattergramReporter
from .cli import main

# Model exports
from .models import (
    DecisionType,
    Outcome,
    ScoreScale,
    ApplicantRecord,
    TargetProfile,
    ToleranceWindow,
    CategoryTally,
    StatisticsReport,
    SchoolResult,
    acceptance_rate,
)

# Engine exports
from .engines import AggregationEngine, sat_to_act, act_to_sat, to_act_record

# Data exports
from .data import (
    Access,
    ResourceContract,
    TransportExecutor,
    Session,
    ScattergramParser,
    connect,
)

# UI exports
from .ui import TerminalDisplay

# Errors
from .errors import (
    ScattergramError,
    TransportError,
    RemoteError,
    DecodeError,
    ConfigurationError,
    PreconditionError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "ScattergramReporter",
    "main",
    # Models
    "DecisionType",
    "Outcome",
    "ScoreScale",
    "ApplicantRecord",
    "TargetProfile",
    "ToleranceWindow",
    "CategoryTally",
    "StatisticsReport",
    "SchoolResult",
    "acceptance_rate",
    # Engines
    "AggregationEngine",
    "sat_to_act",
    "act_to_sat",
    "to_act_record",
    # Data
    "Access",
    "ResourceContract",
    "TransportExecutor",
    "Session",
    "ScattergramParser",
    "connect",
    # UI
    "TerminalDisplay",
    # Errors
    "ScattergramError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "ConfigurationError",
    "PreconditionError",
]
