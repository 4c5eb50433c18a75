"""
Statistics engines.

This package contains the pure logic of the system: aggregation of applicant
records into acceptance statistics, and SAT/ACT score conversion.
"""

from .aggregation import AggregationEngine
from .conversion import act_to_sat, sat_to_act, to_act_record

__all__ = [
    "AggregationEngine",
    "sat_to_act",
    "act_to_sat",
    "to_act_record",
]
