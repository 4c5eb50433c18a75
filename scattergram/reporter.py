"""
Scattergram Reporter - Main Orchestrator.

This module contains the ScattergramReporter class that connects the data
layer (session), the algorithm layer (aggregation engine) and the
presentation layer (terminal display).
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

from .config import MAX_CONCURRENT_FETCHES
from .data import Session, ScattergramParser
from .engines import AggregationEngine
from .errors import ScattergramError
from .models import School, SchoolResult, ScoreScale
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class ScattergramReporter:
    """
    Main interface for the scattergram statistics system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Fetches the student's college list once
    2. Fans out one task per school, at most ``max_workers`` at a time
    3. Each task fetches the school's application statistics, extracts the
       applicant records and the student's profile, and aggregates them
    4. Prints each school's block as soon as it finishes (completion order,
       not list order), then a summary of skipped and failed schools

    One school failing never stops the others: its error is kept on its
    SchoolResult. Only failing to get the college list itself is fatal.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        session = connect(key)
        reporter = ScattergramReporter(session)
        results = reporter.run()
    """

    def __init__(self, session: Session, max_workers: int = MAX_CONCURRENT_FETCHES,
                 require_profile: bool = False,
                 scales=(ScoreScale.SAT,)):
        self.session = session
        self.max_workers = max_workers
        self.require_profile = require_profile
        self.scales = tuple(scales)
        self.parser = ScattergramParser()
        self.engine = AggregationEngine()
        self.display = TerminalDisplay()

    def run(self, display: bool = True) -> List[SchoolResult]:
        """
        Report on every school on the student's list.

        Args:
            display: Print blocks and the summary as results come in

        Returns:
            One SchoolResult per school, in completion order

        Raises:
            ScattergramError: if the college list itself can't be fetched
        """
        schools = self.session.get_all_schools_im_thinking_about()
        logger.info("Processing %d schools", len(schools))

        results = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self.process_school, school) for school in schools]
            for future in as_completed(futures):
                result = future.result()
                results.append(result)
                if display and result.succeeded:
                    self.display.print_report(result.name, result.report)

        if display:
            profile = next((r.report.profile for r in results if r.succeeded), None)
            if profile is not None:
                self.display.print_profile(profile)
            self.display.print_summary(results)
        return results

    def process_school(self, school: School) -> SchoolResult:
        """
        Fetch and aggregate one school. Never raises for per-school problems.

        Schools without a UUID or without scattergram data are skipped with a
        warning; fetch, decode and precondition errors are recorded on the
        result.
        """
        name = school.name
        uuid = school.uuid
        if not uuid:
            logger.warning("No UUID for school: %s", name)
            return SchoolResult(name=name, skipped=True, reason="no UUID")

        try:
            stats = self.session.get_application_stats_by_uuid(uuid)
            if not self.parser.has_scattergram(stats):
                logger.warning("No scattergram data for school: %s", name)
                return SchoolResult(name=name, uuid=uuid, skipped=True,
                                    reason="no scattergram data")

            records = self.parser.records(stats, self.scales)
            profile = self.parser.profile(stats, self._profile_scale())
            report = self.engine.aggregate(records, profile,
                                           require_boxed=self.require_profile)
        except ScattergramError as e:
            logger.warning("Skipping %s: %s", name, e)
            return SchoolResult(name=name, uuid=uuid, error=e)

        return SchoolResult(name=name, uuid=uuid, report=report)

    def _profile_scale(self) -> ScoreScale:
        # Window comparisons only match records on the profile's own scale
        return ScoreScale.SAT if ScoreScale.SAT in self.scales else self.scales[0]
