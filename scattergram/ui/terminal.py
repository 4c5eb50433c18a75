"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the scattergram package.

Statistics blocks are plain text so they can be piped or diffed; only the
banner and the run summary use color.
"""

from typing import Iterable, List, Optional

from ..models import (
    CategoryTally,
    DecisionType,
    SchoolResult,
    StatisticsReport,
    TargetProfile,
)


class TerminalDisplay:
    """
    Terminal output for scattergram statistics.

    ═══════════════════════════════════════════════════════════════════════════
    REPORT FORMAT
    ═══════════════════════════════════════════════════════════════════════════

        Example University
            Total: 3 (66.67%)
                ED: 1/1 (100.00%)
                RD: 1/2 (50.00%)
            Boxed: 1 (100.00%)
                RD: 1/1 (100.00%)

    Rates always have two decimals; a rate over zero applicants is "n/a".
    Categories follow DecisionType declaration order (REA, EA, EA2, ED, ED2,
    RD, ROLL, OTH, Unknown).

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"

    @staticmethod
    def format_rate(rate: Optional[float]) -> str:
        if rate is None:
            return "n/a"
        return f"{rate:.2f}%"

    @classmethod
    def format_report(cls, name: str, report: StatisticsReport) -> List[str]:
        """Render one school's statistics as ordered lines."""
        lines = [name]
        lines.append(f"\tTotal: {report.overall_total} ({cls.format_rate(report.overall_rate)})")
        lines.extend(cls._category_lines(report.per_category))
        lines.append(
            f"\tBoxed: {report.boxed_overall_total} ({cls.format_rate(report.boxed_overall_rate)})"
        )
        lines.extend(cls._category_lines(report.boxed_per_category))
        return lines

    @classmethod
    def _category_lines(cls, tallies: dict) -> List[str]:
        lines = []
        for category in DecisionType:
            tally: CategoryTally = tallies.get(category)
            if tally is None:
                continue
            lines.append(
                f"\t\t{category.value}: {tally.accepted}/{tally.total} ({cls.format_rate(tally.rate)})"
            )
        return lines

    @classmethod
    def print_report(cls, name: str, report: StatisticsReport):
        """Print one school's block followed by a blank line."""
        for line in cls.format_report(name, report):
            print(line)
        print()

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def format_profile(cls, profile: Optional[TargetProfile]) -> List[str]:
        """Describe the student's profile and the window derived from it."""
        if profile is None or not profile.is_complete:
            return ["Profile incomplete: boxed statistics are not computed"]
        window = profile.window()
        scale = profile.test_scale.name
        return [
            f"Your {scale}: {profile.test_score}   Your GPA: {profile.gpa:.2f}",
            f"Boxed window: {scale} {window.test_score_low}-{window.test_score_high}, "
            f"GPA {window.gpa_low:.2f}-{window.gpa_high:.2f}",
        ]

    @classmethod
    def print_profile(cls, profile: Optional[TargetProfile]):
        cls.print_header("YOUR PROFILE")
        for line in cls.format_profile(profile):
            print(f"  {line}")
        print()

    @classmethod
    def print_summary(cls, results: Iterable[SchoolResult]):
        """Print counts of processed schools and list the ones that didn't make it."""
        results = list(results)
        succeeded = [r for r in results if r.succeeded]
        skipped = [r for r in results if r.skipped]
        failed = [r for r in results if r.error is not None]

        cls.print_header("SUMMARY")
        print(f"  {cls.GREEN}Reported:{cls.RESET} {len(succeeded)} schools")
        if skipped:
            print(f"  {cls.YELLOW}Skipped:{cls.RESET} {len(skipped)} schools")
            for r in skipped:
                print(f"    {cls.DIM}- {r.name}: {r.reason}{cls.RESET}")
        if failed:
            print(f"  {cls.RED}Failed:{cls.RESET} {len(failed)} schools")
            for r in failed:
                print(f"    {cls.DIM}- {r.name}: {r.error}{cls.RESET}")
