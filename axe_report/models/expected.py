"""Expected per-section counts used to check a rendered report."""

from axe_report.models.base import Model
from axe_report.models.result import ScanResult
from axe_report.sections import ALL_REPORT_TYPES, ReportTypes, ResultSection


class ExpectedCounts(Model):
    """Entry counts a report should show for each section."""

    violations: int
    passes: int
    incomplete: int = 0
    inapplicable: int = 0

    def for_section(self, section: ResultSection) -> int:
        count: int = getattr(self, section.result_key)
        return count

    @classmethod
    def from_result(
        cls, result: ScanResult, report_types: ReportTypes = ALL_REPORT_TYPES
    ) -> "ExpectedCounts":
        """Derive the counts a report of ``result`` should show.

        Sections left out of ``report_types`` are expected to be empty.
        """
        counts = {
            section.result_key: result.count(section) if section in report_types else 0
            for section in ResultSection
        }
        return cls(**counts)
