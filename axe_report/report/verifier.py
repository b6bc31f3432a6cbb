"""Verification of rendered HTML reports against expected counts."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from axe_report.models.expected import ExpectedCounts
from axe_report.sections import ResultSection

log = logging.getLogger(__name__)

SUMMARY_ELEMENT_ID = "CountsSection"


class ReportVerificationError(Exception):
    """Raised when a report does not match what was expected."""


class ReportParseError(ReportVerificationError):
    """Raised when a report cannot be parsed as an HTML document."""


class CountMismatchError(ReportVerificationError):
    """Raised when a section shows a different count than expected."""

    def __init__(
        self, section: ResultSection, expected: int, actual: int | None, source: str
    ) -> None:
        self.section = section
        self.expected = expected
        self.actual = actual
        shown = "no summary line" if actual is None else actual
        super().__init__(
            f"Expected {expected} {section.value} ({source}), found {shown}"
        )


class SectionPresentError(ReportVerificationError):
    """Raised when a section expected to be suppressed is in the report."""

    def __init__(self, section: ResultSection) -> None:
        self.section = section
        super().__init__(f"Expected no '{section.summary_marker}' section in report")


@dataclass(frozen=True, kw_only=True)
class ReportVerifier:
    """Queries a parsed report.

    ``count_*`` methods inspect, ``verify_*`` and ``assert_*`` methods raise
    a ReportVerificationError subclass on mismatch.
    """

    document: BeautifulSoup = field(repr=False)
    text: str = field(repr=False)

    @classmethod
    def from_html(cls, html: str) -> "ReportVerifier":
        """Parse a report.

        Raises:
            ReportParseError: If the markup is empty, rejected by the parser,
                or holds no elements at all

        """
        if not html.strip():
            raise ReportParseError("Report is empty")
        try:
            document = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as e:
            raise ReportParseError(f"Report could not be parsed: {e}") from e
        if document.find(True) is None:
            raise ReportParseError("Report has no HTML elements")
        return cls(document=document, text=document.get_text(separator="\n"))

    @classmethod
    def from_path(cls, path: Path) -> "ReportVerifier":
        return cls.from_html(path.read_text(encoding="utf-8"))

    def count_section(self, section: ResultSection) -> int:
        """Count result entries inside a section, 0 when the section is absent."""
        entries = self.document.select(f"#{section.section_id} .{section.entry_class}")
        return len(entries)

    def count_summary_line(self, section: ResultSection) -> int | None:
        """Return N from the section's ``"<Section>: N"`` summary line.

        Only lines starting with the marker count. The search is limited to
        the summary element when the report has one.
        """
        summary = self.document.find(id=SUMMARY_ELEMENT_ID)
        text = summary.get_text(separator="\n") if summary is not None else self.text
        pattern = rf"^\s*{re.escape(section.summary_marker)}(\d+)"
        match = re.search(pattern, text, re.MULTILINE)
        return int(match.group(1)) if match else None

    def verify_section_count(self, section: ResultSection, expected: int) -> None:
        actual = self.count_section(section)
        if actual != expected:
            raise CountMismatchError(section, expected, actual, "section entries")

    def verify_summary_line(self, section: ResultSection, expected: int) -> None:
        """Check the summary line; a missing line only matches a zero count."""
        actual = self.count_summary_line(section)
        if actual is None and expected == 0:
            return
        if actual != expected:
            raise CountMismatchError(section, expected, actual, "summary line")

    def assert_section_absent(self, sections: Iterable[ResultSection]) -> None:
        """Check that sections are suppressed entirely, not merely empty."""
        for section in sections:
            if section.summary_marker in self.text:
                raise SectionPresentError(section)
            if self.document.find(id=section.section_id) is not None:
                raise SectionPresentError(section)

    def verify(self, expected: ExpectedCounts, engine_name: str = "axe-core") -> None:
        """Check the engine header plus element and summary counts of all sections."""
        if f"Using: {engine_name}" not in self.text:
            raise ReportVerificationError(f"Expected to find 'Using: {engine_name}'")

        for section in ResultSection:
            self.verify_section_count(section, expected.for_section(section))
        for section in ResultSection:
            self.verify_summary_line(section, expected.for_section(section))

        log.debug("Report matches %s", expected)

    def report_context(self) -> str:
        return self._element_text("reportContext")

    def error_message(self) -> str | None:
        """Text of the error message element, None when there is none."""
        element = self.document.find(id="ErrorMessage")
        return element.get_text(strip=True) if element is not None else None

    def _element_text(self, element_id: str) -> str:
        element = self.document.find(id=element_id)
        if element is None:
            raise ReportVerificationError(f"Report has no #{element_id} element")
        return element.get_text()
