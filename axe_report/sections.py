"""Result sections and the report types selecting which of them get rendered."""

from enum import StrEnum
from typing import TypeAlias


class ResultSection(StrEnum):
    """Category of an axe finding, in report order."""

    VIOLATIONS = "Violations"
    PASSES = "Passes"
    INCOMPLETE = "Incomplete"
    INAPPLICABLE = "Inapplicable"

    @property
    def result_key(self) -> str:
        """Key of the category in axe's JSON output (and on ScanResult)."""
        return self.value.lower()

    @property
    def section_id(self) -> str:
        """Id of the element wrapping the section in the HTML report."""
        return f"{self.value}Section"

    @property
    def entry_class(self) -> str:
        """CSS class of one result entry inside the section.

        Inapplicable rules have no nodes, so they are listed as plain
        findings instead of per-node tables.
        """
        if self is ResultSection.INAPPLICABLE:
            return "findings"
        return "htmlTable"

    @property
    def summary_marker(self) -> str:
        """Prefix of the section's summary line, e.g. ``"Violations: "``."""
        return f"{self.value}: "


ReportTypes: TypeAlias = frozenset[ResultSection]

ALL_REPORT_TYPES: ReportTypes = frozenset(ResultSection)


def parse_report_types(value: str) -> ReportTypes:
    """Parse a comma-separated, case-insensitive list of section names.

    An empty value selects every section.
    """
    names = [name.strip() for name in value.split(",") if name.strip()]
    if not names:
        return ALL_REPORT_TYPES

    by_name = {section.value.lower(): section for section in ResultSection}
    selected: set[ResultSection] = set()
    for name in names:
        try:
            selected.add(by_name[name.lower()])
        except KeyError:
            available = [section.value for section in ResultSection]
            raise ValueError(
                f"Unknown report type '{name}'. Available report types: {available}"
            ) from None
    return frozenset(selected)
