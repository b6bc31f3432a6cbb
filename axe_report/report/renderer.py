"""HTML rendering of scan results."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from axe_report.models.result import ScanResult, TargetFrame
from axe_report.sections import ALL_REPORT_TYPES, ReportTypes, ResultSection

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def format_target(target: Sequence[TargetFrame]) -> str:
    """Join target hops with ``" -> "`` and shadow selectors with ``" >>> "``."""
    return " -> ".join(" >>> ".join(frame.selectors) for frame in target)


def _create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["format_target"] = format_target
    return env


@dataclass(frozen=True, kw_only=True)
class HtmlReportRenderer:
    """Renders a scan result as a standalone HTML document.

    Only sections selected by the report types and holding at least one
    entry appear, both in the summary and as a section element.
    """

    environment: Environment = field(default_factory=_create_environment, repr=False)

    def render(
        self, result: ScanResult, report_types: ReportTypes = ALL_REPORT_TYPES
    ) -> str:
        sections = [
            section
            for section in ResultSection
            if section in report_types and result.count(section) > 0
        ]
        counts = {section: result.count(section) for section in sections}

        template = self.environment.get_template(TEMPLATE_NAME)
        return template.render(result=result, sections=sections, counts=counts)

    def write(
        self,
        result: ScanResult,
        path: Path,
        report_types: ReportTypes = ALL_REPORT_TYPES,
    ) -> Path:
        """Render the result and write it to ``path``."""
        html = self.render(result, report_types)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        log.info(
            "Wrote HTML report to %s (sections: %s)",
            path,
            ", ".join(sorted(s.value for s in report_types)) or "none",
        )
        return path
