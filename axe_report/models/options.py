"""Models for configuring an axe run."""

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from axe_report.filtering import ResultFilter
from axe_report.models.base import Model


class ScanOptions(Model):
    """Options of a single scan invocation."""

    tags: Sequence[str] = Field(
        default_factory=list,
        description="Only run rules carrying one of these tags (empty means all)",
    )
    disabled_rules: Sequence[str] = Field(
        default_factory=list, description="Rule ids excluded from the run"
    )
    xpath: bool = Field(default=False, description="Ask axe to report node xpaths")

    @property
    def result_filter(self) -> ResultFilter:
        """Filter enforcing the same tag and rule restrictions on a result."""
        return ResultFilter.create(tags=self.tags, disabled_rules=self.disabled_rules)

    def to_run_options(self) -> dict[str, Any]:
        """Build the options object passed to ``axe.run``."""
        options: dict[str, Any] = {}
        if self.tags:
            options["runOnly"] = {"type": "tag", "values": list(self.tags)}
        if self.disabled_rules:
            options["rules"] = {
                rule_id: {"enabled": False} for rule_id in self.disabled_rules
            }
        if self.xpath:
            options["xpath"] = True
        return options
