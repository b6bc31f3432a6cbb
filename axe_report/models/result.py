"""Models for axe-core scan results."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator, model_serializer, model_validator

from axe_report.models.base import Model
from axe_report.sections import ResultSection


class TargetFrame(Model):
    """One hop of a node target.

    axe reports a hop either as a single CSS selector or, when the element
    sits behind shadow roots, as a list of selectors (one per boundary).
    """

    selectors: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def from_axe_hop(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"selectors": (data,)}
        if isinstance(data, list | tuple):
            return {"selectors": tuple(data)}
        return data

    @model_serializer
    def to_axe_hop(self) -> str | list[str]:
        if len(self.selectors) == 1:
            return self.selectors[0]
        return list(self.selectors)


class RelatedNode(Model):
    """Element referenced by a check as context for its result."""

    html: str = ""
    target: tuple[TargetFrame, ...] = ()


class CheckResult(Model):
    """Outcome of a single axe check on a node."""

    id: str
    impact: str | None = None
    message: str = ""
    data: Any = None
    related_nodes: tuple[RelatedNode, ...] = ()


class NodeResult(Model):
    """Element affected by a rule."""

    html: str = ""
    impact: str | None = None
    target: tuple[TargetFrame, ...] = ()
    xpath: str | None = None
    failure_summary: str | None = None
    any_checks: tuple[CheckResult, ...] = Field(default=(), alias="any")
    all_checks: tuple[CheckResult, ...] = Field(default=(), alias="all")
    none_checks: tuple[CheckResult, ...] = Field(default=(), alias="none")

    @field_validator("xpath", mode="before")
    @classmethod
    def innermost_xpath(cls, value: Any) -> Any:
        # axe emits one xpath per frame hop; the last one locates the element.
        if isinstance(value, list | tuple):
            return value[-1] if value else None
        return value

    @property
    def last_target(self) -> TargetFrame | None:
        """Innermost target hop, or None when the target is empty."""
        return self.target[-1] if self.target else None


class RuleResult(Model):
    """A rule and the nodes it reported for one category."""

    id: str
    impact: str | None = None
    tags: frozenset[str] = Field(default_factory=frozenset)
    description: str = ""
    help: str = ""
    help_url: str = ""
    nodes: tuple[NodeResult, ...] = ()


class TestEngine(Model):
    """Engine that produced the result."""

    __test__ = False

    name: str = ""
    version: str = ""


class TestEnvironment(Model):
    """Browser environment the scan ran in."""

    __test__ = False

    user_agent: str = ""
    window_width: int = 0
    window_height: int = 0
    orientation_angle: int | None = None
    orientation_type: str | None = None


class ScanResult(Model):
    """Complete outcome of one axe run."""

    url: str = ""
    timestamp: str = ""
    test_engine: TestEngine = Field(default_factory=TestEngine)
    test_environment: TestEnvironment = Field(default_factory=TestEnvironment)
    tool_options: Mapping[str, Any] = Field(default_factory=dict)
    error: str | None = None
    violations: tuple[RuleResult, ...] = ()
    passes: tuple[RuleResult, ...] = ()
    incomplete: tuple[RuleResult, ...] = ()
    inapplicable: tuple[RuleResult, ...] = ()

    @property
    def test_engine_name(self) -> str:
        return self.test_engine.name

    @property
    def test_engine_version(self) -> str:
        return self.test_engine.version

    def rules(self, section: ResultSection) -> tuple[RuleResult, ...]:
        """Return the rules reported for a section."""
        rules: tuple[RuleResult, ...] = getattr(self, section.result_key)
        return rules

    def count(self, section: ResultSection) -> int:
        """Count the entries a report shows for a section.

        Nodes for violations, passes and incomplete; rules for inapplicable,
        which never carry nodes.
        """
        rules = self.rules(section)
        if section is ResultSection.INAPPLICABLE:
            return len(rules)
        return sum(len(rule.nodes) for rule in rules)

    def find_rule(
        self, rule_id: str, section: ResultSection = ResultSection.VIOLATIONS
    ) -> RuleResult | None:
        """Return the first rule with the given id in a section."""
        return next((rule for rule in self.rules(section) if rule.id == rule_id), None)
