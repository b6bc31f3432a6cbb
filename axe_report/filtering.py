"""Tag and rule filtering of scan results."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from axe_report.models.result import RuleResult, ScanResult
from axe_report.sections import ResultSection

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ResultFilter:
    """Restricts a result to requested tags and drops disabled rules.

    An empty tag set means no tag restriction.
    """

    tags: frozenset[str] = frozenset()
    disabled_rules: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls, tags: Iterable[str] = (), disabled_rules: Iterable[str] = ()
    ) -> "ResultFilter":
        return cls(tags=frozenset(tags), disabled_rules=frozenset(disabled_rules))

    def includes(self, rule: RuleResult) -> bool:
        """Check whether a rule survives the filter."""
        if rule.id in self.disabled_rules:
            return False
        if self.tags:
            return not self.tags.isdisjoint(rule.tags)
        return True

    def apply(self, result: ScanResult) -> ScanResult:
        """Return a copy of the result holding only included rules."""
        if not self.tags and not self.disabled_rules:
            return result

        update = {}
        for section in ResultSection:
            rules = result.rules(section)
            kept = tuple(rule for rule in rules if self.includes(rule))
            if len(kept) != len(rules):
                log.debug(
                    "Filtered %s: kept %d of %d rule(s)",
                    section.result_key,
                    len(kept),
                    len(rules),
                )
            update[section.result_key] = kept
        return result.model_copy(update=update)
