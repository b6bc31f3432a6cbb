"""Tests for tag and rule filtering."""

import pytest

from axe_report.filtering import ResultFilter
from axe_report.models.result import ScanResult
from axe_report.sections import ResultSection
from axe_report.testing.factories import RuleResultFactory, ScanResultFactory


@pytest.fixture
def mixed_result() -> ScanResult:
    """Result with rules spread over tags, including an untagged one."""
    return ScanResultFactory.build(
        violations=[
            RuleResultFactory.build(id="image-alt", tags=frozenset({"wcag2a", "wcag111"})),
            RuleResultFactory.build(id="color-contrast", tags=frozenset({"wcag2aa"})),
            RuleResultFactory.build(id="region", tags=frozenset({"best-practice"})),
            RuleResultFactory.build(id="untagged", tags=frozenset()),
        ],
        passes=[
            RuleResultFactory.build(id="color-contrast", tags=frozenset({"wcag2aa"})),
            RuleResultFactory.build(id="document-title", tags=frozenset({"wcag2a"})),
        ],
    )


class TestIncludes:
    """Tests for ResultFilter.includes."""

    def test_no_restrictions_includes_everything(self) -> None:
        """An empty filter keeps every rule, untagged ones too."""
        result_filter = ResultFilter()

        assert result_filter.includes(RuleResultFactory.build(tags=frozenset()))

    def test_disabled_rule_is_excluded(self) -> None:
        """Disabled rule ids are excluded even when their tags match."""
        result_filter = ResultFilter.create(
            tags=["wcag2aa"], disabled_rules=["color-contrast"]
        )
        rule = RuleResultFactory.build(id="color-contrast", tags=frozenset({"wcag2aa"}))

        assert not result_filter.includes(rule)

    def test_rule_without_tags_excluded_by_tag_filter(self) -> None:
        """A rule with no tags never matches a non-empty tag filter."""
        result_filter = ResultFilter.create(tags=["wcag2a"])

        assert not result_filter.includes(RuleResultFactory.build(tags=frozenset()))

    def test_any_shared_tag_is_enough(self) -> None:
        """Tags only need to intersect, not match completely."""
        result_filter = ResultFilter.create(tags=["wcag2a", "wcag2aa"])
        rule = RuleResultFactory.build(tags=frozenset({"wcag2aa", "wcag143", "cat.color"}))

        assert result_filter.includes(rule)


class TestApply:
    """Tests for ResultFilter.apply."""

    def test_returns_same_result_without_restrictions(
        self, mixed_result: ScanResult
    ) -> None:
        """An empty filter returns the result unchanged."""
        assert ResultFilter().apply(mixed_result) is mixed_result

    def test_tags_and_disabled_rules(self, mixed_result: ScanResult) -> None:
        """Keeps only rules matching the tags and not disabled."""
        result_filter = ResultFilter.create(
            tags=["wcag2a", "wcag2aa"], disabled_rules=["color-contrast"]
        )

        filtered = result_filter.apply(mixed_result)

        assert [rule.id for rule in filtered.violations] == ["image-alt"]
        assert [rule.id for rule in filtered.passes] == ["document-title"]

    def test_does_not_modify_original(self, mixed_result: ScanResult) -> None:
        """Filtering returns a new result and leaves the input intact."""
        ResultFilter.create(disabled_rules=["image-alt"]).apply(mixed_result)

        assert len(mixed_result.violations) == 4

    def test_filtered_sections_stay_immutable(self, mixed_result: ScanResult) -> None:
        """Filtered sections are tuples like the parsed ones."""
        filtered = ResultFilter.create(tags=["wcag2a"]).apply(mixed_result)

        for section in ResultSection:
            assert isinstance(filtered.rules(section), tuple)

    @pytest.mark.parametrize(
        ("tags", "disabled"),
        [
            ((), ("color-contrast",)),
            (("wcag2a",), ()),
            (("wcag2aa",), ("image-alt",)),
            (("wcag2a", "wcag2aa"), ("color-contrast",)),
            (("best-practice",), ("region",)),
        ],
    )
    def test_invariants_hold_for_every_section(
        self,
        mixed_result: ScanResult,
        tags: tuple[str, ...],
        disabled: tuple[str, ...],
    ) -> None:
        """No disabled id survives; with tags, every rule intersects them."""
        filtered = ResultFilter.create(tags=tags, disabled_rules=disabled).apply(
            mixed_result
        )

        for section in ResultSection:
            for rule in filtered.rules(section):
                assert rule.id not in disabled
                if tags:
                    assert rule.tags & set(tags)

    def test_keeps_engine_metadata(self, mixed_result: ScanResult) -> None:
        """Only rule sequences change; metadata is carried over."""
        filtered = ResultFilter.create(tags=["wcag2a"]).apply(mixed_result)

        assert filtered.url == mixed_result.url
        assert filtered.test_engine == mixed_result.test_engine
