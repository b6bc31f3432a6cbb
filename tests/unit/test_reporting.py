"""Tests for create_html_report."""

from pathlib import Path
from unittest.mock import Mock

import pytest
from selenium.webdriver.remote.webdriver import WebDriver

from axe_report.models.result import ScanResult
from axe_report.report.verifier import ReportVerifier
from axe_report.reporting import create_html_report
from axe_report.scanner import AxeScanner
from axe_report.sections import ResultSection


def test_renders_given_result_without_scanning(
    sample_result: ScanResult, tmp_path: Path
) -> None:
    """An existing result is rendered as is."""
    path = tmp_path / "report.html"

    returned = create_html_report(path, result=sample_result)

    assert returned is sample_result
    verifier = ReportVerifier.from_path(path)
    assert verifier.count_section(ResultSection.VIOLATIONS) == 3


def test_scans_with_given_scanner(sample_result: ScanResult, tmp_path: Path) -> None:
    """A preconfigured scanner is used for the scan, with the context."""
    scanner = Mock(spec=AxeScanner)
    scanner.analyze.return_value = sample_result
    path = tmp_path / "report.html"

    create_html_report(
        path,
        scanner=scanner,
        context="main",
        report_types=frozenset({ResultSection.VIOLATIONS}),
    )

    scanner.analyze.assert_called_once_with("main")
    verifier = ReportVerifier.from_path(path)
    verifier.assert_section_absent(
        [ResultSection.PASSES, ResultSection.INCOMPLETE, ResultSection.INAPPLICABLE]
    )


def test_scans_driver_page(
    sample_result: ScanResult, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """With only a driver, the page is scanned with default options."""
    analyze = Mock(return_value=sample_result)
    monkeypatch.setattr(AxeScanner, "analyze", analyze)

    result = create_html_report(tmp_path / "report.html", driver=Mock(spec=WebDriver))

    assert result is sample_result
    analyze.assert_called_once_with(None)


def test_requires_a_source(tmp_path: Path) -> None:
    """Without driver, scanner or result there is nothing to report."""
    with pytest.raises(ValueError, match="driver, a scanner or a result"):
        create_html_report(tmp_path / "report.html")
