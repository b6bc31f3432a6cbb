"""Scan-and-render entry point for HTML reports."""

from pathlib import Path

from selenium.webdriver.remote.webdriver import WebDriver

from axe_report.models.result import ScanResult
from axe_report.report.renderer import HtmlReportRenderer
from axe_report.scanner import AxeScanner, ScanContext
from axe_report.sections import ALL_REPORT_TYPES, ReportTypes


def create_html_report(
    path: Path,
    *,
    driver: WebDriver | None = None,
    result: ScanResult | None = None,
    context: ScanContext = None,
    report_types: ReportTypes = ALL_REPORT_TYPES,
    scanner: AxeScanner | None = None,
    renderer: HtmlReportRenderer | None = None,
) -> ScanResult:
    """Write an HTML report for a result, scanning the page first if needed.

    Args:
        path: Destination of the report
        driver: Driver whose page is scanned when no result is given
        result: Existing result (e.g., a loaded snapshot) to render as is
        context: Element or selector to scan instead of the whole page
        report_types: Sections to include in the report
        scanner: Preconfigured scanner, used instead of a default one
        renderer: Renderer to use instead of the default one

    Returns:
        The rendered result

    """
    if result is None:
        if scanner is None:
            if driver is None:
                raise ValueError("Either a driver, a scanner or a result is required")
            scanner = AxeScanner(driver=driver)
        result = scanner.analyze(context)

    (renderer or HtmlReportRenderer()).write(result, path, report_types)
    return result
