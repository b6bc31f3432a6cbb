"""CLI entry point for axe scans and HTML reports."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from axe_report.browsers.config import BrowserConfig
from axe_report.browsers.loading import load_browser_manifest
from axe_report.browsers.session import MAIN_ELEMENT_SELECTOR, open_session
from axe_report.models.expected import ExpectedCounts
from axe_report.models.options import ScanOptions
from axe_report.models.result import ScanResult
from axe_report.report.renderer import HtmlReportRenderer
from axe_report.report.verifier import ReportVerificationError, ReportVerifier
from axe_report.scanner import AxeScanner
from axe_report.sections import (
    ALL_REPORT_TYPES,
    ReportTypes,
    ResultSection,
    parse_report_types,
)
from axe_report.snapshot import load_snapshot

log = logging.getLogger("axe_report")


def log_results_summary(log: logging.Logger, result: ScanResult) -> None:
    """Log a formatted summary of a scan result."""
    log.info("=" * 80)
    log.info("Scan Results Summary: %s", result.url)
    log.info("=" * 80)

    for section in ResultSection:
        log.info(
            "%s: %d (%d rule(s))",
            section.value,
            result.count(section),
            len(result.rules(section)),
        )

    for rule in result.violations:
        log.info("  %s [%s]: %d node(s)", rule.id, rule.impact, len(rule.nodes))
        if rule.help_url:
            log.info("    Help: %s", rule.help_url)

    if result.error:
        log.info("Error: %s", result.error)


def parse_csv(value: str) -> Sequence[str]:
    """Parse a comma-separated list, ignoring blanks."""
    if not value.strip():
        return ()
    return tuple(s.strip() for s in value.split(",") if s.strip())


def format_output(result: ScanResult) -> dict[str, Any]:
    """Format a scan result summary for JSON output."""
    return {
        "url": result.url,
        "engine": f"{result.test_engine_name} {result.test_engine_version}".strip(),
        "counts": {
            section.result_key: result.count(section) for section in ResultSection
        },
        "violations": [
            {
                "id": rule.id,
                "impact": rule.impact,
                "nodes": len(rule.nodes),
                "help_url": rule.help_url,
            }
            for rule in result.violations
        ],
        "error": result.error,
    }


def run_scan(
    browser: str,
    url: str,
    options: ScanOptions,
    browser_config_json: str | None = None,
    context: str | None = None,
    output_file: Path | None = None,
    report: Path | None = None,
    report_types: ReportTypes = ALL_REPORT_TYPES,
) -> int:
    """Scan a page and return exit code (1 when violations were found)."""
    manifest = load_browser_manifest(browser)
    if browser_config_json:
        config = BrowserConfig(**json.loads(browser_config_json))
    else:
        config = manifest.default_config()

    with open_session(browser, config) as session:
        session.load_page(url, ready_selector=context or MAIN_ELEMENT_SELECTOR)
        scanner = AxeScanner(driver=session.driver, options=options)
        if output_file is not None:
            scanner = scanner.with_output_file(output_file)
        result = scanner.analyze(context)

    log_results_summary(log, result)

    if report is not None:
        HtmlReportRenderer().write(result, report, report_types)

    print(json.dumps(format_output(result), indent=2))
    return 1 if result.violations else 0


def run_render(
    snapshot: Path, report: Path, report_types: ReportTypes = ALL_REPORT_TYPES
) -> int:
    """Render a persisted result and return exit code."""
    result = load_snapshot(snapshot)
    HtmlReportRenderer().write(result, report, report_types)
    print(json.dumps(format_output(result), indent=2))
    return 0


def run_verify(
    report: Path, expected: ExpectedCounts, absent: ReportTypes = frozenset()
) -> int:
    """Verify a rendered report and return exit code."""
    try:
        verifier = ReportVerifier.from_path(report)
        verifier.verify(expected)
        verifier.assert_section_absent(sorted(absent))
    except ReportVerificationError as e:
        log.error("Report verification failed: %s", e)
        return 1

    log.info("Report %s matches %s", report, expected)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run axe accessibility scans and check HTML reports"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan a page in a browser")
    scan.add_argument("--browser", default="chrome", help="Browser key (chrome, firefox)")
    scan.add_argument("--url", required=True, help="URL of the page to scan")
    scan.add_argument("--tags", default="", help="Comma-separated rule tags to run")
    scan.add_argument(
        "--disable-rules", default="", help="Comma-separated rule ids to skip"
    )
    scan.add_argument("--xpath", action="store_true", help="Report node xpaths")
    scan.add_argument(
        "--context", default=None, help="CSS selector of the element to scan"
    )
    scan.add_argument(
        "--output-file", type=Path, default=None, help="Path for the raw axe JSON"
    )
    scan.add_argument("--report", type=Path, default=None, help="Path for an HTML report")
    scan.add_argument(
        "--report-types",
        default="",
        help="Comma-separated sections to render (default: all)",
    )
    scan.add_argument(
        "--browser-config",
        default=None,
        help="JSON configuration for the browser driver",
    )

    render = subparsers.add_parser("render", help="Render a saved axe result")
    render.add_argument("--snapshot", type=Path, required=True, help="axe JSON file")
    render.add_argument("--report", type=Path, required=True, help="Path for the report")
    render.add_argument(
        "--report-types",
        default="",
        help="Comma-separated sections to render (default: all)",
    )

    verify = subparsers.add_parser("verify", help="Check counts in an HTML report")
    verify.add_argument("--report", type=Path, required=True, help="HTML report")
    verify.add_argument("--violations", type=int, required=True)
    verify.add_argument("--passes", type=int, required=True)
    verify.add_argument("--incomplete", type=int, default=0)
    verify.add_argument("--inapplicable", type=int, default=0)
    verify.add_argument(
        "--absent",
        default="",
        help="Comma-separated sections that must not appear at all",
    )

    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.command == "scan":
        exit_code = run_scan(
            browser=args.browser,
            url=args.url,
            options=ScanOptions(
                tags=parse_csv(args.tags),
                disabled_rules=parse_csv(args.disable_rules),
                xpath=args.xpath,
            ),
            browser_config_json=args.browser_config,
            context=args.context,
            output_file=args.output_file,
            report=args.report,
            report_types=parse_report_types(args.report_types),
        )
    elif args.command == "render":
        exit_code = run_render(
            snapshot=args.snapshot,
            report=args.report,
            report_types=parse_report_types(args.report_types),
        )
    else:
        exit_code = run_verify(
            report=args.report,
            expected=ExpectedCounts(
                violations=args.violations,
                passes=args.passes,
                incomplete=args.incomplete,
                inapplicable=args.inapplicable,
            ),
            absent=(
                parse_report_types(args.absent) if args.absent.strip() else frozenset()
            ),
        )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
