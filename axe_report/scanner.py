"""Running axe-core in a Selenium-driven page."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, TypeAlias

from axe_selenium_python import Axe
from pydantic import ValidationError
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from axe_report.models.options import ScanOptions
from axe_report.models.result import ScanResult

log = logging.getLogger(__name__)

# Runs axe asynchronously and hands either the results or the error back to
# selenium. arguments[0] is the context (element, selector or null),
# arguments[1] the run options.
AXE_RUN_SCRIPT = """
var callback = arguments[arguments.length - 1];
axe.run(arguments[0] || document, arguments[1] || {})
    .then(function (results) { callback(results); })
    .catch(function (error) { callback({error: String(error)}); });
"""

ScanContext: TypeAlias = WebElement | str | None


class AxeRunError(Exception):
    """Raised when axe fails to produce a result."""


@dataclass(frozen=True, kw_only=True)
class AxeScanner:
    """Configures and runs axe against the page loaded in a driver.

    Every ``with_*`` method returns a new scanner, so a base scanner can be
    shared between scans with different options.
    """

    driver: WebDriver
    options: ScanOptions = field(default_factory=ScanOptions)
    output_file: Path | None = None
    # Defaults to axe_selenium_python's Axe, which bundles axe.min.js
    axe_factory: Callable[[WebDriver], Axe] | None = field(default=None, repr=False)

    def with_options(self, options: ScanOptions) -> "AxeScanner":
        return replace(self, options=options)

    def with_tags(self, *tags: str) -> "AxeScanner":
        return self._update_options(tags=list(tags))

    def disable_rules(self, *rule_ids: str) -> "AxeScanner":
        return self._update_options(disabled_rules=list(rule_ids))

    def with_xpath(self, enabled: bool = True) -> "AxeScanner":
        return self._update_options(xpath=enabled)

    def with_output_file(self, path: Path | str) -> "AxeScanner":
        return replace(self, output_file=Path(path))

    def _update_options(self, **changes: Any) -> "AxeScanner":
        return replace(self, options=self.options.model_copy(update=changes))

    def analyze(self, context: ScanContext = None) -> ScanResult:
        """Scan the page, a CSS selector, or a single element.

        Args:
            context: Element or CSS selector restricting the scan; the whole
                document when None

        Returns:
            The scan result, restricted to the configured tags and rules

        Raises:
            AxeRunError: If axe reports an error or returns no result

        """
        axe = (self.axe_factory or Axe)(self.driver)
        self.driver.switch_to.default_content()
        self._inject(axe)

        run_options = self.options.to_run_options()
        log.info("Running axe (context=%s, options=%s)", _describe(context), run_options)
        raw = self.driver.execute_async_script(AXE_RUN_SCRIPT, context, run_options)

        if not isinstance(raw, Mapping):
            raise AxeRunError(f"axe returned no result: {raw!r}")
        if "violations" not in raw:
            raise AxeRunError(f"axe run failed: {raw.get('error', 'unknown error')}")

        if self.output_file is not None:
            log.info("Writing raw axe results to %s", self.output_file)
            axe.write_results(raw, str(self.output_file))

        try:
            result = ScanResult.model_validate(raw)
        except ValidationError as e:
            raise AxeRunError(f"axe returned an unexpected result: {e}") from e

        result = self.options.result_filter.apply(result)
        log.info(
            "axe found %d violation(s) across %d rule(s) on %s",
            sum(len(rule.nodes) for rule in result.violations),
            len(result.violations),
            result.url,
        )
        return result

    def _inject(self, axe: Axe) -> None:
        """Inject axe into the current document and every nested frame."""
        axe.inject()
        for frame in self.driver.find_elements(By.TAG_NAME, "iframe"):
            self.driver.switch_to.frame(frame)
            try:
                self._inject(axe)
            finally:
                self.driver.switch_to.parent_frame()


def analyze(driver: WebDriver, context: ScanContext = None) -> ScanResult:
    """Scan with default options."""
    return AxeScanner(driver=driver).analyze(context)


def _describe(context: ScanContext) -> str:
    if context is None:
        return "document"
    if isinstance(context, str):
        return context
    return f"<{context.tag_name}>"
