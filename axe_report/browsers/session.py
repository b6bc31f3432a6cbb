"""Scoped browser sessions."""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions
from selenium.webdriver.support.ui import WebDriverWait

from axe_report.browsers.config import DEFAULT_TIMEOUT, BrowserConfig
from axe_report.browsers.loading import load_browser_manifest

log = logging.getLogger(__name__)

MAIN_ELEMENT_SELECTOR = "main"


@dataclass(frozen=True, kw_only=True)
class BrowserSession:
    """A live driver plus the timeout applied to every wait."""

    driver: WebDriver
    timeout: float = DEFAULT_TIMEOUT

    def wait_for(self, by: str, value: str) -> WebElement:
        """Wait until an element is present and return it.

        Raises:
            TimeoutException: If the element does not appear within the
                session timeout

        """
        wait = WebDriverWait(self.driver, self.timeout)
        element: WebElement = wait.until(
            expected_conditions.presence_of_element_located((by, value))
        )
        return element

    def load_page(
        self, url: str, ready_selector: str = MAIN_ELEMENT_SELECTOR
    ) -> WebElement:
        """Navigate to a URL and wait for the element signalling it is ready."""
        log.info("Loading page %s", url)
        self.driver.get(url)
        return self.wait_for(By.CSS_SELECTOR, ready_selector)

    def load_file(
        self, path: Path, ready_selector: str = MAIN_ELEMENT_SELECTOR
    ) -> WebElement:
        """Open a local HTML file and wait for its ready element."""
        return self.load_page(path.resolve().as_uri(), ready_selector)


@contextmanager
def open_session(
    browser: str, config: BrowserConfig | None = None
) -> Generator[BrowserSession, None, None]:
    """Launch a browser and quit it when the block exits, however it exits.

    Args:
        browser: Browser key (e.g., "chrome", "Firefox")
        config: Driver configuration; read from the browser's environment
            variable when omitted

    Raises:
        UnsupportedBrowserError: If the browser is unknown, before anything
            is launched

    """
    manifest = load_browser_manifest(browser)
    config = config or manifest.default_config()

    log.info("Starting %s driver (headless=%s)", browser, config.headless)
    driver = manifest.driver_factory(config)
    try:
        driver.set_script_timeout(config.timeout)
        driver.set_page_load_timeout(config.timeout)
        if config.maximize:
            driver.maximize_window()
        yield BrowserSession(driver=driver, timeout=config.timeout)
    finally:
        log.info("Quitting %s driver", browser)
        driver.quit()
