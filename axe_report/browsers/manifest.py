"""Browser manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from selenium.webdriver.remote.webdriver import WebDriver

from axe_report.browsers.config import BrowserConfig


@dataclass(frozen=True, kw_only=True)
class BrowserManifest:
    """Manifest describing a browser plugin.

    The manifest names the environment variable holding the driver directory
    and the factory launching the driver, so a browser is only started once
    its key has been resolved.
    """

    driver_directory_env: str
    driver_factory: Callable[[BrowserConfig], WebDriver]

    def default_config(self) -> BrowserConfig:
        return BrowserConfig.from_env(self.driver_directory_env)
