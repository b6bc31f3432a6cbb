"""Firefox browser plugin."""

from selenium import webdriver
from selenium.webdriver.firefox.options import Options
from selenium.webdriver.firefox.service import Service
from selenium.webdriver.remote.webdriver import WebDriver

from axe_report.browsers.config import BrowserConfig
from axe_report.browsers.manifest import BrowserManifest


def create_firefox_driver(config: BrowserConfig) -> WebDriver:
    """Launch a local Firefox (geckodriver) driver."""
    options = Options()
    if config.headless:
        options.add_argument("-headless")

    executable = config.driver_executable("geckodriver")
    service = Service(executable_path=executable) if executable else Service()

    return webdriver.Firefox(service=service, options=options)


firefox_manifest = BrowserManifest(
    driver_directory_env="GeckoWebDriver",
    driver_factory=create_firefox_driver,
)
