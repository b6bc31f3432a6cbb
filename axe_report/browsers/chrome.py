"""Chrome browser plugin."""

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.remote.webdriver import WebDriver

from axe_report.browsers.config import BrowserConfig
from axe_report.browsers.manifest import BrowserManifest


def create_chrome_driver(config: BrowserConfig) -> WebDriver:
    """Launch a local Chrome driver."""
    options = Options()
    options.unhandled_prompt_behavior = "accept"
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--log-level=3")
    options.add_argument("--silent")
    if config.headless:
        options.add_argument("--headless=new")

    executable = config.driver_executable("chromedriver")
    service = Service(executable_path=executable) if executable else Service()

    return webdriver.Chrome(service=service, options=options)


chrome_manifest = BrowserManifest(
    driver_directory_env="ChromeWebDriver",
    driver_factory=create_chrome_driver,
)
