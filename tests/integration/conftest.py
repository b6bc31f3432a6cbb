"""Fixtures for integration tests driving a real browser."""

import os
from collections.abc import Generator
from pathlib import Path
from uuid import uuid4

import pytest

from axe_report.browsers.config import BrowserConfig
from axe_report.browsers.session import BrowserSession, open_session

BROWSER_TESTS_ENV = "AXE_REPORT_BROWSER_TESTS"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Skip browser tests unless explicitly enabled."""
    if os.environ.get(BROWSER_TESTS_ENV) == "1":
        return
    skip = pytest.mark.skip(reason=f"set {BROWSER_TESTS_ENV}=1 to drive a browser")
    for item in items:
        if "browser" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(params=["Chrome", "Firefox"])
def browser(request: pytest.FixtureRequest) -> str:
    """Browser key, in the mixed case callers tend to use."""
    param: str = request.param
    return param


@pytest.fixture
def session(browser: str) -> Generator[BrowserSession, None, None]:
    """One driver per test, quit on every exit path."""
    with open_session(browser, BrowserConfig(headless=True)) as session:
        yield session


@pytest.fixture
def simple_page(fixtures_dir: Path) -> Path:
    """Fixture page with image-alt, label, color-contrast and region problems."""
    return fixtures_dir / "integration-test-simple.html"


@pytest.fixture
def complex_targets_page(fixtures_dir: Path) -> Path:
    """Fixture page with low-contrast text inside shadow roots."""
    return fixtures_dir / "integration-test-target-complex.html"


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Fresh path for an HTML report."""
    return tmp_path / f"{uuid4()}.html"
