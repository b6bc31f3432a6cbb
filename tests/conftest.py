"""Shared fixtures: paths to the fixture pages and the sample result."""

from pathlib import Path

import pytest

from axe_report.models.result import ScanResult
from axe_report.snapshot import load_snapshot

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Directory holding fixture pages and snapshots."""
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def sample_results_path(fixtures_dir: Path) -> Path:
    """Persisted axe result with 3 violations, 5 passes, 2 incomplete, 4 inapplicable."""
    return fixtures_dir / "SampleResults.json"


@pytest.fixture
def sample_result(sample_results_path: Path) -> ScanResult:
    """Sample result parsed from its snapshot."""
    return load_snapshot(sample_results_path)
