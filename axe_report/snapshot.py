"""Loading of persisted axe results."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from axe_report.models.result import ScanResult
from axe_report.sections import ResultSection

log = logging.getLogger(__name__)


class SnapshotParseError(Exception):
    """Raised when a persisted result cannot be parsed."""


def load_snapshot(path: Path) -> ScanResult:
    """Load a scan result previously written as axe JSON.

    Args:
        path: Path to the JSON file

    Returns:
        The parsed scan result

    Raises:
        FileNotFoundError: If the file does not exist
        SnapshotParseError: If the file is not valid JSON or does not
            describe an axe result

    """
    text = path.read_text(encoding="utf-8")
    result = parse_snapshot(text, source=str(path))
    log.info(
        "Loaded snapshot %s (%s)",
        path,
        ", ".join(f"{s.result_key}={result.count(s)}" for s in ResultSection),
    )
    return result


def parse_snapshot(text: str, source: str = "<string>") -> ScanResult:
    """Parse axe JSON text into a scan result."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotParseError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotParseError(
            f"Expected a JSON object in {source}, got {type(data).__name__}"
        )

    try:
        return ScanResult.model_validate(data)
    except ValidationError as e:
        raise SnapshotParseError(f"Invalid axe result in {source}: {e}") from e
