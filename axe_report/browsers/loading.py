"""Loading of browsers from entry points."""

from importlib.metadata import entry_points

from axe_report.browsers.manifest import BrowserManifest

ENTRY_POINT_GROUP = "axe_report.browsers"


class UnsupportedBrowserError(ValueError):
    """Raised when a browser is not supported."""


def load_browser_manifest(key: str) -> BrowserManifest:
    """Load a browser manifest by key.

    Args:
        key: The browser key as registered in pyproject.toml, matched
             case-insensitively (e.g., "chrome", "Firefox")

    Returns:
        The browser manifest instance

    Raises:
        UnsupportedBrowserError: If no browser with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)
    normalized = key.strip().lower()

    for entry in entries:
        if entry.name == normalized:
            manifest: BrowserManifest = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise UnsupportedBrowserError(
        f"Browser type '{key}' is not supported. Available browsers: {available}"
    )
