"""Configuration shared by all browser drivers."""

import os
from pathlib import Path

from pydantic import BaseModel

DEFAULT_TIMEOUT = 20.0


class BrowserConfig(BaseModel):
    """Configuration for launching a browser driver."""

    # Directory holding the driver executable; None lets selenium locate it
    driver_directory: Path | None = None
    headless: bool = True
    timeout: float = DEFAULT_TIMEOUT
    maximize: bool = True

    @classmethod
    def from_env(cls, env_var: str, **overrides: object) -> "BrowserConfig":
        """Build a config reading the driver directory from ``env_var``."""
        directory = os.environ.get(env_var)
        return cls.model_validate(
            {"driver_directory": Path(directory) if directory else None, **overrides}
        )

    def driver_executable(self, name: str) -> str | None:
        """Path of the named driver executable inside the driver directory."""
        if self.driver_directory is None:
            return None
        return str(self.driver_directory / name)
