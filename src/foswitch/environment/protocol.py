"""Protocols for the platform environment foswitch collaborates with."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class EnvironmentSettingsProvider(Protocol):
    """Protocol for reading the platform's current environment settings."""

    def metadata_directory(self) -> Path | None:
        """Return the metadata directory the platform is configured to use."""
        ...


class EnvironmentController(Protocol):
    """Protocol for controlling the running platform environment."""

    def stop(self) -> None:
        """Stop the running services so they release their file locks."""
        ...
