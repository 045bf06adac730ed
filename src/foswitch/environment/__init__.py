"""Environment settings and control collaborators."""

from .protocol import EnvironmentController, EnvironmentSettingsProvider
from .providers import CommandEnvironmentController, WebConfigEnvironmentSettings

__all__ = [
    "CommandEnvironmentController",
    "EnvironmentController",
    "EnvironmentSettingsProvider",
    "WebConfigEnvironmentSettings",
]
