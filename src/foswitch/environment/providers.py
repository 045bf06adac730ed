"""Default environment collaborators."""

from __future__ import annotations

import subprocess
from pathlib import Path

from foswitch.common import create_logger
from foswitch.constants import METADATA_DIRECTORY_KEY
from foswitch.errors import EnvironmentControlError
from foswitch.paths import PathResolver
from foswitch.xmlconfig import WebConfigDocument

logger = create_logger("environment")


class WebConfigEnvironmentSettings:
    """Reads the active metadata directory from the live web config."""

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def metadata_directory(self) -> Path | None:
        web_config = self._resolver.resolve_web_config_path()
        if not web_config.is_file():
            logger.warning("Web config file not found", path=str(web_config))
            return None

        value = WebConfigDocument.load(web_config).get_setting(METADATA_DIRECTORY_KEY)
        return Path(value) if value else None


class CommandEnvironmentController:
    """Stops the environment by running a configured command."""

    def __init__(self, stop_command: list[str]) -> None:
        self._stop_command = list(stop_command)

    def stop(self) -> None:
        if not self._stop_command:
            logger.warning("No stop command configured, services were not stopped")
            return

        logger.info("Stopping environment", command=" ".join(self._stop_command))
        try:
            subprocess.run(
                self._stop_command,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise EnvironmentControlError(f"Stop command not found: {self._stop_command[0]}") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else "Unknown error"
            raise EnvironmentControlError(f"Failed to stop environment: {stderr}") from e
