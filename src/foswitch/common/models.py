"""Common models used across foswitch."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel

from foswitch.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    config_filename: str = "config.yaml"
    logs_dir_name: str = "logs"
    log_filename: str = f"{APP_NAME}.log"


class OperationStatus(str, Enum):
    """Outcome of a single step that reports rather than raises."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"
    EXCLUDED = "excluded"
    UNCHANGED = "unchanged"
