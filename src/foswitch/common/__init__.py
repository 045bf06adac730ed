"""Common models and logging helpers used across foswitch modules."""

from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)
from .models import AppInfo, AppPaths, OperationStatus

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "OperationStatus",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_default_log_file_path",
    "setup_cli_logging",
]
