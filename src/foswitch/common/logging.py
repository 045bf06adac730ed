"""Logging utilities for foswitch using Loguru.

The CLI logs to two places: warnings and errors go to the terminal, so soft
conditions such as a skipped service stop are visible while a command runs,
and everything at ``log_level`` goes to a rotating log file when enabled.
As a library, foswitch keeps its logger disabled until enable_logging().
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from foswitch.constants import APP_NAME
from foswitch.utils import get_data_directory

from .models import AppInfo, AppPaths

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: LogLevel = Field(default="INFO")
    console_level: LogLevel = Field(default="WARNING")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, paths: AppPaths, *, colorize: bool = True) -> None:
    """Route foswitch logs to the terminal and, when enabled, to the log file."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    logger.add(_console_sink, level=config.console_level, format=_format_console_record, colorize=colorize)

    if not config.enabled:
        return

    log_file = Path(config.log_file).expanduser() if config.log_file else get_default_log_file_path(paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        serialize=config.format == "json",
        format=_get_text_format(),
        diagnose=(app_info.environment == "dev"),
    )
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths.data_dir_name) / paths.logs_dir_name / paths.log_filename


def _console_sink(message: "loguru.Message") -> None:
    # Looked up per message so redirected streams (tests, pipes) are honoured.
    sys.stderr.write(message)
    sys.stderr.flush()


def _format_console_record(record: "loguru.Record") -> str:
    level = record["level"].name.lower()
    return f"<level>{level}</level>: {{message}}\n"


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
