"""Configuration file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from foswitch.common import AppPaths, create_logger
from foswitch.errors import ConfigFileError
from foswitch.utils import get_global_config_root

from .models import FileConfig

logger = create_logger("config")


def get_config_file_path(paths: AppPaths) -> Path:
    return get_global_config_root(paths.config_dir_name) / paths.config_filename


def load_config_file(path: Path) -> FileConfig:
    """Load and validate the config file, returning defaults when it does not exist."""
    if not path.is_file():
        logger.debug("Config file not found, using defaults", path=str(path))
        return FileConfig()

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(path, str(exc)) from exc

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        raise ConfigFileError(
            path,
            str(exc),
            line=(line + 1) if line is not None else None,
            column=(column + 1) if column is not None else None,
        ) from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigFileError(path, "Configuration root must be a mapping of keys to values.")

    try:
        config = FileConfig.model_validate(data)
    except ValidationError as exc:
        field = None
        message = str(exc)
        error_details = exc.errors()
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        raise ConfigFileError(path, message, field=field) from exc

    logger.debug("Config file loaded", path=str(path))
    return config
