"""Configuration module for foswitch."""

from .loader import get_config_file_path, load_config_file
from .models import DefaultsConfig, FileConfig, SwitchConfig

__all__ = [
    "DefaultsConfig",
    "FileConfig",
    "SwitchConfig",
    "get_config_file_path",
    "load_config_file",
]
