from .paths import get_data_directory, get_global_config_root

__all__ = ["get_data_directory", "get_global_config_root"]
