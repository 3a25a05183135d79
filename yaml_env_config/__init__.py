"""
YAML Env Config - Environment-aware configuration loading
=========================================================

Reads a directory of YAML files, merges them into one configuration mapping
and checks that required keys are present.

Modules:
- config: Loader, settings, parsers and directory listing
- utils: Logging utilities
"""

__version__ = "1.0.0"
__author__ = "YAML Env Config Team"

from .config import (
    YamlConfigLoader,
    LoaderSettings,
    create_config_loader,
    ConfigLoaderError,
    InvalidDirectoryError,
    GlobalConfigMissingError,
    MissingEnvironmentKeyError,
    RequiredKeyMissingError,
    ConfigParseError,
)
from .utils.logger import setup_logging, get_logger

__all__ = [
    "YamlConfigLoader",
    "LoaderSettings",
    "create_config_loader",
    "ConfigLoaderError",
    "InvalidDirectoryError",
    "GlobalConfigMissingError",
    "MissingEnvironmentKeyError",
    "RequiredKeyMissingError",
    "ConfigParseError",
    "setup_logging",
    "get_logger",
]
