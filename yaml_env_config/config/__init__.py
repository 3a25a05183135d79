"""Configuration package.

Provides the YamlConfigLoader plus its settings, parser and directory helpers.
"""
from .exceptions import (  # noqa: F401
    ConfigLoaderError,
    InvalidDirectoryError,
    GlobalConfigMissingError,
    MissingEnvironmentKeyError,
    RequiredKeyMissingError,
    ConfigParseError,
)
from .yaml_config_loader import YamlConfigLoader  # noqa: F401
from .settings import LoaderSettings, create_config_loader  # noqa: F401
