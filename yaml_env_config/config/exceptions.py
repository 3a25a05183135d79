"""Exceptions raised by the configuration loader."""

from pathlib import Path
from typing import Union


class ConfigLoaderError(Exception):
    """Base class for all configuration loading errors."""


class InvalidDirectoryError(ConfigLoaderError):
    """Config directory does not exist or is not writable."""


class GlobalConfigMissingError(ConfigLoaderError):
    """The global file is required but missing or not accessible."""


class MissingEnvironmentKeyError(ConfigLoaderError):
    """The global file lacks `environment` or `required_environments`."""


class RequiredKeyMissingError(ConfigLoaderError):
    """A required key is absent from the merged configuration."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Configuration requires the key: {key}")


class ConfigParseError(ConfigLoaderError):
    """A config file could not be parsed into a mapping."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")
