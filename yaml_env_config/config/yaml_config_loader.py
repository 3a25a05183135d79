#!/usr/bin/env python3
"""Environment-aware YAML configuration loader.

Merges every YAML file in a directory into one configuration dict:
- `global.yml` names the active environment and the recognised ones
  (unless both were set on the loader beforehand)
- files named after a recognised but inactive environment are skipped
  (with environment `dev`, `sandbox.yml` is ignored but `dev.yml` and
  `shared.yml` are merged)
- later files overwrite earlier keys, in directory listing order
- required keys are checked once all files are merged

`load()` merges into the existing configuration and never clears it. Build a
new loader per load cycle when a clean slate is needed.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .directory import DirectoryLister, list_directory
from .exceptions import (
    ConfigParseError,
    GlobalConfigMissingError,
    InvalidDirectoryError,
    MissingEnvironmentKeyError,
    RequiredKeyMissingError,
)
from .parsers import Parser, parse_yaml_file

logger = logging.getLogger(__name__)

GLOBAL_FILE_STEM = "global"
ENVIRONMENT_KEY = "environment"
REQUIRED_ENVIRONMENTS_KEY = "required_environments"


class YamlConfigLoader:
    """Loads, filters and merges a directory of YAML config files."""

    def __init__(
        self,
        directory: Optional[Union[str, os.PathLike[str]]] = None,
        parser: Parser = parse_yaml_file,
        lister: DirectoryLister = list_directory,
        extension: str = "yml",
    ):
        """
        Initialize the loader.

        Args:
            directory: Config directory, validated like set_directory()
            parser: Callable parsing one file into a mapping
            lister: Callable listing the files of a directory
            extension: Extension of config files, without the dot
        """
        self.parser = parser
        self.lister = lister
        self.extension = extension.lstrip('.')

        self.configuration: Dict[str, Any] = {}
        self.environment: Optional[str] = None
        self.possible_environments: Optional[List[str]] = None
        self.required_keys: List[str] = []
        self._directory: Optional[str] = None

        if directory is not None:
            self.set_directory(directory)

    # ------------------------------------------------------------------
    def get_configuration(self, key: Optional[str] = None) -> Any:
        """
        Return the merged configuration, or one key of it.

        An unknown key returns the whole configuration, same as no key.
        """
        if key is not None and key in self.configuration:
            return self.configuration[key]
        return self.configuration

    def get_config(self, key: Optional[str] = None) -> Any:
        """Shortcut for get_configuration()."""
        return self.get_configuration(key)

    def set_environment(self, environment: Optional[str]) -> "YamlConfigLoader":
        # compared against file stems, so always a string
        self.environment = str(environment) if environment is not None else None
        return self

    def get_environment(self) -> Optional[str]:
        return self.environment

    def set_possible_environments(self, environments: Optional[List[str]]) -> "YamlConfigLoader":
        """
        Set the recognised environment names.

        Raises:
            TypeError: If given a single string instead of a list of names
        """
        if isinstance(environments, str):
            raise TypeError(f"Possible environments must be a list of names, got the string '{environments}'")
        self.possible_environments = [str(env) for env in environments] if environments is not None else None
        return self

    def get_possible_environments(self) -> Optional[List[str]]:
        return self.possible_environments

    def set_required_keys(self, keys: List[str]) -> "YamlConfigLoader":
        self.required_keys = list(keys)
        return self

    def get_required_keys(self) -> List[str]:
        return self.required_keys

    def set_directory(self, directory: Union[str, os.PathLike[str]]) -> "YamlConfigLoader":
        """
        Set the directory to read config files from.

        Raises:
            InvalidDirectoryError: If the directory is missing or not writable
        """
        directory = os.fspath(directory)
        self._validate_directory(directory)
        self._directory = directory
        return self

    def get_directory(self) -> str:
        """
        Return the config directory, checking it again on every call.

        Raises:
            InvalidDirectoryError: If the directory is unset, missing or not writable
        """
        self._validate_directory(self._directory)
        return self._directory

    # ------------------------------------------------------------------
    @staticmethod
    def _validate_directory(directory: Optional[str]) -> None:
        if directory is None or not os.path.isdir(directory) or not os.access(directory, os.W_OK):
            raise InvalidDirectoryError(
                f"Unable to find / write to directory: {directory}. Please check your f/s permissions."
            )

    def _global_file(self) -> Path:
        return Path(self.get_directory()) / f"{GLOBAL_FILE_STEM}.{self.extension}"

    def _resolve_environment(self) -> None:
        """Populate environment settings from the global file."""
        global_file = self._global_file()

        if not (global_file.is_file() and os.access(global_file, os.R_OK | os.W_OK)):
            message = f"{global_file.name} file required, but not found, in: {global_file.parent}"
            logger.error(message)
            raise GlobalConfigMissingError(message)

        data = self.parser(global_file)
        if not isinstance(data, dict):
            data = {}

        environment = data.get(ENVIRONMENT_KEY)
        environments = data.get(REQUIRED_ENVIRONMENTS_KEY)
        if environment is None or environments is None:
            message = (
                f"The {global_file.name} file requires an {ENVIRONMENT_KEY} key "
                f"and a {REQUIRED_ENVIRONMENTS_KEY} key"
            )
            logger.error(message)
            raise MissingEnvironmentKeyError(message)
        if not isinstance(environments, list):
            raise ConfigParseError(global_file, f"{REQUIRED_ENVIRONMENTS_KEY} must be a list")

        self.set_environment(environment)
        self.set_possible_environments(environments)
        logger.info(f"Environment '{environment}' resolved from {global_file.name}")

    def _excluded_stems(self) -> set:
        return set(self.possible_environments or []) - {self.environment}

    def _should_merge(self, path: Path, excluded: set) -> bool:
        if path.suffix != f".{self.extension}":
            return False
        if path.stem in excluded:
            logger.debug(f"Skipping {path.name}: inactive environment")
            return False
        return True

    # ------------------------------------------------------------------
    def load(self) -> Dict[str, Any]:
        """
        Resolve the environment, merge config files and check required keys.

        Returns:
            The merged configuration

        Raises:
            InvalidDirectoryError: If the directory is unset or invalid
            GlobalConfigMissingError: If the global file is needed but absent
            MissingEnvironmentKeyError: If the global file lacks environment keys
            ConfigParseError: If a file does not parse into a mapping
            RequiredKeyMissingError: If a required key was not merged
        """
        directory = self.get_directory()
        logger.info(f"Loading configuration from {directory}")

        if self.environment is None or self.possible_environments is None:
            self._resolve_environment()

        if self.environment not in self.possible_environments:
            logger.warning(
                f"Environment '{self.environment}' is not one of {self.possible_environments}"
            )

        excluded = self._excluded_stems()
        merged_files = 0

        for path in self.lister(Path(directory)):
            path = Path(path)
            if not self._should_merge(path, excluded):
                continue

            data = self.parser(path)
            if not data:
                logger.debug(f"Nothing to merge from {path.name}")
                continue
            if not isinstance(data, dict):
                logger.error(f"Config file {path.name} does not hold a mapping")
                raise ConfigParseError(path, "top level is not a mapping")

            self.configuration.update(data)
            merged_files += 1
            logger.debug(f"Merged {path.name} ({len(data)} keys)")

        for key in self.required_keys:
            if key not in self.configuration:
                logger.error(f"Configuration requires the key: {key}")
                raise RequiredKeyMissingError(key)

        logger.info(
            f"Configuration loaded for environment '{self.environment}': "
            f"{merged_files} files, {len(self.configuration)} keys"
        )
        return self.configuration


__all__ = ["YamlConfigLoader"]
