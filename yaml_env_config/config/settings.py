#!/usr/bin/env python3
"""
Loader settings read from environment variables
"""

import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

from dotenv import load_dotenv

from .yaml_config_loader import YamlConfigLoader


def _split_list(value: Optional[str]) -> Optional[List[str]]:
    items = [item.strip() for item in (value or '').split(',') if item.strip()]
    return items or None


@dataclass
class LoaderSettings:
    """Settings used to build a YamlConfigLoader"""

    directory: Optional[str] = None
    environment: Optional[str] = None
    possible_environments: Optional[List[str]] = None
    required_keys: List[str] = field(default_factory=list)
    extension: str = "yml"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'LoaderSettings':
        """Create settings from environment variables (and a .env file if present)"""
        load_dotenv(dotenv_path=dotenv_path, override=False)

        return cls(
            directory=os.getenv('CONFIG_DIR') or None,
            environment=os.getenv('CONFIG_ENVIRONMENT') or None,
            possible_environments=_split_list(os.getenv('CONFIG_POSSIBLE_ENVIRONMENTS')),
            required_keys=_split_list(os.getenv('CONFIG_REQUIRED_KEYS')) or [],
            extension=os.getenv('CONFIG_EXTENSION', 'yml'),
        )


def create_config_loader(settings: Optional[LoaderSettings] = None, **kwargs: Any) -> YamlConfigLoader:
    """
    Convenience function to build a loader from settings.

    Args:
        settings: Loader settings (read from the environment if None)
        **kwargs: Passed through to YamlConfigLoader (parser, lister)

    Returns:
        Configured YamlConfigLoader instance, not yet loaded
    """
    if settings is None:
        settings = LoaderSettings.from_env()

    loader = YamlConfigLoader(
        directory=settings.directory,
        extension=settings.extension,
        **kwargs
    )

    if settings.environment is not None:
        loader.set_environment(settings.environment)
    if settings.possible_environments is not None:
        loader.set_possible_environments(settings.possible_environments)
    loader.set_required_keys(settings.required_keys)

    return loader
