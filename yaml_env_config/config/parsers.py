"""
Parsers turning a single config file into Python data.

A parser is any callable taking a path and returning the parsed document.
The loader only requires the top level of a non-empty document to be a mapping.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Union

import yaml

from .exceptions import ConfigParseError

logger = logging.getLogger(__name__)

Parser = Callable[[Path], Any]


def parse_yaml_file(path: Union[str, Path]) -> Any:
    """
    Parse a YAML file with ``yaml.safe_load``.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed document (``None`` for an empty file)

    Raises:
        ConfigParseError: If the file is not valid YAML
    """
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML parse error in {path.name}: {e}")
        raise ConfigParseError(path, str(e)) from e
