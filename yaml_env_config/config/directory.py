"""Directory listing used by the loader to enumerate config files."""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Union

DirectoryLister = Callable[[Path], Iterable[Path]]


def list_directory(directory: Union[str, Path]) -> List[Path]:
    """
    List the regular files directly inside ``directory``.

    Order follows ``os.scandir`` and is not sorted.

    Args:
        directory: Directory to list

    Returns:
        Paths of the files found
    """
    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if entry.is_file()]
