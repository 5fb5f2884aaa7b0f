"""
Nearest .env file discovery.

Walks from a starting directory up through its parents until a file named
``.env`` is found or the file-system root has been checked.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env"


def iter_search_dirs(start_dir: Optional[Union[str, Path]] = None) -> Iterator[Path]:
    """Yield the directories searched for a .env file, nearest first.

    The last directory yielded is always the file-system root.
    """
    current = Path(start_dir) if start_dir is not None else Path.cwd()
    # abspath collapses ".." so only real ancestors are searched
    current = Path(os.path.abspath(current))
    yield current
    yield from current.parents


def find_nearest_env_file(
    start_dir: Optional[Union[str, Path]] = None,
    filename: str = ENV_FILENAME,
) -> Optional[Path]:
    """
    Find the nearest configuration file walking up from start_dir.

    Args:
        start_dir: Directory to start from (default: current working directory)
        filename: Name of the file to look for (default: .env)

    Returns:
        Path to the first file found, or None if no directory up to and
        including the root contains one
    """
    for directory in iter_search_dirs(start_dir):
        candidate = directory / filename
        if candidate.is_file():
            logger.debug(f"Found {filename} at {candidate}")
            return candidate

    logger.debug(f"No {filename} file found above {start_dir or Path.cwd()}")
    return None
