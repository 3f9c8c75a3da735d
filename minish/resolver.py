"""Executable lookup for minish.

Resolution order:
1. The name itself, when it points at an executable file (``./tool``,
   ``/usr/bin/env``). The search path is not consulted.
2. Each search path directory in order. The first directory containing an
   executable regular file with exactly that name wins.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from .path_manager import SearchPath

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


if os.name == 'posix':

    def is_executable(path: PathLike) -> bool:
        """Return True for a regular file with any execute bit set."""
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(st.st_mode) and bool(st.st_mode & EXECUTE_BITS)

else:

    def is_executable(path: PathLike) -> bool:
        """Return True for any existing regular file.

        Platforms without POSIX permission bits cannot tell executables
        apart, so every regular file is accepted.
        """
        # TODO: honour PATHEXT on Windows instead of accepting every file
        try:
            st = os.stat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISREG(st.st_mode)


def _scan_directory(directory: Path, name: str) -> Optional[Path]:
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name != name:
                    continue
                if entry.is_file() and is_executable(entry.path):
                    return Path(entry.path)
    except OSError as e:
        logger.debug("skipping unreadable directory %s: %s", directory, e)
    return None


def find_executable(name: str, search_path: SearchPath) -> Optional[Path]:
    """Locate an executable by direct path or by scanning the search path.

    Args:
        name: Program name or path
        search_path: Directories to scan, in order

    Returns:
        Path of the first match, or None if nothing matched
    """
    if not name:
        return None

    direct = Path(name)
    if is_executable(direct):
        logger.debug("resolved %s directly", name)
        return direct

    for directory in search_path:
        found = _scan_directory(directory, name)
        if found is not None:
            logger.debug("resolved %s to %s", name, found)
            return found

    logger.debug("%s not found in %d directories", name, len(search_path))
    return None


def canonicalize(path: PathLike) -> str:
    """Return the canonical absolute form of ``path``, or ``path`` unchanged.

    Examples:
        canonicalize('/usr/bin/../bin/env') -> '/usr/bin/env'
        canonicalize('/no/such/file') -> '/no/such/file'
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError):
        return str(path)
