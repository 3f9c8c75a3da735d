"""Search path management for minish.

This module provides the SearchPath class which handles:
- Reading the PATH variable once at startup
- Keeping the ordered list of directories scanned for programs
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional, Sequence, TextIO, Tuple

logger = logging.getLogger(__name__)

PATH_VARIABLE = "PATH"


@dataclass(frozen=True)
class SearchPath:
    """Ordered, read-only list of directories used to resolve program names.

    A SearchPath is built once per process and handed to every component
    that needs it. It is never re-read from the environment.

    Attributes:
        directories: Directories in lookup order
    """

    directories: Tuple[Path, ...] = ()

    @classmethod
    def from_directories(cls, directories: Sequence[os.PathLike]) -> "SearchPath":
        """Build a search path from an explicit list of directories.

        Args:
            directories: Directories in lookup order

        Returns:
            New SearchPath
        """
        return cls(tuple(Path(d) for d in directories))

    @classmethod
    def from_string(cls, value: str) -> "SearchPath":
        """Split a PATH-style string on the platform separator.

        Empty entries are dropped.

        Examples:
            from_string('/usr/bin:/bin') -> SearchPath((Path('/usr/bin'), Path('/bin')))
            from_string('') -> SearchPath(())
        """
        return cls(tuple(Path(entry) for entry in value.split(os.pathsep) if entry))

    @classmethod
    def from_environ(
        cls,
        env: Optional[Mapping[str, str]] = None,
        stderr: Optional[TextIO] = None,
    ) -> "SearchPath":
        """Build the search path from the inherited environment.

        A missing variable degrades to an empty search path and writes a
        diagnostic instead of aborting startup.

        Args:
            env: Environment mapping (default: os.environ)
            stderr: Where the diagnostic goes (default: sys.stderr)

        Returns:
            New SearchPath
        """
        if env is None:
            env = os.environ
        value = env.get(PATH_VARIABLE)
        if value is None:
            (stderr or sys.stderr).write(
                f"failed to parse environment variable: {PATH_VARIABLE}\n"
            )
            return cls()

        search_path = cls.from_string(value)
        logger.debug("search path: %s", [str(d) for d in search_path])
        return search_path

    def __iter__(self) -> Iterator[Path]:
        return iter(self.directories)

    def __len__(self) -> int:
        return len(self.directories)
