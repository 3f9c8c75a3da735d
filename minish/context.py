"""
CommandContext - Encapsulates all context needed for command execution.

Built-ins and the process invoker receive a CommandContext instead of the
Shell itself, so they can be tested in isolation with in-memory streams.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .path_manager import SearchPath
from .resolver import find_executable
from .streams import ErrorStream, OutputStream


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - The search path computed at startup
    - The shell's standard output and standard error

    Example:
        >>> from minish.context import CommandContext
        >>> ctx = CommandContext(stdout=OutputStream.to_buffer())
        >>> ctx.stdout.write("hi\\n")
        3
        >>> ctx.stdout.get_value()
        b'hi\\n'
    """

    search_path: SearchPath = field(default_factory=SearchPath)
    stdout: OutputStream = field(default_factory=OutputStream.stdout)
    stderr: OutputStream = field(default_factory=ErrorStream.stderr)

    @classmethod
    def to_buffers(cls, search_path: Optional[SearchPath] = None) -> "CommandContext":
        """
        Create a context whose streams are in-memory buffers.

        Args:
            search_path: Directories to resolve programs in (default: empty)
        """
        return cls(
            search_path=search_path or SearchPath(),
            stdout=OutputStream.to_buffer(),
            stderr=ErrorStream.to_buffer(),
        )

    def find_executable(self, name: str) -> Optional[Path]:
        """Resolve ``name`` against this context's search path."""
        return find_executable(name, self.search_path)

    def flush(self):
        self.stdout.flush()
        self.stderr.flush()
