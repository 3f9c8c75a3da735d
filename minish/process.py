"""Process class for running external programs"""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .context import CommandContext
from .exceptions import SpawnError
from .lexer import split_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvocationResult:
    """Captured output and exit status of one child process"""

    stdout: bytes
    stderr: bytes
    returncode: int


class Process:
    """Represents a single external program invocation"""

    def __init__(self, executable: Path, args: List[str], context: CommandContext):
        """
        Initialize a process

        Args:
            executable: Resolved location of the program
            args: Arguments passed after the program path
            context: CommandContext providing the output streams
        """
        self.executable = executable
        self.args = args
        self.context = context
        self.result: Optional[InvocationResult] = None

    @classmethod
    def from_raw_args(cls, executable: Path, raw_args: str,
                      context: CommandContext) -> "Process":
        """
        Create a process from an unparsed argument string.

        Raises:
            UnmatchedQuoteError: If the argument string cannot be split
        """
        return cls(executable, split_words(raw_args), context)

    @property
    def argv(self) -> List[str]:
        return [str(self.executable), *self.args]

    def run(self) -> InvocationResult:
        """
        Spawn the program and block until it exits.

        Both output streams are captured through pipes; stdin is inherited
        so interactive programs can still read from the terminal.

        Raises:
            SpawnError: If the program cannot be started
        """
        logger.debug("spawning %s", self.argv)
        try:
            completed = subprocess.run(
                self.argv,
                executable=os.path.abspath(self.executable),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise SpawnError(str(self.executable), e.strerror or str(e)) from e
        except ValueError as e:
            # embedded NUL bytes in argv
            raise SpawnError(str(self.executable), str(e)) from e

        logger.debug("%s exited with status %d", self.executable, completed.returncode)
        self.result = InvocationResult(
            stdout=completed.stdout,
            stderr=completed.stderr,
            returncode=completed.returncode,
        )
        return self.result

    def execute(self) -> int:
        """
        Run the program and relay its output to the shell's streams.

        Returns:
            Exit status of the child
        """
        result = self.run()
        self.context.stdout.write(result.stdout)
        self.context.stderr.write(result.stderr)
        self.context.flush()
        return result.returncode

    def get_stdout(self) -> bytes:
        """Get captured stdout contents"""
        return self.result.stdout if self.result else b''

    def get_stderr(self) -> bytes:
        """Get captured stderr contents"""
        return self.result.stderr if self.result else b''

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.executable} {args_str})"
