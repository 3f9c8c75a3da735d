"""Interactive read loop for minish"""

import logging
import os
from typing import Callable, Optional

from .config import ShellConfig
from .context import CommandContext
from .dispatcher import Dispatcher
from .path_manager import SearchPath

try:
    import readline
except ImportError:  # pragma: no cover - platforms without GNU readline/libedit
    readline = None

logger = logging.getLogger(__name__)


class Shell:
    """Reads lines and hands each one to the dispatcher.

    The loop ends on end-of-input or when ``exit`` raises SystemExit.
    An interrupt while reading only cancels the current line.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        search_path: Optional[SearchPath] = None,
        context: Optional[CommandContext] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the shell

        Args:
            config: Startup settings (default: read from the environment)
            search_path: Directories for program lookup (default: from PATH)
            context: Execution context; its search path is used as-is
            input_func: Reads one line given the prompt (default: input)
        """
        self.config = config or ShellConfig.from_environ()
        if context is None:
            context = CommandContext(
                search_path=search_path if search_path is not None else SearchPath.from_environ()
            )
        self.context = context
        self.dispatcher = Dispatcher(context)
        self.input_func = input_func or input

    @property
    def search_path(self) -> SearchPath:
        return self.context.search_path

    def execute(self, line: str) -> int:
        """Dispatch a single line and return its exit status."""
        return self.dispatcher.execute_line(line)

    def read_line(self) -> str:
        self.context.flush()
        return self.input_func(self.config.prompt)

    def repl(self) -> int:
        """
        Run the interactive loop until end-of-input.

        Returns:
            0 after end-of-input, 1 if reading failed
        """
        self._load_history()
        try:
            return self._loop()
        finally:
            self._save_history()

    def _loop(self) -> int:
        stderr = self.context.stderr
        while True:
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                stderr.write("^C\n")
                continue
            except EOFError:
                stderr.write("^D\n")
                return 0
            except OSError as e:
                stderr.write(f"error: {e}\n")
                return 1

            try:
                self.execute(line)
            except KeyboardInterrupt:
                # Child processes are not signalled; the line is abandoned
                stderr.write("^C\n")

    def _load_history(self):
        if readline is None:
            return
        readline.set_history_length(self.config.history_length)
        path = self.config.history_file
        if path and os.path.exists(path):
            try:
                readline.read_history_file(path)
            except OSError as e:
                logger.warning("could not read history file %s: %s", path, e)

    def _save_history(self):
        if readline is None or not self.config.history_file:
            return
        try:
            readline.write_history_file(self.config.history_file)
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.config.history_file, e)
