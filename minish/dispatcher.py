"""
Line dispatch: decide between a built-in and an external program.

Outcomes for a command word:
- built-in with valid arguments: run it
- built-in with invalid arguments: report the error, stop there
- resolvable program: spawn it with the raw arguments
- anything else: ``<word>: command not found``
"""

import logging

from .commands import classify
from .context import CommandContext
from .exceptions import CommandNotFoundError, ShellError
from .lexer import split_command_line
from .process import Process

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes one command line to its handler"""

    def __init__(self, context: CommandContext):
        self.context = context

    def execute_line(self, line: str) -> int:
        """
        Tokenize and dispatch a raw input line.

        Returns:
            Exit status of the line (0 for blank lines)
        """
        parsed = split_command_line(line)
        if parsed is None:
            return 0
        word, raw_args = parsed
        return self.dispatch(word, raw_args)

    def dispatch(self, word: str, raw_args: str) -> int:
        """
        Run ``word`` with its unparsed argument string.

        Errors are written to the context's stderr and turned into exit
        statuses. Only ``exit`` ends the process, by raising SystemExit.

        Returns:
            Exit status
        """
        try:
            return self._dispatch(word, raw_args)
        except ShellError as e:
            self.context.stderr.write(f"{e}\n")
            logger.debug("%s failed with status %d: %s", word, e.exit_code, e)
            return e.exit_code
        finally:
            self.context.flush()

    def _dispatch(self, word: str, raw_args: str) -> int:
        command_cls = classify(word)
        if command_cls is not None:
            command = command_cls.build(raw_args)
            return command.execute(self.context)

        executable = self.context.find_executable(word)
        if executable is None:
            raise CommandNotFoundError(word)

        process = Process.from_raw_args(executable, raw_args, self.context)
        return process.execute()
