"""
EXIT command - terminate the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

import logging
import re
from dataclasses import dataclass

from ..context import CommandContext
from ..exceptions import InvalidArgumentError
from ..lexer import split_ascii_whitespace
from . import register_command
from .base import Command

logger = logging.getLogger(__name__)

# Exit codes are 32-bit signed integers; anything else means "exit abnormally"
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1
ABNORMAL_EXIT_CODE = 1

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def parse_exit_code(token: str) -> int:
    """
    Parse an exit status, falling back to 1 for anything malformed.

    Examples:
        >>> parse_exit_code('42')
        42
        >>> parse_exit_code('-3')
        -3
        >>> parse_exit_code('abc')
        1
    """
    if not _INTEGER_RE.fullmatch(token):
        return ABNORMAL_EXIT_CODE
    code = int(token)
    if not INT32_MIN <= code <= INT32_MAX:
        return ABNORMAL_EXIT_CODE
    return code


@register_command('exit')
@dataclass
class ExitCommand(Command):
    """
    Exit the shell

    Usage: exit [n]

    Examples:
        exit        # Exit with status 0
        exit 3      # Exit with status 3
        exit abc    # Exit with status 1
    """

    code: int = 0

    @classmethod
    def build(cls, raw_args: str) -> 'ExitCommand':
        tokens = split_ascii_whitespace(raw_args)
        if len(tokens) > 1:
            raise InvalidArgumentError(cls.name, "too many supplied")
        if tokens:
            return cls(code=parse_exit_code(tokens[0]))
        return cls(code=0)

    def execute(self, context: CommandContext) -> int:
        logger.debug("exiting with status %d", self.code)
        context.flush()
        raise SystemExit(self.code)
