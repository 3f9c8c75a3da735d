"""
TYPE command - describe how each name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from dataclasses import dataclass, field
from typing import List

from ..context import CommandContext
from ..lexer import split_ascii_whitespace
from ..resolver import canonicalize
from . import is_builtin, register_command
from .base import Command, write_error


@register_command('type')
@dataclass
class TypeCommand(Command):
    """
    Display how each name would be run

    Usage: type [name...]

    Examples:
        type echo   # echo is a shell builtin
        type ls     # ls is /usr/bin/ls
    """

    tokens: List[str] = field(default_factory=list)

    @classmethod
    def build(cls, raw_args: str) -> 'TypeCommand':
        return cls(tokens=split_ascii_whitespace(raw_args))

    def execute(self, context: CommandContext) -> int:
        exit_code = 0
        for token in self.tokens:
            if is_builtin(token):
                context.stdout.write(f"{token} is a shell builtin\n")
                continue

            path = context.find_executable(token)
            if path is not None:
                context.stdout.write(f"{token} is {canonicalize(path)}\n")
            else:
                write_error(context, f"{token} not found")
                exit_code = 1
        return exit_code
