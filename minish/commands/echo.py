"""
ECHO command - print the rest of the line.
"""

from dataclasses import dataclass

from ..context import CommandContext
from . import register_command
from .base import Command


@register_command('echo')
@dataclass
class EchoCommand(Command):
    """
    Print arguments exactly as typed

    Usage: echo [text...]

    Quotes are not removed and internal spacing is kept.
    """

    message: str = ''

    @classmethod
    def build(cls, raw_args: str) -> 'EchoCommand':
        return cls(message=raw_args)

    def execute(self, context: CommandContext) -> int:
        context.stdout.write(f"{self.message}\n")
        return 0
