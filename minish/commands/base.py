"""
Base class and helpers for built-in commands.

A built-in is a dataclass describing one fully parsed invocation. It is
created by ``build`` from the raw argument string, executed once, and then
thrown away.
"""

from typing import ClassVar

from ..context import CommandContext


class Command:
    """
    One parsed built-in invocation.

    Subclasses set their fields in ``build`` and act in ``execute``.
    """

    name: ClassVar[str] = ''

    @classmethod
    def build(cls, raw_args: str) -> 'Command':
        """
        Parse the raw argument string into a populated command.

        Raises:
            InvalidArgumentError: If the arguments are not acceptable
        """
        raise NotImplementedError

    def execute(self, context: CommandContext) -> int:
        """
        Run the command.

        Returns:
            Exit status (0 for success)
        """
        raise NotImplementedError


def write_error(context: CommandContext, message: str):
    """
    Write an error message to stderr, followed by a newline.

    Args:
        context: Execution context
        message: The error message
    """
    context.stderr.write(f"{message}\n")


__all__ = [
    'Command',
    'write_error',
]
