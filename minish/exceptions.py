"""
Custom exception hierarchy for minish.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent error messages
- Proper exit codes

Usage:
    from minish.exceptions import ShellError

    try:
        command = command_cls.build(raw_args)
    except ShellError as e:
        context.stderr.write(f"{e}\n")
        return e.exit_code
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when a command cannot be built or run.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a word is neither a built-in nor a resolvable program.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class InvalidArgumentError(CommandError):
    """
    Raised when a built-in receives arguments it cannot accept.

    Example:
        raise InvalidArgumentError("exit", "too many supplied")
    """

    def __init__(self, command: str, details: str):
        message = f"invalid arguments: {details}"
        super().__init__(command, message, exit_code=2)
        self.details = details


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when the argument string of an external command cannot be split
    into words.
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message, exit_code=2)
        self.line = line


class UnmatchedQuoteError(ParsingError):
    """
    Raised when quotes or escapes are not properly terminated.

    Example:
        raise UnmatchedQuoteError("'hello", "No closing quotation")
    """

    def __init__(self, line: str, reason: str):
        message = f"failed to parse arguments: {reason}"
        super().__init__(message, line=line)
        self.reason = reason


# =============================================================================
# Execution Errors
# =============================================================================

class ExecutionError(ShellError):
    """
    Base class for errors raised while running an external program.
    """
    pass


class SpawnError(ExecutionError):
    """
    Raised when a resolved executable cannot be started.

    The program may have been removed, or lost its execute permission,
    between resolution and invocation.

    Example:
        raise SpawnError("/usr/bin/tool", "Permission denied")
    """

    def __init__(self, path: str, reason: str):
        message = f"{path}: failed to spawn: {reason}"
        super().__init__(message, exit_code=126)
        self.path = path
        self.reason = reason
