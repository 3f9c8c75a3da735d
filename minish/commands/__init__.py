"""
Built-in command registry.

Each built-in lives in its own module and registers itself with
``register_command``. The registry is the only list of built-in names:
the dispatcher's classifier and the ``type`` built-in both read it.
"""

import importlib
from typing import TYPE_CHECKING, Callable, Dict, Optional, Type

if TYPE_CHECKING:
    from .base import Command

BUILTINS: Dict[str, Type['Command']] = {}

_COMMAND_MODULES = ('exit_cmd', 'echo', 'type_cmd')


def register_command(name: str) -> Callable[[Type['Command']], Type['Command']]:
    """
    Register a Command subclass under ``name``.

    Example:
        @register_command('echo')
        @dataclass
        class EchoCommand(Command):
            ...
    """
    def decorator(cls):
        cls.name = name
        BUILTINS[name] = cls
        return cls
    return decorator


def load_all_commands() -> Dict[str, Type['Command']]:
    """Import every command module so its registration runs."""
    for module in _COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module}')
    return BUILTINS


def classify(word: str) -> Optional[Type['Command']]:
    """
    Match a command word against the built-in names.

    Matching is exact and case-sensitive: ``echo`` is a built-in, ``Echo``
    is not.

    Returns:
        The Command subclass, or None when the word is not a built-in
    """
    return BUILTINS.get(word)


def is_builtin(word: str) -> bool:
    return word in BUILTINS


# Load all command modules to populate the registry
load_all_commands()
