"""
ShellConfig - startup settings for the interactive shell.

Settings come from the environment first and may then be overridden by
command-line flags. The resulting value is built once and never changes
while the shell runs.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "$ "
DEFAULT_HISTORY_LENGTH = 1000
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ShellConfig:
    """
    Startup settings for the shell.

    Example:
        >>> config = ShellConfig.from_environ({'MINISH_PROMPT': '> '})
        >>> config.prompt
        '> '
        >>> config.history_file is None
        True
    """

    prompt: str = DEFAULT_PROMPT
    history_file: Optional[str] = None
    history_length: int = DEFAULT_HISTORY_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """
        Read settings from MINISH_* environment variables.

        Recognized variables:
        - MINISH_PROMPT: prompt text
        - MINISH_HISTFILE: file used to load and save line history
        - MINISH_HISTSIZE: number of history entries kept
        - MINISH_LOG_LEVEL: logging level name

        Args:
            env: Environment mapping (default: os.environ)

        Returns:
            New ShellConfig
        """
        if env is None:
            env = os.environ

        history_length = DEFAULT_HISTORY_LENGTH
        raw_size = env.get('MINISH_HISTSIZE')
        if raw_size is not None:
            try:
                history_length = int(raw_size)
            except ValueError:
                logger.warning("ignoring invalid MINISH_HISTSIZE: %r", raw_size)

        return cls(
            prompt=env.get('MINISH_PROMPT', DEFAULT_PROMPT),
            history_file=env.get('MINISH_HISTFILE') or None,
            history_length=history_length,
            log_level=env.get('MINISH_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper(),
        )

    def override(self, **changes) -> "ShellConfig":
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
