"""
Pytest configuration and shared fixtures for minish tests.

This module provides reusable test fixtures for:
- Captured output streams
- Temporary search path directories
- Executable script factories
- Command contexts wired to in-memory buffers
"""

import os
from pathlib import Path
from typing import Callable, Tuple

import pytest

from minish.context import CommandContext
from minish.path_manager import SearchPath
from minish.streams import ErrorStream, OutputStream


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output() -> Tuple[OutputStream, OutputStream]:
    """
    Provides in-memory stdout and stderr streams.

    Example:
        def test_output(capture_output):
            stdout, stderr = capture_output
            stdout.write("hi\\n")
            assert stdout.get_value() == b"hi\\n"
    """
    return OutputStream.to_buffer(), ErrorStream.to_buffer()


@pytest.fixture
def bin_dirs(tmp_path) -> Tuple[Path, Path]:
    """
    Provides two empty directories to use as search path entries.

    Returns:
        (dir_a, dir_b) in search order
    """
    dir_a = tmp_path / "bin_a"
    dir_b = tmp_path / "bin_b"
    dir_a.mkdir()
    dir_b.mkdir()
    return dir_a, dir_b


@pytest.fixture
def make_executable() -> Callable[..., Path]:
    """
    Provides a factory writing a file with the given mode.

    Example:
        def test_tool(make_executable, tmp_path):
            tool = make_executable(tmp_path, 'tool', 'echo hi')
    """
    def factory(directory: Path, name: str, body: str = "", mode: int = 0o755,
                shebang: str = "#!/bin/sh\n") -> Path:
        path = Path(directory) / name
        path.write_text(f"{shebang}{body}\n")
        os.chmod(path, mode)
        return path

    return factory


@pytest.fixture
def search_path(bin_dirs) -> SearchPath:
    """Search path over both temporary bin directories."""
    return SearchPath.from_directories(bin_dirs)


@pytest.fixture
def context(search_path) -> CommandContext:
    """
    Provides a CommandContext with buffered streams.

    The search path contains only the temporary bin directories, so tests
    never depend on programs installed on the host.
    """
    return CommandContext.to_buffers(search_path)


# ============================================================================
# Helper Functions
# ============================================================================

def get_stdout(context: CommandContext) -> str:
    """Get stdout content as string."""
    return context.stdout.get_value().decode('utf-8', errors='replace')


def get_stderr(context: CommandContext) -> str:
    """Get stderr content as string."""
    return context.stderr.get_value().decode('utf-8', errors='replace')


def is_posix() -> bool:
    return os.name == 'posix'


# Make helper functions available as pytest helpers
pytest.get_stdout = get_stdout
pytest.get_stderr = get_stderr
pytest.posix_only = pytest.mark.skipif(not is_posix(), reason="requires POSIX permission bits")
