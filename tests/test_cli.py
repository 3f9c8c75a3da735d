"""Tests for the minish command-line entry point."""

import logging

import pytest

from minish import __version__
from minish.cli import build_parser, configure_logging, main


class TestArgumentParsing:
    """Test command-line flags."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.prompt is None
        assert args.history_file is None
        assert args.log_level is None

    def test_log_level_is_case_insensitive(self):
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestSingleCommand:
    """Test running one line with -c."""

    def test_echo(self, capsys, monkeypatch, tmp_path):
        monkeypatch.setenv("PATH", str(tmp_path))
        assert main(["-c", "echo   hello   world"]) == 0
        assert capsys.readouterr().out == "hello   world\n"

    def test_unknown_command_status(self, capsys, monkeypatch, tmp_path):
        monkeypatch.setenv("PATH", str(tmp_path))
        assert main(["-c", "nonexistentcmd123"]) == 127
        assert capsys.readouterr().err == "nonexistentcmd123: command not found\n"

    def test_exit_status(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PATH", str(tmp_path))
        with pytest.raises(SystemExit) as exc_info:
            main(["-c", "exit 3"])
        assert exc_info.value.code == 3

    def test_missing_path_still_runs(self, capsys, monkeypatch):
        monkeypatch.delenv("PATH", raising=False)
        assert main(["-c", "type echo"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "echo is a shell builtin\n"
        assert "failed to parse environment variable: PATH" in captured.err

    @pytest.posix_only
    def test_external_program(self, capsys, monkeypatch, tmp_path, make_executable):
        make_executable(tmp_path, "tool", "printf out\nprintf err >&2")
        monkeypatch.setenv("PATH", str(tmp_path))
        assert main(["-c", "tool"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "out"
        assert captured.err == "err"


class TestInteractive:
    """Test the interactive loop through main()."""

    def test_reads_until_end_of_input(self, capsys, monkeypatch, tmp_path):
        lines = iter(["echo first", "echo second"])

        def fake_input(prompt):
            try:
                return next(lines)
            except StopIteration:
                raise EOFError

        monkeypatch.setenv("PATH", str(tmp_path))
        monkeypatch.setattr("builtins.input", fake_input)
        assert main(["--prompt", "> "]) == 0
        captured = capsys.readouterr()
        assert captured.out == "first\nsecond\n"
        assert captured.err.endswith("^D\n")


class TestLogging:
    """Test logging configuration."""

    def test_configure_logging_sets_level(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        configure_logging("DEBUG")
        assert root.level == logging.DEBUG
