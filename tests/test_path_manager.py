"""Unit tests for SearchPath component."""

import dataclasses
import io
import os
from pathlib import Path

import pytest

from minish.path_manager import SearchPath


class TestSearchPathCreation:
    """Tests for SearchPath initialization."""

    def test_default_is_empty(self):
        sp = SearchPath()
        assert len(sp) == 0
        assert list(sp) == []

    def test_from_directories(self, tmp_path):
        sp = SearchPath.from_directories([tmp_path, str(tmp_path / "b")])
        assert list(sp) == [tmp_path, tmp_path / "b"]

    def test_is_immutable(self):
        sp = SearchPath.from_directories(["/bin"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            sp.directories = ()


class TestSearchPathFromString:
    """Tests for splitting PATH-style strings."""

    def test_keeps_order(self):
        value = os.pathsep.join(["/usr/local/bin", "/usr/bin", "/bin"])
        sp = SearchPath.from_string(value)
        assert list(sp) == [Path("/usr/local/bin"), Path("/usr/bin"), Path("/bin")]

    def test_drops_empty_entries(self):
        value = os.pathsep.join(["", "/usr/bin", "", "/bin", ""])
        assert list(SearchPath.from_string(value)) == [Path("/usr/bin"), Path("/bin")]

    def test_empty_string(self):
        assert len(SearchPath.from_string("")) == 0


class TestSearchPathFromEnviron:
    """Tests for reading the search path from the environment."""

    def test_reads_path_variable(self):
        stderr = io.StringIO()
        sp = SearchPath.from_environ({"PATH": os.pathsep.join(["/a", "/b"])}, stderr=stderr)
        assert list(sp) == [Path("/a"), Path("/b")]
        assert stderr.getvalue() == ""

    def test_missing_variable_degrades_to_empty(self):
        """Startup continues with an empty search path and a diagnostic."""
        stderr = io.StringIO()
        sp = SearchPath.from_environ({}, stderr=stderr)
        assert len(sp) == 0
        assert stderr.getvalue() == "failed to parse environment variable: PATH\n"

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("PATH", os.pathsep.join(["/x", "/y"]))
        assert list(SearchPath.from_environ()) == [Path("/x"), Path("/y")]

    def test_missing_variable_writes_to_sys_stderr(self, monkeypatch, capsys):
        monkeypatch.delenv("PATH", raising=False)
        assert len(SearchPath.from_environ()) == 0
        assert "failed to parse environment variable: PATH" in capsys.readouterr().err
