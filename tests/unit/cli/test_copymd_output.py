#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_copymd_output.py
"""Unit tests for rich terminal output in the CLI."""

import argparse
import io

import pytest

from copymd.cli import main
from copymd.cli.builder import EXIT_DEPENDENCY_ERROR, EXIT_SUCCESS
from copymd.cli.output import render_rich_markdown, should_use_rich_output
from copymd.exceptions import DependencyError

pytestmark = pytest.mark.usefixtures("restore_root_logging")


class _TtyStream(io.StringIO):
    def isatty(self):
        return True


def _args(**overrides):
    values = {"rich": True, "force_rich": False, "output": None, "rich_code_theme": "monokai"}
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.mark.unit
@pytest.mark.cli
class TestShouldUseRichOutput:
    """Tests for should_use_rich_output."""

    def test_flag_not_set(self):
        assert should_use_rich_output(_args(rich=False), stream=_TtyStream()) is False

    def test_output_file_disables_rich(self):
        assert should_use_rich_output(_args(output="out.md"), stream=_TtyStream()) is False

    def test_tty(self):
        assert should_use_rich_output(_args(), stream=_TtyStream()) is True

    def test_piped(self):
        assert should_use_rich_output(_args(), stream=io.StringIO()) is False

    def test_forced(self):
        assert should_use_rich_output(_args(force_rich=True), stream=io.StringIO()) is True

    def test_missing_rich(self, monkeypatch):
        monkeypatch.setattr("copymd.cli.output.check_rich_available", lambda: False)
        assert should_use_rich_output(_args(), stream=_TtyStream()) is False
        with pytest.raises(DependencyError, match="copymd\\[rich\\]"):
            should_use_rich_output(_args(), raise_on_missing=True, stream=_TtyStream())


@pytest.mark.unit
@pytest.mark.cli
class TestRichRendering:
    """Tests for rich rendering through the command."""

    def test_render_rich_markdown(self):
        rendered = render_rich_markdown("Hello **world**", _args(force_rich=True))
        assert "Hello" in rendered
        assert "world" in rendered
        assert "**" not in rendered

    def test_forced_rich_command(self, tmp_path, capsys):
        path = tmp_path / "message.html"
        path.write_text("<p>Hello <b>world</b></p>", encoding="utf-8")
        assert main([str(path), "--rich", "--force-rich", "--no-config"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "world" in out
        assert "**world**" not in out

    def test_rich_ignored_when_piped(self, tmp_path, capsys):
        path = tmp_path / "message.html"
        path.write_text("<p>Hello <b>world</b></p>", encoding="utf-8")
        assert main([str(path), "--rich", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "Hello **world**\n"

    def test_rich_missing(self, tmp_path, monkeypatch):
        monkeypatch.setattr("copymd.cli.output.check_rich_available", lambda: False)
        path = tmp_path / "message.html"
        path.write_text("<p>x</p>", encoding="utf-8")
        assert main([str(path), "--rich", "--no-config"]) == EXIT_DEPENDENCY_ERROR
