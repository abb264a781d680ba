"""Regression tests for the optional Rich dependency (cli/console.py).

Help and ``--version`` must keep working when Rich is missing, and help
text must reach stdout verbatim (square brackets are not markup).
"""

from __future__ import annotations

import sys

import pytest

from taskschema.cli import exit_codes
from taskschema.cli.app import main
from taskschema.cli.console import ConsoleSink, console, get_rich_console
from taskschema.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_sink_falls_back_to_print(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    ConsoleSink().write_line("Usage: prog [GLOBAL OPTIONS] copy [src]")
    assert capsys.readouterr().out == "Usage: prog [GLOBAL OPTIONS] copy [src]\n"


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    console.print("Error: boom")
    assert capsys.readouterr().err == "Error: boom\n"


def test_sink_with_rich_keeps_brackets(capsys: pytest.CaptureFixture[str]) -> None:
    pytest.importorskip("rich")
    ConsoleSink().write_line("Usage: prog [GLOBAL OPTIONS] copy [src] [...rest]")
    assert "Usage: prog [GLOBAL OPTIONS] copy [src] [...rest]" in capsys.readouterr().out


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main([], environ={}) == exit_codes.SUCCESS
    assert "AVAILABLE TASKS:" in capsys.readouterr().out


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["--version"], environ={}) == exit_codes.SUCCESS
    assert capsys.readouterr().out.startswith("taskschema version ")


def test_sink_with_rich_keeps_tabs(capsys: pytest.CaptureFixture[str]) -> None:
    pytest.importorskip("rich")
    ConsoleSink().write_line("  --a\tA ")
    assert capsys.readouterr().out == "  --a\tA \n"


def test_sink_without_rich_keeps_tabs(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    ConsoleSink().write_line("  help\tPrints this message")
    assert capsys.readouterr().out == "  help\tPrints this message\n"
