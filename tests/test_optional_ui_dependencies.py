"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands and plain reads are resilient
when optional UI packages are missing, and that the demo fails cleanly
only when its UI path is actually exercised.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest

from safeinput.cli import exit_codes
from safeinput.cli.app import main
from safeinput.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_read_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    feed_stdin: Callable[[bytes], io.BytesIO],
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    feed_stdin(b"-\n-8\n")

    assert main(["read", "long"]) == exit_codes.SUCCESS
    captured = capsys.readouterr()
    assert captured.out == "-8\n"
    assert "Invalid input. Try again.\n" in captured.err


def test_demo_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["demo"])


def test_demo_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
    feed_stdin: Callable[[bytes], io.BytesIO],
) -> None:
    from unittest.mock import MagicMock, patch

    _hide_rich(monkeypatch)
    questionary_mod = MagicMock()
    questionary_mod.select.return_value.ask.return_value = "int"
    feed_stdin(b"5\n")

    with patch("safeinput.cli.demo._import_questionary", return_value=questionary_mod):
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            main(["demo"])
