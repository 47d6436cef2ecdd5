"""Tests for the ``safeinput doctor`` command (cli/doctor.py).

Optional packages are hidden through ``sys.modules`` / ``find_spec``
patches and standard input is swapped with ``monkeypatch``; no
terminal is touched.

Coverage:
* Individual check functions return correct tuples.
* Missing UI packages are warnings, a missing stdin is a failure.
* Doctor renders both the Rich table and the plain fallback.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

import io
import sys
from unittest.mock import MagicMock, patch

import pytest

from safeinput.cli import exit_codes


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def _pipe_stream() -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(b""), encoding="utf-8")


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from safeinput.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestOptionalPackageChecks:
    def test_rich_installed(self) -> None:
        from safeinput.cli.doctor import _rich_check

        label, value, status = _rich_check()
        assert label == "rich"
        assert value == "installed"
        assert "OK" in status

    def test_questionary_installed(self) -> None:
        from safeinput.cli.doctor import _questionary_check

        label, _value, status = _questionary_check()
        assert label == "questionary"
        assert "OK" in status

    @patch("safeinput.cli.doctor.importlib.util.find_spec", return_value=None)
    def test_missing_package_is_warning(self, _mock_find: MagicMock) -> None:
        from safeinput.cli.doctor import _questionary_check

        _label, value, status = _questionary_check()
        assert value == "not installed (no demo)"
        assert "WARN" in status

    @patch.dict("sys.modules", {"rich": None})
    def test_hidden_module_is_warning(self) -> None:
        from safeinput.cli.doctor import _rich_check

        _label, value, status = _rich_check()
        assert value == "not installed (plain output)"
        assert "WARN" in status


class TestStdinCheck:
    def test_missing_stdin_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from safeinput.cli.doctor import _stdin_check

        monkeypatch.setattr(sys, "stdin", None)
        label, value, status = _stdin_check()
        assert label == "stdin"
        assert value == "not attached"
        assert "FAIL" in status

    def test_closed_stdin_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from safeinput.cli.doctor import _stdin_check

        stream = _pipe_stream()
        stream.close()
        monkeypatch.setattr(sys, "stdin", stream)
        _label, value, status = _stdin_check()
        assert value == "closed"
        assert "FAIL" in status

    def test_pipe(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from safeinput.cli.doctor import _stdin_check

        monkeypatch.setattr(sys, "stdin", _pipe_stream())
        _label, value, status = _stdin_check()
        assert value == "pipe or file"
        assert "OK" in status

    def test_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from safeinput.cli.doctor import _stdin_check

        monkeypatch.setattr(sys, "stdin", _TtyStream())
        _label, value, _status = _stdin_check()
        assert value == "interactive terminal"


class TestOsCheck:
    def test_returns_tuple(self) -> None:
        from safeinput.cli.doctor import _os_check

        label, value, status = _os_check()
        assert label == "OS"
        assert isinstance(value, str)
        assert "OK" in status

    @patch("safeinput.cli.doctor.platform.machine", return_value="arm64")
    @patch("safeinput.cli.doctor.platform.release", return_value="23.4.0")
    @patch("safeinput.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from safeinput.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert "macOS" in value
        assert "Darwin" not in value


class TestSafeinputVersionCheck:
    def test_returns_current_version(self) -> None:
        from safeinput.cli.doctor import _safeinput_version_check
        from safeinput.version import __version__

        label, value, status = _safeinput_version_check()
        assert label == "safeinput"
        assert value == __version__
        assert "OK" in status


class TestStatusPlain:
    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("[green]OK[/green]", "OK"),
            ("[yellow]WARN[/yellow]", "WARN"),
            ("[red]FAIL (>=3.10 required)[/red]", "FAIL"),
            ("other", "other"),
        ],
    )
    def test_strips_markup(self, status: str, expected: str) -> None:
        from safeinput.cli.doctor import _status_plain

        assert _status_plain(status) == expected


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    def test_all_pass_returns_success(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from safeinput.cli.doctor import run_doctor

        monkeypatch.setattr(sys, "stdin", _pipe_stream())
        assert run_doctor() == exit_codes.SUCCESS
        assert "All checks passed." in capsys.readouterr().err

    @patch("safeinput.cli.doctor.importlib.util.find_spec", return_value=None)
    def test_missing_packages_still_succeed(
        self,
        _mock_find: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Missing UI packages are WARN, not FAIL."""
        from safeinput.cli.doctor import run_doctor

        monkeypatch.setattr(sys, "stdin", _pipe_stream())
        assert run_doctor() == exit_codes.SUCCESS

    def test_missing_stdin_returns_general_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from safeinput.cli.doctor import run_doctor

        monkeypatch.setattr(sys, "stdin", None)
        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().err

    @patch("safeinput.cli.doctor.platform.machine", return_value="arm64")
    @patch("safeinput.cli.doctor.platform.release", return_value="23.4.0")
    @patch("safeinput.cli.doctor.platform.system", return_value="Darwin")
    @patch.dict("sys.modules", {"rich": None, "rich.console": None, "rich.table": None})
    def test_plain_output_without_rich(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from safeinput.cli.doctor import run_doctor

        monkeypatch.setattr(sys, "stdin", _pipe_stream())
        code = run_doctor()

        err = capsys.readouterr().err
        assert code == exit_codes.SUCCESS
        assert "safeinput doctor" in err
        assert "macOS" in err
        assert "WARN" in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("safeinput.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from safeinput.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("safeinput.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, mock_run: MagicMock) -> None:
        from safeinput.cli.app import main

        code = main(["doctor"])
        assert code == exit_codes.GENERAL_ERROR
