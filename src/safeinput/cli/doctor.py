"""``safeinput doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment suits interactive input: Python
version, optional UI packages, and what standard input is attached to.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No input is ever read here.
"""

from __future__ import annotations

import importlib.util
import platform
import sys

from safeinput.cli import exit_codes
from safeinput.infra.console import console, rich_available
from safeinput.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    major, minor = sys.version_info[:2]
    ok = (major, minor) >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _optional_package_check(label: str, module: str, missing: str) -> tuple[str, str, str]:
    """Return a row for an optional UI package; absence is only a warning."""
    try:
        found = importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        found = False
    if found:
        return label, "installed", "[green]OK[/green]"
    return label, missing, "[yellow]WARN[/yellow]"


def _rich_check() -> tuple[str, str, str]:
    return _optional_package_check("rich", "rich", "not installed (plain output)")


def _questionary_check() -> tuple[str, str, str]:
    return _optional_package_check("questionary", "questionary", "not installed (no demo)")


def _stdin_check() -> tuple[str, str, str]:
    """Return (label, value, status) describing what stdin is attached to."""
    stream = sys.stdin
    if stream is None:
        return "stdin", "not attached", "[red]FAIL[/red]"
    if getattr(stream, "closed", False):
        return "stdin", "closed", "[red]FAIL[/red]"
    try:
        interactive = stream.isatty()
    except (AttributeError, ValueError):
        interactive = False
    if interactive:
        return "stdin", "interactive terminal", "[green]OK[/green]"
    return "stdin", "pipe or file", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _safeinput_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the safeinput version row."""
    return "safeinput", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nsafeinput doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    checks = [
        _safeinput_version_check(),
        _python_version_check(),
        _rich_check(),
        _questionary_check(),
        _stdin_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    if rich_available():
        from rich.table import Table

        table = Table(
            title="safeinput doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")
    else:
        _print_plain_doctor_table(checks)
        print(
            "Some checks failed." if has_failure else "All checks passed.",
            file=sys.stderr,
        )

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
