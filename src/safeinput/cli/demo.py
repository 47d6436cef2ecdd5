"""Interactive accessor demo for the CLI layer.

This module is responsible for:

* Prompting the user to pick an accessor kind via questionary arrow keys.
* Running the chosen accessor against standard input.
* Rendering a Rich table describing the result.

All display-related logic lives here — no parsing, no validation.
"""

from __future__ import annotations

from typing import Any

from safeinput.cli import exit_codes
from safeinput.cli.kinds import KINDS, AccessorKind, display_value
from safeinput.config import ReaderConfig
from safeinput.core.models import InputResult, NoValue
from safeinput.exceptions import EnvironmentError, SelectionCancelledError
from safeinput.infra.console import console


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for result rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _build_choice_label(index: int, kind: AccessorKind) -> str:
    """Build the single-line label shown in the questionary selector.

    Format: ``"  1.  int         signed 32-bit integer"``
    """
    return f"  {index + 1}.  {kind.name:<11} {kind.label}"


def _describe_result(result: InputResult[Any]) -> tuple[str, str]:
    """Return (outcome, shown value) for the result table."""
    if isinstance(result, NoValue):
        return "no value", result.reason.value
    return "value", display_value(result.value)


def _display_result(kind: AccessorKind, result: InputResult[Any]) -> None:
    """Print a Rich table summarising what the accessor returned."""
    table_class = _import_rich_table()

    outcome, shown = _describe_result(result)
    table = table_class(
        title="Accessor Result",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Kind", justify="left", min_width=10)
    table.add_column("Outcome", justify="left", min_width=8)
    table.add_column("Value", justify="left", min_width=10)
    table.add_row(kind.name, outcome, shown)

    console.print()
    console.print(table)
    console.print()


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def prompt_accessor_selection() -> AccessorKind:
    """Prompt the user to choose an accessor kind.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    SelectionCancelledError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(i, kind), value=kind.name)
        for i, kind in enumerate(KINDS.values())
    ]

    selected: str | None = questionary.select(
        "Select a value type to read:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise SelectionCancelledError(
            "No value type selected.",
            hint="Use arrow keys to pick a type, then press Enter.",
        )
    return KINDS[selected]


def _prompt_allowed() -> str:
    """Ask for the allow-set of the filtered character accessor."""
    questionary = _import_questionary()
    allowed: str | None = questionary.text("Allowed characters:").ask()
    if allowed is None:
        raise SelectionCancelledError("No allowed characters entered.")
    return allowed


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_demo(config: ReaderConfig) -> int:
    """Pick an accessor, read one value with it, and show the result.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when a value was read,
        :data:`exit_codes.NO_VALUE` when input ran out first.
    """
    from safeinput.factory import create_input_service

    kind = prompt_accessor_selection()
    allowed = _prompt_allowed() if kind.needs_allowed else None

    service = create_input_service(config=config)
    console.print(f"[bold cyan]Enter a {kind.label}:[/bold cyan]")
    result = kind.read(service, allowed)

    _display_result(kind, result)
    if isinstance(result, NoValue):
        return exit_codes.NO_VALUE
    return exit_codes.SUCCESS
