"""CLI application entry point and command routing for safeinput.

This module is the **sole error boundary** for the entire application.
It catches :class:`~safeinput.exceptions.SafeInputError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No input parsing lives here — all work is delegated to the core
  accessors through :func:`~safeinput.factory.create_input_service`.
* Prompts and messages go to stderr via the console proxy; stdout only
  ever carries the value that was read.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from safeinput.cli import exit_codes
from safeinput.cli.kinds import KINDS, render_value
from safeinput.config import ReaderConfig
from safeinput.exceptions import AllowSetError, SafeInputError
from safeinput.infra.console import console
from safeinput.utils.limits import INPUT_BUFFER_SIZE
from safeinput.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_reader_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        metavar="N",
        help="Give up after N rejected lines (default: retry until end of input).",
    )
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=INPUT_BUFFER_SIZE,
        metavar="BYTES",
        help=f"Byte window for numbers and strings (default: {INPUT_BUFFER_SIZE}).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``safeinput read KIND``  — read one validated value from stdin
    * ``safeinput demo``       — pick an accessor interactively and try it
    * ``safeinput doctor``     — environment diagnostics
    * ``safeinput --version``
    """
    parser = argparse.ArgumentParser(
        prog="safeinput",
        description="Bounded, validated line input from standard input.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command")

    read = commands.add_parser(
        "read",
        help="Read one value of KIND from stdin and write it to stdout.",
    )
    read.add_argument("kind", choices=list(KINDS), help="Type of value to read.")
    read.add_argument(
        "--allowed",
        default=None,
        help="Permitted characters for the 'charset' kind.",
    )
    read.add_argument(
        "--prompt",
        default=None,
        help="Text shown on stderr before reading.",
    )
    _add_reader_options(read)

    demo = commands.add_parser("demo", help="Choose an accessor interactively.")
    _add_reader_options(demo)

    commands.add_parser("doctor", help="Show environment diagnostics.")
    return parser


def _reader_config(args: argparse.Namespace) -> ReaderConfig:
    return ReaderConfig(buffer_size=args.buffer_size, max_attempts=args.max_attempts)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _write_stdout(data: bytes) -> None:
    """Write raw bytes to stdout, bypassing text encoding when possible."""
    binary = getattr(sys.stdout, "buffer", None)
    if binary is None:
        sys.stdout.write(data.decode("utf-8", errors="replace"))
        sys.stdout.flush()
        return
    sys.stdout.flush()
    binary.write(data)
    binary.flush()


def _handle_read(args: argparse.Namespace) -> int:
    """Read a single value and write it to stdout.

    Flow:
    1. Validate options and build the reader configuration.
    2. Show the optional prompt on stderr.
    3. Run the accessor for the requested kind.
    4. Write the value, or report why there is none.
    """
    from safeinput.core.models import NoValue
    from safeinput.factory import create_input_service

    kind = KINDS[args.kind]
    if kind.needs_allowed and args.allowed is None:
        raise AllowSetError(
            f"The '{kind.name}' kind needs a set of allowed characters.",
            hint=f"Pass --allowed, e.g. safeinput read {kind.name} --allowed yn",
        )

    service = create_input_service(config=_reader_config(args))

    if args.prompt:
        console.print(args.prompt, markup=False, highlight=False, end=" ")

    result = kind.read(service, args.allowed)
    if isinstance(result, NoValue):
        console.print(f"[yellow]No value:[/yellow] {result.reason.value}")
        return exit_codes.NO_VALUE

    _write_stdout(render_value(result.value) + b"\n")
    return exit_codes.SUCCESS


def _handle_demo(args: argparse.Namespace) -> int:
    """Dispatch the interactive ``demo`` command."""
    from safeinput.cli.demo import run_demo

    return run_demo(_reader_config(args))


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from safeinput.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the safeinput CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    if args.command == "demo":
        return _handle_demo(args)

    return _handle_read(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SafeInputError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
