"""Allow ``python -m safeinput`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m safeinput`` behaves identically to the ``safeinput``
console script.
"""

from __future__ import annotations

from safeinput.cli.app import cli

if __name__ == "__main__":
    cli()
