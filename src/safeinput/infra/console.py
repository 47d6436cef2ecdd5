"""Console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the
library's diagnostics remain functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from safeinput.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def rich_available() -> bool:
	"""Return whether Rich can be imported."""
	try:
		_load_rich_console_class()
	except EnvironmentError:
		return False
	return True


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain stderr print.

		*options* are Rich ``Console.print`` keyword arguments; the plain
		fallback ignores them.
		"""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			if sys.stderr is None:
				return
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, **options)


console = _ConsoleProxy()
