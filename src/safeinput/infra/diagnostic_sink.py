"""Infrastructure: diagnostic sinks for the error channel.

Two implementations of :class:`~safeinput.core.protocols.DiagnosticSink`:

* :class:`StderrSink` — the default; one line per diagnostic on stderr
  through the console proxy, with Rich markup and highlighting off so
  user-supplied text (an allow-set like ``[]``) is shown verbatim.
* :class:`RecordingSink` — keeps messages in memory, for tests and for
  programs that render diagnostics themselves.
"""

from __future__ import annotations

from safeinput.infra.console import console


class StderrSink:
    """Write each diagnostic as one line on stderr."""

    def emit(self, message: str) -> None:
        try:
            console.print(message, markup=False, highlight=False, soft_wrap=True)
        except (OSError, ValueError):
            # Closed or broken stderr: delivery failures never change reader behaviour.
            return


class RecordingSink:
    """Collect diagnostics in emission order."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)
