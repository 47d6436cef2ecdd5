"""Wiring of the core accessors to the ambient process streams.

The core never touches ``sys.stdin`` itself; this is the one place that
binds an :class:`~safeinput.core.input_service.InputService` to the
standard-input byte source and, unless told otherwise, the stderr sink.
"""

from __future__ import annotations

from safeinput.config import ReaderConfig
from safeinput.core.input_service import InputService
from safeinput.core.protocols import DiagnosticSink
from safeinput.infra.diagnostic_sink import StderrSink
from safeinput.infra.stdin_source import StdinByteSource


def create_input_service(
    *,
    sink: DiagnosticSink | None = None,
    config: ReaderConfig | None = None,
) -> InputService:
    """Return an :class:`InputService` reading from standard input.

    Parameters
    ----------
    sink:
        Diagnostic sink; defaults to :class:`StderrSink`.
    config:
        Reader settings; defaults to :class:`ReaderConfig`.
    """
    return InputService(
        StdinByteSource(),
        sink=sink if sink is not None else StderrSink(),
        config=config,
    )
