"""Bounded line reader — the read-and-drain protocol.

The reader copies at most ``max_length`` bytes of one input line into a
caller-supplied window and reports one of three outcomes:

* :class:`~safeinput.core.models.Success` — the line ended (newline or
  end of stream) within the bound.
* :class:`~safeinput.core.models.Overflow` — the bound was reached first.
  The remainder of the line has already been consumed, so the next call
  starts on a fresh line.
* :class:`~safeinput.core.models.EndOfStream` — nothing was left to read.

Guarantees
----------
* Never writes past ``window[max_length - 1]``.
* Never writes a terminator; callers add their own.
* Holds no state between calls.
* Emits a diagnostic only on overflow.
"""

from __future__ import annotations

from safeinput.core.models import END_OF_STREAM, OVERFLOW, ReadOutcome, Success
from safeinput.core.protocols import ByteSource, DiagnosticSink
from safeinput.exceptions import InvalidArgumentError
from safeinput.utils.limits import NEWLINE

OVERFLOW_MESSAGE = "Input exceeding buffer size. Try again."


class LineReader:
    """Reads single lines from a :class:`ByteSource` into a byte window.

    Parameters
    ----------
    source:
        The ambient input stream.
    sink:
        Where the overflow diagnostic goes.
    """

    def __init__(self, source: ByteSource, sink: DiagnosticSink) -> None:
        self._source: ByteSource = source
        self._sink: DiagnosticSink = sink

    def read_line(self, window: bytearray, max_length: int) -> ReadOutcome:
        """Read one line into ``window[:max_length]``.

        Raises
        ------
        InvalidArgumentError
            If *window* is missing, *max_length* is below 1, or the window
            is shorter than *max_length*.
        """
        if window is None:
            raise InvalidArgumentError("Byte window must not be None.")
        if max_length < 1:
            raise InvalidArgumentError(
                f"max_length must be at least 1, got {max_length}.",
            )
        if len(window) < max_length:
            raise InvalidArgumentError(
                f"Byte window holds {len(window)} bytes, "
                f"fewer than max_length={max_length}.",
            )

        count = 0
        while count < max_length:
            byte = self._source.read_byte()
            if byte is None:
                return Success(count) if count else END_OF_STREAM
            if byte == NEWLINE:
                return Success(count)
            window[count] = byte
            count += 1

        self._drain()
        self._sink.emit(OVERFLOW_MESSAGE)
        return OVERFLOW

    def _drain(self) -> None:
        """Discard bytes up to and including the next newline, or to end of stream."""
        while True:
            byte = self._source.read_byte()
            if byte is None or byte == NEWLINE:
                return
