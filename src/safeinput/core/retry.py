"""The validated-retry skeleton shared by every typed accessor.

One iteration reads one line.  End of stream ends the loop with
``NoValue``; an overflowed line (already drained by the reader) or a
line that fails conversion costs one attempt and the loop goes round
again.  With no attempt bound the loop only ends on valid input or end
of stream.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import TypeVar

from safeinput.core.line_reader import LineReader
from safeinput.core.models import (
    EndOfStream,
    InputResult,
    NoValue,
    NoValueReason,
    Overflow,
    Value,
)
from safeinput.core.protocols import DiagnosticSink
from safeinput.exceptions import ConversionError

T = TypeVar("T")

ALLOCATION_MESSAGE = "Memory allocation failed."
EXHAUSTED_MESSAGE = "Too many invalid attempts. Giving up."


def attempt_budget(max_attempts: int | None) -> Iterator[int]:
    """Yield attempt numbers starting at 1, forever when *max_attempts* is ``None``."""
    if max_attempts is None:
        return itertools.count(1)
    return iter(range(1, max_attempts + 1))


def read_validated(
    reader: LineReader,
    window: bytearray,
    max_length: int,
    convert: Callable[[bytes], T],
    *,
    sink: DiagnosticSink,
    max_attempts: int | None = None,
) -> InputResult[T]:
    """Read lines until *convert* accepts one, or input runs out.

    Parameters
    ----------
    reader:
        Line reader bound to the ambient stream.
    window:
        Scratch byte window, at least *max_length* bytes long.
    max_length:
        Most payload bytes a line may carry.
    convert:
        Pure conversion over the collected bytes.  Raises
        :class:`ConversionError` to reject a line.
    sink:
        Receives one diagnostic per rejected line.
    max_attempts:
        Optional bound on the number of lines consumed.
    """
    for _attempt in attempt_budget(max_attempts):
        outcome = reader.read_line(window, max_length)

        if isinstance(outcome, EndOfStream):
            return NoValue(NoValueReason.END_OF_STREAM)
        if isinstance(outcome, Overflow):
            continue

        try:
            span = bytes(window[: outcome.byte_count])
        except MemoryError:
            sink.emit(ALLOCATION_MESSAGE)
            return NoValue(NoValueReason.ALLOCATION_FAILURE)

        try:
            return Value(convert(span))
        except ConversionError as exc:
            sink.emit(str(exc))

    sink.emit(EXHAUSTED_MESSAGE)
    return NoValue(NoValueReason.ATTEMPTS_EXHAUSTED)
