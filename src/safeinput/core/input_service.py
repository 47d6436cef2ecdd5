"""Validated accessors — one method per target type.

:class:`InputService` is the collaborator-facing surface of the core.
Each accessor allocates a fresh byte window, runs the shared retry
skeleton with the type's conversion, and returns an
:class:`~safeinput.core.models.InputResult`: ``Value`` on success,
``NoValue`` when input is gone or the attempt bound is reached.

Guarantees
----------
* No exceptions for bad input — only diagnostics and a retry.
* Results are fresh objects owned by the caller; nothing is retained.
* No ``print()``; all diagnostics go through the injected sink.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TypeVar

from safeinput.config import ReaderConfig
from safeinput.core.allow_set import AllowSet
from safeinput.core.conversions import (
    parse_char,
    parse_double,
    parse_filtered_char,
    parse_float,
    parse_integer,
    parse_yes_no,
    to_counted_string,
    to_terminated_string,
)
from safeinput.core.line_reader import LineReader
from safeinput.core.models import (
    CountedString,
    InputResult,
    NoValue,
    NoValueReason,
    TerminatedString,
    Value,
)
from safeinput.core.protocols import ByteSource, DiagnosticSink
from safeinput.core.retry import EXHAUSTED_MESSAGE, attempt_budget, read_validated
from safeinput.exceptions import ConversionError
from safeinput.utils.limits import INT32, INT64, UINT32, UINT64, IntWidth

T = TypeVar("T")

BOOL_EOF_MESSAGE = "EOF detected. Returning false by default."


class InputService:
    """Typed, validated line input from a :class:`ByteSource`.

    Parameters
    ----------
    source:
        The ambient input stream.
    sink:
        Receives diagnostics for rejected lines.
    config:
        Window sizes and retry bound; defaults to :class:`ReaderConfig`.
    """

    def __init__(
        self,
        source: ByteSource,
        *,
        sink: DiagnosticSink,
        config: ReaderConfig | None = None,
    ) -> None:
        self._sink: DiagnosticSink = sink
        self._config: ReaderConfig = config if config is not None else ReaderConfig()
        self._reader: LineReader = LineReader(source, sink)

    @property
    def config(self) -> ReaderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Shared plumbing
    # ------------------------------------------------------------------

    def _read(
        self,
        window_size: int,
        reserve: int,
        convert: Callable[[bytes], T],
    ) -> InputResult[T]:
        window = bytearray(window_size)
        return read_validated(
            self._reader,
            window,
            window_size - reserve,
            convert,
            sink=self._sink,
            max_attempts=self._config.max_attempts,
        )

    def _read_integer(self, width: IntWidth) -> InputResult[int]:
        return self._read(self._config.buffer_size, 1, partial(parse_integer, width=width))

    # ------------------------------------------------------------------
    # Integers
    # ------------------------------------------------------------------

    def get_int(self) -> InputResult[int]:
        """Read a signed 32-bit integer."""
        return self._read_integer(INT32)

    def get_uint(self) -> InputResult[int]:
        """Read an unsigned 32-bit integer; a leading ``-`` is always rejected."""
        return self._read_integer(UINT32)

    def get_long(self) -> InputResult[int]:
        return self._read_integer(INT64)

    def get_ulong(self) -> InputResult[int]:
        return self._read_integer(UINT64)

    def get_long_long(self) -> InputResult[int]:
        return self._read_integer(INT64)

    def get_ulong_long(self) -> InputResult[int]:
        return self._read_integer(UINT64)

    # ------------------------------------------------------------------
    # Floating point
    # ------------------------------------------------------------------

    def get_float(self) -> InputResult[float]:
        """Read a finite value representable as IEEE binary32."""
        return self._read(self._config.buffer_size, 1, parse_float)

    def get_double(self) -> InputResult[float]:
        """Read a finite IEEE binary64 value."""
        return self._read(self._config.buffer_size, 1, parse_double)

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    def get_char(self) -> InputResult[str]:
        """Read exactly one character.

        An empty line yields ``"\\n"`` rather than a retry, so callers can
        tell "pressed Enter" apart from "typed too much".
        """
        return self._read(self._config.char_buffer_size, 1, parse_char)

    def get_char_filtered(self, allowed: str | bytes | AllowSet | None) -> InputResult[str]:
        """Read exactly one character that belongs to *allowed*.

        Raises
        ------
        AllowSetError
            Before reading anything, if *allowed* is ``None`` or empty.
        """
        allow_set = AllowSet.parse(allowed)
        return self._read(
            self._config.char_buffer_size,
            1,
            partial(parse_filtered_char, allowed=allow_set),
        )

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def get_cstring(self) -> InputResult[TerminatedString]:
        """Read a line into a zero-terminated owned buffer."""
        return self._read(self._config.buffer_size, 1, to_terminated_string)

    def get_string(self) -> InputResult[CountedString]:
        """Read a line into a length-counted owned buffer (no terminator)."""
        return self._read(self._config.buffer_size, 0, to_counted_string)

    # ------------------------------------------------------------------
    # Boolean
    # ------------------------------------------------------------------

    def get_bool(self) -> InputResult[bool]:
        """Read ``y``/``Y`` as ``True`` and ``n``/``N`` as ``False``.

        End of input is reported on the sink and returned as
        ``NoValue`` at once; there is nothing left to retry against.
        """
        for _attempt in attempt_budget(self._config.max_attempts):
            result = self.get_char()
            if isinstance(result, NoValue):
                if result.reason is NoValueReason.END_OF_STREAM:
                    self._sink.emit(BOOL_EOF_MESSAGE)
                return result
            try:
                return Value(parse_yes_no(result.value))
            except ConversionError as exc:
                self._sink.emit(str(exc))

        self._sink.emit(EXHAUSTED_MESSAGE)
        return NoValue(NoValueReason.ATTEMPTS_EXHAUSTED)
