"""Core / service layer — the line reader, conversions, and accessors.

Rules
-----
* No ``print()`` calls.
* No direct stream access — bytes arrive through a ``ByteSource``.
* No imports from ``cli`` or ``infra``.
* Conversions are pure and deterministic.
"""

from safeinput.core.allow_set import AllowSet
from safeinput.core.input_service import InputService
from safeinput.core.line_reader import LineReader
from safeinput.core.models import (
    CountedString,
    EndOfStream,
    InputResult,
    NoValue,
    NoValueReason,
    Overflow,
    ReadOutcome,
    Success,
    TerminatedString,
    Value,
    unwrap_or,
)
from safeinput.core.protocols import ByteSource, DiagnosticSink

__all__: list[str] = [
    "AllowSet",
    "ByteSource",
    "CountedString",
    "DiagnosticSink",
    "EndOfStream",
    "InputResult",
    "InputService",
    "LineReader",
    "NoValue",
    "NoValueReason",
    "Overflow",
    "ReadOutcome",
    "Success",
    "TerminatedString",
    "Value",
    "unwrap_or",
]
