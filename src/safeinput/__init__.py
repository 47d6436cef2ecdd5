"""safeinput — bounded, validated line input for interactive programs.

Reads one line at a time from standard input into a fixed-size window,
rejects malformed input with a retry loop, and reports end of input as
an explicit result rather than an exception.
"""

from safeinput.config import ReaderConfig
from safeinput.core.allow_set import AllowSet
from safeinput.core.input_service import InputService
from safeinput.core.models import (
    CountedString,
    InputResult,
    NoValue,
    NoValueReason,
    TerminatedString,
    Value,
    unwrap_or,
)
from safeinput.factory import create_input_service
from safeinput.infra.diagnostic_sink import RecordingSink, StderrSink
from safeinput.version import __version__

__all__: list[str] = [
    "AllowSet",
    "CountedString",
    "InputResult",
    "InputService",
    "NoValue",
    "NoValueReason",
    "ReaderConfig",
    "RecordingSink",
    "StderrSink",
    "TerminatedString",
    "Value",
    "__version__",
    "create_input_service",
    "unwrap_or",
]
