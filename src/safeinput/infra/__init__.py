"""Infrastructure layer — process-level streams.

This layer wraps all interaction with ``sys.stdin`` and ``sys.stderr``.

Rules
-----
* No imports from ``cli``.
* No input parsing or validation.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from safeinput.infra.diagnostic_sink import RecordingSink, StderrSink
from safeinput.infra.stdin_source import StdinByteSource

__all__: list[str] = [
    "RecordingSink",
    "StderrSink",
    "StdinByteSource",
]
