"""Infrastructure: the ambient standard-input byte stream.

:class:`StdinByteSource` satisfies
:class:`~safeinput.core.protocols.ByteSource` by pulling one byte at a
time from ``sys.stdin``.  The stream is looked up on every read, so a
replaced ``sys.stdin`` (tests, embedding hosts) is honoured without
rebuilding anything.

Rules
-----
* Bytes come from ``sys.stdin.buffer`` whenever it exists.
* A text-only replacement stream is encoded with its own encoding.
* A missing stream (``sys.stdin is None``) reads as end of stream.
* The stream is never closed, reset, or reopened here.
"""

from __future__ import annotations

import sys
from collections import deque


class StdinByteSource:
    """Byte-at-a-time reader over the process's standard input."""

    def __init__(self) -> None:
        # Leftover bytes of a multi-byte character from a text-only stream.
        self._pending: deque[int] = deque()

    def read_byte(self) -> int | None:
        """Return the next input byte, or ``None`` at end of stream."""
        if self._pending:
            return self._pending.popleft()

        stream = sys.stdin
        if stream is None:
            return None

        binary = getattr(stream, "buffer", None)
        if binary is not None:
            chunk = binary.read(1)
            if not chunk:
                return None
            return chunk[0]

        text = stream.read(1)
        if not text:
            return None
        encoding = getattr(stream, "encoding", None) or "utf-8"
        encoded = text.encode(encoding, errors="replace")
        self._pending.extend(encoded[1:])
        return encoded[0]
