"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class ByteSource(Protocol):
    """Contract for the ambient byte stream the line reader consumes."""

    def read_byte(self) -> int | None:
        """Return the next byte (``0``–``255``), or ``None`` at end of stream.

        Implementations block until a byte is available.
        """
        ...  # pragma: no cover


class DiagnosticSink(Protocol):
    """Contract for the error channel.

    Each call carries one line of human-readable ASCII text without a
    trailing newline.  Sinks must not raise on write failures; callers
    never change behaviour based on whether a diagnostic was delivered.
    """

    def emit(self, message: str) -> None:
        ...  # pragma: no cover
