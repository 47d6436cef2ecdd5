"""Numeric widths, buffer sizes, and sentinel constants.

The integer widths mirror the LP64 C data model the accessors were
modelled on: ``int`` is 32 bits, ``long`` and ``long long`` are both
64 bits.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Buffer sizes
# ---------------------------------------------------------------------------

INPUT_BUFFER_SIZE: int = 128
"""Byte window allocated for numeric and string accessors."""

CHAR_INPUT_BUFFER_SIZE: int = 4
"""Byte window allocated for single-character accessors."""

NEWLINE: int = 0x0A
"""Line terminator byte."""

EOF: int = -1
"""End-of-stream marker returned by legacy character getters."""


# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IntWidth:
    """A fixed-width two's-complement (or unsigned) integer type."""

    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def sentinel(self) -> int:
        """Legacy no-value signal: minimum for signed, maximum for unsigned."""
        return self.min_value if self.signed else self.max_value

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


INT32 = IntWidth("int", 32, signed=True)
UINT32 = IntWidth("unsigned int", 32, signed=False)
INT64 = IntWidth("long", 64, signed=True)
UINT64 = IntWidth("unsigned long", 64, signed=False)


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

FLT_MAX: float = 3.4028234663852886e38
FLT_MIN: float = 1.1754943508222875e-38
"""Smallest positive normal binary32 value."""

DBL_MIN: float = 2.2250738585072014e-308
"""Smallest positive normal binary64 value."""
