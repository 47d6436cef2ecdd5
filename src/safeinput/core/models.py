"""Domain models for safeinput.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Line reader outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    """A line was read; ``byte_count`` bytes were copied into the window."""

    byte_count: int


@dataclass(frozen=True, slots=True)
class Overflow:
    """The line did not fit the window.  The rest of it was discarded."""


@dataclass(frozen=True, slots=True)
class EndOfStream:
    """The stream was exhausted before any byte of a new line arrived."""


ReadOutcome = Union[Success, Overflow, EndOfStream]

OVERFLOW = Overflow()
END_OF_STREAM = EndOfStream()


# ---------------------------------------------------------------------------
# Accessor results
# ---------------------------------------------------------------------------

class NoValueReason(enum.Enum):
    """Why an accessor returned without a value."""

    END_OF_STREAM = "end of input"
    ALLOCATION_FAILURE = "allocation failure"
    ATTEMPTS_EXHAUSTED = "too many invalid attempts"


@dataclass(frozen=True)
class Value(Generic[T]):
    """A successfully read and converted value."""

    value: T


@dataclass(frozen=True, slots=True)
class NoValue:
    """The distinguished "no value available" result."""

    reason: NoValueReason

    def __bool__(self) -> bool:
        return False


InputResult = Union[Value[T], NoValue]


def unwrap_or(result: InputResult[T], default: T) -> T:
    """Return the carried value, or *default* for a :class:`NoValue`."""
    if isinstance(result, Value):
        return result.value
    return default


# ---------------------------------------------------------------------------
# Owned strings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CountedString:
    """An owned byte sequence with an explicit length and no terminator.

    Embedded zero bytes are ordinary payload.
    """

    data: bytes

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data


@dataclass(frozen=True, slots=True)
class TerminatedString:
    """An owned byte sequence followed by a single zero terminator.

    ``raw`` holds the payload plus the terminator, ready for consumers
    that scan for the first zero byte.
    """

    raw: bytes

    @classmethod
    def from_payload(cls, payload: bytes) -> TerminatedString:
        return cls(raw=payload + b"\x00")

    @property
    def value(self) -> bytes:
        """Bytes up to the first terminator, as a terminator scan sees them."""
        return self.raw[: self.raw.index(b"\x00")]

    @property
    def payload(self) -> bytes:
        """Every byte that was read, without the trailing terminator."""
        return self.raw[:-1]

    def decode(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return self.value.decode(encoding, errors)

    def __len__(self) -> int:
        return len(self.value)
