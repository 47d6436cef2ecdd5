"""Reader configuration.

A single frozen value object collects the knobs an embedding program
may want to turn: window sizes and the retry bound.  The defaults
reproduce the classic interactive behaviour — 128-byte lines, 4-byte
character windows, and an unbounded correction loop.
"""

from __future__ import annotations

from dataclasses import dataclass

from safeinput.exceptions import ConfigurationError
from safeinput.utils.limits import CHAR_INPUT_BUFFER_SIZE, INPUT_BUFFER_SIZE


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Settings shared by every accessor of an :class:`InputService`.

    Attributes
    ----------
    buffer_size : int
        Byte window for numeric and string accessors.  One byte is held
        back for accessors that need room for a terminator.
    char_buffer_size : int
        Byte window for character accessors.
    max_attempts : int | None
        Number of lines an accessor may consume before giving up with
        ``NoValue(ATTEMPTS_EXHAUSTED)``.  ``None`` retries forever.
    """

    buffer_size: int = INPUT_BUFFER_SIZE
    char_buffer_size: int = CHAR_INPUT_BUFFER_SIZE
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        if self.buffer_size < 2:
            raise ConfigurationError(
                f"buffer_size must be at least 2, got {self.buffer_size}.",
            )
        if self.char_buffer_size < 2:
            raise ConfigurationError(
                f"char_buffer_size must be at least 2, got {self.char_buffer_size}.",
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigurationError(
                f"max_attempts must be positive, got {self.max_attempts}.",
                hint="Omit it to retry until valid input or end of input.",
            )
