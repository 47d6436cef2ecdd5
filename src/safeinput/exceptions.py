"""Custom exception hierarchy for safeinput.

Accessors never raise for bad-but-present input: malformed lines become
diagnostics and a retry, absent input becomes a ``NoValue`` result.
Exceptions are reserved for programming-contract violations and for
the CLI error boundary.

Hierarchy
---------
SafeInputError
├── InvalidArgumentError
├── ConfigurationError
│   └── AllowSetError
├── ConversionError
├── EnvironmentError
└── SelectionCancelledError
"""

from __future__ import annotations


class SafeInputError(Exception):
    """Base exception for all safeinput errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Contract violations ---------------------------------------------------

class InvalidArgumentError(SafeInputError):
    """Raised when the line reader is called with an unusable byte window."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(SafeInputError):
    """Raised when reader settings are out of range."""


class AllowSetError(ConfigurationError):
    """Raised when a filtered character accessor gets a missing or empty allow-set."""


# --- Conversion ------------------------------------------------------------

class ConversionError(SafeInputError):
    """Raised by a conversion helper when a line does not parse.

    The message is the diagnostic line shown to the user.  The retry
    loop always catches it; it never escapes an accessor.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SafeInputError):
    """Raised when an optional UI dependency is not available."""


# --- Interactive selection -------------------------------------------------

class SelectionCancelledError(SafeInputError):
    """Raised when the user cancels an interactive selection prompt."""
