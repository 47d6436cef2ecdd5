"""Sentinel-returning getters for call sites written against the C API.

Each function reads through a shared default
:class:`~safeinput.core.input_service.InputService` and collapses a
``NoValue`` result into the classic failure value:

==========================  ==============================
Type                        Failure value
==========================  ==============================
signed int / long           minimum representable value
unsigned int / long         maximum representable value
float / double              ``nan``
char (plain / filtered)     :data:`EOF` (``-1``)
strings                     ``None``
bool                        ``False``
==========================  ==============================

A legitimately typed extreme value is indistinguishable from the
failure value here; new code should use :class:`InputService` and test
for ``NoValue`` instead.
"""

from __future__ import annotations

import math

from safeinput.core.allow_set import AllowSet
from safeinput.core.input_service import InputService
from safeinput.core.models import CountedString, InputResult, TerminatedString, unwrap_or
from safeinput.factory import create_input_service
from safeinput.utils.limits import EOF, INT32, INT64, UINT32, UINT64

__all__: list[str] = [
    "EOF",
    "get_bool",
    "get_char",
    "get_char_filtered",
    "get_cstring",
    "get_double",
    "get_float",
    "get_int",
    "get_long",
    "get_long_long",
    "get_string",
    "get_uint",
    "get_ulong",
    "get_ulong_long",
    "reset_default_service",
]

_default_service: InputService | None = None


def _service() -> InputService:
    global _default_service
    if _default_service is None:
        _default_service = create_input_service()
    return _default_service


def reset_default_service(service: InputService | None = None) -> None:
    """Replace (or with no argument, drop) the shared default service."""
    global _default_service
    _default_service = service


def _char_code(result: InputResult[str]) -> int:
    char = unwrap_or(result, None)
    return EOF if char is None else ord(char)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def get_int() -> int:
    return unwrap_or(_service().get_int(), INT32.sentinel)


def get_uint() -> int:
    return unwrap_or(_service().get_uint(), UINT32.sentinel)


def get_long() -> int:
    return unwrap_or(_service().get_long(), INT64.sentinel)


def get_ulong() -> int:
    return unwrap_or(_service().get_ulong(), UINT64.sentinel)


def get_long_long() -> int:
    return unwrap_or(_service().get_long_long(), INT64.sentinel)


def get_ulong_long() -> int:
    return unwrap_or(_service().get_ulong_long(), UINT64.sentinel)


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

def get_float() -> float:
    return unwrap_or(_service().get_float(), math.nan)


def get_double() -> float:
    return unwrap_or(_service().get_double(), math.nan)


# ---------------------------------------------------------------------------
# Characters, strings, boolean
# ---------------------------------------------------------------------------

def get_char() -> int:
    """Return the byte value typed, ``ord("\\n")`` for an empty line, or :data:`EOF`."""
    return _char_code(_service().get_char())


def get_char_filtered(allowed: str | bytes | AllowSet | None) -> int:
    """Like :func:`get_char`, restricted to *allowed*.

    Raises :class:`~safeinput.exceptions.AllowSetError` for a missing or
    empty allow-set.
    """
    return _char_code(_service().get_char_filtered(allowed))


def get_cstring() -> TerminatedString | None:
    return unwrap_or(_service().get_cstring(), None)


def get_string() -> CountedString | None:
    return unwrap_or(_service().get_string(), None)


def get_bool() -> bool:
    return unwrap_or(_service().get_bool(), False)
