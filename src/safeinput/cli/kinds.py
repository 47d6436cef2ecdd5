"""Registry of accessor kinds exposed on the command line.

Maps each ``KIND`` name accepted by ``safeinput read`` (and offered by
``safeinput demo``) to the :class:`InputService` accessor behind it,
and renders accessor values as the bytes written to stdout.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from safeinput.core.input_service import InputService
from safeinput.core.models import CountedString, InputResult, TerminatedString


@dataclass(frozen=True, slots=True)
class AccessorKind:
    """One readable type: its CLI name, a display label, and its accessor."""

    name: str
    label: str
    read: Callable[[InputService, str | None], InputResult[Any]]
    needs_allowed: bool = False


def _plain(method: Callable[[InputService], InputResult[Any]]) -> Callable[
    [InputService, str | None], InputResult[Any]
]:
    def read(service: InputService, _allowed: str | None) -> InputResult[Any]:
        return method(service)

    return read


def _filtered(service: InputService, allowed: str | None) -> InputResult[Any]:
    return service.get_char_filtered(allowed)


KINDS: dict[str, AccessorKind] = {
    kind.name: kind
    for kind in (
        AccessorKind("int", "signed 32-bit integer", _plain(InputService.get_int)),
        AccessorKind("uint", "unsigned 32-bit integer", _plain(InputService.get_uint)),
        AccessorKind("long", "signed 64-bit integer", _plain(InputService.get_long)),
        AccessorKind("ulong", "unsigned 64-bit integer", _plain(InputService.get_ulong)),
        AccessorKind("longlong", "signed 64-bit integer", _plain(InputService.get_long_long)),
        AccessorKind(
            "ulonglong", "unsigned 64-bit integer", _plain(InputService.get_ulong_long),
        ),
        AccessorKind("float", "32-bit float", _plain(InputService.get_float)),
        AccessorKind("double", "64-bit float", _plain(InputService.get_double)),
        AccessorKind("char", "single character", _plain(InputService.get_char)),
        AccessorKind("charset", "character from a set", _filtered, needs_allowed=True),
        AccessorKind("cstring", "terminated string", _plain(InputService.get_cstring)),
        AccessorKind("string", "counted string", _plain(InputService.get_string)),
        AccessorKind("bool", "yes/no answer", _plain(InputService.get_bool)),
    )
}


def render_value(value: object) -> bytes:
    """Return the stdout form of an accessor value, without a newline.

    Strings are written byte-for-byte; characters as their single byte.
    """
    if isinstance(value, CountedString):
        return value.data
    if isinstance(value, TerminatedString):
        return value.value
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, str):
        return value.encode("latin-1")
    if isinstance(value, float):
        return repr(value).encode("ascii")
    return str(value).encode("ascii")


def display_value(value: object) -> str:
    """Return a one-line human-readable form of an accessor value."""
    if isinstance(value, (CountedString, TerminatedString)):
        return f"{render_value(value)!r} ({len(value)} bytes)"
    if isinstance(value, str):
        return repr(value)
    return render_value(value).decode("ascii")
