"""Shared utilities — constants, numeric limits, and sentinel values.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from safeinput.utils.limits import (
    CHAR_INPUT_BUFFER_SIZE,
    EOF,
    INPUT_BUFFER_SIZE,
    INT32,
    INT64,
    UINT32,
    UINT64,
    IntWidth,
)

__all__: list[str] = [
    "CHAR_INPUT_BUFFER_SIZE",
    "EOF",
    "INPUT_BUFFER_SIZE",
    "INT32",
    "INT64",
    "UINT32",
    "UINT64",
    "IntWidth",
]
