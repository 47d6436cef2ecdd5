"""Pure per-type conversions over the bytes of one input line.

Every function here takes exactly the bytes the line reader collected
(no newline, no terminator) and either returns the converted value or
raises :class:`~safeinput.exceptions.ConversionError` whose message is
the diagnostic to show.  No I/O, no state.

Numeric grammar follows the C ``strto*`` family: optional leading
whitespace, optional sign, then the number.  Unlike a bare ``strto*``
call the whole span must be consumed — trailing characters, embedded
zero bytes, and non-ASCII bytes are all rejected.
"""

from __future__ import annotations

import math
import re
import struct
from fractions import Fraction

from safeinput.core.allow_set import AllowSet
from safeinput.core.models import CountedString, TerminatedString
from safeinput.exceptions import ConversionError
from safeinput.utils.limits import DBL_MIN, FLT_MAX, FLT_MIN, IntWidth

INVALID_MESSAGE = "Invalid input. Try again."
NEGATIVE_MESSAGE = "Value can not be negative."
SINGLE_CHAR_MESSAGE = "Invalid input. Please enter a single character."
BOOL_MESSAGE = "Invalid input. Enter 'y' or 'n'."

_SINGLE_INFINITY_BITS = 0x7F800000

_LEADING_SPACE = rb"[ \t\n\v\f\r]*"

_INTEGER_RE = re.compile(_LEADING_SPACE + rb"([+-]?)([0-9]+)")

_DECIMAL_FLOAT_RE = re.compile(
    _LEADING_SPACE
    + rb"([+-]?)((?:[0-9]+\.?[0-9]*|\.[0-9]+))([eE][+-]?[0-9]+)?",
)
_HEX_FLOAT_RE = re.compile(
    _LEADING_SPACE
    + rb"([+-]?)(0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+))([pP][+-]?[0-9]+)?",
)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def _has_leading_minus(data: bytes) -> bool:
    return data.lstrip(b" \t\n\v\f\r").startswith(b"-")


def parse_integer(data: bytes, width: IntWidth) -> int:
    """Parse a base-10 integer that must fit *width* exactly.

    Unsigned widths reject a leading ``-`` outright, whatever follows it.
    """
    if not width.signed and _has_leading_minus(data):
        raise ConversionError(NEGATIVE_MESSAGE)

    match = _INTEGER_RE.fullmatch(data)
    if match is None:
        raise ConversionError(INVALID_MESSAGE)

    sign, digits = match.groups()
    value = int(digits)
    if sign == b"-":
        value = -value

    if not width.contains(value):
        raise ConversionError(INVALID_MESSAGE)
    return value


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

def _parse_float_literal(data: bytes) -> tuple[float, bool]:
    """Return the binary64 value of *data* and whether its mantissa is nonzero."""
    match = _DECIMAL_FLOAT_RE.fullmatch(data)
    if match is not None:
        _sign, mantissa, _exponent = match.groups()
        text = data.decode("ascii").strip()
        nonzero = any(ch in b"123456789" for ch in mantissa)
        return float(text), nonzero

    match = _HEX_FLOAT_RE.fullmatch(data)
    if match is not None:
        sign, mantissa, exponent = match.groups()
        literal = (sign + mantissa + (exponent or b"")).decode("ascii")
        nonzero = any(ch in b"123456789abcdefABCDEF" for ch in mantissa[2:])
        try:
            return float.fromhex(literal), nonzero
        except OverflowError as exc:
            raise ConversionError(INVALID_MESSAGE) from exc

    raise ConversionError(INVALID_MESSAGE)


def _check_range(value: float, nonzero: bool, smallest_normal: float) -> None:
    if not math.isfinite(value):
        raise ConversionError(INVALID_MESSAGE)
    if nonzero and abs(value) < smallest_normal:
        # Underflow: the literal was nonzero but the result is zero or subnormal.
        raise ConversionError(INVALID_MESSAGE)


def parse_double(data: bytes) -> float:
    """Parse a finite IEEE binary64 value."""
    value, nonzero = _parse_float_literal(data)
    _check_range(value, nonzero, DBL_MIN)
    return value


def _exact_literal(data: bytes) -> Fraction:
    """Return the exact rational value of a literal already accepted by the grammar."""
    match = _DECIMAL_FLOAT_RE.fullmatch(data)
    if match is not None:
        sign, mantissa, exponent = match.groups()
        whole, _, fraction = mantissa.partition(b".")
        digits = int(whole + fraction or b"0")
        scale = (int(exponent[1:]) if exponent else 0) - len(fraction)
        value = Fraction(digits) * Fraction(10) ** scale
    else:
        match = _HEX_FLOAT_RE.fullmatch(data)
        if match is None:
            raise ConversionError(INVALID_MESSAGE)
        sign, mantissa, exponent = match.groups()
        whole, _, fraction = mantissa[2:].partition(b".")
        digits = int(whole + fraction or b"0", 16)
        scale = (int(exponent[1:]) if exponent else 0) - 4 * len(fraction)
        value = Fraction(digits) * Fraction(2) ** scale
    return -value if sign == b"-" else value


def _single_bits(value: float) -> int:
    (bits,) = struct.unpack("<I", struct.pack("<f", value))
    return bits


def _single_value(bits: int) -> float:
    (value,) = struct.unpack("<f", struct.pack("<I", bits))
    return value


def _single_exact(bits: int) -> Fraction:
    # The step past FLT_MAX is 2**128, as if the exponent range continued.
    if bits >= _SINGLE_INFINITY_BITS:
        return Fraction(2) ** 128
    return Fraction(_single_value(bits))


def _round_to_single(magnitude: Fraction, approx: float) -> float:
    """Round a positive exact value to the nearest binary32, ties to even.

    *approx* is the binary64 rounding of *magnitude*.  Narrowing it is at
    most one binary32 step off, so only the neighbouring midpoints need
    to be compared against the exact value.
    """
    bits = _single_bits(min(approx, FLT_MAX))

    while bits < _SINGLE_INFINITY_BITS:
        midpoint = (_single_exact(bits) + _single_exact(bits + 1)) / 2
        if magnitude > midpoint or (magnitude == midpoint and bits % 2):
            bits += 1
        else:
            break

    while bits > 0:
        midpoint = (_single_exact(bits - 1) + _single_exact(bits)) / 2
        if magnitude < midpoint or (magnitude == midpoint and bits % 2):
            bits -= 1
        else:
            break

    if bits >= _SINGLE_INFINITY_BITS:
        raise ConversionError(INVALID_MESSAGE)
    return _single_value(bits)


def parse_float(data: bytes) -> float:
    """Parse a finite value that fits IEEE binary32.

    The literal is rounded once, from its exact value, so the result
    matches ``strtof`` even where narrowing the binary64 value would
    round a second time.
    """
    wide, nonzero = _parse_float_literal(data)
    if not math.isfinite(wide):
        raise ConversionError(INVALID_MESSAGE)
    if wide == 0.0:
        _check_range(wide, nonzero, FLT_MIN)
        return wide

    magnitude = abs(_exact_literal(data))
    value = math.copysign(_round_to_single(magnitude, abs(wide)), wide)
    _check_range(value, nonzero, FLT_MIN)
    return value


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------

def parse_char(data: bytes) -> str:
    """Return the single character typed, or ``"\\n"`` for an empty line.

    Bytes map one-to-one onto characters (Latin-1), so the result is
    exact for any byte value.
    """
    if not data:
        return "\n"
    if len(data) != 1:
        raise ConversionError(SINGLE_CHAR_MESSAGE)
    return chr(data[0])


def parse_filtered_char(data: bytes, allowed: AllowSet) -> str:
    """Return the single character typed if it is a member of *allowed*.

    An empty line counts as "not exactly one character" here.
    """
    if len(data) != 1:
        raise ConversionError(SINGLE_CHAR_MESSAGE)
    if data[0] not in allowed:
        raise ConversionError(f"Invalid input. Allowed: {allowed.display}")
    return chr(data[0])


def parse_yes_no(char: str) -> bool:
    """Map ``y``/``Y`` to ``True`` and ``n``/``N`` to ``False``."""
    if char in ("y", "Y"):
        return True
    if char in ("n", "N"):
        return False
    raise ConversionError(BOOL_MESSAGE)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def to_counted_string(data: bytes) -> CountedString:
    return CountedString(data=bytes(data))


def to_terminated_string(data: bytes) -> TerminatedString:
    return TerminatedString.from_payload(bytes(data))
