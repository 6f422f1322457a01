"""
Strict text parsers for environment values.

Each parser accepts one exact grammar (no surrounding whitespace, no digit
separators) and raises ParseError with ErrorCode.SYNTAX or ErrorCode.RANGE.
Syntax is always checked before range.
"""

import math
import re
import struct
from fractions import Fraction

from .errors import ErrorCode, ParseError

NATIVE_BITS = struct.calcsize("P") * 8

_BOOLS = {
    "1": True, "t": True, "T": True, "true": True, "True": True, "TRUE": True,
    "0": False, "f": False, "F": False, "false": False, "False": False, "FALSE": False,
}

# len(str(2**64 - 1)); any longer significant part overflows every width
_MAX_INT_DIGITS = 20

# float32 halfway points need far fewer significant digits than this
_MAX_FLOAT_DIGITS = 200
_FLOAT32_MAX = float.fromhex("0x1.fffffep127")

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_DECIMAL_FLOAT = re.compile(r"([+-]?)([0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE]([+-]?[0-9]+))?")
_HEX_FLOAT = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP]([+-]?[0-9]+)")
_SPECIAL_FLOAT = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)


def parse_bool(text: str) -> bool:
    """Parses 1/t/T/true/True/TRUE and 0/f/F/false/False/FALSE."""
    try:
        return _BOOLS[text]
    except KeyError:
        raise ParseError("parse_bool", text, ErrorCode.SYNTAX) from None


def _magnitude(func: str, text: str) -> int:
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_INT_DIGITS:
        raise ParseError(func, text, ErrorCode.RANGE)
    return int(digits or "0")


def parse_int(text: str, bits: int = NATIVE_BITS) -> int:
    """Parses a signed decimal integer that fits in ``bits`` two's complement bits."""
    if not _SIGNED.fullmatch(text):
        raise ParseError("parse_int", text, ErrorCode.SYNTAX)
    value = _magnitude("parse_int", text)
    if text.startswith("-"):
        value = -value
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ParseError("parse_int", text, ErrorCode.RANGE)
    return value


def parse_uint(text: str, bits: int = NATIVE_BITS) -> int:
    """Parses an unsigned decimal integer (no sign allowed) below 2**bits."""
    if not _UNSIGNED.fullmatch(text):
        raise ParseError("parse_uint", text, ErrorCode.SYNTAX)
    value = _magnitude("parse_uint", text)
    if value >= 1 << bits:
        raise ParseError("parse_uint", text, ErrorCode.RANGE)
    return value


def _pow(base: int, exp: int) -> Fraction:
    return Fraction(base ** exp) if exp >= 0 else Fraction(1, base ** -exp)


def _signed_exponent(text: str | None) -> int:
    if not text:
        return 0
    digits = text.lstrip("+-").lstrip("0") or "0"
    return -int(digits) if text.startswith("-") else int(digits)


def _exact_magnitude(text: str) -> Fraction:
    """Exact absolute value of a decimal or hex float literal."""
    m = _HEX_FLOAT.fullmatch(text)
    if m:
        whole, _, frac = m.group(2).partition(".")
        return int(whole + frac, 16) * _pow(2, _signed_exponent(m.group(3)) - 4 * len(frac))

    m = _DECIMAL_FLOAT.fullmatch(text)
    whole, _, frac = m.group(2).partition(".")
    digits = (whole + frac).lstrip("0")
    scale = _signed_exponent(m.group(3)) - len(frac)
    if len(digits) > _MAX_FLOAT_DIGITS:
        dropped = digits[_MAX_FLOAT_DIGITS:]
        digits = digits[:_MAX_FLOAT_DIGITS]
        scale += len(dropped)
        if dropped.strip("0"):
            # sticky digit keeps the value on the same side of any halfway point
            digits += "1"
            scale -= 1
    return int(digits or "0") * _pow(10, scale)


def _round_float32(q: Fraction) -> float:
    """Rounds a positive exact value to the nearest float32, ties to even."""
    exp = q.numerator.bit_length() - q.denominator.bit_length()
    if q < _pow(2, exp):
        exp -= 1
    quantum = max(exp - 23, -149)
    return math.ldexp(round(q / _pow(2, quantum)), quantum)


def parse_float(text: str, bits: int = 64) -> float:
    """
    Parses a decimal or hexadecimal (0x1p-2) float, or inf/infinity/nan.

    With bits=32 the literal is rounded once, directly to single precision;
    finite input that rounds to infinity in the target width is a range error.
    """
    if bits not in (32, 64):
        raise ValueError(f"unsupported float width: {bits}")
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text)
    try:
        if _DECIMAL_FLOAT.fullmatch(text):
            value = float(text)
        elif _HEX_FLOAT.fullmatch(text):
            value = float.fromhex(text)
        else:
            raise ParseError("parse_float", text, ErrorCode.SYNTAX)
    except OverflowError:
        raise ParseError("parse_float", text, ErrorCode.RANGE) from None
    if math.isinf(value):
        raise ParseError("parse_float", text, ErrorCode.RANGE)
    if bits == 32 and value != 0.0:
        if abs(value) > 2 * _FLOAT32_MAX:
            raise ParseError("parse_float", text, ErrorCode.RANGE)
        rounded = _round_float32(_exact_magnitude(text))
        if rounded > _FLOAT32_MAX:
            raise ParseError("parse_float", text, ErrorCode.RANGE)
        value = math.copysign(rounded, value)
    return value
