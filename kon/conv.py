"""Prefix parsing of fixed-width integers and floats.

Every parser reads as much of ``text`` as forms a number and returns a
``(value, consumed)`` pair. Failure raises :class:`ConversionError`.
"""

from __future__ import annotations

import math
import re

from kon.base16 import decode_digit, is_base10, is_base16

_DIGITS10 = {8: 2, 16: 4, 32: 9, 64: 19}
_INVALID = 0xFF

_FLOAT_RE = re.compile(
    r"-?(?:(?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|(?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)"
    r"|(?P<nan>[nN][aA][nN](?:\([A-Za-z0-9_]*\))?))"
)


class ConversionError(ValueError):
    """Raised when text does not hold a number that fits the requested type."""


def _check_bits(bits: int) -> None:
    if bits not in _DIGITS10:
        raise ValueError(f"unsupported integer width: {bits}")


def _table_value(char: str) -> int:
    value = decode_digit(char)
    return _INVALID if value is None else value


def _leading_zeros(text: str) -> int:
    return len(text) - len(text.lstrip("0"))


def _finish(number: int, pos: int) -> tuple[int, int]:
    if pos == 0:
        raise ConversionError("no digits")
    return number, pos


def rstring10_to_uint(text: str, bits: int) -> tuple[int, int]:
    """Parse unsigned decimal digits at the start of ``text``, with no sign."""
    _check_bits(bits)
    limit = _DIGITS10[bits]
    mask = (1 << bits) - 1
    pos = _leading_zeros(text)
    remaining = len(text) - pos
    number = 0
    for char in text[pos:pos + min(remaining, limit)]:
        digit = _table_value(char)
        # The terminating character is folded into the value before stopping,
        # so a range check by the caller rejects forms such as "0x..".
        number = (number * 10 + digit) & mask
        if digit >= 10:
            return _finish(number, pos)
        pos += 1
    if remaining <= limit:
        return _finish(number, pos)
    digit = _table_value(text[pos])
    if digit >= 10:
        return _finish(number, pos)
    value = number * 10 + digit
    if value > mask:
        raise ConversionError(f"value does not fit in {bits} bits")
    pos += 1
    if pos < len(text) and is_base10(text[pos]):
        raise ConversionError(f"too many digits for {bits} bits")
    return value, pos


def rstring16_to_uint(text: str, bits: int) -> tuple[int, int]:
    """Parse unsigned hexadecimal digits at the start of ``text``, with no prefix."""
    _check_bits(bits)
    limit = bits // 4
    mask = (1 << bits) - 1
    pos = _leading_zeros(text)
    remaining = len(text) - pos
    number = 0
    for char in text[pos:pos + min(remaining, limit)]:
        digit = _table_value(char)
        number = ((number << 4) + digit) & mask
        if digit >= 16:
            return _finish(number, pos)
        pos += 1
    if remaining <= limit:
        return _finish(number, pos)
    if is_base16(text[pos]):
        raise ConversionError(f"too many digits for {bits} bits")
    return _finish(number, pos)


def string10_to_uint(text: str, bits: int) -> tuple[int, int]:
    """Parse an unsigned decimal number with an optional ``+`` sign."""
    _check_bits(bits)
    if not text:
        raise ConversionError("empty input")
    prefix = 1 if text[0] == "+" else 0
    value, pos = rstring10_to_uint(text[prefix:], bits)
    return value, pos + prefix


def _hex_prefix_length(text: str) -> int:
    if len(text) < 3:
        raise ConversionError("input too short for a hexadecimal number")
    offset = 1 if text[0] in "+-" else 0
    if text[offset] != "0" or text[offset + 1] not in "xX":
        raise ConversionError("missing 0x prefix")
    return offset + 2


def string16_to_uint(text: str, bits: int) -> tuple[int, int]:
    """Parse an unsigned ``0x`` hexadecimal number with an optional ``+`` sign."""
    _check_bits(bits)
    if text.startswith("-"):
        raise ConversionError("missing 0x prefix")
    prefix = _hex_prefix_length(text)
    value, pos = rstring16_to_uint(text[prefix:], bits)
    return value, pos + prefix


def _apply_sign(number: int, negative: bool, bits: int) -> int:
    bound = 1 << (bits - 1)
    if negative:
        if number > bound:
            raise ConversionError(f"value does not fit in signed {bits} bits")
        return -number
    if number > bound - 1:
        raise ConversionError(f"value does not fit in signed {bits} bits")
    return number


def string10_to_int(text: str, bits: int) -> tuple[int, int]:
    """Parse a signed decimal number with an optional ``+`` or ``-`` sign."""
    _check_bits(bits)
    if not text:
        raise ConversionError("empty input")
    negative = text[0] == "-"
    prefix = 1 if text[0] in "+-" else 0
    number, pos = rstring10_to_uint(text[prefix:], bits)
    return _apply_sign(number, negative, bits), pos + prefix


def string16_to_int(text: str, bits: int) -> tuple[int, int]:
    """Parse a signed ``0x`` hexadecimal number with an optional sign."""
    _check_bits(bits)
    prefix = _hex_prefix_length(text)
    negative = text[0] == "-"
    number, pos = rstring16_to_uint(text[prefix:], bits)
    return _apply_sign(number, negative, bits), pos + prefix


def string_to_float(text: str) -> tuple[float, int]:
    """Parse a floating-point number at the start of ``text``."""
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ConversionError("no number")
    matched = match.group(0)
    sign = -1.0 if matched.startswith("-") else 1.0
    if match.group("nan") is not None:
        return math.copysign(math.nan, sign), match.end()
    if match.group("inf") is not None:
        return sign * math.inf, match.end()
    value = float(matched)
    if math.isinf(value):
        raise ConversionError("value out of range")
    mantissa = re.split(r"[eE]", match.group("num"))[0]
    if value == 0.0 and any(ch not in "0." for ch in mantissa):
        raise ConversionError("value out of range")
    return value, match.end()


def string_to_uint(text: str, bits: int) -> tuple[int, int]:
    """Parse an unsigned number, hexadecimal with ``0x`` or else decimal."""
    try:
        return string16_to_uint(text, bits)
    except ConversionError:
        return string10_to_uint(text, bits)


def string_to_int(text: str, bits: int) -> tuple[int, int]:
    """Parse a signed number, hexadecimal with ``0x`` or else decimal."""
    try:
        return string16_to_int(text, bits)
    except ConversionError:
        return string10_to_int(text, bits)