"""Single-character hexadecimal digit tables."""

from __future__ import annotations

_ENCODE = "0123456789ABCDEF"

_DECODE: dict[str, int] = {ch: value for value, ch in enumerate(_ENCODE)}
_DECODE.update({ch.lower(): value for ch, value in _DECODE.items() if ch.isalpha()})


def decode_digit(char: str) -> int | None:
    """Return the value of a hexadecimal digit, or None if ``char`` is not one."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return _DECODE.get(char)


def encode_digit(value: int) -> str:
    """Return the upper-case hexadecimal digit for ``value`` (0 to 15)."""
    if not 0 <= value < 16:
        raise ValueError(f"digit value out of range: {value}")
    return _ENCODE[value]


def is_base10(char: str) -> bool:
    """Tell whether ``char`` is a decimal digit."""
    value = decode_digit(char)
    return value is not None and value < 10


def is_base16(char: str) -> bool:
    """Tell whether ``char`` is a hexadecimal digit of either case."""
    return decode_digit(char) is not None