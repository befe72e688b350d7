"""Text renderings for the individual conversion specifiers."""

from __future__ import annotations

import operator

_INT_BITS = 32
_LONG_BITS = 64


def _wrap_unsigned(n: int, bits: int) -> int:
    return operator.index(n) & ((1 << bits) - 1)


def _wrap_signed(n: int, bits: int) -> int:
    value = _wrap_unsigned(n, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def format_char(c: str | int) -> str:
    """Render a single character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"cannot format {type(c).__name__} as a character")


def format_string(s: str | None) -> str:
    """Render a string; ``None`` becomes ``(null)`` and a NUL ends the text."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"cannot format {type(s).__name__} as a string")
    return s.split("\0", 1)[0]


def format_int(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return str(_wrap_signed(n, _INT_BITS))


def format_unsigned(n: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return str(_wrap_unsigned(n, _INT_BITS))


def format_hex(n: int, upper: bool) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    return format(_wrap_unsigned(n, _INT_BITS), "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` plus lower-case hex, or ``(nil)`` for null."""
    if address is None:
        return "(nil)"
    value = _wrap_unsigned(address, _LONG_BITS)
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")