"""A small printf supporting the %c %s %p %d %i %u %x %X and %% specifiers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from functools import partial
from typing import Any, TextIO

from ftformat.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)

_HANDLERS: dict[str, Callable[[Any], str]] = {
    "d": format_int,
    "i": format_int,
    "c": format_char,
    "s": format_string,
    "u": format_unsigned,
    "p": format_pointer,
    "x": partial(format_hex, upper=False),
    "X": partial(format_hex, upper=True),
}


def convert(spec: str, args: Iterator[Any]) -> str:
    """Render one specifier, taking its value from the ``args`` iterator.

    ``%`` takes no value; an unknown specifier renders nothing and takes no value.
    """
    if spec == "%":
        return "%"
    handler = _HANDLERS.get(spec)
    if handler is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return handler(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text that ``fmt`` produces with ``args``."""
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(convert(spec, values))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    return len(text)