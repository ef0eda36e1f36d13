"""Formatting of whole format strings and writing them to standard output."""

import sys
from typing import Any, Iterator

from .conversions import (
    render_char,
    render_pointer,
    render_signed,
    render_string,
    render_unsigned,
)
from .spec import FormatSpec, _next_arg, parse_spec

_BASES = {"b": 2, "o": 8, "u": 10, "x": 16}


def _convert(conv: str, spec: FormatSpec, args: Iterator[Any]) -> str | None:
    base = _BASES.get(conv.lower())
    if base is not None:
        spec.upper = conv < "a"
        return render_unsigned(spec, int(_next_arg(args)), base)
    if conv in "di":
        return render_signed(spec, int(_next_arg(args)))
    if conv == "s":
        return render_string(spec, _next_arg(args))
    if conv == "c":
        return render_char(spec, _next_arg(args))
    if conv == "%":
        return render_char(spec, "%")
    if conv == "p":
        return render_pointer(spec, int(_next_arg(args)))
    return None


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    it = iter(args)
    parts: list[str] = []
    count = 0
    pos = 0
    while True:
        start = fmt.find("%", pos)
        if start < 0:
            parts.append(fmt[pos:])
            count += len(fmt) - pos
            break
        parts.append(fmt[pos:start])
        count += start - pos
        spec, conv_pos = parse_spec(fmt, start + 1, it)
        if conv_pos >= len(fmt):
            break
        out = _convert(fmt[conv_pos], spec, it)
        if out is None:
            count += 1
        else:
            parts.append(out)
            count += len(out)
        pos = conv_pos + 1
    return "".join(parts), count


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the count."""
    text, count = _render(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return count