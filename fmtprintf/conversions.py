"""Rendering of each conversion type into text."""

from dataclasses import replace

from .padding import pad_number, pad_pointer, pad_text
from .spec import FormatSpec

SYMBOLS = "0123456789abcdef"


def to_base(n: int, base: int) -> str:
    """Write a non-negative integer in ``base`` with lower-case digits."""
    if n < 0:
        raise ValueError("negative value")
    if not 2 <= base <= len(SYMBOLS):
        raise ValueError(f"unsupported base {base}")
    if n == 0:
        return "0"
    out = []
    while n:
        n, digit = divmod(n, base)
        out.append(SYMBOLS[digit])
    return "".join(reversed(out))


def _digits(spec: FormatSpec, n: int, base: int) -> str:
    if n == 0 and spec.prec == 0:
        return ""
    text = to_base(n, base)
    return text.upper() if spec.upper else text


def render_unsigned(spec: FormatSpec, n: int, base: int) -> str:
    """Render ``n`` as a 32-bit unsigned value in ``base``."""
    spec = replace(spec)
    if spec.minus:
        spec.zero = " "
    digits = _digits(spec, n & 0xFFFFFFFF, base)
    spec.width = max(len(digits) + spec.signed, spec.width, spec.prec)
    return pad_number(digits, spec)


def render_signed(spec: FormatSpec, n: int) -> str:
    """Render ``n`` as a 32-bit signed decimal."""
    spec = replace(spec)
    n = (n + 2**31) % 2**32 - 2**31
    if n < 0:
        spec.neg = True
        n = -n
    digits = _digits(spec, n, 10)
    spec.width = max(len(digits) + spec.signed, spec.width)
    spec.width = max(spec.width, spec.prec + spec.signed)
    return pad_number(digits, spec)


def render_pointer(spec: FormatSpec, n: int) -> str:
    """Render ``n`` as a 64-bit address in hexadecimal."""
    spec = replace(spec)
    n &= 0xFFFFFFFFFFFFFFFF
    digits = "" if n == 0 and spec.prec == 0 else to_base(n, 16)
    spec.width = max(len(digits) + 2, spec.width, spec.prec + 2)
    return pad_pointer(digits, spec)


def render_string(spec: FormatSpec, s: str | None) -> str:
    """Render a string; ``None`` becomes ``(null)``."""
    spec = replace(spec, plus=0)
    if spec.minus:
        spec.zero = " "
    return pad_text("(null)" if s is None else s, spec)


def render_char(spec: FormatSpec, c: str | int) -> str:
    """Render a single character given as a string or a code."""
    ch = c if isinstance(c, str) else chr(c & 0xFF)
    if len(ch) != 1:
        raise ValueError("expected a single character")
    spec = replace(spec, width=spec.width or 1, prec=1)
    if ch == "\0":
        pad = " " * (spec.width - 1)
        return "\0" + pad if spec.minus else pad + "\0"
    return render_string(spec, ch)