"""Parsing of conversion specifications: flags, width and precision."""

from dataclasses import dataclass
from typing import Any, Iterator

FLAG_CHARS = "+-0 "
_DIGITS = "0123456789"


@dataclass
class FormatSpec:
    """Options gathered from one conversion specification."""

    zero: str = " "
    minus: bool = False
    plus: int = 0
    neg: bool = False
    width: int = 0
    prec: int = -1
    upper: bool = False

    @property
    def signed(self) -> bool:
        """True when a sign character is to be written."""
        return self.neg or self.plus != 0

    @property
    def sign(self) -> str:
        return "-" if self.neg else "+"


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _align_left(spec: FormatSpec) -> None:
    spec.zero = " "
    spec.minus = True
    spec.width = -spec.width


def _read_number(fmt: str, pos: int, args: Iterator[Any]) -> tuple[int, int]:
    value = 0
    if pos < len(fmt) and fmt[pos] == "*":
        value = int(_next_arg(args))
        pos += 1
    end = pos
    while end < len(fmt) and fmt[end] in _DIGITS:
        end += 1
    if end > pos:
        value = int(fmt[pos:end])
    return value, end


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse flags, width and precision starting at ``pos``.

    Returns the spec and the index of the conversion character.
    ``*`` values are drawn from the ``args`` iterator.
    """
    spec = FormatSpec()
    while pos < len(fmt) and fmt[pos] in FLAG_CHARS:
        flag = fmt[pos]
        if flag == "-":
            _align_left(spec)
        elif flag == "0" and not spec.minus:
            spec.zero = "0"
        elif flag == "+":
            spec.plus = 1
        elif flag == " ":
            spec.plus = 2
        pos += 1
    spec.width, pos = _read_number(fmt, pos, args)
    if spec.width < 0:
        _align_left(spec)
    if pos < len(fmt) and fmt[pos] == ".":
        spec.prec, pos = _read_number(fmt, pos + 1, args)
    return spec, pos