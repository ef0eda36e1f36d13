"""Width, precision and sign layout for rendered conversions."""

from .spec import FormatSpec

_PLUS_CHARS = ".+ "


def pad_number(digits: str, spec: FormatSpec) -> str:
    """Lay out a number's digits with precision, sign and width."""
    body = digits.rjust(spec.prec, "0")
    fill = " " if spec.prec > -1 else spec.zero
    if spec.minus:
        if spec.signed:
            body = ("-" if spec.neg else _PLUS_CHARS[spec.plus]) + body
        return body.ljust(spec.width, fill)
    prefix = list(fill * (spec.width - len(body)))
    if spec.signed and prefix:
        j = len(prefix) - 1
        while j > 0 and prefix[j] == "0":
            j -= 1
        prefix[j] = spec.sign
    return "".join(prefix) + body


def pad_text(text: str, spec: FormatSpec) -> str:
    """Truncate text to the precision and pad it to the width."""
    if spec.prec >= 0:
        text = text[: spec.prec]
    width = max(spec.width, len(text))
    if spec.minus:
        if spec.signed:
            text = spec.sign + text
        return text.ljust(width, spec.zero)
    prefix = list(spec.zero * (width - len(text)))
    if spec.signed and prefix:
        prefix[-1] = spec.sign
    return "".join(prefix) + text


def pad_pointer(digits: str, spec: FormatSpec) -> str:
    """Lay out hexadecimal address digits behind a ``0x`` prefix."""
    body = digits.rjust(spec.prec, "0")
    if spec.minus and spec.zero != "0":
        return ("0x" + body).ljust(spec.width, spec.zero)
    if spec.zero == "0":
        return "0x" + body.rjust(spec.width - 2, "0")
    return ("0x" + body).rjust(spec.width, spec.zero)