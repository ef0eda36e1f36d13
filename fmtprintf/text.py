"""Small string helpers: integer parsing, splitting, trimming and searching."""

from itertools import zip_longest

_SPACES = " \t\v\n\r\f"
_DIGITS = "0123456789"
_LONG_MAX = 2**63 - 1
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way the C ``atoi`` family does.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. On 64-bit overflow the result is ``-1`` for positive
    and ``0`` for negative input. The value is returned as a 32-bit int.
    """
    rest = s.lstrip(_SPACES)
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    limit = _LONG_MAX + negative
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + int(ch)
        if value > limit:
            return 0 if negative else -1
    return _to_int32(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` inside the first ``length`` characters of ``haystack``.

    Returns the index of the match, or ``None``. Only the first occurrence
    is considered: if it does not fit within ``length``, there is no match.
    """
    if not needle:
        return 0
    if len(needle) > length:
        return None
    index = haystack.find(needle)
    if index < 0 or index + len(needle) > length:
        return None
    return index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def to_upper(s: str) -> str:
    """Upper-case the ASCII letters of ``s``, leaving other characters."""
    return s.translate(_ASCII_UPPER)