# fmtprintf

A small printf-style formatter. It takes a format string and a list of
arguments and turns them into text. It follows C `printf` conventions for a
compact set of conversions.

## Installation

```
pip install .
```

## Supported conversions

| Conversion | Meaning                                                   |
|------------|-----------------------------------------------------------|
| `%c`       | a single character, given as a one-character string or a code |
| `%s`       | a string (`None` renders as `(null)`)                     |
| `%p`       | a 64-bit address as `0x` followed by lower-case hex       |
| `%d`, `%i` | a signed 32-bit integer                                   |
| `%u`       | an unsigned 32-bit integer                                |
| `%x`, `%X` | unsigned 32-bit hexadecimal, in lower or upper case       |
| `%o`       | unsigned 32-bit octal                                     |
| `%b`       | unsigned 32-bit binary                                    |
| `%%`       | a literal percent sign                                    |

The formatter understands the flags `-`, `0`, `+` and space. It also takes a
field width and a `.precision`. Either of these can be given as `*`, in which
case the value is taken from the argument list. A negative `*` width means
left alignment.

Integers are wrapped to 32 bits, or to 64 bits for `%p`, in the same way C
would wrap them.

A conversion character outside this table produces no text, although it still
adds one to the count that `printf` returns. A `%` at the very end of the
format string ends the output at that point. If a conversion needs more
arguments than were passed, `TypeError` is raised.

## Usage

```python
from fmtprintf.printf import format_string, printf

text = format_string("%-5d|%05x|%.3s", 42, 255, "abcdef")
# '42   |000ff|abc'

count = printf("%s has %d items\n", "cart", 3)
# writes the text to standard output and returns the number of characters
```

The lower-level pieces can also be used on their own:

- `fmtprintf.spec.parse_spec(fmt, pos, args)` reads flags, width and precision
  from `fmt` starting at `pos`, taking `*` values from the `args` iterator. It
  returns a `FormatSpec` together with the index of the conversion character.
- `fmtprintf.padding` provides `pad_number`, `pad_text` and `pad_pointer`.
  Each applies a `FormatSpec` to digits or text that have already been
  converted.
- `fmtprintf.conversions` provides `to_base(n, base)` for bases 2 to 16, plus
  one function for each conversion kind: `render_unsigned`, `render_signed`,
  `render_pointer`, `render_string` and `render_char`.
- `fmtprintf.text` holds string helpers:
  - `atoi` parses a leading integer the C way.
  - `itoa` converts an integer to text.
  - `split` splits on one character and drops empty words.
  - `strtrim` removes characters of a set from both ends.
  - `substr` returns part of a string.
  - `strnstr` finds a substring within a bounded length and returns its index or `None`.
  - `strncmp` does a bounded comparison.
  - `to_upper` upper-cases ASCII letters only.

## What it does not do

The package is a library only and provides no command-line program. It does
not cover floating-point conversions or length modifiers such as `l` or `h`.
The `#` flag is also not supported.

## Running the tests

```
pip install .[test]
pytest
```