# pdstdio

C-style `printf` formatting and `scanf` parsing in pure Python. It follows
the rules of a small classic C library, including its quirks, and has no
dependencies.

## Installation

```
pip install .
```

## Modules

### `pdstdio.floatfmt`

`format_double(value, conversion, width, precision)` renders a float for
the `e`, `E`, `f`, `F`, `g` or `G` conversion and right-aligns it with spaces
to `width`. The exponent is always written with an upper-case `E` and two
digits. A conversion other than these, a negative precision or a non-finite
value raises `ValueError`.

### `pdstdio.printf`

`format_string(fmt, *args)` and `sprintf(fmt, *args)` return the formatted
text.

- `%d %i %u %x %X %o %p` use 32-bit integer semantics. `%p` prints eight
  upper-case hex digits.
- `%e %E %f %F %g %G` go through `format_double`. Only the width and
  precision apply; the default precision is 6.
- `%s` prints a string up to its first NUL. `None` prints as `(null)`. A
  precision of 0 or 1 prints the whole string.
- `%c` and `%%` are recognised only without flags, width or precision.
- The `-`, `+`, `#` and `0` flags, a field width, a precision and `*` are
  supported. With `0` the padding goes in front of the sign, so `%05d` of
  -42 gives `00-42`.
- Any other conversion produces no output and takes no argument. If there
  are too few arguments, `TypeError` is raised.

### `pdstdio.scanf`

- `sscanf(text, fmt)` parses a string.
- `scan(reader, fmt)` parses from any object that has `getc()`, `ungetc(c)`
  and `tell()`, where `getc` returns a character code or `EOF` (-1).
- `StringReader(text)` is such a reader over a string. It stops at the
  first NUL.

Both `sscanf` and `scan` return `(count, values)`. `count` is the number of
conversions that matched, or `EOF` when the input is empty. `values` holds
`int`, `float` and `str` results in order.

- Supported conversions are `%d %i %u %x %o %p %e %f %g %E %G %s %c %[...]`
  (with `^`), `%n` and `%%`, together with the `*`, `h` and `l` modifiers.
- Floats without `l` are rounded to single precision.

## Example

```python
from pdstdio.floatfmt import format_double
from pdstdio.printf import sprintf
from pdstdio.scanf import sscanf

print(sprintf("%5d|%-4s|%x", 42, "ab", 255))   # "   42|ab  |ff"
print(format_double(3.14159, "f", 0, 2))        # "3.14"
print(sscanf("12 abc", "%d %s"))                # (2, [12, 'abc'])
```

## What it does not do

The package only formats and parses text. It does not open files, has no
buffered streams, and does not read from or write to the console. There is
no mode-string parsing and no command-line program.