"""printf-style formatting of values into text.

The conversions follow a small, strict dialect:

* ``%d``, ``%i``, ``%u``, ``%x``, ``%X``, ``%o`` and ``%p`` use 32-bit
  integer semantics. Signed conversions wrap into the signed range and
  unsigned ones into the unsigned range.
* ``%e``, ``%E``, ``%f``, ``%F``, ``%g`` and ``%G`` are rendered by
  :func:`pdstdio.floatfmt.format_double`. Flags other than the width are
  ignored.
* ``%s`` with a precision of 0 or 1 prints the whole string.
* ``%c`` and ``%%`` are only recognised without flags, width or precision.
* Any other conversion produces no output and takes no argument.

With the ``0`` flag the padding goes in front of the sign, so ``%05d`` of
-42 gives ``00-42``. The ``#`` prefix is not counted in the width.
"""

import operator
import re

from pdstdio.floatfmt import format_double

__all__ = ["format_string", "sprintf"]

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_SIGN_BIT = 1 << (_WORD_BITS - 1)
_POINTER_DIGITS = 8

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0*]*)"
    r"(?P<width>\d*)"
    r"(?:\.(?P<precision>\*|\d*))?"
    r"(?P<length>[hlL]?)"
    r"(?P<conversion>.?)",
    re.DOTALL,
)

_INTEGER_CONVERSIONS = "dxXuiop"
_FLOAT_CONVERSIONS = "eEgGfF"


class _Arguments:
    """Hands out the positional arguments one at a time."""

    def __init__(self, values):
        self._values = iter(values)

    def next(self):
        try:
            return next(self._values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None


def _to_signed(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << _WORD_BITS) if value & _SIGN_BIT else value


def _c_string(value) -> str:
    if value is None:
        return "(null)"
    text = value if isinstance(value, str) else str(value)
    return text.split("\0", 1)[0]


def _char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires an integer or a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_integer(value, conversion, *, minus, plus, zero, hash_,
                    width, precision) -> str:
    number = operator.index(value)
    if precision < 0:
        precision = 1
    if conversion in "di":
        signed = _to_signed(number)
        negative = signed < 0
        magnitude = -signed if negative else signed
    else:
        negative = False
        magnitude = number & _WORD_MASK

    if conversion == "p":
        precision = _POINTER_DIGITS

    if magnitude == 0:
        digits = ""
    elif conversion in "Xp":
        digits = format(magnitude, "X")
    elif conversion == "x":
        digits = format(magnitude, "x")
    elif conversion == "o":
        digits = format(magnitude, "o")
    else:
        digits = str(magnitude)
    digits = digits.rjust(precision, "0")

    if negative:
        body = "-" + digits
    elif plus:
        body = "+" + digits
    else:
        body = digits

    prefix = "0x" if hash_ and conversion in "xX" else ""
    fill = "0" if zero else " "
    padding = fill * max(width - len(body), 0)
    if minus:
        return prefix + body + padding
    return padding + prefix + body


def _format_text(value, *, minus, width, precision) -> str:
    text = _c_string(value)
    if precision > 1:
        text = text[:precision]
    padding = " " * max(width - len(text), 0)
    return text + padding if minus else padding + text


def _convert(match, args: _Arguments) -> str:
    flags = match.group("flags")
    width_digits = match.group("width")
    precision_text = match.group("precision")
    length = match.group("length")
    conversion = match.group("conversion")

    if not conversion:
        return ""

    bare = not (flags or width_digits or length) and precision_text is None
    if bare and conversion == "%":
        return "%"
    if bare and conversion == "c":
        return _char(args.next())

    minus = plus = zero = hash_ = False
    width = 0
    for flag in flags:
        if flag == "-":
            minus = True
        elif flag == "+":
            plus = True
        elif flag == "0":
            zero = True
        elif flag == "#":
            hash_ = True
        elif flag == "*":
            width = operator.index(args.next())
    if minus:
        zero = False
    for digit in width_digits:
        width = width * 10 + int(digit)

    if precision_text is None:
        precision = -1
    elif precision_text == "*":
        precision = operator.index(args.next())
    else:
        precision = int(precision_text) if precision_text else 0

    if conversion in _INTEGER_CONVERSIONS:
        return _format_integer(
            args.next(), conversion, minus=minus, plus=plus, zero=zero,
            hash_=hash_, width=width, precision=precision,
        )
    if conversion in _FLOAT_CONVERSIONS:
        if precision < 0:
            precision = 6
        return format_double(float(args.next()), conversion, width, precision)
    if conversion == "s":
        if precision < 0:
            precision = 1
        return _format_text(args.next(), minus=minus, width=width,
                            precision=precision)
    return ""


def format_string(fmt, *args):
    """Format ``args`` according to the printf-style ``fmt`` and return the text."""
    arguments = _Arguments(args)
    pieces = []
    position = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[position:match.start()])
        pieces.append(_convert(match, arguments))
        position = match.end()
        if not match.group("conversion"):
            break
    else:
        pieces.append(fmt[position:])
    return "".join(pieces)


def sprintf(fmt, *args):
    """Return the text that sprintf would store for ``fmt`` and ``args``."""
    return format_string(fmt, *args)