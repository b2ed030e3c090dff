"""scanf-style parsing of formatted input.

:func:`scan` reads characters from any reader with ``getc()``,
``ungetc(c)`` and ``tell()`` methods, where ``getc`` returns a character
code or :data:`EOF`. It returns a ``(count, values)`` pair:

* ``count`` is the number of conversions that matched, or :data:`EOF`
  when the input was exhausted before anything was read. Conversions
  suppressed with ``*`` are counted, though their values are not kept.
* ``values`` holds the assigned values in order: ``int`` for integer
  conversions, ``float`` for ``e``/``f``/``g`` and ``str`` for ``s``,
  ``c`` and ``[``. ``%n`` stores the number of characters taken from the
  reader so far, including the one character of look-ahead.

Integer conversions store 32-bit values; ``h`` narrows them to 16 bits.
Floating conversions without ``l`` are rounded to single precision.
Unsigned conversions ignore a leading minus sign.
"""

import math
import struct

__all__ = ["EOF", "StringReader", "scan", "sscanf"]

EOF = -1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_WORD_MASK = 0xFFFFFFFF
_HALF_MASK = 0xFFFF


class StringReader:
    """Character reader over a string, which ends at its first NUL."""

    def __init__(self, text):
        self._text = text.split("\0", 1)[0]
        self._index = 0
        self._consumed = 0
        self._pushed = None

    def getc(self):
        """Return the next character code, or EOF at the end of the text."""
        if self._pushed is not None:
            code, self._pushed = self._pushed, None
            self._consumed += 1
            return code
        if self._index >= len(self._text):
            return EOF
        code = ord(self._text[self._index])
        self._index += 1
        self._consumed += 1
        return code

    def ungetc(self, c):
        """Push one character back; return it, or EOF if that is not possible."""
        if self._pushed is not None or c == EOF:
            return EOF
        self._pushed = c
        self._consumed -= 1
        return c

    def tell(self):
        """Return the number of characters taken so far."""
        return self._consumed


class _Halt(Exception):
    """Stop scanning, giving the look-ahead character back to the reader."""


class _Mismatch(Exception):
    """Stop scanning at once, keeping the look-ahead character."""


def _is_space(code):
    return code >= 0 and chr(code) in _WHITESPACE


def _is_digit(code):
    return 48 <= code <= 57


def _is_alpha(code):
    return 0 <= code < 128 and chr(code).isalpha()


def _to_signed(value, mask):
    value &= mask
    top = (mask + 1) >> 1
    return value - (mask + 1) if value & top else value


def _single(value):
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class _Scanner:
    def __init__(self, reader):
        self.reader = reader
        self.start = reader.tell()
        self.ch = reader.getc()
        self.count = 0
        self.values = []
        self.finished = False

    @property
    def at_end(self):
        return self.ch == EOF

    def advance(self):
        self.ch = self.reader.getc()

    def skip_space(self):
        while _is_space(self.ch):
            self.advance()

    def store(self, skip, value):
        if not skip:
            self.values.append(value)

    def text(self, skip):
        self.skip_space()
        if self.at_end:
            self.finished = True
            self.store(skip, "")
            return
        chars = []
        while True:
            if _is_space(self.ch):
                break
            if self.at_end:
                self.finished = True
                break
            chars.append(chr(self.ch))
            self.advance()
        self.store(skip, "".join(chars))
        self.count += 1

    def char(self, skip):
        if self.at_end:
            self.finished = True
            return
        self.store(skip, chr(self.ch))
        self.count += 1
        self.advance()

    def charset(self, fmt, index, skip):
        """Match a %[...] set starting at ``index`` (the '['); return the ']' index."""
        index += 1
        reverse = False
        if index < len(fmt) and fmt[index] == "^":
            reverse = True
            index += 1
        if index >= len(fmt):
            raise _Halt
        close = fmt.find("]", index + 1)
        if close < 0:
            raise _Mismatch
        members = fmt[index:close]
        chars = []
        while True:
            found = self.ch >= 0 and chr(self.ch) in members
            if found == reverse:
                break
            chars.append(chr(self.ch))
            self.advance()
            if self.at_end:
                break
        if not chars:
            raise _Halt
        self.store(skip, "".join(chars))
        self.count += 1
        return close

    def integer(self, conversion, skip, modlong, modshort):
        base = {"x": 16, "p": 16, "o": 8, "i": 0}.get(conversion, 10)
        self.skip_space()
        negative = False
        if self.ch == ord("-"):
            negative = True
            self.advance()
        elif self.ch == ord("+"):
            self.advance()

        undecided = base == 0
        value = 0
        matched = 0
        while not self.at_end:
            code = self.ch
            if _is_digit(code):
                if base == 0:
                    if code == ord("0"):
                        base = 8
                    else:
                        base = 10
                        undecided = False
                value = value * base + (code - ord("0"))
                self.advance()
            elif _is_alpha(code):
                if chr(code) in "xX":
                    if base == 0 or (base == 8 and undecided):
                        base = 16
                        undecided = False
                        self.advance()
                    elif base == 16:
                        self.advance()
                    else:
                        break
                elif base <= 10:
                    break
                else:
                    value = value * base + (ord(chr(code).upper()) - ord("A")) + 10
                    self.advance()
            else:
                break
            matched += 1

        if matched == 0:
            raise _Halt

        mask = _HALF_MASK if modshort and not modlong else _WORD_MASK
        if conversion in "di":
            signed = _to_signed(-value if negative else value, _WORD_MASK)
            self.store(skip, _to_signed(signed, mask))
        else:
            self.store(skip, value & mask)
        self.count += 1

    def floating(self, skip, modlong):
        negative = exp_negative = False
        seen_dot = seen_exp = exp_signed = False
        mantissa_digits = exp_digits = fraction_digits = 0
        trailing_zeros = 0
        exponent = 0
        value = 0.0

        self.skip_space()
        if self.ch == ord("-"):
            negative = True
            self.advance()
        elif self.ch == ord("+"):
            self.advance()

        while self.ch > 0:
            char = chr(self.ch)
            if char == "." and not seen_dot and not seen_exp:
                seen_dot = True
            elif _is_digit(self.ch):
                if seen_exp:
                    exp_digits += 1
                    exponent = exponent * 10 + (self.ch - ord("0"))
                else:
                    mantissa_digits += 1
                    if seen_dot:
                        fraction_digits += 1
                    if char == "0" and value != 0.0:
                        trailing_zeros += 1
                    else:
                        while trailing_zeros > 0:
                            value *= 10.0
                            trailing_zeros -= 1
                        value = value * 10.0 + (self.ch - ord("0"))
            elif char in "eE" and not seen_exp:
                seen_exp = True
            elif char in "+-" and seen_exp and exp_digits == 0 and not exp_signed:
                exp_signed = True
                if char == "-":
                    exp_negative = True
            else:
                break
            self.advance()

        if self.at_end:
            self.finished = True
        if mantissa_digits == 0 or (seen_exp and exp_digits == 0):
            raise _Mismatch

        if exp_negative:
            exponent = -exponent
        exponent += trailing_zeros - fraction_digits
        if exponent != 0 and value != 0.0:
            divide = exponent < 0
            exponent = abs(exponent)
            power = 10.0
            while True:
                if exponent & 1:
                    if divide:
                        value /= power
                    else:
                        value *= power
                exponent >>= 1
                if exponent == 0:
                    break
                power *= power
        if negative:
            value = -value
        self.store(skip, value if modlong else _single(value))
        self.count += 1

    def run(self, fmt):
        length = len(fmt)
        index = 0
        in_item = False
        modlong = modshort = skip = False
        while not self.finished and index < length:
            c = fmt[index]
            if c == "%" or in_item:
                if c == "%":
                    index += 1
                    modlong = modshort = skip = False
                    if index < length and fmt[index] == "*":
                        skip = True
                        index += 1
                    if index >= length:
                        break
                    c = fmt[index]
                if c == "%":
                    if self.ch != ord("%"):
                        raise _Mismatch
                    self.advance()
                    in_item = False
                elif c == "l":
                    modlong = True
                    in_item = True
                elif c == "h":
                    modshort = True
                    in_item = True
                else:
                    in_item = False
                    if c == "s":
                        self.text(skip)
                    elif c == "[":
                        index = self.charset(fmt, index, skip)
                    elif c == "c":
                        self.char(skip)
                    elif c == "n":
                        self.values.append(self.reader.tell() - self.start)
                    elif c in "duxopi":
                        self.integer(c, skip, modlong, modshort)
                    elif c in "efgEG":
                        self.floating(skip, modlong)
            elif c in _WHITESPACE:
                self.skip_space()
            else:
                if self.ch != ord(c):
                    raise _Mismatch
                self.advance()
            index += 1
            if self.at_end:
                self.finished = True


def scan(reader, fmt):
    """Parse input from ``reader`` by ``fmt``; return ``(count, values)``."""
    scanner = _Scanner(reader)
    if scanner.at_end:
        return EOF, []
    try:
        scanner.run(fmt)
    except _Mismatch:
        return scanner.count, scanner.values
    except _Halt:
        pass
    reader.ungetc(scanner.ch)
    return scanner.count, scanner.values


def sscanf(text, fmt):
    """Parse ``text`` by ``fmt``; return ``(count, values)``."""
    return scan(StringReader(text), fmt)