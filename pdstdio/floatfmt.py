"""Conversion of doubles to text for the e, f and g printf conversions."""

import math

__all__ = ["format_double"]

_MANTISSA_DIGITS = 53
_FUZZ = 0.1e-15
_CONVERSIONS = "eEfFgG"


def _digit(value: int) -> str:
    """Return the character for the last decimal digit of ``value``."""
    rem = abs(value) % 10
    return chr(ord("0") + (rem if value >= 0 else -rem))


def _scale(magnitude: float) -> tuple[float, int]:
    """Normalise a non-negative number into [1, 10) and return its exponent."""
    exp = 0
    if magnitude > 1.0:
        while magnitude >= 10.0:
            exp += 1
            magnitude /= 10.0
    elif magnitude == 0.0:
        exp = 0
    elif magnitude < 1.0:
        while magnitude < 1.0:
            exp -= 1
            magnitude *= 10.0
    return magnitude, exp


def _layout(conversion: str, exp: int, precision: int) -> int:
    """Pick the layout: 0 exponent form, 1 digits before the point, -1 '0.' form."""
    if conversion in "eE":
        return 0
    if conversion in "fF":
        return 1 if exp >= 0 else -1
    if exp >= 0:
        return 1 if precision > exp else 0
    return -1 if exp >= -4 else 0


def _shrink(step: float, count: int) -> float:
    for _ in range(count):
        step /= 10.0
    return step


def _round(magnitude: float, exp: int, layout: int, precision: int):
    if layout == 0:
        magnitude += _shrink(0.5, min(precision, _MANTISSA_DIGITS))
    elif layout == 1:
        magnitude += _shrink(0.5, min(exp + precision, _MANTISSA_DIGITS))
    else:
        if precision < _MANTISSA_DIGITS:
            places = precision + exp + 1
        else:
            places = _MANTISSA_DIGITS
        if places >= 0:
            magnitude += _shrink(5.0, places)
    if magnitude >= 10.0:
        magnitude /= 10.0
        exp += 1
    if layout == -1 and exp >= 0:
        layout = 1
    return magnitude, exp, layout


def _fraction_only(magnitude: float, exp: int, precision: int) -> list[str]:
    leading_zeros = -exp - 1
    parts = ["0.", "0" * leading_zeros]
    remaining = precision - leading_zeros
    whole = int(magnitude)
    parts.append(_digit(whole))
    remaining -= 1
    for _ in range(remaining):
        magnitude = (magnitude - whole) * 10.0
        whole = int(magnitude)
        parts.append(_digit(whole))
    return parts


def _with_integer(magnitude: float, exp: int, precision: int,
                  conversion: str) -> list[str]:
    whole = int(magnitude)
    parts = [_digit(whole)]
    for position in range(precision + exp):
        if position == exp:
            parts.append(".")
        magnitude = (magnitude - whole) * 10.0
        if position > exp and magnitude < _FUZZ:
            if conversion not in "gG":
                parts.append("0")
        else:
            whole = int(magnitude)
            parts.append(_digit(whole))
    return parts


def _exponent_form(magnitude: float, exp: int, precision: int) -> list[str]:
    whole = int(magnitude)
    parts = [_digit(whole), "."]
    for _ in range(precision):
        magnitude = (magnitude - whole) * 10.0
        whole = int(magnitude)
        parts.append(_digit(whole))
    size = abs(exp)
    parts.append("E" + ("-" if exp < 0 else "+") + _digit(size // 10) + _digit(size))
    return parts


def format_double(value, conversion, width, precision):
    """Render ``value`` for conversion e, E, f, F, g or G.

    The result is right-aligned with spaces to ``width``; the exponent is
    always written with an upper-case ``E`` and two digits.
    """
    if not isinstance(conversion, str) or len(conversion) != 1 \
            or conversion not in _CONVERSIONS:
        raise ValueError(f"unsupported floating conversion: {conversion!r}")
    if precision < 0:
        raise ValueError("precision must not be negative")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("cannot format a non-finite number")

    if value < 0:
        magnitude, sign = -value, "-"
    else:
        magnitude, sign = value, ""

    magnitude, exp = _scale(magnitude)
    layout = _layout(conversion, exp, precision)
    magnitude, exp, layout = _round(magnitude, exp, layout, precision)

    if layout == -1:
        parts = _fraction_only(magnitude, exp, precision)
    elif layout == 1:
        parts = _with_integer(magnitude, exp, precision, conversion)
    else:
        parts = _exponent_form(magnitude, exp, precision)

    return (sign + "".join(parts)).rjust(width)