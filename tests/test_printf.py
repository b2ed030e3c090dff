import pytest

from pdstdio.floatfmt import format_double
from pdstdio.printf import format_string, sprintf


def test_literal_text_passes_through():
    assert format_string("hello, world") == "hello, world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_string_conversion():
    assert format_string("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_string("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -12345, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert int(format_string("%i", n)) == n


@pytest.mark.parametrize("n", [1, 255, 4096, 123456789])
def test_hex_and_octal_round_trip(n):
    assert int(format_string("%x", n), 16) == n
    assert int(format_string("%o", n), 8) == n
    assert format_string("%X", n) == format_string("%x", n).upper()


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2 ** 31) == format_string("%d", -(2 ** 31))
    assert int(format_string("%d", 2 ** 31)) == -(2 ** 31)


def test_unsigned_of_negative_wraps():
    for n in (1, 2, 1000):
        assert int(format_string("%u", -n)) + n == 2 ** 32


def test_width_right_aligns():
    out = format_string("%8d", 5)
    assert len(out) == 8
    assert out.lstrip(" ") == "5"


def test_minus_flag_left_aligns():
    out = format_string("%-8d|", 5)
    assert out.startswith("5")
    assert out.endswith("|")
    assert len(out) == 9


def test_zero_flag():
    assert format_string("%05d", 42) == "00042"


def test_zero_fill_goes_before_sign():
    assert format_string("%05d", -42) == "00-42"


def test_minus_overrides_zero():
    assert format_string("%-05d", 42).rstrip(" ") == "42"
    assert len(format_string("%-05d", 42)) == 5


def test_precision_pads_with_zeros():
    out = format_string("%.5d", 42)
    assert len(out) == 5
    assert out.lstrip("0") == "42"


def test_zero_precision_zero_value_is_empty():
    assert format_string("%.0d", 0) == ""


def test_plus_flag():
    assert format_string("%+d", 5).startswith("+")
    assert format_string("%+d", -5).startswith("-")


def test_hash_prefix_for_hex():
    out = format_string("%#x", 255)
    assert out.startswith("0x")
    assert int(out, 16) == 255
    assert format_string("%#X", 255).startswith("0x")


def test_hash_prefix_not_counted_in_width():
    out = format_string("%#6x", 255)
    assert len(out) == 8


def test_star_width_matches_literal_width():
    assert format_string("%*d", 6, 3) == format_string("%6d", 3)


def test_star_precision_matches_literal_precision():
    assert format_string("%.*d", 4, 3) == format_string("%.4d", 3)


def test_long_and_short_modifiers_are_accepted():
    assert format_string("%ld", 99) == format_string("%d", 99)
    assert format_string("%hd", 99) == format_string("%d", 99)
    assert format_string("%Lx", 99) == format_string("%x", 99)


def test_pointer_is_eight_upper_hex_digits():
    out = format_string("%p", 0xBEEF)
    assert len(out) == 8
    assert out == out.upper()
    assert int(out, 16) == 0xBEEF


def test_string_precision_truncates():
    assert format_string("%.2s", "abcdef") == "ab"


def test_string_precision_of_one_prints_whole_string():
    assert format_string("%.1s", "abcdef") == "abcdef"


def test_string_width():
    assert format_string("%6s", "ab") == "ab".rjust(6)
    assert format_string("%-6s", "ab") == "ab".ljust(6)


def test_character_conversion():
    assert format_string("%c", ord("z")) == "z"
    assert format_string("%c", "q") == "q"


def test_float_conversions_use_format_double():
    assert format_string("%f", 1.5) == format_double(1.5, "f", 0, 6)
    assert format_string("%e", 1234.5) == format_double(1234.5, "e", 0, 6)
    assert format_string("%g", 0.25) == format_double(0.25, "g", 0, 6)


def test_float_width_and_precision():
    assert format_string("%10.2f", 3.25) == format_double(3.25, "f", 10, 2)
    assert len(format_string("%10.2f", 3.25)) == 10


def test_unknown_conversion_produces_nothing():
    assert format_string("a%qb") == "ab"
    assert format_string("x%5cy", 65) == "xy"


def test_trailing_percent_stops_output():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_integer_conversion_rejects_float():
    with pytest.raises(TypeError):
        format_string("%d", 1.5)


def test_mixed_format():
    out = format_string("%s=%d (%x)", "n", 31, 31)
    name, rest = out.split("=")
    assert name == "n"
    number, hexpart = rest.split(" ")
    assert int(number) == 31
    assert int(hexpart.strip("()"), 16) == 31


def test_sprintf_matches_format_string():
    assert sprintf("%-4s|%3d", "ab", 7) == format_string("%-4s|%3d", "ab", 7)