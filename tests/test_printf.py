import pytest

from bermap.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("hello, world") == "hello, world"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_produces_nothing():
    assert format_printf("a%qb") == "ab"


def test_unknown_conversion_consumes_no_argument():
    assert format_printf("%q%d", 5) == format_printf("%d", 5)


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_char_from_code_and_str():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c", "z") == "z"


def test_string_and_null_string():
    assert format_printf("%s!", "Ekip") == "Ekip!"
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, 12, -12, 1222, 2147483647, -2147483647])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_int():
    assert int(format_printf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert int(format_printf("%u", 1222)) == 1222


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 1731, 2**32 - 1])
def test_hex_round_trip_and_case(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert lower.upper() == upper


def test_hex_zero_and_negative():
    assert format_printf("%x", 0) == "0"
    assert int(format_printf("%x", -1), 16) == 2**32 - 1


def test_pointer_null():
    assert format_printf("%p", None) == "0x0"
    assert format_printf("%p", 0) == "0x0"


def test_pointer_address():
    out = format_printf("%p", 255)
    assert out.startswith("0x")
    assert int(out, 16) == 255


def test_pointer_of_object_uses_identity():
    obj = object()
    out = format_printf("%p", obj)
    assert int(out, 16) == id(obj)


def test_mixed_conversions():
    out = format_printf("%c, %s, %d, %%", "a", "Ekip", 12)
    assert out == "a, Ekip, 12, %"


def test_extra_arguments_ignored():
    assert format_printf("%d", 3, 4, 5) == format_printf("%d", 3)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "12")


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d%%", "Ekip", 42)
    captured = capsys.readouterr().out
    assert captured == format_printf("%s=%d%%", "Ekip", 42)
    assert count == len(captured)


def test_printf_counts_nul_character(capsys):
    count = printf("%c", 0)
    assert capsys.readouterr().out == "\0"
    assert count == 1