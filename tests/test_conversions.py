import pytest

from ftformat.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)


def test_char_from_string():
    assert format_char("c") == "c"


def test_char_from_code():
    assert format_char(ord("A")) == "A"


def test_char_code_truncates_to_byte():
    assert format_char(256 + ord("A")) == "A"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_char_rejects_float():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_string_none():
    assert format_string(None) == "(null)"


def test_string_plain():
    assert format_string("Hello") == "Hello"


def test_string_stops_at_nul():
    assert format_string("ab\0cd") == "ab"


def test_string_rejects_non_string():
    with pytest.raises(TypeError):
        format_string(12)


@pytest.mark.parametrize("n", [0, 7, -1, 42, 2147483647, -2147483648])
def test_int_round_trip(n):
    assert int(format_int(n)) == n


def test_int_minimum():
    assert format_int(-2147483648) == "-2147483648"


def test_int_wraps_to_32_bits():
    assert format_int(2**31) == "-2147483648"
    assert format_int(2**32 + 5) == str(5)


def test_int_rejects_string():
    with pytest.raises(TypeError):
        format_int("3")


@pytest.mark.parametrize("n", [0, 9, 10, 3, 4294967295, 2147483648])
def test_unsigned_round_trip(n):
    assert int(format_unsigned(n)) == n


def test_unsigned_negative_wraps():
    assert int(format_unsigned(-1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 255, 111111, 2147483647, 4294967295])
def test_hex_round_trip(n):
    lower = format_hex(n, False)
    upper = format_hex(n, True)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper.lower() == lower


def test_hex_zero():
    assert format_hex(0, False) == "0"


def test_hex_negative_wraps():
    assert int(format_hex(-1, False), 16) == 2**32 - 1


def test_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


@pytest.mark.parametrize("address", [1, 16, 0xDEADBEEF, 2**63 - 1, 2**64 - 1])
def test_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_pointer_negative_wraps_to_64_bits():
    text = format_pointer(-1)
    assert int(text[2:], 16) == 2**64 - 1