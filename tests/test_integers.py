import pytest

from decscan.integers import (
    IntegerOutOfRangeError,
    IntegerType,
    InvalidIntegerError,
    parse_int_string,
)
from decscan.options import CharsFormat, ParseOptions


def test_stops_at_first_non_digit():
    assert parse_int_string("123abc", IntegerType.UINT32) == (123, 3)


def test_stops_at_comma():
    assert parse_int_string("1,234", IntegerType.INT32) == (1, 1)


@pytest.mark.parametrize("int_type", list(IntegerType))
def test_type_limits_round_trip(int_type):
    for value in (int_type.min_value, int_type.max_value):
        text = str(value)
        assert parse_int_string(text, int_type) == (value, len(text))


@pytest.mark.parametrize("int_type", list(IntegerType))
def test_just_above_max_is_out_of_range(int_type):
    text = str(int_type.max_value + 1)
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string(text, int_type)
    assert info.value.end == len(text)


@pytest.mark.parametrize(
    "int_type", [t for t in IntegerType if t.signed]
)
def test_just_below_min_is_out_of_range(int_type):
    text = str(int_type.min_value - 1)
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string(text, int_type)
    assert info.value.end == len(text)


def test_uint8_limits():
    assert parse_int_string("255", IntegerType.UINT8) == (255, 3)
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string("256", IntegerType.UINT8)
    assert info.value.end == 3


def test_uint8_many_digits_reports_end_of_digits():
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string("12345x", IntegerType.UINT8)
    assert info.value.end == 5


def test_uint8_leading_zeros_are_skipped():
    assert parse_int_string("00255", IntegerType.UINT8) == (255, 5)
    with pytest.raises(IntegerOutOfRangeError):
        parse_int_string("0300", IntegerType.UINT8)


def test_uint16_six_digits_out_of_range():
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string("123456;", IntegerType.UINT16)
    assert info.value.end == 6


def test_uint16_max_and_overflow():
    assert parse_int_string("65535", IntegerType.UINT16) == (65535, 5)
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string("65536", IntegerType.UINT16)
    assert info.value.end == 5


def test_uint64_overflow_beyond_64_bits():
    text = "18446744073709551616"
    with pytest.raises(IntegerOutOfRangeError) as info:
        parse_int_string(text, IntegerType.UINT64)
    assert info.value.end == len(text)


def test_negative_rejected_for_unsigned():
    with pytest.raises(InvalidIntegerError) as info:
        parse_int_string("-1", IntegerType.UINT8)
    assert info.value.position == 0


def test_only_zeros():
    assert parse_int_string("000", IntegerType.INT32) == (0, 3)
    assert parse_int_string("00x", IntegerType.UINT8) == (0, 2)


def test_negative_zero():
    assert parse_int_string("-0", IntegerType.INT32) == (0, 2)


@pytest.mark.parametrize("text", ["", "abc", "-", "-x", " 1"])
def test_invalid_input(text):
    with pytest.raises(InvalidIntegerError) as info:
        parse_int_string(text, IntegerType.INT32)
    assert info.value.position == 0


def test_leading_plus_needs_flag():
    with pytest.raises(InvalidIntegerError):
        parse_int_string("+5", IntegerType.INT32)
    options = ParseOptions(format=CharsFormat.GENERAL | CharsFormat.ALLOW_LEADING_PLUS)
    assert parse_int_string("+5", IntegerType.INT32, options) == (5, 2)
    assert parse_int_string("+5", IntegerType.UINT8, options) == (5, 2)


def test_lone_plus_is_invalid_even_when_allowed():
    options = ParseOptions(format=CharsFormat.GENERAL | CharsFormat.ALLOW_LEADING_PLUS)
    with pytest.raises(InvalidIntegerError):
        parse_int_string("+", IntegerType.UINT8, options)


def test_start_offset():
    assert parse_int_string("xx42", IntegerType.INT32, start=2) == (42, 4)


def test_start_past_end_is_invalid():
    with pytest.raises(InvalidIntegerError) as info:
        parse_int_string("12", IntegerType.INT32, start=2)
    assert info.value.position == 2


def test_hex_upper_and_lower_case():
    options = ParseOptions(base=16)
    assert parse_int_string("ff", IntegerType.UINT8, options) == (255, 2)
    assert parse_int_string("FFz", IntegerType.UINT8, options) == (255, 2)


@pytest.mark.parametrize("base", [2, 8, 16, 36])
@pytest.mark.parametrize("value", [0, 1, 7, 100, 12345, 2**31 - 1])
def test_base_round_trip(base, value):
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    text = ""
    n = value
    while True:
        n, rem = divmod(n, base)
        text = digits[rem] + text
        if n == 0:
            break
    result = parse_int_string(text + "!", IntegerType.INT64, ParseOptions(base=base))
    assert result == (value, len(text))


def test_binary_stops_at_digit_outside_base():
    value, end = parse_int_string("1012", IntegerType.INT32, ParseOptions(base=2))
    assert end == 3
    assert value == int("101", 2)


@pytest.mark.parametrize("value", [-32768, -1000, -1, 0, 1, 999, 32767])
def test_int16_decimal_round_trip(value):
    text = str(value)
    assert parse_int_string(text, IntegerType.INT16) == (value, len(text))


def test_integer_type_bounds():
    assert parse_int_string("-128", IntegerType.INT8) == (-128, 4)
    assert parse_int_string("127", IntegerType.INT8) == (127, 3)
    with pytest.raises(IntegerOutOfRangeError):
        parse_int_string("128", IntegerType.INT8)
    with pytest.raises(IntegerOutOfRangeError):
        parse_int_string("-129", IntegerType.INT8)
    assert parse_int_string("18446744073709551615", IntegerType.UINT64) == (
        18446744073709551615,
        20,
    )
    assert parse_int_string("0", IntegerType.UINT32) == (0, 1)
    with pytest.raises(InvalidIntegerError):
        parse_int_string("-1", IntegerType.UINT32)