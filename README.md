# decscan

`decscan` reads a decimal number or an integer from the start of a piece of text, or from any position in it.

For a decimal number it does not produce a float. It reports the parts that a float converter needs:

- the sign;
- a mantissa of at most 19 significant digits;
- a decimal exponent;
- the index where the number ended.

For an integer it parses a value of a fixed width, from 8 to 64 bits, signed or unsigned. Bases 2 to 36 are supported, and the range is checked exactly.

## Installation

```
pip install decscan
```

The package needs Python 3.10 or later and has no dependencies.

## Decimal numbers

```python
from decscan.ascii_number import parse_number_string

number = parse_number_string("234532.3426362,7869234.9823")
number.mantissa      # 2345323426362
number.exponent      # -7
number.negative      # False
number.end           # 14: the index just past the last character used
number.integer       # "234532"
number.fraction      # "3426362"
```

The result is a frozen `ParsedNumber`. Its value is `mantissa * 10**exponent`, and the value is negative when `negative` is true.

When the number has more than 19 significant digits, `too_many_digits` is true. In that case the mantissa keeps only the leading digits, and the exponent is adjusted to match. `integer` and `fraction` always hold the full digit strings before and after the decimal point.

The parse stops at the first character that cannot belong to the number, and whatever follows is left alone. An `e` with no digits after it is not part of the number, so `"3.14e"` ends at index 4. To start part-way through a string, pass `start`.

### Formats and the decimal point

A `ParseOptions` object chooses the accepted notation through `CharsFormat` flags. It also sets the decimal point character. The default is `CharsFormat.GENERAL` with `"."`.

```python
from decscan.options import CharsFormat, ParseOptions

parse_number_string("1,25", ParseOptions(decimal_point=","))
parse_number_string("3.14e10", ParseOptions(format=CharsFormat.SCIENTIFIC))
parse_number_string("3.14e10", ParseOptions(format=CharsFormat.FIXED))  # ends at 4
parse_number_string("1d5", ParseOptions(format=CharsFormat.GENERAL | CharsFormat.FORTRAN))
```

The flags are:

- `FIXED`: plain decimal notation. Any exponent is not read.
- `SCIENTIFIC`: an `e` or `E` exponent is read. Without `FIXED`, the exponent is required.
- `GENERAL`: `FIXED | SCIENTIFIC`.
- `FORTRAN`: the exponent may also start with `d`, `D`, `+` or `-`, as in `1d5` or `1+5`.
- `ALLOW_LEADING_PLUS`: a leading `+` sign is accepted.

`ParseOptions` raises `ValueError` in two cases: when `decimal_point` is not a single character, and when `base` is outside 2 to 36. The `base` setting is used only by the integer parser.

Pass `json=True` to `parse_number_string` to apply the JSON number grammar:

- a leading `+` is never accepted;
- the integer part needs at least one digit and must have no leading zeros;
- a decimal point must be followed by digits.

### Errors

If no number in the requested format begins at `start`, `NumberFormatError` is raised. It is a subclass of `ValueError`, and it has two attributes:

- `error` is a `ParseError` member, such as `ParseError.NO_DIGITS_IN_MANTISSA` or `ParseError.MISSING_EXPONENTIAL_PART`.
- `position` is the index where the problem was found.

```python
from decscan.ascii_number import NumberFormatError, parse_number_string

try:
    parse_number_string("abc")
except NumberFormatError as exc:
    print(exc.error, exc.position)
```

## Integers

```python
from decscan.integers import IntegerType, parse_int_string
from decscan.options import ParseOptions

parse_int_string("255", IntegerType.UINT8)                      # (255, 3)
parse_int_string("-128", IntegerType.INT8)                      # (-128, 4)
parse_int_string("ff", IntegerType.UINT16, ParseOptions(base=16))  # (255, 2)
```

`parse_int_string` returns `(value, end)`. The default type is `IntegerType.INT64`. Each `IntegerType` member has `bits`, `signed`, `min_value` and `max_value`.

A leading minus is accepted only for signed types. A leading plus is accepted only with `CharsFormat.ALLOW_LEADING_PLUS`. A run of zeros on its own, such as `"000"`, parses as 0.

Two exceptions can be raised:

- `InvalidIntegerError` (a `ValueError`) when there are no digits to read, or when a minus sign is given for an unsigned type. Its `position` is where the parse began.
- `IntegerOutOfRangeError` (an `OverflowError`) when the digits do not fit the type. Its `end` is the index just past the digits that were read, and its `int_type` is the requested type.

## Low-level helpers

`decscan.swar` holds word-at-a-time digit routines that work on packed little-endian byte values:

- `read8_to_u64` and `read4_to_u32`
- `is_made_of_eight_digits_fast` and `is_made_of_four_digits_fast`
- `parse_eight_digits_unrolled` and `parse_four_digits_unrolled`
- `byteswap64` and `byteswap32`
- `is_integer`

They are there for callers who batch their own digit parsing. Of these, the scanners above use only `is_integer`.

## What it does not do

`decscan` does not round a parsed mantissa and exponent to a float, and it does not parse `inf` or `nan`. It has no command-line tool. It is a library to be called from Python code.