"""Tokenise a decimal number into its sign, mantissa and decimal exponent."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .options import CharsFormat, ParseOptions
from .swar import is_integer

_U64 = (1 << 64) - 1
_MAX_SAFE_DIGITS = 19
_MIN_NINETEEN_DIGIT = 10**18
_EXPONENT_CAP = 0x10000000


class ParseError(enum.Enum):
    """Reasons why text is not a valid number."""

    MISSING_INTEGER_AFTER_SIGN = "the minus sign must be followed by an integer"
    MISSING_INTEGER_OR_DOT_AFTER_SIGN = "a sign must be followed by an integer or dot"
    LEADING_ZEROS_IN_INTEGER_PART = "the integer part must not have leading zeros"
    NO_DIGITS_IN_INTEGER_PART = "the integer part must have at least one digit"
    NO_DIGITS_IN_FRACTIONAL_PART = "a decimal point must be followed by digits"
    NO_DIGITS_IN_MANTISSA = "the mantissa must have at least one digit"
    MISSING_EXPONENTIAL_PART = "scientific notation requires an exponential part"


class NumberFormatError(ValueError):
    """Raised when text does not start with a number in the requested format."""

    def __init__(self, error: ParseError, position: int) -> None:
        super().__init__(f"{error.value} (at position {position})")
        self.error = error
        self.position = position


@dataclass(frozen=True)
class ParsedNumber:
    """A tokenised number: value is mantissa * 10**exponent, with a sign.

    ``end`` is the index just past the last character that belongs to the
    number. When ``too_many_digits`` is set the mantissa holds only the
    leading nineteen significant digits and the exponent is adjusted to match.
    """

    exponent: int
    mantissa: int
    end: int
    negative: bool
    too_many_digits: bool
    integer: str
    fraction: str


def _skip_digits(text: str, pos: int, end: int) -> int:
    while pos < end and is_integer(text[pos]):
        pos += 1
    return pos


def _truncated_mantissa(integer: str, fraction: str, exp_number: int) -> tuple[int, int]:
    value = 0
    consumed = 0
    for digit in integer:
        if value >= _MIN_NINETEEN_DIGIT:
            break
        value = value * 10 + int(digit)
        consumed += 1
    if value >= _MIN_NINETEEN_DIGIT:
        return value, len(integer) - consumed + exp_number
    consumed = 0
    for digit in fraction:
        if value >= _MIN_NINETEEN_DIGIT:
            break
        value = value * 10 + int(digit)
        consumed += 1
    return value, -consumed + exp_number


def parse_number_string(
    text: str,
    options: Optional[ParseOptions] = None,
    start: int = 0,
    json: bool = False,
) -> ParsedNumber:
    """Tokenise the number at ``text[start:]``.

    Trailing characters after the number are left alone; ``end`` in the result
    tells where the number stopped. Raises NumberFormatError when no number in
    the requested format begins at ``start``.
    """
    opts = options if options is not None else ParseOptions()
    fmt = opts.format
    decimal_point = opts.decimal_point
    end = len(text)
    p = start

    negative = p < end and text[p] == "-"
    if p < end and (
        text[p] == "-"
        or (fmt & CharsFormat.ALLOW_LEADING_PLUS and not json and text[p] == "+")
    ):
        p += 1
        if p == end:
            raise NumberFormatError(ParseError.MISSING_INTEGER_OR_DOT_AFTER_SIGN, p)
        if json:
            if not is_integer(text[p]):
                raise NumberFormatError(ParseError.MISSING_INTEGER_AFTER_SIGN, p)
        elif not is_integer(text[p]) and text[p] != decimal_point:
            raise NumberFormatError(ParseError.MISSING_INTEGER_OR_DOT_AFTER_SIGN, p)

    start_digits = p
    p = _skip_digits(text, p, end)
    integer = text[start_digits:p]
    digit_count = len(integer)
    if json:
        if digit_count == 0:
            raise NumberFormatError(ParseError.NO_DIGITS_IN_INTEGER_PART, p)
        if integer[0] == "0" and digit_count > 1:
            raise NumberFormatError(
                ParseError.LEADING_ZEROS_IN_INTEGER_PART, start_digits
            )

    exponent = 0
    fraction = ""
    has_decimal_point = p < end and text[p] == decimal_point
    if has_decimal_point:
        p += 1
        before = p
        p = _skip_digits(text, p, end)
        fraction = text[before:p]
        exponent = -len(fraction)
        digit_count += len(fraction)
    if json:
        if has_decimal_point and not fraction:
            raise NumberFormatError(ParseError.NO_DIGITS_IN_FRACTIONAL_PART, p)
    elif digit_count == 0:
        raise NumberFormatError(ParseError.NO_DIGITS_IN_MANTISSA, p)

    exp_number = 0
    marker = text[p] if p < end else ""
    scientific_marker = bool(fmt & CharsFormat.SCIENTIFIC) and marker in ("e", "E")
    fortran_marker = bool(fmt & CharsFormat.FORTRAN) and marker in ("+", "-", "d", "D")
    if scientific_marker or fortran_marker:
        location_of_e = p
        if marker in ("e", "E", "d", "D"):
            p += 1
        negative_exponent = False
        if p < end and text[p] == "-":
            negative_exponent = True
            p += 1
        elif p < end and text[p] == "+":
            p += 1
        if p == end or not is_integer(text[p]):
            if not fmt & CharsFormat.FIXED:
                raise NumberFormatError(ParseError.MISSING_EXPONENTIAL_PART, p)
            p = location_of_e
        else:
            while p < end and is_integer(text[p]):
                if exp_number < _EXPONENT_CAP:
                    exp_number = 10 * exp_number + int(text[p])
                p += 1
            if negative_exponent:
                exp_number = -exp_number
            exponent += exp_number
    elif fmt & CharsFormat.SCIENTIFIC and not fmt & CharsFormat.FIXED:
        raise NumberFormatError(ParseError.MISSING_EXPONENTIAL_PART, p)

    too_many_digits = False
    if digit_count > _MAX_SAFE_DIGITS:
        scan = start_digits
        while scan < end and text[scan] in ("0", decimal_point):
            if text[scan] == "0":
                digit_count -= 1
            scan += 1
        too_many_digits = digit_count > _MAX_SAFE_DIGITS

    if too_many_digits:
        mantissa, exponent = _truncated_mantissa(integer, fraction, exp_number)
    else:
        mantissa = int((integer + fraction).lstrip("0") or "0") & _U64

    return ParsedNumber(
        exponent=exponent,
        mantissa=mantissa,
        end=p,
        negative=negative,
        too_many_digits=too_many_digits,
        integer=integer,
        fraction=fraction,
    )