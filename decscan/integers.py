"""Parse fixed-width integers from text in any base from 2 to 36."""

from __future__ import annotations

import enum
import string
from typing import Optional

from .options import CharsFormat, ParseOptions

_U64_MAX = (1 << 64) - 1

_DIGIT_VALUES = {
    **{c: i for i, c in enumerate(string.digits)},
    **{c: 10 + i for i, c in enumerate(string.ascii_lowercase)},
    **{c: 10 + i for i, c in enumerate(string.ascii_uppercase)},
}


class IntegerType(enum.Enum):
    """The fixed-width integer types a parsed value must fit into."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    @property
    def max_value(self) -> int:
        """The largest value the type holds."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        """The smallest value the type holds."""
        return -(1 << (self.bits - 1)) if self.signed else 0


class InvalidIntegerError(ValueError):
    """Raised when no integer begins at the requested position."""

    def __init__(self, position: int) -> None:
        super().__init__(f"no integer at position {position}")
        self.position = position


class IntegerOutOfRangeError(OverflowError):
    """Raised when the digits form a number the target type cannot hold.

    ``end`` is the index just past the digits that were read.
    """

    def __init__(self, int_type: IntegerType, end: int) -> None:
        super().__init__(f"value does not fit in {int_type.name.lower()}")
        self.int_type = int_type
        self.end = end


def parse_int_string(
    text: str,
    int_type: IntegerType = IntegerType.INT64,
    options: Optional[ParseOptions] = None,
    start: int = 0,
) -> tuple[int, int]:
    """Parse the integer at ``text[start:]`` and return ``(value, end)``.

    ``end`` is the index just past the last digit consumed; characters after
    it are left alone. A leading minus is accepted for signed types only, and
    a leading plus only when the options allow it.
    """
    opts = options if options is not None else ParseOptions()
    base = opts.base
    end = len(text)
    first = start
    p = start

    if p >= end:
        raise InvalidIntegerError(first)

    negative = text[p] == "-"
    if negative and not int_type.signed:
        raise InvalidIntegerError(first)
    if negative or (opts.format & CharsFormat.ALLOW_LEADING_PLUS and text[p] == "+"):
        p += 1

    start_num = p
    while p < end and text[p] == "0":
        p += 1
    has_leading_zeros = p > start_num

    start_digits = p
    value = 0
    while p < end:
        digit = _DIGIT_VALUES.get(text[p])
        if digit is None or digit >= base:
            break
        value = value * base + digit
        p += 1

    if p == start_digits:
        if has_leading_zeros:
            return 0, p
        raise InvalidIntegerError(first)

    if value > _U64_MAX:
        raise IntegerOutOfRangeError(int_type, p)
    if value > int_type.max_value + int(negative):
        raise IntegerOutOfRangeError(int_type, p)

    return (-value if negative else value), p