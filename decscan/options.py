"""Options that control how decimal numbers are recognised."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CharsFormat(enum.IntFlag):
    """Which textual number forms the parser accepts."""

    SCIENTIFIC = 1
    FIXED = 2
    FORTRAN = 4
    ALLOW_LEADING_PLUS = 8
    GENERAL = SCIENTIFIC | FIXED


@dataclass(frozen=True)
class ParseOptions:
    """Format flags, decimal separator and integer base used while parsing."""

    format: CharsFormat = CharsFormat.GENERAL
    decimal_point: str = "."
    base: int = 10

    def __post_init__(self) -> None:
        if not isinstance(self.decimal_point, str) or len(self.decimal_point) != 1:
            raise ValueError("decimal_point must be a single character")
        if not 2 <= self.base <= 36:
            raise ValueError("base must be between 2 and 36")