"""Parsing and canonical formatting of numeric strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_NUMERIC_STRING = re.compile(r"(-)?([0-9]+)(?:\.([0-9]+))?")

# Longest digit run converted with a single int() or str() call; CPython
# rejects conversions above 4300 digits by default
_CHUNK_DIGITS: Final[int] = 4000


@dataclass(frozen=True)
class Number:
    """
    Sign and magnitude of a numeric string.

    The integer part carries no leading zeros (``"0"`` at minimum) and the
    fractional part carries no trailing zeros, so two numbers with the same
    value always have equal fields. Zero is never negative.

    Example:
        >>> Number.parse("-007.500")
        Number(negative=True, integer_part='7', fractional_part='5')
        >>> str(Number.parse("-0.000"))
        '0'
    """

    negative: bool
    integer_part: str
    fractional_part: str = ""

    @classmethod
    def parse(cls, text: str) -> Number:
        """
        Parse a numeric string.

        Raises:
            ValueError: If text is not ``-?digits(.digits)?``
        """
        match = _NUMERIC_STRING.fullmatch(text)
        if match is None:
            raise ValueError(f"not a numeric string: {text!r}")

        sign, integer_part, fractional_part = match.groups()
        integer_part = integer_part.lstrip("0") or "0"
        fractional_part = (fractional_part or "").rstrip("0")
        negative = sign == "-" and (integer_part != "0" or fractional_part != "")
        return cls(negative, integer_part, fractional_part)

    @property
    def scale(self) -> int:
        """Number of significant fractional digits."""
        return len(self.fractional_part)

    def is_zero(self) -> bool:
        return self.integer_part == "0" and not self.fractional_part

    def is_integer(self) -> bool:
        return not self.fractional_part

    def magnitude(self) -> Number:
        return Number(False, self.integer_part, self.fractional_part)

    def __str__(self) -> str:
        text = self.integer_part
        if self.fractional_part:
            text = f"{text}.{self.fractional_part}"
        return f"-{text}" if self.negative else text


def canonicalize(text: str) -> str:
    """
    Return the canonical spelling of a numeric string.

    Example:
        >>> canonicalize("0012.5000")
        '12.5'
        >>> canonicalize("-0.0")
        '0'
    """
    return str(Number.parse(text))


def format_scaled(negative: bool, digits: str, scale: int) -> str:
    """
    Place a decimal point ``scale`` digits from the right of ``digits``.

    ``digits`` is an unsigned run of decimal digits; the result is canonical.

    Example:
        >>> format_scaled(True, "5", 3)
        '-0.005'
    """
    if scale > 0:
        digits = digits.rjust(scale + 1, "0")
        text = f"{digits[:-scale]}.{digits[-scale:]}"
    else:
        text = digits
    return canonicalize(f"-{text}" if negative else text)


def digits_to_int(digits: str) -> int:
    """
    Convert an unsigned run of decimal digits of any length to an int.

    Example:
        >>> digits_to_int("0042")
        42
    """
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """
    Decimal text of an int of any size, with a leading ``-`` when negative.

    Example:
        >>> int_to_digits(-1200)
        '-1200'
    """
    sign = "-" if value < 0 else ""
    value = abs(value)
    block = 10**_CHUNK_DIGITS
    chunks = []
    while value >= block:
        value, chunk = divmod(value, block)
        chunks.append(str(chunk).rjust(_CHUNK_DIGITS, "0"))
    chunks.append(str(value))
    return sign + "".join(reversed(chunks))
