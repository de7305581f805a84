"""Operand validation at the calculator boundary."""

import math

from moneycalc.exceptions import InvalidDivisorError, InvalidInputError
from moneycalc.numbers import Number, int_to_digits

Operand = int | float | str


def validate_operand(value: Operand) -> str:
    """
    Validate an operand and return its canonical numeric string.

    A float is taken at its shortest repr, so ``-1.99`` reads as ``"-1.99"``.
    Floats whose repr needs exponent notation are rejected rather than
    expanded.

    Args:
        value: An int, a finite float or a numeric string

    Returns:
        The canonical numeric string

    Raises:
        InvalidInputError: If value is not a number, is NaN or Infinity,
            or does not spell a plain decimal
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidInputError(value, f"Expected number or numeric string, got {type(value).__name__}")

    if isinstance(value, int):
        return int_to_digits(value)

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")
        text = repr(value)
    else:
        text = value

    try:
        return str(Number.parse(text))
    except ValueError as e:
        raise InvalidInputError(value, "Malformed numeric string") from e


def validate_divisor(dividend: str, divisor: str) -> str:
    """
    Validate that a canonical divisor is not zero.

    Any spelling of negative zero canonicalizes to ``"0"`` and is rejected
    like positive zero.

    Raises:
        InvalidDivisorError: If divisor is zero
    """
    if Number.parse(divisor).is_zero():
        raise InvalidDivisorError(dividend, divisor)

    return divisor
