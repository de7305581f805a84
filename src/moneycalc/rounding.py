"""Rounding modes and the half-way policy shared by every backend."""

from __future__ import annotations

from enum import IntEnum

from moneycalc.exceptions import InvalidInputError


class RoundingMode(IntEnum):
    """
    How ``Calculator.round`` resolves a fractional value to an integer.

    The half modes only differ on an exact ``.5`` tie; off the tie they all
    round to the nearest integer. CEILING, FLOOR and TRUNCATE never look at
    ties.
    """

    HALF_UP = 1
    HALF_DOWN = 2
    HALF_EVEN = 3
    HALF_ODD = 4
    CEILING = 5
    FLOOR = 6
    HALF_POSITIVE_INFINITY = 7
    HALF_NEGATIVE_INFINITY = 8
    TRUNCATE = 9


def validate_rounding_mode(mode: RoundingMode | int) -> RoundingMode:
    """
    Coerce a rounding mode or its integer value to a RoundingMode.

    Raises:
        InvalidInputError: If mode is not a known rounding mode
    """
    if isinstance(mode, bool) or not isinstance(mode, int):
        raise InvalidInputError(mode, f"Expected rounding mode, got {type(mode).__name__}")

    try:
        return RoundingMode(mode)
    except ValueError as e:
        raise InvalidInputError(mode, "Unknown rounding mode") from e


def should_round_away(
    mode: RoundingMode,
    negative: bool,
    odd: bool,
    half_comparison: int,
) -> bool:
    """
    Decide whether a non-integer value rounds away from zero.

    Args:
        mode: The rounding mode
        negative: Whether the value is negative
        odd: Whether the value truncated toward zero is odd
        half_comparison: Sign of (fraction - 0.5) for the value's magnitude

    Returns:
        True to add one to the truncated magnitude, False to keep it
    """
    if mode is RoundingMode.CEILING:
        return not negative
    if mode is RoundingMode.FLOOR:
        return negative
    if mode is RoundingMode.TRUNCATE:
        return False

    if half_comparison != 0:
        return half_comparison > 0

    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_EVEN:
        return odd
    if mode is RoundingMode.HALF_ODD:
        return not odd
    if mode is RoundingMode.HALF_POSITIVE_INFINITY:
        return not negative
    return negative
