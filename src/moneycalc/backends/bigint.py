"""Calculator backend over Python's arbitrary-size integers."""

from __future__ import annotations

from moneycalc.core import DIVISION_SCALE, Calculator
from moneycalc.numbers import Number, digits_to_int, format_scaled, int_to_digits
from moneycalc.rounding import RoundingMode, should_round_away


def _to_scaled(value: str) -> tuple[int, int]:
    """Split a numeric string into (coefficient, scale) with value == coefficient / 10**scale."""
    number = Number.parse(value)
    coefficient = digits_to_int(number.integer_part + number.fractional_part)
    return (-coefficient if number.negative else coefficient), number.scale


def _align(a: str, b: str) -> tuple[int, int, int]:
    """Scale two numeric strings to integers sharing one power of ten."""
    left, left_scale = _to_scaled(a)
    right, right_scale = _to_scaled(b)
    scale = max(left_scale, right_scale)
    return left * 10 ** (scale - left_scale), right * 10 ** (scale - right_scale), scale


def _from_scaled(coefficient: int, scale: int) -> str:
    return format_scaled(coefficient < 0, int_to_digits(abs(coefficient)), scale)


def _truncating_divide(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero rather than toward -inf."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


class BigIntegerCalculator(Calculator):
    """
    Exact fixed-point arithmetic on scaled integers.

    Every operand becomes an integer coefficient and a power-of-ten scale;
    results are computed in integer space and rescaled.
    """

    name = "bigint"

    def _add(self, a: str, b: str) -> str:
        left, right, scale = _align(a, b)
        return _from_scaled(left + right, scale)

    def _subtract(self, a: str, b: str) -> str:
        left, right, scale = _align(a, b)
        return _from_scaled(left - right, scale)

    def _multiply(self, a: str, b: str) -> str:
        left, left_scale = _to_scaled(a)
        right, right_scale = _to_scaled(b)
        return _from_scaled(left * right, left_scale + right_scale)

    def _divide(self, a: str, b: str) -> str:
        left, right, _ = _align(a, b)
        return _from_scaled(_truncating_divide(left * 10**DIVISION_SCALE, right), DIVISION_SCALE)

    def _ceil(self, a: str) -> str:
        coefficient, scale = _to_scaled(a)
        return int_to_digits(-(-coefficient // 10**scale))

    def _floor(self, a: str) -> str:
        coefficient, scale = _to_scaled(a)
        return int_to_digits(coefficient // 10**scale)

    def _absolute(self, a: str) -> str:
        coefficient, scale = _to_scaled(a)
        return _from_scaled(abs(coefficient), scale)

    def _round(self, a: str, mode: RoundingMode) -> str:
        coefficient, scale = _to_scaled(a)
        unit = 10**scale
        truncated, remainder = divmod(abs(coefficient), unit)
        if remainder == 0:
            return int_to_digits(coefficient // unit)

        half_comparison = (2 * remainder > unit) - (2 * remainder < unit)
        negative = coefficient < 0
        if should_round_away(mode, negative, truncated % 2 == 1, half_comparison):
            truncated += 1
        return int_to_digits(-truncated if negative else truncated)

    def _compare(self, a: str, b: str) -> int:
        left, right, _ = _align(a, b)
        return (left > right) - (left < right)

    def _mod(self, a: str, b: str) -> str:
        left, right, scale = _align(a, b)
        remainder = abs(left) % abs(right)
        return _from_scaled(-remainder if left < 0 else remainder, scale)

    def _share(self, value: str, ratio: str, total: str) -> str:
        amount, amount_scale = _to_scaled(value)
        proportion, proportion_scale = _to_scaled(ratio)
        whole, whole_scale = _to_scaled(total)

        # value * ratio / total == (amount * proportion * 10**whole_scale)
        #                          / (whole * 10**(amount_scale + proportion_scale))
        numerator = amount * proportion * 10 ** (whole_scale + DIVISION_SCALE)
        denominator = whole * 10 ** (amount_scale + proportion_scale)
        return _from_scaled(_truncating_divide(numerator, denominator), DIVISION_SCALE)
