"""Calculator backend using only digit-by-digit string arithmetic."""

from __future__ import annotations

from moneycalc.core import DIVISION_SCALE, Calculator
from moneycalc.numbers import Number, format_scaled
from moneycalc.rounding import RoundingMode, should_round_away

# Magnitudes are unsigned digit strings without leading zeros ("0" for zero).


def _strip(digits: str) -> str:
    return digits.lstrip("0") or "0"


def _compare_magnitudes(x: str, y: str) -> int:
    x, y = _strip(x), _strip(y)
    if len(x) != len(y):
        return (len(x) > len(y)) - (len(x) < len(y))
    return (x > y) - (x < y)


def _add_magnitudes(x: str, y: str) -> str:
    width = max(len(x), len(y))
    digits = []
    carry = 0
    for dx, dy in zip(reversed(x.rjust(width, "0")), reversed(y.rjust(width, "0"))):
        carry, digit = divmod(int(dx) + int(dy) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return _strip("".join(reversed(digits)))


def _subtract_magnitudes(x: str, y: str) -> str:
    """Compute x - y for magnitudes with x >= y."""
    width = max(len(x), len(y))
    digits = []
    borrow = 0
    for dx, dy in zip(reversed(x.rjust(width, "0")), reversed(y.rjust(width, "0"))):
        digit = int(dx) - int(dy) - borrow
        borrow = 1 if digit < 0 else 0
        digits.append(str(digit + 10 * borrow))
    return _strip("".join(reversed(digits)))


def _multiply_magnitudes(x: str, y: str) -> str:
    columns = [0] * (len(x) + len(y))
    for i, dx in enumerate(reversed(x)):
        carry = 0
        for j, dy in enumerate(reversed(y)):
            carry, columns[i + j] = divmod(columns[i + j] + int(dx) * int(dy) + carry, 10)
        columns[i + len(y)] += carry
    return _strip("".join(str(digit) for digit in reversed(columns)))


def _divide_magnitudes(x: str, y: str, extra_digits: int = 0) -> tuple[str, str]:
    """
    Long division of x * 10**extra_digits by a non-zero y.

    Each quotient digit is found by repeated subtraction from the running
    remainder.

    Returns:
        (quotient, remainder) as magnitudes
    """
    divisor = _strip(y)
    quotient = []
    remainder = "0"
    for digit in x + "0" * extra_digits:
        remainder = _strip(remainder + digit)
        count = 0
        while _compare_magnitudes(remainder, divisor) >= 0:
            remainder = _subtract_magnitudes(remainder, divisor)
            count += 1
        quotient.append(str(count))
    return _strip("".join(quotient)), remainder


def _digits(number: Number, scale: int | None = None) -> str:
    """The magnitude of number multiplied by 10**scale (its own scale by default)."""
    scale = number.scale if scale is None else scale
    return _strip(number.integer_part + number.fractional_part.ljust(scale, "0"))


def _negate(number: Number) -> Number:
    return Number(not number.negative and not number.is_zero(), number.integer_part, number.fractional_part)


def _signed_add(a: Number, b: Number) -> str:
    scale = max(a.scale, b.scale)
    x, y = _digits(a, scale), _digits(b, scale)
    if a.negative == b.negative:
        return format_scaled(a.negative, _add_magnitudes(x, y), scale)
    if _compare_magnitudes(x, y) >= 0:
        return format_scaled(a.negative, _subtract_magnitudes(x, y), scale)
    return format_scaled(b.negative, _subtract_magnitudes(y, x), scale)


class SoftwareCalculator(Calculator):
    """
    Schoolbook decimal arithmetic on digit strings.

    Needs nothing beyond string handling and single-digit integers, which
    makes it the slowest backend and the reference the others are checked
    against.
    """

    name = "software"

    def _add(self, a: str, b: str) -> str:
        return _signed_add(Number.parse(a), Number.parse(b))

    def _subtract(self, a: str, b: str) -> str:
        return _signed_add(Number.parse(a), _negate(Number.parse(b)))

    def _multiply(self, a: str, b: str) -> str:
        left, right = Number.parse(a), Number.parse(b)
        product = _multiply_magnitudes(_digits(left), _digits(right))
        return format_scaled(left.negative != right.negative, product, left.scale + right.scale)

    def _divide(self, a: str, b: str) -> str:
        left, right = Number.parse(a), Number.parse(b)
        scale = max(left.scale, right.scale)
        quotient, _ = _divide_magnitudes(_digits(left, scale), _digits(right, scale), DIVISION_SCALE)
        return format_scaled(left.negative != right.negative, quotient, DIVISION_SCALE)

    def _ceil(self, a: str) -> str:
        number = Number.parse(a)
        if number.is_integer() or number.negative:
            return format_scaled(number.negative, number.integer_part, 0)
        return _add_magnitudes(number.integer_part, "1")

    def _floor(self, a: str) -> str:
        number = Number.parse(a)
        if number.is_integer() or not number.negative:
            return format_scaled(number.negative, number.integer_part, 0)
        return format_scaled(True, _add_magnitudes(number.integer_part, "1"), 0)

    def _absolute(self, a: str) -> str:
        return str(Number.parse(a).magnitude())

    def _round(self, a: str, mode: RoundingMode) -> str:
        number = Number.parse(a)
        if number.is_integer():
            return a

        fraction = number.fractional_part
        if fraction == "5":
            half_comparison = 0
        else:
            half_comparison = 1 if fraction[0] >= "5" else -1

        odd = int(number.integer_part[-1]) % 2 == 1
        magnitude = number.integer_part
        if should_round_away(mode, number.negative, odd, half_comparison):
            magnitude = _add_magnitudes(magnitude, "1")
        return format_scaled(number.negative, magnitude, 0)

    def _compare(self, a: str, b: str) -> int:
        left, right = Number.parse(a), Number.parse(b)
        if left.negative != right.negative:
            return -1 if left.negative else 1

        scale = max(left.scale, right.scale)
        order = _compare_magnitudes(_digits(left, scale), _digits(right, scale))
        return -order if left.negative else order

    def _mod(self, a: str, b: str) -> str:
        left, right = Number.parse(a), Number.parse(b)
        scale = max(left.scale, right.scale)
        _, remainder = _divide_magnitudes(_digits(left, scale), _digits(right, scale))
        return format_scaled(left.negative, remainder, scale)

    def _share(self, value: str, ratio: str, total: str) -> str:
        amount, proportion, whole = Number.parse(value), Number.parse(ratio), Number.parse(total)
        product = _multiply_magnitudes(_digits(amount), _digits(proportion))

        # Bring the product and the total to one scale before dividing
        numerator = product + "0" * whole.scale
        denominator = _digits(whole) + "0" * (amount.scale + proportion.scale)
        quotient, _ = _divide_magnitudes(_strip(numerator), denominator, DIVISION_SCALE)

        negative = (amount.negative != proportion.negative) != whole.negative
        return format_scaled(negative, quotient, DIVISION_SCALE)
