"""Calculator backend over the decimal module."""

from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Final

from moneycalc.core import DIVISION_SCALE, Calculator
from moneycalc.rounding import RoundingMode, should_round_away

_HALF: Final = Decimal("0.5")
_DIVISION_QUANTUM: Final = Decimal(1).scaleb(-DIVISION_SCALE)

# Modes the decimal module implements with the same meaning
_LIBRARY_MODES: Final[dict[RoundingMode, str]] = {
    RoundingMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingMode.CEILING: decimal.ROUND_CEILING,
    RoundingMode.FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.TRUNCATE: decimal.ROUND_DOWN,
}


def _exact_context(*values: str) -> decimal.Context:
    """
    A context wide enough to hold any sum, product or remainder of values.

    Inexact is trapped, so a result that would not fit raises instead of
    being rounded silently.
    """
    return decimal.Context(
        prec=sum(len(value) for value in values) + 1,
        rounding=decimal.ROUND_DOWN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow, decimal.Inexact],
    )


def _division_context(numerator: Decimal, denominator: Decimal) -> decimal.Context:
    """A truncating context holding every digit down to DIVISION_SCALE places."""
    integer_digits = max(numerator.adjusted() - denominator.adjusted() + 2, 0)
    return decimal.Context(
        prec=integer_digits + DIVISION_SCALE + 1,
        rounding=decimal.ROUND_DOWN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
    )


def _truncated_quotient(numerator: Decimal, denominator: Decimal) -> str:
    context = _division_context(numerator, denominator)
    quotient = context.divide(numerator, denominator)
    return _format(context.quantize(quotient, _DIVISION_QUANTUM))


def _format(value: Decimal) -> str:
    return format(value, "f")


class DecimalCalculator(Calculator):
    """
    Arithmetic delegated to ``decimal.Decimal``.

    Each call builds an explicit Context sized to its operands; the
    thread's current decimal context is never modified.
    """

    name = "decimal"

    def _add(self, a: str, b: str) -> str:
        return _format(_exact_context(a, b).add(Decimal(a), Decimal(b)))

    def _subtract(self, a: str, b: str) -> str:
        return _format(_exact_context(a, b).subtract(Decimal(a), Decimal(b)))

    def _multiply(self, a: str, b: str) -> str:
        return _format(_exact_context(a, b).multiply(Decimal(a), Decimal(b)))

    def _divide(self, a: str, b: str) -> str:
        return _truncated_quotient(Decimal(a), Decimal(b))

    def _ceil(self, a: str) -> str:
        return _format(Decimal(a).to_integral_value(rounding=decimal.ROUND_CEILING))

    def _floor(self, a: str) -> str:
        return _format(Decimal(a).to_integral_value(rounding=decimal.ROUND_FLOOR))

    def _absolute(self, a: str) -> str:
        return _format(Decimal(a).copy_abs())

    def _round(self, a: str, mode: RoundingMode) -> str:
        value = Decimal(a)
        rounding = _LIBRARY_MODES.get(mode)
        if rounding is None:
            rounding = self._resolve_rounding(value, mode, _exact_context(a))
        return _format(value.to_integral_value(rounding=rounding, context=_exact_context(a)))

    @staticmethod
    def _resolve_rounding(value: Decimal, mode: RoundingMode, context: decimal.Context) -> str:
        """Translate a mode the library lacks into ROUND_UP or ROUND_DOWN for this value."""
        truncated = value.to_integral_value(rounding=decimal.ROUND_DOWN)
        fraction = context.subtract(value, truncated).copy_abs()
        odd = context.remainder(truncated, Decimal(2)) != 0
        away = should_round_away(mode, value.is_signed(), odd, int(fraction.compare(_HALF)))
        return decimal.ROUND_UP if away else decimal.ROUND_DOWN

    def _compare(self, a: str, b: str) -> int:
        return int(Decimal(a).compare(Decimal(b)))

    def _mod(self, a: str, b: str) -> str:
        return _format(_exact_context(a, b).remainder(Decimal(a), Decimal(b)))

    def _share(self, value: str, ratio: str, total: str) -> str:
        product = _exact_context(value, ratio).multiply(Decimal(value), Decimal(ratio))
        return _truncated_quotient(product, Decimal(total))
