"""The calculator contract shared by every arithmetic backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Final

from moneycalc.numbers import canonicalize
from moneycalc.rounding import RoundingMode, validate_rounding_mode
from moneycalc.validators import Operand, validate_divisor, validate_operand

# Fractional digits kept by divide and share before truncating toward zero
DIVISION_SCALE: Final[int] = 20


class Calculator(ABC):
    """
    Stateless decimal arithmetic over numeric strings.

    Public methods validate and canonicalize their operands, reject zero
    divisors and canonicalize whatever the backend returns. Subclasses only
    implement the protected hooks, which always receive canonical numeric
    strings and may return any numeric string of the right value.

    Example:
        >>> from moneycalc import get_calculator
        >>> calc = get_calculator()
        >>> calc.multiply("100", "0.0029")
        '0.29'
        >>> calc.mod("-13", "5")
        '-3'
    """

    name: ClassVar[str]

    def add(self, a: Operand, b: Operand) -> str:
        """Exact sum of a and b."""
        return canonicalize(self._add(validate_operand(a), validate_operand(b)))

    def subtract(self, a: Operand, b: Operand) -> str:
        """Exact difference a - b."""
        return canonicalize(self._subtract(validate_operand(a), validate_operand(b)))

    def multiply(self, a: Operand, b: Operand) -> str:
        """Exact product of a and b."""
        return canonicalize(self._multiply(validate_operand(a), validate_operand(b)))

    def divide(self, a: Operand, b: Operand) -> str:
        """
        Divide a by b.

        The quotient is truncated toward zero after DIVISION_SCALE
        fractional digits; use round() for a shorter result.

        Raises:
            InvalidInputError: If an operand is malformed
            InvalidDivisorError: If b is zero or negative zero
        """
        dividend = validate_operand(a)
        divisor = validate_divisor(dividend, validate_operand(b))
        return canonicalize(self._divide(dividend, divisor))

    def ceil(self, a: Operand) -> str:
        """Smallest integer greater than or equal to a."""
        return canonicalize(self._ceil(validate_operand(a)))

    def floor(self, a: Operand) -> str:
        """Largest integer less than or equal to a."""
        return canonicalize(self._floor(validate_operand(a)))

    def absolute(self, a: Operand) -> str:
        """Magnitude of a, with the sign dropped."""
        return canonicalize(self._absolute(validate_operand(a)))

    def round(self, a: Operand, mode: RoundingMode | int) -> str:
        """
        Round a to an integer.

        Args:
            a: The value to round
            mode: A RoundingMode or its integer value

        Returns:
            The integer-valued numeric string

        Raises:
            InvalidInputError: If a or mode is malformed
        """
        return canonicalize(self._round(validate_operand(a), validate_rounding_mode(mode)))

    def compare(self, a: Operand, b: Operand) -> int:
        """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
        result = self._compare(validate_operand(a), validate_operand(b))
        return (result > 0) - (result < 0)

    def mod(self, a: Operand, b: Operand) -> str:
        """
        Remainder of a divided by b, truncating the quotient toward zero.

        The result takes the sign of the dividend a.

        Raises:
            InvalidInputError: If an operand is malformed
            InvalidDivisorError: If b is zero or negative zero
        """
        dividend = validate_operand(a)
        divisor = validate_divisor(dividend, validate_operand(b))
        return canonicalize(self._mod(dividend, divisor))

    def share(self, value: Operand, ratio: Operand, total: Operand) -> str:
        """
        Compute value * ratio / total as one operation.

        The product is exact and only the single division truncates, at
        DIVISION_SCALE fractional digits, so a proportional split does not
        accumulate drift from an intermediate rounding.

        Raises:
            InvalidInputError: If an operand is malformed
            InvalidDivisorError: If total is zero
        """
        amount = validate_operand(value)
        proportion = validate_operand(ratio)
        whole = validate_divisor(amount, validate_operand(total))
        return canonicalize(self._share(amount, proportion, whole))

    @abstractmethod
    def _add(self, a: str, b: str) -> str: ...

    @abstractmethod
    def _subtract(self, a: str, b: str) -> str: ...

    @abstractmethod
    def _multiply(self, a: str, b: str) -> str: ...

    @abstractmethod
    def _divide(self, a: str, b: str) -> str: ...

    @abstractmethod
    def _ceil(self, a: str) -> str: ...

    @abstractmethod
    def _floor(self, a: str) -> str: ...

    @abstractmethod
    def _absolute(self, a: str) -> str: ...

    @abstractmethod
    def _round(self, a: str, mode: RoundingMode) -> str: ...

    @abstractmethod
    def _compare(self, a: str, b: str) -> int: ...

    @abstractmethod
    def _mod(self, a: str, b: str) -> str: ...

    @abstractmethod
    def _share(self, value: str, ratio: str, total: str) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))
