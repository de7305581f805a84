"""Custom exceptions for the moneycalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class InvalidDivisorError(CalculatorError):
    """Raised when a divisor or modulus denominator denotes zero."""

    def __init__(self, dividend: str, divisor: str) -> None:
        super().__init__("Division by zero", divisor)
        self.dividend = dividend
        self.divisor = divisor


class InvalidInputError(CalculatorError):
    """Raised when an operand or rounding mode is malformed."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
