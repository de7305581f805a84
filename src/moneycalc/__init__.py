"""
Arbitrary-precision decimal arithmetic over numeric strings.

One contract, ``Calculator``, with interchangeable backends that agree
digit for digit:

- ``DecimalCalculator`` on the decimal module
- ``BigIntegerCalculator`` on scaled Python integers
- ``SoftwareCalculator`` on digit strings
"""

from moneycalc.backends import (
    BigIntegerCalculator,
    DecimalCalculator,
    SoftwareCalculator,
    available_calculators,
    get_calculator,
    register_calculator,
)
from moneycalc.core import DIVISION_SCALE, Calculator
from moneycalc.exceptions import (
    CalculatorError,
    InvalidDivisorError,
    InvalidInputError,
)
from moneycalc.numbers import Number, canonicalize
from moneycalc.rounding import RoundingMode
from moneycalc.validators import validate_divisor, validate_operand

__all__ = [
    "DIVISION_SCALE",
    "BigIntegerCalculator",
    "Calculator",
    "CalculatorError",
    "DecimalCalculator",
    "InvalidDivisorError",
    "InvalidInputError",
    "Number",
    "RoundingMode",
    "SoftwareCalculator",
    "available_calculators",
    "canonicalize",
    "get_calculator",
    "register_calculator",
    "validate_divisor",
    "validate_operand",
]

__version__ = "0.1.0"
