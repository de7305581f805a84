"""
Registry of calculator backends.

Backends are kept in preference order. Callers pick one once, usually with
``get_calculator()``, and hold on to the instance; nothing is re-evaluated
per call.
"""

from __future__ import annotations

import logging
import threading

from moneycalc.backends.bigdecimal import DecimalCalculator
from moneycalc.backends.bigint import BigIntegerCalculator
from moneycalc.backends.software import SoftwareCalculator
from moneycalc.core import Calculator
from moneycalc.exceptions import CalculatorError

logger = logging.getLogger(__name__)

# Replaced wholesale under _registry_lock, never mutated in place, so readers
# always see a complete mapping

_registry: dict[str, type[Calculator]] = {
    DecimalCalculator.name: DecimalCalculator,
    BigIntegerCalculator.name: BigIntegerCalculator,
    SoftwareCalculator.name: SoftwareCalculator,
}
_registry_lock = threading.Lock()


def register_calculator(name: str, calculator: type[Calculator], *, prepend: bool = False) -> None:
    """
    Register a backend under name.

    Args:
        name: Lookup key for get_calculator()
        calculator: A concrete Calculator subclass
        prepend: Make it the preferred backend instead of the last resort

    Raises:
        CalculatorError: If calculator is not a Calculator subclass
    """
    if not (isinstance(calculator, type) and issubclass(calculator, Calculator)):
        raise CalculatorError("Expected a Calculator subclass", calculator)

    global _registry

    with _registry_lock:
        entries = {key: value for key, value in _registry.items() if key != name}
        if prepend:
            _registry = {name: calculator, **entries}
        else:
            _registry = {**entries, name: calculator}
    logger.debug("Registered calculator backend %s (%s)", name, calculator.__name__)


def available_calculators() -> list[str]:
    """Registered backend names, most preferred first."""
    return list(_registry)


def get_calculator(name: str | None = None) -> Calculator:
    """
    Instantiate a backend.

    Args:
        name: A registered backend name, or None for the preferred one

    Raises:
        CalculatorError: If no backend is registered under name
    """
    registry = _registry
    if name is None:
        name = next(iter(registry))

    try:
        calculator = registry[name]
    except KeyError as e:
        raise CalculatorError("Unknown calculator backend", name) from e

    logger.debug("Using calculator backend %s", name)
    return calculator()


__all__ = [
    "BigIntegerCalculator",
    "DecimalCalculator",
    "SoftwareCalculator",
    "available_calculators",
    "get_calculator",
    "register_calculator",
]
