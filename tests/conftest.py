"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

from moneycalc import BigIntegerCalculator, DecimalCalculator, SoftwareCalculator

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)

BACKENDS = [DecimalCalculator, BigIntegerCalculator, SoftwareCalculator]


@pytest.fixture(params=BACKENDS, ids=lambda backend: backend.name)
def calculator(request):
    """Provide each calculator backend in turn."""
    return request.param()


@pytest.fixture
def all_calculators():
    """Provide one instance of every backend."""
    return [backend() for backend in BACKENDS]
