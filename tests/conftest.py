"""
Shared test fixtures for all test modules.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from compounding.simulation.calculator import CalculatorParameters, CompoundCalculator
from compounding.simulation.projection import ProjectionResult, project


@pytest.fixture
def monthly_plan() -> ProjectionResult:
    """3000 kr a month at 10% for 25 years, no lump sum."""
    return project(0, 3000, 10, 25)


@pytest.fixture
def lump_sum_plan() -> ProjectionResult:
    """100 000 kr lump sum plus 2000 kr a month at 7.5% for 10 years."""
    return project(100_000, 2000, 7.5, 10)


@pytest.fixture
def default_parameters() -> CalculatorParameters:
    return CalculatorParameters()


@pytest.fixture
def calculator_results(default_parameters):
    """Full calculator run with tax enabled."""
    default_parameters.include_tax = True
    return CompoundCalculator().run(default_parameters)
