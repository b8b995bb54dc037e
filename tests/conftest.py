"""Shared test fixtures for the EPT productivity test suite."""

import pytest

from ept_productivity.engine.calculator import ProductivityEngine
from ept_productivity.engine.result import CalculationInput
from tests.helpers import make_input


@pytest.fixture
def engine() -> ProductivityEngine:
    return ProductivityEngine()


@pytest.fixture
def service_agent_input() -> CalculationInput:
    """Seasoned service agents at 2.4s EPT -- the worked reference example.

    60 / 2.4 = 25 clicks/min ceiling, * 0.20 = 5.0, + ln(1/2.4) = 4.1245,
    * 360 = 1484 clicks/day, / 30 = 49 tasks vs a quota of 80.
    """
    return make_input()
