"""Core calculation engine.

Takes one CalculationInput -> produces one CalculationResult. The engine
holds no state; every call is independent.
"""

from __future__ import annotations

import logging
import math

from ept_productivity.engine import formulas
from ept_productivity.engine.errors import InvalidInput
from ept_productivity.engine.result import CalculationInput, CalculationResult
from ept_productivity.models.enums import ExperienceLevel

logger = logging.getLogger(__name__)

# Fields that feed a division or a logarithm and so must be strictly positive.
_POSITIVE_FIELDS = ("ept", "expected_tasks_per_day", "clicks_per_task")


def _require_positive(field_name: str, value: float) -> None:
    # `not value > 0` also rejects NaN
    if not value > 0:
        logger.warning("Rejected calculation input: %s=%r", field_name, value)
        raise InvalidInput(field_name, value)


def _non_negative(value):
    """Clamp a count or amount to a minimum of 0; non-finite values become 0."""
    if not math.isfinite(value) or value < 0:
        return 0
    return value


class ProductivityEngine:
    """Stateless engine that turns role and latency inputs into labor value."""

    def compute(self, calc_input: CalculationInput) -> CalculationResult:
        """Run the productivity formula for a single input."""
        for field_name in _POSITIVE_FIELDS:
            _require_positive(field_name, getattr(calc_input, field_name))

        level = ExperienceLevel(calc_input.experience_level)
        cost = _non_negative(calc_input.cost_per_employee)
        employees = _non_negative(calc_input.employee_count)

        rate = formulas.clicks_per_minute(calc_input.ept, level)
        max_clicks = formulas.max_clicks_per_day(rate)
        actual_tasks = formulas.actual_tasks_per_day(max_clicks, calc_input.clicks_per_task)
        productivity = formulas.productivity_percent(
            actual_tasks, calc_input.expected_tasks_per_day
        )

        expected_value = formulas.fully_loaded_cost(cost)
        produced = formulas.value_produced(productivity, expected_value)
        true_cost_delta = produced - expected_value
        total_role_value_delta = true_cost_delta * employees

        logger.debug(
            "Computed %s/%s at EPT %.1fs: %d clicks/day, %.2f%% productivity",
            calc_input.role,
            level.value,
            calc_input.ept,
            max_clicks,
            productivity,
        )

        return CalculationResult(
            role=calc_input.role,
            cost_per_employee=cost,
            employee_count=employees,
            experience_level=level,
            expected_tasks_per_day=calc_input.expected_tasks_per_day,
            ept=calc_input.ept,
            actual_tasks_per_day=actual_tasks,
            max_clicks_per_day=max_clicks,
            productivity_percent=productivity,
            expected_value=expected_value,
            value_produced=produced,
            true_cost_delta=true_cost_delta,
            total_role_value_delta=total_role_value_delta,
        )


_default_engine = ProductivityEngine()


def compute(calc_input: CalculationInput) -> CalculationResult:
    """Compute a result with the shared default engine."""
    return _default_engine.compute(calc_input)
