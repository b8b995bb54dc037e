"""Immutable input and result data structures."""

from __future__ import annotations

from dataclasses import dataclass

from ept_productivity.models.enums import ExperienceLevel


@dataclass(frozen=True)
class CalculationInput:
    """One role/cohort to evaluate at a given page latency."""

    role: str
    cost_per_employee: float
    employee_count: int
    expected_tasks_per_day: float
    clicks_per_task: float
    experience_level: ExperienceLevel
    ept: float


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a single calculation, including the echoed inputs."""

    role: str
    cost_per_employee: float
    employee_count: int
    experience_level: ExperienceLevel
    expected_tasks_per_day: float
    ept: float
    actual_tasks_per_day: int
    max_clicks_per_day: int
    productivity_percent: float
    expected_value: float
    value_produced: float
    true_cost_delta: float
    total_role_value_delta: float

    @property
    def meets_expectation(self) -> bool:
        """True when the cohort produces at least its fully-loaded cost."""
        return self.true_cost_delta >= 0
