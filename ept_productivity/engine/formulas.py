"""Formula steps for the EPT productivity model.

Each function is a pure calculation with no side effects. Monetary values
are in the same currency as the wage input (typically USD). Domain checks
live in the calculator; these functions assume positive divisors.
"""

from __future__ import annotations

import math

from ept_productivity.engine.reference import (
    EXPERTISE_MULTIPLIERS,
    FULLY_LOADED_COST_FACTOR,
    MINUTES_PER_WORKDAY,
    SECONDS_PER_MINUTE,
)
from ept_productivity.models.enums import ExperienceLevel


def theoretical_max_per_minute(ept: float) -> float:
    """Theoretical_Max = 60 / EPT"""
    return SECONDS_PER_MINUTE / ept


def clicks_per_minute(ept: float, experience_level: ExperienceLevel | str) -> float:
    """Clicks_Per_Minute = ln(1 / EPT) + Theoretical_Max * Expertise_Multiplier

    ln(1/EPT) is negative once EPT exceeds one second, so slow pages drag the
    rate down logarithmically. The result is not clamped and can go negative.
    """
    multiplier = EXPERTISE_MULTIPLIERS[ExperienceLevel(experience_level)]
    x = theoretical_max_per_minute(ept) * multiplier
    return math.log(1 / ept) + x


def max_clicks_per_day(rate_per_minute: float) -> int:
    """Max_Clicks = floor(Clicks_Per_Minute * 360)

    Truncates toward negative infinity for a conservative estimate.
    """
    return math.floor(rate_per_minute * MINUTES_PER_WORKDAY)


def actual_tasks_per_day(max_clicks: int, clicks_per_task: float) -> int:
    """Actual_Tasks = floor(Max_Clicks / Clicks_Per_Task)"""
    return math.floor(max_clicks / clicks_per_task)


def productivity_percent(actual_tasks: int, expected_tasks: float) -> float:
    """Productivity_% = Actual_Tasks / Expected_Tasks * 100 (not clamped)"""
    return (actual_tasks / expected_tasks) * 100


def fully_loaded_cost(cost_per_employee: float) -> float:
    """Expected_Value = Wage * 1.5"""
    return cost_per_employee * FULLY_LOADED_COST_FACTOR


def value_produced(productivity: float, expected_value: float) -> float:
    """Value_Produced = Productivity_% / 100 * Expected_Value"""
    return (productivity / 100) * expected_value
