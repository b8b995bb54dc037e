"""Print-formatted text report of calculation results."""

from __future__ import annotations

from typing import Iterable

from ept_productivity.engine.result import CalculationResult
from ept_productivity.export.csv_export import to_cents

DISCLAIMER = (
    "The outputs calculated herein are not claims or guarantees, forecasts, "
    "or results. They derive from response-time research summarised as "
    "Doherty's Threshold."
)

_RULE = "=" * 60


def format_currency(value: float) -> str:
    """$1,234.56 style, with the sign ahead of the dollar sign."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(to_cents(value)):,.2f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def _outcome(result: CalculationResult) -> str:
    if result.meets_expectation:
        return "meets or exceeds fully-loaded cost"
    return "falls short of fully-loaded cost"


def render_result(result: CalculationResult, index: int | None = None) -> str:
    """Render one result the way the on-screen summary shows it."""
    heading = "Productivity Analysis"
    if index is not None:
        heading = f"Productivity Calculation {index}"
    lines = [
        f"{heading}: {result.role}",
        f"  {format_percent(result.productivity_percent)} of expected productivity",
        f"  Experience Level: {result.experience_level.value}",
        f"  EPT: {result.ept:.1f}s",
        f"  Tasks Per Day: {result.actual_tasks_per_day} / "
        f"{result.expected_tasks_per_day:g}",
        f"  Max Clicks/Day: {result.max_clicks_per_day}",
        f"  Average Wage: {format_currency(result.cost_per_employee)}",
        f"  Value Produced: {format_currency(result.value_produced)}",
        f"  True Labor Cost: {format_currency(result.true_cost_delta)}",
        f"  Net Combined Role Value: {format_currency(result.total_role_value_delta)}",
        f"  Outcome: {_outcome(result)}",
    ]
    return "\n".join(lines)


def render_report(
    results: Iterable[CalculationResult],
    title: str = "EPT Productivity Calculator",
) -> str:
    """Render every result as a numbered section followed by the disclaimer."""
    sections = [
        render_result(result, index=i)
        for i, result in enumerate(results, start=1)
    ]
    if not sections:
        sections = ["No calculations."]
    parts = [title, _RULE, "\n\n".join(sections), _RULE, DISCLAIMER]
    return "\n".join(parts) + "\n"
