"""CSV export of calculation results."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Iterable

from ept_productivity.engine.result import CalculationResult

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")

CSV_HEADERS = (
    "Role",
    "Cost/Employee",
    "Employees",
    "Expected Tasks/Day",
    "Actual Tasks/Day",
    "Productivity %",
    "Value Produced",
    "Expected Value",
    "True Cost",
    "Total Role Value",
    "Experience Level",
)


def plain_number(value: float) -> str:
    """Render a number without a trailing '.0' when it is whole."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_cents(value: float) -> Decimal:
    """Round to cents with ties away from zero, working on the exact float value."""
    return Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def _money(value: float) -> str:
    return f"{to_cents(value):.2f}"


def result_row(result: CalculationResult) -> list[str]:
    return [
        result.role,
        plain_number(result.cost_per_employee),
        plain_number(result.employee_count),
        plain_number(result.expected_tasks_per_day),
        plain_number(result.actual_tasks_per_day),
        _money(result.productivity_percent),
        _money(result.value_produced),
        _money(result.expected_value),
        _money(result.true_cost_delta),
        _money(result.total_role_value_delta),
        result.experience_level.value,
    ]


def export_csv(results: Iterable[CalculationResult]) -> str:
    """Render results as CSV: a header line then one line per result.

    Fields are joined with bare commas and never quoted; role labels come
    from a fixed set that contains no commas.
    """
    lines = [",".join(CSV_HEADERS)]
    lines.extend(",".join(result_row(r)) for r in results)
    return "\n".join(lines)


def write_csv(results: Iterable[CalculationResult], path: Path) -> Path:
    """Write the CSV export to ``path`` and return it."""
    content = export_csv(results)
    path.write_text(content, encoding="utf-8")
    logger.info("Wrote %d result rows to %s", content.count("\n"), path)
    return path
