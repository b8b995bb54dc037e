"""Pydantic model for raw calculation form values."""

from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from ept_productivity.engine.reference import DEFAULT_FORM, EPT_CHOICES, role_defaults
from ept_productivity.engine.result import CalculationInput
from ept_productivity.models.enums import ExperienceLevel

_INTEGER_LIKE = re.compile(r"^\d+$")


def _integer_like(value: Any) -> int | float:
    """Normalise a form value to a non-negative number.

    Strings must be plain digit runs; anything else (empty, signed, decimal,
    text) becomes 0. Numbers pass through, with negatives and non-finite
    values clamped to 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if not math.isfinite(value) or value < 0:
            return 0
        return value
    text = str(value).strip()
    if not _INTEGER_LIKE.match(text):
        return 0
    return int(text)


class CalculationForm(BaseModel):
    """The values of one calculation form, as typed by a user.

    Pass ``context={"strict_ept": True}`` to ``model_validate`` to restrict
    ``ept`` to the selectable 0.3-4.0 choices.
    """

    model_config = ConfigDict(frozen=True)

    role: str = str(DEFAULT_FORM["role"])
    cost_per_employee: float = 0
    employee_count: int = 0
    expected_tasks_per_day: float = 0
    clicks_per_task: float = 0
    experience_level: ExperienceLevel = ExperienceLevel.SEASONED
    ept: float = float(DEFAULT_FORM["ept"])

    @field_validator(
        "cost_per_employee",
        "expected_tasks_per_day",
        "clicks_per_task",
        mode="before",
    )
    @classmethod
    def normalise_integer_like(cls, v: Any) -> int | float:
        return _integer_like(v)

    @field_validator("employee_count", mode="before")
    @classmethod
    def whole_employees(cls, v: Any) -> int:
        return int(_integer_like(v))

    @field_validator("ept", mode="before")
    @classmethod
    def parse_ept(cls, v: Any, info: ValidationInfo) -> float:
        try:
            ept = float(v)
        except (TypeError, ValueError):
            ept = 0.0
        if not math.isfinite(ept):
            ept = 0.0

        if info.context and info.context.get("strict_ept"):
            snapped = round(ept, 1)
            if snapped not in EPT_CHOICES or not math.isclose(ept, snapped):
                raise ValueError(
                    f"ept must be one of {EPT_CHOICES[0]}-{EPT_CHOICES[-1]} "
                    f"in 0.1 steps, got {v!r}"
                )
            return snapped
        return ept

    @classmethod
    def default(cls) -> CalculationForm:
        """A form pre-filled with the standard starting values."""
        return cls.model_validate(dict(DEFAULT_FORM))

    def with_role_defaults(self, role: str) -> CalculationForm:
        """Switch role, taking that role's default quota and clicks per task."""
        defaults = role_defaults(role)
        update: dict[str, Any] = {"role": role}
        if defaults is not None:
            update["expected_tasks_per_day"] = defaults["tasks"]
            update["clicks_per_task"] = defaults["clicks"]
        return self.model_copy(update=update)

    def to_input(self) -> CalculationInput:
        return CalculationInput(
            role=self.role,
            cost_per_employee=self.cost_per_employee,
            employee_count=self.employee_count,
            expected_tasks_per_day=self.expected_tasks_per_day,
            clicks_per_task=self.clicks_per_task,
            experience_level=self.experience_level,
            ept=self.ept,
        )
