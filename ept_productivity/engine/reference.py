"""Fixed lookup tables and default form values.

Every table is read-only: mappings are wrapped in ``MappingProxyType`` and
sequences are tuples, so no caller can mutate the shared constants.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ept_productivity.models.enums import ExperienceLevel, Role

# Share of the theoretical click ceiling a cohort actually reaches.
EXPERTISE_MULTIPLIERS: Mapping[ExperienceLevel, float] = MappingProxyType({
    ExperienceLevel.BEGINNER: 0.15,
    ExperienceLevel.SEASONED: 0.20,
    ExperienceLevel.EXPERT: 0.25,
})

MINUTES_PER_WORKDAY = 360  # 6 working hours
SECONDS_PER_MINUTE = 60.0
FULLY_LOADED_COST_FACTOR = 1.5

# Default quota (tasks/day) and clicks per task offered when a role is picked.
ROLE_DEFAULTS: Mapping[Role, Mapping[str, int]] = MappingProxyType({
    Role.SERVICE_AGENT: MappingProxyType({"tasks": 90, "clicks": 23}),
    Role.SALES_DEVELOPMENT_REP: MappingProxyType({"tasks": 120, "clicks": 22}),
    Role.ACCOUNT_EXECUTIVE: MappingProxyType({"tasks": 22, "clicks": 200}),
})

EPT_MIN = 0.3
EPT_MAX = 4.0
EPT_STEP = 0.1

# 0.3, 0.4, ... 4.0 -- rounded so each entry equals its one-decimal literal.
EPT_CHOICES: tuple[float, ...] = tuple(
    round(EPT_MIN + i * EPT_STEP, 1)
    for i in range(int(round((EPT_MAX - EPT_MIN) / EPT_STEP)) + 1)
)

# Values a fresh calculation form starts with.
DEFAULT_FORM: Mapping[str, object] = MappingProxyType({
    "role": Role.SERVICE_AGENT.value,
    "cost_per_employee": "45000",
    "employee_count": "1000",
    "ept": 2.4,
    "expected_tasks_per_day": "80",
    "clicks_per_task": "30",
    "experience_level": ExperienceLevel.SEASONED.value,
})


def role_defaults(role: str) -> Mapping[str, int] | None:
    """Return the default tasks/clicks for a known role label, else None."""
    try:
        return ROLE_DEFAULTS[Role(role)]
    except ValueError:
        return None
