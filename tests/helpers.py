from ept_productivity.engine.result import CalculationInput
from ept_productivity.models.enums import ExperienceLevel


def make_input(**overrides) -> CalculationInput:
    """Build a CalculationInput from the standard form values plus overrides."""
    values = dict(
        role="Service Agent",
        cost_per_employee=45_000,
        employee_count=1_000,
        expected_tasks_per_day=80,
        clicks_per_task=30,
        experience_level=ExperienceLevel.SEASONED,
        ept=2.4,
    )
    values.update(overrides)
    return CalculationInput(**values)
