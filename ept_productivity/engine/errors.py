from __future__ import annotations

from typing import Any


class InvalidInput(ValueError):
    """Raised when an input would put the formula outside its domain.

    Only three fields can trigger it: ``ept``, ``expected_tasks_per_day`` and
    ``clicks_per_task`` must all be strictly positive.
    """

    def __init__(self, field: str, value: Any, reason: str = "must be greater than 0"):
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason}, got {value!r}")
