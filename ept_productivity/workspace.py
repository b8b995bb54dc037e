"""CalculationWorkspace: the ordered list of calculation forms a user works with."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from ept_productivity.engine.calculator import ProductivityEngine
from ept_productivity.engine.errors import InvalidInput
from ept_productivity.engine.result import CalculationInput, CalculationResult
from ept_productivity.models.form import CalculationForm

logger = logging.getLogger(__name__)


@dataclass
class CalculationSlot:
    """One form in the workspace and the last result it produced."""

    slot_id: str
    form: CalculationForm
    result: Optional[CalculationResult] = None


class CalculationWorkspace:
    """Keeps calculation slots in display order.

    Slots are addressed by a stable id rather than their position, so
    removing a slot from the middle leaves every other slot (and its
    result) untouched. The first slot is the primary one and cannot be
    removed.
    """

    def __init__(self, engine: ProductivityEngine | None = None) -> None:
        self._engine = engine or ProductivityEngine()
        self._slots: dict[str, CalculationSlot] = {}
        self.last_added_id: Optional[str] = None
        self.primary_id = self._new_slot(CalculationForm.default())

    def _new_slot(self, form: CalculationForm) -> str:
        slot_id = uuid4().hex
        self._slots[slot_id] = CalculationSlot(slot_id=slot_id, form=form)
        return slot_id

    def __len__(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> list[CalculationSlot]:
        return list(self._slots.values())

    def get(self, slot_id: str) -> CalculationSlot:
        slot = self._slots.get(slot_id)
        if slot is None:
            raise KeyError(f"Unknown calculation slot: {slot_id}")
        return slot

    def add_slot(self, form: CalculationForm | None = None) -> str:
        """Append a slot and remember it as the most recently added one."""
        slot_id = self._new_slot(form or CalculationForm.default())
        self.last_added_id = slot_id
        logger.info("Added calculation slot %s (%d total)", slot_id, len(self._slots))
        return slot_id

    def remove_slot(self, slot_id: str) -> None:
        if slot_id == self.primary_id:
            raise ValueError("The primary calculation slot cannot be removed")
        self.get(slot_id)
        del self._slots[slot_id]
        if self.last_added_id == slot_id:
            self.last_added_id = None
        logger.info("Removed calculation slot %s (%d left)", slot_id, len(self._slots))

    def update_form(self, slot_id: str, form: CalculationForm) -> None:
        self.get(slot_id).form = form

    def calculate(
        self,
        slot_id: str,
        calc_input: CalculationInput | None = None,
    ) -> CalculationResult:
        """Compute a new result for a slot, replacing any previous one.

        Without an explicit input the slot's own form is used. If the engine
        rejects the input, the slot keeps its earlier result and the
        InvalidInput propagates.
        """
        slot = self.get(slot_id)
        if calc_input is None:
            calc_input = slot.form.to_input()
        try:
            result = self._engine.compute(calc_input)
        except InvalidInput:
            logger.warning("Slot %s kept its previous result", slot_id)
            raise
        slot.result = result
        return result

    def results(self) -> list[CalculationResult]:
        """Results in slot order, skipping slots that were never calculated."""
        return [slot.result for slot in self._slots.values() if slot.result is not None]
