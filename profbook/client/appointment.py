# profbook/client/appointment.py

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from profbook.slots import Slot, generate_slots
from .booking import BookingSubmitter
from .state import ProfessorStore

logger = logging.getLogger(__name__)

WEEKDAY_LABELS = ["MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN"]


class AppointmentView:
    """Slot picker for one professor.

    Slots are recomputed from the cached professor record every time
    ``load()`` runs; nothing here is persisted.
    """

    def __init__(
        self,
        store: ProfessorStore,
        submitter: BookingSubmitter,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.submitter = submitter
        self.clock = clock
        self.prof_id: Optional[str] = None
        self.prof_info: Optional[Dict[str, Any]] = None
        self.slots: List[List[Slot]] = []
        self.slot_index = 0
        self.slot_time = ""

    def load(self, prof_id: str) -> Optional[Dict[str, Any]]:
        self.prof_id = prof_id
        self.prof_info = self.store.find(prof_id)
        self.slots = []
        if self.prof_info is not None:
            self.slots = generate_slots(self.clock(), self.prof_info.get("slots_booked") or {})
        else:
            logger.warning("Professor %s is not in the cached list", prof_id)
        return self.prof_info

    def day_labels(self) -> List[str]:
        return [
            f"{WEEKDAY_LABELS[day[0].moment.weekday()]} {day[0].moment.day}" if day else ""
            for day in self.slots
        ]

    def select_day(self, index: int):
        if not 0 <= index < len(self.slots):
            raise IndexError(f"No day at index {index}")
        self.slot_index = index
        self.slot_time = ""

    def select_time(self, slot_time: str):
        self.slot_time = slot_time

    def book(self) -> str:
        message = self.submitter.submit(self.prof_id, self.slots, self.slot_index, self.slot_time)
        # The store was refetched; recompute from the fresh record
        self.load(self.prof_id)
        return message
