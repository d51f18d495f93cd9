# profbook/client/booking.py

import logging
from typing import Sequence

from profbook.config import ZERO_INDEXED_BOOKING_MONTH
from profbook.slots import Slot, date_key, first_day_moment
from .api import ApiClient
from .errors import ClientError, SlotSelectionError, Unauthenticated
from .notify import Navigator, Notifier
from .state import ProfessorStore, UserSession

logger = logging.getLogger(__name__)

BOOK_PATH = "/api/user/book-appointment"


class BookingSubmitter:
    """Books the selected slot for the logged-in user.

    On success the professor list is refetched (the booked-slots maps
    changed) and the user is sent to their appointments. On any failure the
    message is shown and nothing local changes.
    """

    def __init__(
        self,
        api: ApiClient,
        session: UserSession,
        store: ProfessorStore,
        notifier: Notifier,
        navigate: Navigator,
        zero_indexed_month: bool = ZERO_INDEXED_BOOKING_MONTH,
    ):
        self.api = api
        self.session = session
        self.store = store
        self.notifier = notifier
        self.navigate = navigate
        self.zero_indexed_month = zero_indexed_month

    def submit(
        self,
        prof_id: str,
        buckets: Sequence[Sequence[Slot]],
        day_index: int,
        slot_time: str,
    ) -> str:
        if not self.session.authenticated:
            self.notifier.warning("Login to book appointment")
            self.navigate("/login")
            raise Unauthenticated("Login to book appointment")

        moment = first_day_moment(buckets, day_index)
        if moment is None:
            self._fail(SlotSelectionError("No available slots on the selected day"))
        if not slot_time:
            self._fail(SlotSelectionError("Select a time slot"))

        slot_date = date_key(moment, zero_indexed_month=self.zero_indexed_month)
        payload = {"profId": prof_id, "slotDate": slot_date, "slotTime": slot_time}

        try:
            data = self.api.post(BOOK_PATH, payload, headers=self.session.headers)
        except ClientError as e:
            self._fail(e)

        logger.info("Booked %s %s with professor %s", slot_date, slot_time, prof_id)
        self.notifier.success(data["message"])
        self._refresh_store()
        self.navigate("/my-appointments")
        return data["message"]

    def _fail(self, error: ClientError):
        self.notifier.error(error.message)
        raise error

    def _refresh_store(self):
        # The booking already went through; a failed reload is only reported
        try:
            self.store.refresh()
        except ClientError as e:
            self.notifier.error(e.message)
