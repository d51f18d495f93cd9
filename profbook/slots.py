# profbook/slots.py
"""
Appointment slot generation.

A professor is bookable on weekdays, from 08:00 to 18:00 local time, in
30-minute steps. Already-booked times live in the professor's
``slots_booked`` map keyed by ``date_key()``.
"""

from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Dict, List, Mapping, Optional, Sequence

from .config import slot_settings

SATURDAY = 5
SUNDAY = 6


@dataclass(frozen=True)
class Slot:
    moment: datetime
    time: str


def date_key(moment: datetime, *, zero_indexed_month: bool = False) -> str:
    """Key of ``moment``'s day in a booked-slots map, e.g. ``3_6_2025``.

    Day and month are not zero-padded. With ``zero_indexed_month`` January
    is ``0``; that is how older clients wrote their bookings.
    """
    month = moment.month - 1 if zero_indexed_month else moment.month
    return f"{moment.day}_{month}_{moment.year}"


def format_slot_time(moment: datetime) -> str:
    # "09:00 AM", "05:30 PM"
    return moment.strftime("%I:%M %p")


def is_booked(slots_booked: Mapping[str, Sequence[str]], key: str, slot_time: str) -> bool:
    return slot_time in (slots_booked.get(key) or ())


def _day_start(now: datetime, day: datetime, offset: int, opens: time) -> datetime:
    start = datetime.combine(day.date(), opens, tzinfo=now.tzinfo)
    if offset == 0 and now > start:
        return now.replace(second=0, microsecond=0)
    return start


def generate_slots(
    now: datetime,
    slots_booked: Optional[Mapping[str, Sequence[str]]] = None,
    *,
    days: int = slot_settings["window_days"],
    day_start: time = slot_settings["day_start"],
    day_end: time = slot_settings["day_end"],
    slot_minutes: int = slot_settings["slot_minutes"],
) -> List[List[Slot]]:
    """
    Available slots for the ``days`` calendar days starting at ``now``.

    Returns one list per weekday in the window, in day order; weekend days
    produce no list at all. Today's list starts at the current minute when
    ``now`` is past ``day_start``. Day windows use ``now``'s tzinfo, so an
    aware ``now`` gives aware slots. A weekday list is empty when every step
    is booked or already gone.

    Pure: the same ``now`` and map always give the same result.
    """
    slots_booked = slots_booked or {}
    step = timedelta(minutes=slot_minutes)
    buckets: List[List[Slot]] = []

    for offset in range(days):
        day = now + timedelta(days=offset)
        if day.weekday() in (SATURDAY, SUNDAY):
            continue

        current = _day_start(now, day, offset, day_start)
        end = datetime.combine(day.date(), day_end, tzinfo=now.tzinfo)

        bucket: List[Slot] = []
        while current < end:
            slot_time = format_slot_time(current)
            if not is_booked(slots_booked, date_key(current), slot_time):
                bucket.append(Slot(moment=current, time=slot_time))
            current += step
        buckets.append(bucket)

    return buckets


def first_day_moment(buckets: Sequence[Sequence[Slot]], day_index: int) -> Optional[datetime]:
    """Moment of the first slot on the selected day, None if there is none."""
    if not 0 <= day_index < len(buckets) or not buckets[day_index]:
        return None
    return buckets[day_index][0].moment


def count_open(buckets: Sequence[Sequence[Slot]]) -> int:
    return sum(len(bucket) for bucket in buckets)


def to_payload(buckets: Sequence[Sequence[Slot]]) -> List[List[Dict[str, object]]]:
    return [[{"datetime": s.moment, "time": s.time} for s in bucket] for bucket in buckets]
