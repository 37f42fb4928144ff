# mentora/services/slot_resolver.py
"""
Slot Resolver

Turns a mentor's weekly availability blocks into concrete, dated slots over
a bounded horizon starting today. Times are wall-clock "HH:MM" strings and
no timezone conversion is applied anywhere.
"""

from collections import defaultdict
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Union

from mentora.config import settings
from mentora.models.user import WEEKDAYS, DayOfWeek


class SessionSlot(NamedTuple):
    day: DayOfWeek
    start_time: str
    end_time: str
    date: date

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, _parse_hhmm(self.start_time))

    @property
    def ends_at(self) -> datetime:
        return datetime.combine(self.date, _parse_hhmm(self.end_time))


class _Block(NamedTuple):
    day: DayOfWeek
    start_time: str
    end_time: str


def _parse_hhmm(value: str) -> time:
    hours, minutes = value.split(":")
    return time(int(hours), int(minutes))


class BookableSlots:
    """
    Lazy, finite and restartable sequence of SessionSlot.

    Blocks are snapshotted on construction, so iterating twice yields the
    same slots even if the source rows change in between.
    """

    def __init__(
        self,
        blocks: Iterable,
        start: date,
        horizon_days: int,
    ):
        if horizon_days < 0:
            raise ValueError("horizon_days must not be negative")
        self.start = start
        self.horizon_days = horizon_days

        by_day: Dict[DayOfWeek, List[_Block]] = defaultdict(list)
        for block in blocks:
            day = DayOfWeek(block.day)
            by_day[day].append(_Block(day, block.start_time, block.end_time))
        # sorted() is stable: equal start times keep their stored order.
        self._by_day = {
            day: sorted(day_blocks, key=lambda b: b.start_time)
            for day, day_blocks in by_day.items()
        }

    def __iter__(self) -> Iterator[SessionSlot]:
        for offset in range(self.horizon_days):
            current = self.start + timedelta(days=offset)
            for block in self._by_day.get(WEEKDAYS[current.weekday()], ()):
                yield SessionSlot(
                    day=block.day,
                    start_time=block.start_time,
                    end_time=block.end_time,
                    date=current,
                )

    def __bool__(self) -> bool:
        return any(True for _ in self)

    @property
    def end(self) -> date:
        """First date outside the horizon."""
        return self.start + timedelta(days=self.horizon_days)


def resolve_slots(
    blocks: Iterable,
    now: Optional[Union[date, datetime]] = None,
    horizon_days: Optional[int] = None,
) -> BookableSlots:
    """
    Resolve weekly availability into bookable slots.

    Args:
        blocks: objects exposing ``day``, ``start_time`` and ``end_time``
            (ORM rows or schema objects)
        now: reference instant; defaults to the local wall-clock now
        horizon_days: number of calendar days to cover, day 0 being today

    Returns:
        BookableSlots ordered by date, then by start time within a date
    """
    if now is None:
        now = datetime.now()
    start = now.date() if isinstance(now, datetime) else now
    if horizon_days is None:
        horizon_days = settings.BOOKING_HORIZON_DAYS
    return BookableSlots(blocks, start=start, horizon_days=horizon_days)
