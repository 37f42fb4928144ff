from collections import namedtuple
from datetime import date, datetime

import pytest

from mentora.models.user import DayOfWeek
from mentora.services.slot_resolver import BookableSlots, resolve_slots

Block = namedtuple("Block", "day start_time end_time")

# 2026-10-19 is a Monday.
MONDAY = date(2026, 10, 19)


def test_monday_block_yields_one_slot_per_monday():
    slots = list(resolve_slots([Block("Monday", "09:00", "10:00")], now=MONDAY, horizon_days=30))

    assert [s.date for s in slots] == [
        date(2026, 10, 19),
        date(2026, 10, 26),
        date(2026, 11, 2),
        date(2026, 11, 9),
        date(2026, 11, 16),
    ]
    assert all(s.day == DayOfWeek.MONDAY for s in slots)
    assert slots[0].starts_at == datetime(2026, 10, 19, 9, 0)
    assert slots[0].ends_at == datetime(2026, 10, 19, 10, 0)


def test_every_slot_date_matches_its_block_weekday():
    blocks = [
        Block("Wednesday", "14:00", "15:00"),
        Block("Saturday", "08:30", "09:00"),
        Block("Sunday", "20:00", "21:00"),
    ]
    slots = list(resolve_slots(blocks, now=date(2026, 10, 22), horizon_days=30))

    assert slots
    for slot in slots:
        assert slot.date.strftime("%A") == slot.day.value


def test_horizon_excludes_day_n():
    # Day 0 is Monday; day 7 (next Monday) is outside a 7-day horizon.
    slots = list(resolve_slots([Block("Monday", "09:00", "10:00")], now=MONDAY, horizon_days=7))
    assert [s.date for s in slots] == [MONDAY]


def test_ordering_by_date_then_start_time_with_stable_ties():
    blocks = [
        Block("Tuesday", "13:00", "14:00"),
        Block("Monday", "11:00", "12:00"),
        Block("Monday", "09:00", "10:00"),
        Block("Monday", "09:00", "09:30"),
    ]
    slots = list(resolve_slots(blocks, now=MONDAY, horizon_days=2))

    assert [(s.date, s.start_time, s.end_time) for s in slots] == [
        (MONDAY, "09:00", "10:00"),
        (MONDAY, "09:00", "09:30"),
        (MONDAY, "11:00", "12:00"),
        (date(2026, 10, 20), "13:00", "14:00"),
    ]


def test_resolution_is_restartable_and_idempotent():
    source = [Block("Friday", "10:00", "11:00")]
    slots = resolve_slots(source, now=MONDAY, horizon_days=30)

    first = list(slots)
    source.append(Block("Monday", "08:00", "09:00"))
    second = list(slots)

    assert first == second
    assert first == list(resolve_slots([Block("Friday", "10:00", "11:00")], now=MONDAY, horizon_days=30))


def test_empty_availability_yields_nothing():
    slots = resolve_slots([], now=MONDAY, horizon_days=30)
    assert list(slots) == []
    assert not slots


def test_datetime_now_uses_its_calendar_date():
    slots = list(resolve_slots([Block("Monday", "09:00", "10:00")], now=datetime(2026, 10, 19, 23, 59), horizon_days=1))
    assert [s.date for s in slots] == [MONDAY]


def test_default_horizon_is_thirty_days():
    slots = resolve_slots([Block("Monday", "09:00", "10:00")], now=MONDAY)
    assert slots.horizon_days == 30
    assert slots.end == date(2026, 11, 18)


def test_negative_horizon_rejected():
    with pytest.raises(ValueError):
        BookableSlots([], start=MONDAY, horizon_days=-1)
