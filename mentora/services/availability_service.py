# mentora/services/availability_service.py
"""
Availability Service

Owns the mentor's weekly availability list and exposes it as bookable
slots. Blocks are validated here, when they are persisted, so slot
resolution never sees malformed data.
"""

import logging
import re
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from mentora.config import settings
from mentora.crud import availability as availability_crud
from mentora.crud import user as user_crud
from mentora.database import commit
from mentora.exceptions import InvalidInputError, NotFoundError
from mentora.models.user import AvailabilityBlock, DayOfWeek, User, UserRole
from mentora.services.authorization import ensure_role
from mentora.services.slot_resolver import BookableSlots, resolve_slots

logger = logging.getLogger(__name__)

TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def _field(block, name: str):
    if isinstance(block, dict):
        return block.get(name)
    return getattr(block, name, None)


def normalize_time(value) -> str:
    """'9:05' -> '09:05' so string comparison matches clock order."""
    match = TIME_RE.match(str(value or "").strip())
    if not match:
        raise InvalidInputError(f"Invalid time '{value}'. Use HH:MM (24-hour).")
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def validate_blocks(blocks: Iterable) -> List[Tuple[DayOfWeek, str, str]]:
    """
    Validate and normalise availability blocks.

    Args:
        blocks: iterable of objects or dicts with day, start_time, end_time

    Returns:
        List of (day, start_time, end_time) tuples in input order

    Raises:
        InvalidInputError: on an unknown day, a malformed time or
            start_time >= end_time
    """
    if blocks is None:
        raise InvalidInputError("Availability data is required.")

    validated = []
    for index, block in enumerate(blocks):
        raw_day = _field(block, "day")
        try:
            day = DayOfWeek(raw_day)
        except ValueError:
            raise InvalidInputError(f"Block {index}: invalid day '{raw_day}'.")

        start_time = normalize_time(_field(block, "start_time"))
        end_time = normalize_time(_field(block, "end_time"))
        if start_time >= end_time:
            raise InvalidInputError(
                f"Block {index}: start time {start_time} must be before end time {end_time}."
            )
        validated.append((day, start_time, end_time))
    return validated


def get_availability(db: Session, mentor: User) -> List[AvailabilityBlock]:
    ensure_role(mentor, UserRole.MENTOR, action="view their availability")
    return availability_crud.get_blocks(db, mentor.id)


def replace_availability(db: Session, mentor: User, blocks: Iterable) -> List[AvailabilityBlock]:
    """Replace the mentor's entire list in one transaction."""
    ensure_role(mentor, UserRole.MENTOR, action="set availability")
    validated = validate_blocks(blocks)

    availability_crud.replace_blocks(db, mentor.id, validated)
    commit(db, action="replacing availability")
    db.expire(mentor, ["availability"])

    logger.info("Availability replaced (mentor_id=%s, blocks=%s)", mentor.id, len(validated))
    return availability_crud.get_blocks(db, mentor.id)


def get_mentor_slots(
    db: Session,
    mentor_id: int,
    *,
    now: Optional[Union[date, datetime]] = None,
    horizon_days: Optional[int] = None,
) -> BookableSlots:
    """Resolve a mentor's availability into dated slots from today onwards."""
    if horizon_days is None:
        horizon_days = settings.BOOKING_HORIZON_DAYS
    if not 1 <= horizon_days <= settings.MAX_BOOKING_HORIZON_DAYS:
        raise InvalidInputError(
            f"days must be between 1 and {settings.MAX_BOOKING_HORIZON_DAYS}."
        )

    mentor = user_crud.get_user_with_role(db, mentor_id, UserRole.MENTOR)
    if not mentor:
        raise NotFoundError("Mentor not found or is not a mentor.")

    blocks = availability_crud.get_blocks(db, mentor.id)
    return resolve_slots(blocks, now=now, horizon_days=horizon_days)
