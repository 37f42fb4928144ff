from datetime import date, datetime
from typing import List

from pydantic import Field

from mentora.models.user import DayOfWeek

from .common import CamelModel


class AvailabilityBlockSchema(CamelModel):
    day: DayOfWeek
    start_time: str = Field(..., max_length=5, description="HH:MM, 24-hour")
    end_time: str = Field(..., max_length=5, description="HH:MM, 24-hour")


class AvailabilityUpdate(CamelModel):
    availability: List[AvailabilityBlockSchema]


class AvailabilityResponse(CamelModel):
    availability: List[AvailabilityBlockSchema] = []


class SessionSlotResponse(CamelModel):
    day: DayOfWeek
    start_time: str
    end_time: str
    date: date
    starts_at: datetime
    ends_at: datetime
