from datetime import datetime
from typing import Optional

from mentora.models.request import RequestStatus

from .common import CamelModel, UserSummary


class RequestCreate(CamelModel):
    mentor_id: int
    message: Optional[str] = None


class RequestStatusUpdate(CamelModel):
    # Validated by the service so a bad value maps to invalid_input.
    status: Optional[str] = None


class MatchCreate(CamelModel):
    mentee_id: int
    mentor_id: int
    message: Optional[str] = None


class RequestResponse(CamelModel):
    id: int
    mentee: UserSummary
    mentor: UserSummary
    message: str
    status: RequestStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
