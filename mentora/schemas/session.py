from datetime import datetime
from typing import Optional

from mentora.models.session import SessionStatus

from .common import CamelModel, UserSummary


# ======================
# SESSION REQUEST MODELS
# ======================

class SessionCreate(CamelModel):
    mentor_id: int
    date: datetime  # ISO-8601, kept as wall-clock time
    mentee_id: Optional[int] = None  # required when an admin books
    notes: Optional[str] = None


class FeedbackSubmit(CamelModel):
    # Range checks happen in the service so they surface as invalid_input.
    mentee_rating: Optional[int] = None
    mentee_feedback: Optional[str] = None
    mentor_feedback: Optional[str] = None


# ======================
# SESSION RESPONSE MODELS
# ======================

class SessionResponse(CamelModel):
    id: int
    mentor: UserSummary
    mentee: UserSummary
    date: datetime
    status: SessionStatus
    notes: Optional[str] = ""
    mentee_rating: Optional[int] = None
    mentee_feedback: Optional[str] = ""
    mentor_feedback: Optional[str] = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
