# mentora/models/__init__.py
# Import models in dependency order
from .user import User, UserRole, DayOfWeek, AvailabilityBlock, WEEKDAYS
from .request import MentorshipRequest, RequestStatus
from .session import Session, SessionStatus  # Import Session LAST

__all__ = [
    "User",
    "UserRole",
    "DayOfWeek",
    "AvailabilityBlock",
    "WEEKDAYS",
    "MentorshipRequest",
    "RequestStatus",
    "Session",
    "SessionStatus",
]
